"""Tests for commitect.git package."""

import subprocess
from unittest.mock import MagicMock

import pytest

from commitect.git import (
    GitDiffSource,
    GitError,
    NoChangesError,
    execute_commit,
    filter_ignored_paths,
    get_change_summary,
    get_working_diff,
    has_changes,
    is_git_repository,
    parse_name_status,
)
from commitect.git.runner import _run_git_command
from commitect.models import ChangeSummary


def completed(stdout: str) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    result.returncode = 0
    return result


def section(path: str, added: str = "x") -> str:
    return "\n".join([
        f"diff --git a/{path} b/{path}",
        "index 1111111..2222222 100644",
        f"--- a/{path}",
        f"+++ b/{path}",
        "@@ -1 +1 @@",
        f"+{added}",
    ])


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_returns_raw_stdout(self, mocker):
        """Test that output is returned without stripping."""
        mocker.patch("subprocess.run", return_value=completed(" M file.py\n"))

        assert _run_git_command(["status", "--porcelain"]) == " M file.py\n"

    def test_failed_command_raises_error(self, mocker):
        """Test that a failing git command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="fatal: bad revision"),
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["diff", "HEAD"])

        assert "Git command failed" in str(exc_info.value)
        assert "bad revision" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)

    def test_passes_cwd(self, mocker, temp_dir):
        """Test that the working directory is forwarded to subprocess."""
        mock_run = mocker.patch("subprocess.run", return_value=completed(""))

        _run_git_command(["status"], cwd=temp_dir)

        assert mock_run.call_args.kwargs["cwd"] == temp_dir
        assert mock_run.call_args.args[0] == ["git", "status"]


class TestRepository:
    """Tests for repository detection helpers."""

    def test_is_git_repository_true(self, mocker):
        mocker.patch("subprocess.run", return_value=completed(".git\n"))
        assert is_git_repository() is True

    def test_is_git_repository_false(self, mocker):
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repository"),
        )
        assert is_git_repository() is False


class TestFilterIgnoredPaths:
    """Tests for filter_ignored_paths function."""

    def test_drops_ignored_sections(self):
        """Test that build output and vendored files are removed."""
        diff = "\n".join([
            section("src/app.py", "print('hi')"),
            section("node_modules/lib/index.js"),
            section("dist/bundle.js"),
            section("README.md", "docs"),
        ])

        result = filter_ignored_paths(diff)

        assert "src/app.py" in result
        assert "README.md" in result
        assert "node_modules" not in result
        assert "dist/bundle.js" not in result

    def test_nested_directory_with_same_name_kept(self):
        """Test that only top-level prefixes are ignored."""
        diff = section("src/build/helper.py")

        assert filter_ignored_paths(diff) == diff

    def test_custom_prefixes(self):
        diff = "\n".join([section("vendor/x.go"), section("main.go")])

        result = filter_ignored_paths(diff, prefixes=["vendor/"])

        assert "vendor/x.go" not in result
        assert "main.go" in result

    def test_everything_ignored_leaves_empty_text(self):
        diff = section("bin/Debug/app.dll")

        assert filter_ignored_paths(diff).strip() == ""


class TestParseNameStatus:
    """Tests for parse_name_status function."""

    def test_counts_files_and_renames(self):
        output = "M\tsrc/a.py\nA\tsrc/b.py\nR100\told/c.py\tnew/c.py\nD\tsrc/d.py\n"

        summary = parse_name_status(output)

        assert summary == ChangeSummary(total_files=4, renamed_files=1)

    def test_skips_ignored_paths(self):
        output = "M\tsrc/a.py\nM\tnode_modules/x.js\nA\tobj/out.o\n"

        summary = parse_name_status(output)

        assert summary.total_files == 1
        assert summary.renamed_files == 0

    def test_empty_output(self):
        assert parse_name_status("") == ChangeSummary(total_files=0, renamed_files=0)


class TestWorkingTree:
    """Tests for working tree queries."""

    def test_has_changes_true(self, mocker):
        mocker.patch("subprocess.run", return_value=completed(" M src/app.py\n"))
        assert has_changes() is True

    def test_has_changes_false_when_clean(self, mocker):
        mocker.patch("subprocess.run", return_value=completed(""))
        assert has_changes() is False

    def test_has_changes_false_on_git_error(self, mocker):
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())
        assert has_changes() is False

    def test_get_working_diff_uses_head(self, mocker):
        """Test that staged and unstaged changes are diffed against HEAD."""
        diff = section("src/app.py")
        mock_run = mocker.patch("subprocess.run", return_value=completed(diff))

        assert get_working_diff() == diff
        assert mock_run.call_args.args[0] == ["git", "diff", "HEAD"]

    def test_get_working_diff_empty_raises(self, mocker):
        mocker.patch("subprocess.run", return_value=completed(""))

        with pytest.raises(NoChangesError):
            get_working_diff()

    def test_get_working_diff_only_ignored_raises(self, mocker):
        mocker.patch("subprocess.run", return_value=completed(section("node_modules/a.js")))

        with pytest.raises(NoChangesError):
            get_working_diff()

    def test_get_change_summary(self, mocker):
        mocker.patch("subprocess.run", return_value=completed("M\ta.py\nR090\tb.py\tc.py\n"))

        assert get_change_summary() == ChangeSummary(total_files=2, renamed_files=1)

    def test_get_change_summary_none_on_error(self, mocker):
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="bad HEAD"),
        )

        assert get_change_summary() is None


class TestExecuteCommit:
    """Tests for execute_commit function."""

    def test_commits_with_message(self, mocker):
        mock_run = mocker.patch(
            "subprocess.run", return_value=completed("[main abc123] Feature: add x\n")
        )

        output = execute_commit("Feature: add x")

        assert output == "[main abc123] Feature: add x"
        assert mock_run.call_args.args[0] == ["git", "commit", "-m", "Feature: add x"]

    def test_failure_raises(self, mocker):
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="nothing to commit"),
        )

        with pytest.raises(GitError):
            execute_commit("Chore: nothing")


class TestGitDiffSource:
    """Tests for GitDiffSource class."""

    def test_delegates_to_git_helpers(self, mocker, temp_dir):
        mock_diff = mocker.patch("commitect.git.source.get_working_diff", return_value="diff")
        mock_summary = mocker.patch(
            "commitect.git.source.get_change_summary",
            return_value=ChangeSummary(total_files=1),
        )

        source = GitDiffSource(cwd=temp_dir)

        assert source.get_diff_text() == "diff"
        assert source.get_change_summary() == ChangeSummary(total_files=1)
        mock_diff.assert_called_once_with(temp_dir)
        mock_summary.assert_called_once_with(temp_dir)
