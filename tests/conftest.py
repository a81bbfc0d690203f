"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commitect.cache import ResultCache

DAY_MS = 24 * 60 * 60 * 1000
START_MS = 1_700_000_000_000


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, now_ms: int = START_MS):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance_days(self, days: float) -> None:
        self.now_ms += int(days * DAY_MS)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """Point the per-user config directory at a temp dir and clear env overrides."""
    config_dir = temp_dir / ".commitect"
    monkeypatch.setattr("commitect.global_config._CONFIG_DIR", config_dir)
    for name in (
        "COMMITECT_API_ENDPOINT",
        "COMMITECT_TIMEOUT",
        "COMMITECT_MAX_ATTEMPTS",
        "COMMITECT_CACHE_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_dir


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_file(temp_dir):
    return temp_dir / "cache" / "cache.json"


@pytest.fixture
def cache(cache_file, clock):
    """A ResultCache backed by a temp file and a fake clock."""
    return ResultCache(cache_file, clock=clock)


@pytest.fixture
def feature_diff():
    """Diff that only adds an exported function."""
    return """diff --git a/src/math.ts b/src/math.ts
index 1234567..89abcde 100644
--- a/src/math.ts
+++ b/src/math.ts
@@ -1,3 +1,7 @@
 export function add(a: number, b: number): number {
   return a + b;
 }
+
+export function subtract(a: number, b: number): number {
+  return a - b;
+}
"""


@pytest.fixture
def bugfix_diff():
    """Diff whose only vocabulary signal is bug related."""
    return """diff --git a/src/parser.py b/src/parser.py
index 1111111..2222222 100644
--- a/src/parser.py
+++ b/src/parser.py
@@ -10,2 +10,3 @@ def parse(value):
-    return int(value)
+    # fix crash on empty input
+    return int(value) if value else 0
"""


@pytest.fixture
def whitespace_diff():
    """Diff where every changed line is blank or punctuation only."""
    return "\n".join([
        "diff --git a/src/app.js b/src/app.js",
        "index 3333333..4444444 100644",
        "--- a/src/app.js",
        "+++ b/src/app.js",
        "@@ -1,5 +1,6 @@",
        " function main() {",
        "-    ",
        "+",
        "+",
        "   run();",
        "-  }",
        "+}",
        "",
    ])
