"""Tagged outcomes of a remote classification call.

A call ends in exactly one of:
- RemoteSuccess: a parsed CommitSuggestion
- RemoteFailure: a classified failure; ``retryable`` is True when the failure
  kind could be retried but the attempt budget ran out
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from commitect.models import CommitSuggestion


class FailureKind(Enum):
    """Why a remote classification failed."""

    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    CLIENT_ERROR = "client_error"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class RemoteSuccess:
    """The remote service returned a usable suggestion."""

    suggestion: CommitSuggestion
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RemoteFailure:
    """The remote service could not produce a suggestion."""

    kind: FailureKind
    detail: str
    attempts: int = 1
    retryable: bool = False

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        """One-line description for diagnostics."""
        budget = " after retries" if self.retryable else ""
        return f"{self.kind.value}{budget} ({self.attempts} attempt(s)): {self.detail}"


RemoteOutcome = Union[RemoteSuccess, RemoteFailure]
