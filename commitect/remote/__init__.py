"""Remote classifier module for commitect.

- client: RemoteClassifier, the async HTTP client with retry/backoff
- parsing: Response payload parsing
- results: Tagged RemoteSuccess / RemoteFailure outcomes
"""

from commitect.remote.client import RemoteClassifier, classify_status
from commitect.remote.parsing import (
    ResponseFormatError,
    parse_intent_payload,
    parse_response_body,
)
from commitect.remote.results import (
    FailureKind,
    RemoteFailure,
    RemoteOutcome,
    RemoteSuccess,
)


__all__ = [
    "RemoteClassifier",
    "classify_status",
    "ResponseFormatError",
    "parse_intent_payload",
    "parse_response_body",
    "FailureKind",
    "RemoteFailure",
    "RemoteOutcome",
    "RemoteSuccess",
]
