"""Parsing of remote classifier responses.

The service answers with JSON whose ``intent`` field holds a small labelled
payload::

    Intent: Feature
    Message: Add subtraction support function

Contains:
- ResponseFormatError: Raised when the payload is not in that shape
- parse_intent_payload: Parse the labelled payload into a CommitSuggestion
- parse_response_body: Extract and parse the payload from a JSON body
"""

import json
from typing import Any

from commitect.models import CommitSuggestion, truncate_message

INTENT_LABEL = "Intent:"
MESSAGE_LABEL = "Message:"


class ResponseFormatError(ValueError):
    """Raised when a remote response does not have the expected shape."""

    pass


def parse_intent_payload(payload: str) -> CommitSuggestion:
    """Parse the ``Intent:``/``Message:`` payload.

    Labels may appear in any order; other lines are ignored. Messages longer
    than the limit are truncated with an ellipsis.

    Args:
        payload: Text of the ``intent`` response field.

    Returns:
        The parsed CommitSuggestion.

    Raises:
        ResponseFormatError: If either label is missing or empty.
    """
    intent = ""
    message = ""

    for raw_line in payload.strip().splitlines():
        line = raw_line.strip()
        if line.startswith(INTENT_LABEL):
            intent = line[len(INTENT_LABEL):].strip()
        elif line.startswith(MESSAGE_LABEL):
            message = line[len(MESSAGE_LABEL):].strip()

    if not intent or not message:
        raise ResponseFormatError(f"Missing Intent/Message labels in response: {payload!r}")

    return CommitSuggestion(intent=intent, message=truncate_message(message))


def parse_response_body(body: str) -> CommitSuggestion:
    """Parse a raw HTTP response body.

    Args:
        body: The response text.

    Returns:
        The parsed CommitSuggestion.

    Raises:
        ResponseFormatError: If the body is empty, not JSON, or lacks a
            string ``intent`` field with a valid payload.
    """
    if not body or not body.strip():
        raise ResponseFormatError("Empty response body")

    try:
        data: Any = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Response is not valid JSON: {e}")

    payload = data.get("intent") if isinstance(data, dict) else None
    if not isinstance(payload, str) or not payload.strip():
        raise ResponseFormatError("Response has no 'intent' field")

    return parse_intent_payload(payload)
