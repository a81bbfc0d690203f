"""Shared data models for commitect.

Contains:
- IntentCategory: Closed set of intents produced by the heuristic classifier
- ChangeSummary: Optional file-level statistics supplied alongside a diff
- CommitSuggestion: The {intent, message} pair returned to callers
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_MESSAGE_LENGTH = 70
ELLIPSIS = "..."


class IntentCategory(str, Enum):
    """Intent categories the heuristic classifier can produce."""

    BUG_FIX = "BugFix"
    FEATURE = "Feature"
    REFACTOR = "Refactor"
    TEST = "Test"
    DOCUMENTATION = "Documentation"
    STYLE = "Style"
    CHORE = "Chore"
    UPDATE = "Update"


class ChangeSummary(BaseModel):
    """File-level change statistics computed by the diff collaborator."""

    model_config = ConfigDict(frozen=True)

    total_files: Optional[int] = Field(default=None, ge=0)
    renamed_files: Optional[int] = Field(default=None, ge=0)


def truncate_message(message: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Truncate a message to the length limit, ending with an ellipsis.

    Args:
        message: The message text.
        limit: Maximum allowed length including the ellipsis.

    Returns:
        The message unchanged if it fits, otherwise cut and suffixed with "...".
    """
    if len(message) <= limit:
        return message
    return message[: limit - len(ELLIPSIS)] + ELLIPSIS


class CommitSuggestion(BaseModel):
    """A categorized commit summary."""

    model_config = ConfigDict(frozen=True)

    intent: str = Field(min_length=1)
    message: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)

    @field_validator("intent", "message", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, IntentCategory):
            return v.value
        if isinstance(v, str):
            return v.strip()
        return v

    def render(self) -> str:
        """Render the suggestion as a single commit subject line."""
        return f"{self.intent}: {self.message}"
