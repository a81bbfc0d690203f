"""Cache data models for commitect.

Contains:
- CacheEntry: One persisted classification keyed by diff digest
- CacheStats: Size and age summary of the live cache
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commitect.models import CommitSuggestion, truncate_message


class CacheEntry(BaseModel):
    """A cached classification result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    digest: str = Field(min_length=1)
    intent: str = Field(min_length=1)
    message: str = Field(min_length=1)
    timestamp: int  # epoch milliseconds
    origin_folder: str = Field(default="", alias="originFolder")

    @field_validator("intent", "message", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.timestamp

    def to_suggestion(self) -> CommitSuggestion:
        return CommitSuggestion(intent=self.intent, message=truncate_message(self.message))


@dataclass(frozen=True)
class CacheStats:
    """Summary of live cache contents."""

    size: int
    oldest_timestamp: Optional[int]
