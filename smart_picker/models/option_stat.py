"""
OptionStat model — accept/skip history for one option title.

Read by the session's score lookup; written only through the preference store.
Built from store rows via OptionStat.model_validate(d) or OptionStat.new(title).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.scores import beta_mean
from ..utils.titles import normalize_title


class OptionStat(BaseModel):
    """
    Preference record for a single option.

    title: unique, case-sensitive key (trimmed).
    success_count: times the option was accepted.
    failure_count: times the option was skipped.
    last_used_at: last final pick or acceptance; None until first used.
    """

    title: str
    success_count: int = Field(default=0, ge=0)
    failure_count: int = Field(default=0, ge=0)
    last_used_at: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: str) -> str:
        return normalize_title(v)

    @classmethod
    def new(cls, title: str) -> "OptionStat":
        """Fresh record with no history."""
        return cls(title=title)

    @property
    def score(self) -> float:
        """Beta mean of the accept/skip counts."""
        return beta_mean(self.success_count, self.failure_count)

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count
