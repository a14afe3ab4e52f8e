"""
Decision log model — one entry per accepted option, with light time context.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from ..utils.titles import normalize_title


class DecisionLog(BaseModel):
    """
    An accepted decision.

    hour_of_day: 0-23 in the timezone of decided_at.
    weekday: 1 = Sunday ... 7 = Saturday.
    """

    title: str
    decided_at: datetime
    hour_of_day: int = Field(ge=0, le=23)
    weekday: int = Field(ge=1, le=7)

    @classmethod
    def for_title(cls, title: str, decided_at: Optional[datetime] = None) -> "DecisionLog":
        """Build a log entry, deriving hour and weekday from the timestamp."""
        ts = decided_at or datetime.now(timezone.utc)
        return cls(
            title=normalize_title(title),
            decided_at=ts,
            hour_of_day=ts.hour,
            # isoweekday: Monday=1 ... Sunday=7
            weekday=ts.isoweekday() % 7 + 1,
        )
