"""
Pick request — transient input to a single pick.
"""

from typing import List

from pydantic import BaseModel, field_validator

from ..utils.scores import clamp_adventure
from .config import DEFAULT_CONFIG


class PickRequest(BaseModel):
    """A pool of candidate titles and the adventurousness to pick with."""

    pool: List[str]
    adventure: float = DEFAULT_CONFIG.default_adventure

    @field_validator("adventure")
    @classmethod
    def _clamp(cls, v: float) -> float:
        return clamp_adventure(v)
