"""
Score helpers — Beta mean, adventurousness clamping, and display labels.
"""

import logging
import math
from typing import List, Tuple

logger = logging.getLogger(__name__)

# Upper bounds (exclusive) for each display band; anything above the last is "Surprise Me".
ADVENTURE_BANDS: List[Tuple[float, str]] = [
    (0.05, "No Adventure"),
    (0.25, "Low"),
    (0.50, "Balanced-"),
    (0.75, "Balanced+"),
    (0.95, "High"),
]
TOP_ADVENTURE_LABEL = "Surprise Me"


def beta_mean(success: int, failure: int) -> float:
    """
    Laplace-smoothed acceptance rate: mean of Beta(success + 1, failure + 1).

    An option with no history scores exactly 0.5; the result is always in (0, 1).
    """
    if success < 0 or failure < 0:
        raise ValueError(f"Counts must be non-negative, got success={success} failure={failure}")
    return (success + 1) / (success + failure + 2)


def clamp_adventure(adventure: float) -> float:
    """Clamp adventurousness to [0, 1]. NaN is rejected."""
    value = float(adventure)
    if math.isnan(value):
        raise ValueError("Adventurousness must be a number, got NaN")
    clamped = min(1.0, max(0.0, value))
    if clamped != value:
        logger.debug("[adventure_clamp] %s -> %s", value, clamped)
    return clamped


def adventure_label(adventure: float) -> str:
    """Display label for an adventurousness value. Boundaries belong to the upper band."""
    for upper, label in ADVENTURE_BANDS:
        if adventure < upper:
            return label
    return TOP_ADVENTURE_LABEL
