"""Shared utilities for scoring, labels, and option titles."""

from .scores import adventure_label, beta_mean, clamp_adventure
from .titles import normalize_title, normalize_titles

__all__ = [
    "adventure_label",
    "beta_mean",
    "clamp_adventure",
    "normalize_title",
    "normalize_titles",
]
