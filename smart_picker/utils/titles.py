"""
Title helpers — option titles are case-sensitive keys trimmed of surrounding whitespace.
"""

from typing import Iterable, List


def normalize_title(title: str) -> str:
    """Strip surrounding whitespace. Empty titles are rejected."""
    key = title.strip()
    if not key:
        raise ValueError("Option title cannot be empty")
    return key


def normalize_titles(titles: Iterable[str]) -> List[str]:
    """Normalize every title, keeping order and duplicates."""
    return [normalize_title(t) for t in titles]
