"""
Preference Store abstraction.

Holds per-option accept/skip counts and last-used timestamps, plus the log of
accepted decisions. The session reads counts and writes outcomes; it does not
own storage. Implementations: in-memory (tests, embedding apps that persist
elsewhere). Swap by passing a different store to SelectionSession.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol

from smart_picker.models.decision import DecisionLog
from smart_picker.models.option_stat import OptionStat
from smart_picker.utils.titles import normalize_title


class PreferenceStore(Protocol):
    """Protocol for preference read/write. Implement for memory, a database, or a file."""

    def get_stat(self, title: str) -> Optional[OptionStat]:
        """Return the record for title, or None if the option was never seen."""
        ...

    def upsert_stat(
        self,
        title: str,
        success_count: int,
        failure_count: int,
        last_used_at: Optional[datetime],
    ) -> OptionStat:
        """Create or replace the record for title. Returns the stored record."""
        ...

    def record_decision(self, entry: DecisionLog) -> None:
        """Append one accepted decision to the log."""
        ...

    def list_decisions(self, limit: Optional[int] = None) -> List[DecisionLog]:
        """Accepted decisions, newest first."""
        ...


class InMemoryPreferenceStore:
    """
    Preference store kept in process memory (no persistence).
    Used for tests and by callers that persist records themselves.
    """

    def __init__(self, stats: Optional[List[OptionStat]] = None):
        self._stats: Dict[str, OptionStat] = {}
        self._decisions: List[DecisionLog] = []
        for s in stats or []:
            self._stats[s.title] = s.model_copy()

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, title: str) -> bool:
        return title.strip() in self._stats

    def get_stat(self, title: str) -> Optional[OptionStat]:
        stat = self._stats.get(normalize_title(title))
        return stat.model_copy() if stat is not None else None

    def upsert_stat(
        self,
        title: str,
        success_count: int,
        failure_count: int,
        last_used_at: Optional[datetime],
    ) -> OptionStat:
        stat = OptionStat(
            title=title,
            success_count=success_count,
            failure_count=failure_count,
            last_used_at=last_used_at,
        )
        self._stats[stat.title] = stat
        return stat.model_copy()

    def record_decision(self, entry: DecisionLog) -> None:
        self._decisions.append(entry.model_copy())

    def list_decisions(self, limit: Optional[int] = None) -> List[DecisionLog]:
        ordered = sorted(reversed(self._decisions), key=lambda d: d.decided_at, reverse=True)
        if limit is not None:
            ordered = ordered[:limit]
        return [d.model_copy() for d in ordered]

    def all_stats(self) -> List[OptionStat]:
        """Every record, sorted by title."""
        return [self._stats[t].model_copy() for t in sorted(self._stats)]


def ensure_stat(store: PreferenceStore, title: str) -> OptionStat:
    """Return the record for title, creating a fresh 0/0 row if missing."""
    existing = store.get_stat(title)
    if existing is not None:
        return existing
    fresh = OptionStat.new(title)
    return store.upsert_stat(fresh.title, 0, 0, None)
