"""
Recent picks — bounded no-repeat queue of the last final picks.

Most-recent-last, no duplicates: pushing a title already in the queue moves it
to the end. Owned by one session and never persisted.
"""

from typing import Iterable, Iterator, List


class RecentPicksQueue:
    """Last `limit` distinct titles chosen as final picks."""

    def __init__(self, limit: int = 3, items: Iterable[str] = ()):
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        self._limit = limit
        self._items: List[str] = []
        for title in items:
            self.push(title)

    @property
    def limit(self) -> int:
        return self._limit

    def push(self, title: str) -> None:
        """Move title to the end (adding it if new), then drop the oldest past the limit."""
        if title in self._items:
            self._items.remove(title)
        self._items.append(title)
        if len(self._items) > self._limit:
            del self._items[: len(self._items) - self._limit]

    def exclude_from(self, pool: Iterable[str]) -> List[str]:
        """Pool without recent titles; the full pool if that leaves nothing."""
        full = list(pool)
        filtered = [t for t in full if t not in self._items]
        return filtered or full

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, title: object) -> bool:
        return title in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RecentPicksQueue(limit={self._limit}, items={self._items!r})"
