"""
Selection session — one decision flow around the smart picker.

Builds the candidate pool (minus recent picks), picks with Beta-mean scores
from the preference store, and applies accept/skip outcomes back to the store.
Not thread-safe: drive each session from a single control flow.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np

from smart_picker.models.config import PickerConfig, resolve_config
from smart_picker.models.decision import DecisionLog
from smart_picker.models.option_stat import OptionStat
from smart_picker.stages.distribution import RandomSource
from smart_picker.stages.picker import pick
from smart_picker.utils.scores import adventure_label, clamp_adventure
from smart_picker.utils.titles import normalize_title, normalize_titles

from .config import SessionSettings, get_settings
from .recent_picks import RecentPicksQueue
from .services.preference_store import PreferenceStore, ensure_stat

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SelectionSession:
    """Stateful coordinator for picking, accepting, and skipping options."""

    def __init__(
        self,
        store: PreferenceStore,
        adventure: Optional[float] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[PickerConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self._store = store
        self._config = resolve_config(config)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._clock = clock or _utcnow
        self._recent = RecentPicksQueue(self._config.recent_limit)
        self._adventure = clamp_adventure(
            self._config.default_adventure if adventure is None else adventure
        )
        self._last_pool: List[str] = []
        self.pending: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        store: PreferenceStore,
        settings: Optional[SessionSettings] = None,
    ) -> "SelectionSession":
        """Session configured from SessionSettings (environment by default)."""
        settings = settings or get_settings()
        return cls(
            store,
            rng=np.random.default_rng(settings.seed),
            config=settings.picker_config(),
        )

    # -------------------------------------------------------------------------
    # Knobs and state
    # -------------------------------------------------------------------------

    @property
    def adventure(self) -> float:
        return self._adventure

    @adventure.setter
    def adventure(self, value: float) -> None:
        self._adventure = clamp_adventure(value)

    @property
    def adventure_label(self) -> str:
        return adventure_label(self._adventure)

    @property
    def recent(self) -> List[str]:
        return self._recent.to_list()

    @property
    def config(self) -> PickerConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Scores
    # -------------------------------------------------------------------------

    def register_options(self, titles: Iterable[str]) -> List[str]:
        """Normalize titles and create 0/0 records for any the store has not seen."""
        normalized = normalize_titles(titles)
        for title in dict.fromkeys(normalized):
            ensure_stat(self._store, title)
        return normalized

    def score(self, title: str) -> float:
        """Beta-mean score for title; neutral for unknown titles. Never writes."""
        stat = self._store.get_stat(title)
        if stat is None:
            return self._config.neutral_score
        return stat.score

    def scores(self, pool: Iterable[str]) -> Dict[str, float]:
        """Score snapshot for every distinct title in pool."""
        return {title: self.score(title) for title in pool}

    def candidates(self, full_pool: Sequence[str]) -> List[str]:
        """full_pool minus recent picks, or full_pool if nothing would remain."""
        return self._recent.exclude_from(full_pool)

    # -------------------------------------------------------------------------
    # Decision flow
    # -------------------------------------------------------------------------

    def push_recent(self, title: str) -> None:
        self._recent.push(normalize_title(title))

    def pick_one(self, full_pool: Sequence[str]) -> Optional[str]:
        """
        Pick one option from full_pool, avoiding recent picks when possible.

        The result becomes pending, joins the recent queue, and has its
        last_used_at stamped. Returns None (and changes nothing) for an empty pool.
        """
        if not full_pool:
            return None
        pool = normalize_titles(full_pool)
        self._last_pool = pool
        candidates = self.candidates(pool)
        snapshot = self.scores(candidates)
        chosen = pick(
            candidates,
            snapshot.__getitem__,
            self._adventure,
            rng=self._rng,
            config=self._config,
        )
        if chosen is None:
            return None

        self.push_recent(chosen)
        stat = ensure_stat(self._store, chosen)
        self._store.upsert_stat(
            chosen, stat.success_count, stat.failure_count, self._clock()
        )
        self.pending = chosen
        logger.info(
            "[session] picked %r from %s candidates (pool=%s adventure=%.2f recent=%s)",
            chosen, len(candidates), len(pool), self._adventure, self.recent,
        )
        return chosen

    def accept(self, title: str) -> OptionStat:
        """Record an acceptance: success_count + 1, stamp last_used_at, log the decision."""
        now = self._clock()
        stat = ensure_stat(self._store, title)
        updated = self._store.upsert_stat(
            stat.title, stat.success_count + 1, stat.failure_count, now
        )
        self._store.record_decision(DecisionLog.for_title(stat.title, decided_at=now))
        self.pending = None
        logger.info(
            "[session] accepted %r (success=%s failure=%s)",
            updated.title, updated.success_count, updated.failure_count,
        )
        return updated

    def skip(self, title: str, full_pool: Optional[Sequence[str]] = None) -> Optional[str]:
        """
        Record a skip (failure_count + 1) and pick again right away.

        Re-picks over full_pool, or over the pool of the last pick_one when omitted.
        """
        stat = ensure_stat(self._store, title)
        updated = self._store.upsert_stat(
            stat.title, stat.success_count, stat.failure_count + 1, stat.last_used_at
        )
        self.push_recent(stat.title)
        self.pending = None
        logger.info(
            "[session] skipped %r (success=%s failure=%s)",
            updated.title, updated.success_count, updated.failure_count,
        )
        pool = full_pool if full_pool is not None else self._last_pool
        return self.pick_one(pool)

    def reset_recent(self) -> None:
        """Forget recent picks (e.g. when the option list changes)."""
        self._recent.clear()
