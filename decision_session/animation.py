"""
Suggestion animation — the quick random "flashing" of options shown before the
real pick lands.

Presentation only: frames are drawn uniformly with the animator's own rng and
never touch the preference store, the recent queue, or the picker's rng.
Cancelling run() mid-way leaves nothing behind.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

import numpy as np

from smart_picker.models.config import PickerConfig, resolve_config

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Frame = Tuple[str, float]


class SuggestionAnimator:
    """Schedule of random suggestion frames with growing delays."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        config: Optional[PickerConfig] = None,
    ):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._config = resolve_config(config)

    def rounds(self, pool_size: int) -> int:
        """Frame count: two per option, kept between the configured min and max."""
        if pool_size <= 0:
            return 0
        c = self._config
        return min(c.animation_max_rounds, max(c.animation_min_rounds, 2 * pool_size))

    def delays(self, pool_size: int) -> List[float]:
        """Seconds to wait before each frame (80ms, 88ms, 96ms, ... by default)."""
        c = self._config
        return [
            c.animation_base_delay + i * c.animation_delay_step
            for i in range(self.rounds(pool_size))
        ]

    def frames(self, pool: Sequence[str]) -> List[Frame]:
        """(title, delay) pairs with titles drawn uniformly from pool."""
        if not pool:
            return []
        delays = self.delays(len(pool))
        picks = self._rng.integers(0, len(pool), size=len(delays))
        return [(pool[int(i)], d) for i, d in zip(picks, delays)]

    async def run(
        self,
        pool: Sequence[str],
        on_frame: Callable[[str], None],
        sleep: Sleep = asyncio.sleep,
    ) -> int:
        """Play the frames: wait each delay, then show the title. Returns frames shown."""
        shown = 0
        for title, delay in self.frames(pool):
            await sleep(delay)
            on_frame(title)
            shown += 1
        logger.debug("[animation] showed %s frames for pool of %s", shown, len(pool))
        return shown
