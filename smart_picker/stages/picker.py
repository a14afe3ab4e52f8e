"""
Smart pick: score the pool, build the sampling distribution, draw one title.

Stateless and side-effect free. The caller supplies the score lookup as a
read-only snapshot and, for reproducible draws, a seeded rng.
"""

import logging
from typing import Callable, Optional, Sequence

import numpy as np

from ..models.config import PickerConfig, resolve_config
from ..utils.scores import clamp_adventure
from .distribution import RandomSource, pick_distribution, sample_index

logger = logging.getLogger(__name__)

ScoreFn = Callable[[str], float]


def pick(
    pool: Sequence[str],
    score_fn: ScoreFn,
    adventure: float,
    rng: Optional[RandomSource] = None,
    config: Optional[PickerConfig] = None,
) -> Optional[str]:
    """
    Pick one title from pool, biased toward high scores.

    adventure in [0, 1]: 0 = follow preferences closely, 1 = uniform random.
    Values outside the range are clamped. Returns None only for an empty pool.
    """
    if not pool:
        return None
    config = resolve_config(config)
    adventure = clamp_adventure(adventure)
    if rng is None:
        rng = np.random.default_rng()

    # 1) Score every occurrence, duplicates included
    scores = []
    for title in pool:
        s = float(score_fn(title))
        if not np.isfinite(s):
            raise ValueError(f"Score for {title!r} must be finite, got {s}")
        scores.append(s)

    # 2) Temperature softmax mixed with uniform
    probs = pick_distribution(scores, adventure, config)

    # 3) Categorical draw
    idx = sample_index(probs, rng)
    chosen = pool[idx]
    logger.debug(
        "[pick] pool_size=%s adventure=%.3f tau=%.3f chosen=%r p=%.4f",
        len(pool), adventure, config.temperature(adventure), chosen, probs[idx],
    )
    return chosen
