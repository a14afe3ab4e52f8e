"""
Sampling distribution: temperature softmax over preference scores, mixed with
a uniform distribution by adventurousness, then a single categorical draw.

All functions are pure; randomness comes only from the rng passed to sample_index.
"""

from typing import Optional, Protocol, Sequence

import numpy as np

from ..models.config import PickerConfig, resolve_config
from ..utils.scores import clamp_adventure


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1): numpy Generator, random.Random."""

    def random(self) -> float:
        ...


def softmax(scores: Sequence[float], temperature: float, floor: float = 1e-12) -> np.ndarray:
    """
    Numerically stable softmax with temperature.

    Subtracts max(scores) before dividing by temperature; the denominator is
    floored so an all-underflow vector never divides by zero.
    """
    x = np.asarray(scores, dtype=float)
    if x.size == 0:
        return x
    exps = np.exp((x - x.max()) / temperature)
    return exps / max(float(exps.sum()), floor)


def mix_with_uniform(probs: np.ndarray, weight: float, floor: float = 1e-9) -> np.ndarray:
    """
    Blend probs with the uniform distribution: (1 - weight) * p + weight / n.

    Each entry is floored so no option becomes unreachable, then renormalized.
    """
    p = np.asarray(probs, dtype=float)
    if p.size == 0:
        return p
    uniform = 1.0 / p.size
    mixed = np.maximum(floor, (1.0 - weight) * p + weight * uniform)
    return mixed / mixed.sum()


def sample_index(probs: np.ndarray, rng: RandomSource) -> int:
    """
    Draw one index: first position where the running total exceeds r.

    Falls back to the last index when rounding leaves the total just under r.
    """
    r = float(rng.random())
    cumulative = np.cumsum(probs)
    idx = int(np.searchsorted(cumulative, r, side="right"))
    return min(idx, len(probs) - 1)


def pick_distribution(
    scores: Sequence[float],
    adventure: float,
    config: Optional[PickerConfig] = None,
) -> np.ndarray:
    """
    Final sampling probabilities for a list of scores.

    tau = max(0.15, 0.55 - 0.45 * (1 - adventure)) with default config;
    lower adventure gives a sharper distribution and less uniform mixing.
    """
    config = resolve_config(config)
    adventure = clamp_adventure(adventure)
    x = np.asarray(scores, dtype=float)
    if not np.all(np.isfinite(x)):
        raise ValueError(f"Scores must be finite, got {x.tolist()}")
    tau = config.temperature(adventure)
    pref = softmax(x, tau, config.softmax_floor)
    return mix_with_uniform(pref, adventure, config.probability_floor)
