"""
Smart Picker — preference-learning random selection

Single entry point for the smart_picker package:
- models/: PickerConfig, OptionStat, DecisionLog, PickRequest
- stages/: distribution (softmax, uniform mix, sampling), picker (pick)
- utils/: beta_mean, adventure_label, clamp_adventure, normalize_title
"""

from typing import Optional

from .models.config import DEFAULT_CONFIG, PickerConfig, resolve_config
from .models.decision import DecisionLog
from .models.option_stat import OptionStat
from .models.request import PickRequest
from .stages.distribution import RandomSource, pick_distribution
from .stages.picker import ScoreFn, pick
from .utils.scores import adventure_label, beta_mean, clamp_adventure
from .utils.titles import normalize_title


def pick_request(
    request: PickRequest,
    score_fn: ScoreFn,
    rng: Optional[RandomSource] = None,
    config: Optional[PickerConfig] = None,
) -> Optional[str]:
    """Run pick() for a validated PickRequest."""
    return pick(request.pool, score_fn, request.adventure, rng=rng, config=config)


__all__ = [
    "DEFAULT_CONFIG",
    "DecisionLog",
    "OptionStat",
    "PickRequest",
    "PickerConfig",
    "RandomSource",
    "ScoreFn",
    "adventure_label",
    "beta_mean",
    "clamp_adventure",
    "normalize_title",
    "pick",
    "pick_distribution",
    "pick_request",
    "resolve_config",
]
