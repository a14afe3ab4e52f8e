"""Data models for the smart picker."""

from .config import DEFAULT_CONFIG, PickerConfig, resolve_config
from .decision import DecisionLog
from .option_stat import OptionStat
from .request import PickRequest

__all__ = [
    "DEFAULT_CONFIG",
    "DecisionLog",
    "OptionStat",
    "PickRequest",
    "PickerConfig",
    "resolve_config",
]
