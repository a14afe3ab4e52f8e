"""
Picker stages: distribution (softmax, uniform mix, sampling) and pick.

Public API: pick, pick_distribution.
"""

from .distribution import mix_with_uniform, pick_distribution, sample_index, softmax
from .picker import pick

__all__ = [
    "mix_with_uniform",
    "pick",
    "pick_distribution",
    "sample_index",
    "softmax",
]
