"""Spawn patterns -- importing this package registers every built-in one."""
from .base import SpawnPattern, create_pattern, pattern_names, register_pattern
from .boss import BossPattern
from .continuous import ContinuousPattern, clamp_spacing, plan_interval
from .weighted import WeightedPattern, weighted_pick

__all__ = [
    "BossPattern",
    "ContinuousPattern",
    "SpawnPattern",
    "WeightedPattern",
    "clamp_spacing",
    "create_pattern",
    "pattern_names",
    "plan_interval",
    "register_pattern",
    "weighted_pick",
]
