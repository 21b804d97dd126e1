"""WeightedPattern -- tier schedule with per-unit spawn weights.

Same pacing and overshoot rule as the continuous pattern, but units are
drawn by their wave-dependent weight instead of uniformly, and basic units
may be promoted to a same-family upgrade when that keeps spend within
``budget + max(cost)``.  The wave planner runs one of these per roster
tier and merges the results.
"""

from __future__ import annotations

import math
from typing import Sequence

from wavesched.units.base import UnitTier, UnitType

from ..context import WaveContext
from ..roster import build_tier_pools, maybe_promote
from ..schedule import EMPTY_SCHEDULE, Schedule, ScheduleEntry
from .base import SpawnPattern, register_pattern
from .continuous import average_cost, jitter_factor

_MIN_WEIGHT = 1e-4


def weighted_pick(pool: Sequence[UnitType], weights: Sequence[float], u: float) -> UnitType:
    """Pick from ``pool`` by cumulative weight using one unit draw ``u``."""
    roll = u * sum(weights)
    for unit, w in zip(pool, weights):
        roll -= w
        if roll <= 0:
            return unit
    return pool[-1]


@register_pattern("weighted")
class WeightedPattern(SpawnPattern):
    """Weighted unit selection with optional basic-unit promotion."""

    def __init__(
        self,
        promote_basics: bool = False,
        jitter: float = 0.2,
        min_interval: float = 1e-3,
        max_spawns: int = 10_000,
        ramp_length: float = 20.0,
    ) -> None:
        self.promote_basics = promote_basics
        self.jitter = min(0.95, max(0.0, float(jitter)))
        self.min_interval = max(1e-9, float(min_interval))
        self.max_spawns = max(1, int(max_spawns))
        self.ramp_length = ramp_length

    def build(
        self,
        ctx: WaveContext,
        wave_duration: float,
        budget: float,
        pool: Sequence[UnitType],
    ) -> Schedule:
        if self.is_degenerate(wave_duration, budget, pool):
            return EMPTY_SCHEDULE

        weights = [max(_MIN_WEIGHT, u.weight_at(ctx.wave)) for u in pool]
        estimated = math.ceil(budget / average_cost(pool))
        base_interval = max(self.min_interval, wave_duration / max(1, estimated))
        cheapest = min(u.cost for u in pool)
        ceiling = budget + max(u.cost for u in pool)

        promotions = None
        if self.promote_basics and ctx.catalog is not None:
            promotions = build_tier_pools(ctx.wave, ctx.catalog)

        entries: list[ScheduleEntry] = []
        spent = 0.0
        cursor = 0.0

        while spent < budget and cursor < wave_duration:
            pick = weighted_pick(pool, weights, ctx.rng.next_unit())
            if promotions is not None and pick.tier is UnitTier.BASIC:
                promoted = maybe_promote(ctx.wave, pick, promotions, ctx.rng, self.ramp_length)
                if spent + promoted.cost <= ceiling:
                    pick = promoted

            headroom = budget - spent
            if spent + pick.cost > budget and (headroom < 1.0 or cheapest > headroom):
                break

            entries.append(ScheduleEntry(cursor, pick))
            spent += pick.cost
            if len(entries) >= self.max_spawns:
                break

            cursor += base_interval * jitter_factor(ctx.rng.next_unit(), self.jitter)

        return tuple(entries)
