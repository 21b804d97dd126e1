"""ContinuousPattern -- an even, jittered stream of spawns across the wave.

Pacing
------
The pattern first estimates how many spawns the budget buys at the pool's
average cost, and spaces that many spawns evenly over the wave:

    avg_cost      = max(1, mean(cost))
    estimated     = ceil(budget / avg_cost)
    base_interval = wave_duration / max(1, estimated) * spacing_adjust

That estimate only plans the pacing.  Units are drawn uniformly from the
pool, so actual spend drifts from the plan and the loop simply runs until
the budget is spent or the cursor leaves the wave window.

Each step:
  1. draw a unit uniformly from the pool
  2. roll ``elite_chance``; on success swap in the family's elite variant
     when the context carries a catalog that has one, unless the variant
     would spend past ``budget + max(cost)``
  3. stop if the unit overshoots the budget and either the headroom is
     under one budget point or nothing in the pool fits the headroom
  4. append ``(cursor, unit)`` and charge its cost
  5. advance the cursor by ``base_interval * U[1 - jitter, 1 + jitter]``

Overshoot is therefore bounded by the most expensive unit in the pool.
"""

from __future__ import annotations

import math
from typing import Sequence

from wavesched.units.base import ScalingProfile, UnitType

from ..context import WaveContext
from ..schedule import EMPTY_SCHEDULE, Schedule, ScheduleEntry
from .base import SpawnPattern, register_pattern

SPACING_MIN = 0.5
SPACING_MAX = 2.0


def clamp_spacing(value: float) -> float:
    return min(SPACING_MAX, max(SPACING_MIN, float(value)))


def jitter_factor(u: float, jitter: float) -> float:
    """Map a unit draw onto ``[1 - jitter, 1 + jitter]``."""
    return (1.0 - jitter) + 2.0 * jitter * u


def average_cost(pool: Sequence[UnitType]) -> float:
    return max(1.0, sum(u.cost for u in pool) / len(pool))


def plan_interval(
    wave_duration: float,
    budget: float,
    pool: Sequence[UnitType],
    spacing_adjust: float = 1.0,
) -> float:
    """Nominal gap between spawns before jitter."""
    estimated = math.ceil(budget / average_cost(pool))
    return (wave_duration / max(1, estimated)) * spacing_adjust


@register_pattern("continuous")
class ContinuousPattern(SpawnPattern):
    """Spend the budget as a roughly even stream over the wave."""

    def __init__(
        self,
        spacing_adjust: float = 1.0,
        jitter: float = 0.2,
        min_interval: float = 1e-3,
        max_spawns: int = 10_000,
    ) -> None:
        self.spacing_adjust = clamp_spacing(spacing_adjust)
        self.jitter = min(0.95, max(0.0, float(jitter)))
        self.min_interval = max(1e-9, float(min_interval))
        self.max_spawns = max(1, int(max_spawns))

    def build(
        self,
        ctx: WaveContext,
        wave_duration: float,
        budget: float,
        pool: Sequence[UnitType],
    ) -> Schedule:
        if self.is_degenerate(wave_duration, budget, pool):
            return EMPTY_SCHEDULE

        base_interval = max(
            self.min_interval,
            plan_interval(wave_duration, budget, pool, self.spacing_adjust),
        )
        cheapest = min(u.cost for u in pool)
        ceiling = budget + max(u.cost for u in pool)
        n = len(pool)

        entries: list[ScheduleEntry] = []
        spent = 0.0
        cursor = 0.0

        while spent < budget and cursor < wave_duration:
            pick = pool[ctx.rng.next_index(n)]

            if ctx.roll_elite() and pick.scaling is not ScalingProfile.ELITE:
                variant = self._elite_substitute(ctx, pick)
                # a variant may not push spend past what the pool itself could
                if spent + variant.cost <= ceiling:
                    pick = variant

            headroom = budget - spent
            if spent + pick.cost > budget and (headroom < 1.0 or cheapest > headroom):
                break

            entries.append(ScheduleEntry(cursor, pick))
            spent += pick.cost
            if len(entries) >= self.max_spawns:
                break

            cursor += base_interval * jitter_factor(ctx.rng.next_unit(), self.jitter)

        return tuple(entries)

    @staticmethod
    def _elite_substitute(ctx: WaveContext, pick: UnitType) -> UnitType:
        # Without a catalog the roll is spent but the unit stays as drawn
        if ctx.catalog is None:
            return pick
        variant = ctx.catalog.elite_variant(pick, ctx.wave)
        return variant if variant is not None else pick
