"""BossPattern -- a single boss at the start of the wave."""

from __future__ import annotations

from typing import Sequence

from wavesched.units.base import UnitType

from ..context import WaveContext
from ..roster import eligible_bosses
from ..schedule import EMPTY_SCHEDULE, Schedule, ScheduleEntry
from .base import SpawnPattern, register_pattern


@register_pattern("boss")
class BossPattern(SpawnPattern):
    """Pick one unlocked boss from the pool and spawn it at offset 0.

    The boss is not charged against the budget; a positive budget only
    marks the wave as live.
    """

    def build(
        self,
        ctx: WaveContext,
        wave_duration: float,
        budget: float,
        pool: Sequence[UnitType],
    ) -> Schedule:
        if self.is_degenerate(wave_duration, budget, pool):
            return EMPTY_SCHEDULE
        bosses = eligible_bosses(ctx.wave, pool)
        if not bosses:
            return EMPTY_SCHEDULE
        return (ScheduleEntry(0.0, bosses[ctx.rng.next_index(len(bosses))]),)
