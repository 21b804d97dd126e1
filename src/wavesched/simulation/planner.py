"""WavePlanner -- turns a round profile and a catalog into per-wave plans.

For wave N the planner:

  1. builds a WaveContext seeded with ``base_seed + N`` so a wave always
     replays identically
  2. buckets the catalog into basic/advanced/elite pools unlocked at N
  3. splits the wave budget by tier shares
  4. runs one weighted pattern per tier (basics may be promoted) on the
     shared context, then merges the three schedules by offset
  5. on boss waves, prepends one boss at offset 0

The resulting WavePlan is plain data; playing it back is the job of
``WaveTimeline``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from loguru import logger

from wavesched.config import settings
from wavesched.units.base import UnitType
from wavesched.units.builtin import builtin_catalog
from wavesched.units.catalog import UnitCatalog

from .context import WaveContext
from .patterns.boss import BossPattern
from .patterns.weighted import WeightedPattern
from .rng import RandomStream, seeded_stream
from .roster import build_tier_pools, eligible_bosses
from .round_profile import RoundProfile
from .schedule import EMPTY_SCHEDULE, Schedule, merge_schedules, total_cost
from .tier_shares import FALLBACK_SHARES, TierShares


@dataclass
class WavePlan:
    """Everything decided for one wave before it starts."""

    wave: int
    duration: float
    budget: float
    context: WaveContext = field(repr=False, compare=False)
    schedule: Schedule = EMPTY_SCHEDULE
    tier_budgets: tuple[float, float, float] = (0.0, 0.0, 0.0)
    boss: Optional[UnitType] = None
    break_duration: float = 0.0

    @property
    def spawn_count(self) -> int:
        return len(self.schedule)

    @property
    def scheduled_cost(self) -> float:
        return total_cost(self.schedule)


class WavePlanner:
    """Plans waves for one round."""

    def __init__(
        self,
        profile: Optional[RoundProfile] = None,
        catalog: Optional[UnitCatalog] = None,
        shares: Optional[TierShares] = None,
        base_seed: Optional[int] = None,
        stream_factory: Callable[[int], RandomStream] = seeded_stream,
        jitter: Optional[float] = None,
        min_interval: Optional[float] = None,
        max_spawns: Optional[int] = None,
        ramp_length: Optional[float] = None,
    ) -> None:
        self.profile = profile if profile is not None else RoundProfile()
        self.catalog = catalog if catalog is not None else builtin_catalog()
        self.shares = shares
        self.base_seed = settings.base_seed if base_seed is None else base_seed
        self._stream_factory = stream_factory

        pattern_params = dict(
            jitter=settings.jitter if jitter is None else jitter,
            min_interval=settings.min_interval if min_interval is None else min_interval,
            max_spawns=settings.max_spawns if max_spawns is None else max_spawns,
            ramp_length=settings.promotion_ramp_waves if ramp_length is None else ramp_length,
        )
        self._basic_pattern = WeightedPattern(promote_basics=True, **pattern_params)
        self._tier_pattern = WeightedPattern(promote_basics=False, **pattern_params)
        self._boss_pattern = BossPattern()

    # -- Public interface -------------------------------------------------------

    def context_for(self, wave: int) -> WaveContext:
        """Fresh context for ``wave``; identical draws every time it is built."""
        wave = max(1, wave)
        p = self.profile
        return WaveContext(
            rng=self._stream_factory(self.base_seed + wave),
            elite_chance=p.elite_chance(wave),
            wave=wave,
            health_mult=p.health_multiplier(wave),
            speed_mult=p.speed_multiplier(wave),
            damage_mult=p.damage_multiplier(wave),
            reward_mult=p.reward_multiplier(wave),
            catalog=self.catalog,
        )

    def tier_shares(self, wave: int) -> tuple[float, float, float]:
        if self.shares is None:
            return FALLBACK_SHARES
        return self.shares.shares(wave)

    def plan(self, wave: int) -> WavePlan:
        ctx = self.context_for(wave)
        wave = ctx.wave
        duration = self.profile.wave_duration(wave)
        budget = self.profile.budget(wave)
        plan = WavePlan(
            wave=wave,
            duration=duration,
            budget=budget,
            context=ctx,
            break_duration=self.profile.break_duration,
        )

        pools = build_tier_pools(wave, self.catalog)
        if pools.is_empty:
            logger.warning(f"Wave {wave}: no eligible units, schedule left empty")
            return plan

        b_share, a_share, e_share = self.tier_shares(wave)
        plan.tier_budgets = (budget * b_share, budget * a_share, budget * e_share)

        basic = self._basic_pattern.build(ctx, duration, plan.tier_budgets[0], pools.basic)
        advanced = self._tier_pattern.build(ctx, duration, plan.tier_budgets[1], pools.advanced)
        elite = self._tier_pattern.build(ctx, duration, plan.tier_budgets[2], pools.elite)
        logger.debug(
            f"Wave {wave}: tier spend basic={total_cost(basic):g}/{plan.tier_budgets[0]:g} "
            f"advanced={total_cost(advanced):g}/{plan.tier_budgets[1]:g} "
            f"elite={total_cost(elite):g}/{plan.tier_budgets[2]:g}"
        )

        boss_schedule = EMPTY_SCHEDULE
        if self.profile.is_boss_wave(wave):
            boss_schedule = self._boss_pattern.build(
                ctx, duration, budget, eligible_bosses(wave, self.catalog)
            )
            if boss_schedule:
                plan.boss = boss_schedule[0].unit
            else:
                logger.warning(f"Wave {wave}: boss wave but no eligible boss unlocked")

        plan.schedule = merge_schedules(boss_schedule, basic, advanced, elite)
        logger.info(
            f"Wave {wave}: planned {plan.spawn_count} spawns over {duration:g}s "
            f"(cost {plan.scheduled_cost:g} of budget {budget:g})"
        )
        return plan

    def plan_range(self, first: int, last: int) -> list[WavePlan]:
        return [self.plan(w) for w in range(first, last + 1)]
