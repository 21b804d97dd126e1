"""Unit tests for WavePlanner -- per-wave seeding, tier split and bosses."""

from __future__ import annotations

import pytest

from wavesched.curves import ConstantCurve
from wavesched.simulation.planner import WavePlanner
from wavesched.simulation.rng import seeded_stream
from wavesched.simulation.round_profile import RoundProfile
from wavesched.simulation.schedule import ScheduleEntry, is_ordered, merge_schedules
from wavesched.simulation.tier_shares import FALLBACK_SHARES, TierShares
from wavesched.units import UnitCatalog
from wavesched.units.builtin import BUILTIN_TYPES, GRUNT, RUNNER, WARDEN


pytestmark = pytest.mark.unit


def _max_pool_cost() -> float:
    return max(u.cost for u in BUILTIN_TYPES if not u.is_boss)


class TestMergeSchedules:
    def test_interleaves_by_offset(self):
        a = (ScheduleEntry(0.0, GRUNT), ScheduleEntry(4.0, GRUNT))
        b = (ScheduleEntry(1.0, RUNNER), ScheduleEntry(3.0, RUNNER))
        merged = merge_schedules(a, b)
        assert [e.offset for e in merged] == [0.0, 1.0, 3.0, 4.0]

    def test_ties_keep_argument_order(self):
        a = (ScheduleEntry(0.0, WARDEN),)
        b = (ScheduleEntry(0.0, GRUNT),)
        assert [e.unit for e in merge_schedules(a, b)] == [WARDEN, GRUNT]

    def test_empty_inputs(self):
        assert merge_schedules((), ()) == ()


class TestSeeding:
    def test_same_wave_replays(self):
        planner = WavePlanner(base_seed=7)
        assert planner.plan(12) == planner.plan(12)

    def test_separate_planners_agree(self):
        assert WavePlanner(base_seed=7).plan(25) == WavePlanner(base_seed=7).plan(25)

    def test_base_seed_changes_schedule(self):
        a = WavePlanner(base_seed=1).plan(20)
        b = WavePlanner(base_seed=2).plan(20)
        assert a.schedule != b.schedule

    def test_wave_seed_offset(self):
        seen: list[int] = []

        def factory(seed):
            seen.append(seed)
            return seeded_stream(seed)

        WavePlanner(base_seed=100, stream_factory=factory).plan(7)
        assert seen == [107]

    def test_wave_clamped_to_one(self):
        plan = WavePlanner(base_seed=3).plan(0)
        assert plan.wave == 1


class TestPlanShape:
    @pytest.mark.parametrize("wave", [1, 5, 12, 30, 55])
    def test_schedule_invariants(self, wave):
        plan = WavePlanner(base_seed=11).plan(wave)
        assert is_ordered(plan.schedule)
        assert all(0.0 <= e.offset < plan.duration for e in plan.schedule)
        # each tier may overshoot its share by at most one unit
        boss_cost = plan.boss.cost if plan.boss is not None else 0.0
        assert plan.scheduled_cost - boss_cost <= plan.budget + 3 * _max_pool_cost()

    def test_first_wave_is_all_grunts(self):
        plan = WavePlanner(base_seed=11).plan(1)
        assert plan.spawn_count > 0
        assert {e.unit for e in plan.schedule} == {GRUNT}

    def test_context_carries_profile_values(self):
        profile = RoundProfile()
        plan = WavePlanner(profile=profile, base_seed=1).plan(15)
        assert plan.context.wave == 15
        assert plan.context.elite_chance == pytest.approx(profile.elite_chance(15))
        assert plan.context.health_mult == pytest.approx(profile.health_multiplier(15))
        assert plan.context.reward_mult == pytest.approx(profile.reward_multiplier(15))

    def test_duration_budget_and_break(self):
        profile = RoundProfile(base_wave_duration=20.0, break_duration=3.0)
        plan = WavePlanner(profile=profile, base_seed=1).plan(4)
        assert plan.duration == 20.0
        assert plan.budget == pytest.approx(profile.budget(4))
        assert plan.break_duration == 3.0

    def test_plan_range(self):
        plans = WavePlanner(base_seed=1).plan_range(1, 3)
        assert [p.wave for p in plans] == [1, 2, 3]


class TestTierShares:
    def test_fallback_shares_without_config(self):
        plan = WavePlanner(base_seed=1).plan(6)
        expected = tuple(plan.budget * s for s in FALLBACK_SHARES)
        assert plan.tier_budgets == pytest.approx(expected)

    def test_configured_shares(self):
        shares = TierShares(ConstantCurve(1.0), ConstantCurve(0.0), ConstantCurve(0.0))
        plan = WavePlanner(shares=shares, base_seed=1).plan(6)
        assert plan.tier_budgets == pytest.approx((plan.budget, 0.0, 0.0))

    def test_tier_shares_lookup(self):
        shares = TierShares()
        assert WavePlanner(shares=shares).tier_shares(40) == shares.shares(40)


class TestBossWaves:
    def test_boss_leads_the_wave(self):
        plan = WavePlanner(base_seed=5).plan(10)
        assert plan.boss is WARDEN
        assert plan.schedule[0] == ScheduleEntry(0.0, WARDEN)
        assert sum(1 for e in plan.schedule if e.unit.is_boss) == 1

    def test_no_boss_off_cycle(self):
        plan = WavePlanner(base_seed=5).plan(11)
        assert plan.boss is None
        assert not any(e.unit.is_boss for e in plan.schedule)

    def test_boss_wave_without_boss(self):
        catalog = UnitCatalog([u for u in BUILTIN_TYPES if not u.is_boss])
        plan = WavePlanner(catalog=catalog, base_seed=5).plan(10)
        assert plan.boss is None
        assert plan.spawn_count > 0


class TestEmptyRoster:
    def test_locked_catalog(self, unit_factory):
        catalog = UnitCatalog([unit_factory("late", unlock_wave=50)])
        plan = WavePlanner(catalog=catalog, base_seed=5).plan(3)
        assert plan.schedule == ()
        assert plan.tier_budgets == (0.0, 0.0, 0.0)
        assert plan.budget > 0
