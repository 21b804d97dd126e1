"""Unit tests for tier pools, family promotion and boss eligibility."""

from __future__ import annotations

import pytest

from wavesched.simulation.roster import (
    TierPools,
    build_tier_pools,
    eligible_bosses,
    family_replacement,
    maybe_promote,
    promotion_chance,
)
from wavesched.units.base import UnitTier
from wavesched.units.builtin import (
    BRUTE,
    BUILTIN_TYPES,
    DRONE,
    GRUNT,
    GRUNT_ELITE,
    GRUNT_VETERAN,
    HIVE_MOTHER,
    RUNNER,
    WARDEN,
)


pytestmark = pytest.mark.unit


class TestBuildTierPools:
    def test_first_wave_has_only_grunts(self):
        pools = build_tier_pools(1, BUILTIN_TYPES)
        assert pools.basic == [GRUNT]
        assert pools.advanced == []
        assert pools.elite == []

    def test_unlocks_accumulate(self):
        pools = build_tier_pools(8, BUILTIN_TYPES)
        assert pools.basic == [GRUNT, RUNNER, BRUTE, DRONE]

    def test_bosses_never_pooled(self):
        pools = build_tier_pools(100, BUILTIN_TYPES)
        pooled = pools.basic + pools.advanced + pools.elite
        assert WARDEN not in pooled
        assert HIVE_MOTHER not in pooled
        assert all(u.tier is not UnitTier.BOSS for u in pooled)

    def test_none_catalog(self):
        pools = build_tier_pools(5, None)
        assert pools.is_empty
        assert len(pools) == 0

    def test_len_counts_all_tiers(self):
        pools = TierPools(basic=[GRUNT], advanced=[GRUNT_VETERAN], elite=[GRUNT_ELITE])
        assert len(pools) == 3
        assert not pools.is_empty


class TestFamilyReplacement:
    def test_finds_same_family(self):
        assert family_replacement(12, "grunt", [GRUNT_VETERAN]) is GRUNT_VETERAN

    def test_ignores_locked(self):
        assert family_replacement(5, "grunt", [GRUNT_VETERAN]) is None

    def test_ignores_other_family(self):
        assert family_replacement(50, "runner", [GRUNT_VETERAN]) is None

    def test_last_unlocked_wins(self, unit_factory):
        first = unit_factory("first", family="grunt", tier=UnitTier.ADVANCED)
        second = unit_factory("second", family="grunt", tier=UnitTier.ADVANCED)
        assert family_replacement(1, "grunt", [first, second]) is second


class TestPromotion:
    def test_chance_zero_before_replacement_wave(self):
        assert promotion_chance(14, GRUNT_VETERAN, 20.0) == 0.0

    def test_chance_ramps(self):
        assert promotion_chance(25, GRUNT_VETERAN, 20.0) == pytest.approx(0.5)

    def test_chance_saturates(self):
        assert promotion_chance(80, GRUNT_VETERAN, 20.0) == 1.0

    def test_chance_zero_when_never_replaces(self):
        assert promotion_chance(80, GRUNT, 20.0) == 0.0

    def test_no_candidates_consumes_no_draws(self, scripted):
        stream = scripted()
        pools = build_tier_pools(10, BUILTIN_TYPES)
        assert maybe_promote(10, GRUNT, pools, stream) is GRUNT
        assert stream.unit_calls == 0

    def test_advanced_promotion(self, scripted):
        # wave 40: veteran chance 1.0, elite chance (40-30)/25 = 0.4
        stream = scripted(units=[0.99, 0.5])
        pools = build_tier_pools(40, BUILTIN_TYPES)
        assert maybe_promote(40, GRUNT, pools, stream) is GRUNT_VETERAN
        assert stream.unit_calls == 2

    def test_elite_promotion_wins(self, scripted):
        stream = scripted(units=[0.99, 0.1])
        pools = build_tier_pools(40, BUILTIN_TYPES)
        assert maybe_promote(40, GRUNT, pools, stream) is GRUNT_ELITE

    def test_failed_rolls_keep_basic(self, scripted):
        # wave 20: veteran chance 0.25, elite not yet replacing
        stream = scripted(units=[0.9])
        pools = build_tier_pools(20, BUILTIN_TYPES)
        assert maybe_promote(20, GRUNT, pools, stream) is GRUNT
        assert stream.unit_calls == 1

    def test_family_without_upgrades_untouched(self, scripted):
        stream = scripted(default_unit=0.0)
        pools = build_tier_pools(90, BUILTIN_TYPES)
        assert maybe_promote(90, DRONE, pools, stream) is DRONE


class TestBosses:
    def test_none_before_unlock(self):
        assert eligible_bosses(5, BUILTIN_TYPES) == []

    def test_warden_from_wave_ten(self):
        assert eligible_bosses(10, BUILTIN_TYPES) == [WARDEN]

    def test_both_late(self):
        assert eligible_bosses(30, BUILTIN_TYPES) == [WARDEN, HIVE_MOTHER]

    def test_none_catalog(self):
        assert eligible_bosses(30, None) == []
