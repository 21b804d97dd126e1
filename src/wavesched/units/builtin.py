"""Built-in unit roster used when no catalog file is configured."""

from __future__ import annotations

from wavesched.curves import ConstantCurve, LinearCurve
from wavesched.units.base import (
    BaseRewards,
    BaseStats,
    ScalingProfile,
    UnitTier,
    UnitTrait,
    UnitType,
)
from wavesched.units.catalog import UnitCatalog

GRUNT = UnitType(
    type_id="grunt",
    cost=1,
    display_name="Grunt",
    family="grunt",
    base=BaseStats(health=10, speed=2.0, damage=1),
)

RUNNER = UnitType(
    type_id="runner",
    cost=1,
    scaling=ScalingProfile.FAST,
    display_name="Runner",
    family="runner",
    traits=UnitTrait.FAST | UnitTrait.GLASS,
    unlock_wave=3,
    weight=LinearCurve.between(3, 0.5, 60, 1.2),
    base=BaseStats(health=6, speed=3.2, damage=1),
)

BRUTE = UnitType(
    type_id="brute",
    cost=3,
    scaling=ScalingProfile.TANK,
    display_name="Brute",
    family="brute",
    traits=UnitTrait.TANK,
    unlock_wave=5,
    weight=LinearCurve.between(5, 0.3, 80, 1.0),
    base=BaseStats(health=40, speed=1.2, damage=3),
    rewards=BaseRewards(fragments=3),
)

DRONE = UnitType(
    type_id="drone",
    cost=2,
    scaling=ScalingProfile.GLASS,
    display_name="Drone",
    family="drone",
    traits=UnitTrait.FLYING | UnitTrait.GLASS,
    unlock_wave=8,
    base=BaseStats(health=8, speed=2.8, damage=2),
    rewards=BaseRewards(fragments=2),
)

GRUNT_VETERAN = UnitType(
    type_id="grunt_veteran",
    cost=2,
    display_name="Veteran Grunt",
    tier=UnitTier.ADVANCED,
    family="grunt",
    unlock_wave=10,
    replace_family_from_wave=15,
    base=BaseStats(health=18, speed=2.1, damage=2),
    rewards=BaseRewards(fragments=2),
)

BRUTE_SHIELDED = UnitType(
    type_id="brute_shielded",
    cost=5,
    scaling=ScalingProfile.TANK,
    display_name="Shielded Brute",
    tier=UnitTier.ADVANCED,
    family="brute",
    traits=UnitTrait.TANK | UnitTrait.SHIELDED,
    unlock_wave=18,
    replace_family_from_wave=25,
    base=BaseStats(health=70, speed=1.1, damage=4),
    rewards=BaseRewards(fragments=4, cores=1),
)

GRUNT_ELITE = UnitType(
    type_id="grunt_elite",
    cost=4,
    scaling=ScalingProfile.ELITE,
    display_name="Elite Grunt",
    tier=UnitTier.ELITE,
    family="grunt",
    unlock_wave=20,
    replace_family_from_wave=30,
    weight=ConstantCurve(0.6),
    base=BaseStats(health=30, speed=2.2, damage=4),
    rewards=BaseRewards(fragments=4, cores=1),
)

RUNNER_ELITE = UnitType(
    type_id="runner_elite",
    cost=3,
    scaling=ScalingProfile.ELITE,
    display_name="Elite Runner",
    tier=UnitTier.ELITE,
    family="runner",
    traits=UnitTrait.FAST,
    unlock_wave=25,
    replace_family_from_wave=35,
    base=BaseStats(health=16, speed=3.6, damage=3),
    rewards=BaseRewards(fragments=3, cores=1),
)

WARDEN = UnitType(
    type_id="warden",
    cost=25,
    scaling=ScalingProfile.ELITE,
    display_name="Warden",
    tier=UnitTier.BOSS,
    family="warden",
    traits=UnitTrait.TANK | UnitTrait.SUMMONER,
    unlock_wave=10,
    base=BaseStats(health=400, speed=0.9, damage=10),
    rewards=BaseRewards(fragments=25, cores=5, prisms=1),
)

HIVE_MOTHER = UnitType(
    type_id="hive_mother",
    cost=40,
    scaling=ScalingProfile.ELITE,
    display_name="Hive Mother",
    tier=UnitTier.BOSS,
    family="hive",
    traits=UnitTrait.FLYING | UnitTrait.SUMMONER,
    unlock_wave=30,
    base=BaseStats(health=650, speed=1.4, damage=12),
    rewards=BaseRewards(fragments=40, cores=8, prisms=2, loops=1),
)

BUILTIN_TYPES: tuple[UnitType, ...] = (
    GRUNT,
    RUNNER,
    BRUTE,
    DRONE,
    GRUNT_VETERAN,
    BRUTE_SHIELDED,
    GRUNT_ELITE,
    RUNNER_ELITE,
    WARDEN,
    HIVE_MOTHER,
)


def builtin_catalog() -> UnitCatalog:
    return UnitCatalog(BUILTIN_TYPES)
