"""Roster building -- which units may appear in a given wave.

Units are bucketed by tier once per wave.  Basic units can later be
promoted to an advanced or elite unit of the same family: the chance ramps
linearly from 0 at the replacement's ``replace_family_from_wave`` up to 1
over ``ramp_length`` waves (elite ramps 25% slower).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from wavesched.units.base import UnitTier, UnitType

from .rng import RandomStream

_ELITE_RAMP_SCALE = 1.25


@dataclass
class TierPools:
    """Unlocked non-boss units for one wave, split by tier."""

    basic: list[UnitType] = field(default_factory=list)
    advanced: list[UnitType] = field(default_factory=list)
    elite: list[UnitType] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.basic or self.advanced or self.elite)

    def __len__(self) -> int:
        return len(self.basic) + len(self.advanced) + len(self.elite)


def build_tier_pools(wave: int, units: Optional[Iterable[UnitType]]) -> TierPools:
    pools = TierPools()
    if units is None:
        return pools
    for unit in units:
        if unit is None or not unit.is_unlocked(wave):
            continue
        if unit.tier is UnitTier.BASIC:
            pools.basic.append(unit)
        elif unit.tier is UnitTier.ADVANCED:
            pools.advanced.append(unit)
        elif unit.tier is UnitTier.ELITE:
            pools.elite.append(unit)
    return pools


def family_replacement(
    wave: int, family: str, pool: Sequence[UnitType]
) -> Optional[UnitType]:
    """Last unlocked unit of ``family`` in ``pool``."""
    candidate = None
    for unit in pool:
        if unit.family != family or not unit.is_unlocked(wave):
            continue
        candidate = unit
    return candidate


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else (1.0 if v > 1.0 else v)


def promotion_chance(wave: int, replacement: UnitType, ramp_length: float) -> float:
    start = replacement.replace_family_from_wave
    if start <= 0 or wave < start or ramp_length <= 0:
        return 0.0
    return _clamp01((wave - start) / ramp_length)


def maybe_promote(
    wave: int,
    chosen: UnitType,
    pools: TierPools,
    rng: RandomStream,
    ramp_length: float = 20.0,
) -> UnitType:
    """Possibly replace a basic ``chosen`` with a same-family upgrade.

    One draw is consumed for each replacement that is active this wave; the
    elite check runs after the advanced one and wins if both succeed.
    """
    result = chosen

    adv = family_replacement(wave, chosen.family, pools.advanced)
    if adv is not None and adv.replace_family_from_wave > 0 and wave >= adv.replace_family_from_wave:
        if rng.next_unit() < promotion_chance(wave, adv, ramp_length):
            result = adv

    elite = family_replacement(wave, chosen.family, pools.elite)
    if elite is not None and elite.replace_family_from_wave > 0 and wave >= elite.replace_family_from_wave:
        if rng.next_unit() < promotion_chance(wave, elite, ramp_length * _ELITE_RAMP_SCALE):
            result = elite

    return result


def eligible_bosses(wave: int, units: Optional[Iterable[UnitType]]) -> list[UnitType]:
    if units is None:
        return []
    return [u for u in units if u is not None and u.is_boss and u.is_unlocked(wave)]
