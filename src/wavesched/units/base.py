"""Base classes for the unit type system.

UnitTier        -- enum for the roster tier a unit belongs to
UnitTrait       -- flag set of behavioural traits
ScalingProfile  -- enum for how wave multipliers are skewed per unit
BaseStats       -- frozen dataclass for pre-scaling health/speed/damage
BaseRewards     -- frozen dataclass for pre-scaling kill rewards
ScaledStats     -- frozen dataclass for stats after wave scaling
UnitType        -- frozen dataclass every catalog entry is
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import TYPE_CHECKING

from wavesched.curves import ConstantCurve, Curve

if TYPE_CHECKING:
    from wavesched.simulation.context import WaveContext


class UnitTier(Enum):
    """Roster tier used for budget shares and promotion."""
    BASIC = "basic"
    ADVANCED = "advanced"
    ELITE = "elite"
    BOSS = "boss"


class UnitTrait(Flag):
    """Traits combine, so one unit can be Flying and Summoner."""
    NONE = 0
    FAST = auto()
    TANK = auto()
    GLASS = auto()
    FLYING = auto()
    SHIELDED = auto()
    SUMMONER = auto()
    EXPLOSIVE = auto()
    SUPPORT = auto()

    def has(self, other: UnitTrait) -> bool:
        return bool(self & other)


class ScalingProfile(Enum):
    """How a unit skews the wave multipliers.  STANDARD is the normal tier."""
    STANDARD = "standard"
    TANK = "tank"
    FAST = "fast"
    GLASS = "glass"
    ELITE = "elite"


# (health, speed, damage) modifiers applied on top of the wave multipliers
_PROFILE_MODIFIERS: dict[ScalingProfile, tuple[float, float, float]] = {
    ScalingProfile.STANDARD: (1.0, 1.0, 1.0),
    ScalingProfile.TANK: (1.6, 0.85, 1.0),
    ScalingProfile.FAST: (0.85, 1.45, 1.0),
    ScalingProfile.GLASS: (0.55, 1.25, 1.25),
    ScalingProfile.ELITE: (2.2, 1.0, 1.7),
}


@dataclass(frozen=True)
class BaseStats:
    """Combat profile before any wave scaling."""
    health: float = 10.0
    speed: float = 2.0
    damage: float = 1.0


@dataclass(frozen=True)
class BaseRewards:
    fragments: int = 1
    cores: int = 0
    prisms: int = 0
    loops: int = 0


@dataclass(frozen=True)
class ScaledStats:
    """Stats and rewards of one unit for a specific wave."""
    health: float
    speed: float
    damage: float
    rewards: BaseRewards


def _scale_reward(base_value: int, mult: float) -> int:
    # Any non-zero reward stays at least 1 after scaling
    if base_value <= 0:
        return 0
    return max(1, math.floor(base_value * mult))


@dataclass(frozen=True)
class UnitType:
    """Static description of one spawnable unit.

    Catalog entries are authored once and shared read-only between every
    schedule that references them.  ``cost`` is the budget consumed per
    spawn and must be positive; the catalog loader enforces that.
    """

    # -- identity --
    type_id: str
    cost: float
    scaling: ScalingProfile = ScalingProfile.STANDARD
    display_name: str = ""
    tier: UnitTier = UnitTier.BASIC
    family: str = "grunt"
    traits: UnitTrait = UnitTrait.NONE

    # -- lifecycle --
    unlock_wave: int = 1
    replace_family_from_wave: int = 0  # 0 = never replaces its family's basics

    # -- spawn weight --
    weight: Curve = field(default_factory=lambda: ConstantCurve(1.0))

    # -- stats --
    base: BaseStats = field(default_factory=BaseStats)
    rewards: BaseRewards = field(default_factory=BaseRewards)

    # -- helpers --

    @property
    def is_elite(self) -> bool:
        return self.tier is UnitTier.ELITE or self.scaling is ScalingProfile.ELITE

    @property
    def is_boss(self) -> bool:
        return self.tier is UnitTier.BOSS

    def is_unlocked(self, wave: int) -> bool:
        return wave >= self.unlock_wave

    def weight_at(self, wave: int) -> float:
        return self.weight.evaluate(wave)

    def scaled_stats(self, ctx: WaveContext) -> ScaledStats:
        """Apply the wave multipliers and this unit's scaling profile."""
        h_mod, s_mod, d_mod = _PROFILE_MODIFIERS[self.scaling]
        mult = ctx.reward_mult
        return ScaledStats(
            health=self.base.health * ctx.health_mult * h_mod,
            speed=self.base.speed * ctx.speed_mult * s_mod,
            damage=self.base.damage * ctx.damage_mult * d_mod,
            rewards=BaseRewards(
                fragments=_scale_reward(self.rewards.fragments, mult),
                cores=_scale_reward(self.rewards.cores, mult),
                prisms=_scale_reward(self.rewards.prisms, mult),
                loops=_scale_reward(self.rewards.loops, mult),
            ),
        )

    def __repr__(self) -> str:
        return f"<UnitType {self.type_id} cost={self.cost:g}>"
