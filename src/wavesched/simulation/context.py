"""WaveContext -- per-wave randomness and tunables handed to a pattern."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .rng import RandomStream

if TYPE_CHECKING:
    from wavesched.units.catalog import UnitCatalog


@dataclass
class WaveContext:
    """Everything a spawn pattern may consult besides its explicit inputs.

    Built once per wave and passed to exactly one ``build`` call.  The
    ``rng`` is owned by that call; two waves scheduled at the same time need
    two contexts.
    """

    rng: RandomStream
    elite_chance: float = 0.0
    wave: int = 1
    health_mult: float = 1.0
    speed_mult: float = 1.0
    damage_mult: float = 1.0
    reward_mult: float = 1.0
    catalog: Optional[UnitCatalog] = None  # resolves elite variants / promotions

    def __post_init__(self) -> None:
        self.elite_chance = min(1.0, max(0.0, float(self.elite_chance)))

    def roll_elite(self) -> bool:
        """Draw one unit-interval sample against ``elite_chance``."""
        return self.rng.next_unit() < self.elite_chance
