"""SpawnPattern -- the strategy interface every pacing pattern implements.

A pattern turns ``(context, wave_duration, budget, pool)`` into an ordered
schedule.  Patterns differ only in how they interpret budget and duration;
consumers never need to know which one produced a schedule.

Concrete patterns register themselves by name so configuration files can
refer to them:

    pattern = create_pattern("continuous", spacing_adjust=1.5)
    schedule = pattern.build(ctx, 30.0, 40.0, pool)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Sequence

from wavesched.units.base import UnitType

from ..context import WaveContext
from ..schedule import Schedule

_REGISTRY: dict[str, type[SpawnPattern]] = {}


def register_pattern(name: str) -> Callable[[type[SpawnPattern]], type[SpawnPattern]]:
    def deco(cls: type[SpawnPattern]) -> type[SpawnPattern]:
        cls.name = name
        _REGISTRY[name] = cls
        return cls
    return deco


def pattern_names() -> list[str]:
    return sorted(_REGISTRY)


def create_pattern(name: str, **params) -> SpawnPattern:
    """Instantiate the pattern registered as ``name``.

    Raises:
        KeyError: If no pattern has that name.
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown spawn pattern {name!r}; known: {', '.join(pattern_names())}"
        ) from None
    return cls(**params)


class SpawnPattern(ABC):
    """Strategy that builds one wave's spawn schedule.

    Implementations must:
      - touch no state other than ``ctx.rng``
      - be deterministic for a fixed draw sequence
      - return an empty schedule, never raise, for degenerate input
      - return entries ordered by offset, each within ``[0, wave_duration)``
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def build(
        self,
        ctx: WaveContext,
        wave_duration: float,
        budget: float,
        pool: Sequence[UnitType],
    ) -> Schedule:
        ...

    @staticmethod
    def is_degenerate(wave_duration: float, budget: float, pool: Sequence[UnitType]) -> bool:
        if not pool or not math.isfinite(budget) or not math.isfinite(wave_duration):
            return True
        return budget <= 0 or wave_duration <= 0

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
