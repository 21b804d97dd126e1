"""RoundProfile -- how duration, budget and difficulty grow wave by wave.

Architecture
------------
A round is an endless sequence of waves separated by short breaks.  The
profile answers, for any wave number:

  - how long the wave lasts (fixed, or from a curve)
  - how much spawn budget it gets
  - the health/speed/damage/reward multipliers applied to spawned units
  - the elite substitution chance
  - whether a boss joins the wave

Budget:
    budget(w) = max(min_budget, budget_curve(w) * growth ** (w * 0.15))

Scaling multipliers treat the curve sample as an exponent coefficient, so
designers author small key values and still get exponential growth:
    mult(w) = base ** (w * curve(w))       (1.0 when w or the sample is 0)
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from wavesched.curves import Curve, LinearCurve, parse_curve

_BUDGET_GROWTH_EXPONENT = 0.15


def _linear(x0: float, y0: float, x1: float, y1: float):
    return field(default_factory=lambda: LinearCurve.between(x0, y0, x1, y1))


def scaling_multiplier(curve: Curve, exponent_base: float, wave: int) -> float:
    base = max(1e-4, exponent_base)
    w = max(0.0, float(wave))
    sample = max(0.0, curve.evaluate(wave))
    if w == 0.0 or sample == 0.0:
        return 1.0
    return base ** (w * sample)


@dataclass(frozen=True)
class RoundProfile:
    # -- wave timeline --
    base_wave_duration: float = 30.0
    variable_wave_duration: bool = False
    wave_duration_curve: Curve = _linear(1, 30, 100, 45)
    break_duration: float = 5.0

    # -- budget (enemy points) --
    budget_curve: Curve = _linear(1, 12, 100, 600)
    budget_growth_factor: float = 1.10
    min_budget: float = 6.0

    # -- scaling curves (exponent coefficients) --
    health_curve: Curve = _linear(1, 1, 100, 18)
    speed_curve: Curve = _linear(1, 1, 100, 2.0)
    damage_curve: Curve = _linear(1, 1, 100, 7)
    reward_curve: Curve = _linear(1, 1, 100, 6)
    health_curve_base: float = 2.0
    speed_curve_base: float = 1.2
    damage_curve_base: float = 1.3
    reward_curve_base: float = 1.1

    # -- boss & elites --
    boss_every: int = 10
    elite_chance_curve: Curve = _linear(1, 0.0, 100, 0.3)

    def wave_duration(self, wave: int) -> float:
        if self.variable_wave_duration:
            return self.wave_duration_curve.evaluate(wave)
        return self.base_wave_duration

    def budget(self, wave: int) -> float:
        scaled = self.budget_curve.evaluate(wave) * (
            self.budget_growth_factor ** (wave * _BUDGET_GROWTH_EXPONENT)
        )
        return max(self.min_budget, scaled)

    def health_multiplier(self, wave: int) -> float:
        return scaling_multiplier(self.health_curve, self.health_curve_base, wave)

    def speed_multiplier(self, wave: int) -> float:
        return scaling_multiplier(self.speed_curve, self.speed_curve_base, wave)

    def damage_multiplier(self, wave: int) -> float:
        return scaling_multiplier(self.damage_curve, self.damage_curve_base, wave)

    def reward_multiplier(self, wave: int) -> float:
        return scaling_multiplier(self.reward_curve, self.reward_curve_base, wave)

    def elite_chance(self, wave: int) -> float:
        return min(1.0, max(0.0, self.elite_chance_curve.evaluate(wave)))

    def is_boss_wave(self, wave: int) -> bool:
        return self.boss_every > 0 and wave % self.boss_every == 0

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.to_dict() if hasattr(value, "evaluate") else value
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RoundProfile:
        """Build a profile; keys that are missing keep their defaults.

        Raises:
            KeyError: If ``data`` contains a key that is not a profile field.
            pydantic.ValidationError: If a ``*_curve`` value is not a valid curve.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise KeyError(f"Unknown round profile fields: {sorted(unknown)}")
        kwargs: dict[str, Any] = {}
        for name, value in data.items():
            kwargs[name] = parse_curve(value) if name.endswith("_curve") else value
        return cls(**kwargs)
