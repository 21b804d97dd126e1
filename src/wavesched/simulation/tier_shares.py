"""TierShares -- fraction of each wave's budget reserved per roster tier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wavesched.curves import Curve, LinearCurve, parse_curve

# Used when a scenario does not configure shares at all
FALLBACK_SHARES = (0.6, 0.3, 0.1)


def _clamp01(v: float) -> float:
    return min(1.0, max(0.0, v))


@dataclass(frozen=True)
class TierShares:
    """Basic/advanced/elite budget shares by wave.

    Shares may sum to less than 1 (the rest of the budget goes unspent) but
    never more: an oversubscribed wave is renormalized.
    """

    basic: Curve = field(default_factory=lambda: LinearCurve.between(1, 0.85, 100, 0.40))
    advanced: Curve = field(default_factory=lambda: LinearCurve.between(1, 0.15, 100, 0.35))
    elite: Curve = field(default_factory=lambda: LinearCurve.between(1, 0.00, 100, 0.20))

    def shares(self, wave: int) -> tuple[float, float, float]:
        b = _clamp01(self.basic.evaluate(wave))
        a = _clamp01(self.advanced.evaluate(wave))
        e = _clamp01(self.elite.evaluate(wave))
        total = b + a + e
        if total > 1.0:
            b, a, e = b / total, a / total, e / total
        return b, a, e

    def to_dict(self) -> dict[str, Any]:
        return {
            "basic": self.basic.to_dict(),
            "advanced": self.advanced.to_dict(),
            "elite": self.elite.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TierShares:
        defaults = cls()
        return cls(
            basic=parse_curve(data["basic"]) if "basic" in data else defaults.basic,
            advanced=parse_curve(data["advanced"]) if "advanced" in data else defaults.advanced,
            elite=parse_curve(data["elite"]) if "elite" in data else defaults.elite,
        )
