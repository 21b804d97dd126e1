"""Wave-indexed curves.

LinearCurve   -- piecewise-linear keys, clamped outside the key range
ConstantCurve -- the same value at every wave

Designers author curves as a handful of ``(wave, value)`` keys; everything
that scales with wave number (budget, duration, elite chance, tier shares,
spawn weights) evaluates one of these.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Protocol, Sequence

import numpy as np
from pydantic import AfterValidator, TypeAdapter


class Curve(Protocol):
    def evaluate(self, x: float) -> float: ...

    def to_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class LinearCurve:
    """Piecewise-linear curve through ``keys``.

    Values before the first key or after the last one hold the end value.
    """

    keys: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if not self.keys:
            raise ValueError("LinearCurve needs at least one key")
        ordered = tuple(sorted((float(x), float(y)) for x, y in self.keys))
        object.__setattr__(self, "keys", ordered)

    @classmethod
    def between(cls, x0: float, y0: float, x1: float, y1: float) -> LinearCurve:
        return cls(((x0, y0), (x1, y1)))

    def evaluate(self, x: float) -> float:
        xs = [k[0] for k in self.keys]
        ys = [k[1] for k in self.keys]
        return float(np.interp(float(x), xs, ys))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "linear", "keys": [list(k) for k in self.keys]}


@dataclass(frozen=True)
class ConstantCurve:
    value: float

    def evaluate(self, x: float) -> float:
        return float(self.value)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "constant", "value": self.value}


def _parse_keys(keys: Any) -> tuple[tuple[float, float], ...]:
    if not isinstance(keys, (list, tuple)):
        raise ValueError(f"Curve keys must be a list of [x, y] pairs, got {keys!r}")
    parsed = []
    for key in keys:
        try:
            x, y = key
            parsed.append((float(x), float(y)))
        except (TypeError, ValueError):
            raise ValueError(f"Curve key must be an [x, y] pair, got {key!r}") from None
    return tuple(parsed)


def curve_from_dict(data: dict[str, Any] | float | int | Sequence) -> Curve:
    """Build a curve from its serialized form.

    Accepts a bare number (constant), a list of ``[x, y]`` keys (linear), or
    a dict produced by ``to_dict()``.

    Raises:
        ValueError: If ``data`` is not one of those forms.
    """
    if isinstance(data, bool):
        raise ValueError(f"Cannot build a curve from {data!r}")
    if isinstance(data, (int, float)):
        return ConstantCurve(float(data))
    if isinstance(data, (list, tuple)):
        return LinearCurve(_parse_keys(data))
    if not isinstance(data, dict):
        raise ValueError(f"Cannot build a curve from {data!r}")

    kind = data.get("type", "linear")
    if kind == "constant":
        try:
            return ConstantCurve(float(data["value"]))
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Constant curve needs a numeric 'value': {data!r}") from None
    if kind == "linear":
        if "keys" not in data:
            raise ValueError(f"Linear curve needs 'keys': {data!r}")
        return LinearCurve(_parse_keys(data["keys"]))
    raise ValueError(f"Unknown curve type: {kind!r}")


# Curve field type for pydantic models; a malformed curve fails validation.
CurveInput = Annotated[Any, AfterValidator(curve_from_dict)]

_curve_adapter: TypeAdapter[Curve] = TypeAdapter(CurveInput)


def parse_curve(data: Any) -> Curve:
    """``curve_from_dict`` for authored files.

    Raises:
        pydantic.ValidationError: If ``data`` is not a valid curve.
    """
    return _curve_adapter.validate_python(data)
