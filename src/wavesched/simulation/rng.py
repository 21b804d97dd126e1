"""Random stream capability injected into every wave.

Schedulers only need two primitives: a uniform index in ``[0, n)`` and a
uniform real in ``[0, 1)``.  Anything providing those can drive a wave,
which lets tests script exact draw sequences.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomStream(Protocol):
    def next_index(self, n: int) -> int:
        """Uniform integer in ``[0, n)``."""
        ...

    def next_unit(self) -> float:
        """Uniform float in ``[0, 1)``."""
        ...


class NumpyRandomStream:
    """RandomStream backed by ``numpy.random.Generator`` (the default)."""

    def __init__(self, generator: Optional[np.random.Generator] = None) -> None:
        self._gen = generator if generator is not None else np.random.default_rng()

    def next_index(self, n: int) -> int:
        return int(self._gen.integers(0, n))

    def next_unit(self) -> float:
        return float(self._gen.random())


class PyRandomStream:
    """RandomStream backed by the standard library ``random.Random``."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next_index(self, n: int) -> int:
        return self._rng.randrange(n)

    def next_unit(self) -> float:
        return self._rng.random()


def seeded_stream(seed: Optional[int]) -> NumpyRandomStream:
    """Deterministic stream for ``seed``; a live one when seed is None."""
    return NumpyRandomStream(np.random.default_rng(seed))
