"""Shared fixtures for wavesched tests."""

from __future__ import annotations

import pytest

from wavesched.simulation.context import WaveContext
from wavesched.units.base import UnitType


class ScriptedStream:
    """RandomStream that replays fixed draws and counts calls.

    Index draws are taken modulo ``n``.  Once a script runs out, indices
    fall back to 0 and unit draws to ``default_unit``.
    """

    def __init__(self, units=(), indices=(), default_unit: float = 0.5) -> None:
        self._units = list(units)
        self._indices = list(indices)
        self.default_unit = default_unit
        self.unit_calls = 0
        self.index_calls = 0

    def next_index(self, n: int) -> int:
        self.index_calls += 1
        value = self._indices.pop(0) if self._indices else 0
        return value % n

    def next_unit(self) -> float:
        self.unit_calls += 1
        return self._units.pop(0) if self._units else self.default_unit


@pytest.fixture
def scripted():
    """Factory for ScriptedStream instances."""
    return ScriptedStream


@pytest.fixture
def make_ctx():
    """Build a WaveContext around any stream."""
    def _make(rng, **kwargs) -> WaveContext:
        return WaveContext(rng=rng, **kwargs)
    return _make


@pytest.fixture
def unit_factory():
    """Build throwaway unit types with just an id and a cost."""
    def _make(type_id: str = "u", cost: float = 1.0, **kwargs) -> UnitType:
        return UnitType(type_id=type_id, cost=cost, **kwargs)
    return _make
