"""Schedule value types.

A schedule is a plain tuple of ScheduleEntry, ordered by non-decreasing
offset from wave start.  Tuples keep it immutable once a pattern returns.
"""

from __future__ import annotations

import heapq
from typing import Iterable, NamedTuple

from wavesched.units.base import UnitType


class ScheduleEntry(NamedTuple):
    offset: float  # seconds from wave start
    unit: UnitType


Schedule = tuple[ScheduleEntry, ...]

EMPTY_SCHEDULE: Schedule = ()


def total_cost(schedule: Iterable[ScheduleEntry]) -> float:
    return float(sum(e.unit.cost for e in schedule))


def is_ordered(schedule: Schedule) -> bool:
    return all(a.offset <= b.offset for a, b in zip(schedule, schedule[1:]))


def merge_schedules(*schedules: Schedule) -> Schedule:
    """Merge already-ordered schedules by offset.

    Ties keep argument order, so earlier schedules spawn first.
    """
    return tuple(heapq.merge(*schedules, key=lambda e: e.offset))
