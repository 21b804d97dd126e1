"""WaveTimeline -- walks a planned schedule as wave time elapses.

The timeline never instantiates anything.  Whatever drives the simulation
calls ``advance(elapsed)`` every tick and spawns the entries it gets back;
each entry is handed out exactly once, in schedule order.

Threat reporting mirrors what a HUD needs: how much of the wave's budget
is still queued, and how that compares to what is already on the field.
"""

from __future__ import annotations

from dataclasses import dataclass

from .planner import WavePlan
from .schedule import ScheduleEntry


@dataclass(frozen=True)
class ThreatSnapshot:
    active: float
    scheduled: float
    total: float

    @property
    def remaining_normalized(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(1.0, max(0.0, (self.active + self.scheduled) / self.total))


class WaveTimeline:
    """Playback cursor over one WavePlan."""

    def __init__(self, plan: WavePlan) -> None:
        self.plan = plan
        self._index = 0
        self._elapsed = 0.0

    @property
    def index(self) -> int:
        return self._index

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def is_exhausted(self) -> bool:
        return self._index >= len(self.plan.schedule)

    @property
    def is_over(self) -> bool:
        return self._elapsed >= self.plan.duration

    @property
    def spawn_progress(self) -> float:
        n = len(self.plan.schedule)
        if n == 0:
            return 0.0
        return min(1.0, self._index / n)

    @property
    def time_progress(self) -> float:
        if self.plan.duration <= 0:
            return 0.0
        return min(1.0, self._elapsed / self.plan.duration)

    def time_remaining(self) -> float:
        return max(0.0, self.plan.duration - self._elapsed)

    def advance(self, elapsed: float) -> list[ScheduleEntry]:
        """Entries due at ``elapsed`` seconds that were not handed out yet.

        ``elapsed`` going backwards is treated as no time passing.
        """
        self._elapsed = max(self._elapsed, float(elapsed))
        schedule = self.plan.schedule
        start = self._index
        while self._index < len(schedule) and schedule[self._index].offset <= self._elapsed:
            self._index += 1
        return list(schedule[start:self._index])

    def remaining_budget(self) -> float:
        return float(sum(max(0.0, e.unit.cost) for e in self.plan.schedule[self._index:]))

    def threat_snapshot(self, active_threat: float = 0.0) -> ThreatSnapshot:
        """Active and queued threat against the wave budget.

        The total is raised to ``active + scheduled`` when promotions pushed
        the queue past the budget, so the ratio stays within 0..1.
        """
        scheduled = self.remaining_budget()
        total = max(1e-4, self.plan.budget)
        combined = active_threat + scheduled
        if combined > total:
            total = combined
        return ThreatSnapshot(active=active_threat, scheduled=scheduled, total=total)

    def threat_remaining_normalized(self, active_threat: float = 0.0) -> float:
        if self.plan.budget <= 0:
            return 0.0
        value = (active_threat + self.remaining_budget()) / self.plan.budget
        return min(1.0, max(0.0, value))
