"""Wave scheduling -- patterns, rosters, round profiles and playback.

Package layout:
  rng.py            -- RandomStream capability + numpy/stdlib adapters
  context.py        -- WaveContext handed to every pattern
  schedule.py       -- ScheduleEntry / Schedule value types
  patterns/         -- SpawnPattern interface and built-in strategies
  roster.py         -- tier pools, promotion, boss eligibility
  tier_shares.py    -- per-tier budget split
  round_profile.py  -- duration/budget/multipliers by wave
  planner.py        -- WavePlanner (one WavePlan per wave)
  timeline.py       -- WaveTimeline (plays a plan back over time)
  scenario.py       -- JSON scenario loader
"""
from .context import WaveContext
from .patterns import (
    BossPattern,
    ContinuousPattern,
    SpawnPattern,
    WeightedPattern,
    create_pattern,
    pattern_names,
    register_pattern,
)
from .planner import WavePlan, WavePlanner
from .rng import NumpyRandomStream, PyRandomStream, RandomStream, seeded_stream
from .roster import TierPools, build_tier_pools, eligible_bosses, maybe_promote
from .round_profile import RoundProfile
from .scenario import WaveScenario, load_wave_scenario
from .schedule import EMPTY_SCHEDULE, Schedule, ScheduleEntry, merge_schedules, total_cost
from .tier_shares import TierShares
from .timeline import ThreatSnapshot, WaveTimeline

__all__ = [
    "BossPattern",
    "ContinuousPattern",
    "EMPTY_SCHEDULE",
    "NumpyRandomStream",
    "PyRandomStream",
    "RandomStream",
    "RoundProfile",
    "Schedule",
    "ScheduleEntry",
    "SpawnPattern",
    "ThreatSnapshot",
    "TierPools",
    "TierShares",
    "WaveContext",
    "WavePlan",
    "WavePlanner",
    "WaveScenario",
    "WaveTimeline",
    "WeightedPattern",
    "build_tier_pools",
    "create_pattern",
    "eligible_bosses",
    "load_wave_scenario",
    "maybe_promote",
    "merge_schedules",
    "pattern_names",
    "register_pattern",
    "seeded_stream",
    "total_cost",
]
