#!/usr/bin/env python3
"""Print planned spawn schedules for a range of waves.

Uses the scenario file from --scenario (or WAVESCHED_SCENARIO_PATH), else
the catalog from WAVESCHED_CATALOG_PATH, else the built-in roster.

Usage:
    python3 scripts/preview_waves.py --first 1 --last 12
    python3 scripts/preview_waves.py --scenario scenarios/default_round.json --wave 10 --entries
    python3 scripts/preview_waves.py --pattern continuous --budget 40 --duration 30 --wave 5
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wavesched.config import settings
from wavesched.simulation import (
    WavePlanner,
    build_tier_pools,
    create_pattern,
    load_wave_scenario,
    pattern_names,
    total_cost,
)
from wavesched.units import builtin_catalog, load_catalog


def _build_planner(args: argparse.Namespace) -> WavePlanner:
    scenario_path = args.scenario or settings.scenario_path
    if scenario_path:
        scenario = load_wave_scenario(scenario_path)
        if args.seed is None:
            return scenario.planner()
        return scenario.planner(base_seed=args.seed)
    catalog = load_catalog(settings.catalog_path) if settings.catalog_path else builtin_catalog()
    return WavePlanner(catalog=catalog, base_seed=args.seed)


def _print_plan(plan, show_entries: bool) -> None:
    boss = f"  boss={plan.boss.type_id}" if plan.boss else ""
    print(
        f"wave {plan.wave:>3d}  {plan.duration:6.1f}s  budget={plan.budget:8.1f}  "
        f"spawns={plan.spawn_count:>4d}  cost={plan.scheduled_cost:8.1f}{boss}"
    )
    if show_entries:
        for entry in plan.schedule:
            print(f"    t={entry.offset:7.2f}  {entry.unit.type_id:<16s} cost={entry.unit.cost:g}")


def _preview_pattern(args: argparse.Namespace, planner: WavePlanner) -> None:
    """Run a single named pattern on the basic pool of one wave."""
    ctx = planner.context_for(args.wave)
    pool = build_tier_pools(ctx.wave, planner.catalog).basic
    params = {"spacing_adjust": args.spacing} if args.pattern == "continuous" else {}
    pattern = create_pattern(args.pattern, **params)
    schedule = pattern.build(ctx, args.duration, args.budget, pool)
    rows = [{"t": round(e.offset, 3), "unit": e.unit.type_id} for e in schedule]
    print(json.dumps({
        "pattern": args.pattern,
        "wave": ctx.wave,
        "spawns": len(schedule),
        "cost": total_cost(schedule),
        "schedule": rows,
    }, indent=2))


def main() -> int:
    parser = argparse.ArgumentParser(description="Preview wave spawn schedules")
    parser.add_argument("--scenario", type=Path, default=None, help="Scenario JSON file")
    parser.add_argument("--seed", type=int, default=None, help="Base seed (default from settings)")
    parser.add_argument("--first", type=int, default=1, help="First wave")
    parser.add_argument("--last", type=int, default=10, help="Last wave")
    parser.add_argument("--wave", type=int, default=None, help="Single wave (overrides --first/--last)")
    parser.add_argument("--entries", action="store_true", help="Print every schedule entry")
    parser.add_argument("--pattern", choices=pattern_names(), default=None,
                        help="Run one pattern directly instead of the full planner")
    parser.add_argument("--budget", type=float, default=20.0, help="Budget for --pattern")
    parser.add_argument("--duration", type=float, default=30.0, help="Wave duration for --pattern")
    parser.add_argument("--spacing", type=float, default=settings.spacing_adjust,
                        help="Spacing adjust for the continuous pattern")
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    try:
        planner = _build_planner(args)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Could not load scenario: {e}")
        return 1

    if args.pattern:
        args.wave = args.wave or 1
        _preview_pattern(args, planner)
        return 0

    first, last = (args.wave, args.wave) if args.wave else (args.first, args.last)
    for plan in planner.plan_range(first, last):
        _print_plan(plan, args.entries)
    return 0


if __name__ == "__main__":
    sys.exit(main())
