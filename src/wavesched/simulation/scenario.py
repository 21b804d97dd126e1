"""WaveScenario -- catalog, round profile and tier shares in one JSON file.

Usage:
    scenario = load_wave_scenario("scenarios/default_round.json")
    planner = scenario.planner()
    plan = planner.plan(12)

File layout (everything but ``catalog`` is optional):

    {
      "scenario_id": "default",
      "name": "Default Round",
      "seed": 12345,
      "catalog": [{"type_id": "grunt", "cost": 1, ...}, ...],
      "round": {"base_wave_duration": 30, "budget_curve": [[1, 12], [100, 600]]},
      "tier_shares": {"basic": [[1, 0.85], [100, 0.4]]}
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from wavesched.units.catalog import UnitCatalog

from .planner import WavePlanner
from .round_profile import RoundProfile
from .tier_shares import TierShares


@dataclass
class WaveScenario:
    scenario_id: str
    name: str
    catalog: UnitCatalog
    profile: RoundProfile = field(default_factory=RoundProfile)
    shares: Optional[TierShares] = None
    seed: Optional[int] = None
    description: str = ""

    def planner(self, **kwargs) -> WavePlanner:
        kwargs.setdefault("base_seed", self.seed)
        return WavePlanner(
            profile=self.profile,
            catalog=self.catalog,
            shares=self.shares,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "scenario_id": self.scenario_id,
            "name": self.name,
            "description": self.description,
            "catalog": self.catalog.to_list(),
            "round": self.profile.to_dict(),
        }
        if self.shares is not None:
            out["tier_shares"] = self.shares.to_dict()
        if self.seed is not None:
            out["seed"] = self.seed
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WaveScenario:
        shares = data.get("tier_shares")
        return cls(
            scenario_id=data.get("scenario_id", "scenario"),
            name=data.get("name", data.get("scenario_id", "scenario")),
            description=data.get("description", ""),
            catalog=UnitCatalog.from_list(data["catalog"]),
            profile=RoundProfile.from_dict(data.get("round", {})),
            shares=TierShares.from_dict(shares) if shares is not None else None,
            seed=data.get("seed"),
        )


def load_wave_scenario(path: str | Path) -> WaveScenario:
    """Load a WaveScenario from a JSON file.

    Raises:
        FileNotFoundError: If path does not exist.
        json.JSONDecodeError: If file is not valid JSON.
        KeyError: If ``catalog`` is missing or ``round`` has unknown fields.
        pydantic.ValidationError: If a catalog entry is malformed.
    """
    with open(path) as f:
        data = json.load(f)
    scenario = WaveScenario.from_dict(data)
    logger.info(
        f"Scenario '{scenario.scenario_id}': {len(scenario.catalog)} unit types from {path}"
    )
    return scenario
