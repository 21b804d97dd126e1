"""Scenario JSON loading and the planner it builds."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from wavesched.simulation.scenario import WaveScenario, load_wave_scenario


pytestmark = pytest.mark.unit

SCENARIO_DIR = Path(__file__).parents[2] / "scenarios"


def _write(tmp_path, data) -> Path:
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data))
    return path


class TestDefaultScenario:
    def test_loads(self):
        scenario = load_wave_scenario(SCENARIO_DIR / "default_round.json")
        assert scenario.scenario_id == "default_round"
        assert scenario.seed == 12345
        assert len(scenario.catalog) == 6
        assert scenario.profile.boss_every == 10
        assert scenario.shares is not None

    def test_planner_uses_scenario_seed(self):
        scenario = load_wave_scenario(SCENARIO_DIR / "default_round.json")
        assert scenario.planner().base_seed == 12345
        assert scenario.planner(base_seed=3).base_seed == 3

    def test_boss_wave(self):
        plan = load_wave_scenario(SCENARIO_DIR / "default_round.json").planner().plan(10)
        assert plan.boss is not None
        assert plan.boss.type_id == "warden"

    def test_round_trip(self):
        scenario = load_wave_scenario(SCENARIO_DIR / "default_round.json")
        restored = WaveScenario.from_dict(scenario.to_dict())
        assert restored.catalog.all() == scenario.catalog.all()
        assert restored.profile == scenario.profile
        assert restored.shares == scenario.shares
        assert restored.seed == scenario.seed


class TestMinimalScenario:
    def test_defaults(self, tmp_path):
        scenario = load_wave_scenario(_write(tmp_path, {"catalog": [{"type_id": "grunt", "cost": 1}]}))
        assert scenario.scenario_id == "scenario"
        assert scenario.shares is None
        assert scenario.seed is None
        assert scenario.profile.base_wave_duration == 30.0


class TestInvalidScenario:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_wave_scenario(tmp_path / "missing.json")

    def test_missing_catalog(self, tmp_path):
        with pytest.raises(KeyError):
            load_wave_scenario(_write(tmp_path, {"scenario_id": "x"}))

    def test_bad_cost(self, tmp_path):
        with pytest.raises(ValidationError):
            load_wave_scenario(_write(tmp_path, {"catalog": [{"type_id": "g", "cost": -1}]}))

    def test_unknown_round_field(self, tmp_path):
        data = {"catalog": [{"type_id": "g", "cost": 1}], "round": {"waves_per_boss": 3}}
        with pytest.raises(KeyError, match="waves_per_boss"):
            load_wave_scenario(_write(tmp_path, data))

    def test_malformed_round_curve(self, tmp_path):
        data = {"catalog": [{"type_id": "g", "cost": 1}], "round": {"budget_curve": "steep"}}
        with pytest.raises(ValidationError):
            load_wave_scenario(_write(tmp_path, data))

    def test_malformed_tier_share_curve(self, tmp_path):
        data = {"catalog": [{"type_id": "g", "cost": 1}], "tier_shares": {"elite": {"type": "linear"}}}
        with pytest.raises(ValidationError):
            load_wave_scenario(_write(tmp_path, data))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_wave_scenario(path)
