"""UnitCatalog -- registry of authored unit types plus JSON loading.

The catalog is the authoring side of the system: it validates entries
(positive cost, known tiers and profiles) so the scheduling core can trust
what it is handed.  Schedules only ever read catalog entries.

Usage:
    catalog = load_catalog("scenarios/catalog.json")
    grunt = catalog.get("grunt")
    elite = catalog.elite_variant(grunt, wave=12)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from wavesched.curves import CurveInput
from wavesched.units.base import (
    BaseRewards,
    BaseStats,
    ScalingProfile,
    UnitTier,
    UnitTrait,
    UnitType,
)


class UnitTypeSpec(BaseModel):
    """Schema of one catalog entry as authored in JSON."""

    model_config = ConfigDict(extra="forbid")

    type_id: str = Field(min_length=1)
    cost: float = Field(gt=0)
    scaling: ScalingProfile = ScalingProfile.STANDARD
    display_name: str = ""
    tier: UnitTier = UnitTier.BASIC
    family: str = "grunt"
    traits: list[str] = Field(default_factory=list)
    unlock_wave: int = Field(default=1, ge=1)
    replace_family_from_wave: int = Field(default=0, ge=0)
    weight: CurveInput = Field(default=1.0, validate_default=True)
    health: float = Field(default=10.0, gt=0)
    speed: float = Field(default=2.0, ge=0)
    damage: float = Field(default=1.0, ge=0)
    fragments: int = Field(default=1, ge=0)
    cores: int = Field(default=0, ge=0)
    prisms: int = Field(default=0, ge=0)
    loops: int = Field(default=0, ge=0)

    def to_unit(self) -> UnitType:
        traits = UnitTrait.NONE
        for name in self.traits:
            try:
                traits |= UnitTrait[name.upper()]
            except KeyError:
                raise ValueError(f"{self.type_id}: unknown trait {name!r}") from None
        return UnitType(
            type_id=self.type_id,
            cost=self.cost,
            scaling=self.scaling,
            display_name=self.display_name or self.type_id.replace("_", " ").title(),
            tier=self.tier,
            family=self.family,
            traits=traits,
            unlock_wave=self.unlock_wave,
            replace_family_from_wave=self.replace_family_from_wave,
            weight=self.weight,
            base=BaseStats(health=self.health, speed=self.speed, damage=self.damage),
            rewards=BaseRewards(
                fragments=self.fragments,
                cores=self.cores,
                prisms=self.prisms,
                loops=self.loops,
            ),
        )


def unit_to_dict(unit: UnitType) -> dict[str, Any]:
    return {
        "type_id": unit.type_id,
        "cost": unit.cost,
        "scaling": unit.scaling.value,
        "display_name": unit.display_name,
        "tier": unit.tier.value,
        "family": unit.family,
        "traits": [t.name.lower() for t in UnitTrait if t.value and unit.traits.has(t)],
        "unlock_wave": unit.unlock_wave,
        "replace_family_from_wave": unit.replace_family_from_wave,
        "weight": unit.weight.to_dict(),
        "health": unit.base.health,
        "speed": unit.base.speed,
        "damage": unit.base.damage,
        "fragments": unit.rewards.fragments,
        "cores": unit.rewards.cores,
        "prisms": unit.rewards.prisms,
        "loops": unit.rewards.loops,
    }


class UnitCatalog:
    """Ordered registry of unit types keyed by ``type_id``."""

    def __init__(self, units: Iterable[UnitType] = ()) -> None:
        self._units: dict[str, UnitType] = {}
        for unit in units:
            self.register(unit)

    def register(self, unit: UnitType) -> None:
        if unit.type_id in self._units:
            raise ValueError(f"Duplicate unit type_id: {unit.type_id!r}")
        self._units[unit.type_id] = unit

    def get(self, type_id: str) -> UnitType:
        try:
            return self._units[type_id]
        except KeyError:
            raise KeyError(f"Unknown unit type: {type_id!r}") from None

    def all(self) -> list[UnitType]:
        return list(self._units.values())

    def by_tier(self, tier: UnitTier) -> list[UnitType]:
        return [u for u in self._units.values() if u.tier is tier]

    def family(self, family: str) -> list[UnitType]:
        return [u for u in self._units.values() if u.family == family]

    def elite_variant(self, unit: UnitType, wave: int) -> UnitType | None:
        """Elite unit of ``unit``'s family unlocked at ``wave``.

        Later catalog entries win over earlier ones.  Returns None when the
        family has no unlocked elite or ``unit`` is itself elite.
        """
        if unit.is_elite:
            return None
        candidate = None
        for other in self._units.values():
            if other is unit or other.family != unit.family:
                continue
            if other.is_elite and other.is_unlocked(wave) and not other.is_boss:
                candidate = other
        return candidate

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._units

    def __iter__(self) -> Iterator[UnitType]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def to_list(self) -> list[dict[str, Any]]:
        return [unit_to_dict(u) for u in self._units.values()]

    @classmethod
    def from_list(cls, entries: list[dict[str, Any]]) -> UnitCatalog:
        """Validate raw entries and build a catalog.

        Raises:
            pydantic.ValidationError: If an entry violates the schema.
            ValueError: On unknown traits or duplicate type ids.
        """
        return cls(UnitTypeSpec.model_validate(e).to_unit() for e in entries)


def load_catalog(path: str | Path) -> UnitCatalog:
    """Load a catalog from a JSON file.

    The file holds either a list of entries or ``{"catalog": [...]}``.

    Raises:
        FileNotFoundError: If path does not exist.
        json.JSONDecodeError: If file is not valid JSON.
        pydantic.ValidationError: If an entry is malformed.
    """
    with open(path) as f:
        data = json.load(f)
    entries = data["catalog"] if isinstance(data, dict) else data
    catalog = UnitCatalog.from_list(entries)
    logger.info(f"Unit catalog: loaded {len(catalog)} types from {path}")
    return catalog
