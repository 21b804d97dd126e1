"""Unit type system -- authored descriptors and the catalog that holds them."""
from .base import (
    BaseRewards,
    BaseStats,
    ScaledStats,
    ScalingProfile,
    UnitTier,
    UnitTrait,
    UnitType,
)
from .builtin import BUILTIN_TYPES, builtin_catalog
from .catalog import UnitCatalog, UnitTypeSpec, load_catalog, unit_to_dict

__all__ = [
    "BUILTIN_TYPES",
    "BaseRewards",
    "BaseStats",
    "ScaledStats",
    "ScalingProfile",
    "UnitCatalog",
    "UnitTier",
    "UnitTrait",
    "UnitType",
    "UnitTypeSpec",
    "builtin_catalog",
    "load_catalog",
    "unit_to_dict",
]
