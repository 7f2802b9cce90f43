"""Simulation configuration with frozen, hashable, serializable dataclasses."""

from kingmarkov.config.experiment import (
    ArchipelagoConfig,
    SimulationConfig,
    WalkConfig,
    WEIGHTINGS,
)
from kingmarkov.config.defaults import DEFAULT_CONFIG
from kingmarkov.config.hashing import config_hash, full_config_hash, walk_config_hash
from kingmarkov.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)
from kingmarkov.config.weights import population_weights

__all__ = [
    "ArchipelagoConfig",
    "SimulationConfig",
    "WalkConfig",
    "WEIGHTINGS",
    "DEFAULT_CONFIG",
    "config_hash",
    "full_config_hash",
    "walk_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
    "population_weights",
]
