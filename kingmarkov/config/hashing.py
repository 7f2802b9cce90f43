"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from kingmarkov.config.experiment import SimulationConfig

# Fields that do not change the single walk a config produces: run labels
# and the multi-chain settings.
_NON_WALK_FIELDS = (
    "description",
    "tags",
    "walk.n_chains",
    "walk.randomize_start",
)


def _remove_nested(d: dict[str, Any], field_path: str) -> None:
    """Remove a dotted-path key such as "walk.n_chains" from a nested dict."""
    *parents, leaf = field_path.split(".")
    for part in parents:
        d = d.get(part)
        if not isinstance(d, dict):
            return
    d.pop(leaf, None)


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of dotted field paths to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for field_path in exclude_fields or []:
        _remove_nested(d, field_path)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def walk_config_hash(config: SimulationConfig) -> str:
    """Hash of everything that determines the single walk.

    Configs differing only in labels or chain settings share a hash,
    so they share cached trajectories.
    """
    return config_hash(config, exclude_fields=list(_NON_WALK_FIELDS))


def full_config_hash(config: SimulationConfig) -> str:
    """Hash for full run identity, labels included."""
    return config_hash(config)
