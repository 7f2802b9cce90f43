"""Trajectory caching with config-hash-based keys and atomic NPZ storage.

Cache key computed from the trajectory-determining config parameters,
stored as .npz files in a shared cache directory. Positions and their
run metadata live in a single .npz archive, written to a temporary file
and renamed into place so readers never see a partial archive.
"""

import logging
import os
from pathlib import Path

import numpy as np

from kingmarkov.config.experiment import SimulationConfig
from kingmarkov.config.hashing import walk_config_hash
from kingmarkov.walk.generator import run_metropolis
from kingmarkov.walk.types import WalkResult

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/walks")


def walk_cache_key(config: SimulationConfig) -> str:
    """Cache key like "a1b2c3d4e5f6g7h8_N10_W100000".

    Any change to islands, weighting, walk length, start or seed changes
    the hash and so invalidates the cache. Labels and chain settings do not.
    """
    return (
        f"{walk_config_hash(config)}"
        f"_N{config.archipelago.n_islands}"
        f"_W{config.walk.num_steps}"
    )


def save_walk(
    result: WalkResult,
    config: SimulationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Save a trajectory and its metadata in a single .npz archive.

    Args:
        result: Walk to store.
        config: Configuration that produced the walk.
        cache_dir: Root cache directory.

    Returns:
        Path to the saved .npz file.
    """
    save_dir = Path(cache_dir) / walk_cache_key(config)
    save_dir.mkdir(parents=True, exist_ok=True)
    npz_path = save_dir / "walk.npz"

    tmp_path = save_dir / "walk.npz.tmp"
    with open(tmp_path, "wb") as f:
        np.savez_compressed(
            f,
            positions=result.positions,
            num_steps=np.array(result.num_steps),
            domain_size=np.array(result.domain_size),
            start=np.array(result.start),
            seed=np.array(str(result.seed)),
            n_accepted=np.array(result.n_accepted),
        )
    os.replace(tmp_path, npz_path)

    log.info("Walk saved to %s (%d weeks)", npz_path, result.num_steps)
    return npz_path


def load_walk(
    config: SimulationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> WalkResult | None:
    """Load a trajectory from cache if available.

    Returns:
        WalkResult if cache hit, None if cache miss.
    """
    npz_path = Path(cache_dir) / walk_cache_key(config) / "walk.npz"
    if not npz_path.exists():
        return None

    with np.load(npz_path) as data:
        result = WalkResult(
            positions=data["positions"],
            num_steps=int(data["num_steps"]),
            domain_size=int(data["domain_size"]),
            start=int(data["start"]),
            seed=int(data["seed"].item()),
            n_accepted=int(data["n_accepted"]),
        )

    log.info("Walk loaded from cache: %s (%d weeks)", npz_path, result.num_steps)
    return result


def generate_or_load_walk(
    config: SimulationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> WalkResult:
    """Load the walk for config from cache, or run it and cache the result."""
    cached = load_walk(config, cache_dir)
    if cached is not None:
        log.info("Walk cache hit")
        return cached

    log.info("Walk cache miss: simulating...")
    result = run_metropolis(config)
    save_walk(result, config, cache_dir)
    return result
