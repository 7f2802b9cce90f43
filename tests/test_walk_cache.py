"""Tests for trajectory caching: key computation, save/load, cache hits."""

from dataclasses import replace
from unittest.mock import patch

import numpy as np

from kingmarkov.config.experiment import SimulationConfig, WalkConfig
from kingmarkov.walk.cache import (
    generate_or_load_walk,
    load_walk,
    save_walk,
    walk_cache_key,
)
from kingmarkov.walk.generator import run_metropolis


def _small_config(seed: int = 42) -> SimulationConfig:
    return SimulationConfig(walk=WalkConfig(num_steps=500, start=10), seed=seed)


class TestWalkCacheKey:
    """Cache keys track trajectory-determining fields only."""

    def test_key_format(self) -> None:
        key = walk_cache_key(_small_config())
        assert key.endswith("_N10_W500")
        assert len(key.split("_")[0]) == 16

    def test_seed_changes_key(self) -> None:
        assert walk_cache_key(_small_config(1)) != walk_cache_key(_small_config(2))

    def test_labels_do_not_change_key(self) -> None:
        config = _small_config()
        labelled = replace(config, description="demo", tags=("a", "b"))
        assert walk_cache_key(config) == walk_cache_key(labelled)

    def test_chain_settings_do_not_change_key(self) -> None:
        config = _small_config()
        chained = replace(
            config,
            walk=replace(config.walk, n_chains=4, randomize_start=True),
        )
        assert walk_cache_key(config) == walk_cache_key(chained)

    def test_start_changes_key(self) -> None:
        config = _small_config()
        moved = replace(config, walk=replace(config.walk, start=3))
        assert walk_cache_key(config) != walk_cache_key(moved)


class TestSaveLoad:
    """NPZ storage preserves the full WalkResult."""

    def test_round_trip(self, tmp_path) -> None:
        config = _small_config()
        result = run_metropolis(config)
        path = save_walk(result, config, tmp_path)
        assert path.exists()
        assert path.name == "walk.npz"
        assert list(path.parent.iterdir()) == [path]

        loaded = load_walk(config, tmp_path)
        assert loaded is not None
        assert np.array_equal(loaded.positions, result.positions)
        assert loaded.num_steps == result.num_steps
        assert loaded.domain_size == result.domain_size
        assert loaded.start == result.start
        assert loaded.seed == result.seed
        assert loaded.n_accepted == result.n_accepted

    def test_round_trip_seed_outside_int64(self, tmp_path) -> None:
        for seed in (-(2**70), 2**64 + 5):
            config = _small_config(seed=seed)
            save_walk(run_metropolis(config), config, tmp_path)
            loaded = load_walk(config, tmp_path)
            assert loaded is not None
            assert loaded.seed == seed

    def test_miss_returns_none(self, tmp_path) -> None:
        assert load_walk(_small_config(), tmp_path) is None


class TestGenerateOrLoad:
    """Second call is served from cache without simulating."""

    def test_cache_hit_skips_simulation(self, tmp_path) -> None:
        config = _small_config()
        first = generate_or_load_walk(config, tmp_path)

        with patch("kingmarkov.walk.cache.run_metropolis") as mock_run:
            second = generate_or_load_walk(config, tmp_path)
            mock_run.assert_not_called()

        assert np.array_equal(first.positions, second.positions)
