"""Tests for the simulation configuration system."""

import json
import re
from dataclasses import FrozenInstanceError, replace

import dacite
import pytest

from kingmarkov.config import (
    DEFAULT_CONFIG,
    ArchipelagoConfig,
    SimulationConfig,
    WalkConfig,
    config_from_json,
    config_hash,
    config_to_json,
    full_config_hash,
    population_weights,
    walk_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG is the worked King Markov example."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.walk.num_steps == 100_000
        assert DEFAULT_CONFIG.archipelago.n_islands == 10
        assert DEFAULT_CONFIG.walk.start == 10
        assert DEFAULT_CONFIG.archipelago.weighting == "proportional"
        assert DEFAULT_CONFIG.walk.n_chains == 1
        assert DEFAULT_CONFIG.seed == 42


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_walk_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.walk.start = 1  # type: ignore[misc]


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_round_trip_tags(self):
        cfg = replace(DEFAULT_CONFIG, tags=("chapter9", "demo"))
        restored = config_from_json(config_to_json(cfg))
        assert restored.tags == ("chapter9", "demo")

    def test_partial_json_uses_defaults(self):
        cfg = config_from_json(json.dumps({"walk": {"num_steps": 50, "start": 3}}))
        assert cfg.walk.num_steps == 50
        assert cfg.walk.start == 3
        assert cfg.archipelago.n_islands == 10
        assert cfg.seed == 42

    def test_unknown_key_rejected(self):
        with pytest.raises(dacite.UnexpectedDataError):
            config_from_json(json.dumps({"bogus": 1}))

    def test_wrong_type_rejected(self):
        with pytest.raises(dacite.WrongTypeError):
            config_from_json(json.dumps({"seed": "abc"}))


class TestConfigHashing:
    """Walk hash ignores labels; full hash does not."""

    def test_walk_hash_ignores_labels(self):
        cfg2 = replace(DEFAULT_CONFIG, description="x", tags=("y",))
        assert walk_config_hash(DEFAULT_CONFIG) == walk_config_hash(cfg2)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_walk_hash_includes_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99)
        assert walk_config_hash(DEFAULT_CONFIG) != walk_config_hash(cfg2)

    def test_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert re.match(r"^[0-9a-f]{16}$", h)


class TestConfigValidation:
    """Cross-parameter validation catches invalid configs."""

    def test_start_outside_domain(self):
        with pytest.raises(ValueError, match="start"):
            SimulationConfig(walk=WalkConfig(start=11))

    def test_start_zero(self):
        with pytest.raises(ValueError, match="start"):
            SimulationConfig(walk=WalkConfig(start=0))

    def test_too_few_islands(self):
        with pytest.raises(ValueError, match="n_islands"):
            SimulationConfig(
                archipelago=ArchipelagoConfig(n_islands=1),
                walk=WalkConfig(start=1),
            )

    def test_unknown_weighting(self):
        with pytest.raises(ValueError, match="weighting"):
            SimulationConfig(archipelago=ArchipelagoConfig(weighting="cubic"))

    def test_negative_steps(self):
        with pytest.raises(ValueError, match="num_steps"):
            SimulationConfig(walk=WalkConfig(num_steps=-5))

    def test_zero_chains(self):
        with pytest.raises(ValueError, match="n_chains"):
            SimulationConfig(walk=WalkConfig(n_chains=0))

    def test_zero_steps_allowed(self):
        cfg = SimulationConfig(walk=WalkConfig(num_steps=0))
        assert cfg.walk.num_steps == 0


class TestPopulationWeights:
    """Named weightings resolve to population functions."""

    def test_proportional(self):
        f = population_weights(ArchipelagoConfig(weighting="proportional"))
        assert [f(k) for k in (1, 5, 10)] == [1.0, 5.0, 10.0]

    def test_uniform(self):
        f = population_weights(ArchipelagoConfig(weighting="uniform"))
        assert {f(k) for k in range(1, 11)} == {1.0}

    def test_inverse(self):
        f = population_weights(ArchipelagoConfig(weighting="inverse"))
        assert f(4) == pytest.approx(0.25)
