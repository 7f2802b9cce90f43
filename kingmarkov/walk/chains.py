"""Independent multi-chain runs with per-chain seeds.

A master Generator seeded from config.seed hands out one seed per chain,
so every chain can be regenerated on its own with run_walk().
"""

import logging

import numpy as np

from kingmarkov.config.experiment import SimulationConfig
from kingmarkov.config.weights import population_weights
from kingmarkov.walk.generator import (
    _check_domain,
    _metropolis,
    make_rng,
    resolve_weights,
)
from kingmarkov.walk.types import ChainSet

log = logging.getLogger(__name__)


def run_chains(config: SimulationConfig, n_chains: int | None = None) -> ChainSet:
    """Run several independent Metropolis chains.

    Args:
        config: Simulation configuration. config.walk.randomize_start makes
            each chain draw its start island uniformly from 1..N.
        n_chains: Optional override for config.walk.n_chains.

    Returns:
        ChainSet with positions of shape (n_chains, num_steps).
    """
    if n_chains is None:
        n_chains = config.walk.n_chains
    if n_chains < 1:
        raise ValueError(f"n_chains must be >= 1, got {n_chains}")

    num_steps = config.walk.num_steps
    domain_size = config.archipelago.n_islands
    _check_domain(num_steps, domain_size, config.walk.start)
    weights = resolve_weights(population_weights(config.archipelago), domain_size)

    # Master RNG for per-chain seed generation
    master_rng = make_rng(config.seed)
    chain_seeds = master_rng.integers(0, 2**63, size=n_chains, dtype=np.int64)
    if config.walk.randomize_start:
        starts = master_rng.integers(1, domain_size + 1, size=n_chains, dtype=np.int64)
    else:
        starts = np.full(n_chains, config.walk.start, dtype=np.int64)

    log.info(
        "Running %d chains: W=%d, N=%d, randomize_start=%s",
        n_chains,
        num_steps,
        domain_size,
        config.walk.randomize_start,
    )

    positions = np.zeros((n_chains, num_steps), dtype=np.int64)
    n_accepted = np.zeros(n_chains, dtype=np.int64)
    for c in range(n_chains):
        rng = np.random.default_rng(int(chain_seeds[c]))
        positions[c], n_accepted[c] = _metropolis(
            num_steps, domain_size, int(starts[c]), weights, rng
        )
        log.debug(
            "Chain %d: start=%d, accepted=%d", c, int(starts[c]), int(n_accepted[c])
        )

    return ChainSet(
        positions=positions,
        starts=starts,
        chain_seeds=chain_seeds,
        n_accepted=n_accepted,
    )
