"""Seed determinism self-check for the Metropolis walker.

The walker owns a numpy Generator per call, so there is no global RNG
state to set. This module only proves that a seed pins down the walk.
"""

import numpy as np

from kingmarkov.config.experiment import SimulationConfig
from kingmarkov.walk.generator import run_metropolis


def verify_seed_determinism(config: SimulationConfig, seed: int | None = None) -> bool:
    """Run the configured walk twice with the same seed and compare.

    Between the runs numpy's legacy global RNG is advanced, which must not
    disturb the walk. The global RNG state is restored before returning.

    Returns:
        True if both trajectories are identical.
    """
    global_state = np.random.get_state()
    try:
        first = run_metropolis(config, seed=seed)
        np.random.random(10)
        second = run_metropolis(config, seed=seed)
    finally:
        np.random.set_state(global_state)
    return (
        np.array_equal(first.positions, second.positions)
        and first.n_accepted == second.n_accepted
    )
