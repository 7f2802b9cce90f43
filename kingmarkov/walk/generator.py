"""Metropolis random walk over a cyclic archipelago of islands.

Implements the King Markov simulation: each week the king flips a coin to
propose a neighbouring island (wrapping around the ends of the chain) and
moves there with probability min(1, population(proposal) / population(current)).
The long-run fraction of weeks spent on each island converges to that
island's share of the total population.

Two entry points:
1. run_walk() - the bare sampler, returning the visited positions
2. run_metropolis() - config-driven wrapper returning a WalkResult
"""

import logging
from collections.abc import Callable, Sequence

import numpy as np

from kingmarkov.config.experiment import SimulationConfig
from kingmarkov.config.weights import population_weights
from kingmarkov.walk.types import DomainError, WalkResult

log = logging.getLogger(__name__)

Weight = Callable[[int], float] | Sequence[float] | np.ndarray


def resolve_weights(weight: Weight, domain_size: int) -> np.ndarray:
    """Evaluate a weight specification on every island.

    Args:
        weight: Either a function mapping island k (1..N) to its population,
            or a sequence of N populations where entry k-1 belongs to island k.
        domain_size: Number of islands N.

    Returns:
        float64 array of shape (N,) with weights[k - 1] == weight(k).

    Raises:
        DomainError: If any weight is not a finite, strictly positive number,
            or a weight sequence does not have exactly N entries.
    """
    if callable(weight):
        values = np.array(
            [float(weight(k)) for k in range(1, domain_size + 1)],
            dtype=np.float64,
        )
    else:
        values = np.asarray(weight, dtype=np.float64)
        if values.shape != (domain_size,):
            raise DomainError(
                f"weight sequence has shape {values.shape}, "
                f"expected ({domain_size},)"
            )

    bad = np.flatnonzero(~(np.isfinite(values) & (values > 0)))
    if bad.size > 0:
        k = int(bad[0]) + 1
        raise DomainError(
            f"weight({k}) = {values[bad[0]]} must be finite and > 0"
        )
    return values


def make_rng(seed: int) -> np.random.Generator:
    """Build a Generator from any Python int.

    numpy rejects negative seeds, so the seed is reduced modulo 2**64.
    Non-negative seeds below 2**64 are passed through unchanged.
    """
    return np.random.default_rng(int(seed) % 2**64)


def _check_domain(num_steps: int, domain_size: int, start: int) -> None:
    if num_steps < 0:
        raise DomainError(f"num_steps must be >= 0, got {num_steps}")
    if domain_size < 2:
        raise DomainError(f"domain_size must be >= 2, got {domain_size}")
    if not 1 <= start <= domain_size:
        raise DomainError(
            f"start ({start}) must be in 1..{domain_size}"
        )


def _metropolis(
    num_steps: int,
    domain_size: int,
    start: int,
    weights: np.ndarray,
    rng: np.random.Generator,
) -> tuple[np.ndarray, int]:
    """Run the walk loop on pre-validated inputs.

    Consumes exactly two draws per step from rng: the proposal coin flip,
    then the acceptance uniform.

    Returns:
        Tuple of (positions array, number of accepted moves).
    """
    positions = np.zeros(num_steps, dtype=np.int64)
    current = start
    n_accepted = 0

    for i in range(num_steps):
        # Record position entering this week
        positions[i] = current

        # Coin flip for an adjacent island, looping around the archipelago
        proposal = current + (1 if rng.integers(0, 2) else -1)
        if proposal < 1:
            proposal = domain_size
        elif proposal > domain_size:
            proposal = 1

        prob_move = min(1.0, weights[proposal - 1] / weights[current - 1])
        if rng.random() < prob_move:
            current = proposal
            n_accepted += 1

    return positions, n_accepted


def run_walk(
    num_steps: int,
    domain_size: int,
    start: int,
    weight: Weight,
    seed: int,
) -> np.ndarray:
    """Simulate a Metropolis walk on the cyclic domain {1..domain_size}.

    Identical arguments always reproduce an identical trajectory: the random
    source is a fresh numpy Generator seeded from ``seed`` and owned by this
    call.

    Args:
        num_steps: Number of weeks W to simulate. 0 yields an empty array.
        domain_size: Number of islands N (>= 2).
        start: Starting island in 1..N.
        weight: Population of each island, as a function or length-N sequence.
        seed: Seed for the call's random Generator.

    Returns:
        int64 array of shape (W,). Entry i is the island occupied at the
        start of week i.

    Raises:
        DomainError: If start is outside 1..N, any weight is non-positive,
            N < 2, or W < 0. Raised before any step is simulated.
    """
    _check_domain(num_steps, domain_size, start)
    weights = resolve_weights(weight, domain_size)
    rng = make_rng(seed)
    positions, _ = _metropolis(num_steps, domain_size, start, weights, rng)
    return positions


def run_metropolis(config: SimulationConfig, seed: int | None = None) -> WalkResult:
    """Run a single walk described by a SimulationConfig.

    Args:
        config: Simulation configuration.
        seed: Optional override for config.seed.

    Returns:
        WalkResult with positions and acceptance bookkeeping.
    """
    if seed is None:
        seed = config.seed
    num_steps = config.walk.num_steps
    domain_size = config.archipelago.n_islands
    start = config.walk.start

    _check_domain(num_steps, domain_size, start)
    weights = resolve_weights(population_weights(config.archipelago), domain_size)

    log.info(
        "Running Metropolis walk: W=%d, N=%d, start=%d, weighting=%s, seed=%d",
        num_steps,
        domain_size,
        start,
        config.archipelago.weighting,
        seed,
    )
    rng = make_rng(seed)
    positions, n_accepted = _metropolis(
        num_steps, domain_size, start, weights, rng
    )

    result = WalkResult(
        positions=positions,
        num_steps=num_steps,
        domain_size=domain_size,
        start=start,
        seed=seed,
        n_accepted=n_accepted,
    )
    log.info(
        "Walk complete: %d weeks, %d moves accepted (%.1f%%)",
        num_steps,
        n_accepted,
        100.0 * result.acceptance_rate,
    )
    return result
