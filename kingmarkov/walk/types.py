"""Trajectory data structures for Metropolis walks."""

from dataclasses import dataclass

import numpy as np


class DomainError(ValueError):
    """Raised when walk inputs fall outside the island domain.

    Covers an out-of-range start island, a non-positive population
    weight, and a domain or step count that cannot form a walk.
    """


@dataclass(frozen=True)
class WalkResult:
    """Immutable container for a single Metropolis trajectory.

    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__.
    """

    positions: np.ndarray  # int64 array of shape (num_steps,), values in 1..N
    num_steps: int
    domain_size: int
    start: int
    seed: int
    n_accepted: int

    @property
    def acceptance_rate(self) -> float:
        """Fraction of proposals that were accepted."""
        if self.num_steps == 0:
            return 0.0
        return self.n_accepted / self.num_steps


@dataclass(frozen=True)
class ChainSet:
    """Several independent trajectories sharing one configuration."""

    positions: np.ndarray  # int64 array of shape (n_chains, num_steps)
    starts: np.ndarray  # int64 array of per-chain start islands
    chain_seeds: np.ndarray  # int64 array of per-chain seeds
    n_accepted: np.ndarray  # int64 array of per-chain accepted moves

    @property
    def n_chains(self) -> int:
        return int(self.positions.shape[0])
