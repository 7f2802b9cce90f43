"""Visit frequencies and agreement with the target population distribution.

The Metropolis walk should spend a share of weeks on each island equal to
that island's share of the total population. These helpers turn a
trajectory into per-island counts and compare them with the target.
"""

import numpy as np
from scipy.stats import chisquare


def target_distribution(weights: np.ndarray) -> np.ndarray:
    """Normalize per-island weights into the stationary distribution.

    Args:
        weights: Positive weights, entry k-1 for island k.

    Returns:
        float64 array summing to 1. For weights 1..10 entry k-1 is k / 55.
    """
    weights = np.asarray(weights, dtype=np.float64)
    return weights / weights.sum()


def visit_counts(positions: np.ndarray, domain_size: int) -> np.ndarray:
    """Number of weeks spent on each island.

    Returns:
        int64 array of shape (domain_size,), entry k-1 for island k.

    Raises:
        ValueError: If any position lies outside 1..domain_size.
    """
    positions = np.asarray(positions, dtype=np.int64)
    if positions.size and (positions.min() < 1 or positions.max() > domain_size):
        raise ValueError(
            f"positions must lie in 1..{domain_size}, got range "
            f"[{positions.min()}, {positions.max()}]"
        )
    return np.bincount(positions, minlength=domain_size + 1)[1:]


def visit_frequencies(positions: np.ndarray, domain_size: int) -> np.ndarray:
    """Empirical fraction of weeks spent on each island.

    An empty trajectory yields all zeros.
    """
    counts = visit_counts(positions, domain_size)
    total = counts.sum()
    if total == 0:
        return np.zeros(domain_size, dtype=np.float64)
    return counts / total


def max_abs_deviation(positions: np.ndarray, weights: np.ndarray) -> float:
    """Largest |empirical - target| proportion over all islands."""
    target = target_distribution(weights)
    empirical = visit_frequencies(positions, len(target))
    return float(np.max(np.abs(empirical - target)))


def chi_square_test(positions: np.ndarray, weights: np.ndarray) -> dict[str, float]:
    """Pearson chi-square of visit counts against the target distribution.

    Successive weeks are correlated, so the p-value treats the walk as if
    it were independent draws and overstates the evidence against the
    target. Use it as a coarse check, not a calibrated test.

    Raises:
        ValueError: If positions is empty.
    """
    target = target_distribution(weights)
    counts = visit_counts(positions, len(target))
    n = int(counts.sum())
    if n == 0:
        raise ValueError("chi-square test needs at least one position")
    res = chisquare(f_obs=counts, f_exp=target * n)
    return {
        "statistic": float(res.statistic),
        "p_value": float(res.pvalue),
        "dof": len(target) - 1,
    }
