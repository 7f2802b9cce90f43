"""Trajectory validity checks and chain mixing diagnostics."""

import logging

import numpy as np

log = logging.getLogger(__name__)


def validate_trajectory(positions: np.ndarray, domain_size: int) -> list[str]:
    """Check a trajectory for domain containment and single-step moves.

    Returns a list of error strings. Empty list means the trajectory is valid.

    Checks:
    - Every position lies in 1..domain_size
    - Consecutive positions differ by 0, 1, or domain_size - 1 (wraparound)
    """
    errors: list[str] = []
    positions = np.asarray(positions, dtype=np.int64)
    if positions.ndim != 1:
        return [f"positions must be 1-D, got shape {positions.shape}"]

    outside = np.flatnonzero((positions < 1) | (positions > domain_size))
    if outside.size:
        i = int(outside[0])
        errors.append(
            f"{outside.size} positions outside 1..{domain_size} "
            f"(first at week {i}: {int(positions[i])})"
        )

    if positions.size > 1:
        jumps = np.abs(np.diff(positions))
        bad = np.flatnonzero(
            (jumps != 0) & (jumps != 1) & (jumps != domain_size - 1)
        )
        if bad.size:
            i = int(bad[0])
            errors.append(
                f"{bad.size} non-adjacent moves (first at week {i}: "
                f"{int(positions[i])}->{int(positions[i + 1])})"
            )

    return errors


def autocorrelation(x: np.ndarray, max_lag: int | None = None) -> np.ndarray:
    """Normalized autocorrelation for lags 0..max_lag, computed by FFT.

    A constant series has no variance; its autocorrelation is reported
    as 1 at every lag.

    Args:
        x: 1-D series (island positions).
        max_lag: Largest lag to return. Defaults to len(x) - 1.

    Returns:
        float64 array of length max_lag + 1 with acf[0] == 1.
    """
    x = np.asarray(x, dtype=np.float64)
    n = len(x)
    if n == 0:
        raise ValueError("autocorrelation needs a non-empty series")
    if max_lag is None:
        max_lag = n - 1
    max_lag = min(max_lag, n - 1)

    x = x - x.mean()
    if not np.any(x):
        return np.ones(max_lag + 1)

    fftx = np.fft.rfft(x, n=2 * n)
    acf = np.fft.irfft(fftx * np.conjugate(fftx), n=2 * n)[:n]
    acf /= acf[0]
    return acf[: max_lag + 1]


def effective_sample_size(x: np.ndarray) -> float:
    """Effective number of independent weeks in a correlated trajectory.

    Uses Geyer's initial positive sequence: sums of adjacent autocorrelation
    pairs are accumulated until the first non-positive pair.

    Returns:
        Estimated ESS; 1.0 for a constant series, 0.0 for an empty one.
    """
    x = np.asarray(x, dtype=np.float64)
    n = len(x)
    if n < 2 or not np.any(x - x.mean()):
        return float(min(n, 1))

    acf = autocorrelation(x)
    pair_sum = 0.0
    for k in range(0, n - 1, 2):
        pair = acf[k] + acf[k + 1]
        if pair <= 0:
            break
        pair_sum += pair

    tau = max(-1.0 + 2.0 * pair_sum, 1.0 / n)
    return float(n / tau)


def split_rhat(chains: np.ndarray) -> float:
    """Split-chain potential scale reduction factor (Gelman-Rubin R-hat).

    Each chain is cut in half and the halves are treated as separate
    chains. Values close to 1 indicate the chains agree.

    Args:
        chains: Array of shape (n_chains, num_steps), num_steps >= 4.

    Returns:
        R-hat, or nan when every half-chain is constant.
    """
    chains = np.asarray(chains, dtype=np.float64)
    if chains.ndim != 2:
        raise ValueError(f"chains must be 2-D, got shape {chains.shape}")
    n_steps = chains.shape[1]
    if n_steps < 4:
        raise ValueError(f"split R-hat needs >= 4 steps per chain, got {n_steps}")

    half = n_steps // 2
    splits = np.concatenate([chains[:, :half], chains[:, -half:]], axis=0)
    n = splits.shape[1]

    chain_means = splits.mean(axis=1)
    within = splits.var(axis=1, ddof=1).mean()
    between = n * chain_means.var(ddof=1)

    if within == 0:
        log.warning("All half-chains are constant; R-hat undefined")
        return float("nan")

    var_plus = (n - 1) / n * within + between / n
    return float(np.sqrt(var_plus / within))
