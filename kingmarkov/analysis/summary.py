"""Scalar summaries of a walk for result.json."""

from typing import Any

import numpy as np

from kingmarkov.analysis.chain import effective_sample_size, validate_trajectory
from kingmarkov.analysis.frequencies import (
    chi_square_test,
    max_abs_deviation,
    target_distribution,
    visit_frequencies,
)
from kingmarkov.walk.types import WalkResult


def summarize_walk(result: WalkResult, weights: np.ndarray) -> dict[str, Any]:
    """Collect JSON-serializable scalars describing a finished walk.

    Args:
        result: Walk to summarize.
        weights: Per-island weights used for the walk.

    Returns:
        Dict with acceptance rate, per-island empirical and target
        proportions, deviation, chi-square, ESS and validity errors.
    """
    target = target_distribution(weights)
    summary: dict[str, Any] = {
        "num_steps": result.num_steps,
        "domain_size": result.domain_size,
        "acceptance_rate": result.acceptance_rate,
        "target_proportions": target.tolist(),
        "trajectory_errors": validate_trajectory(
            result.positions, result.domain_size
        ),
    }
    if result.num_steps == 0:
        return summary

    summary.update({
        "empirical_proportions": visit_frequencies(
            result.positions, result.domain_size
        ).tolist(),
        "max_abs_deviation": max_abs_deviation(result.positions, weights),
        "chi_square": chi_square_test(result.positions, weights),
        "effective_sample_size": effective_sample_size(result.positions),
    })
    return summary
