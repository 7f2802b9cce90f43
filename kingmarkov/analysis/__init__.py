"""Analysis of Metropolis trajectories: visit frequencies and chain diagnostics."""

from kingmarkov.analysis.chain import (
    autocorrelation,
    effective_sample_size,
    split_rhat,
    validate_trajectory,
)
from kingmarkov.analysis.frequencies import (
    chi_square_test,
    max_abs_deviation,
    target_distribution,
    visit_counts,
    visit_frequencies,
)
from kingmarkov.analysis.summary import summarize_walk

__all__ = [
    "autocorrelation",
    "effective_sample_size",
    "split_rhat",
    "validate_trajectory",
    "chi_square_test",
    "max_abs_deviation",
    "target_distribution",
    "visit_counts",
    "visit_frequencies",
    "summarize_walk",
]
