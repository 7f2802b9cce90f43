"""Trajectory plots: island-by-week trace and visits-per-island histogram."""

import matplotlib.pyplot as plt
import numpy as np

from kingmarkov.analysis.frequencies import target_distribution, visit_counts
from kingmarkov.visualization.style import TARGET_COLOR, TRACE_COLOR, island_colors


def plot_trace(
    positions: np.ndarray,
    n_weeks: int = 100,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Scatter the island occupied in each of the first n_weeks weeks.

    Args:
        positions: Trajectory, values in 1..N.
        n_weeks: Number of leading weeks to show.
        ax: Optional axes to draw into. A new figure is created otherwise.

    Returns:
        The Figure owning the axes.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 4))
    else:
        fig = ax.figure

    shown = np.asarray(positions)[:n_weeks]
    ax.scatter(
        np.arange(1, len(shown) + 1),
        shown,
        marker="o",
        edgecolor=TRACE_COLOR,
        facecolor="none",
        s=16,
    )
    ax.set_xlabel("week")
    ax.set_ylabel("island")
    ax.set_title(f"First {len(shown)} weeks")
    return fig


def plot_visit_histogram(
    positions: np.ndarray,
    weights: np.ndarray,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Bar chart of weeks spent on each island with expected counts overlaid.

    Args:
        positions: Trajectory, values in 1..N.
        weights: Per-island weights; sets N and the expected counts.
        ax: Optional axes to draw into.

    Returns:
        The Figure owning the axes.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 4))
    else:
        fig = ax.figure

    target = target_distribution(weights)
    domain_size = len(target)
    counts = visit_counts(positions, domain_size)
    islands = np.arange(1, domain_size + 1)

    ax.bar(
        islands,
        counts,
        width=0.2,
        color=island_colors(domain_size),
        edgecolor=TRACE_COLOR,
        label="observed",
    )
    ax.plot(
        islands,
        target * counts.sum(),
        linestyle="none",
        marker="_",
        markersize=14,
        color=TARGET_COLOR,
        label="expected",
    )
    ax.set_xticks(islands)
    ax.set_xlabel("island")
    ax.set_ylabel("number of weeks")
    ax.legend(fontsize=8)
    return fig


def plot_walk_overview(
    positions: np.ndarray,
    weights: np.ndarray,
    n_weeks: int = 100,
) -> plt.Figure:
    """Side-by-side trace and histogram, as in the King Markov figure."""
    fig, (ax_trace, ax_hist) = plt.subplots(1, 2, figsize=(10, 4))
    plot_trace(positions, n_weeks=n_weeks, ax=ax_trace)
    plot_visit_histogram(positions, weights, ax=ax_hist)
    fig.tight_layout()
    return fig
