"""Chain diagnostic plots: autocorrelation and multi-chain traces."""

import matplotlib.pyplot as plt
import numpy as np

from kingmarkov.analysis.chain import autocorrelation, effective_sample_size
from kingmarkov.visualization.style import TRACE_COLOR, ZERO_LINE_COLOR, chain_colors


def plot_autocorrelation(positions: np.ndarray, max_lag: int = 50) -> plt.Figure:
    """Stem plot of the trajectory's autocorrelation up to max_lag.

    The title reports the effective sample size of the full trajectory.
    """
    acf = autocorrelation(positions, max_lag=max_lag)
    lags = np.arange(len(acf))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.vlines(lags, 0, acf, color=TRACE_COLOR, linewidth=1.5)
    ax.plot(lags, acf, "o", color=TRACE_COLOR, markersize=3)
    ax.axhline(0, color=ZERO_LINE_COLOR, linewidth=0.8)
    ax.set_xlabel("lag (weeks)")
    ax.set_ylabel("autocorrelation")
    ax.set_title(f"Autocorrelation (ESS = {effective_sample_size(positions):.0f})")
    fig.tight_layout()
    return fig


def plot_chain_traces(chains: np.ndarray, n_weeks: int = 200) -> plt.Figure:
    """Overlay the first n_weeks of several chains.

    Args:
        chains: Array of shape (n_chains, num_steps).
        n_weeks: Number of leading weeks per chain to draw.
    """
    chains = np.asarray(chains)
    fig, ax = plt.subplots(figsize=(8, 4))
    colors = chain_colors(chains.shape[0])
    for c in range(chains.shape[0]):
        shown = chains[c, :n_weeks]
        ax.step(
            np.arange(1, len(shown) + 1),
            shown,
            where="post",
            color=colors[c],
            linewidth=1,
            alpha=0.8,
            label=f"chain {c + 1}",
        )
    ax.set_xlabel("week")
    ax.set_ylabel("island")
    ax.set_title("Chain traces")
    if chains.shape[0] <= 8:
        ax.legend(fontsize=8, ncol=2)
    fig.tight_layout()
    return fig
