"""Orchestrator: render all figures for a single simulation run.

Calls each plot function on the trajectory and saves to
{output_dir}/figures/ as PNG + SVG.
"""

import logging
from pathlib import Path

import numpy as np

from kingmarkov.visualization.style import apply_style, save_figure
from kingmarkov.walk.types import ChainSet, WalkResult

log = logging.getLogger(__name__)


def render_all(
    result: WalkResult,
    weights: np.ndarray,
    output_dir: str | Path,
    chains: ChainSet | None = None,
) -> list[Path]:
    """Generate all figures for a single simulation run.

    Each plot type is wrapped in try/except to ensure one failure
    doesn't block the others.

    Args:
        result: Walk to plot.
        weights: Per-island weights used for the walk.
        output_dir: Run directory; figures go to {output_dir}/figures/.
        chains: Optional multi-chain run for the chain trace figure.

    Returns:
        List of paths to generated figure files.
    """
    apply_style()

    figures_dir = Path(output_dir) / "figures"
    generated_files: list[Path] = []

    if result.num_steps == 0:
        log.warning("Empty trajectory; no figures rendered")
        return generated_files

    # ── Trace + histogram ─────────────────────────────────────────────
    try:
        from kingmarkov.visualization.walk import plot_walk_overview

        fig = plot_walk_overview(result.positions, weights)
        generated_files.extend(save_figure(fig, figures_dir, "walk_overview"))
        log.info("Generated: walk_overview")
    except Exception as e:
        log.warning("Failed to generate walk_overview: %s", e)

    # ── Autocorrelation ───────────────────────────────────────────────
    if result.num_steps >= 2:
        try:
            from kingmarkov.visualization.diagnostics import plot_autocorrelation

            fig = plot_autocorrelation(result.positions)
            generated_files.extend(save_figure(fig, figures_dir, "autocorrelation"))
            log.info("Generated: autocorrelation")
        except Exception as e:
            log.warning("Failed to generate autocorrelation: %s", e)

    # ── Multi-chain traces ────────────────────────────────────────────
    if chains is not None and chains.n_chains > 1:
        try:
            from kingmarkov.visualization.diagnostics import plot_chain_traces

            fig = plot_chain_traces(chains.positions)
            generated_files.extend(save_figure(fig, figures_dir, "chain_traces"))
            log.info("Generated: chain_traces")
        except Exception as e:
            log.warning("Failed to generate chain_traces: %s", e)

    log.info("Rendered %d figure files to %s", len(generated_files), figures_dir)
    return generated_files
