"""Tests for the visualization module.

Tests cover: style application, dual-format save, trace and histogram
plots, autocorrelation and chain trace plots, and the render orchestrator.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from kingmarkov.config.experiment import SimulationConfig, WalkConfig
from kingmarkov.walk.chains import run_chains
from kingmarkov.walk.generator import run_metropolis, run_walk
from kingmarkov.walk.types import WalkResult

WEIGHTS = np.arange(1, 11, dtype=np.float64)


def _walk(num_steps: int = 2000) -> np.ndarray:
    return run_walk(num_steps, 10, 10, lambda k: float(k), seed=56)


# ── Style and Save Tests ──────────────────────────────────────────────


def test_apply_style_sets_whitegrid():
    """apply_style() sets seaborn whitegrid and publication rcParams."""
    from kingmarkov.visualization.style import apply_style

    apply_style()
    assert plt.rcParams["savefig.dpi"] == 300
    assert plt.rcParams["axes.grid"] is True


def test_save_figure_creates_png_and_svg(tmp_path):
    """save_figure creates both PNG and SVG, closes figure."""
    from kingmarkov.visualization.style import save_figure

    fig, ax = plt.subplots()
    ax.plot([1, 2, 3], [1, 2, 3])
    fig_num = fig.number

    png_path, svg_path = save_figure(fig, tmp_path / "sub", "test_plot")

    assert png_path.exists()
    assert svg_path.exists()
    assert png_path.stat().st_size > 0
    assert fig_num not in plt.get_fignums()


def test_save_figure_single_format(tmp_path):
    from kingmarkov.visualization.style import save_figure

    fig, _ = plt.subplots()
    paths = save_figure(fig, tmp_path, "only_png", formats=("png",))

    assert paths == (tmp_path / "only_png.png",)
    assert not (tmp_path / "only_png.svg").exists()


def test_island_colors_one_per_island():
    from kingmarkov.visualization.style import island_colors

    for n in (2, 10, 25):
        colors = island_colors(n)
        assert len(colors) == n
        assert all(0 <= c <= 1 for rgb in colors for c in rgb[:3])
        assert len({tuple(rgb) for rgb in colors}) == n


def test_island_colors_darken_with_island_number():
    from kingmarkov.visualization.style import island_colors

    luminance = [sum(rgb[:3]) for rgb in island_colors(10)]
    assert luminance[0] > luminance[-1]


def test_chain_colors_cycle_after_ten():
    from kingmarkov.visualization.style import chain_colors

    colors = chain_colors(12)
    assert len(colors) == 12
    assert len(set(map(tuple, colors[:10]))) == 10
    assert colors[10] == colors[0]
    assert colors[11] == colors[1]


# ── Walk Plots ────────────────────────────────────────────────────────


def test_plot_trace_shows_first_weeks():
    from kingmarkov.visualization.walk import plot_trace

    fig = plot_trace(_walk(), n_weeks=100)
    ax = fig.axes[0]
    offsets = ax.collections[0].get_offsets()
    assert offsets.shape == (100, 2)
    assert ax.get_xlabel() == "week"
    assert ax.get_ylabel() == "island"
    plt.close(fig)


def test_plot_visit_histogram_bars_match_counts():
    from kingmarkov.visualization.walk import plot_visit_histogram

    walk = _walk()
    fig = plot_visit_histogram(walk, WEIGHTS)
    ax = fig.axes[0]
    heights = [p.get_height() for p in ax.patches]
    expected = np.bincount(walk, minlength=11)[1:]
    np.testing.assert_array_equal(heights, expected)
    plt.close(fig)


def test_plot_visit_histogram_colors_bars_by_island():
    from kingmarkov.visualization.style import island_colors
    from kingmarkov.visualization.walk import plot_visit_histogram

    fig = plot_visit_histogram(_walk(), WEIGHTS)
    faces = [p.get_facecolor()[:3] for p in fig.axes[0].patches]
    np.testing.assert_allclose(faces, island_colors(10), atol=1e-6)
    plt.close(fig)


def test_plot_walk_overview_two_panels():
    from kingmarkov.visualization.walk import plot_walk_overview

    fig = plot_walk_overview(_walk(), WEIGHTS)
    assert len(fig.axes) == 2
    plt.close(fig)


# ── Diagnostics ───────────────────────────────────────────────────────


def test_plot_autocorrelation():
    from kingmarkov.visualization.diagnostics import plot_autocorrelation

    fig = plot_autocorrelation(_walk(), max_lag=30)
    assert "ESS" in fig.axes[0].get_title()
    plt.close(fig)


def test_plot_chain_traces_one_line_per_chain():
    from kingmarkov.visualization.diagnostics import plot_chain_traces

    chains = np.stack([_walk(300), _walk(300)])
    fig = plot_chain_traces(chains, n_weeks=100)
    assert len(fig.axes[0].get_lines()) == 2
    plt.close(fig)


def test_plot_chain_traces_distinct_colors():
    from matplotlib.colors import to_rgb

    from kingmarkov.visualization.diagnostics import plot_chain_traces
    from kingmarkov.visualization.style import chain_colors

    chains = np.stack([_walk(100) for _ in range(3)])
    fig = plot_chain_traces(chains, n_weeks=50)
    drawn = [to_rgb(line.get_color()) for line in fig.axes[0].get_lines()]
    np.testing.assert_allclose(drawn, chain_colors(3), atol=1e-6)
    plt.close(fig)


# ── Render Orchestrator ───────────────────────────────────────────────


def test_render_all_creates_figures(tmp_path):
    from kingmarkov.visualization.render import render_all

    config = SimulationConfig(
        walk=WalkConfig(num_steps=1000, start=10, n_chains=3)
    )
    result = run_metropolis(config)
    chains = run_chains(config)

    files = render_all(result, WEIGHTS, tmp_path, chains=chains)

    names = {f.name for f in files}
    assert "walk_overview.png" in names
    assert "autocorrelation.svg" in names
    assert "chain_traces.png" in names
    assert all(f.exists() for f in files)


def test_render_all_empty_walk(tmp_path):
    from kingmarkov.visualization.render import render_all

    result = WalkResult(
        positions=np.zeros(0, dtype=np.int64),
        num_steps=0, domain_size=10, start=10, seed=0, n_accepted=0,
    )
    assert render_all(result, WEIGHTS, tmp_path) == []
