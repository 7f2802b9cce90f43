"""Shared look for archipelago figures.

Islands get colours from a sequential map ordered by island number, so the
same island has the same colour in every plot of a run. Chains get
distinct qualitative colours. Figures render headless with the Agg backend.
"""

import matplotlib
matplotlib.use("Agg")

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

TRACE_COLOR = sns.color_palette("colorblind")[0]
TARGET_COLOR = sns.color_palette("colorblind")[3]
ZERO_LINE_COLOR = (0.5, 0.5, 0.5)

FIGURE_FORMATS = ("png", "svg")

_ISLAND_RC = {
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "figure.figsize": (8, 4),
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 9,
    "svg.fonttype": "none",
}


def island_colors(n_islands: int) -> list[tuple[float, float, float]]:
    """One colour per island, light for island 1 through dark for island N."""
    return sns.color_palette("crest", n_colors=n_islands)


def chain_colors(n_chains: int) -> list[tuple[float, float, float]]:
    """Distinct colours for overlaid chains; cycles after ten chains."""
    palette = sns.color_palette("colorblind", n_colors=10)
    return [palette[c % len(palette)] for c in range(n_chains)]


def apply_style() -> None:
    """Whitegrid theme plus the project's figure defaults. Idempotent."""
    sns.set_theme(style="whitegrid", rc=_ISLAND_RC)


def save_figure(
    fig: plt.Figure,
    output_dir: Path,
    name: str,
    formats: tuple[str, ...] = FIGURE_FORMATS,
) -> tuple[Path, ...]:
    """Write fig as {output_dir}/{name}.{fmt} for each format and close it.

    Returns:
        Paths in the order of formats (PNG then SVG by default).
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = tuple(output_dir / f"{name}.{fmt}" for fmt in formats)
    try:
        for path in paths:
            fig.savefig(path, bbox_inches="tight")
    finally:
        plt.close(fig)
    return paths
