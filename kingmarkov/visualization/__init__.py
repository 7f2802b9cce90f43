"""Static figure generation for King Markov simulation runs.

Provides render_all() to generate all figures for a single run,
with individual plot modules for each visualization type.
"""

from kingmarkov.visualization.render import render_all
from kingmarkov.visualization.style import apply_style, save_figure

__all__ = [
    "render_all",
    "apply_style",
    "save_figure",
]
