"""Comparison tables (pandas) and plots (matplotlib, optional)."""

from .plots import plot_grid, plot_snapshots
from .tables import compare_relaxation, compare_time_steppers

__all__ = [
    "compare_time_steppers",
    "compare_relaxation",
    "plot_snapshots",
    "plot_grid",
]
