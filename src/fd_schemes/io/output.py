"""Plain-text snapshot tables, gnuplot-friendly.

1D snapshot, one block per written step::

    <step> <x> <u>
    ...
    <blank>
    <blank>

2D grid, one block per x index::

    <i_x> <i_y> <u>
    ...
    <blank>
"""

from __future__ import annotations

from typing import TextIO

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from ..exceptions import LengthMismatchError

__all__ = ["write_snapshot", "write_grid", "snapshot_frame"]


def write_snapshot(stream: TextIO, step: int, x: ArrayLike, u: ArrayLike) -> None:
    xs = np.asarray(x, dtype=float)
    us = np.asarray(u, dtype=float)
    if xs.shape != us.shape or xs.ndim != 1:
        raise LengthMismatchError(
            f"x and u must be 1D of equal length, got {xs.shape} and {us.shape}"
        )
    lines = [f"{step} {xi:.10f} {ui:.10f}\n" for xi, ui in zip(xs, us)]
    stream.write("".join(lines))
    stream.write("\n\n")


def write_grid(stream: TextIO, u: ArrayLike) -> None:
    grid = np.asarray(u, dtype=float)
    if grid.ndim != 2:
        raise ValueError(f"u must be 2D, got shape {grid.shape}")
    for i_x, column in enumerate(grid):
        lines = [f"{i_x} {i_y} {val:.10f}\n" for i_y, val in enumerate(column)]
        stream.write("".join(lines))
        stream.write("\n")


def snapshot_frame(label: str | int, x: ArrayLike, u: ArrayLike) -> pd.DataFrame:
    """Snapshot as a tidy frame with columns ``label``, ``x``, ``u``."""
    xs = np.asarray(x, dtype=float)
    us = np.asarray(u, dtype=float)
    if xs.shape != us.shape or xs.ndim != 1:
        raise LengthMismatchError(
            f"x and u must be 1D of equal length, got {xs.shape} and {us.shape}"
        )
    return pd.DataFrame({"label": [label] * xs.size, "x": xs, "u": us})
