from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import LengthMismatchError
from ._mpl import get_plt, pretty_ax

if TYPE_CHECKING:
    from matplotlib.axes import Axes

__all__ = ["plot_snapshots", "plot_grid"]


def plot_snapshots(
    x: ArrayLike,
    snapshots: Sequence[tuple[object, ArrayLike]],
    ax: Axes | None = None,
    *,
    title: str | None = None,
) -> Axes:
    """Line plot of ``(label, u)`` snapshots over the node coordinates ``x``.

    ``snapshots`` is typically the output of
    :func:`fd_schemes.driver.collect_snapshots` or a list of
    ``(scheme_name, final_state)`` pairs.
    """
    xs = np.asarray(x, dtype=float)
    if ax is None:
        plt = get_plt()
        _, ax = plt.subplots(figsize=(7, 4))

    for label, u in snapshots:
        us = np.asarray(u, dtype=float)
        if us.shape != xs.shape:
            raise LengthMismatchError(
                f"snapshot '{label}' has shape {us.shape}, expected {xs.shape}"
            )
        ax.plot(xs, us, marker=".", linewidth=1.2, label=str(label))

    ax.set_xlabel("x")
    ax.set_ylabel("u")
    if title:
        ax.set_title(title)
    if snapshots:
        ax.legend(fontsize=8)
    pretty_ax(ax)
    return ax


def plot_grid(u: ArrayLike, ax: Axes | None = None, *, levels: int = 20) -> Axes:
    """Filled contour of a 2D relaxation grid (axis 0 is x, axis 1 is y)."""
    grid = np.asarray(u, dtype=float)
    if grid.ndim != 2:
        raise ValueError(f"u must be 2D, got shape {grid.shape}")
    if ax is None:
        plt = get_plt()
        _, ax = plt.subplots(figsize=(5, 4))

    n_x, n_y = grid.shape
    ix, iy = np.meshgrid(np.arange(n_x), np.arange(n_y), indexing="ij")
    cs = ax.contourf(ix, iy, grid, levels=levels)
    ax.figure.colorbar(cs, ax=ax)
    ax.set_xlabel("i_x")
    ax.set_ylabel("i_y")
    ax.set_aspect("equal")
    return ax
