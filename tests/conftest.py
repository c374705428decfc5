"""Pytest helpers for the fd_schemes package."""

from __future__ import annotations

import numpy as np
import pytest

from fd_schemes.numerics.grids import (
    GridConfig,
    build_x_grid,
    laplace_initial_grid,
    step_profile,
    tent_profile,
)


@pytest.fixture
def x21() -> np.ndarray:
    """21 nodes on [-1, 1] (dx = 0.1)."""
    return build_x_grid(GridConfig(n_x=20))


@pytest.fixture
def step21(x21: np.ndarray) -> np.ndarray:
    return step_profile(x21)


@pytest.fixture
def tent21(x21: np.ndarray) -> np.ndarray:
    return tent_profile(x21)


@pytest.fixture
def laplace_grid():
    """Factory for the top-edge-hot Laplace start grid."""

    def _make(n_x: int, n_y: int | None = None) -> np.ndarray:
        return laplace_initial_grid(n_x, n_x if n_y is None else n_y)

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
