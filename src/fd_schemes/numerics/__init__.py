"""
Numerical building blocks: tridiagonal systems and grid generation.
"""

from .grids import (
    GridConfig,
    build_x_grid,
    courant_number,
    diffusion_number,
    laplace_initial_grid,
    step_profile,
    steps_for_duration,
    tent_profile,
)
from .tridiag import (
    TridiagonalSystem,
    as_coefficients,
    constant_coefficients,
    solve_tridiag_scipy,
    tridiag_mv,
    tridiag_to_dense,
)

__all__ = [
    # Grids
    "GridConfig",
    "build_x_grid",
    "step_profile",
    "tent_profile",
    "laplace_initial_grid",
    "courant_number",
    "diffusion_number",
    "steps_for_duration",
    # Tridiagonal
    "TridiagonalSystem",
    "as_coefficients",
    "constant_coefficients",
    "tridiag_mv",
    "solve_tridiag_scipy",
    "tridiag_to_dense",
]
