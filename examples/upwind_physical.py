"""Upwind advection specified in physical units instead of a Courant number.

    python examples/upwind_physical.py
"""

from __future__ import annotations

import sys

from fd_schemes.driver import run_time_stepper
from fd_schemes.numerics.grids import (
    GridConfig,
    build_x_grid,
    courant_number,
    step_profile,
    steps_for_duration,
)
from fd_schemes.solvers import make_time_stepper


def main() -> None:
    v_adv = 1.0
    dt = 0.05
    t_max = 0.3
    grid = GridConfig(n_x=20)

    x = build_x_grid(grid)
    nu = courant_number(v_adv, dt, grid.dx)
    n_steps = steps_for_duration(t_max, dt)

    solver = make_time_stepper("upwind", step_profile(x), step_max=n_steps, n_cfl=nu)
    run_time_stepper(x, solver, sys.stdout, ncycle_out=n_steps)
    print(f"# nu = {nu:g}, steps = {n_steps}, t = {n_steps * dt:g}", file=sys.stderr)


if __name__ == "__main__":
    main()
