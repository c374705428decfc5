from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from fd_schemes import make_relaxation_solver, make_time_stepper
    from fd_schemes.numerics.grids import (
        GridConfig,
        build_x_grid,
        laplace_initial_grid,
        step_profile,
    )

    x = build_x_grid(GridConfig(n_x=20))
    u0 = step_profile(x)

    solver = make_time_stepper("lax-wendroff", u0, step_max=6, n_cfl=0.5)
    while not solver.is_completed():
        solver.advance()
    print("Lax-Wendroff:", solver.current_state().round(4))

    solver = make_time_stepper("beam-warming", u0, step_max=3, n_cfl=1.0, lambda_=0.5)
    while not solver.is_completed():
        solver.advance()
    print("Beam-Warming:", solver.current_state().round(4))

    relax = make_relaxation_solver("sor", laplace_initial_grid(8, 8), n_iter_max=300, omega=1.5)
    relax.execute()
    print("SOR iterations:", relax.iterations_performed())
    print("u at centre:", relax.current_state()[4, 4])
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
