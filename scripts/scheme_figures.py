"""Comparison figures and tables for the transport and diffusion schemes.

Run from the repository root:

    PYTHONPATH=src python scripts/scheme_figures.py --case transport
    PYTHONPATH=src python scripts/scheme_figures.py --case all --out-dir docs/assets

Prints a pandas comparison table per case and saves one PNG per case.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from fd_schemes.diagnostics import (  # noqa: E402
    compare_relaxation,
    compare_time_steppers,
    plot_grid,
    plot_snapshots,
)
from fd_schemes.numerics.grids import (  # noqa: E402
    GridConfig,
    build_x_grid,
    laplace_initial_grid,
    step_profile,
    tent_profile,
)
from fd_schemes.solvers import (  # noqa: E402
    available_schemes,
    make_relaxation_solver,
    make_time_stepper,
)

TRANSPORT = ["upwind", "lax", "lax-wendroff", "maccormack", "leapfrog", "beam-warming"]


def _final_states(u0, names, step_max, **params):
    out = []
    for name in names:
        solver = make_time_stepper(name, u0, step_max=step_max, **params.get(name, {}))
        while not solver.is_completed():
            solver.advance()
        out.append((solver.name, solver.current_state().copy()))
    return out


def run_transport(out_dir: Path, n_x: int) -> None:
    x = build_x_grid(GridConfig(n_x=n_x))
    u0 = step_profile(x)
    step_max = n_x // 4

    print(
        compare_time_steppers(
            u0,
            TRANSPORT,
            step_max,
            n_cfl=0.5,
            overrides={"beam-warming": {"lambda_": 0.5}},
        ).to_string(index=False)
    )

    params = {name: {"n_cfl": 0.5} for name in TRANSPORT}
    fig, ax = plt.subplots(figsize=(8, 4.5))
    finals = _final_states(u0, TRANSPORT, step_max, **params)
    plot_snapshots(
        x,
        [("initial", u0), *finals],
        ax=ax,
        title=f"Transport, nu = 0.5, {step_max} steps",
    )
    fig.tight_layout()
    fig.savefig(out_dir / "transport.png", dpi=150)
    plt.close(fig)


def run_diffusion(out_dir: Path, n_x: int) -> None:
    x = build_x_grid(GridConfig(n_x=n_x))
    u0 = tent_profile(x)
    names = available_schemes("diffusion")
    params = {name: {"mu": 0.5} for name in names}

    print(compare_time_steppers(u0, names, 100, mu=0.5).to_string(index=False))

    fig, ax = plt.subplots(figsize=(8, 4.5))
    finals = _final_states(u0, names, 100, **params)
    plot_snapshots(
        x, [("initial", u0), *finals], ax=ax, title="Diffusion, mu = 0.5, 100 steps"
    )
    fig.tight_layout()
    fig.savefig(out_dir / "diffusion.png", dpi=150)
    plt.close(fig)


def run_laplace(out_dir: Path, n_x: int) -> None:
    u_init = laplace_initial_grid(n_x, n_x)
    methods = ["jacobi", *(("sor", {"omega": w}) for w in (1.0, 1.5, 1.8))]
    print(compare_relaxation(u_init, methods, n_iter_max=20_000).to_string(index=False))

    solver = make_relaxation_solver("sor", u_init, n_iter_max=20_000, omega=1.5)
    solver.execute()
    fig, ax = plt.subplots(figsize=(5.5, 4.5))
    plot_grid(solver.current_state(), ax=ax)
    ax.set_title(f"Laplace, SOR omega = 1.5 ({solver.iterations_performed()} iterations)")
    fig.tight_layout()
    fig.savefig(out_dir / "laplace.png", dpi=150)
    plt.close(fig)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--case", choices=["transport", "diffusion", "laplace", "all"], default="all")
    ap.add_argument("--n-x", type=int, default=40)
    ap.add_argument("--out-dir", default="docs/assets")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.case in ("transport", "all"):
        run_transport(out_dir, args.n_x)
    if args.case in ("diffusion", "all"):
        run_diffusion(out_dir, args.n_x)
    if args.case in ("laplace", "all"):
        run_laplace(out_dir, args.n_x // 2)


if __name__ == "__main__":
    main()
