"""Command line entry point.

Examples (from the repository root, after ``pip install -e .``)::

    fd-schemes methods
    fd-schemes transport --scheme lax --config examples/transport.json
    fd-schemes diffusion --scheme beam-warming-diffusion --config examples/diffusion.json
    fd-schemes laplace --scheme sor --config examples/laplace.json --output laplace.dat
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from contextlib import nullcontext
from typing import TextIO

from .config import DiffusionRunConfig, LaplaceRunConfig, TransportRunConfig
from .driver import run_relaxation, run_time_stepper
from .exceptions import SolverError
from .io.input import read_config
from .log import configure_logging, get_logger
from .numerics.grids import (
    GridConfig,
    build_x_grid,
    laplace_initial_grid,
    step_profile,
    tent_profile,
)
from .solvers.methods import (
    available_relaxation_methods,
    available_schemes,
    make_relaxation_solver,
    make_time_stepper,
    scheme_equation,
)

logger = get_logger(__name__)


def _open_output(path: str | None):
    if path is None or path == "-":
        return nullcontext(sys.stdout)
    return open(path, "w", encoding="utf-8")


def _check_equation(scheme: str, equation: str) -> None:
    found = scheme_equation(scheme)
    if found != equation:
        raise ValueError(
            f"Scheme '{scheme}' discretizes the {found} equation, not {equation}. "
            f"Available: {', '.join(available_schemes(equation))}"  # type: ignore[arg-type]
        )


def _run_transport(args: argparse.Namespace, out: TextIO) -> None:
    _check_equation(args.scheme, "transport")
    cfg = read_config(args.config, TransportRunConfig)
    x = build_x_grid(GridConfig(n_x=cfg.n_x))
    solver = make_time_stepper(
        args.scheme, step_profile(x), step_max=cfg.step_max, **cfg.scheme_params(args.scheme)
    )
    run_time_stepper(x, solver, out, cfg.ncycle_out)


def _run_diffusion(args: argparse.Namespace, out: TextIO) -> None:
    _check_equation(args.scheme, "diffusion")
    cfg = read_config(args.config, DiffusionRunConfig)
    x = build_x_grid(GridConfig(n_x=cfg.n_x))
    solver = make_time_stepper(
        args.scheme, tent_profile(x), step_max=cfg.step_max, **cfg.scheme_params(args.scheme)
    )
    run_time_stepper(x, solver, out, cfg.ncycle_out)


def _run_laplace(args: argparse.Namespace, out: TextIO) -> None:
    cfg = read_config(args.config, LaplaceRunConfig)
    u_init = laplace_initial_grid(cfg.n_x, cfg.n_y)
    solver = make_relaxation_solver(
        args.scheme, u_init, n_iter_max=cfg.n_iter_max, **cfg.method_params(args.scheme)
    )
    n_iter = run_relaxation(solver, out)
    print(f"number of iterations {n_iter}", file=sys.stderr)


def _list_methods(out: TextIO) -> None:
    out.write("transport: " + ", ".join(available_schemes("transport")) + "\n")
    out.write("diffusion: " + ", ".join(available_schemes("diffusion")) + "\n")
    out.write("laplace: " + ", ".join(available_relaxation_methods()) + "\n")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fd-schemes",
        description="Finite-difference schemes for transport, diffusion and Laplace problems.",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for package messages on stderr (default: WARNING).",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    defaults = {"transport": "lax", "diffusion": "ftcs-diffusion", "laplace": "sor"}
    helps = {
        "transport": "Advect a step profile with u_t + c u_x = 0.",
        "diffusion": "Diffuse a tent profile with u_t = alpha u_xx.",
        "laplace": "Relax u_xx + u_yy = 0 with u = 1 on the top edge.",
    }
    for command, default in defaults.items():
        p = sub.add_parser(command, help=helps[command])
        p.add_argument("--scheme", default=default, help=f"Scheme name (default: {default}).")
        p.add_argument("--config", required=True, help="JSON run file.")
        p.add_argument("--output", default=None, help="Output file (default: stdout).")

    sub.add_parser("methods", help="List registered scheme names.")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.log_level)
        if args.command == "methods":
            _list_methods(sys.stdout)
            return 0

        runners = {
            "transport": _run_transport,
            "diffusion": _run_diffusion,
            "laplace": _run_laplace,
        }
        with _open_output(args.output) as out:
            runners[args.command](args, out)
    except (SolverError, ValueError, OSError) as e:
        logger.debug("run failed", exc_info=True)
        print(f"fd-schemes: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
