"""Side-by-side comparison tables for schemes run on the same problem."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from ..exceptions import MaxIterationsError
from ..log import get_logger
from ..solvers.base import RelaxationMethod
from ..solvers.methods import make_relaxation_solver, make_time_stepper
from ..solvers.relaxation import RelaxationSolver

__all__ = ["compare_time_steppers", "compare_relaxation"]

logger = get_logger(__name__)


def _final_state_metrics(u0: np.ndarray, u: np.ndarray) -> dict[str, float]:
    return {
        "max": float(np.max(u)),
        "min": float(np.min(u)),
        "total_variation": float(np.sum(np.abs(np.diff(u)))),
        # Amount by which the scheme leaves the range of the initial data.
        "overshoot": float(max(np.max(u) - np.max(u0), 0.0)),
        "undershoot": float(max(np.min(u0) - np.min(u), 0.0)),
    }


def compare_time_steppers(
    u0: ArrayLike,
    names: Sequence[str],
    step_max: int,
    *,
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
    **params: Any,
) -> pd.DataFrame:
    """Run every scheme in ``names`` for ``step_max`` steps from ``u0``.

    ``params`` go to every scheme (``n_cfl=0.5``); ``overrides`` adds or
    replaces parameters per scheme name (``{"beam-warming": {"lambda_": 0.5}}``).

    Returns one row per scheme with columns ``scheme``, ``steps``,
    ``runtime_ms``, ``max``, ``min``, ``total_variation``, ``overshoot`` and
    ``undershoot``.
    """
    start = np.array(u0, dtype=float)
    overrides = {} if overrides is None else overrides

    rows: list[dict[str, Any]] = []
    for name in names:
        kw = {**params, **dict(overrides.get(name, {}))}
        solver = make_time_stepper(name, start, step_max=step_max, **kw)

        t0 = time.perf_counter()
        while not solver.is_completed():
            solver.advance()
        runtime_ms = 1e3 * (time.perf_counter() - t0)

        row: dict[str, Any] = {
            "scheme": solver.name,
            "steps": solver.current_step(),
            "runtime_ms": runtime_ms,
        }
        row.update(_final_state_metrics(start, np.asarray(solver.current_state())))
        rows.append(row)
    return pd.DataFrame(rows)


def compare_relaxation(
    u_init: ArrayLike,
    methods: Sequence[str | RelaxationMethod | tuple[str, Mapping[str, Any]]],
    n_iter_max: int,
) -> pd.DataFrame:
    """Relax ``u_init`` with each method and tabulate the iteration counts.

    A method is a registered name, a ``(name, params)`` pair such as
    ``("sor", {"omega": 1.5})``, or a method instance. Methods that exhaust
    the budget are reported with ``converged=False`` instead of raising.
    """
    rows: list[dict[str, Any]] = []
    for entry in methods:
        if isinstance(entry, tuple):
            name, kw = entry
            solver = make_relaxation_solver(name, u_init, n_iter_max=n_iter_max, **kw)
            label = ", ".join(f"{k}={v}" for k, v in kw.items())
        else:
            solver = make_relaxation_solver(entry, u_init, n_iter_max=n_iter_max)
            label = ""

        t0 = time.perf_counter()
        try:
            solver.execute()
        except MaxIterationsError as e:
            logger.info(
                "%s stopped at the budget of %d iterations (max change %.3e)",
                solver.name,
                e.iterations,
                e.max_change,
            )
        runtime_ms = 1e3 * (time.perf_counter() - t0)

        rows.append(_relaxation_row(solver, label, runtime_ms))
    return pd.DataFrame(rows)


def _relaxation_row(
    solver: RelaxationSolver, label: str, runtime_ms: float
) -> dict[str, Any]:
    return {
        "method": solver.name,
        "params": label,
        "iterations": solver.iterations_performed(),
        "converged": solver.converged,
        "max_change": solver.max_change,
        "runtime_ms": runtime_ms,
    }
