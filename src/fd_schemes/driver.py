"""Run loops tying a solver to the output writer."""

from __future__ import annotations

from typing import TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .io.output import write_grid, write_snapshot
from .log import get_logger
from .solvers.relaxation import RelaxationSolver
from .solvers.stepper import TimeSteppingSolver
from .solvers.validate import positive_count

__all__ = ["run_time_stepper", "run_relaxation", "collect_snapshots"]

logger = get_logger(__name__)


def run_time_stepper(
    x: ArrayLike, solver: TimeSteppingSolver, stream: TextIO, ncycle_out: int
) -> list[int]:
    """Write step 0, then every ``ncycle_out``-th step until the solver completes.

    Returns the list of written step numbers.
    """
    every = positive_count(ncycle_out, "ncycle_out")
    written = [solver.current_step()]
    write_snapshot(stream, solver.current_step(), x, solver.current_state())

    while not solver.is_completed():
        solver.advance()
        step = solver.current_step()
        if step % every == 0:
            write_snapshot(stream, step, x, solver.current_state())
            written.append(step)

    logger.info(
        "%s finished after %d steps (%d snapshots)",
        solver.name,
        solver.current_step(),
        len(written),
    )
    return written


def run_relaxation(solver: RelaxationSolver, stream: TextIO) -> int:
    """Execute ``solver`` and write its grid. Returns the iteration count.

    MaxIterationsError propagates and nothing is written in that case.
    """
    solver.execute()
    write_grid(stream, solver.current_state())
    n_iter = solver.iterations_performed()
    logger.info("%s: number of iterations %d", solver.name, n_iter)
    return n_iter


def collect_snapshots(
    solver: TimeSteppingSolver, every: int = 1
) -> list[tuple[int, NDArray[np.floating]]]:
    """Advance ``solver`` to completion and return ``(step, state)`` copies."""
    every = positive_count(every, "every")
    out = [(solver.current_step(), solver.current_state().copy())]
    while not solver.is_completed():
        solver.advance()
        step = solver.current_step()
        if step % every == 0:
            out.append((step, solver.current_state().copy()))
    return out
