from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import SolverCompletedError
from ..log import get_logger
from .base import StepFunction, TimeSteppingScheme
from .validate import positive_count, state_vector

__all__ = ["TimeSteppingSolver"]

logger = get_logger(__name__)


class TimeSteppingSolver:
    """
    Advance a 1D state with a fixed-step scheme until a step budget is spent.

    The solver owns a private copy of ``u0``, a step counter starting at 0
    and a completion flag that is set when the counter reaches ``step_max``.
    The only stopping criterion is the step count; simulated time
    (``step * dt``) is left to the caller.

    Parameters
    ----------
    u0:
        Initial state, 1D and non-empty. Its first and last entries are the
        boundary values and never change.
    scheme:
        Update rule, e.g. :class:`~fd_schemes.solvers.transport.Lax`.
    step_max:
        Number of steps after which the solver reports completion.
    """

    __slots__ = (
        "_scheme",
        "_update",
        "_step_max",
        "_u",
        "_u_prev",
        "_step",
        "_completed",
    )

    def __init__(
        self, u0: ArrayLike, scheme: TimeSteppingScheme, *, step_max: int
    ) -> None:
        if not isinstance(scheme, TimeSteppingScheme):
            raise TypeError(f"Unsupported scheme type: {type(scheme)}")

        u = state_vector(u0, "u")
        self._step_max = positive_count(step_max, "step_max")
        self._scheme = scheme
        self._u = u
        self._u_prev = u.copy()
        self._step = 0
        self._completed = False

        self._update = scheme.prepare(int(u.shape[0]))
        logger.debug(
            "created %s solver: n=%d step_max=%d", scheme.name, u.size, self._step_max
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(scheme={self._scheme!r}, "
            f"step={self._step}/{self._step_max})"
        )

    @property
    def name(self) -> str:
        return self._scheme.name

    @property
    def scheme(self) -> TimeSteppingScheme:
        return self._scheme

    @property
    def update(self) -> StepFunction:
        """Update function prepared for this solver's grid size."""
        return self._update

    @property
    def step_max(self) -> int:
        return self._step_max

    def current_state(self) -> NDArray[np.floating]:
        """Read-only view of the current state."""
        view = self._u.view()
        view.flags.writeable = False
        return view

    def current_step(self) -> int:
        return self._step

    def is_completed(self) -> bool:
        return self._completed

    def advance(self) -> None:
        """Advance by one step.

        Raises SolverCompletedError (without touching the state) once the
        step budget has been used up.
        """
        if self._completed:
            raise SolverCompletedError("calculation has already been completed")

        u_next = np.asarray(self._update(self._u, self._u_prev), dtype=float)
        if u_next.shape != self._u.shape:
            raise ValueError(
                f"{self.name} returned shape {u_next.shape}, expected {self._u.shape}"
            )

        self._u_prev = self._u
        self._u = u_next
        self._step += 1

        if self._step >= self._step_max:
            self._completed = True
            logger.debug("%s completed after %d steps", self.name, self._step)
