"""Point relaxation solvers for the 2D Laplace equation.

    u_xx + u_yy = 0

on a uniform grid with dx = dy. Axis 0 of the state grid is x and axis 1 is
y. The outer ring of the initial grid is the (Dirichlet) boundary condition
and is never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import AlreadyExecutedError, MaxIterationsError
from ..log import get_logger
from .base import RelaxationMethod
from .validate import in_closed_interval, positive_count, state_grid

__all__ = ["PointJacobi", "Sor", "RelaxationSolver", "TOLERANCE"]

logger = get_logger(__name__)

TOLERANCE = 1.0e-10


@dataclass(frozen=True, slots=True)
class PointJacobi:
    """Point Jacobi sweep: every interior node becomes the mean of its four
    neighbours in the previous iterate."""

    name: ClassVar[str] = "jacobi"

    def sweep(self, u: NDArray[np.floating]) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1, 1:-1] = 0.25 * (
            u[:-2, 1:-1] + u[2:, 1:-1] + u[1:-1, :-2] + u[1:-1, 2:]
        )
        return u_next


@dataclass(frozen=True, slots=True)
class Sor:
    """Successive over-relaxation (Gauss-Seidel when omega = 1).

        u_{j,k} <- (1 - omega) u_{j,k}
                   + omega/4 (u_{j-1,k} + u_{j+1,k} + u_{j,k-1} + u_{j,k+1})

    The sweep runs x (axis 0) in the outer loop and y (axis 1) in the inner
    loop, both ascending, updating in place. Neighbours at j-1 and k-1 are
    therefore already from the current sweep, those at j+1 and k+1 from the
    previous one. Swapping the two loops gives the same iterate for this
    five-point stencil; a descending scan does not.
    """

    omega: float
    name: ClassVar[str] = "sor"

    def __post_init__(self) -> None:
        in_closed_interval(self.omega, 1.0, 2.0, "omega")

    def sweep(self, u: NDArray[np.floating]) -> NDArray[np.floating]:
        w = float(self.omega)
        n_x, n_y = u.shape
        rows = u.tolist()
        for j in range(1, n_x - 1):
            left, row, right = rows[j - 1], rows[j], rows[j + 1]
            for k in range(1, n_y - 1):
                row[k] = (1.0 - w) * row[k] + 0.25 * w * (
                    left[k] + right[k] + row[k - 1] + row[k + 1]
                )
        return np.array(rows, dtype=float)


class RelaxationSolver:
    """
    Iterate a relaxation sweep until the grid stops changing.

    Convergence is declared after a sweep whose largest absolute change is
    ``<= TOLERANCE``. :meth:`execute` may be called once; the iteration
    count and final grid stay available afterwards.

    Parameters
    ----------
    u_init:
        2D initial grid; its outer ring is the boundary condition.
    method:
        :class:`PointJacobi` or :class:`Sor`.
    n_iter_max:
        Iteration budget. Reaching it before convergence raises
        :class:`~fd_schemes.exceptions.MaxIterationsError`.
    """

    __slots__ = (
        "_method",
        "_n_iter_max",
        "_u",
        "_n_iter",
        "_executed",
        "_converged",
        "_max_change",
    )

    tolerance: ClassVar[float] = TOLERANCE

    def __init__(
        self, u_init: ArrayLike, method: RelaxationMethod, *, n_iter_max: int
    ) -> None:
        if not isinstance(method, RelaxationMethod):
            raise TypeError(f"Unsupported relaxation method type: {type(method)}")

        self._u = state_grid(u_init, "u_init")
        self._n_iter_max = positive_count(n_iter_max, "n_iter_max")
        self._method = method
        self._n_iter = 0
        self._executed = False
        self._converged = False
        self._max_change = float("inf")

        logger.debug(
            "created %s solver: shape=%s n_iter_max=%d",
            method.name,
            self._u.shape,
            self._n_iter_max,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self._method!r}, "
            f"n_iter={self._n_iter}/{self._n_iter_max})"
        )

    @property
    def name(self) -> str:
        return self._method.name

    @property
    def n_iter_max(self) -> int:
        return self._n_iter_max

    @property
    def converged(self) -> bool:
        return self._converged

    @property
    def max_change(self) -> float:
        """Largest absolute cell change in the last sweep (inf before any sweep)."""
        return self._max_change

    def current_state(self) -> NDArray[np.floating]:
        """Read-only view of the current grid."""
        view = self._u.view()
        view.flags.writeable = False
        return view

    def iterations_performed(self) -> int:
        return self._n_iter

    def execute(self) -> None:
        """Sweep until convergence.

        Raises
        ------
        AlreadyExecutedError
            On any call after the first, whatever its outcome.
        MaxIterationsError
            If ``n_iter_max`` sweeps were not enough; the grid keeps the last
            computed iterate.
        """
        if self._executed:
            raise AlreadyExecutedError("solver has already been executed")
        self._executed = True

        while not self._converged:
            if self._n_iter >= self._n_iter_max:
                raise MaxIterationsError(
                    "maximum number of iterations reached",
                    iterations=self._n_iter,
                    max_change=self._max_change,
                )
            self._iterate()

        logger.debug("%s converged after %d iterations", self.name, self._n_iter)

    def _iterate(self) -> None:
        u_next = self._method.sweep(self._u)
        self._max_change = float(np.max(np.abs(u_next - self._u)))
        self._converged = self._max_change <= self.tolerance
        self._u = u_next
        self._n_iter += 1
