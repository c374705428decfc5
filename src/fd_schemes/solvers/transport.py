"""Difference schemes for the linear transport equation.

    u_t + c u_x = 0,    c > 0

All schemes are written in terms of the Courant number ``n_cfl = c dt / dx``
and keep the two boundary nodes fixed at their initial values,

    u(x_-, t) = u(x_-, 0),    u(x_+, t) = u(x_+, 0).

Only the interior nodes ``1..n-2`` are updated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from .base import BeamWarmingScheme, ExplicitScheme
from .validate import in_closed_interval, positive_number

__all__ = [
    "ForwardDifference",
    "BackwardDifference",
    "FtcsTransport",
    "Lax",
    "Leapfrog",
    "LaxWendroff",
    "MacCormack",
    "BeamWarmingTransport",
]


@dataclass(frozen=True, slots=True)
class ForwardDifference(ExplicitScheme):
    """One-sided difference on the downwind side (unstable for c > 0).

        u_j^{n+1} = u_j^n - nu (u_{j+1}^n - u_j^n)
    """

    n_cfl: float
    name: ClassVar[str] = "forward"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = u[1:-1] - self.n_cfl * (u[2:] - u[1:-1])
        return u_next


@dataclass(frozen=True, slots=True)
class BackwardDifference(ExplicitScheme):
    """First-order upwind scheme.

        u_j^{n+1} = u_j^n - nu (u_j^n - u_{j-1}^n)
    """

    n_cfl: float
    name: ClassVar[str] = "backward"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = u[1:-1] - self.n_cfl * (u[1:-1] - u[:-2])
        return u_next


@dataclass(frozen=True, slots=True)
class FtcsTransport(ExplicitScheme):
    """Forward in time, central in space (unconditionally unstable here).

        u_j^{n+1} = u_j^n - nu/2 (u_{j+1}^n - u_{j-1}^n)
    """

    n_cfl: float
    name: ClassVar[str] = "ftcs"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = u[1:-1] - 0.5 * self.n_cfl * (u[2:] - u[:-2])
        return u_next


@dataclass(frozen=True, slots=True)
class Lax(ExplicitScheme):
    """Lax scheme: FTCS with u_j^n replaced by its neighbour average.

        u_j^{n+1} = (u_{j-1}^n + u_{j+1}^n)/2 - nu/2 (u_{j+1}^n - u_{j-1}^n)
    """

    n_cfl: float
    name: ClassVar[str] = "lax"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = 0.5 * (u[:-2] + u[2:]) - 0.5 * self.n_cfl * (u[2:] - u[:-2])
        return u_next


@dataclass(frozen=True, slots=True)
class Leapfrog(ExplicitScheme):
    """Three-level leap-frog scheme.

        u_j^{n+1} = u_j^{n-1} - nu/2 (u_{j+1}^n - u_{j-1}^n)

    The first step has no u^{-1}; the initial state stands in for it.
    """

    n_cfl: float
    name: ClassVar[str] = "leapfrog"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = u_prev[1:-1] - 0.5 * self.n_cfl * (u[2:] - u[:-2])
        return u_next


@dataclass(frozen=True, slots=True)
class LaxWendroff(ExplicitScheme):
    """Two-step Lax-Wendroff scheme.

    Half step (stored at index j for the midpoint j+1/2):

        u_{j+1/2}^{n+1/2} = (u_{j+1}^n + u_j^n)/2 - nu/2 (u_{j+1}^n - u_j^n)

    Full step:

        u_j^{n+1} = u_j^n - nu (u_{j+1/2}^{n+1/2} - u_{j-1/2}^{n+1/2})

    For a linear equation this is identical to the one-step form with the
    nu^2/2 second-difference term.
    """

    n_cfl: float
    name: ClassVar[str] = "lax-wendroff"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        nu = self.n_cfl
        u_half = u.copy()
        u_half[1:-1] = 0.5 * (u[2:] + u[1:-1]) - 0.5 * nu * (u[2:] - u[1:-1])

        u_next = u.copy()
        u_next[1:-1] = u[1:-1] - nu * (u_half[1:-1] - u_half[:-2])
        return u_next


@dataclass(frozen=True, slots=True)
class MacCormack(ExplicitScheme):
    """Predictor-corrector MacCormack scheme.

        predictor:  p_j = u_j^n - nu (u_{j+1}^n - u_j^n)
        corrector:  u_j^{n+1} = (u_j^n + p_j)/2 - nu/2 (p_j - p_{j-1})
    """

    n_cfl: float
    name: ClassVar[str] = "maccormack"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        nu = self.n_cfl
        u_pred = u.copy()
        u_pred[1:-1] = u[1:-1] - nu * (u[2:] - u[1:-1])

        u_next = u.copy()
        u_next[1:-1] = 0.5 * (u[1:-1] + u_pred[1:-1]) - 0.5 * nu * (
            u_pred[1:-1] - u_pred[:-2]
        )
        return u_next


@dataclass(frozen=True, slots=True)
class BeamWarmingTransport(BeamWarmingScheme):
    """Implicit weighted scheme for the transport equation.

        -nu/2 lam u_{j-1}^{n+1} + u_j^{n+1} + nu/2 lam u_{j+1}^{n+1}
            = nu/2 (1-lam) u_{j-1}^n + u_j^n - nu/2 (1-lam) u_{j+1}^n

    lam = 0 is explicit Euler (FTCS), lam = 0.5 Crank-Nicolson and
    lam = 1 implicit Euler.
    """

    n_cfl: float
    lambda_: float = 0.5
    name: ClassVar[str] = "beam-warming"

    def __post_init__(self) -> None:
        positive_number(self.n_cfl, "n_cfl")
        in_closed_interval(self.lambda_, 0.0, 1.0, "lambda")

    def lhs_triple(self) -> tuple[float, float, float]:
        lower = -0.5 * self.n_cfl * self.lambda_
        return lower, 1.0, -lower

    def rhs_triple(self) -> tuple[float, float, float]:
        lower = 0.5 * self.n_cfl * (1.0 - self.lambda_)
        return lower, 1.0, -lower
