"""Difference schemes for the linear diffusion equation.

    u_t = alpha u_xx

written in terms of the diffusion number ``mu = alpha dt / dx^2``. The
boundary nodes keep their initial values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from .base import BeamWarmingScheme, ExplicitScheme
from .validate import in_closed_interval, positive_number

__all__ = ["FtcsDiffusion", "BeamWarmingDiffusion"]


@dataclass(frozen=True, slots=True)
class FtcsDiffusion(ExplicitScheme):
    """Explicit FTCS scheme, stable for mu <= 1/2.

        u_j^{n+1} = u_j^n + mu (u_{j+1}^n - 2 u_j^n + u_{j-1}^n)
    """

    mu: float
    name: ClassVar[str] = "ftcs-diffusion"

    def __post_init__(self) -> None:
        positive_number(self.mu, "mu")

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = u.copy()
        u_next[1:-1] = u[1:-1] + self.mu * (u[:-2] - 2.0 * u[1:-1] + u[2:])
        return u_next


@dataclass(frozen=True, slots=True)
class BeamWarmingDiffusion(BeamWarmingScheme):
    """Implicit weighted scheme for the diffusion equation.

        -lam mu u_{j-1}^{n+1} + (1 + 2 lam mu) u_j^{n+1} - lam mu u_{j+1}^{n+1}
            = (1-lam) mu u_{j-1}^n + (1 - 2 (1-lam) mu) u_j^n + (1-lam) mu u_{j+1}^n
    """

    mu: float
    lambda_: float = 0.5
    name: ClassVar[str] = "beam-warming-diffusion"

    def __post_init__(self) -> None:
        positive_number(self.mu, "mu")
        in_closed_interval(self.lambda_, 0.0, 1.0, "lambda")

    def lhs_triple(self) -> tuple[float, float, float]:
        off = -self.lambda_ * self.mu
        return off, 1.0 + 2.0 * self.lambda_ * self.mu, off

    def rhs_triple(self) -> tuple[float, float, float]:
        off = (1.0 - self.lambda_) * self.mu
        return off, 1.0 - 2.0 * (1.0 - self.lambda_) * self.mu, off
