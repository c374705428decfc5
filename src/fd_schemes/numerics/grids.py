# src/fd_schemes/numerics/grids.py
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ValidationError

__all__ = [
    "GridConfig",
    "build_x_grid",
    "step_profile",
    "tent_profile",
    "laplace_initial_grid",
    "courant_number",
    "diffusion_number",
    "steps_for_duration",
]


MAX_DURATION_STEPS = 10_000_000


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Evenly spaced 1D grid with ``n_x`` cells (``n_x + 1`` nodes)."""

    n_x: int
    x_lb: float = -1.0
    x_ub: float = 1.0

    def validate(self) -> None:
        if self.n_x < 1:
            raise ValidationError("n_x must be positive")
        if not (self.x_lb < self.x_ub):
            raise ValidationError("Need x_lb < x_ub")

    @property
    def dx(self) -> float:
        return (self.x_ub - self.x_lb) / self.n_x


def build_x_grid(cfg: GridConfig) -> NDArray[np.floating]:
    cfg.validate()
    return np.linspace(cfg.x_lb, cfg.x_ub, cfg.n_x + 1, dtype=float)


def step_profile(
    x: NDArray[np.floating], *, x_jump: float = 0.0, high: float = 1.0, low: float = 0.0
) -> NDArray[np.floating]:
    """Discontinuous initial condition: ``high`` left of ``x_jump``, ``low`` elsewhere."""
    x = np.asarray(x, dtype=float)
    return np.where(x < x_jump, high, low).astype(float)


def tent_profile(x: NDArray[np.floating]) -> NDArray[np.floating]:
    """Triangular initial condition ``1 - |x|`` (peak 1 at x=0)."""
    x = np.asarray(x, dtype=float)
    return np.where(x < 0.0, x + 1.0, -x + 1.0)


def laplace_initial_grid(n_x: int, n_y: int, *, top: float = 1.0) -> NDArray[np.floating]:
    """
    Initial/boundary grid for the Laplace problem on ``(n_x+1, n_y+1)`` nodes.

    u = ``top`` on the y = y_max edge and 0 on the other three edges and in
    the interior. Axis 0 is x, axis 1 is y.
    """
    if n_x < 1 or n_y < 1:
        raise ValidationError("n_x and n_y must be positive")
    u = np.zeros((n_x + 1, n_y + 1), dtype=float)
    u[:, n_y] = top
    return u


def courant_number(v_adv: float, dt: float, dx: float) -> float:
    """nu = c * dt / dx."""
    if dt <= 0 or dx <= 0:
        raise ValidationError("dt and dx must be > 0")
    return float(v_adv) * float(dt) / float(dx)


def diffusion_number(alpha: float, dt: float, dx: float) -> float:
    """mu = alpha * dt / dx^2."""
    if dt <= 0 or dx <= 0:
        raise ValidationError("dt and dx must be > 0")
    return float(alpha) * float(dt) / (float(dx) * float(dx))


def steps_for_duration(t_max: float, dt: float) -> int:
    """
    Number of steps a run of step ``dt`` takes to reach ``t_max``.

    Elapsed time is accumulated step by step (``t += dt`` until
    ``t >= t_max``), so the count includes the round-off of that sum: ten
    steps of 0.1 add up to 0.9999999999999999 and t_max = 1.0 takes 11.
    """
    if not (math.isfinite(t_max) and math.isfinite(dt)):
        raise ValidationError("t_max and dt must be finite")
    if t_max <= 0 or dt <= 0:
        raise ValidationError("t_max and dt must be > 0")
    if t_max / dt > MAX_DURATION_STEPS:
        raise ValidationError(f"t_max / dt exceeds {MAX_DURATION_STEPS} steps")
    t = 0.0
    n = 0
    while t < t_max:
        t += dt
        n += 1
    return n
