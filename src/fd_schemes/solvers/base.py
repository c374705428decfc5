"""Scheme interfaces shared by the time-stepping and relaxation solvers.

A *scheme* is a small immutable object holding the scheme parameters and the
update rule. The solvers own state and lifecycle and call into the scheme
once per step (time-steppers) or once per sweep (relaxation).

Per-size working data (the factored implicit system) is built by
``prepare(n)`` and held by the solver that asked for it, never by the scheme.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from ..numerics.tridiag import TridiagonalSystem, constant_coefficients, tridiag_mv

StepFunction = Callable[[NDArray[np.floating], NDArray[np.floating]], NDArray[np.floating]]


@runtime_checkable
class TimeSteppingScheme(Protocol):
    """A 1D update rule ``u^n -> u^{n+1}``.

    ``step`` receives the current state and the previous one (only multi-level
    schemes such as leap-frog read it) and must return a new array, leaving
    both inputs and the two boundary entries untouched.

    ``prepare(n)`` returns the update function a solver on ``n`` nodes calls
    once per step. It must not modify the scheme.
    """

    @property
    def name(self) -> str:  # pragma: no cover
        ...

    def prepare(self, n: int) -> StepFunction:  # pragma: no cover
        ...

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:  # pragma: no cover
        ...


@runtime_checkable
class RelaxationMethod(Protocol):
    """One relaxation sweep over the interior of a 2D grid."""

    @property
    def name(self) -> str:  # pragma: no cover
        ...

    def sweep(self, u: NDArray[np.floating]) -> NDArray[np.floating]:  # pragma: no cover
        ...


class ExplicitScheme:
    """Mixin for schemes that need no per-size setup."""

    __slots__ = ()

    def prepare(self, n: int) -> StepFunction:
        return self.step  # type: ignore[attr-defined]


class ImplicitStep:
    """
    Beam-Warming update bound to one grid size.

    Holds the factored left-hand system and the right-hand coefficients; both
    are built once and reused for every step.
    """

    __slots__ = ("_system", "_rhs")

    def __init__(
        self, system: TridiagonalSystem, rhs_coefficients: NDArray[np.floating]
    ) -> None:
        self._system = system
        self._rhs = rhs_coefficients

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._system)})"

    @property
    def system(self) -> TridiagonalSystem:
        return self._system

    def __call__(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        u_next = self._system.solve(tridiag_mv(self._rhs, u))
        u_next[0] = u[0]
        u_next[-1] = u[-1]
        return u_next


class BeamWarmingScheme:
    """
    Mixin for the implicit weighted (Beam-Warming) schemes.

    Each step solves

        L u^{n+1} = R u^n

    where L and R are constant tridiagonal matrices spanning all n nodes.
    The two solved boundary entries are discarded and replaced by the
    previous state's values.

    Concrete classes provide ``lhs_triple``/``rhs_triple``.
    """

    __slots__ = ()

    def lhs_triple(self) -> tuple[float, float, float]:  # pragma: no cover
        raise NotImplementedError

    def rhs_triple(self) -> tuple[float, float, float]:  # pragma: no cover
        raise NotImplementedError

    def prepare(self, n: int) -> ImplicitStep:
        return ImplicitStep(
            TridiagonalSystem.constant(n, *self.lhs_triple()),
            constant_coefficients(n, *self.rhs_triple()),
        )

    def step(
        self, u: NDArray[np.floating], u_prev: NDArray[np.floating]
    ) -> NDArray[np.floating]:
        """One step without a prepared system; factors L on every call."""
        return self.prepare(int(u.shape[0]))(u, u_prev)
