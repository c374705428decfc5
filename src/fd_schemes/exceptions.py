"""Exceptions raised by the solvers and their collaborators.

Every failure is surfaced to the caller; nothing is retried internally.
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for all fd_schemes failures."""


class ValidationError(SolverError, ValueError):
    """Raised when construction or configuration parameters are invalid."""


class InputError(ValidationError):
    """Raised when an input file cannot be turned into a run configuration."""


class SolverCompletedError(SolverError, RuntimeError):
    """Raised when ``advance()`` is called on a time-stepper that has finished."""


class AlreadyExecutedError(SolverError, RuntimeError):
    """Raised when ``execute()`` is called twice on a relaxation solver."""


class MaxIterationsError(SolverError, RuntimeError):
    """Raised when a relaxation solver exhausts its iteration budget.

    Carries the iteration count and the last sweep's maximum change.
    """

    def __init__(self, message: str, *, iterations: int, max_change: float) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.max_change = max_change


class LengthMismatchError(SolverError, ValueError):
    """Raised when a right-hand side does not match a tridiagonal system's size."""
