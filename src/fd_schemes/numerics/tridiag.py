# src/fd_schemes/numerics/tridiag.py
from __future__ import annotations

from collections.abc import Sequence
from typing import cast

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import LengthMismatchError, ValidationError

__all__ = [
    "TridiagonalSystem",
    "as_coefficients",
    "constant_coefficients",
    "tridiag_mv",
    "solve_tridiag_scipy",
    "tridiag_to_dense",
]


def as_coefficients(coefficients: ArrayLike) -> NDArray[np.floating]:
    """
    Return a float64 copy of a coefficient sequence with shape (n, 3).

    Row i holds (lower_i, diag_i, upper_i). The lower entry of row 0 and the
    upper entry of row n-1 are outside the matrix and are never read.
    """
    coef = np.array(coefficients, dtype=float)
    if coef.size == 0:
        return np.empty((0, 3), dtype=float)
    if coef.ndim != 2 or coef.shape[1] != 3:
        raise ValidationError(
            f"coefficients must have shape (n, 3) got {coef.shape}"
        )
    return coef


def constant_coefficients(
    n: int, lower: float, diag: float, upper: float
) -> NDArray[np.floating]:
    """(n, 3) coefficient array with the same triple on every row."""
    if n < 0:
        raise ValidationError("n must be >= 0")
    coef = np.empty((n, 3), dtype=float)
    coef[:, 0] = lower
    coef[:, 1] = diag
    coef[:, 2] = upper
    return coef


class TridiagonalSystem:
    """
    Thomas-algorithm solver for a tridiagonal system A x = rhs.

    The LU-style decomposition is computed once at construction:

        lower[i] /= diag[i-1]
        diag[i]  -= lower[i] * upper[i-1]      for i = 1..n-1

    after which :meth:`solve` only performs forward elimination and back
    substitution, so one instance can serve every time step of a scheme.

    Notes:
    - No pivoting. Diagonal dominance (or at least non-singularity) is the
      caller's responsibility and is not checked.
    - The instance keeps no state besides the decomposed coefficients.
    """

    __slots__ = ("_lu",)

    def __init__(self, coefficients: ArrayLike) -> None:
        lu = as_coefficients(coefficients)
        for i in range(1, lu.shape[0]):
            lu[i, 0] /= lu[i - 1, 1]
            lu[i, 1] -= lu[i, 0] * lu[i - 1, 2]
        lu.flags.writeable = False
        self._lu = lu

    @classmethod
    def constant(
        cls, n: int, lower: float, diag: float, upper: float
    ) -> TridiagonalSystem:
        return cls(constant_coefficients(n, lower, diag, upper))

    def __len__(self) -> int:
        return int(self._lu.shape[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)})"

    @property
    def decomposition(self) -> NDArray[np.floating]:
        """Read-only (n, 3) array of the decomposed (lower, diag, upper) rows."""
        return self._lu

    def solve(self, rhs: ArrayLike | Sequence[float]) -> NDArray[np.floating]:
        """
        Solve A x = rhs.

        A writeable float64 ndarray ``rhs`` is overwritten with the solution.
        Any other input is converted to a new float64 array first. The
        solution array is returned in both cases.

        Raises LengthMismatchError if ``rhs`` does not have shape (n,).
        """
        x = np.asarray(rhs, dtype=float)
        n = len(self)
        if x.shape != (n,):
            raise LengthMismatchError(
                f"rhs must have shape {(n,)} got {x.shape}"
            )
        if not x.flags.writeable:
            x = x.copy()
        if n == 0:
            return x

        lower = self._lu[:, 0]
        diag = self._lu[:, 1]
        upper = self._lu[:, 2]

        # Forward elimination
        for i in range(1, n):
            x[i] -= lower[i] * x[i - 1]

        # Back substitution
        x[n - 1] /= diag[n - 1]
        for i in range(n - 2, -1, -1):
            x[i] = (x[i] - upper[i] * x[i + 1]) / diag[i]
        return x


def tridiag_mv(
    coefficients: ArrayLike, u: ArrayLike
) -> NDArray[np.floating]:
    """
    Compute y = T u where row i of T is (lower_i, diag_i, upper_i).

    Convention (for n>=2):
      y[0]   = diag[0]*u[0] + upper[0]*u[1]
      y[i]   = lower[i]*u[i-1] + diag[i]*u[i] + upper[i]*u[i+1]
      y[n-1] = lower[n-1]*u[n-2] + diag[n-1]*u[n-1]
    """
    coef = as_coefficients(coefficients)
    u = np.asarray(u, dtype=float)
    n = int(coef.shape[0])
    if u.shape != (n,):
        raise LengthMismatchError(f"u must have shape {(n,)} got {u.shape}")

    y = coef[:, 1] * u
    if n > 1:
        y[1:] += coef[1:, 0] * u[:-1]
        y[:-1] += coef[:-1, 2] * u[1:]
    return cast(NDArray[np.floating], y)


def solve_tridiag_scipy(
    coefficients: ArrayLike, rhs: ArrayLike
) -> NDArray[np.floating]:
    """
    Reference solve through SciPy's banded solver. SciPy is imported lazily.

    The input coefficients are the undecomposed rows; nothing is modified.
    """
    from scipy.linalg import (
        solve_banded,  # local import to avoid import-time dependency
    )

    coef = as_coefficients(coefficients)
    n = int(coef.shape[0])
    rhs = np.asarray(rhs, dtype=float)
    if rhs.shape != (n,):
        raise LengthMismatchError(f"rhs must have shape {(n,)} got {rhs.shape}")
    if n == 0:
        return cast(NDArray[np.floating], rhs.copy())

    ab = np.zeros((3, n), dtype=float)
    ab[0, 1:] = coef[:-1, 2]
    ab[1, :] = coef[:, 1]
    ab[2, :-1] = coef[1:, 0]

    res = solve_banded((1, 1), ab, rhs)
    return cast(NDArray[np.floating], np.asarray(res))


def tridiag_to_dense(coefficients: ArrayLike) -> NDArray[np.floating]:
    """Convert (n, 3) tridiagonal rows to a dense (n, n) matrix."""
    coef = as_coefficients(coefficients)
    n = int(coef.shape[0])

    A = np.zeros((n, n), dtype=float)
    A[np.arange(n), np.arange(n)] = coef[:, 1]
    A[np.arange(1, n), np.arange(n - 1)] = coef[1:, 0]
    A[np.arange(n - 1), np.arange(1, n)] = coef[:-1, 2]
    return A
