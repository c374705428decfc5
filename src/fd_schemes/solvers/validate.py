"""Shared parameter checks so every scheme reports the same messages."""

from __future__ import annotations

import math
from numbers import Integral, Real

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import ValidationError


def state_vector(u: ArrayLike, name: str = "u") -> NDArray[np.floating]:
    arr = np.array(u, dtype=float)
    if arr.ndim != 1:
        raise ValidationError(f"{name} must be 1D")
    if arr.size == 0:
        raise ValidationError(f"{name} must not be empty")
    return arr


def state_grid(u: ArrayLike, name: str = "u_init") -> NDArray[np.floating]:
    arr = np.array(u, dtype=float)
    if arr.ndim != 2:
        raise ValidationError(f"{name} must be 2D")
    if arr.size == 0:
        raise ValidationError(f"{name} must not be empty")
    return arr


def _finite_real(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a real number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return v


def positive_count(value: int, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer")
    if not isinstance(value, Integral):
        v = _finite_real(value, name)
        if not v.is_integer():
            raise ValidationError(f"{name} must be an integer")
    if value <= 0:
        raise ValidationError(f"{name} must be positive")
    return int(value)


def positive_number(value: float, name: str) -> float:
    v = _finite_real(value, name)
    if not v > 0.0:
        raise ValidationError(f"{name} must be positive")
    return v


def in_closed_interval(value: float, lo: float, hi: float, name: str) -> float:
    v = _finite_real(value, name)
    if not (lo <= v <= hi):
        raise ValidationError(f"{name} must be between {lo:g} and {hi:g}")
    return v
