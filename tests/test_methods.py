from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import pytest

from fd_schemes.exceptions import ValidationError
from fd_schemes.solvers import (
    BackwardDifference,
    ForwardDifference,
    Lax,
    LaxWendroff,
    PointJacobi,
    Sor,
    available_relaxation_methods,
    available_schemes,
    make_time_stepper,
    register_scheme,
    resolve_relaxation_method,
    resolve_scheme,
    scheme_equation,
)
from fd_schemes.solvers.base import ExplicitScheme
from fd_schemes.solvers.methods import _SCHEME_REGISTRY


def test_builtin_scheme_names() -> None:
    assert available_schemes("transport") == [
        "backward",
        "beam-warming",
        "forward",
        "ftcs",
        "lax",
        "lax-wendroff",
        "leapfrog",
        "maccormack",
    ]
    assert available_schemes("diffusion") == ["beam-warming-diffusion", "ftcs-diffusion"]
    assert set(available_relaxation_methods()) >= {"jacobi", "sor"}


@pytest.mark.parametrize(
    "key, cls",
    [
        ("upwind", BackwardDifference),
        ("good-upwind", BackwardDifference),
        ("Bad_Upwind", ForwardDifference),
        (" LAX ", Lax),
        ("lw", LaxWendroff),
        ("lax_wendroff", LaxWendroff),
    ],
)
def test_aliases_resolve(key: str, cls: type) -> None:
    assert isinstance(resolve_scheme(key, n_cfl=0.5), cls)


def test_relaxation_methods_resolve() -> None:
    assert isinstance(resolve_relaxation_method("point-jacobi"), PointJacobi)
    sor = resolve_relaxation_method("SOR", omega=1.25)
    assert isinstance(sor, Sor)
    assert sor.omega == 1.25


def test_instance_passthrough() -> None:
    scheme = Lax(0.3)
    assert resolve_scheme(scheme) is scheme
    with pytest.raises(ValueError):
        resolve_scheme(scheme, n_cfl=0.5)


def test_scheme_equation() -> None:
    assert scheme_equation("upwind") == "transport"
    assert scheme_equation("beamwarming-diffusion") == "diffusion"


def test_unknown_name_lists_available() -> None:
    with pytest.raises(ValueError, match="Available"):
        resolve_scheme("crank-nicolson-3d", n_cfl=0.5)
    with pytest.raises(ValueError, match="Available"):
        resolve_relaxation_method("multigrid")


def test_wrong_parameters_raise_validation_error() -> None:
    with pytest.raises(ValidationError):
        resolve_scheme("lax", mu=0.5)
    with pytest.raises(ValidationError):
        resolve_scheme("beam-warming", n_cfl=0.5, omega=1.0)


def test_duplicate_registration_rejected() -> None:
    with pytest.raises(KeyError):
        register_scheme("lax", Lax, equation="transport")


def test_register_custom_scheme() -> None:
    @dataclass(frozen=True, slots=True)
    class Frozen(ExplicitScheme):
        name: ClassVar[str] = "frozen-test"

        def step(self, u, u_prev):
            return u.copy()

    try:
        register_scheme("frozen-test", Frozen, equation="transport", aliases=("ft",))
        solver = make_time_stepper("ft", [1.0, 2.0, 3.0], step_max=2)
        solver.advance()
        solver.advance()

        np.testing.assert_array_equal(solver.current_state(), [1.0, 2.0, 3.0])
        assert "frozen-test" in available_schemes("transport")
    finally:
        _SCHEME_REGISTRY.pop("frozen-test", None)
        _SCHEME_REGISTRY.pop("ft", None)
