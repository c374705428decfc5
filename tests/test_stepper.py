from __future__ import annotations

import math
from dataclasses import fields

import numpy as np
import pytest

from fd_schemes.exceptions import SolverCompletedError, ValidationError
from fd_schemes.solvers import (
    BeamWarmingDiffusion,
    BeamWarmingTransport,
    FtcsDiffusion,
    Lax,
    Sor,
    TimeSteppingSolver,
    available_schemes,
    make_time_stepper,
)


def _params(name: str) -> dict[str, float]:
    if name in available_schemes("diffusion"):
        return {"mu": 0.4}
    return {"n_cfl": 0.8}


@pytest.mark.parametrize("name", available_schemes())
def test_boundaries_fixed_at_every_step(rng, name: str) -> None:
    u0 = rng(3).uniform(-1.0, 1.0, size=17)
    solver = make_time_stepper(name, u0, step_max=25, **_params(name))

    while not solver.is_completed():
        solver.advance()
        u = solver.current_state()
        assert u[0] == u0[0]
        assert u[-1] == u0[-1]


@pytest.mark.parametrize("name", available_schemes())
def test_input_array_not_modified(name: str) -> None:
    u0 = np.array([1.0, 1.0, 0.5, 0.0, 0.0, 0.0])
    before = u0.copy()
    solver = make_time_stepper(name, u0, step_max=3, **_params(name))
    while not solver.is_completed():
        solver.advance()

    np.testing.assert_array_equal(u0, before)


def test_completes_exactly_after_step_max() -> None:
    solver = TimeSteppingSolver([1.0, 1.0, 0.0, 0.0], Lax(0.5), step_max=3)

    for expected_step in (1, 2):
        solver.advance()
        assert solver.current_step() == expected_step
        assert not solver.is_completed()

    solver.advance()
    assert solver.current_step() == 3
    assert solver.is_completed()


def test_advance_after_completion_raises_without_mutation() -> None:
    solver = TimeSteppingSolver([1.0, 1.0, 0.0, 0.0], Lax(0.5), step_max=1)
    solver.advance()
    state = np.array(solver.current_state())

    with pytest.raises(SolverCompletedError):
        solver.advance()

    assert solver.current_step() == 1
    assert solver.is_completed()
    np.testing.assert_array_equal(solver.current_state(), state)


def test_initial_counters() -> None:
    solver = TimeSteppingSolver([0.0, 1.0, 0.0], FtcsDiffusion(0.25), step_max=2)

    assert solver.current_step() == 0
    assert not solver.is_completed()
    assert solver.name == "ftcs-diffusion"
    assert solver.step_max == 2


def test_current_state_is_read_only() -> None:
    solver = TimeSteppingSolver([0.0, 1.0, 0.0], FtcsDiffusion(0.25), step_max=2)

    with pytest.raises(ValueError):
        solver.current_state()[1] = 5.0


def test_two_point_grid_never_changes() -> None:
    solver = TimeSteppingSolver([1.0, 0.0], BeamWarmingTransport(0.5), step_max=2)
    solver.advance()
    solver.advance()

    np.testing.assert_array_equal(solver.current_state(), [1.0, 0.0])


def test_solvers_own_independent_implicit_systems() -> None:
    scheme = BeamWarmingDiffusion(0.5)
    a = TimeSteppingSolver(np.zeros(5), scheme, step_max=1)
    b = TimeSteppingSolver(np.zeros(5), scheme, step_max=1)
    c = TimeSteppingSolver(np.zeros(9), scheme, step_max=1)

    assert a.update.system is not b.update.system
    assert len(a.update.system) == 5
    assert len(c.update.system) == 9
    # Building solvers leaves the scheme as constructed.
    assert scheme == BeamWarmingDiffusion(0.5)
    assert [f.name for f in fields(scheme)] == ["mu", "lambda_"]


def test_direct_implicit_step_matches_solver_step() -> None:
    u0 = np.array([0.0, 0.5, 1.0, 0.5, 0.0])
    scheme = BeamWarmingDiffusion(0.5)
    solver = TimeSteppingSolver(u0, scheme, step_max=1)
    solver.advance()

    np.testing.assert_allclose(scheme.step(u0, u0), solver.current_state(), atol=1e-15)


@pytest.mark.parametrize(
    "u0, step_max",
    [
        ([], 5),
        ([[1.0, 0.0], [0.0, 1.0]], 5),
        ([1.0, 0.0], 0),
        ([1.0, 0.0], -2),
        ([1.0, 0.0], 2.5),
        ([1.0, 0.0], math.inf),
        ([1.0, 0.0], -math.inf),
        ([1.0, 0.0], math.nan),
        ([1.0, 0.0], "3"),
        ([1.0, 0.0], True),
    ],
)
def test_invalid_construction(u0, step_max) -> None:
    with pytest.raises(ValidationError):
        TimeSteppingSolver(u0, Lax(0.5), step_max=step_max)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Lax(0.0),
        lambda: Lax(-0.5),
        lambda: FtcsDiffusion(0.0),
        lambda: BeamWarmingTransport(0.5, lambda_=1.5),
        lambda: BeamWarmingDiffusion(0.5, lambda_=-0.1),
        lambda: BeamWarmingDiffusion(0.5, lambda_=math.nan),
        lambda: Lax(math.inf),
        lambda: FtcsDiffusion(math.nan),
    ],
)
def test_invalid_scheme_parameters(factory) -> None:
    with pytest.raises(ValidationError):
        factory()


def test_rejects_non_scheme() -> None:
    with pytest.raises(TypeError):
        TimeSteppingSolver([1.0, 0.0], Sor(1.5), step_max=1)  # type: ignore[arg-type]
