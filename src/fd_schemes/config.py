"""Run configurations for the drivers and the command line.

Each configuration is validated on construction so a bad input file fails
before any grid is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ValidationError
from .solvers.methods import relaxation_method_parameters, scheme_parameters
from .solvers.validate import in_closed_interval, positive_count, positive_number


def _with_lambda(
    params: dict[str, float], lambda_: float | None, scheme: str
) -> dict[str, float]:
    if lambda_ is None:
        return params
    if "lambda_" not in scheme_parameters(scheme):
        raise ValidationError(f"scheme '{scheme}' does not take a lambda parameter")
    params["lambda_"] = lambda_
    return params


@dataclass(frozen=True, slots=True)
class TransportRunConfig:
    """Transport equation run on x in [-1, 1].

    n_x:        number of cells (the grid has n_x + 1 nodes)
    step_max:   number of time steps
    n_cfl:      Courant number c dt / dx
    ncycle_out: steps between snapshots
    lambda_:    implicit weighting factor; None leaves the scheme's default
    """

    n_x: int
    step_max: int
    n_cfl: float
    ncycle_out: int
    lambda_: float | None = None

    def __post_init__(self) -> None:
        positive_count(self.n_x, "n_x")
        positive_count(self.step_max, "step_max")
        positive_number(self.n_cfl, "n_cfl")
        positive_count(self.ncycle_out, "ncycle_out")
        if self.lambda_ is not None:
            in_closed_interval(self.lambda_, 0.0, 1.0, "lambda")

    def scheme_params(self, scheme: str) -> dict[str, float]:
        """Keyword parameters for the registered scheme ``scheme``.

        A configured lambda is rejected for schemes whose factory has no
        ``lambda_`` parameter.
        """
        return _with_lambda({"n_cfl": self.n_cfl}, self.lambda_, scheme)


@dataclass(frozen=True, slots=True)
class DiffusionRunConfig:
    """Diffusion equation run on x in [-1, 1].

    mu is the diffusion number alpha dt / dx^2.
    """

    n_x: int
    step_max: int
    mu: float
    ncycle_out: int
    lambda_: float | None = None

    def __post_init__(self) -> None:
        positive_count(self.n_x, "n_x")
        positive_count(self.step_max, "step_max")
        positive_number(self.mu, "mu")
        positive_count(self.ncycle_out, "ncycle_out")
        if self.lambda_ is not None:
            in_closed_interval(self.lambda_, 0.0, 1.0, "lambda")

    def scheme_params(self, scheme: str) -> dict[str, float]:
        return _with_lambda({"mu": self.mu}, self.lambda_, scheme)


@dataclass(frozen=True, slots=True)
class LaplaceRunConfig:
    """Laplace equation on an (n_x + 1) x (n_y + 1) node grid.

    omega is passed to methods that take it (SOR).
    """

    n_x: int
    n_y: int
    n_iter_max: int
    omega: float = 1.5

    def __post_init__(self) -> None:
        positive_count(self.n_x, "n_x")
        positive_count(self.n_y, "n_y")
        positive_count(self.n_iter_max, "n_iter_max")
        in_closed_interval(self.omega, 1.0, 2.0, "omega")

    def method_params(self, method: str) -> dict[str, float]:
        if "omega" in relaxation_method_parameters(method):
            return {"omega": self.omega}
        return {}
