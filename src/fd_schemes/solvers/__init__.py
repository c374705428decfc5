"""Time-stepping and relaxation solvers.

Time-steppers advance a 1D state for the transport equation
``u_t + c u_x = 0`` or the diffusion equation ``u_t = alpha u_xx``;
relaxation solvers iterate a 2D grid to the solution of the Laplace
equation. Schemes are small immutable objects; the solvers own the state.
"""

from .base import RelaxationMethod, TimeSteppingScheme
from .diffusion import BeamWarmingDiffusion, FtcsDiffusion
from .methods import (
    available_relaxation_methods,
    available_schemes,
    make_relaxation_solver,
    make_time_stepper,
    register_relaxation_method,
    register_scheme,
    relaxation_method_parameters,
    resolve_relaxation_method,
    resolve_scheme,
    scheme_equation,
    scheme_parameters,
)
from .relaxation import TOLERANCE, PointJacobi, RelaxationSolver, Sor
from .stepper import TimeSteppingSolver
from .transport import (
    BackwardDifference,
    BeamWarmingTransport,
    ForwardDifference,
    FtcsTransport,
    Lax,
    LaxWendroff,
    Leapfrog,
    MacCormack,
)

__all__ = [
    # Interfaces
    "TimeSteppingScheme",
    "RelaxationMethod",
    # Transport schemes
    "ForwardDifference",
    "BackwardDifference",
    "FtcsTransport",
    "Lax",
    "Leapfrog",
    "LaxWendroff",
    "MacCormack",
    "BeamWarmingTransport",
    # Diffusion schemes
    "FtcsDiffusion",
    "BeamWarmingDiffusion",
    # Relaxation
    "PointJacobi",
    "Sor",
    "TOLERANCE",
    # Solvers
    "TimeSteppingSolver",
    "RelaxationSolver",
    # Registry
    "register_scheme",
    "register_relaxation_method",
    "available_schemes",
    "available_relaxation_methods",
    "scheme_equation",
    "scheme_parameters",
    "relaxation_method_parameters",
    "resolve_scheme",
    "resolve_relaxation_method",
    "make_time_stepper",
    "make_relaxation_solver",
]
