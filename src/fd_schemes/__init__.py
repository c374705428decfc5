"""
fd_schemes

Finite-difference schemes for linear model PDEs on structured grids:
explicit and implicit time-steppers for 1D transport and diffusion, and
point relaxation (Jacobi, SOR) for the 2D Laplace equation.

The main entry points are re-exported here, so you can write, for example:

    from fd_schemes import make_time_stepper
    solver = make_time_stepper("lax", u0, step_max=6, n_cfl=0.5)
"""

from .config import DiffusionRunConfig, LaplaceRunConfig, TransportRunConfig
from .driver import collect_snapshots, run_relaxation, run_time_stepper
from .exceptions import (
    AlreadyExecutedError,
    InputError,
    LengthMismatchError,
    MaxIterationsError,
    SolverCompletedError,
    SolverError,
    ValidationError,
)
from .numerics.tridiag import TridiagonalSystem
from .solvers import (
    RelaxationSolver,
    TimeSteppingSolver,
    available_relaxation_methods,
    available_schemes,
    make_relaxation_solver,
    make_time_stepper,
)

__all__ = [
    # Solvers
    "TimeSteppingSolver",
    "RelaxationSolver",
    "TridiagonalSystem",
    "make_time_stepper",
    "make_relaxation_solver",
    "available_schemes",
    "available_relaxation_methods",
    # Runs
    "TransportRunConfig",
    "DiffusionRunConfig",
    "LaplaceRunConfig",
    "run_time_stepper",
    "run_relaxation",
    "collect_snapshots",
    # Errors
    "SolverError",
    "ValidationError",
    "InputError",
    "SolverCompletedError",
    "AlreadyExecutedError",
    "MaxIterationsError",
    "LengthMismatchError",
]
