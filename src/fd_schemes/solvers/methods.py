"""Scheme registry.

Lets drivers and the command line pick a scheme by name, e.g.
``make_time_stepper("lax", u0, step_max=6, n_cfl=0.5)``, and lets users
register their own schemes without editing this package.

Two registries exist: time-stepping schemes (tagged with the equation they
discretize, ``"transport"`` or ``"diffusion"``) and relaxation methods.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Literal

from numpy.typing import ArrayLike

from ..exceptions import ValidationError
from .base import RelaxationMethod, TimeSteppingScheme
from .diffusion import BeamWarmingDiffusion, FtcsDiffusion
from .relaxation import PointJacobi, RelaxationSolver, Sor
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

Equation = Literal["transport", "diffusion"]
SchemeFactory = Callable[..., TimeSteppingScheme]
RelaxationFactory = Callable[..., RelaxationMethod]


@dataclass(frozen=True, slots=True)
class SchemeEntry:
    name: str
    factory: SchemeFactory
    equation: Equation


_SCHEME_REGISTRY: dict[str, SchemeEntry] = {}
_RELAXATION_REGISTRY: dict[str, RelaxationFactory] = {}


def _normalize(key: str) -> str:
    kk = str(key).lower().strip().replace("_", "-")
    if not kk:
        raise ValueError("Method name/alias cannot be empty")
    return kk


def register_scheme(
    name: str,
    factory: SchemeFactory,
    *,
    equation: Equation,
    overwrite: bool = False,
    aliases: tuple[str, ...] = (),
) -> None:
    """Register a time-stepping scheme factory under one or more names.

    Parameters
    ----------
    name:
        Primary key passed to :func:`make_time_stepper`.
    factory:
        Callable taking the scheme parameters as keywords.
    equation:
        ``"transport"`` or ``"diffusion"``.
    overwrite:
        If False (default), raise if ``name`` or any alias already exists.
    aliases:
        Additional strings resolving to the same factory.
    """
    if equation not in ("transport", "diffusion"):
        raise ValueError(f"Unknown equation '{equation}'")

    primary = _normalize(name)
    entry = SchemeEntry(name=primary, factory=factory, equation=equation)
    for k in (name, *aliases):
        kk = _normalize(k)
        if (not overwrite) and (kk in _SCHEME_REGISTRY):
            raise KeyError(f"Scheme '{kk}' is already registered")
        _SCHEME_REGISTRY[kk] = entry


def register_relaxation_method(
    name: str,
    factory: RelaxationFactory,
    *,
    overwrite: bool = False,
    aliases: tuple[str, ...] = (),
) -> None:
    """Register a relaxation method factory under one or more names."""
    for k in (name, *aliases):
        kk = _normalize(k)
        if (not overwrite) and (kk in _RELAXATION_REGISTRY):
            raise KeyError(f"Relaxation method '{kk}' is already registered")
        _RELAXATION_REGISTRY[kk] = factory


def available_schemes(equation: Equation | None = None) -> list[str]:
    """Primary scheme names (sorted), optionally restricted to one equation."""
    names = {
        e.name
        for e in _SCHEME_REGISTRY.values()
        if equation is None or e.equation == equation
    }
    return sorted(names)


def available_relaxation_methods() -> list[str]:
    """Registered relaxation keys, aliases included (sorted)."""
    return sorted(_RELAXATION_REGISTRY.keys())


def scheme_equation(name: str) -> Equation:
    return _lookup_scheme(name).equation


def _lookup_scheme(name: str) -> SchemeEntry:
    key = _normalize(name)
    try:
        return _SCHEME_REGISTRY[key]
    except KeyError as e:
        raise ValueError(
            f"Unknown scheme '{name}'. Available: {', '.join(available_schemes())}"
        ) from e


def _lookup_relaxation(method: str) -> RelaxationFactory:
    key = _normalize(method)
    try:
        return _RELAXATION_REGISTRY[key]
    except KeyError as e:
        raise ValueError(
            f"Unknown relaxation method '{method}'. "
            f"Available: {', '.join(available_relaxation_methods())}"
        ) from e


def _factory_parameters(factory: Callable[..., Any]) -> frozenset[str]:
    if is_dataclass(factory):
        return frozenset(f.name for f in fields(factory) if f.init)
    return frozenset(inspect.signature(factory).parameters)


def scheme_parameters(name: str) -> frozenset[str]:
    """Keyword parameters accepted by the factory registered under ``name``."""
    return _factory_parameters(_lookup_scheme(name).factory)


def relaxation_method_parameters(name: str) -> frozenset[str]:
    return _factory_parameters(_lookup_relaxation(name))


def _build(factory: Callable[..., Any], label: str, params: dict[str, Any]) -> Any:
    try:
        return factory(**params)
    except TypeError as e:
        raise ValidationError(f"Invalid parameters for '{label}': {e}") from e


def resolve_scheme(
    scheme: str | TimeSteppingScheme, **params: Any
) -> TimeSteppingScheme:
    """Turn a name (plus parameters) or a scheme instance into a scheme."""
    if isinstance(scheme, TimeSteppingScheme):
        if params:
            raise ValueError("Parameters cannot be combined with a scheme instance")
        return scheme
    entry = _lookup_scheme(scheme)
    return _build(entry.factory, entry.name, params)


def resolve_relaxation_method(
    method: str | RelaxationMethod, **params: Any
) -> RelaxationMethod:
    """Turn a name (plus parameters) or a method instance into a method."""
    if isinstance(method, RelaxationMethod):
        if params:
            raise ValueError("Parameters cannot be combined with a method instance")
        return method

    return _build(_lookup_relaxation(method), _normalize(method), params)


def make_time_stepper(
    scheme: str | TimeSteppingScheme,
    u0: ArrayLike,
    *,
    step_max: int,
    **params: Any,
) -> TimeSteppingSolver:
    """Build a :class:`TimeSteppingSolver` for a registered scheme."""
    return TimeSteppingSolver(u0, resolve_scheme(scheme, **params), step_max=step_max)


def make_relaxation_solver(
    method: str | RelaxationMethod,
    u_init: ArrayLike,
    *,
    n_iter_max: int,
    **params: Any,
) -> RelaxationSolver:
    """Build a :class:`RelaxationSolver` for a registered method."""
    return RelaxationSolver(
        u_init, resolve_relaxation_method(method, **params), n_iter_max=n_iter_max
    )


def _register_builtin_methods() -> None:
    register_scheme(
        "forward",
        ForwardDifference,
        equation="transport",
        overwrite=True,
        aliases=("forward-difference", "downwind", "bad-upwind"),
    )
    register_scheme(
        "backward",
        BackwardDifference,
        equation="transport",
        overwrite=True,
        aliases=("backward-difference", "upwind", "good-upwind"),
    )
    register_scheme("ftcs", FtcsTransport, equation="transport", overwrite=True)
    register_scheme("lax", Lax, equation="transport", overwrite=True)
    register_scheme(
        "leapfrog", Leapfrog, equation="transport", overwrite=True, aliases=("leap-frog",)
    )
    register_scheme(
        "lax-wendroff",
        LaxWendroff,
        equation="transport",
        overwrite=True,
        aliases=("laxwendroff", "lw"),
    )
    register_scheme("maccormack", MacCormack, equation="transport", overwrite=True)
    register_scheme(
        "beam-warming",
        BeamWarmingTransport,
        equation="transport",
        overwrite=True,
        aliases=("beamwarming",),
    )
    register_scheme(
        "ftcs-diffusion", FtcsDiffusion, equation="diffusion", overwrite=True
    )
    register_scheme(
        "beam-warming-diffusion",
        BeamWarmingDiffusion,
        equation="diffusion",
        overwrite=True,
        aliases=("beamwarming-diffusion",),
    )

    register_relaxation_method(
        "jacobi", PointJacobi, overwrite=True, aliases=("point-jacobi",)
    )
    register_relaxation_method(
        "sor", Sor, overwrite=True, aliases=("successive-over-relaxation",)
    )


_register_builtin_methods()
