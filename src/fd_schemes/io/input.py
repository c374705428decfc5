"""JSON run-parameter loader.

A run file is a single JSON object whose keys are exactly the fields of one
of the run configuration dataclasses, e.g. for a transport run::

    {"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1}

Fields with defaults (``lambda_``, ``omega``) may be omitted, and ``lambda`` may
be null. ``lambda`` is accepted as a spelling of ``lambda_``.
"""

from __future__ import annotations

import json
from dataclasses import MISSING, fields
from os import PathLike
from pathlib import Path
from typing import Any, TextIO, TypeVar

from ..exceptions import InputError, ValidationError

__all__ = ["read_config", "parse_config"]

C = TypeVar("C")

_KEY_ALIASES = {"lambda": "lambda_"}


def _coerce(value: Any, annotation: str, key: str) -> Any:
    if annotation == "int":
        if isinstance(value, bool) or not isinstance(value, int):
            raise InputError(f"'{key}' must be an integer, got {value!r}")
        return value
    if annotation == "float | None" and value is None:
        return None
    if annotation in ("float", "float | None"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InputError(f"'{key}' must be a number, got {value!r}")
        return float(value)
    return value


def parse_config(data: Any, cls: type[C]) -> C:
    """Build ``cls`` from an already-decoded JSON mapping."""
    if not isinstance(data, dict):
        raise InputError(f"expected a JSON object, got {type(data).__name__}")

    field_map = {f.name: f for f in fields(cls)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = _KEY_ALIASES.get(raw_key, raw_key)
        if key not in field_map:
            raise InputError(f"unknown key '{raw_key}' for {cls.__name__}")
        kwargs[key] = _coerce(value, str(field_map[key].type), raw_key)

    missing = [
        name
        for name, f in field_map.items()
        if name not in kwargs and f.default is MISSING
    ]
    if missing:
        raise InputError(f"missing key(s) for {cls.__name__}: {', '.join(missing)}")

    try:
        return cls(**kwargs)
    except ValidationError as e:
        raise InputError(str(e)) from e


def read_config(source: TextIO | str | PathLike[str], cls: type[C]) -> C:
    """Read a JSON run file (open stream or path) into a validated ``cls``.

    Raises
    ------
    InputError
        Unparsable JSON, missing or unknown keys, wrong value types, or values
        rejected by the dataclass validation.
    """
    try:
        if isinstance(source, (str, PathLike)):
            text = Path(source).read_text(encoding="utf-8")
        else:
            text = source.read()
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"invalid JSON: {e}") from e
    except OSError as e:
        raise InputError(f"cannot read run file: {e}") from e
    return parse_config(data, cls)
