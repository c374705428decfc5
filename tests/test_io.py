from __future__ import annotations

import io
import json

import numpy as np
import pytest

from fd_schemes.config import DiffusionRunConfig, LaplaceRunConfig, TransportRunConfig
from fd_schemes.exceptions import InputError, LengthMismatchError, ValidationError
from fd_schemes.io import read_config, snapshot_frame, write_grid, write_snapshot
from fd_schemes.solvers import (
    BeamWarmingTransport,
    Lax,
    register_scheme,
    resolve_scheme,
    scheme_parameters,
)
from fd_schemes.solvers.methods import _SCHEME_REGISTRY


# --- Output ----------------------------------------------------------------------


def test_write_snapshot_format() -> None:
    buf = io.StringIO()
    write_snapshot(buf, 3, [-1.0, 0.0, 1.0], [1.0, 0.5, 0.0])

    assert buf.getvalue() == (
        "3 -1.0000000000 1.0000000000\n"
        "3 0.0000000000 0.5000000000\n"
        "3 1.0000000000 0.0000000000\n"
        "\n\n"
    )


def test_write_snapshot_rounds_to_ten_decimals() -> None:
    buf = io.StringIO()
    write_snapshot(buf, 0, [0.1], [1.0 / 3.0])

    assert buf.getvalue().splitlines()[0] == "0 0.1000000000 0.3333333333"


def test_write_snapshot_length_mismatch() -> None:
    with pytest.raises(LengthMismatchError):
        write_snapshot(io.StringIO(), 0, [0.0, 1.0], [1.0])


def test_write_grid_format() -> None:
    buf = io.StringIO()
    write_grid(buf, np.array([[0.0, 1.0], [0.25, 1.0]]))

    assert buf.getvalue() == (
        "0 0 0.0000000000\n"
        "0 1 1.0000000000\n"
        "\n"
        "1 0 0.2500000000\n"
        "1 1 1.0000000000\n"
        "\n"
    )


def test_write_grid_rejects_1d() -> None:
    with pytest.raises(ValueError):
        write_grid(io.StringIO(), [1.0, 2.0])


def test_snapshot_frame() -> None:
    df = snapshot_frame("lax", [0.0, 0.5], [1.0, 0.0])

    assert list(df.columns) == ["label", "x", "u"]
    assert df["label"].tolist() == ["lax", "lax"]
    np.testing.assert_allclose(df["u"].to_numpy(), [1.0, 0.0])


# --- Input -----------------------------------------------------------------------


def test_read_transport_config_from_stream() -> None:
    src = io.StringIO('{"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 2}')
    cfg = read_config(src, TransportRunConfig)

    assert cfg == TransportRunConfig(n_x=20, step_max=6, n_cfl=0.5, ncycle_out=2)
    assert cfg.lambda_ is None


def test_read_config_from_path_with_lambda_key(tmp_path) -> None:
    path = tmp_path / "diffusion.json"
    path.write_text(
        json.dumps({"n_x": 20, "step_max": 500, "mu": 1, "ncycle_out": 100, "lambda": 1.0}),
        encoding="utf-8",
    )
    cfg = read_config(path, DiffusionRunConfig)

    assert cfg.mu == 1.0
    assert isinstance(cfg.mu, float)
    assert cfg.lambda_ == 1.0


def test_read_config_null_lambda_keeps_scheme_default() -> None:
    src = io.StringIO('{"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 2, "lambda": null}')
    cfg = read_config(src, TransportRunConfig)

    assert cfg.lambda_ is None
    assert cfg.scheme_params("beam-warming") == {"n_cfl": 0.5}


def test_read_laplace_config_default_omega() -> None:
    cfg = read_config(io.StringIO('{"n_x": 8, "n_y": 8, "n_iter_max": 300}'), LaplaceRunConfig)
    assert cfg.omega == 1.5


@pytest.mark.parametrize(
    "text, match",
    [
        ('{"n_x": 20, "step_max": 6, "n_cfl": 0.5}', "missing"),
        ('{"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1, "dt": 1}', "unknown"),
        ('{"n_x": 20.5, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1}', "integer"),
        ('{"n_x": 20, "step_max": 6, "n_cfl": "fast", "ncycle_out": 1}', "number"),
        ('{"n_x": true, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1}', "integer"),
        ('{"n_x": 20, "step_max": 0, "n_cfl": 0.5, "ncycle_out": 1}', "step_max"),
        ('{"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1, "lambda": 2}', "lambda"),
        ('{"n_x": 20, "step_max": 6, "n_cfl": 0.5, "ncycle_out": 1, "lambda": "half"}', "number"),
        ('[1, 2, 3]', "JSON object"),
        ('{"n_x": 20,', "invalid JSON"),
    ],
)
def test_read_config_rejects_bad_input(text: str, match: str) -> None:
    with pytest.raises(InputError, match=match):
        read_config(io.StringIO(text), TransportRunConfig)


def test_read_config_missing_file(tmp_path) -> None:
    with pytest.raises(InputError):
        read_config(tmp_path / "nope.json", LaplaceRunConfig)


def test_input_error_is_validation_error() -> None:
    assert issubclass(InputError, ValidationError)
    assert issubclass(InputError, ValueError)


# --- Config dataclasses ---------------------------------------------------------------


def test_config_validation_on_construction() -> None:
    with pytest.raises(ValidationError):
        LaplaceRunConfig(n_x=8, n_y=8, n_iter_max=10, omega=2.5)
    with pytest.raises(ValidationError):
        DiffusionRunConfig(n_x=8, step_max=10, mu=-1.0, ncycle_out=1)


def test_scheme_params() -> None:
    cfg = TransportRunConfig(n_x=20, step_max=3, n_cfl=1.0, ncycle_out=1, lambda_=0.25)

    assert TransportRunConfig(20, 3, 1.0, 1).scheme_params("lax") == {"n_cfl": 1.0}
    assert cfg.scheme_params("beam-warming") == {"n_cfl": 1.0, "lambda_": 0.25}
    assert LaplaceRunConfig(4, 4, 10).method_params("jacobi") == {}
    assert LaplaceRunConfig(4, 4, 10, 1.2).method_params("SOR") == {"omega": 1.2}
    assert LaplaceRunConfig(4, 4, 10, 1.2).method_params("successive_over_relaxation") == {
        "omega": 1.2
    }
    assert DiffusionRunConfig(20, 3, 0.5, 1).scheme_params("ftcs-diffusion") == {"mu": 0.5}


def test_configured_lambda_rejected_for_explicit_scheme() -> None:
    cfg = DiffusionRunConfig(n_x=20, step_max=3, mu=0.5, ncycle_out=1, lambda_=1.0)

    assert cfg.scheme_params("beam-warming-diffusion") == {"mu": 0.5, "lambda_": 1.0}
    with pytest.raises(ValidationError, match="lambda"):
        cfg.scheme_params("ftcs-diffusion")


def test_scheme_params_follow_factory_parameters_not_names() -> None:
    def beam_free(n_cfl: float) -> Lax:
        return Lax(n_cfl)

    def theta_upwind(n_cfl: float, lambda_: float = 0.5) -> BeamWarmingTransport:
        return BeamWarmingTransport(n_cfl, lambda_=lambda_)

    register_scheme("beam-free", beam_free, equation="transport")
    register_scheme("theta-upwind", theta_upwind, equation="transport")
    try:
        plain = TransportRunConfig(n_x=20, step_max=3, n_cfl=1.0, ncycle_out=1)
        weighted = TransportRunConfig(n_x=20, step_max=3, n_cfl=1.0, ncycle_out=1, lambda_=0.25)

        assert scheme_parameters("beam-free") == {"n_cfl"}
        assert plain.scheme_params("beam-free") == {"n_cfl": 1.0}
        with pytest.raises(ValidationError, match="beam-free"):
            weighted.scheme_params("beam-free")
        assert weighted.scheme_params("theta-upwind") == {"n_cfl": 1.0, "lambda_": 0.25}
        assert resolve_scheme("theta-upwind", **weighted.scheme_params("theta-upwind")) == (
            BeamWarmingTransport(1.0, lambda_=0.25)
        )
    finally:
        _SCHEME_REGISTRY.pop("beam-free", None)
        _SCHEME_REGISTRY.pop("theta-upwind", None)
