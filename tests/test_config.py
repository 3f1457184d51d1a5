"""
Tests for user-facing option validation.
"""

import json

import pytest

from ohgrid.config import OHOptions, load_options, validate_options
from ohgrid.errors import ConfigError


def test_defaults():
    opts = validate_options()
    assert opts == OHOptions(radial_dimension=0, alpha=0.5, run_solver=True, edge_angle_interpolation=False)


def test_valid_overrides_are_cast():
    opts = validate_options({"radial_dimension": "12", "alpha": "0.3", "run_solver": "no"})
    assert opts.radial_dimension == 12
    assert opts.alpha == pytest.approx(0.3)
    assert opts.run_solver is False


@pytest.mark.parametrize("value", [1, -3, 2.5, True, "abc", None])
def test_bad_radial_dimension(value):
    with pytest.raises(ConfigError):
        validate_options({"radial_dimension": value})


@pytest.mark.parametrize("value", [0, 2])
def test_allowed_radial_dimension_edges(value):
    assert validate_options({"radial_dimension": value}).radial_dimension == value


@pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 2, "x", None, False])
def test_bad_alpha(value):
    with pytest.raises(ConfigError):
        validate_options({"alpha": value})


def test_bad_flag():
    with pytest.raises(ConfigError):
        validate_options({"run_solver": "maybe"})


def test_unknown_key_is_reported():
    with pytest.raises(ConfigError) as info:
        validate_options({"alpah": 0.4})
    assert "alpah" in str(info.value)


def test_load_options(tmp_path):
    path = tmp_path / "opts.json"
    path.write_text(json.dumps({"radial_dimension": 8, "alpha": 0.25, "edge_angle_interpolation": True}))
    opts = load_options(str(path))
    assert opts.radial_dimension == 8
    assert opts.edge_angle_interpolation is True


def test_load_options_rejects_bad_json(tmp_path):
    path = tmp_path / "opts.json"
    path.write_text("{radial_dimension: 8")
    with pytest.raises(ConfigError):
        load_options(str(path))


def test_load_options_rejects_non_object(tmp_path):
    path = tmp_path / "opts.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_options(str(path))
