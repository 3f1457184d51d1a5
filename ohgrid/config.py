# -*- coding: utf-8 -*-
# OHGrid/ohgrid/config.py

"""
Project: OHGrid
Date: 3/2/2026 (Updated: 3/9/2026)

Purpose:
--------
User-facing options of the OH grid builder and their validation. Invalid values
block the pipeline before any geometry is touched.

Main Tasks:
-----------
    1. Hold the options in a frozen dataclass (`OHOptions`) with sensible defaults.
    2. Type- and range-check a user mapping into `OHOptions` (`validate_options`).
    3. Read options from a JSON file (`load_options`).

Options:
--------
    radial_dimension          int    0 (leave spokes at kernel default) or >= 2
    alpha                     float  radial extent, strictly inside (0, 1)
    run_solver                bool   relax the five regions after assembly
    edge_angle_interpolation  bool   interpolate the angle at the fixed outer edges
"""

import json
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional
from .errors import ConfigError

# Fixed iteration count handed to the elliptic solver
RELAX_ITERATIONS = 10

__all__ = [
    "RELAX_ITERATIONS",
    "OHOptions",
    "validate_radial_dimension",
    "validate_alpha",
    "validate_options",
    "load_options",
]


@dataclass(frozen=True)
class OHOptions:
    radial_dimension: int = 0
    alpha: float = 0.5
    run_solver: bool = True
    edge_angle_interpolation: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_radial_dimension(value: Any) -> int:
    """
    Cast and check the radial (spoke) dimension.

    Raises
    ------
    ConfigError
        If the value is not an integer, or is 1 or negative.
    """
    if isinstance(value, bool):
        raise ConfigError("radial_dimension must be an integer", {"value": value})
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ConfigError("radial_dimension must be an integer", {"value": value})
    if n != value and not (isinstance(value, str) and value.strip() == str(n)):
        raise ConfigError("radial_dimension must be an integer", {"value": value})
    if n != 0 and n < 2:
        raise ConfigError("radial_dimension must be 0 or >= 2", {"value": n})
    return n


def validate_alpha(value: Any) -> float:
    """
    Cast and check the radial extent; it must lie strictly between 0 and 1.

    Raises
    ------
    ConfigError
        If the value is not a number or not inside (0, 1).
    """
    if isinstance(value, bool):
        raise ConfigError("alpha must be a number", {"value": value})
    try:
        a = float(value)
    except (TypeError, ValueError):
        raise ConfigError("alpha must be a number", {"value": value})
    if not (0.0 < a < 1.0):
        raise ConfigError("alpha must lie strictly between 0 and 1", {"value": a})
    return a


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "yes", "1", "false", "no", "0"):
        return value.strip().lower() in ("true", "yes", "1")
    raise ConfigError("{} must be a boolean".format(key), {"value": value})


def validate_options(options: Optional[Mapping[str, Any]] = None) -> OHOptions:
    """
    Merge a user mapping over the defaults and return a validated `OHOptions`.

    Parameters
    ----------
    options : Mapping[str, Any], optional
        Any subset of {"radial_dimension", "alpha", "run_solver",
        "edge_angle_interpolation"}. None means all defaults.

    Returns
    -------
    OHOptions

    Raises
    ------
    ConfigError
        On unknown keys or invalid values.
    """
    merged = OHOptions().to_dict()
    if options:
        unknown = sorted(set(options) - set(merged))
        if unknown:
            raise ConfigError("Unknown option(s)", {"keys": unknown})
        merged.update(options)

    return OHOptions(
        radial_dimension=validate_radial_dimension(merged["radial_dimension"]),
        alpha=validate_alpha(merged["alpha"]),
        run_solver=_as_bool("run_solver", merged["run_solver"]),
        edge_angle_interpolation=_as_bool("edge_angle_interpolation",
                                          merged["edge_angle_interpolation"]),
    )


def load_options(path: str) -> OHOptions:
    """Read a JSON object of options from `path` and validate it."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError("Options file is not valid JSON", {"path": path, "error": str(e)})
    if not isinstance(raw, dict):
        raise ConfigError("Options file must hold a JSON object", {"path": path})
    return validate_options(raw)
