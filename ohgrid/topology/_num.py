# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/_num.py

"""
Project: OHGrid
Date: 3/2/2026

Purpose:
--------
Private 3-vector helpers used by the topology generator and the kernels.

Main Tasks:
-----------
    1. Coerce user/kernel coordinates into finite (3,) float arrays (2-D promoted to z=0).
    2. Centroid of a set of points.
    3. Linear interpolation between two points.
    4. Coincidence test with an absolute tolerance.
"""

from typing import Iterable
import numpy as np


def as_point(p) -> np.ndarray:
    """
    Return `p` as a finite float array of shape (3,).

    Raises
    ------
    ValueError
        If `p` does not have 2 or 3 components or holds non-finite values.
    """
    arr = np.asarray(p, dtype=float).reshape(-1)
    if arr.shape == (2,):
        arr = np.append(arr, 0.0)
    if arr.shape != (3,):
        raise ValueError("Expected a point with 2 or 3 coordinates, got shape {}.".format(arr.shape))
    if not np.isfinite(arr).all():
        raise ValueError("Non-finite coordinates in point {}.".format(arr.tolist()))
    return arr


def centroid(points: Iterable) -> np.ndarray:
    """Arithmetic mean of the points (sum / count)."""
    pts = [as_point(p) for p in points]
    if not pts:
        raise ValueError("Cannot take the centroid of an empty point set.")
    P = np.vstack(pts)
    return P.sum(axis=0) / P.shape[0]


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Point a + t * (b - a)."""
    a = as_point(a)
    b = as_point(b)
    return a + float(t) * (b - a)


def coincident(a: np.ndarray, b: np.ndarray, tol: float) -> bool:
    """True if the two points agree component-wise within the absolute tolerance."""
    return bool(np.allclose(as_point(a), as_point(b), atol=tol, rtol=0.0))
