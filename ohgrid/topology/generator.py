# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/generator.py

"""
Project: OHGrid
Date: 3/4/2026 (Updated: 3/10/2026)

Purpose:
--------
Create the inner curves of an OH decomposition from an ordered 4-node loop.

Main Tasks:
-----------
    1. Centroid of the four loop nodes.
    2. Core points: each node pulled toward the centroid,
           core_i = p_i + (1 - alpha) * (centroid - p_i)
       alpha -> 1 keeps the core point on the node, alpha -> 0 collapses it onto the centroid.
    3. Four core curves core_i -> core_{i+1} and four spokes core_i -> p_i.

Notes:
------
- Output curves follow the input node order so the domain builder can pair them by index.
- Spokes are attached to the loop node handles, never to a node found by coordinates.
- Calling this twice on the same loop creates two independent sets of curves.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np
from ..config import validate_alpha
from ..kernel.base import GeometryKernel, CurveId, NodeId
from ._num import as_point, centroid

logger = logging.getLogger(__name__)

__all__ = ["TopologyCurves", "loop_centroid", "core_points", "generate_topology"]


@dataclass(frozen=True)
class TopologyCurves:
    core: Tuple[CurveId, CurveId, CurveId, CurveId]
    spokes: Tuple[CurveId, CurveId, CurveId, CurveId]
    centroid: np.ndarray
    core_points: np.ndarray


def loop_centroid(points: Sequence) -> np.ndarray:
    """Arithmetic mean of the four loop points, shape (3,)."""
    if len(points) != 4:
        raise ValueError("Expected 4 loop points (got {})".format(len(points)))
    return centroid(points)


def core_points(points: Sequence, alpha: float) -> np.ndarray:
    """
    Interpolated core points for the four loop points.

    Parameters
    ----------
    points : Sequence
        Four points (2 or 3 coordinates each) in loop order.
    alpha : float
        Radial extent, strictly inside (0, 1).

    Returns
    -------
    np.ndarray
        (4, 3) array; row i belongs to points[i].
    """
    a = validate_alpha(alpha)
    P = np.vstack([as_point(p) for p in points])
    c = loop_centroid(P)
    return P + (1.0 - a) * (c - P)


def generate_topology(kernel: GeometryKernel, nodes: Sequence[NodeId], alpha: float) -> TopologyCurves:
    """
    Create the 4 core curves and 4 spoke curves for an ordered loop.

    Parameters
    ----------
    kernel : GeometryKernel
        Backend that owns the nodes and receives the new curves.
    nodes : Sequence[NodeId]
        The four loop nodes in rotational order (see OrderedLoop.nodes).
    alpha : float
        Radial extent, strictly inside (0, 1).

    Returns
    -------
    TopologyCurves
        `core[i]` joins core point i to core point i+1; `spokes[i]` joins core point i
        to node i.
    """
    if len(nodes) != 4:
        raise ValueError("Expected 4 loop nodes (got {})".format(len(nodes)))
    pts = np.vstack([kernel.node_point(n) for n in nodes])
    c = loop_centroid(pts)
    cores = core_points(pts, alpha)

    core = tuple(kernel.create_curve(cores[i], cores[(i + 1) % 4]) for i in range(4))
    spokes = tuple(kernel.create_curve(cores[i], nodes[i]) for i in range(4))

    logger.info("[generate_topology] centroid=%s core=%s spokes=%s",
                np.round(c, 6).tolist(), list(core), list(spokes))
    return TopologyCurves(core=core, spokes=spokes, centroid=c, core_points=cores)
