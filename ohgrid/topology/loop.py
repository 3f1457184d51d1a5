# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/loop.py

"""
Project: OHGrid
Date: 3/3/2026 (Updated: 3/12/2026)

Purpose:
--------
This module owns *connectivity-level* checks on the four picked curves:
   - Confirm they form one simple closed quadrilateral loop,
   - Return a rotational ordering of nodes and curves.

Algorithm:
----------
The curves are treated as an undirected graph whose edges join their endpoint
nodes. Starting from the first curve, the chain is walked through shared node
handles (never by proximity or id order). Before the walk, a node touched by
three or more candidates raises DegenerateJunctionError. At each node the incident
curves are then intersected with the candidates minus the curve just traversed:
   - no match         -> BadConnectivityError
   - the first curve  -> TwoConnectorLoopError / ThreeConnectorLoopError (premature closure)

Notes:
------
   - No kernel mutation happens here; every failure raises before geometry is created.
   - Orientation of individual curves is irrelevant: a curve may run against the loop.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Sequence, Tuple
from ..errors import (
    BadConnectivityError,
    DegenerateJunctionError,
    ThreeConnectorLoopError,
    TwoConnectorLoopError,
)
from ..kernel.base import GeometryKernel, CurveId, NodeId
from ._validation import _require_four_distinct, _far_node

logger = logging.getLogger(__name__)

__all__ = ["OrderedLoop", "validate_loop"]


@dataclass(frozen=True)
class OrderedLoop:
    """
    Four nodes and four curves in rotational order.

    `curves[i]` joins `nodes[i]` and `nodes[(i + 1) % 4]`.
    """
    nodes: Tuple[NodeId, NodeId, NodeId, NodeId]
    curves: Tuple[CurveId, CurveId, CurveId, CurveId]


def _next_curve(kernel: GeometryKernel, node: NodeId, came_from: CurveId,
                candidates: FrozenSet[CurveId]) -> CurveId:
    matches = (kernel.node_curves(node) & candidates) - {came_from}
    if not matches:
        raise BadConnectivityError(
            "Curves do not form a closed chain: no curve continues from node",
            {"node": node, "after_curve": came_from},
        )
    return next(iter(matches))


def _reject_junctions(kernel: GeometryKernel, candidates: FrozenSet[CurveId]) -> None:
    # all endpoints, the seed curve's begin node included
    ends = set()
    for c in candidates:
        ends.update(kernel.curve_nodes(c))
    for node in sorted(ends):
        touching = kernel.node_curves(node) & candidates
        if len(touching) > 2:
            raise DegenerateJunctionError(
                "Node is shared by more than two of the picked curves",
                {"node": node, "curves": sorted(touching)},
            )


def validate_loop(kernel: GeometryKernel, curves: Sequence[CurveId]) -> OrderedLoop:
    """
    Confirm that four curves form a single closed loop and order them.

    Parameters
    ----------
    kernel : GeometryKernel
        Read access to nodes and curves.
    curves : Sequence[CurveId]
        The four picked curves. The first one seeds the walk and keeps its
        begin node as `nodes[0]`.

    Returns
    -------
    OrderedLoop

    Raises
    ------
    WrongSelectionCountError
        If `curves` does not hold exactly four distinct handles.
    DegenerateJunctionError
        If a node is touched by three or more candidate curves.
    BadConnectivityError
        If the chain breaks before closing on the first node.
    TwoConnectorLoopError, ThreeConnectorLoopError
        If the chain closes after two or three curves.
    """
    picked = _require_four_distinct(curves)
    candidates = frozenset(picked)
    _reject_junctions(kernel, candidates)

    c0 = picked[0]
    n0, n1 = kernel.curve_nodes(c0)
    if n0 == n1:
        raise BadConnectivityError("Curve is closed on itself", {"curve": c0, "node": n0})

    # Walk: node1 -> curve1 -> node2 -> curve2 -> node3 -> curve3
    c1 = _next_curve(kernel, n1, c0, candidates)
    n2 = _far_node(kernel, c1, n1)

    c2 = _next_curve(kernel, n2, c1, candidates)
    if c2 == c0:
        raise TwoConnectorLoopError("Loop closes after 2 curves", {"curves": [c0, c1]})
    n3 = _far_node(kernel, c2, n2)

    c3 = _next_curve(kernel, n3, c2, candidates)
    if c3 == c0:
        raise ThreeConnectorLoopError("Loop closes after 3 curves", {"curves": [c0, c1, c2]})

    # Closure back onto the seed node
    end = _far_node(kernel, c3, n3)
    if end != n0:
        raise BadConnectivityError(
            "Last curve does not return to the first node",
            {"first_node": n0, "last_node": end, "curve": c3},
        )

    loop = OrderedLoop(nodes=(n0, n1, n2, n3), curves=(c0, c1, c2, c3))
    logger.info("[validate_loop] loop nodes=%s curves=%s", list(loop.nodes), list(loop.curves))
    return loop
