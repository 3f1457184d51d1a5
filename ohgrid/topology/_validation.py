# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/_validation.py

"""
Project: OHGrid
Date: 3/3/2026

Purpose:
--------
Shared validation helpers for the topology operations: candidate-set checks and
endpoint lookups that the loop validator and the cleanup step both rely on.
"""

from typing import Sequence, Tuple
from ..errors import WrongSelectionCountError, BadConnectivityError
from ..kernel.base import GeometryKernel, CurveId, NodeId


def _require_four_distinct(curves: Sequence[CurveId]) -> Tuple[CurveId, ...]:
    """
    Return the curves as a tuple, requiring exactly four distinct handles.

    Raises
    ------
    WrongSelectionCountError
        If the count is not four or a curve is repeated.
    """
    out = tuple(curves)
    if len(out) != 4 or len(set(out)) != 4:
        raise WrongSelectionCountError(
            "Exactly 4 distinct curves are required",
            {"count": len(out), "distinct": len(set(out))},
        )
    return out


def _far_node(kernel: GeometryKernel, curve: CurveId, near: NodeId) -> NodeId:
    """
    Return the endpoint of `curve` that is not `near`.

    Raises
    ------
    BadConnectivityError
        If `near` is not an endpoint of the curve, or the curve starts and ends
        on the same node.
    """
    begin, end = kernel.curve_nodes(curve)
    if begin == end:
        raise BadConnectivityError("Curve is closed on itself", {"curve": curve, "node": begin})
    if near == begin:
        return end
    if near == end:
        return begin
    raise BadConnectivityError("Node is not an endpoint of the curve", {"curve": curve, "node": near})
