# -*- coding: utf-8 -*-
# OHGrid/ohgrid/kernel/base.py

"""
Project: OHGrid
Date: 3/2/2026

Purpose:
--------
Abstract interfaces for the services the OH topology pipeline depends on, so that
the validator, generator and builder run unchanged against Gmsh or against the
in-memory geometry graph used for dry runs and tests.

Abstract Classes:
-----------------
- GeometryKernel:   Node/curve accessors, curve and structured-region creation
- EllipticSolver:   Relaxation of structured regions with per-edge conditions
- SelectionService: Blocking pick of curves by the user

Notes:
------
- Entities are opaque integer handles owned by the kernel; the pipeline never keeps
  them across invocations.
- Points are NumPy arrays of shape (3,).
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import FrozenSet, Mapping, Sequence, Tuple, Union
import numpy as np

NodeId = int
CurveId = int
RegionId = int


def is_node_handle(value) -> bool:
    """True for an integer node handle (bools excluded), False for a point."""
    return isinstance(value, Integral) and not isinstance(value, bool)


class GeometryKernel(ABC):
    """
    Abstract geometry/topology backend.

    `create_curve` endpoints are either existing node handles, used as given, or
    points, which implementations snap onto an existing node within their
    coincidence tolerance before creating a new one.
    """

    @abstractmethod
    def curve_nodes(self, curve: CurveId) -> Tuple[NodeId, NodeId]:
        """
        Return the (begin, end) nodes of a curve.

        Raises
        ------
        KeyError
            If the curve does not exist.
        """
        pass

    @abstractmethod
    def node_curves(self, node: NodeId) -> FrozenSet[CurveId]:
        """Return every curve currently incident on the node."""
        pass

    @abstractmethod
    def node_point(self, node: NodeId) -> np.ndarray:
        """Return the node location as a (3,) float array."""
        pass

    @abstractmethod
    def curve_dimension(self, curve: CurveId) -> int:
        """Return the number of grid points along the curve (0 if not dimensioned)."""
        pass

    @abstractmethod
    def set_curve_dimension(self, curve: CurveId, dimension: int) -> None:
        pass

    @abstractmethod
    def create_curve(self, start: Union[np.ndarray, NodeId],
                     end: Union[np.ndarray, NodeId]) -> CurveId:
        """
        Create a straight two-point curve from `start` to `end`.

        Each end is a point or an existing NodeId.

        Returns
        -------
        CurveId
            Handle of the new curve; its begin node sits at `start`.
        """
        pass

    @abstractmethod
    def create_region(self, edges: Sequence[CurveId]) -> RegionId:
        """
        Create a structured quad region bounded by four curves given in loop order.

        The first curve is edge 1, the second edge 2, and so on.
        """
        pass

    @abstractmethod
    def regions_bounded_by(self, curve: CurveId) -> FrozenSet[RegionId]:
        """Return every structured region that uses the curve as a boundary edge."""
        pass

    @abstractmethod
    def region_edges(self, region: RegionId) -> Tuple[CurveId, ...]:
        pass

    @abstractmethod
    def delete_region(self, region: RegionId) -> None:
        pass


class EllipticSolver(ABC):
    """
    Abstract elliptic relaxation service for structured regions.
    """

    @abstractmethod
    def solve(self, regions: Sequence[RegionId], conditions: Mapping[RegionId, object],
              iterations: int) -> None:
        """
        Relax `regions` in place for exactly `iterations` steps, then finalize.

        Parameters
        ----------
        regions : Sequence[RegionId]
            Regions to relax together.
        conditions : Mapping[RegionId, RegionConditions]
            Per-region edge treatment (see `ohgrid.solver.relax.RegionConditions`).
        iterations : int
            Fixed number of solver iterations.
        """
        pass


class SelectionService(ABC):
    """
    Abstract interactive picker restricted to curves.
    """

    @abstractmethod
    def select_curves(self, prompt: str, count: int = 4):
        """
        Block until the user picks curves or cancels.

        Returns
        -------
        SelectionResult
            See `ohgrid.selection.SelectionResult`.
        """
        pass
