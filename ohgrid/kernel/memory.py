# -*- coding: utf-8 -*-
# OHGrid/ohgrid/kernel/memory.py

"""
Project: OHGrid
Date: 3/3/2026 (Updated: 3/11/2026)

Purpose:
--------
In-memory implementation of GeometryKernel: a small node/curve/region graph held in
dictionaries. Used for dry runs from JSON model files and as the test double for
the validator, generator and builder.

Main Tasks:
-----------
    1. Store nodes (points), curves (begin/end nodes + dimension) and regions (4 edges).
    2. Snap new curve endpoints onto existing nodes within a tolerance.
    3. Refuse regions whose four edges do not close into a loop.
    4. Load/save the model as JSON.
    5. Provide RecordingSolver, an EllipticSolver that records calls without moving geometry.

JSON layout:
------------
    {
      "points":  {"1": [x, y, z], ...},
      "curves":  {"1": {"nodes": [1, 2], "dimension": 11}, ...},
      "regions": {"1": [1, 2, 3, 4], ...}
    }
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Set, Tuple
import numpy as np
from .base import GeometryKernel, EllipticSolver, NodeId, CurveId, RegionId, is_node_handle
from ..topology._num import as_point, coincident

logger = logging.getLogger(__name__)


class InMemoryKernel(GeometryKernel):
    """
    Dictionary-backed geometry graph.

    Parameters
    ----------
    tol : float
        Absolute coincidence tolerance used when snapping new points onto nodes.
    """

    def __init__(self, tol: float = 1e-9):
        if not (tol >= 0.0):
            raise ValueError("tol must be >= 0 (got {})".format(tol))
        self.tol = float(tol)
        self._points: Dict[NodeId, np.ndarray] = {}
        self._curves: Dict[CurveId, Tuple[NodeId, NodeId]] = {}
        self._dims: Dict[CurveId, int] = {}
        self._regions: Dict[RegionId, Tuple[CurveId, ...]] = {}
        self._incident: Dict[NodeId, Set[CurveId]] = {}
        self._next = {"node": 1, "curve": 1, "region": 1}

    # --------------------
    # Model construction
    # --------------------
    def add_node(self, point, node: Optional[NodeId] = None) -> NodeId:
        """
        Add a node at `point`, or return the existing node that coincides with it.

        An explicit `node` id is honored only when no coincident node exists.
        """
        p = as_point(point)
        existing = self.find_node(p)
        if existing is not None:
            return existing
        nid = self._take_id("node", node, self._points)
        self._points[nid] = p
        self._incident[nid] = set()
        return nid

    def add_curve(self, begin: NodeId, end: NodeId, dimension: int = 0,
                  curve: Optional[CurveId] = None) -> CurveId:
        """Add a curve between two existing nodes."""
        for n in (begin, end):
            if n not in self._points:
                raise KeyError("Unknown node {}".format(n))
        cid = self._take_id("curve", curve, self._curves)
        self._curves[cid] = (begin, end)
        self._dims[cid] = int(dimension)
        self._incident[begin].add(cid)
        self._incident[end].add(cid)
        return cid

    def find_node(self, point) -> Optional[NodeId]:
        """Return the lowest-id node coincident with `point`, or None."""
        for nid in sorted(self._points):
            if coincident(self._points[nid], point, self.tol):
                return nid
        return None

    def _end_node(self, end) -> NodeId:
        if is_node_handle(end):
            if end not in self._points:
                raise KeyError("Unknown node {}".format(end))
            return int(end)
        return self.add_node(end)

    def _take_id(self, kind: str, wanted: Optional[int], table: Mapping[int, object]) -> int:
        if wanted is not None:
            wanted = int(wanted)
            if wanted in table:
                raise ValueError("Duplicate {} id {}".format(kind, wanted))
            self._next[kind] = max(self._next[kind], wanted + 1)
            return wanted
        nid = self._next[kind]
        while nid in table:
            nid += 1
        self._next[kind] = nid + 1
        return nid

    # --------------------
    # GeometryKernel API
    # --------------------
    def curve_nodes(self, curve: CurveId) -> Tuple[NodeId, NodeId]:
        return self._curves[curve]

    def node_curves(self, node: NodeId) -> FrozenSet[CurveId]:
        return frozenset(self._incident[node])

    def node_point(self, node: NodeId) -> np.ndarray:
        return self._points[node].copy()

    def curve_dimension(self, curve: CurveId) -> int:
        return self._dims[curve]

    def set_curve_dimension(self, curve: CurveId, dimension: int) -> None:
        if curve not in self._curves:
            raise KeyError("Unknown curve {}".format(curve))
        self._dims[curve] = int(dimension)

    def create_curve(self, start, end) -> CurveId:
        n0 = self._end_node(start)
        n1 = self._end_node(end)
        if n0 == n1:
            raise ValueError("Cannot create a curve with coincident endpoints at {}".format(
                self._points[n0].tolist()))
        return self.add_curve(n0, n1)

    def create_region(self, edges: Sequence[CurveId], region: Optional[RegionId] = None) -> RegionId:
        edges = tuple(edges)
        if len(edges) != 4:
            raise ValueError("A structured region needs 4 edges (got {})".format(len(edges)))
        for c in edges:
            if c not in self._curves:
                raise KeyError("Unknown curve {}".format(c))
        if not _edges_close(edges, self._curves):
            raise ValueError("Edges {} do not form a closed loop".format(list(edges)))
        rid = self._take_id("region", region, self._regions)
        self._regions[rid] = edges
        return rid

    def regions_bounded_by(self, curve: CurveId) -> FrozenSet[RegionId]:
        return frozenset(r for r, edges in self._regions.items() if curve in edges)

    def region_edges(self, region: RegionId) -> Tuple[CurveId, ...]:
        return self._regions[region]

    def delete_region(self, region: RegionId) -> None:
        del self._regions[region]

    # --------------------
    # Introspection
    # --------------------
    @property
    def nodes(self) -> List[NodeId]:
        return sorted(self._points)

    @property
    def curves(self) -> List[CurveId]:
        return sorted(self._curves)

    @property
    def regions(self) -> List[RegionId]:
        return sorted(self._regions)

    # --------------------
    # JSON I/O
    # --------------------
    def to_dict(self) -> Dict[str, object]:
        return {
            "points": {str(n): self._points[n].tolist() for n in self.nodes},
            "curves": {
                str(c): {"nodes": list(self._curves[c]), "dimension": self._dims[c]}
                for c in self.curves
            },
            "regions": {str(r): list(self._regions[r]) for r in self.regions},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object], tol: float = 1e-9) -> "InMemoryKernel":
        """
        Build a kernel from the JSON layout documented in the module docstring.

        Curves may also be given as a bare `[begin, end]` list. Explicit ids are kept.
        Points are not merged on load, so coincident input points stay distinct nodes.
        """
        k = cls(tol=tol)
        for key, xyz in dict(data.get("points", {})).items():
            nid = int(key)
            if nid in k._points:
                raise ValueError("Duplicate node id {}".format(nid))
            k._points[nid] = as_point(xyz)
            k._incident[nid] = set()
            k._next["node"] = max(k._next["node"], nid + 1)
        for key, entry in dict(data.get("curves", {})).items():
            if isinstance(entry, Mapping):
                begin, end = entry["nodes"]
                dim = entry.get("dimension", 0)
            else:
                begin, end = entry
                dim = 0
            k.add_curve(int(begin), int(end), dimension=int(dim), curve=int(key))
        for key, edges in dict(data.get("regions", {})).items():
            k.create_region([int(c) for c in edges], region=int(key))
        logger.debug("[InMemoryKernel] loaded %d nodes, %d curves, %d regions",
                     len(k._points), len(k._curves), len(k._regions))
        return k

    @classmethod
    def load(cls, path: str, tol: float = 1e-9) -> "InMemoryKernel":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data, tol=tol)

    def save(self, path: str) -> str:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info("[InMemoryKernel] model written to: %s", path)
        return path


def _edges_close(edges: Sequence[CurveId], curves: Mapping[CurveId, Tuple[NodeId, NodeId]]) -> bool:
    """True if consecutive edges share a node and the last edge returns to the first."""
    first = set(curves[edges[0]])
    second = set(curves[edges[1]])
    shared = first & second
    if len(first) != 2 or len(shared) != 1:
        return False
    start = (first - shared).pop()
    current = shared.pop()
    for c in edges[1:]:
        a, b = curves[c]
        if current == a:
            current = b
        elif current == b:
            current = a
        else:
            return False
    return current == start


# --------------------
# Solver double
# --------------------
@dataclass
class SolveRecord:
    regions: Tuple[RegionId, ...]
    conditions: Dict[RegionId, object]
    iterations: int


@dataclass
class RecordingSolver(EllipticSolver):
    """
    EllipticSolver that records each call and leaves geometry untouched.
    """
    runs: List[SolveRecord] = field(default_factory=list)

    def solve(self, regions: Sequence[RegionId], conditions: Mapping[RegionId, object],
              iterations: int) -> None:
        rec = SolveRecord(tuple(regions), dict(conditions), int(iterations))
        self.runs.append(rec)
        logger.info("[RecordingSolver] %d regions x %d iterations recorded (no geometry change)",
                    len(rec.regions), rec.iterations)
