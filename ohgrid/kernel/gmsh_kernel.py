# -*- coding: utf-8 -*-
# OHGrid/ohgrid/kernel/gmsh_kernel.py

"""
Project: OHGrid
Date: 3/7/2026 (Updated: 3/13/2026)

Purpose:
--------
Concrete GeometryKernel and EllipticSolver on top of the Gmsh Python API (built-in
`geo` kernel). Curves are Gmsh lines, nodes are Gmsh points, structured regions are
4-sided filling surfaces marked transfinite and recombined into quads.

Main Tasks:
-----------
    1. Read endpoints, adjacencies and coordinates through `gmsh.model`.
    2. Create two-point lines between existing points or new points snapped within a tolerance.
    3. Create/delete transfinite quad surfaces; map curve dimensions to transfinite
       point counts.
    4. Smooth regions with Gmsh's transfinite smoother and generate the 2D mesh.
    5. Open/close a Gmsh model file around a pipeline run (`open_model`).

Notes:
------
- Models must live in the built-in geo kernel (e.g. loaded from a `.geo` file);
  `gmsh.model.geo.*` calls do not reach OpenCASCADE entities.
- Gmsh holds boundary curves fixed while smoothing, so Floating and
  InterpolateAngle edge conditions are logged and otherwise not applied.
- Every mutation is followed by `gmsh.model.geo.synchronize()` so the reads that
  follow see the new entities.
"""

import logging
from contextlib import contextmanager
from typing import Dict, FrozenSet, Mapping, Optional, Sequence, Tuple
import gmsh
import numpy as np
from .base import GeometryKernel, EllipticSolver, NodeId, CurveId, RegionId, is_node_handle
from ..topology._num import as_point, coincident

logger = logging.getLogger(__name__)


class GmshKernel(GeometryKernel):
    """
    Gmsh-backed geometry kernel. Gmsh must be initialized and a model loaded.

    Parameters
    ----------
    tol : float
        Absolute coincidence tolerance for snapping new endpoints onto points.
    default_dimension : int
        Point count applied to region edges that were never dimensioned (0 = leave
        Gmsh to decide, which breaks transfinite meshing).
    dimensions : Mapping[int, int], optional
        Known point counts of existing curves (Gmsh offers no getter for them).
    """

    def __init__(self, tol: float = 1e-9, default_dimension: int = 11,
                 dimensions: Optional[Mapping[int, int]] = None):
        if not gmsh.isInitialized():
            raise RuntimeError("Gmsh is not initialized; open a model first (see open_model).")
        self.tol = float(tol)
        self.default_dimension = int(default_dimension)
        self._dims: Dict[CurveId, int] = {int(k): int(v) for k, v in (dimensions or {}).items()}
        self._region_edges: Dict[RegionId, Tuple[CurveId, ...]] = {}

    # --------------------
    # Reads
    # --------------------
    def curve_nodes(self, curve: CurveId) -> Tuple[NodeId, NodeId]:
        bnd = gmsh.model.getBoundary([(1, curve)], combined=False, oriented=False)
        tags = [abs(int(t)) for d, t in bnd if d == 0]
        if len(tags) == 1:
            return tags[0], tags[0]
        if len(tags) != 2:
            raise KeyError("Curve {} has {} end points".format(curve, len(tags)))
        return tags[0], tags[1]

    def node_curves(self, node: NodeId) -> FrozenSet[CurveId]:
        upward, _downward = gmsh.model.getAdjacencies(0, node)
        return frozenset(int(t) for t in upward)

    def node_point(self, node: NodeId) -> np.ndarray:
        return as_point(gmsh.model.getValue(0, node, []))

    def curve_dimension(self, curve: CurveId) -> int:
        if curve in self._dims:
            return self._dims[curve]
        node_tags, _coords, _params = gmsh.model.mesh.getNodes(1, curve, includeBoundary=True)
        if len(node_tags) >= 2:
            return len(node_tags)
        return self.default_dimension

    def regions_bounded_by(self, curve: CurveId) -> FrozenSet[RegionId]:
        upward, _downward = gmsh.model.getAdjacencies(1, curve)
        return frozenset(int(t) for t in upward)

    def region_edges(self, region: RegionId) -> Tuple[CurveId, ...]:
        if region in self._region_edges:
            return self._region_edges[region]
        bnd = gmsh.model.getBoundary([(2, region)], combined=False, oriented=False)
        return tuple(abs(int(t)) for d, t in bnd if d == 1)

    # --------------------
    # Mutations
    # --------------------
    def set_curve_dimension(self, curve: CurveId, dimension: int) -> None:
        n = int(dimension)
        gmsh.model.geo.mesh.setTransfiniteCurve(curve, n)
        gmsh.model.geo.synchronize()
        self._dims[curve] = n

    def create_curve(self, start, end) -> CurveId:
        n0 = int(start) if is_node_handle(start) else None
        n1 = int(end) if is_node_handle(end) else None
        p0 = self.node_point(n0) if n0 is not None else as_point(start)
        p1 = self.node_point(n1) if n1 is not None else as_point(end)
        if coincident(p0, p1, self.tol):
            raise ValueError("Cannot create a curve with coincident endpoints at {}".format(p0.tolist()))
        if n0 is None:
            n0 = self._point_at(p0)
        if n1 is None:
            n1 = self._point_at(p1)
        if n0 is None:
            n0 = gmsh.model.geo.addPoint(float(p0[0]), float(p0[1]), float(p0[2]))
        if n1 is None:
            n1 = gmsh.model.geo.addPoint(float(p1[0]), float(p1[1]), float(p1[2]))
        curve = gmsh.model.geo.addLine(n0, n1)
        gmsh.model.geo.synchronize()
        return curve

    def create_region(self, edges: Sequence[CurveId]) -> RegionId:
        edges = tuple(int(e) for e in edges)
        if len(edges) != 4:
            raise ValueError("A structured region needs 4 edges (got {})".format(len(edges)))
        for e in edges:
            if e not in self._dims and self.default_dimension >= 2:
                gmsh.model.geo.mesh.setTransfiniteCurve(e, self.default_dimension)
                self._dims[e] = self.default_dimension
        loop = gmsh.model.geo.addCurveLoop(list(edges), reorient=True)
        surface = gmsh.model.geo.addSurfaceFilling([loop])
        gmsh.model.geo.mesh.setTransfiniteSurface(surface)
        gmsh.model.geo.mesh.setRecombine(2, surface)
        gmsh.model.geo.synchronize()
        self._region_edges[surface] = edges
        return surface

    def delete_region(self, region: RegionId) -> None:
        gmsh.model.geo.remove([(2, region)])
        gmsh.model.geo.synchronize()
        self._region_edges.pop(region, None)

    # --------------------
    # helpers (private)
    # --------------------
    def _point_at(self, p: np.ndarray) -> Optional[NodeId]:
        for _dim, tag in gmsh.model.getEntities(0):
            if coincident(gmsh.model.getValue(0, tag, []), p, self.tol):
                return int(tag)
        return None


class GmshSmoother(EllipticSolver):
    """
    Relax regions with Gmsh's transfinite smoother, then generate the 2D mesh.

    Parameters
    ----------
    generate : bool
        Run `gmsh.model.mesh.generate(2)` after setting the smoothing constraints.
    """

    def __init__(self, generate: bool = True):
        self.generate = generate

    def solve(self, regions: Sequence[RegionId], conditions: Mapping[RegionId, object],
              iterations: int) -> None:
        n = int(iterations)
        for r in regions:
            gmsh.model.geo.mesh.setSmoothing(2, r, n)
        gmsh.model.geo.synchronize()

        moving = [r for r, c in conditions.items()
                  if getattr(c, "floating", ()) or getattr(c, "interpolate_angle", ())]
        if moving:
            logger.info("[GmshSmoother] Gmsh keeps boundary curves fixed; floating/angle "
                        "conditions on regions %s are not applied", sorted(moving))

        if self.generate:
            gmsh.model.mesh.generate(2)
            logger.info("[GmshSmoother] 2D mesh generated after %d smoothing iterations", n)


@contextmanager
def open_model(path: str):
    """
    Open a Gmsh model for the duration of the block.

    Gmsh is initialized here only if it is not already; in that case it is also
    finalized on exit.
    """
    initialized_here = False
    if not gmsh.isInitialized():
        gmsh.initialize()
        initialized_here = True
    try:
        gmsh.option.setNumber("General.Terminal", 0)
        gmsh.open(path)
        logger.info("[open_model] Gmsh model loaded: %s", path)
        yield
    finally:
        if initialized_here and gmsh.isInitialized():
            gmsh.finalize()


def write_model(path: str) -> str:
    """Write the current Gmsh model (geometry `.geo_unrolled` or mesh `.msh`) to `path`."""
    gmsh.write(path)
    logger.info("[write_model] written to: %s", path)
    return path
