# -*- coding: utf-8 -*-
# OHGrid/ohgrid/solver/relax.py

"""
Project: OHGrid
Date: 3/6/2026

Purpose
-------
Hand the five OH regions to an elliptic solver with the boundary treatment the
decomposition needs, for a fixed number of iterations.

Boundary treatment
------------------
    region 0 (H-core):   edges 1, 2, 3, 4 floating
    regions 1..4:        edges 2, 3, 4 floating; edge 1 (original outer curve) fixed
    angle interpolation: edge 1 of regions 1..4, only when requested

Notes
-----
- The iteration count is fixed (10) rather than convergence-based.
- Edge numbers are 1-based and follow the order the region was built with.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple
from ..config import RELAX_ITERATIONS
from ..kernel.base import EllipticSolver, RegionId

logger = logging.getLogger(__name__)

FLOATING = "Floating"
INTERPOLATE_ANGLE = "InterpolateAngle"

__all__ = [
    "FLOATING",
    "INTERPOLATE_ANGLE",
    "RegionConditions",
    "boundary_conditions",
    "relax",
]


@dataclass(frozen=True)
class RegionConditions:
    region: RegionId
    floating: Tuple[int, ...]
    interpolate_angle: Tuple[int, ...] = ()

    def edge_types(self) -> Dict[int, Tuple[str, ...]]:
        """Map edge number -> tuple of condition names (empty tuple = fixed)."""
        out = {}
        for e in (1, 2, 3, 4):
            tags = []
            if e in self.floating:
                tags.append(FLOATING)
            if e in self.interpolate_angle:
                tags.append(INTERPOLATE_ANGLE)
            out[e] = tuple(tags)
        return out


def boundary_conditions(regions: Sequence[RegionId],
                        edge_angle_interpolation: bool = False) -> Dict[RegionId, RegionConditions]:
    """
    Build per-region conditions for the five OH regions.

    Raises
    ------
    ValueError
        If `regions` does not hold exactly five regions.
    """
    regions = tuple(regions)
    if len(regions) != 5:
        raise ValueError("Expected 5 OH regions (got {})".format(len(regions)))

    conds = {regions[0]: RegionConditions(regions[0], floating=(1, 2, 3, 4))}
    for r in regions[1:]:
        conds[r] = RegionConditions(
            r,
            floating=(2, 3, 4),
            interpolate_angle=(1,) if edge_angle_interpolation else (),
        )
    return conds


def relax(solver: EllipticSolver, regions: Sequence[RegionId],
          edge_angle_interpolation: bool = False,
          iterations: int = RELAX_ITERATIONS) -> Dict[RegionId, RegionConditions]:
    """
    Run the elliptic solver on the five regions.

    Parameters
    ----------
    solver : EllipticSolver
        External relaxation service; runs synchronously and finalizes itself.
    regions : Sequence[RegionId]
        Five regions as returned by `build_regions` (H-core first).
    edge_angle_interpolation : bool
        Also interpolate the angle at the fixed outer edge of each radial region.
    iterations : int
        Solver iterations (default 10).

    Returns
    -------
    Dict[RegionId, RegionConditions]
        The conditions handed to the solver.
    """
    conds = boundary_conditions(regions, edge_angle_interpolation)
    logger.info("[relax] %d regions, %d iterations, angle interpolation=%s",
                len(conds), iterations, edge_angle_interpolation)
    solver.solve(tuple(regions), conds, int(iterations))
    return conds
