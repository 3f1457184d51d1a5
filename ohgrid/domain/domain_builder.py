# -*- coding: utf-8 -*-
# OHGrid/ohgrid/domain/domain_builder.py

"""
Project: OHGrid
Date: 3/5/2026 (Updated: 3/12/2026)

Purpose
-------
    1. Propagate discretization onto the new curves before any region is built:
       spokes take the configured radial dimension, core curves inherit the
       dimension of the matching outer curve so opposite region edges agree.
    2. Assemble the five structured regions (H-core + 4 radial) from the
       4 outer, 4 core and 4 spoke curves through the kernel.
"""

import logging
from typing import Sequence, Tuple
from ..errors import WrongCurveCountError
from ..kernel.base import GeometryKernel, CurveId, RegionId
from .domain_math import region_boundaries

logger = logging.getLogger(__name__)

__all__ = ["propagate_dimensions", "build_regions", "create_structured_region"]


def propagate_dimensions(
    kernel: GeometryKernel,
    outer: Sequence[CurveId],
    core: Sequence[CurveId],
    spokes: Sequence[CurveId],
    radial_dimension: int,
) -> None:
    """
    Set point counts on the new curves.

    Parameters
    ----------
    radial_dimension : int
        Point count for every spoke. 0 leaves the spokes at the kernel default.
    """
    if len(outer) != 4 or len(core) != 4 or len(spokes) != 4:
        raise WrongCurveCountError(
            "Dimension propagation needs 4 outer, 4 core and 4 spoke curves",
            {"outer": len(outer), "core": len(core), "spokes": len(spokes)},
        )
    n = int(radial_dimension)
    if n >= 2:
        for s in spokes:
            kernel.set_curve_dimension(s, n)

    for o, c in zip(outer, core):
        dim = kernel.curve_dimension(o)
        if dim >= 2:
            kernel.set_curve_dimension(c, dim)
        else:
            logger.debug("[propagate_dimensions] outer curve %s is not dimensioned; core %s left as is", o, c)


def create_structured_region(kernel: GeometryKernel, edges: Sequence[CurveId]) -> RegionId:
    """
    Create one structured region from exactly four boundary curves.

    Raises
    ------
    WrongCurveCountError
        If `edges` does not hold four curves (checked before the kernel is called).
    """
    edges = tuple(edges)
    if len(edges) != 4:
        raise WrongCurveCountError("A structured region needs exactly 4 boundary curves",
                                   {"edges": list(edges)})
    return kernel.create_region(edges)


def build_regions(
    kernel: GeometryKernel,
    outer: Sequence[CurveId],
    core: Sequence[CurveId],
    spokes: Sequence[CurveId],
) -> Tuple[RegionId, ...]:
    """
    Build the H-core region and the four radial regions.

    Returns
    -------
    Tuple[RegionId, ...]
        Five regions: index 0 is the H-core, index k+1 is the radial region on outer[k].

    Raises
    ------
    WrongCurveCountError
        If a role does not hold four curves.
    """
    try:
        boundaries = region_boundaries(outer, core, spokes)
    except ValueError as e:
        raise WrongCurveCountError(str(e), {"outer": len(outer), "core": len(core),
                                            "spokes": len(spokes)}) from e

    regions = tuple(create_structured_region(kernel, b) for b in boundaries)
    logger.info("[build_regions] %d regions created: %s", len(regions), list(regions))
    return regions
