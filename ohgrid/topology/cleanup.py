# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/cleanup.py

"""
Project: OHGrid
Date: 3/4/2026

Purpose:
--------
Remove a structured region that already spans the four loop curves, so the OH
decomposition replaces it instead of overlapping it.
"""

import logging
from typing import Optional, Sequence
from ..kernel.base import GeometryKernel, CurveId, RegionId

logger = logging.getLogger(__name__)

__all__ = ["spanning_regions", "clear_existing_region"]


def spanning_regions(kernel: GeometryKernel, curves: Sequence[CurveId]):
    """Regions bounded by every one of `curves` (progressive intersection)."""
    curves = list(curves)
    if not curves:
        return frozenset()
    common = kernel.regions_bounded_by(curves[0])
    for c in curves[1:]:
        if not common:
            break
        common = common & kernel.regions_bounded_by(c)
    return frozenset(common)


def clear_existing_region(kernel: GeometryKernel, curves: Sequence[CurveId]) -> Optional[RegionId]:
    """
    Delete the single region bounded by all four loop curves, if there is one.

    Returns
    -------
    Optional[RegionId]
        The deleted region, or None when zero or several regions matched
        (nothing is deleted in either case).
    """
    common = spanning_regions(kernel, curves)
    if len(common) == 1:
        region = next(iter(common))
        kernel.delete_region(region)
        logger.info("[clear_existing_region] deleted region %s spanning curves %s", region, list(curves))
        return region
    if len(common) > 1:
        logger.warning("[clear_existing_region] %d regions span curves %s; leaving them untouched",
                       len(common), list(curves))
    return None
