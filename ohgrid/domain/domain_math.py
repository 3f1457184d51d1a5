# -*- coding: utf-8 -*-
# OHGrid/ohgrid/domain/domain_math.py

"""
Project: OHGrid
Date: 3/5/2026 (Updated: 3/12/2026)

Purpose:
--------
Pure index bookkeeping for assembling the five OH regions. This module is the single
place that says which curve bounds which region edge:
    - No kernel access and no logging.
    - Safe for import in any environment.

Region/edge table:
------------------
    region 0 (H-core):  core[0], core[1], core[2], core[3]
    region k+1 (k=0..3): outer[k], spoke[(k+1) % 4], core[k], spoke[k]

Edge numbers are 1-based in the order listed; for the radial regions edge 1 is the
original outer curve, the one edge kept fixed during relaxation.

With outer[k] joining node k to node k+1 and core[k] joining core point k to core
point k+1, each radial region walks
    node k -> node k+1 -> core k+1 -> core k -> node k.
"""

from typing import Sequence, Tuple

__all__ = [
    "REGION_EDGES",
    "N_REGIONS",
    "region_boundaries",
]

# (role, offset) per edge; the index is (k + offset) % 4 with k the radial block number.
# The core region ignores k and lists core curves 0..3.
_CORE_REGION = (("core", 0), ("core", 1), ("core", 2), ("core", 3))
_RADIAL_REGION = (("outer", 0), ("spoke", 1), ("core", 0), ("spoke", 0))


def _radial(k: int) -> Tuple[Tuple[str, int], ...]:
    return tuple((role, (k + off) % 4) for role, off in _RADIAL_REGION)


REGION_EDGES: Tuple[Tuple[Tuple[str, int], ...], ...] = (_CORE_REGION,) + tuple(_radial(k) for k in range(4))
N_REGIONS = len(REGION_EDGES)


def _require_four(role: str, seq: Sequence) -> Tuple:
    out = tuple(seq)
    if len(out) != 4:
        raise ValueError("Expected 4 {} curves (got {})".format(role, len(out)))
    return out


def region_boundaries(outer: Sequence, core: Sequence, spokes: Sequence) -> Tuple[Tuple, ...]:
    """
    Resolve REGION_EDGES against concrete curve handles.

    Parameters
    ----------
    outer, core, spokes : Sequence
        Four curves each, in the rotational order of the loop.

    Returns
    -------
    tuple
        Five boundary tuples; entry 0 is the H-core, entries 1..4 the radial regions.

    Raises
    ------
    ValueError
        If any role does not hold exactly four curves.
    """
    by_role = {
        "outer": _require_four("outer", outer),
        "core": _require_four("core", core),
        "spoke": _require_four("spoke", spokes),
    }
    return tuple(tuple(by_role[role][i] for role, i in edges) for edges in REGION_EDGES)
