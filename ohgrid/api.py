# -*- coding: utf-8 -*-
# OHGrid/ohgrid/api.py

"""
Project: OHGrid
Date: 3/8/2026 (Updated: 3/13/2026)

Purpose
-------
Thin façade for the OH decomposition. Exposes two entry points:

    1. `build_oh_grid` → validate loop, clear the spanning region, create core/spoke
       curves, propagate dimensions, build 5 regions, optionally relax them.
    2. `run_selection` → ask a SelectionService for the curves, then `build_oh_grid`.

Notes
-----
- Validation (options, selection count, loop) always finishes before the first
  kernel mutation; an invalid loop leaves the model untouched.
- Running twice on the same loop builds a second, independent set of curves and
  regions; the first run's regions do not span the original four curves, so they
  are not removed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union
import numpy as np
from .config import OHOptions, validate_options
from .errors import WrongSelectionCountError
from .kernel.base import GeometryKernel, EllipticSolver, SelectionService, CurveId, RegionId
from .selection import DEFAULT_PROMPT, SELECTED, CANCELLED
from .topology.loop import OrderedLoop, validate_loop
from .topology.cleanup import clear_existing_region
from .topology.generator import generate_topology
from .domain.domain_builder import propagate_dimensions, build_regions
from .solver.relax import relax

logger = logging.getLogger(__name__)

__all__ = ["OHTopology", "build_oh_grid", "run_selection"]


@dataclass(frozen=True)
class OHTopology:
    """
    Everything a single OH run created or touched.

    `regions[0]` is the H-core; `regions[k+1]` is the radial region on `outer[k]`.
    """
    loop: OrderedLoop
    core: Tuple[CurveId, ...]
    spokes: Tuple[CurveId, ...]
    regions: Tuple[RegionId, ...]
    centroid: np.ndarray
    core_points: np.ndarray
    deleted_region: Optional[RegionId] = None
    relaxed: bool = False

    @property
    def outer(self) -> Tuple[CurveId, ...]:
        return self.loop.curves

    @property
    def new_curves(self) -> Tuple[CurveId, ...]:
        return self.core + self.spokes


def _coerce_options(options: Union[None, OHOptions, Mapping[str, Any]]) -> OHOptions:
    if isinstance(options, OHOptions):
        return validate_options(options.to_dict())
    return validate_options(options)


def build_oh_grid(
    kernel: GeometryKernel,
    curves: Sequence[CurveId],
    options: Union[None, OHOptions, Mapping[str, Any]] = None,
    solver: Optional[EllipticSolver] = None,
) -> OHTopology:
    """
    Build the OH decomposition on four curves forming a closed loop.

    Parameters
    ----------
    kernel : GeometryKernel
        Backend holding the curves; receives the new curves and regions.
    curves : Sequence[CurveId]
        The four picked curves, any order and orientation.
    options : OHOptions or mapping, optional
        Radial dimension, alpha, run_solver, edge_angle_interpolation (defaults apply).
    solver : EllipticSolver, optional
        Required for relaxation; when None the solver step is skipped with a warning.

    Returns
    -------
    OHTopology

    Raises
    ------
    ConfigError
        Invalid options.
    WrongSelectionCountError, LoopError
        The curves do not form a valid 4-curve loop (nothing is created).
    WrongCurveCountError
        Internal region-assembly invariant broken.
    """
    opts = _coerce_options(options)
    loop = validate_loop(kernel, curves)

    deleted = clear_existing_region(kernel, loop.curves)
    topo = generate_topology(kernel, loop.nodes, opts.alpha)
    propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes, opts.radial_dimension)
    regions = build_regions(kernel, loop.curves, topo.core, topo.spokes)

    relaxed = False
    if opts.run_solver:
        if solver is None:
            logger.warning("[build_oh_grid] run_solver is set but no solver was provided; skipping relaxation")
        else:
            relax(solver, regions, edge_angle_interpolation=opts.edge_angle_interpolation)
            relaxed = True

    return OHTopology(
        loop=loop,
        core=topo.core,
        spokes=topo.spokes,
        regions=regions,
        centroid=topo.centroid,
        core_points=topo.core_points,
        deleted_region=deleted,
        relaxed=relaxed,
    )


def run_selection(
    selection: SelectionService,
    kernel: GeometryKernel,
    options: Union[None, OHOptions, Mapping[str, Any]] = None,
    solver: Optional[EllipticSolver] = None,
    prompt: str = DEFAULT_PROMPT,
) -> Optional[OHTopology]:
    """
    Ask for four curves, then build the OH decomposition on them.

    Returns
    -------
    Optional[OHTopology]
        None when the user cancelled (the model is left untouched).

    Raises
    ------
    WrongSelectionCountError
        The user picked other than four curves.
    """
    opts = _coerce_options(options)
    result = selection.select_curves(prompt, 4)
    if result.status == CANCELLED:
        logger.info("[run_selection] selection cancelled; nothing changed")
        return None
    if result.status != SELECTED:
        raise WrongSelectionCountError("Select exactly 4 connectors",
                                       {"count": len(result.curves), "curves": list(result.curves)})
    return build_oh_grid(kernel, result.curves, opts, solver)
