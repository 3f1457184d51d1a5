# -*- coding: utf-8 -*-
# OHGrid/ohgrid/solver/__init__.py

"""
Project: OHGrid
Date: 3/6/2026

Modules:
--------
- relax: Boundary conditions for the five OH regions and the fixed-iteration
         call into an EllipticSolver.
"""

from .relax import FLOATING, INTERPOLATE_ANGLE, RegionConditions, boundary_conditions, relax

__all__ = ["FLOATING", "INTERPOLATE_ANGLE", "RegionConditions", "boundary_conditions", "relax"]
