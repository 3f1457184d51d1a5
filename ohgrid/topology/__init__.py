# -*- coding: utf-8 -*-
# OHGrid/ohgrid/topology/__init__.py

"""
Project: OHGrid
Date: 3/3/2026 (Updated: 3/10/2026)

Topology Subfolder:
-------------------
Connectivity checks on the picked loop and creation of the inner OH curves.

Modules:
--------
- loop:        Walk four curves through shared nodes, return an OrderedLoop or raise
               a LoopError (degenerate junction, broken chain, premature closure).

- cleanup:     Delete the single structured region that already spans the loop.

- generator:   Centroid, interpolated core points, 4 core curves and 4 spokes.

- _num:        Private 3-vector helpers (coercion, centroid, interpolation, coincidence).

- _validation: Shared candidate-set and endpoint checks.
"""

__all__ = ["cleanup", "generator", "loop"]
