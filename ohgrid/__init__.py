# -*- coding: utf-8 -*-
# OHGrid/ohgrid/__init__.py

"""
Project: OHGrid
Date: 3/2/2026 (Updated: 3/13/2026)

Structured OH block decomposition of a four-curve loop: an H-type core region
surrounded by four radial O-type regions, built through an injected geometry kernel.

Modules:
--------
- kernel:    Abstract backend interfaces, the in-memory graph and the Gmsh backend.
- topology:  Loop validation, cleanup of the spanning region, core/spoke generation.
- domain:    Region-to-edge mapping, dimension propagation and region assembly.
- solver:    Boundary conditions and the fixed-iteration elliptic relaxation call.
- selection: Curve picking as a single request/response call.
- config:    User-facing options and their validation.
- errors:    Typed exceptions with context.
- post:      matplotlib preview.
- api:       Façade: build_oh_grid(kernel, curves, options, solver), run_selection(...).

Usage:
    from ohgrid.api import build_oh_grid
"""

__version__ = "0.1.0"

__all__ = ["api", "config", "domain", "errors", "kernel", "post", "selection", "solver", "topology"]
