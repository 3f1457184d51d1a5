# -*- coding: utf-8 -*-
# OHGrid/ohgrid/kernel/__init__.py

"""
Project: OHGrid
Date: 3/2/2026 (Updated: 3/7/2026)

Modules:
--------
- base:        Abstract GeometryKernel, EllipticSolver and SelectionService.
- memory:      InMemoryKernel (dict-backed graph, JSON I/O) and RecordingSolver.
- gmsh_kernel: GmshKernel and GmshSmoother on the Gmsh Python API. Not imported
               here so the package works without Gmsh installed.
"""

from .base import GeometryKernel, EllipticSolver, SelectionService
from .memory import InMemoryKernel, RecordingSolver

__all__ = [
    "GeometryKernel",
    "EllipticSolver",
    "SelectionService",
    "InMemoryKernel",
    "RecordingSolver",
]
