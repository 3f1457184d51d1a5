# -*- coding: utf-8 -*-
# OHGrid/ohgrid/post/__init__.py

"""
Project: OHGrid
Date: 3/9/2026

Modules:
--------
- plot_topology: matplotlib preview of outer loop, core curves, spokes and region labels.
"""

__all__ = ["plot_topology"]
