# -*- coding: utf-8 -*-
# OHGrid/ohgrid/domain/__init__.py

"""
Project: OHGrid
Date: 3/5/2026

Modules:
--------
- domain_math:    Region-to-edge index table (REGION_EDGES) and its resolution.
- domain_builder: Dimension propagation and creation of the five structured regions.
"""

__all__ = ["domain_builder", "domain_math"]
