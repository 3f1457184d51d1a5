# -*- coding: utf-8 -*-
# OHGrid/ohgrid/errors.py

"""
Project: OHGrid
Date: 3/2/2026

Purpose
-------
Typed exceptions for the OH topology pipeline with compact, context-aware messages
so that selection, loop validation, region assembly and option checks all report
failures the same way.

Main Tasks
----------
    1. Define OHGridError(message, context) with a compact context suffix in __str__.
    2. Provide one subclass per failure the pipeline can report.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Every error here is non-fatal for the host model: it is raised before any entity
  is created (except WrongCurveCountError, an internal invariant check).
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "OHGridError",
    "ConfigError",
    "SelectionError",
    "WrongSelectionCountError",
    "LoopError",
    "DegenerateJunctionError",
    "BadConnectivityError",
    "TwoConnectorLoopError",
    "ThreeConnectorLoopError",
    "WrongCurveCountError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class OHGridError(Exception):
    """
    Base class for all errors reported by the OH topology pipeline.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"node": 7, "matches": [3, 4]}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(OHGridError, self).__init__(message)

    def __str__(self):
        base = super(OHGridError, self).__str__()
        return base + _format_context(self.context)


class ConfigError(OHGridError):
    """
    User-facing options out of range or of the wrong type:
      - radial dimension not 0 and not >= 2
      - radial extent (alpha) outside the open interval (0, 1)
      - unknown option keys
    """


class SelectionError(OHGridError):
    """Problems with the set of curves handed over by the selection service."""


class WrongSelectionCountError(SelectionError):
    """The user picked a number of curves other than four."""


class LoopError(OHGridError):
    """The four candidate curves do not form a single simple closed loop."""


class DegenerateJunctionError(LoopError):
    """A node is touched by three or more of the candidate curves."""


class BadConnectivityError(LoopError):
    """A node has no matching next curve; the curves do not form a closed chain."""


class TwoConnectorLoopError(LoopError):
    """The chain closes after only two curves."""


class ThreeConnectorLoopError(LoopError):
    """The chain closes after only three curves."""


class WrongCurveCountError(OHGridError):
    """A structured region was requested with other than four boundary curves."""
