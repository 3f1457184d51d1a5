# -*- coding: utf-8 -*-
# OHGrid/ohgrid/selection.py

"""
Project: OHGrid
Date: 3/8/2026

Purpose
-------
Curve selection as a single request/response call. A selection service blocks until
the user has picked curves or cancelled and returns a `SelectionResult` whose status
tells the caller which of the three outcomes happened:

    SELECTED     exactly `count` curves picked
    CANCELLED    the user backed out; nothing must change
    WRONG_COUNT  curves were picked, but not `count` of them

Services
--------
- StaticSelection: curve ids known up front (CLI flags, scripted runs, tests).
- PromptSelection: blocking text prompt; an empty line or EOF cancels.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple
from .kernel.base import SelectionService, CurveId

logger = logging.getLogger(__name__)

SELECTED = "selected"
CANCELLED = "cancelled"
WRONG_COUNT = "wrong_count"

DEFAULT_PROMPT = "Select 4 connectors forming a closed loop"

__all__ = [
    "SELECTED",
    "CANCELLED",
    "WRONG_COUNT",
    "DEFAULT_PROMPT",
    "SelectionResult",
    "StaticSelection",
    "PromptSelection",
]


@dataclass(frozen=True)
class SelectionResult:
    status: str
    curves: Tuple[CurveId, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == SELECTED

    @classmethod
    def from_picked(cls, curves: Optional[Sequence[CurveId]], count: int = 4) -> "SelectionResult":
        """Classify a raw pick; None means the user cancelled."""
        if curves is None:
            return cls(CANCELLED)
        picked = tuple(dict.fromkeys(int(c) for c in curves))
        if len(picked) != count:
            return cls(WRONG_COUNT, picked)
        return cls(SELECTED, picked)


class StaticSelection(SelectionService):
    """Selection with ids fixed at construction; None means a cancelled pick."""

    def __init__(self, curves: Optional[Sequence[CurveId]]):
        self._curves = None if curves is None else tuple(curves)

    def select_curves(self, prompt: str = DEFAULT_PROMPT, count: int = 4) -> SelectionResult:
        result = SelectionResult.from_picked(self._curves, count)
        logger.debug("[StaticSelection] %s: %s", result.status, list(result.curves))
        return result


class PromptSelection(SelectionService):
    """
    Blocking text prompt for curve ids separated by spaces or commas.

    Parameters
    ----------
    read : Callable[[str], str], optional
        Line reader (default: builtin `input`). EOF or an empty answer cancels; a
        token that is not an integer id makes the whole pick WRONG_COUNT.
    """

    def __init__(self, read: Optional[Callable[[str], str]] = None):
        self._read = read or input

    def select_curves(self, prompt: str = DEFAULT_PROMPT, count: int = 4) -> SelectionResult:
        try:
            line = self._read("{} (ids, empty to cancel): ".format(prompt))
        except EOFError:
            return SelectionResult(CANCELLED)
        tokens = line.replace(",", " ").split()
        if not tokens:
            return SelectionResult(CANCELLED)
        ids = []
        bad = []
        for t in tokens:
            try:
                ids.append(int(t))
            except ValueError:
                bad.append(t)
        if bad:
            logger.warning("[PromptSelection] not curve ids: %s", bad)
            return SelectionResult(WRONG_COUNT, tuple(dict.fromkeys(ids)))
        return SelectionResult.from_picked(ids, count)

