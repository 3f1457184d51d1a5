"""
Pytest Configuration
====================

Adds the project root to sys.path (so `ohgrid` and the `main` driver import
without installation), forces a non-interactive matplotlib backend and provides
in-memory loop fixtures.

Usage:
    pytest tests/ -v
"""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from ohgrid.kernel.memory import InMemoryKernel, RecordingSolver  # noqa: E402

UNIT_SQUARE = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]


def make_loop(kernel, points, dims=(11, 7, 11, 7), flip=(False, False, False, False)):
    """Add a closed 4-curve loop; curve i joins point i and i+1 (reversed if flip[i])."""
    nodes = [kernel.add_node(p) for p in points]
    curves = []
    for i in range(4):
        a, b = nodes[i], nodes[(i + 1) % 4]
        if flip[i]:
            a, b = b, a
        curves.append(kernel.add_curve(a, b, dimension=dims[i]))
    return nodes, curves


@pytest.fixture
def kernel():
    return InMemoryKernel()


@pytest.fixture
def square(kernel):
    """Unit square: nodes 1..4 counter-clockwise from the origin, curves 1..4."""
    nodes, curves = make_loop(kernel, UNIT_SQUARE)
    return kernel, nodes, curves


@pytest.fixture
def solver():
    return RecordingSolver()
