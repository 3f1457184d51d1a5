"""
Tests for the Gmsh backend (skipped when the gmsh module or its native library cannot be loaded).
"""

import numpy as np
import pytest

try:
    import gmsh
except (ImportError, OSError) as exc:
    pytest.skip("gmsh unavailable: {}".format(exc), allow_module_level=True)

from ohgrid.api import build_oh_grid  # noqa: E402
from ohgrid.kernel.gmsh_kernel import GmshKernel, GmshSmoother  # noqa: E402
from ohgrid.kernel.memory import RecordingSolver  # noqa: E402
from ohgrid.topology.loop import validate_loop  # noqa: E402


@pytest.fixture
def gmsh_square():
    gmsh.initialize()
    gmsh.option.setNumber("General.Terminal", 0)
    gmsh.model.add("square")
    pts = [gmsh.model.geo.addPoint(x, y, 0.0) for x, y in ((0, 0), (1, 0), (1, 1), (0, 1))]
    lines = [gmsh.model.geo.addLine(pts[i], pts[(i + 1) % 4]) for i in range(4)]
    gmsh.model.geo.synchronize()
    try:
        yield pts, lines
    finally:
        gmsh.finalize()


def test_loop_and_points(gmsh_square):
    pts, lines = gmsh_square
    kernel = GmshKernel()
    loop = validate_loop(kernel, [lines[2], lines[0], lines[3], lines[1]])
    assert loop.curves == (lines[2], lines[3], lines[0], lines[1])
    np.testing.assert_allclose(kernel.node_point(pts[2]), [1.0, 1.0, 0.0])


def test_build_without_meshing(gmsh_square):
    _pts, lines = gmsh_square
    kernel = GmshKernel(default_dimension=9)
    kernel.create_region(lines)
    assert len(gmsh.model.getEntities(2)) == 1

    topo = build_oh_grid(kernel, lines, {"radial_dimension": 5}, RecordingSolver())

    assert topo.deleted_region is not None
    assert len(gmsh.model.getEntities(2)) == 5
    assert len(gmsh.model.getEntities(1)) == 12
    # spokes end on the original corner points
    for i, s in enumerate(topo.spokes):
        assert kernel.curve_nodes(s)[1] == topo.loop.nodes[i]


def test_smoother_generates_quads(gmsh_square):
    _pts, lines = gmsh_square
    kernel = GmshKernel(default_dimension=9)
    build_oh_grid(kernel, lines, {"radial_dimension": 5}, GmshSmoother(generate=True))
    elem_types, _tags, _nodes = gmsh.model.mesh.getElements(2)
    assert 3 in list(elem_types)  # 4-node quadrangle


def test_create_curve_on_point_handle(gmsh_square):
    pts, _lines = gmsh_square
    kernel = GmshKernel()
    c = kernel.create_curve((0.5, 0.5, 0.0), pts[2])
    assert kernel.curve_nodes(c)[1] == pts[2]
