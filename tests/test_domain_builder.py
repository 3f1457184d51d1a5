"""
Tests for region assembly: the region/edge table, dimension propagation and
geometric closure of every region for every loop rotation.
"""

import pytest

from ohgrid.domain.domain_builder import build_regions, create_structured_region, propagate_dimensions
from ohgrid.domain.domain_math import N_REGIONS, REGION_EDGES, region_boundaries
from ohgrid.errors import WrongCurveCountError
from ohgrid.kernel.memory import _edges_close
from ohgrid.topology.generator import generate_topology
from ohgrid.topology.loop import validate_loop

OUTER = (10, 11, 12, 13)
CORE = (20, 21, 22, 23)
SPOKES = (30, 31, 32, 33)


# ============== Index table ==============

def test_table_shape():
    assert N_REGIONS == 5
    assert all(len(edges) == 4 for edges in REGION_EDGES)


def test_core_region_uses_core_curves_in_order():
    assert region_boundaries(OUTER, CORE, SPOKES)[0] == CORE


@pytest.mark.parametrize("k", range(4))
def test_radial_region_mapping(k):
    b = region_boundaries(OUTER, CORE, SPOKES)[k + 1]
    assert b == (OUTER[k], SPOKES[(k + 1) % 4], CORE[k], SPOKES[k])


def test_exact_table():
    assert region_boundaries(OUTER, CORE, SPOKES) == (
        (20, 21, 22, 23),
        (10, 31, 20, 30),
        (11, 32, 21, 31),
        (12, 33, 22, 32),
        (13, 30, 23, 33),
    )


def test_every_curve_used_and_spokes_shared_twice():
    used = [c for b in region_boundaries(OUTER, CORE, SPOKES) for c in b]
    assert set(used) == set(OUTER + CORE + SPOKES)
    assert all(used.count(s) == 2 for s in SPOKES)
    assert all(used.count(c) == 2 for c in CORE)
    assert all(used.count(o) == 1 for o in OUTER)


# ============== Dimensions ==============

def _generate(kernel, curves):
    loop = validate_loop(kernel, curves)
    topo = generate_topology(kernel, loop.nodes, 0.5)
    return loop, topo


def test_propagate_dimensions(square):
    kernel, _nodes, curves = square
    loop, topo = _generate(kernel, curves)
    propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes, 9)
    assert [kernel.curve_dimension(s) for s in topo.spokes] == [9, 9, 9, 9]
    assert [kernel.curve_dimension(c) for c in topo.core] == [
        kernel.curve_dimension(o) for o in loop.curves]


def test_zero_radial_dimension_leaves_spokes(square):
    kernel, _nodes, curves = square
    loop, topo = _generate(kernel, curves)
    propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes, 0)
    assert [kernel.curve_dimension(s) for s in topo.spokes] == [0, 0, 0, 0]


def test_undimensioned_outer_curve_is_not_copied(square):
    kernel, _nodes, curves = square
    kernel.set_curve_dimension(curves[0], 0)
    loop, topo = _generate(kernel, curves)
    propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes, 5)
    assert kernel.curve_dimension(topo.core[0]) == 0
    assert kernel.curve_dimension(topo.core[1]) == kernel.curve_dimension(loop.curves[1])


def test_propagate_needs_four_of_each(square):
    kernel, _nodes, curves = square
    loop, topo = _generate(kernel, curves)
    with pytest.raises(WrongCurveCountError):
        propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes[:3], 5)


# ============== Assembly ==============

@pytest.mark.parametrize("start", range(4))
def test_regions_close_for_every_rotation(square, start):
    kernel, _nodes, curves = square
    loop, topo = _generate(kernel, curves[start:] + curves[:start])
    propagate_dimensions(kernel, loop.curves, topo.core, topo.spokes, 6)

    regions = build_regions(kernel, loop.curves, topo.core, topo.spokes)

    assert len(regions) == 5
    table = {c: kernel.curve_nodes(c) for c in kernel.curves}
    for r in regions:
        edges = kernel.region_edges(r)
        assert _edges_close(edges, table)
        # opposite edges carry the same point count
        assert kernel.curve_dimension(edges[0]) == kernel.curve_dimension(edges[2])
        assert kernel.curve_dimension(edges[1]) == kernel.curve_dimension(edges[3])
    # radial region k keeps the original outer curve as edge 1
    assert [kernel.region_edges(r)[0] for r in regions[1:]] == list(loop.curves)
    bounding = {c for r in regions for c in kernel.region_edges(r)}
    assert len(bounding) == 12


def test_wrong_curve_count_before_kernel_call(square):
    kernel, _nodes, curves = square
    with pytest.raises(WrongCurveCountError):
        create_structured_region(kernel, curves[:3])
    assert kernel.regions == []


def test_build_regions_wrong_count(square):
    kernel, _nodes, curves = square
    loop, topo = _generate(kernel, curves)
    with pytest.raises(WrongCurveCountError):
        build_regions(kernel, loop.curves, topo.core[:3], topo.spokes)
    assert kernel.regions == []
