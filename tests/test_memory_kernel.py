"""
Tests for the in-memory kernel: node snapping, region checks and JSON I/O.
"""

import json

import numpy as np
import pytest

from ohgrid.kernel.memory import InMemoryKernel


def test_create_curve_snaps_onto_existing_nodes(square):
    kernel, nodes, _curves = square
    c = kernel.create_curve((0.0, 0.0, 1e-12), (0.5, 0.5, 0.0))
    begin, end = kernel.curve_nodes(c)
    assert begin == nodes[0]
    assert end not in nodes
    assert c in kernel.node_curves(nodes[0])


def test_create_curve_accepts_node_handles(square):
    kernel, nodes, _curves = square
    c = kernel.create_curve((0.5, 0.5, 0.0), nodes[2])
    assert kernel.curve_nodes(c)[1] == nodes[2]
    with pytest.raises(KeyError):
        kernel.create_curve((0.5, 0.5, 0.0), 999)
    with pytest.raises(ValueError):
        kernel.create_curve(nodes[0], (0.0, 0.0, 0.0))


def test_tolerance_controls_snapping():

    kernel = InMemoryKernel(tol=0.1)
    a = kernel.add_node((0.0, 0.0))
    assert kernel.add_node((0.05, 0.0)) == a
    assert kernel.add_node((0.5, 0.0)) != a


def test_degenerate_curve_rejected(square):
    kernel, _nodes, _curves = square
    with pytest.raises(ValueError):
        kernel.create_curve((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_open_region_rejected(square):
    kernel, nodes, curves = square
    other = kernel.add_curve(nodes[0], nodes[2])
    with pytest.raises(ValueError):
        kernel.create_region([curves[0], curves[1], other, curves[2]])
    with pytest.raises(ValueError):
        kernel.create_region(curves[:3])


def test_region_lookup_and_delete(square):
    kernel, _nodes, curves = square
    r = kernel.create_region(curves)
    assert kernel.regions_bounded_by(curves[2]) == frozenset({r})
    assert kernel.region_edges(r) == tuple(curves)
    kernel.delete_region(r)
    assert kernel.regions_bounded_by(curves[2]) == frozenset()


def test_json_round_trip(square, tmp_path):
    kernel, _nodes, curves = square
    kernel.create_region(curves)
    path = kernel.save(str(tmp_path / "model.json"))

    loaded = InMemoryKernel.load(path)
    assert loaded.to_dict() == kernel.to_dict()
    np.testing.assert_allclose(loaded.node_point(3), [1.0, 1.0, 0.0])
    # new ids do not collide with loaded ones
    assert loaded.create_curve((5, 5), (6, 6)) == 5


def test_from_dict_accepts_bare_curve_lists():
    data = {
        "points": {"10": [0, 0], "11": [1, 0], "12": [1, 1], "13": [0, 1]},
        "curves": {"1": [10, 11], "2": [11, 12], "3": {"nodes": [12, 13], "dimension": 4}, "4": [13, 10]},
    }
    k = InMemoryKernel.from_dict(json.loads(json.dumps(data)))
    assert k.curve_nodes(1) == (10, 11)
    assert k.curve_dimension(1) == 0
    assert k.curve_dimension(3) == 4
    assert k.node_curves(10) == frozenset({1, 4})


def test_duplicate_ids_rejected():
    k = InMemoryKernel()
    a = k.add_node((0, 0))
    b = k.add_node((1, 0))
    k.add_curve(a, b, curve=7)
    with pytest.raises(ValueError):
        k.add_curve(a, b, curve=7)
