import math

import pytest

from conftest import P0, P1, P2, P3, face_size
from geometry.primitives import Point
from mesh.quadedge import (
    SIGN_EPSILON,
    CoincidentEdgeError,
    QuadEdgeMesh,
    on_edge,
    resolve_edge,
    right_of,
    sign,
    splice,
)


# ---- sign ----

@pytest.mark.parametrize("f, expected", [
    (0.0, 0),
    (-0.0, 0),
    (5e-7, 0),
    (-5e-7, 0),
    (1e-3, 1),
    (-2.0, -1),
    (math.inf, 1),
])
def test_sign_default_epsilon(f, expected):
    assert sign(f) == expected


def test_sign_custom_epsilon():
    assert SIGN_EPSILON == 1e-6
    assert sign(5e-7, eps=1e-9) == 1
    assert sign(-0.5, eps=1.0) == 0


# ---- right_of / on_edge ----

@pytest.fixture
def horizontal(mesh):
    return mesh.make_edge((0, 0), (10, 0))


def test_right_of_y_up(horizontal):
    assert right_of(False, (5, -5), horizontal)
    assert not right_of(False, (5, 5), horizontal)


def test_right_of_y_flip(horizontal):
    assert right_of(True, (5, 5), horizontal)
    assert not right_of(True, (5, -5), horizontal)


def test_right_of_near_line_is_neither(horizontal):
    assert not right_of(False, (5, 1e-9), horizontal)
    assert not right_of(True, (5, 1e-9), horizontal)
    assert not right_of(False, (20, 0), horizontal)


def test_right_of_reversed_edge(horizontal):
    assert right_of(False, (5, 5), horizontal.sym)


def test_right_of_uses_mesh_tolerance():
    m = QuadEdgeMesh(config={"tolerance": {"sign_eps": 1.0}})
    e = m.make_edge((0, 0), (10, 0))
    # cross product magnitude is 10 * |y|
    assert not right_of(False, (5, -0.05), e)
    assert right_of(False, (5, -0.5), e)
    assert right_of(False, (5, -0.05), e, eps=1e-9)


def test_predicates_without_endpoints(mesh):
    e = mesh.make_edge()
    assert not right_of(False, (1, -1), e)
    assert not on_edge((0, 0), e)


def test_on_edge(horizontal):
    assert on_edge((5, 0), horizontal)
    assert on_edge((0, 0), horizontal)
    assert on_edge((10, 0), horizontal)
    assert on_edge((5, 1e-9), horizontal)
    assert not on_edge((5, 0.1), horizontal)
    assert not on_edge((11, 0), horizontal)


# ---- resolve_edge ----

@pytest.fixture
def star(mesh):
    """Three edges out of the origin, spliced counter-clockwise: 0, 90, 180 degrees."""
    e1 = mesh.make_edge((0, 0), (1, 0))
    e2 = mesh.make_edge((0, 0), (0, 1))
    e3 = mesh.make_edge((0, 0), (-1, 0))
    splice(e1, e2)
    splice(e2, e3)
    return e1, e2, e3


def test_star_ring_is_sorted(star):
    e1, e2, e3 = star
    assert list(e1.onext_ring()) == [e1, e2, e3]


@pytest.mark.parametrize("target, which", [
    ((1, 1), 0),
    ((-1, 1), 1),
    ((0, -1), 2),
    ((1, -1), 2),
])
def test_resolve_edge_picks_wedge(star, target, which):
    assert resolve_edge("CCW", star[0], target) == star[which]
    # the starting edge of the ring does not matter
    assert resolve_edge("CCW", star[2], target) == star[which]


def test_resolve_edge_single_ring(mesh):
    e = mesh.make_edge(P0, P1)
    assert resolve_edge("CCW", e, P2) == e
    assert resolve_edge("CW", e, P3) == e


def test_resolve_edge_unset_origin(mesh):
    e = mesh.make_edge()
    assert resolve_edge("CCW", e, P2) == e


def test_resolve_edge_coincident(star):
    with pytest.raises(CoincidentEdgeError):
        resolve_edge("CCW", star[0], (2, 0))
    with pytest.raises(CoincidentEdgeError):
        resolve_edge("CCW", star[0], (0, 0))


def test_resolve_edge_rejects_colinear(star):
    with pytest.raises(ValueError):
        resolve_edge("COLINEAR", star[0], (1, 1))


def test_splice_after_resolve_keeps_ring_sorted(star, mesh):
    e1, e2, e3 = star
    new = mesh.make_edge((0, 0), (0, -1))
    splice(new, resolve_edge("CCW", e1, new.dest))

    assert list(e1.onext_ring()) == [e1, e2, e3, new]
    assert new.orig == Point(0, 0)
    assert face_size(new) == 8


def test_resolve_edge_angle_tolerance_comes_from_mesh():
    coarse = QuadEdgeMesh(config={"tolerance": {"angle_eps": 0.1}})
    fine = QuadEdgeMesh()
    for m in (coarse, fine):
        e1 = m.make_edge(P0, (1, 0))
        e2 = m.make_edge(P0, (0, 1))
        splice(e1, e2)

    near = (1.0, 0.05)
    assert resolve_edge("CCW", next(fine.edges()), near) == next(fine.edges())
    with pytest.raises(CoincidentEdgeError):
        resolve_edge("CCW", next(coarse.edges()), near)
