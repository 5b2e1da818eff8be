import pytest

from conftest import P0, P1, P2, ring_size
from geometry.primitives import Line, Point
from mesh.quadedge import (
    ForeignEdgeError,
    QuadEdgeMesh,
    StaleEdgeError,
    delete,
    new_with_end_points,
    splice,
)


def test_make_edge_is_isolated(mesh):
    e = mesh.make_edge()

    assert e.onext == e
    assert e.oprev == e
    assert e.lnext == e.sym
    assert e.lprev == e.sym
    assert e.rnext == e.sym
    assert e.rprev == e.sym
    assert e.dnext == e
    assert e.dprev == e
    assert e.rot.onext == e.inv_rot
    assert e.inv_rot.onext == e.rot
    assert e.orig is None and e.dest is None
    assert e.data is None


def test_rotation_algebra(mesh):
    e = mesh.make_edge(P0, P1)

    assert e.rot.rot.rot.rot == e
    assert e.rot.rot == e.sym
    assert e.sym.sym == e
    assert e.sym != e
    assert e.rot.inv_rot == e
    assert e.inv_rot.rot == e
    assert e.onext.oprev == e
    assert e.lnext.lprev == e


def test_end_points_and_sym(mesh):
    e = new_with_end_points(mesh, P0, (3, 4))

    assert e.orig == Point(0, 0)
    assert e.dest == Point(3, 4)
    assert e.sym.orig == e.dest
    assert e.sym.dest == e.orig
    assert e.as_line() == Line(Point(0, 0), Point(3, 4))

    e.set_end_points((1, 1), None)
    assert e.dest is None
    assert e.as_line() is None


def test_data_is_per_directed_edge(mesh):
    e = mesh.make_edge(P0, P1)
    e.data = "left"
    e.sym.data = {"id": 7}

    assert e.data == "left"
    assert e.sym.data == {"id": 7}
    assert e.rot.data is None


def test_two_edge_splice_rings(mesh):
    e0 = mesh.make_edge(P0, P1)
    e1 = mesh.make_edge(P0, P2)
    splice(e0, e1)

    assert e0.onext == e1
    assert e1.onext == e0
    assert e0.lnext == e0.sym
    assert e0.lprev == e1.sym
    assert ring_size(e0) == 2
    assert list(e0.onext_ring()) == [e0, e1]


def test_find_onext_dest(mesh):
    e0 = mesh.make_edge(P0, P1)
    e1 = mesh.make_edge(P0, P2)
    splice(e0, e1)

    assert e0.find_onext_dest(P2) == e1
    assert e0.find_onext_dest((1.0, 1e-9)) == e0
    assert e0.find_onext_dest((5, 5)) is None


def test_handles_compare_by_value(mesh):
    e = mesh.make_edge(P0, P1)
    again = e.sym.sym

    assert again == e
    assert hash(again) == hash(e)
    assert len({e, again, e.sym}) == 2


def test_len_and_edges_iteration(mesh):
    a = mesh.make_edge(P0, P1)
    b = mesh.make_edge(P1, P2)
    c = mesh.make_edge(P2, P0)
    delete(b)

    assert len(mesh) == 2
    assert list(mesh.edges()) == [a, c]


def test_deleted_handle_is_stale(mesh):
    e = mesh.make_edge(P0, P1)
    delete(e)

    assert not e.is_alive
    assert "stale" in repr(e)
    with pytest.raises(StaleEdgeError):
        e.orig
    with pytest.raises(StaleEdgeError):
        e.onext


def test_slot_reuse_bumps_generation(mesh):
    e = mesh.make_edge(P0, P1)
    delete(e)
    fresh = mesh.make_edge(P1, P2)

    assert fresh.index == e.index
    assert fresh.generation == e.generation + 1
    assert fresh != e
    assert fresh.is_alive and not e.is_alive
    assert fresh.orig == Point(1, 0)


def test_arena_grows_and_keeps_handles():
    m = QuadEdgeMesh(config={"capacity": 1})
    edges = [m.make_edge((i, 0), (i, 1)) for i in range(5)]

    assert m.capacity == 8
    assert m.slot_count == 32
    assert len(m) == 5
    assert all(e.is_alive for e in edges)
    assert edges[0].orig == Point(0, 0)
    assert edges[4].dest == Point(4, 1)


def test_foreign_edges_are_rejected():
    m1, m2 = QuadEdgeMesh(), QuadEdgeMesh()
    a = m1.make_edge(P0, P1)
    b = m2.make_edge(P0, P2)

    assert not m2.is_alive(a)
    with pytest.raises(ForeignEdgeError):
        splice(a, b)
