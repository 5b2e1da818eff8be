from types import SimpleNamespace

import pytest

from mesh.quadedge import QuadEdgeMesh, connect, resolve_edge, splice


P0 = (0.0, 0.0)
P1 = (1.0, 0.0)
P2 = (1.0, 1.0)
P3 = (0.0, 1.0)


def ring_size(e):
    return len(list(e.onext_ring()))


def face_size(e):
    return len(list(e.lnext_ring()))


def build_triangle(m, p0=P0, p1=P1, p2=P2):
    """CCW triangle p0 -> p1 -> p2; returns (a, b, c) with c = p2 -> p0."""
    a = m.make_edge(p0, p1)
    b = m.make_edge(p1, p2)
    splice(a.sym, b)
    c = connect(b, a)
    return a, b, c


def build_square(m):
    """
    Unit square split by the diagonal c = P2 -> P0.

        P3 ---d--- P2
        |        / |
        e     c    b
        |  /       |
        P0 ---a--- P1
    """
    a, b, c = build_triangle(m, P0, P1, P2)
    d = m.make_edge(P2, P3)
    splice(d, resolve_edge(m.order, b.sym, P3))
    e = connect(d, c.sym)
    return SimpleNamespace(a=a, b=b, c=c, d=d, e=e)


@pytest.fixture
def mesh():
    return QuadEdgeMesh()


@pytest.fixture
def strict_mesh():
    return QuadEdgeMesh(strict=True)


@pytest.fixture
def triangle(mesh):
    a, b, c = build_triangle(mesh)
    return SimpleNamespace(mesh=mesh, a=a, b=b, c=c)


@pytest.fixture
def square(mesh):
    sq = build_square(mesh)
    sq.mesh = mesh
    return sq
