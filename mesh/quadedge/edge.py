# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/edge.py

"""
Project: Quadrix
Date: 2/4/2026

Purpose:
--------
Directed-edge handles over a `QuadEdgeMesh` arena. An `Edge` is an (arena, slot
index, generation) triple; it owns no topology. Every accessor resolves through
the arena arrays in O(1).

Accessors:
----------
    rot      dual edge, 90 degrees counter-clockwise (right face -> left face)
    inv_rot  dual edge, 90 degrees clockwise
    sym      same segment, opposite direction
    onext    next edge counter-clockwise around the origin
    oprev    previous edge around the origin        (rot.onext.rot)
    dnext    next edge around the destination       (sym.onext.sym)
    dprev    previous edge around the destination   (inv_rot.onext.inv_rot)
    lnext    next edge around the left face         (inv_rot.onext.rot)
    lprev    previous edge around the left face     (onext.sym)
    rnext    next edge around the right face        (rot.onext.inv_rot)
    rprev    previous edge around the right face    (sym.onext)
    orig     origin point or None
    dest     destination point or None (always sym.orig, never stored)

Notes:
------
- "counter-clockwise" above means the mesh's positive sense; a mesh configured
  with order "CW" keeps its origin rings clockwise instead.
- Accessing a handle whose quad-edge was deleted raises `StaleEdgeError`.
"""

from typing import Iterator, Optional, Sequence

from geometry.primitives import Line, Point, as_point
from .errors import InvalidEdgeError

__all__ = ["Edge"]


class Edge:
    """Handle to one of the four directed edges of a quad-edge group."""

    __slots__ = ("_mesh", "_idx", "_gen")

    def __init__(self, mesh, idx: int, gen: int):
        self._mesh = mesh
        self._idx = int(idx)
        self._gen = int(gen)

    # ---- identity ----
    @property
    def mesh(self):
        return self._mesh

    @property
    def index(self) -> int:
        """Slot of this directed edge in the arena (quad slot * 4 + rotation)."""
        return self._idx

    @property
    def generation(self) -> int:
        return self._gen

    @property
    def is_alive(self) -> bool:
        return self._mesh.is_alive(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._mesh is other._mesh and self._idx == other._idx and self._gen == other._gen

    def __hash__(self) -> int:
        return hash((id(self._mesh), self._idx, self._gen))

    def __repr__(self) -> str:
        if not self._mesh.is_alive(self):
            return "Edge(#{} stale)".format(self._idx)
        return "Edge(#{} {!r} -> {!r})".format(self._idx, self.orig, self.dest)

    # ---- rotations (same quad group) ----
    def _rotated(self, k: int) -> "Edge":
        self._mesh._check(self)
        i = self._idx
        return Edge(self._mesh, (i & ~3) | ((i + k) & 3), self._gen)

    @property
    def rot(self) -> "Edge":
        return self._rotated(1)

    @property
    def sym(self) -> "Edge":
        return self._rotated(2)

    @property
    def inv_rot(self) -> "Edge":
        return self._rotated(3)

    # ---- ring steps ----
    @property
    def onext(self) -> "Edge":
        self._mesh._check(self)
        return self._mesh._edge(self._mesh._onext(self._idx))

    @property
    def oprev(self) -> "Edge":
        return self.rot.onext.rot

    @property
    def dnext(self) -> "Edge":
        return self.sym.onext.sym

    @property
    def dprev(self) -> "Edge":
        return self.inv_rot.onext.inv_rot

    @property
    def lnext(self) -> "Edge":
        return self.inv_rot.onext.rot

    @property
    def lprev(self) -> "Edge":
        return self.onext.sym

    @property
    def rnext(self) -> "Edge":
        return self.rot.onext.inv_rot

    @property
    def rprev(self) -> "Edge":
        return self.sym.onext

    # ---- endpoints & payload ----
    @property
    def orig(self) -> Optional[Point]:
        self._mesh._check(self)
        return self._mesh._orig(self._idx)

    @property
    def dest(self) -> Optional[Point]:
        return self.sym.orig

    def set_end_points(self, org: Optional[Sequence[float]], dest: Optional[Sequence[float]]) -> None:
        """Assign the origin of this edge and of its sym in one step."""
        self._mesh._check(self)
        i = self._idx
        self._mesh._set_orig(i, org)
        self._mesh._set_orig((i & ~3) | ((i + 2) & 3), dest)

    @property
    def data(self):
        self._mesh._check(self)
        return self._mesh._data[self._idx]

    @data.setter
    def data(self, value) -> None:
        self._mesh._check(self)
        self._mesh._data[self._idx] = value

    def as_line(self) -> Optional[Line]:
        """Segment origin -> destination, or None if an endpoint is unset."""
        org, dst = self.orig, self.dest
        if org is None or dst is None:
            return None
        return Line(org, dst)

    # ---- ring traversal ----
    def _walk(self, step: str, what: str) -> Iterator["Edge"]:
        limit = self._mesh.slot_count + 1
        e = self
        for _ in range(limit):
            yield e
            e = getattr(e, step)
            if e == self:
                return
        raise InvalidEdgeError(
            ["{} ring starting at {!r} does not close".format(what, self)],
            {"limit": limit},
        )

    def onext_ring(self) -> Iterator["Edge"]:
        """Edges sharing this edge's origin, starting with self, in onext order."""
        return self._walk("onext", "origin")

    def lnext_ring(self) -> Iterator["Edge"]:
        """Edges bounding this edge's left face, starting with self, in lnext order."""
        return self._walk("lnext", "left-face")

    def find_onext_dest(self, dest: Sequence[float], tol: Optional[float] = None) -> Optional["Edge"]:
        """
        Edge of the origin ring whose destination is `dest` (within tol), or None.
        """
        target = as_point(dest)
        if tol is None:
            tol = self._mesh.segment_eps
        for e in self.onext_ring():
            d = e.dest
            if d is not None and d.is_close(target, tol):
                return e
        return None
