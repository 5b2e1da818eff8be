# -*- coding: utf-8 -*-
# Quadrix/mesh/checks/helpers.py

"""
Project: Quadrix
Date: 2/6/2026

Purpose:
--------
Provide the shared read-only view (`RingView`) used by all quad-edge checks. The
view walks the origin ring of a starting edge once, plus the left-face ring of
every edge found there, so rules never re-walk (or loop on) corrupted rings.

Main Tasks:
-----------
- bounded_walk: follow one step accessor ("onext", "lnext", ...) until the start
  edge returns or a step limit is hit; never raises on a ring that fails to close.
- build_ring_view: assemble the origin ring of one edge, its left faces, and the
  origin ring of every other vertex those faces pass through.

Notes:
------
- The step limit is the arena's directed-slot count, the longest possible ring.
- Views are read-only; checks must not mutate the mesh.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from geometry.primitives import Point

__all__ = ["FaceWalk", "VertexRing", "RingView", "bounded_walk", "build_ring_view"]


@dataclass(frozen=True)
class FaceWalk:
    start: object                 # Edge
    edges: Tuple[object, ...]     # lnext walk from start (truncated if open)
    closed: bool


@dataclass(frozen=True)
class VertexRing:
    start: object                 # Edge
    origin: Optional[Point]
    ring: Tuple[object, ...]
    closed: bool


@dataclass(frozen=True)
class RingView:
    start: object                 # Edge
    origin: Optional[Point]
    ring: Tuple[object, ...]      # onext walk from start (truncated if open)
    ring_closed: bool
    faces: Tuple[FaceWalk, ...]   # one left-face walk per ring edge
    vertices: Tuple[VertexRing, ...]  # start ring first, then each vertex the faces visit
    limit: int


def bounded_walk(e, step: str, limit: int) -> Tuple[Tuple[object, ...], bool]:
    """
    Walk `e`, e.<step>, e.<step>.<step>, ... Returns (edges, closed).
    """
    out = [e]
    cur = getattr(e, step)
    while cur != e:
        if len(out) >= limit:
            return tuple(out), False
        out.append(cur)
        cur = getattr(cur, step)
    return tuple(out), True


def build_ring_view(e) -> RingView:
    """
    Collect the origin ring of `e`, the left face of each ring edge, and the
    origin ring of each vertex on those faces (every ring walked once).
    """
    limit = e.mesh.slot_count
    ring, closed = bounded_walk(e, "onext", limit)
    faces = []
    for ee in ring:
        edges, fclosed = bounded_walk(ee, "lnext", limit)
        faces.append(FaceWalk(start=ee, edges=edges, closed=fclosed))

    vertices = [VertexRing(start=e, origin=e.orig, ring=ring, closed=closed)]
    seen = set(ring)
    for f in faces:
        for fe in f.edges:
            if fe in seen:
                continue
            vring, vclosed = bounded_walk(fe, "onext", limit)
            seen.update(vring)
            seen.add(fe)
            vertices.append(VertexRing(start=fe, origin=fe.orig, ring=vring, closed=vclosed))

    return RingView(
        start=e,
        origin=e.orig,
        ring=ring,
        ring_closed=closed,
        faces=tuple(faces),
        vertices=tuple(vertices),
        limit=limit,
    )
