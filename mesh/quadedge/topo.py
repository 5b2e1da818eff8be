# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/topo.py

"""
Project: Quadrix
Date: 2/5/2026

Purpose:
--------
Topological operators on a quad-edge arena. `splice` is the only primitive that
rewires rings; `connect`, `swap` and `delete` are compositions of it plus
endpoint assignment.

Main Tasks:
-----------
    1. `splice(a, b)`: merge two origin rings or split one (Guibas & Stolfi 1985, p.96).
    2. `connect(a, b, order)`: new edge a.dest -> b.orig sharing a's left face.
    3. `swap(e)`: flip the diagonal of the quadrilateral around `e`.
    4. `delete(e)`: unlink both directions of `e` and free its arena slot.

Notes:
------
- Absent (None) edges make `splice`/`delete` no-ops and `connect` return None.
- In strict mode (mesh.strict) each editor validates the affected rings before
  and after the edit and raises `InvalidEdgeError` on the first failure.
"""

from typing import List, Optional, Union
import logging

from geometry.topology.winding import Order, as_order
from .edge import Edge
from .errors import ForeignEdgeError, InvalidEdgeError
from .resolve import resolve_edge

__all__ = ["splice", "connect", "swap", "delete"]

logger = logging.getLogger(__name__)


def _same_mesh(a: Edge, b: Edge):
    if a.mesh is not b.mesh:
        raise ForeignEdgeError("Edges belong to different meshes.",
                               {"a": a.index, "b": b.index})
    return a.mesh


def _strict_check(op: str, order: Order, **edges: Optional[Edge]) -> None:
    """Validate around each named edge; log and raise on violations."""
    from mesh.checks import validate

    for name, e in edges.items():
        if e is None:
            continue
        errs: List[str] = validate(e, order)
        if not errs:
            continue
        for i, estr in enumerate(errs):
            logger.error("err: %03d : %s", i, estr)
        raise InvalidEdgeError(errs, {"op": op, "edge": name})


def splice(a: Optional[Edge], b: Optional[Edge]) -> None:
    """
    Splice the origin rings of `a` and `b`, and, independently, their left-face rings.

    If the two rings are distinct they are combined into one; if they are the same
    ring it is broken into two. Calling it twice with the same arguments undoes it.
    """
    if a is None or b is None:
        return
    mesh = _same_mesh(a, b)
    mesh._check(a)
    mesh._check(b)
    ia, ib = a.index, b.index
    alpha = a.onext.rot.index
    beta = b.onext.rot.index

    nx = mesh._next
    # all four successors are read before any write
    t1 = int(nx[ib])
    t2 = int(nx[ia])
    t3 = int(nx[beta])
    t4 = int(nx[alpha])

    nx[ia] = t1
    nx[ib] = t2
    nx[alpha] = t3
    nx[beta] = t4


def connect(a: Optional[Edge], b: Optional[Edge],
            order: Union[str, Order, None] = None) -> Optional[Edge]:
    """
    Add a new edge from a.dest to b.orig so that `a`, the new edge and `b` share
    the same left face afterwards.

    Parameters
    ----------
    a, b : Edge or None
        Edges to join; either being None returns None.
    order : {"CCW", "CW"} or Order, optional
        Rotational sense used to slot the new edge into b's origin ring;
        defaults to the mesh order.

    Returns
    -------
    Edge or None
        The new edge, oriented a.dest -> b.orig.

    Raises
    ------
    CoincidentEdgeError
        If a.dest lies along an edge already leaving b.orig (or on b.orig itself);
        nothing is allocated in that case.
    InvalidEdgeError
        In strict mode, if the rings around `a` or `b` are already broken.
    """
    if a is None or b is None:
        return None
    mesh = _same_mesh(a, b)
    order = mesh.order if order is None else as_order(order)
    if mesh.strict:
        _strict_check("connect", order, a=a, b=b)

    logger.debug("Connecting %r to %r.", a.dest, b.orig)
    bb = resolve_edge(order, b, a.dest)
    e = mesh.make_edge(a.dest, bb.orig)

    splice(e, a.lnext)
    splice(e.sym, bb)

    if mesh.strict:
        _strict_check("connect", order, e=e, a=a, b=b)
    return e


def swap(e: Edge) -> None:
    """
    Turn `e` counter-clockwise inside its enclosing quadrilateral.

    Precondition: `e` is an interior edge with a triangle on each side.
    """
    mesh = e.mesh
    a = e.oprev
    b = e.sym.oprev
    logger.debug("Swapping %r.", e)

    splice(e, a)
    splice(e.sym, b)
    splice(e, a.lnext)
    splice(e.sym, b.lnext)
    e.set_end_points(a.dest, b.dest)

    if mesh.strict:
        _strict_check("swap", mesh.order, e=e, a=a, b=b)


def delete(e: Optional[Edge]) -> None:
    """
    Remove `e` and its sym from the structure and free the quad-edge slot.

    The rest of the structure may fall apart into two components. Handles to `e`
    or any of its rotations are stale afterwards.
    """
    if e is None:
        return
    mesh = e.mesh
    logger.debug("Deleting edge %r.", e)
    sym = e.sym
    a, b = e.oprev, sym.oprev

    splice(e, a)
    splice(sym, b)
    mesh._release(e)

    if mesh.strict:
        q = e.index >> 2
        _strict_check("delete", mesh.order,
                      a=None if a.index >> 2 == q else a,
                      b=None if b.index >> 2 == q else b)
