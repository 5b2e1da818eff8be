# -*- coding: utf-8 -*-
# Quadrix/mesh/checks/rules.py

"""
Project: Quadrix
Date: 2/6/2026

Purpose:
--------
Quad-edge invariant rules. Each rule inspects a read-only `RingView` and returns one
normalized "finding" record with human-readable violation messages.

Main Tasks:
-----------
   - Define checks with the uniform signature: `<rule_id>(view, order) -> dict`.
   - Algebraic rules (rotation closure, sym involution, ring inverses) catch
     arena corruption; ring rules catch splice bugs; geometric rules catch rings
     that are closed but not sorted in the mesh's rotational sense.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,                  # True => pass
      "count": int,                # number of violations
      "messages": [str, ...],      # one human-readable line per violation
      "details": {...},
    }

Notes:
------
   - Geometric rules skip silently when origins are unset; topology alone cannot
     be checked for orientation.
   - Messages are prefixed with the rule id so a flat list stays attributable.
   - Ring rules (closure, shared origin, duplicates, order) run on every vertex
     ring in `view.vertices`, not only the ring of the starting edge.
"""

import math
from typing import Dict, List

from geometry.primitives import angle_of
from geometry.topology.winding import Order, angular_sweep
from .helpers import RingView

_TWO_PI = 2.0 * math.pi


def _finding(rule_id: str, messages: List[str], details: Dict = None) -> Dict:
    msgs = ["[{}] {}".format(rule_id, m) for m in messages]
    return {
        "id": rule_id,
        "severity": "error",
        "ok": not msgs,
        "count": len(msgs),
        "messages": msgs,
        "details": details or {},
    }


# ------------------------------------------------------------------------------------
# 1) quad_closure: rot^4 == e, rot^2 == sym, rot.inv_rot == e
# ------------------------------------------------------------------------------------
def quad_closure(view: RingView, order: Order) -> Dict:
    bad = []
    for e in view.ring:
        r = e.rot
        if r == e:
            bad.append("{!r}: rot is the edge itself".format(e))
        if r.rot.rot.rot != e:
            bad.append("{!r}: rot applied four times does not return the edge".format(e))
        if r.rot != e.sym:
            bad.append("{!r}: rot applied twice differs from sym".format(e))
        if r.inv_rot != e:
            bad.append("{!r}: inv_rot does not undo rot".format(e))
    return _finding("quad_closure", bad)


# ------------------------------------------------------------------------------------
# 2) sym_involution: sym.sym == e, sym != e, dest == sym.orig
# ------------------------------------------------------------------------------------
def sym_involution(view: RingView, order: Order) -> Dict:
    bad = []
    for e in view.ring:
        s = e.sym
        if s == e:
            bad.append("{!r}: sym is the edge itself".format(e))
        if s.sym != e:
            bad.append("{!r}: sym of sym is not the edge".format(e))
        if e.dest != s.orig:
            bad.append("{!r}: dest differs from sym.orig".format(e))
    return _finding("sym_involution", bad)


# ------------------------------------------------------------------------------------
# 3) origin_ring_closed: start ring and every vertex ring the faces visit
# ------------------------------------------------------------------------------------
def origin_ring_closed(view: RingView, order: Order) -> Dict:
    bad = []
    for v in view.vertices:
        if not v.closed:
            bad.append("origin ring starting at {!r} does not close within {} steps".format(
                v.start, view.limit))
    return _finding("origin_ring_closed", bad, {"ring_size": len(view.ring)})


# ------------------------------------------------------------------------------------
# 4) ring_inverse: onext/oprev and lnext/lprev undo each other
# ------------------------------------------------------------------------------------
def ring_inverse(view: RingView, order: Order) -> Dict:
    bad = []
    for e in view.ring:
        if e.onext.oprev != e:
            bad.append("{!r}: oprev does not undo onext".format(e))
        if e.lnext.lprev != e:
            bad.append("{!r}: lprev does not undo lnext".format(e))
    return _finding("ring_inverse", bad)


# ------------------------------------------------------------------------------------
# 5) origin_shared: every edge of a vertex ring starts at the same point
# ------------------------------------------------------------------------------------
def origin_shared(view: RingView, order: Order) -> Dict:
    bad = []
    for v in view.vertices:
        for e in v.ring[1:]:
            if e.orig != v.origin:
                bad.append("{!r}: origin {!r} differs from ring origin {!r}".format(
                    e, e.orig, v.origin))
    return _finding("origin_shared", bad)


# ------------------------------------------------------------------------------------
# 6) duplicate_edges: two edges of one vertex ring to the same destination
# ------------------------------------------------------------------------------------
def duplicate_edges(view: RingView, order: Order) -> Dict:
    bad = []
    for v in view.vertices:
        seen = {}
        for e in v.ring:
            d = e.dest
            if d is None:
                continue
            if d in seen:
                bad.append("{!r} and {!r} both run from {!r} to {!r}".format(
                    seen[d], e, v.origin, d))
            else:
                seen[d] = e
    return _finding("duplicate_edges", bad)


# ------------------------------------------------------------------------------------
# 7) origin_ring_order: each vertex ring turns exactly once in the order's sense
# ------------------------------------------------------------------------------------
def _ring_order_messages(v, order: Order, eps: float) -> List[str]:
    org = v.origin
    if org is None or not v.closed or len(v.ring) == 1:
        return []
    if any(e.dest is None for e in v.ring):
        return []

    bad = []
    angles = []
    for e in v.ring:
        try:
            angles.append(angle_of(org, e.dest))
        except ValueError:
            bad.append("{!r}: zero-length edge".format(e))
    if bad:
        return bad

    n = len(angles)
    total = 0.0
    for i in range(n):
        sweep = angular_sweep(angles[i], angles[(i + 1) % n], order)
        if sweep <= eps:
            bad.append("{!r} and {!r} leave {!r} in the same direction".format(
                v.ring[i], v.ring[(i + 1) % n], org))
        total += sweep
    turns = int(round(total / _TWO_PI))
    if not bad and turns != 1:
        bad.append("origin ring at {!r} is not sorted {} (turns {} times)".format(
            org, order, turns))
    return bad


def origin_ring_order(view: RingView, order: Order) -> Dict:
    eps = view.start.mesh.sweep_eps
    bad = []
    for v in view.vertices:
        bad.extend(_ring_order_messages(v, order, eps))
    return _finding("origin_ring_order", bad, {"vertices": len(view.vertices)})


# ------------------------------------------------------------------------------------
# 8) face_ring_closed: every left-face ring closes
# ------------------------------------------------------------------------------------
def face_ring_closed(view: RingView, order: Order) -> Dict:
    bad = []
    for f in view.faces:
        if not f.closed:
            bad.append("left-face ring starting at {!r} does not close within {} steps".format(
                f.start, view.limit))
    return _finding("face_ring_closed", bad)


# ------------------------------------------------------------------------------------
# 9) face_ring_chained: consecutive face edges meet end to start
# ------------------------------------------------------------------------------------
def face_ring_chained(view: RingView, order: Order) -> Dict:
    bad = []
    for f in view.faces:
        for e in f.edges:
            d, nxt = e.dest, e.lnext
            o = nxt.orig
            if d is None or o is None:
                continue
            if d != o:
                bad.append("{!r}: lnext {!r} starts at {!r}, expected {!r}".format(e, nxt, o, d))
    return _finding("face_ring_chained", bad)
