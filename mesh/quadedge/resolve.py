# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/resolve.py

"""
Project: Quadrix
Date: 2/5/2026

Purpose:
--------
Pick the edge of an origin ring after which a new edge toward a target point
must be spliced so the ring stays sorted in the mesh's rotational sense.

Method:
-------
For each edge `ee` in the ring of `e`, measure (in the sense given by `order`)
the sweep from `ee` to `ee.onext` and the sweep from `ee` to the target
direction. The target belongs to the first wedge it falls strictly inside.
A one-edge ring is a full 2*pi wedge, so its only edge is always returned.

Preconditions:
--------------
- `e` and the target are topologically adjacent (the new edge is meant to join
  `e.orig`); no recovery is attempted otherwise.
- A target lying along an existing ring edge (within the mesh tolerance
  `angle_eps`) has no wedge and raises `CoincidentEdgeError`.
"""

import math
from typing import Sequence, Union

from geometry.primitives import angle_of, as_point
from geometry.topology.winding import Order, angular_sweep, as_order
from .edge import Edge
from .errors import CoincidentEdgeError

__all__ = ["resolve_edge"]


def resolve_edge(order: Union[str, Order], e: Edge, target: Sequence[float]) -> Edge:
    """
    Return the edge of `e`'s origin ring that the new edge e.orig -> target follows.

    Parameters
    ----------
    order : {"CCW", "CW"} or Order
        Rotational sense of the origin rings.
    e : Edge
        Any edge of the ring at the shared origin.
    target : point-like
        Far endpoint of the edge about to be inserted.

    Returns
    -------
    Edge
        `e` itself for a single-edge ring or when `e` has no origin; otherwise the
        ring edge whose wedge contains the target direction.

    Raises
    ------
    CoincidentEdgeError
        If the target coincides with the origin or lies along an existing edge.
    """
    order = as_order(order)
    if order.is_colinear:
        raise ValueError("resolve_edge needs a CW or CCW order.")
    origin = e.orig
    if origin is None:
        return e
    tgt = as_point(target)
    try:
        t_angle = angle_of(origin, tgt)
    except ValueError:
        raise CoincidentEdgeError("Target coincides with the ring origin.",
                                  {"origin": origin, "target": tgt})

    eps = e.mesh.angle_eps
    for ee in e.onext_ring():
        d1, d2 = ee.dest, ee.onext.dest
        if d1 is None or d2 is None:
            continue
        a1 = angle_of(origin, d1)
        wedge = angular_sweep(a1, angle_of(origin, d2), order)
        if wedge <= eps and ee.onext == ee:
            wedge = 2.0 * math.pi
        off = angular_sweep(a1, t_angle, order)
        if off <= eps or off >= 2.0 * math.pi - eps:
            raise CoincidentEdgeError("Target lies along an existing edge.",
                                      {"edge": ee, "target": tgt})
        if off < wedge:
            return ee
    return e
