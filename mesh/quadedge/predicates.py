# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/predicates.py

"""
Project: Quadrix
Date: 2/5/2026

Purpose:
--------
Orientation and containment predicates over quad-edge handles, consumed by the
flip/insert decisions of triangulation drivers.

Notes:
------
- Both predicates degrade to False when an endpoint of the edge is unset.
- The epsilon used by `sign` defaults to the edge's mesh configuration
  (tolerance.sign_eps); `SIGN_EPSILON` applies when called on bare floats.
"""

import math
from typing import Optional, Sequence

from geometry.primitives import Line, as_point, is_point_on_segment
from .config import SIGN_EPSILON
from .edge import Edge

__all__ = ["sign", "on_edge", "right_of"]


def sign(f: float, eps: float = SIGN_EPSILON) -> int:
    """
    0 if `f` is within `eps` of zero, else -1 or +1 from the sign bit of `f`.
    """
    if math.isclose(f, 0.0, abs_tol=eps):
        return 0
    return -1 if math.copysign(1.0, f) < 0.0 else 1


def on_edge(pt: Sequence[float], e: Edge, tol: Optional[float] = None) -> bool:
    """True iff `pt` lies on the closed segment e.orig -> e.dest."""
    org = e.orig
    if org is None:
        return False
    dst = e.dest
    if dst is None:
        return False
    if tol is None:
        tol = e.mesh.segment_eps
    return is_point_on_segment(pt, Line(org, dst), tol)


def right_of(y_flip: bool, pt: Sequence[float], e: Edge, eps: Optional[float] = None) -> bool:
    """
    True iff `pt` lies strictly right of the directed line e.orig -> e.dest.

    Below the line is right, above is left (Y up). `y_flip=True` mirrors the
    convention for frames where Y grows downward.
    """
    mul = -1 if y_flip else 1
    org = e.orig
    if org is None:
        return False
    dst = e.dest
    if dst is None:
        return False
    if eps is None:
        eps = e.mesh.sign_eps
    return sign((as_point(pt) - org).cross(dst - org), eps) == mul
