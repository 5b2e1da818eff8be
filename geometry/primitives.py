# -*- coding: utf-8 -*-
# Quadrix/geometry/primitives.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose:
--------
Lightweight 2D geometry primitives consumed by the quad-edge core: an immutable
point with vector arithmetic, a line segment, and the point-on-segment test.

Main Tasks:
-----------
   - `Point`: immutable (x, y) with subtraction, cross product and tolerant equality.
   - `Line`: segment between two points with a bounding-box containment check.
   - `is_point_on_segment`: collinearity (cross product) plus extent test.

Notes:
------
   - Points are values, never mutated; edges share them by value.
   - All functions return plain Python floats/bools.
"""

import math
from typing import NamedTuple, Sequence

__all__ = [
    "Point",
    "Line",
    "as_point",
    "cross",
    "signed_area_tri",
    "is_point_on_segment",
    "angle_of",
]


class Point(NamedTuple):
    """Immutable 2D coordinate."""

    x: float
    y: float

    def __sub__(self, other: Sequence[float]) -> "Point":  # type: ignore[override]
        return Point(self.x - float(other[0]), self.y - float(other[1]))

    def __add__(self, other: Sequence[float]) -> "Point":  # type: ignore[override]
        return Point(self.x + float(other[0]), self.y + float(other[1]))

    def cross(self, other: Sequence[float]) -> float:
        """z-component of the 2D cross product self x other."""
        return self.x * float(other[1]) - self.y * float(other[0])

    def is_close(self, other: Sequence[float], tol: float = 1e-9) -> bool:
        return math.isclose(self.x, float(other[0]), abs_tol=tol) and \
               math.isclose(self.y, float(other[1]), abs_tol=tol)

    def __repr__(self) -> str:
        return "Point({:g}, {:g})".format(self.x, self.y)


def as_point(p: Sequence[float]) -> Point:
    """Coerce a 2-sequence (tuple, list, ndarray row) into a `Point`."""
    if isinstance(p, Point):
        return p
    if len(p) != 2:
        raise ValueError("Expected a 2D point, got {!r}".format(p))
    return Point(float(p[0]), float(p[1]))


class Line(NamedTuple):
    """Directed segment from `a` to `b`."""

    a: Point
    b: Point

    def contains_point(self, pt: Sequence[float], tol: float = 0.0) -> bool:
        """Is `pt` inside the segment's axis-aligned extent (inflated by tol)?"""
        px, py = float(pt[0]), float(pt[1])
        return (min(self.a.x, self.b.x) - tol <= px <= max(self.a.x, self.b.x) + tol and
                min(self.a.y, self.b.y) - tol <= py <= max(self.a.y, self.b.y) + tol)


def cross(o: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cross product (a - o) x (b - o). Positive when o->a->b turns left.
    """
    return (float(a[0]) - float(o[0])) * (float(b[1]) - float(o[1])) - \
           (float(a[1]) - float(o[1])) * (float(b[0]) - float(o[0]))


def signed_area_tri(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """
    Signed area of triangle ABC in XY (CCW > 0).
    """
    return 0.5 * cross(a, b, c)


def is_point_on_segment(pt: Sequence[float], line: Line, tol: float = 1e-6) -> bool:
    """
    True iff `pt` lies on the closed segment `line` (endpoints included).

    Parameters
    ----------
    pt : point-like
        Query point.
    line : Line
        Segment endpoints.
    tol : float
        Collinearity tolerance on the cross product and slack on the extent test.
    """
    p = as_point(pt)
    a, b = as_point(line[0]), as_point(line[1])
    if abs((p - a).cross(b - a)) > tol:
        return False
    return Line(a, b).contains_point(p, tol)


def angle_of(origin: Sequence[float], pt: Sequence[float]) -> float:
    """
    Direction angle of the vector origin->pt in radians, in (-pi, pi].

    Raises
    ------
    ValueError
        If the vector has zero length.
    """
    dx = float(pt[0]) - float(origin[0])
    dy = float(pt[1]) - float(origin[1])
    if dx == 0.0 and dy == 0.0:
        raise ValueError("Zero-length direction at {!r}".format(tuple(origin)))
    return math.atan2(dy, dx)
