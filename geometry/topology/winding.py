# -*- coding: utf-8 -*-
# Quadrix/geometry/topology/winding.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose:
--------
Winding-order provider. This module owns the canonical rotational sense used by
the quad-edge editors to keep faces consistently oriented:
   - `Order`: clockwise, counter-clockwise or collinear,
   - Signed area (shoelace) and orientation of a point sequence,
   - Closure enforcement for loops given with or without a duplicate last row.

Notes:
------------
   - Pure NumPy; no logging or file I/O.
   - Positive signed area => counter-clockwise in a Y-up frame. With `y_flip=True`
     (Y grows downward, screen coordinates) the sense is mirrored.
   - `Order` is a `str` enum so it compares equal to the plain "CW"/"CCW" strings
     used in configuration dictionaries.
"""

from __future__ import division
import math
from enum import Enum
from typing import Union
import numpy as np
from ._validation import PointsLike, _as_xy, _is_exactly_closed

__all__ = [
    "Order",
    "as_order",
    "signed_area",
    "order_of",
    "angular_sweep",
    "ensure_closed",
]


class Order(str, Enum):
    """Rotational sense of an ordered point sequence."""

    CLOCKWISE = "CW"
    COUNTER_CLOCKWISE = "CCW"
    COLINEAR = "COLINEAR"

    @property
    def is_clockwise(self) -> bool:
        return self is Order.CLOCKWISE

    @property
    def is_counter_clockwise(self) -> bool:
        return self is Order.COUNTER_CLOCKWISE

    @property
    def is_colinear(self) -> bool:
        return self is Order.COLINEAR

    def reverse(self) -> "Order":
        """Opposite sense; collinear stays collinear."""
        if self is Order.CLOCKWISE:
            return Order.COUNTER_CLOCKWISE
        if self is Order.COUNTER_CLOCKWISE:
            return Order.CLOCKWISE
        return self

    def __str__(self) -> str:
        return self.value


def as_order(value: Union[str, Order]) -> Order:
    """
    Coerce "CW"/"CCW" (case-insensitive) or an `Order` into an `Order`.

    Raises
    ------
    ValueError
        If the value names no known order.
    """
    if isinstance(value, Order):
        return value
    try:
        return Order(str(value).upper())
    except ValueError:
        raise ValueError("order must be 'CW' or 'CCW' (got {!r})".format(value))


def signed_area(points: PointsLike) -> float:
    """
    Shoelace signed area for a polygonal loop.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The input may be explicitly closed (first==last) or open; the formula
      implicitly connects last->first.

    Raises
    ------
    ValueError
        If input is not (N, 2) or N < 3.
    """
    P = _as_xy(points, check_finite=True)
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute area.")
    x = P[:, 0]
    y = P[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def order_of(points: PointsLike, *, y_flip: bool = False, tol: float = 0.0) -> Order:
    """
    Report whether a point sequence winds clockwise or counter-clockwise.

    Parameters
    ----------
    points : array-like
        (N, 2) sequence; fewer than 3 points are reported as collinear.
    y_flip : bool
        True when the Y axis grows downward; mirrors the result.
    tol : float
        |area| <= tol is classified as collinear.

    Returns
    -------
    Order
    """
    P = _as_xy(points)
    if P.shape[0] < 3:
        return Order.COLINEAR
    a = signed_area(P)
    if abs(a) <= tol:
        return Order.COLINEAR
    res = Order.COUNTER_CLOCKWISE if a > 0.0 else Order.CLOCKWISE
    return res.reverse() if y_flip else res


def angular_sweep(from_angle: float, to_angle: float, order: Order) -> float:
    """
    Angle swept turning from `from_angle` to `to_angle` in the rotational sense of
    `order`, in [0, 2*pi).
    """
    if order.is_colinear:
        raise ValueError("angular_sweep needs a CW or CCW order.")
    d = to_angle - from_angle if order.is_counter_clockwise else from_angle - to_angle
    return math.fmod(d + 4.0 * math.pi, 2.0 * math.pi)


def ensure_closed(points: PointsLike, tol: float = 1e-9) -> np.ndarray:
    """
    Ensure the polyline is closed. If last != first (within `tol`), append the first.

    Notes
    -----
    - If already closed within tol, the coerced array is returned (no copy).
    - When closing, a new array is allocated via vstack (copy).
    """
    P = _as_xy(points)
    if P.shape[0] == 0 or _is_exactly_closed(P, tol):
        return P
    return np.vstack((P, P[0]))
