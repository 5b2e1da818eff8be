# -*- coding: utf-8 -*-
# Quadrix/geometry/bbox.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose:
--------
Axis-aligned bounding box of a point sequence as (min_x, min_y, max_x, max_y).

Notes:
------
- The first point seeds both corners; later points can only widen the box.
- An empty sequence yields the zero box (0, 0, 0, 0).
"""

from typing import NamedTuple, Sequence
import numpy as np
from .topology._validation import PointsLike, _as_xy

__all__ = ["BoundingBox", "bbox"]


class BoundingBox(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, pt: Sequence[float]) -> bool:
        """Closed containment test."""
        x, y = float(pt[0]), float(pt[1])
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def bbox(points: PointsLike) -> BoundingBox:
    """
    Axis-aligned bounding box (minx, miny, maxx, maxy) for (k, 2) coords.
    """
    P = _as_xy(points, check_finite=True)
    if P.shape[0] == 0:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)
    x = P[:, 0]; y = P[:, 1]
    return BoundingBox(float(np.min(x)), float(np.min(y)), float(np.max(x)), float(np.max(y)))
