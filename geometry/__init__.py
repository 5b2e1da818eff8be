# -*- coding: utf-8 -*-
# Quadrix/geometry/__init__.py

"""
Project: Quadrix
Date: 2/3/2026

Modules:
--------
- primitives: `Point`, `Line`, cross product, signed triangle area, and the
              point-on-segment test used by the quad-edge predicates.

- bbox:       `bbox(points)` → `BoundingBox(min_x, min_y, max_x, max_y)`, a single
              min/max fold over a point sequence.

- topology:   Orientation of ordered point sequences:
                * `Order` (CW / CCW / collinear) and `as_order`,
                * `signed_area`, `order_of`, `ensure_closed`.

            Usage:
                from geometry.primitives import Point, Line, is_point_on_segment
                from geometry.topology.winding import Order, order_of
"""

__all__ = ["bbox", "primitives", "topology"]
