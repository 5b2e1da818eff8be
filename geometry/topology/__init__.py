# -*- coding: utf-8 -*-
# Quadrix/geometry/topology/__init__.py

"""
Project: Quadrix
Date: 2/3/2026

Topology Subfolder:
-------------------
Orientation analysis for ordered 2D point sequences.

Modules:
--------
- winding:     `Order` (CW/CCW/collinear), signed area, `order_of`, and closure
               enforcement for loops.

- _validation: Shared guards coercing point sequences to (N, 2) float arrays.
"""

from .winding import Order, as_order, signed_area, order_of, angular_sweep, ensure_closed

__all__ = ["winding", "Order", "as_order", "signed_area", "order_of", "angular_sweep", "ensure_closed"]
