# -*- coding: utf-8 -*-
# Quadrix/mesh/__init__.py

"""
Project: Quadrix
Date: 2/4/2026

Modules:
--------
- quadedge: quad-edge arena, edge handles, topological operators
            (splice/connect/swap/delete) and geometric predicates.
- checks:   validator for edge-ring invariants (rule registry + ring views).
"""

__all__ = ["quadedge", "checks"]
