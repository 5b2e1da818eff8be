# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/__init__.py

"""
Project: Quadrix
Date: 2/4/2026

Quad-edge Subfolder:
--------------------
Guibas–Stolfi quad-edge structure for editing planar subdivisions.

Modules:
--------
- arena:      `QuadEdgeMesh` (NumPy-backed arena of quad-edge groups) and
              `new_with_end_points`.
- edge:       `Edge` handles with rot/sym/onext/... accessors and ring iteration.
- topo:       `splice`, `connect`, `swap`, `delete`.
- resolve:    `resolve_edge`, the insertion-slot lookup used by `connect`.
- predicates: `sign`, `on_edge`, `right_of`.
- config:     `DEFAULTS`, `load_config`, `SIGN_EPSILON`.
- errors:     typed exceptions.

Usage:
    from mesh.quadedge import QuadEdgeMesh, splice, connect
    m = QuadEdgeMesh()
    a = m.make_edge((0, 0), (1, 0))
"""

from .arena import QuadEdgeMesh, new_with_end_points
from .config import DEFAULTS, SIGN_EPSILON, load_config
from .edge import Edge
from .errors import (
    CoincidentEdgeError,
    ConfigError,
    ForeignEdgeError,
    InvalidEdgeError,
    QuadEdgeError,
    StaleEdgeError,
)
from .predicates import on_edge, right_of, sign
from .resolve import resolve_edge
from .topo import connect, delete, splice, swap

__all__ = [
    "QuadEdgeMesh",
    "new_with_end_points",
    "Edge",
    "splice",
    "connect",
    "swap",
    "delete",
    "resolve_edge",
    "on_edge",
    "right_of",
    "sign",
    "DEFAULTS",
    "SIGN_EPSILON",
    "load_config",
    "QuadEdgeError",
    "ConfigError",
    "StaleEdgeError",
    "ForeignEdgeError",
    "CoincidentEdgeError",
    "InvalidEdgeError",
]
