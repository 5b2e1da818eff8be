# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/errors.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose
-------
Typed exceptions for the quad-edge layer with compact, context-aware messages.
Absent edges are never errors (editors treat them as no-ops); these types cover
programmer errors and explicit validation requests.

Main Tasks
----------
    1. Define QuadEdgeError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ConfigError, StaleEdgeError, ForeignEdgeError,
       CoincidentEdgeError, InvalidEdgeError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- InvalidEdgeError also carries the validator's violation list in `.violations`.
"""

__all__ = [
    "QuadEdgeError",
    "ConfigError",
    "StaleEdgeError",
    "ForeignEdgeError",
    "CoincidentEdgeError",
    "InvalidEdgeError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class QuadEdgeError(Exception):
    """
    Base class for all quad-edge errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"index": 12, "generation": 3}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class ConfigError(QuadEdgeError):
    """
    Invalid mesh configuration:
      - unknown order names
      - non-positive tolerances or capacity
      - non-boolean strict flag
    """


class StaleEdgeError(QuadEdgeError):
    """
    An edge handle whose quad-edge slot was freed by `delete` (and possibly reused).
    """


class ForeignEdgeError(QuadEdgeError):
    """
    Edges from two different meshes passed to one operation.
    """


class CoincidentEdgeError(QuadEdgeError):
    """
    A resolution target lies along an edge already present in the origin ring, so no
    insertion slot exists without creating a coincident edge.
    """


class InvalidEdgeError(QuadEdgeError):
    """
    Structural invariants failed. Raised by strict mode and `assert_valid`; the plain
    validator only reports.
    """
    def __init__(self, violations, context=None):
        self.violations = list(violations)
        message = "{} invariant violation(s): {}".format(
            len(self.violations), "; ".join(self.violations[:5]))
        super().__init__(message, context)
