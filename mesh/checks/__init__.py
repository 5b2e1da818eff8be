# -*- coding: utf-8 -*-
# Quadrix/mesh/checks/__init__.py

"""
Project: Quadrix
Date: 2/6/2026

Purpose:
--------
Validator for quad-edge neighborhoods. Walks the rings reachable from a starting
edge and reports invariant violations; never mutates and never raises for a
violation (only `assert_valid` does).

Main Tasks
----------
   - `run_checks`: run enabled rules over one `RingView`, return a findings payload.
   - `validate`: flat, ordered list of violation messages (empty = valid).
   - `validate_mesh`: `validate` from both directions of every live quad-edge.
   - `assert_valid`: raise `InvalidEdgeError` when `validate` reports anything.

Returned Schema (run_checks):
-----------------------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {"start": repr, "ring_size": int, "faces": int, "order": str, "enabled": dict}
}
"""


from typing import Any, Dict, List, Optional
import copy
import logging

from geometry.topology.winding import as_order
from mesh.quadedge.errors import InvalidEdgeError
from .helpers import build_ring_view
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids

__all__ = ["DEFAULTS", "run_checks", "validate", "validate_mesh", "assert_valid"]

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    "enabled": {rid: True for rid in RULES_ORDER},
}


def _resolve_order(e, order):
    return e.mesh.order if order is None else as_order(order)


def run_checks(e, order=None, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) around edge `e` and return findings.

    Parameters
    ----------
    e : Edge
        Starting edge; its origin ring and the left faces of that ring are checked.
    order : {"CCW", "CW"} or Order, optional
        Rotational sense the rings must follow; defaults to the mesh order.
    config : dict, optional
        {"enabled": {rule_id: bool}} overrides for `DEFAULTS`.
    """
    order = _resolve_order(e, order)
    enabled = copy.deepcopy(DEFAULTS["enabled"])
    enabled.update((config or {}).get("enabled", {}))
    view = build_ring_view(e)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(enabled):
        spec = REGISTRY.get(rid)
        if spec is None:
            continue
        finding = spec.fn(view, order)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f["ok"] for rid, f in results.items() if REGISTRY[rid].severity == "error")
    return {
        "ok": ok,
        "rules": results,
        "meta": {
            "start": repr(e),
            "ring_size": len(view.ring),
            "faces": len(view.faces),
            "order": str(order),
            "enabled": enabled,
        },
    }


def validate(e, order=None, config: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    Ordered list of human-readable violations around `e`; empty means valid.
    """
    payload = run_checks(e, order, config)
    out: List[str] = []
    for rid in RULES_ORDER:
        f = payload["rules"].get(rid)
        if f is not None:
            out.extend(f["messages"])
    return out


def validate_mesh(mesh, order=None, config: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    Validate from both directions of every live quad-edge; duplicates removed, order kept.
    """
    order = mesh.order if order is None else as_order(order)
    seen = set()
    out: List[str] = []
    for e in mesh.edges():
        for d in (e, e.sym):
            for msg in validate(d, order, config):
                if msg not in seen:
                    seen.add(msg)
                    out.append(msg)
    if out:
        logger.debug("validate_mesh: %d violation(s) over %d quad-edges.", len(out), len(mesh))
    return out


def assert_valid(e, order=None, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Raise `InvalidEdgeError` if `validate(e, order)` reports any violation.
    """
    errs = validate(e, order, config)
    if errs:
        raise InvalidEdgeError(errs, {"start": repr(e)})
