# -*- coding: utf-8 -*-
# Quadrix/mesh/checks/registry.py

"""
Project: Quadrix
Date: 2/6/2026

Purpose:
--------
Single table of the quad-edge invariant rules: which functions run, in which
order, and at which severity.

Notes:
------
   - Rule ids are unique; re-registering one raises ValueError.
   - Severity is "error" or "warn"; only errors make a payload not-ok.
"""


from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import rules as _rules


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable   # fn(view, order) -> finding dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError("Rule {!r} is already registered.".format(spec.id))
    if spec.severity not in ("error", "warn"):
        raise ValueError("Rule {!r}: unknown severity {!r}.".format(spec.id, spec.severity))
    REGISTRY[spec.id] = spec


# algebra, then the origin ring, then the faces around it
RULES_ORDER: List[str] = [
    "quad_closure",
    "sym_involution",
    "origin_ring_closed",
    "ring_inverse",
    "origin_shared",
    "duplicate_edges",
    "origin_ring_order",
    "face_ring_closed",
    "face_ring_chained",
]

for _rid in RULES_ORDER:
    _add(RuleSpec(_rid, getattr(_rules, _rid), "error"))


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Rule ids from `RULES_ORDER` that `enabled_map` does not switch off.
    Missing ids count as enabled; None enables everything.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
