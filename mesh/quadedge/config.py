# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/config.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose:
--------
Defaults and override merging for a `QuadEdgeMesh`.

Keys:
-----
{
  "order": "CCW",                 # positive rotational sense ("CCW" | "CW")
  "strict": False,                # validate after every connect/swap/delete
  "capacity": 64,                 # initial quad-edge slots in the arena
  "tolerance": {
      "sign_eps": 1e-6,           # |f| <= sign_eps  =>  sign(f) == 0
      "segment_eps": 1e-6,        # collinearity slack for on_edge
      "angle_eps": 1e-12,         # resolve_edge: target this close to a ring edge is coincident
      "sweep_eps": 1e-9,          # validator: consecutive ring edges this close share a direction
  },
}

Notes:
------
- Overrides are deep-merged (right-biased) without mutating inputs.
- Unknown keys are preserved but ignored.
"""

from typing import Any, Dict, Optional
import copy

from geometry.topology.winding import as_order
from .errors import ConfigError

__all__ = [
    "SIGN_EPSILON",
    "SEGMENT_EPSILON",
    "ANGLE_EPSILON",
    "SWEEP_EPSILON",
    "DEFAULTS",
    "load_config",
]

SIGN_EPSILON = 1e-6
SEGMENT_EPSILON = 1e-6
ANGLE_EPSILON = 1e-12
SWEEP_EPSILON = 1e-9

DEFAULTS: Dict[str, Any] = {
    "order": "CCW",
    "strict": False,
    "capacity": 64,
    "tolerance": {
        "sign_eps": SIGN_EPSILON,
        "segment_eps": SEGMENT_EPSILON,
        "angle_eps": ANGLE_EPSILON,
        "sweep_eps": SWEEP_EPSILON,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _check_positive(cfg: Dict[str, Any], key: str, *, allow_zero: bool = False) -> float:
    raw = cfg["tolerance"].get(key)
    try:
        v = float(raw)
    except (TypeError, ValueError):
        raise ConfigError("tolerance.{} must be a number".format(key), {"value": raw})
    if v < 0.0 or (v == 0.0 and not allow_zero):
        raise ConfigError("tolerance.{} out of range".format(key), {"value": v})
    return v


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `overrides` over `DEFAULTS` and validate the result.

    Returns
    -------
    dict
        Fully populated configuration; "order" is normalized to an `Order`.

    Raises
    ------
    ConfigError
        On an unknown order, a non-boolean strict flag, a bad capacity, or a
        negative/zero tolerance.
    """
    cfg = _deep_merge(DEFAULTS, overrides or {})

    try:
        cfg["order"] = as_order(cfg["order"])
    except ValueError as exc:
        raise ConfigError(str(exc), {"order": cfg["order"]})
    if cfg["order"].is_colinear:
        raise ConfigError("order must be 'CW' or 'CCW'", {"order": cfg["order"]})

    if not isinstance(cfg["strict"], bool):
        raise ConfigError("strict must be a bool", {"strict": cfg["strict"]})

    cap = cfg["capacity"]
    if isinstance(cap, bool) or not isinstance(cap, int) or cap < 1:
        raise ConfigError("capacity must be an int >= 1", {"capacity": cap})

    cfg["tolerance"]["sign_eps"] = _check_positive(cfg, "sign_eps")
    cfg["tolerance"]["segment_eps"] = _check_positive(cfg, "segment_eps", allow_zero=True)
    cfg["tolerance"]["angle_eps"] = _check_positive(cfg, "angle_eps")
    cfg["tolerance"]["sweep_eps"] = _check_positive(cfg, "sweep_eps")
    return cfg
