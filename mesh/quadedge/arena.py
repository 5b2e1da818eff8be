# -*- coding: utf-8 -*-
# Quadrix/mesh/quadedge/arena.py

"""
Project: Quadrix
Date: 2/4/2026

Purpose:
--------
`QuadEdgeMesh`: a stable-indexed arena of quad-edge groups. Topology lives in
NumPy arrays; `Edge` handles are (arena, index, generation) triples.

Storage Convention:
-------------------
- Quad slot q owns directed-edge slots 4q .. 4q+3 (rotations 0..3).
- rot = 4q + (r+1) mod 4, sym = 4q + (r+2) mod 4, inv_rot = 4q + (r+3) mod 4.
- `_next[i]`  : int64, onext successor of directed edge i.
- `_org[i]`   : float64 (x, y), NaN row when the origin is unset.
- `_gen[q]`   : int64, bumped each time slot q is freed.
- `_alive[q]` : bool.
- `_data[i]`  : opaque per-edge payload (Python list, not NumPy).

Main Tasks:
-----------
   - Allocate/free quad groups with a free list and geometric growth.
   - Catch stale handles via the generation counter.
   - Hold the mesh configuration (order, strict mode, tolerances).

Notes:
------
- Not thread-safe: callers own exclusive mutation of a mesh.
"""

from typing import Any, Dict, Iterator, Optional, Sequence
import logging
import numpy as np

from geometry.primitives import Point, as_point
from .config import load_config
from .edge import Edge
from .errors import ForeignEdgeError, StaleEdgeError

__all__ = ["QuadEdgeMesh", "new_with_end_points"]

logger = logging.getLogger(__name__)


class QuadEdgeMesh:
    """
    Arena of quad-edge groups.

    Parameters
    ----------
    config : dict, optional
        Overrides for `config.DEFAULTS` (keys: "order", "strict", "capacity", "tolerance").
    strict : bool, optional
        Shortcut for config["strict"].
    order : {"CCW", "CW"}, optional
        Shortcut for config["order"].
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *,
                 strict: Optional[bool] = None, order: Optional[str] = None):
        upd = dict(config or {})
        if strict is not None:
            upd["strict"] = strict
        if order is not None:
            upd["order"] = order
        self.config = load_config(upd)

        cap = self.config["capacity"]
        self._next = np.zeros(4 * cap, dtype=np.int64)
        self._org = np.full((4 * cap, 2), np.nan, dtype=np.float64)
        self._gen = np.zeros(cap, dtype=np.int64)
        self._alive = np.zeros(cap, dtype=bool)
        self._data = [None] * (4 * cap)
        # stack; lowest slot is handed out first
        self._free = list(range(cap - 1, -1, -1))

    # ---- configuration views ----
    @property
    def order(self):
        return self.config["order"]

    @property
    def strict(self) -> bool:
        return self.config["strict"]

    @strict.setter
    def strict(self, value: bool) -> None:
        self.config["strict"] = bool(value)

    @property
    def sign_eps(self) -> float:
        return self.config["tolerance"]["sign_eps"]

    @property
    def segment_eps(self) -> float:
        return self.config["tolerance"]["segment_eps"]

    @property
    def angle_eps(self) -> float:
        return self.config["tolerance"]["angle_eps"]

    @property
    def sweep_eps(self) -> float:
        return self.config["tolerance"]["sweep_eps"]

    # ---- sizes ----
    @property
    def capacity(self) -> int:
        """Number of quad-edge slots currently allocated."""
        return int(self._gen.shape[0])

    @property
    def slot_count(self) -> int:
        """Number of directed-edge slots (4 per quad-edge)."""
        return int(self._next.shape[0])

    def __len__(self) -> int:
        return int(np.count_nonzero(self._alive))

    def __repr__(self) -> str:
        return "QuadEdgeMesh(live={}, capacity={}, order={}, strict={})".format(
            len(self), self.capacity, self.order, self.strict)

    # ---- allocation ----
    def _grow(self) -> None:
        old = self.capacity
        new = 2 * old
        self._next = np.concatenate([self._next, np.zeros(4 * old, dtype=np.int64)])
        self._org = np.vstack([self._org, np.full((4 * old, 2), np.nan, dtype=np.float64)])
        self._gen = np.concatenate([self._gen, np.zeros(old, dtype=np.int64)])
        self._alive = np.concatenate([self._alive, np.zeros(old, dtype=bool)])
        self._data.extend([None] * (4 * old))
        self._free.extend(range(new - 1, old - 1, -1))
        logger.debug("Arena grown from %d to %d quad-edge slots.", old, new)

    def make_edge(self, org: Optional[Sequence[float]] = None,
                  dest: Optional[Sequence[float]] = None) -> Edge:
        """
        Allocate a fresh, isolated quad-edge and return its primary edge.

        The primary edge and its sym each form a one-edge origin ring; the two dual
        edges form a two-edge ring (the single face around the isolated segment).
        """
        if not self._free:
            self._grow()
        q = self._free.pop()
        b = 4 * q
        self._next[b + 0] = b + 0
        self._next[b + 1] = b + 3
        self._next[b + 2] = b + 2
        self._next[b + 3] = b + 1
        self._org[b:b + 4] = np.nan
        self._data[b:b + 4] = [None] * 4
        self._alive[q] = True
        e = Edge(self, b, int(self._gen[q]))
        if org is not None or dest is not None:
            e.set_end_points(org, dest)
        return e

    def _release(self, e: Edge) -> None:
        """Free the quad slot of `e`. The caller must have unlinked it first."""
        self._check(e)
        q = e.index >> 2
        b = 4 * q
        self._alive[q] = False
        self._gen[q] += 1
        self._org[b:b + 4] = np.nan
        self._data[b:b + 4] = [None] * 4
        self._free.append(q)

    # ---- handle checks ----
    def is_alive(self, e: Edge) -> bool:
        if e.mesh is not self:
            return False
        q = e.index >> 2
        return q < self.capacity and bool(self._alive[q]) and int(self._gen[q]) == e.generation

    def _check(self, e: Edge) -> None:
        if e.mesh is not self:
            raise ForeignEdgeError("Edge belongs to another mesh.", {"index": e.index})
        if not self.is_alive(e):
            raise StaleEdgeError("Edge handle refers to a deleted quad-edge.",
                                 {"index": e.index, "generation": e.generation})

    # ---- raw slot access (used by Edge and the topology operators) ----
    def _edge(self, i: int) -> Edge:
        return Edge(self, i, int(self._gen[i >> 2]))

    def _onext(self, i: int) -> int:
        return int(self._next[i])

    def _orig(self, i: int) -> Optional[Point]:
        x, y = self._org[i]
        if np.isnan(x) or np.isnan(y):
            return None
        return Point(float(x), float(y))

    def _set_orig(self, i: int, p: Optional[Sequence[float]]) -> None:
        if p is None:
            self._org[i] = np.nan
        else:
            self._org[i] = as_point(p)

    # ---- iteration ----
    def edges(self) -> Iterator[Edge]:
        """One primary (rotation 0) edge per live quad-edge, in slot order."""
        for q in np.flatnonzero(self._alive):
            q = int(q)
            if not self._alive[q]:
                continue
            yield Edge(self, 4 * q, int(self._gen[q]))


def new_with_end_points(mesh: QuadEdgeMesh, org: Sequence[float], dest: Sequence[float]) -> Edge:
    """Build a fresh quad-edge in `mesh` running from `org` to `dest`."""
    return mesh.make_edge(org, dest)
