# -*- coding: utf-8 -*-
# Quadrix/geometry/topology/_validation.py

"""
Project: Quadrix
Date: 2/3/2026

Purpose:
--------
Shape guards shared by the point-sequence helpers (winding, bbox). Inputs come
as lists of `Point`/tuples or as NumPy arrays and leave as float (N, 2) arrays.
"""

from typing import Optional, Sequence, Union
import numpy as np

PointsLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_xy(points: Optional[PointsLike], check_finite: bool = False) -> np.ndarray:
    """
    Float (N, 2) view of `points`; an empty input becomes a (0, 2) array.

    Raises
    ------
    ValueError
        If `points` is None, is not shaped (N, 2), or (with `check_finite`)
        holds NaN/Inf coordinates.
    """
    if points is None:
        raise ValueError("Point sequence is None.")
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    _assert_xy(arr, check_finite=check_finite)
    return arr


def _assert_xy(arr: np.ndarray, check_finite: bool = False) -> None:
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Point sequence must have shape (N, 2), got {}.".format(arr.shape))
    if check_finite:
        bad = ~np.isfinite(arr).all(axis=1)
        if bad.any():
            raise ValueError("Non-finite point(s) at rows {}.".format(np.flatnonzero(bad).tolist()))


def _is_exactly_closed(arr: np.ndarray, tol: float) -> bool:
    """First row equals last row within `tol` (needs at least two rows)."""
    return arr.shape[0] >= 2 and bool(np.allclose(arr[0], arr[-1], atol=tol, rtol=0.0))
