"""Sorted-array search and one-dimensional interpolation."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike


class Side(Enum):
    """Which insertion point ``search_sorted`` reports for equal values."""

    LEFT = "left"
    RIGHT = "right"


def search_sorted(
    a: Sequence[Any], v: Iterable[Any], side: Side = Side.LEFT
) -> list[int]:
    """Indices at which the values of ``v`` would be inserted to keep ``a`` sorted.

    With ``Side.LEFT`` the index ``i`` satisfies ``a[i-1] < x <= a[i]``; with
    ``Side.RIGHT`` it satisfies ``a[i-1] <= x < a[i]``. Values beyond the last
    element map to ``len(a)``. Values that compare neither way with the
    elements of ``a`` (such as NaN) produce no index.
    """
    items = list(a)
    if side is Side.LEFT:
        inside, beyond = operator.le, operator.gt
    else:
        inside, beyond = operator.lt, operator.ge
    last = len(items) - 1

    result: list[int] = []
    for value in v:
        for idx, item in enumerate(items):
            if inside(value, item):
                result.append(idx)
                break
            if beyond(value, item) and idx == last:
                result.append(idx + 1)
                break
    return result


class LinearInterpolator:
    """Piecewise linear interpolation of several series sampled on a common axis.

    ``x`` is a strictly increasing 1-D axis; ``y`` holds one series per row,
    each with one sample per point of ``x``.
    """

    def __init__(self, x: ArrayLike, y: ArrayLike) -> None:
        x_arr = np.asarray(x, dtype=float)
        y_arr = np.atleast_2d(np.asarray(y, dtype=float))
        if x_arr.ndim != 1:
            raise ValueError("x must be one-dimensional")
        if x_arr.size < 2:
            raise ValueError("at least two sample points are needed")
        if not np.all(np.diff(x_arr) > 0):
            raise ValueError("x must be strictly increasing")
        if y_arr.ndim != 2 or y_arr.shape[1] != x_arr.size:
            raise ValueError(
                f"y must have shape (n, {x_arr.size}), got {y_arr.shape}"
            )
        self.x = x_arr
        self.y = y_arr

    def interp_value(self, value: float) -> np.ndarray:
        """Values of every series at ``value``."""
        value = float(value)
        lo, hi = self.x[0], self.x[-1]
        if not lo <= value <= hi:
            raise ValueError(f"{value} lies outside the range [{lo}, {hi}]")
        (idx,) = search_sorted(self.x, [value], Side.LEFT)
        idx = max(idx, 1)
        x0, x1 = self.x[idx - 1], self.x[idx]
        weight = (value - x0) / (x1 - x0)
        return self.y[:, idx - 1] * (1.0 - weight) + self.y[:, idx] * weight

    def interp_array(self, values: ArrayLike) -> np.ndarray:
        """Values of every series at each of ``values``, one row per value."""
        points = np.asarray(values, dtype=float).ravel()
        if points.size == 0:
            return np.empty((0, self.y.shape[0]))
        return np.vstack([self.interp_value(p) for p in points])