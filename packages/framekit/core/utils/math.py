"""Math utilities shared by the motion primitives."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor, not limited to [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between two points."""
    dx = x0 - x1
    dy = y0 - y1
    return math.sqrt(dx * dx + dy * dy)


def pairwise_distances(xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Distances for every unordered pair (i < j) of points.

    Pairs are returned in row-major order: (0, 1), (0, 2), ..., (1, 2), ...
    which matches a nested ``for i: for j > i`` scan.

    Args:
        xs: X coordinates, shape (n,)
        ys: Y coordinates, shape (n,)

    Returns:
        Tuple of (i indices, j indices, distances), each shape (n * (n - 1) / 2,)
    """
    n = len(xs)
    ii, jj = np.triu_indices(n, k=1)
    dx = xs[ii] - xs[jj]
    dy = ys[ii] - ys[jj]
    dist: np.ndarray = np.sqrt(dx * dx + dy * dy)
    return ii, jj, dist
