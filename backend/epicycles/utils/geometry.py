"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points) -> NDArray[np.float64]:
    """Coerce a sequence of (x, y) pairs into an Nx2 float array."""
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2))
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Expected Nx2 points, got shape {pts.shape}")
    return pts


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def resample_by_arc_length(
    points: NDArray[np.float64],
    distances: NDArray[np.float64],
    count: int,
) -> NDArray[np.float64]:
    """Pick ``count`` points at arc lengths i/count * total, i = 0..count-1.

    ``distances`` is the cumulative length at each input point (non-decreasing).
    The closing point at the full length is not repeated.
    """
    if count <= 0 or len(points) == 0:
        return np.empty((0, 2))
    total = float(distances[-1])
    targets = np.arange(count, dtype=np.float64) / count * total
    xs = np.interp(targets, distances, points[:, 0])
    ys = np.interp(targets, distances, points[:, 1])
    return np.column_stack((xs, ys))
