"""Path sampler — SVG path description → points equally spaced by arc length.

svgpathtools handles every segment type (lines, quadratic/cubic béziers, arcs).
Arc length is measured on a dense polyline per segment and inverted with linear
interpolation. Gaps between sub-paths (moveto jumps) add no length.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Path, parse_path

from epicycles.utils.geometry import arc_lengths, resample_by_arc_length

logger = logging.getLogger(__name__)


def densify(path: Path, per_segment: int = 64) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Dense (points, cumulative_length) for a parsed path."""
    chunks: list[NDArray[np.float64]] = []
    lengths: list[NDArray[np.float64]] = []
    offset = 0.0

    ts = np.linspace(0.0, 1.0, max(2, per_segment + 1))
    for seg in path:
        z = np.array([seg.point(t) for t in ts], dtype=np.complex128)
        pts = np.column_stack((z.real, z.imag))
        local = arc_lengths(pts) + offset
        offset = float(local[-1])
        chunks.append(pts)
        lengths.append(local)

    if not chunks:
        return np.empty((0, 2)), np.empty(0)
    return np.concatenate(chunks), np.concatenate(lengths)


def sample_path(
    d: str,
    count: int,
    per_segment: int = 64,
    min_length: float = 1e-9,
) -> NDArray[np.float64]:
    """Return ``count`` points at arc lengths i/count * L, i = 0..count-1.

    Zero-length or empty paths return an empty Nx2 array. Malformed path data
    raises whatever svgpathtools raises; callers decide whether to skip.
    """
    path = parse_path(d)
    if len(path) == 0 or count <= 0:
        return np.empty((0, 2))

    points, distances = densify(path, per_segment)
    if len(points) == 0 or distances[-1] < min_length:
        logger.debug("Skipping zero-length path: %.40s", d)
        return np.empty((0, 2))

    return resample_by_arc_length(points, distances, count)
