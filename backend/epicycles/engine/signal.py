"""Signal builder — raw path points → centred, unit-scaled complex signal.

The bounding box is centred on the origin and divided by its larger side, so the
axis of largest extent spans exactly [-0.5, 0.5].
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import DegenerateSignalError, InvalidGeometryError
from epicycles.utils.geometry import as_points, bbox


def build_signal(points) -> NDArray[np.complex128]:
    """Normalise ``points`` (Nx2 array or sequence of Point) to a complex signal.

    Empty input gives an empty signal. Raises DegenerateSignalError when every
    point coincides.
    """
    try:
        pts = as_points(points)
    except ValueError as e:
        raise InvalidGeometryError(str(e)) from e

    if len(pts) == 0:
        return np.empty(0, dtype=np.complex128)
    if not np.all(np.isfinite(pts)):
        raise InvalidGeometryError("Point coordinates must be finite")

    xmin, ymin, xmax, ymax = bbox(pts)
    center_x = (xmin + xmax) / 2
    center_y = (ymin + ymax) / 2
    scale = max(xmax - xmin, ymax - ymin)

    if scale == 0:
        raise DegenerateSignalError(
            f"All {len(pts)} points coincide at ({xmin:g}, {ymin:g}); nothing to normalise"
        )

    re = (pts[:, 0] - center_x) / scale
    im = (pts[:, 1] - center_y) / scale
    return re + 1j * im
