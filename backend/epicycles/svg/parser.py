"""SVG geometry source — facade over xml.etree + svgpathtools.

Walks the document in order and normalises every drawable shape to a path
description, then samples each one by arc length and concatenates the points.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidGeometryError
from epicycles.svg.sampler import sample_path

logger = logging.getLogger(__name__)

SHAPE_TAGS = {"path", "circle", "ellipse", "rect", "line", "polyline", "polygon"}

# Leading number of an attribute value ("10px" → 10), like parseFloat
_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_COORD_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass
class ShapeGeometry:
    """One drawable element, normalised to a path description."""

    tag: str
    d: str
    index: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def _num(attrs: dict[str, str], name: str) -> float:
    m = _NUMBER_RE.match(attrs.get(name, "") or "")
    return float(m.group(1)) if m else 0.0


def _fmt(v: float) -> str:
    return repr(float(v))


def _circle_d(cx: float, cy: float, rx: float, ry: float) -> str:
    return (
        f"M {_fmt(cx - rx)},{_fmt(cy)} "
        f"A {_fmt(rx)},{_fmt(ry)} 0 1,0 {_fmt(cx + rx)},{_fmt(cy)} "
        f"A {_fmt(rx)},{_fmt(ry)} 0 1,0 {_fmt(cx - rx)},{_fmt(cy)}"
    )


def _points_d(points: str, close: bool) -> str:
    coords = [c for c in _COORD_SPLIT_RE.split(points.strip()) if c]
    if len(coords) < 2:
        return ""
    parts = [f"M {coords[0]},{coords[1]}"]
    for i in range(2, len(coords) - 1, 2):
        parts.append(f"L {coords[i]},{coords[i + 1]}")
    if close:
        parts.append("Z")
    return " ".join(parts)


def shape_to_path_data(tag: str, attrs: dict[str, str]) -> str:
    """Convert a shape element's attributes to an equivalent path description."""
    if tag == "path":
        return attrs.get("d", "").strip()
    if tag == "circle":
        r = _num(attrs, "r")
        return _circle_d(_num(attrs, "cx"), _num(attrs, "cy"), r, r)
    if tag == "ellipse":
        return _circle_d(_num(attrs, "cx"), _num(attrs, "cy"), _num(attrs, "rx"), _num(attrs, "ry"))
    if tag == "rect":
        x, y = _num(attrs, "x"), _num(attrs, "y")
        w, h = _num(attrs, "width"), _num(attrs, "height")
        return (
            f"M {_fmt(x)},{_fmt(y)} L {_fmt(x + w)},{_fmt(y)} "
            f"L {_fmt(x + w)},{_fmt(y + h)} L {_fmt(x)},{_fmt(y + h)} Z"
        )
    if tag == "line":
        return (
            f"M {_fmt(_num(attrs, 'x1'))},{_fmt(_num(attrs, 'y1'))} "
            f"L {_fmt(_num(attrs, 'x2'))},{_fmt(_num(attrs, 'y2'))}"
        )
    if tag in ("polyline", "polygon"):
        points = attrs.get("points", "")
        return _points_d(points, close=tag == "polygon") if points else ""
    return ""


def extract_shapes(svg_text: str) -> list[ShapeGeometry]:
    """Parse SVG text into path descriptors, one per drawable shape, in document order."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise InvalidGeometryError("Invalid SVG file") from e

    shapes: list[ShapeGeometry] = []
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        tag = strip_ns(elem.tag).lower()
        if tag not in SHAPE_TAGS:
            continue
        attrs = {strip_ns(k): v for k, v in elem.attrib.items()}
        d = shape_to_path_data(tag, attrs)
        if not d:
            continue
        shapes.append(ShapeGeometry(tag=tag, d=d, index=len(shapes), attributes=attrs))

    logger.debug("Found %d drawable shapes", len(shapes))
    return shapes


def extract_points(
    svg_text: str,
    num_samples: int = 500,
    per_segment: int = 64,
    min_length: float = 1e-9,
) -> NDArray[np.float64]:
    """Sample every shape with ``num_samples`` points and concatenate in document order.

    Shapes that fail to parse or sample are skipped with a warning. Raises
    InvalidGeometryError when no shape yields any point.
    """
    chunks: list[NDArray[np.float64]] = []
    for shape in extract_shapes(svg_text):
        try:
            pts = sample_path(shape.d, num_samples, per_segment=per_segment, min_length=min_length)
        except Exception as e:
            logger.warning("Could not parse %s #%d: %s", shape.tag, shape.index, e)
            continue
        if not np.all(np.isfinite(pts)):
            logger.warning("Skipping %s #%d: non-finite sample points", shape.tag, shape.index)
            continue
        if len(pts) > 0:
            chunks.append(pts)

    if not chunks:
        raise InvalidGeometryError("No valid paths found in SVG")

    points = np.concatenate(chunks)
    logger.info("Sampled SVG: %d shapes → %d points", len(chunks), len(points))
    return points
