"""Frame renderer — epicycle geometry → standalone SVG, PNG and animated GIF.

SVG output is plain string formatting. Rasterisation goes through cairosvg and
Pillow, both imported lazily.
"""

from __future__ import annotations

import colorsys
import io
import logging
import math
from collections import deque
from collections.abc import Sequence
from pathlib import Path

from epicycles.engine.context import Coefficient, EpicycleFrame, Point
from epicycles.engine.epicycles import evaluate

logger = logging.getLogger(__name__)

# Circles/vectors smaller than this (display units) are not drawn
_MIN_DRAWN_RADIUS = 0.5
_BACKGROUND = "#ffffff"
_TRAIL_COLOR = "#667eea"  # rgb(102, 126, 234)
_ENDPOINT_COLOR = "#ff6464"
_CIRCLE_COLOR = "#969696"  # rgb(150, 150, 150)


def _hsl_hex(hue_deg: float, saturation: float = 0.7, lightness: float = 0.6) -> str:
    r, g, b = colorsys.hls_to_rgb((hue_deg % 360) / 360, lightness, saturation)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


def _svg_wrap(content: str, width: float, height: float, defs: str = "") -> str:
    """Wrap content in a standalone SVG document with the origin at the centre."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width:.1f} {height:.1f}"'
        f' width="{width:.1f}" height="{height:.1f}">'
        f"\n<defs>{defs}</defs>"
        f'\n<rect x="0" y="0" width="{width:.1f}" height="{height:.1f}" fill="{_BACKGROUND}"/>'
        f'\n<g transform="translate({width / 2:.2f},{height / 2:.2f})">'
        f"\n{content}\n</g>\n</svg>"
    )


def render_epicycles(
    frame: EpicycleFrame,
    show_circles: bool = True,
    show_vectors: bool = True,
) -> list[str]:
    """Circle outlines (fading with rank) and hue-coded radius vectors."""
    parts: list[str] = []
    total = len(frame.circles)
    for i, c in enumerate(frame.circles):
        if c.radius <= _MIN_DRAWN_RADIUS:
            continue
        tip = c.tip
        if show_circles:
            opacity = 0.3 / math.sqrt(i + 1)
            parts.append(
                f'<circle cx="{c.x:.2f}" cy="{c.y:.2f}" r="{c.radius:.2f}" fill="none" '
                f'stroke="{_CIRCLE_COLOR}" stroke-opacity="{opacity:.3f}" stroke-width="1"/>'
            )
        if show_vectors:
            color = _hsl_hex(i / total * 360)
            parts.append(
                f'<line x1="{c.x:.2f}" y1="{c.y:.2f}" x2="{tip.x:.2f}" y2="{tip.y:.2f}" '
                f'stroke="{color}" stroke-opacity="0.8" stroke-width="2"/>'
            )
            parts.append(
                f'<circle cx="{tip.x:.2f}" cy="{tip.y:.2f}" r="3" '
                f'fill="{color}" fill-opacity="0.9"/>'
            )
    return parts


def render_trail(trail: Sequence[Point]) -> list[str]:
    """Trail segments, oldest faint → newest opaque."""
    if len(trail) < 2:
        return []
    parts: list[str] = []
    total = len(trail)
    for i in range(1, total):
        prev, point = trail[i - 1], trail[i]
        alpha = i / total * 0.8
        parts.append(
            f'<line x1="{prev.x:.2f}" y1="{prev.y:.2f}" x2="{point.x:.2f}" y2="{point.y:.2f}" '
            f'stroke="{_TRAIL_COLOR}" stroke-opacity="{alpha:.3f}" stroke-width="3" '
            f'stroke-linecap="round"/>'
        )
    return parts


def render_endpoint(endpoint: Point) -> list[str]:
    """Glowing pen tip."""
    return [
        f'<circle cx="{endpoint.x:.2f}" cy="{endpoint.y:.2f}" r="10" fill="url(#endpoint-glow)"/>',
        f'<circle cx="{endpoint.x:.2f}" cy="{endpoint.y:.2f}" r="4" fill="{_ENDPOINT_COLOR}"/>',
    ]


_GLOW_DEFS = (
    '<radialGradient id="endpoint-glow">'
    f'<stop offset="0" stop-color="{_ENDPOINT_COLOR}" stop-opacity="1"/>'
    f'<stop offset="1" stop-color="{_ENDPOINT_COLOR}" stop-opacity="0"/>'
    "</radialGradient>"
)


def render_frame_svg(
    frame: EpicycleFrame,
    trail: Sequence[Point] = (),
    width: float = 1000.0,
    height: float = 800.0,
    show_circles: bool = True,
    show_vectors: bool = True,
) -> str:
    """One animation frame: epicycles, then trail, then endpoint on top."""
    parts = render_epicycles(frame, show_circles=show_circles, show_vectors=show_vectors)
    parts.extend(render_trail(trail))
    parts.extend(render_endpoint(frame.endpoint))
    return _svg_wrap("\n".join(parts), width, height, defs=_GLOW_DEFS)


def render_png(svg_text: str, width: int | None = None, height: int | None = None) -> bytes:
    """Rasterise an SVG document to PNG bytes using cairosvg."""
    import cairosvg

    return cairosvg.svg2png(
        bytestring=svg_text.encode(),
        output_width=width,
        output_height=height,
    )


def render_animation_gif(
    coefficients: Sequence[Coefficient],
    num_circles: int,
    path: str | Path,
    frames: int = 120,
    width: int = 500,
    height: int = 400,
    trail_points: int | None = None,
    duration_ms: int = 40,
    show_circles: bool = True,
    show_vectors: bool = True,
) -> Path:
    """Render one full period as an animated GIF.

    ``coefficients`` must already be scaled to display units.
    """
    if frames <= 0:
        raise ValueError("frames must be positive")

    from PIL import Image

    trail: deque[Point] = deque(maxlen=trail_points or frames)
    images: list[Image.Image] = []
    for i in range(frames):
        frame = evaluate(i / frames, coefficients, num_circles)
        trail.append(frame.endpoint)
        svg_text = render_frame_svg(
            frame,
            list(trail),
            width=width,
            height=height,
            show_circles=show_circles,
            show_vectors=show_vectors,
        )
        png = render_png(svg_text, width=width, height=height)
        images.append(Image.open(io.BytesIO(png)).convert("RGB"))

    out = Path(path)
    images[0].save(
        out,
        save_all=True,
        append_images=images[1:],
        duration=duration_ms,
        loop=0,
    )
    logger.info("Wrote %d-frame animation to %s", frames, out)
    return out
