"""
Epicycle renderer CLI — draw an SVG outline with rotating vectors.

Usage:
  python -m epicycles drawing.svg                      # prints coefficient summary
  python -m epicycles drawing.svg -o frame.svg -t 0.25 # single frame as SVG
  python -m epicycles drawing.svg -o anim.gif          # full period as animated GIF
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from epicycles.engine.config import PipelineConfig
from epicycles.engine.epicycles import evaluate, trace
from epicycles.engine.errors import EpicycleError
from epicycles.engine.pipeline import create_pipeline
from epicycles.svg.renderer import render_animation_gif, render_frame_svg

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def _positive_float(value: str) -> float:
    x = float(value)
    if not x > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return x


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fourier epicycles — approximate an SVG outline")
    parser.add_argument("input", help="SVG file")
    parser.add_argument("-o", "--output", help="Output .svg (single frame) or .gif (animation)")
    parser.add_argument("-n", "--circles", type=int, default=50, help="Number of epicycles")
    parser.add_argument("-s", "--samples", type=_positive_int, default=500, help="Points sampled per shape")
    parser.add_argument("--scale", type=_positive_float, default=300.0, help="Display scale for amplitudes")
    parser.add_argument("-t", "--time", type=float, default=0.0, help="Phase for single-frame output")
    parser.add_argument("--frames", type=_positive_int, default=120, help="Frames per period in GIF output")
    parser.add_argument("--width", type=int, default=1000)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("--no-circles", action="store_true", help="Hide circle outlines")
    parser.add_argument("--no-vectors", action="store_true", help="Hide radius vectors")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    with open(args.input, encoding="utf-8") as f:
        svg_text = f.read()

    config = PipelineConfig(num_samples=args.samples, display_scale=args.scale)
    try:
        result = create_pipeline(config).run(svg_text)
    except EpicycleError as e:
        print(f"Error processing SVG: {e}", file=sys.stderr)
        return 1

    coeffs = result.scaled_coefficients
    in_use = max(0, min(args.circles, len(coeffs)))
    print(
        f"[{os.path.basename(args.input)}] {result.point_count} points, "
        f"{len(coeffs)} coefficients, {in_use} epicycles ({result.processing_time_ms:.0f}ms)"
    )

    if not args.output:
        for c in result.coefficients[:in_use]:
            print(f"  freq {c.freq:+5d}  amp {c.amp:.6f}  phase {c.phase:+.4f}")
        return 0

    show = {"show_circles": not args.no_circles, "show_vectors": not args.no_vectors}
    if args.output.lower().endswith(".gif"):
        render_animation_gif(
            coeffs,
            args.circles,
            args.output,
            frames=args.frames,
            width=args.width,
            height=args.height,
            **show,
        )
    else:
        frame = evaluate(args.time, coeffs, args.circles)
        outline = trace(coeffs, args.circles, args.frames)
        svg = render_frame_svg(frame, outline, width=args.width, height=args.height, **show)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)

    print(f"  → Saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
