"""Epicycle evaluator — partial Fourier sum as a chain of rotating vectors."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Sequence

from epicycles.engine.context import Circle, Coefficient, EpicycleFrame, Point


def evaluate(
    t: float,
    coefficients: Sequence[Coefficient],
    num_circles: int,
) -> EpicycleFrame:
    """Chain the first ``num_circles`` coefficients at time ``t`` (t = 1 is one period).

    Each circle records the running position *before* its own term is added.
    ``num_circles <= 0`` gives no circles and an endpoint at the origin.
    """
    num_to_use = max(0, min(num_circles, len(coefficients)))

    circles: list[Circle] = []
    x = 0.0
    y = 0.0
    for coef in coefficients[:num_to_use]:
        angle = 2 * math.pi * coef.freq * t + coef.phase
        circles.append(Circle(x=x, y=y, radius=coef.amp, angle=angle))
        x += coef.amp * math.cos(angle)
        y += coef.amp * math.sin(angle)

    return EpicycleFrame(circles=tuple(circles), endpoint=Point(x, y))


def trace(
    coefficients: Sequence[Coefficient],
    num_circles: int,
    num_points: int,
) -> list[Point]:
    """Endpoints over one full period at t = n / num_points."""
    if num_points <= 0:
        return []
    return [evaluate(n / num_points, coefficients, num_circles).endpoint for n in range(num_points)]


def scale_coefficients(
    coefficients: Sequence[Coefficient],
    factor: float,
) -> tuple[Coefficient, ...]:
    """New coefficients with every amplitude multiplied by ``factor``.

    Applied once after analysis, never per frame.
    """
    return tuple(dataclasses.replace(c, amp=c.amp * factor) for c in coefficients)
