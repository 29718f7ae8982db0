"""Value types flowing through the epicycle pipeline.

Signal / coefficients → derived once per loaded geometry, immutable afterwards.
EpicycleFrame → transient, rebuilt on every evaluation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple


class Point(NamedTuple):
    """Planar coordinate in source geometry units."""

    x: float
    y: float


@dataclass(frozen=True)
class Coefficient:
    """One DFT frequency component in both polar and rectangular form."""

    freq: int
    amp: float
    phase: float
    re: float
    im: float

    def to_dict(self) -> dict[str, float]:
        return {
            "freq": self.freq,
            "amp": self.amp,
            "phase": self.phase,
            "re": self.re,
            "im": self.im,
        }


@dataclass(frozen=True)
class Circle:
    """A single rotating vector: centre, radius and current angle."""

    x: float
    y: float
    radius: float
    angle: float

    @property
    def tip(self) -> Point:
        return Point(
            self.x + self.radius * math.cos(self.angle),
            self.y + self.radius * math.sin(self.angle),
        )


@dataclass(frozen=True)
class EpicycleFrame:
    """Chain of rotating vectors at one time value, plus where the chain ends."""

    circles: tuple[Circle, ...] = field(default_factory=tuple)
    endpoint: Point = Point(0.0, 0.0)

    @property
    def num_circles(self) -> int:
        return len(self.circles)
