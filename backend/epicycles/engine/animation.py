"""Animation state — the caller-owned mutable context driving playback.

The pure engine functions never touch this object. Loading new geometry builds
the full coefficient set first and swaps it in with a single assignment, so a
failed load leaves the previous animation (coefficients, time, trail) intact.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field

from epicycles.engine.config import PipelineConfig
from epicycles.engine.context import EpicycleFrame, Point
from epicycles.engine.epicycles import evaluate
from epicycles.engine.pipeline import EpicyclePipeline, PipelineResult

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """Playback state: loaded spectrum, time, speed and the endpoint trail."""

    config: PipelineConfig = field(default_factory=PipelineConfig)
    result: PipelineResult | None = None
    num_circles: int = 50
    speed: float = 1.0
    time: float = 0.0
    playing: bool = True
    # Percentage of config.max_trail_points kept in the trail
    trail_length_pct: float = 100.0
    trail: deque[Point] = field(default_factory=deque)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> AnimationState:
        return cls(config=config, num_circles=config.default_num_circles)

    # ── Loading ──

    def load(self, points) -> PipelineResult:
        """Analyze already-sampled points and swap them in."""
        result = EpicyclePipeline(self.config).run_points(points)
        self._swap(result)
        return result

    def load_svg(self, svg_text: str) -> PipelineResult:
        """Sample + analyze SVG text and swap the result in."""
        result = EpicyclePipeline(self.config).run(svg_text)
        self._swap(result)
        return result

    def _swap(self, result: PipelineResult) -> None:
        self.result = result
        self.reset()
        logger.info(
            "Loaded %d points, %d epicycles in use",
            result.point_count,
            self.circles_in_use,
        )

    # ── Playback ──

    @property
    def loaded(self) -> bool:
        return self.result is not None

    @property
    def max_trail_points(self) -> int:
        return math.floor(self.trail_length_pct / 100 * self.config.max_trail_points)

    @property
    def circles_in_use(self) -> int:
        if self.result is None:
            return 0
        return max(0, min(self.num_circles, len(self.result.coefficients)))

    @property
    def progress_pct(self) -> int:
        return math.floor(self.time * 100)

    @property
    def point_count(self) -> int:
        return self.result.point_count if self.result is not None else 0

    def reset(self) -> None:
        self.time = 0.0
        self.trail.clear()
        self.playing = True

    def toggle(self) -> bool:
        self.playing = not self.playing
        return self.playing

    def current_frame(self) -> EpicycleFrame | None:
        """Evaluate at the current time without advancing."""
        if self.result is None:
            return None
        return evaluate(self.time, self.result.scaled_coefficients, self.num_circles)

    def tick(self) -> EpicycleFrame | None:
        """Advance one frame and return its geometry, or None when nothing is loaded."""
        if self.result is None:
            return None

        if self.playing:
            self.time += self.config.time_step * self.speed
            if self.time > 1:
                # Trail persists across cycles
                self.time = 0.0

        frame = evaluate(self.time, self.result.scaled_coefficients, self.num_circles)

        if self.playing:
            self.trail.append(frame.endpoint)
            limit = self.max_trail_points
            while len(self.trail) > limit:
                self.trail.popleft()

        return frame
