"""Pipeline orchestrator — SVG text → points → signal → ranked, display-scaled coefficients."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.config import PipelineConfig
from epicycles.engine.context import Coefficient
from epicycles.engine.epicycles import scale_coefficients
from epicycles.engine.signal import build_signal
from epicycles.engine.spectrum import compute_spectrum
from epicycles.utils.geometry import as_points

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything derived from one loaded geometry."""

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    signal: NDArray[np.complex128] = field(default_factory=lambda: np.empty(0, dtype=np.complex128))
    coefficients: tuple[Coefficient, ...] = ()
    scaled_coefficients: tuple[Coefficient, ...] = ()
    display_scale: float = 1.0
    processing_time_ms: float = 0.0
    stage_times_ms: dict[str, float] = field(default_factory=dict)

    @property
    def point_count(self) -> int:
        return len(self.points)


def analyze(points) -> tuple[Coefficient, ...]:
    """Points → amplitude-ranked coefficients at unit scale.

    Empty input reaches the transform and raises EmptySignalError.
    """
    return compute_spectrum(build_signal(points))


class EpicyclePipeline:
    """Runs sampling, normalisation, the DFT and display scaling in order."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()

    def run(self, svg_text: str) -> PipelineResult:
        """Run the full pipeline on raw SVG text."""
        from epicycles.svg.parser import extract_points

        t0 = time.perf_counter()
        points = extract_points(
            svg_text,
            num_samples=self.config.num_samples,
            per_segment=self.config.oversample_per_segment,
            min_length=self.config.min_path_length,
        )
        sample_ms = (time.perf_counter() - t0) * 1000

        result = self.run_points(points)
        result.stage_times_ms = {"sample": round(sample_ms, 1), **result.stage_times_ms}
        result.processing_time_ms = round(result.processing_time_ms + sample_ms, 1)
        return result

    def run_points(self, points) -> PipelineResult:
        """Run normalisation, DFT and scaling on already-sampled points."""
        start = time.perf_counter()
        stage_times: dict[str, float] = {}

        t0 = time.perf_counter()
        signal = build_signal(points)
        pts = as_points(points)
        stage_times["signal"] = round((time.perf_counter() - t0) * 1000, 1)

        t0 = time.perf_counter()
        coefficients = compute_spectrum(signal)
        stage_times["dft"] = round((time.perf_counter() - t0) * 1000, 1)
        logger.debug("  dft over %d samples completed in %.1fms", len(signal), stage_times["dft"])

        t0 = time.perf_counter()
        scaled = scale_coefficients(coefficients, self.config.display_scale)
        stage_times["scale"] = round((time.perf_counter() - t0) * 1000, 1)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d points → %d coefficients in %.0fms",
            len(pts),
            len(coefficients),
            total,
        )

        return PipelineResult(
            points=pts,
            signal=signal,
            coefficients=coefficients,
            scaled_coefficients=scaled,
            display_scale=self.config.display_scale,
            processing_time_ms=round(total, 1),
            stage_times_ms=stage_times,
        )


def create_pipeline(config: PipelineConfig | None = None) -> EpicyclePipeline:
    """Factory function for creating a pipeline instance."""
    return EpicyclePipeline(config=config)
