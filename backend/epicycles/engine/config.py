"""Pipeline configuration — sampling density, display scale and animation pacing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Tunables for sampling, analysis and playback."""

    # Points sampled per SVG shape (equally spaced by arc length)
    num_samples: int = 500
    # Dense polyline resolution per path segment for arc-length lookup
    oversample_per_segment: int = 64
    # Below this total length a shape is treated as zero-length
    min_path_length: float = 1e-9

    # Unit-scale coefficients → display units (pixels)
    display_scale: float = 300.0

    # Playback
    default_num_circles: int = 50
    time_step: float = 0.001  # one period = 1000 ticks at speed 1.0
    max_trail_points: int = 1000  # trail length at 100%
