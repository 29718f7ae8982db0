"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles.models.epicycles import CoefficientModel


class EpicyclesRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    num_samples: int | None = Field(
        default=None,
        ge=1,
        description="Points sampled per shape (defaults to server setting)",
    )
    display_scale: float | None = Field(
        default=None,
        gt=0,
        description="Multiplier applied to amplitudes for display",
    )


class FrameRequest(BaseModel):
    coefficients: list[CoefficientModel] = Field(
        ...,
        description="Amplitude-ranked coefficients, already display-scaled",
    )
    t: float = Field(default=0.0, description="Phase parameter; t=1 is one full period")
    num_circles: int = Field(default=50, description="Number of epicycles to chain")


class PreviewRequest(EpicyclesRequest):
    t: float = Field(default=0.0, description="Phase parameter; t=1 is one full period")
    num_circles: int | None = Field(default=None, description="Number of epicycles to chain")
    width: float = Field(default=1000.0, gt=0)
    height: float = Field(default=800.0, gt=0)
    trail_points: int = Field(
        default=500,
        ge=0,
        description="Traced outline resolution (capped by server setting)",
    )
    show_circles: bool = True
    show_vectors: bool = True
