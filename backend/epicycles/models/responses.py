"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles.models.epicycles import CoefficientModel, FrameModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class EpicyclesResponse(BaseModel):
    point_count: int = 0
    coefficient_count: int = 0
    display_scale: float = 1.0
    coefficients: list[CoefficientModel] = Field(default_factory=list)
    scaled_coefficients: list[CoefficientModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    stage_times_ms: dict[str, float] = Field(default_factory=dict)


class FrameResponse(FrameModel):
    circles_in_use: int = 0


class PreviewResponse(BaseModel):
    svg: str
    circles_in_use: int = 0
    point_count: int = 0
