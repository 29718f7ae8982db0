"""Wire models for coefficients and frame geometry."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles.engine.context import Circle, Coefficient, EpicycleFrame


class CoefficientModel(BaseModel):
    freq: int
    amp: float = Field(..., ge=0)
    phase: float
    re: float = 0.0
    im: float = 0.0

    @classmethod
    def from_coefficient(cls, c: Coefficient) -> CoefficientModel:
        return cls(**c.to_dict())

    def to_coefficient(self) -> Coefficient:
        return Coefficient(freq=self.freq, amp=self.amp, phase=self.phase, re=self.re, im=self.im)


class PointModel(BaseModel):
    x: float
    y: float


class CircleModel(BaseModel):
    x: float
    y: float
    radius: float
    angle: float

    @classmethod
    def from_circle(cls, c: Circle) -> CircleModel:
        return cls(x=c.x, y=c.y, radius=c.radius, angle=c.angle)


class FrameModel(BaseModel):
    circles: list[CircleModel] = Field(default_factory=list)
    endpoint: PointModel = Field(default_factory=lambda: PointModel(x=0.0, y=0.0))

    @classmethod
    def from_frame(cls, frame: EpicycleFrame) -> FrameModel:
        return cls(
            circles=[CircleModel.from_circle(c) for c in frame.circles],
            endpoint=PointModel(x=frame.endpoint.x, y=frame.endpoint.y),
        )
