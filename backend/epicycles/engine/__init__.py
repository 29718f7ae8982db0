"""Fourier epicycle engine — signal building, DFT and epicycle evaluation."""

from epicycles.engine.animation import AnimationState
from epicycles.engine.context import Circle, Coefficient, EpicycleFrame, Point
from epicycles.engine.epicycles import evaluate, scale_coefficients, trace
from epicycles.engine.errors import (
    DegenerateSignalError,
    EmptySignalError,
    EpicycleError,
    InvalidGeometryError,
)
from epicycles.engine.pipeline import EpicyclePipeline, analyze, create_pipeline
from epicycles.engine.signal import build_signal
from epicycles.engine.spectrum import compute_spectrum

__all__ = [
    "AnimationState",
    "Circle",
    "Coefficient",
    "EpicycleFrame",
    "Point",
    "analyze",
    "evaluate",
    "trace",
    "scale_coefficients",
    "build_signal",
    "compute_spectrum",
    "EpicyclePipeline",
    "create_pipeline",
    "EpicycleError",
    "InvalidGeometryError",
    "DegenerateSignalError",
    "EmptySignalError",
]
