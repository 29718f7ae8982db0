"""Pipeline errors. Each stage raises the first invalid condition it observes."""

from __future__ import annotations


class EpicycleError(ValueError):
    """Base class for all pipeline validation failures."""


class InvalidGeometryError(EpicycleError):
    """The geometry source produced no usable points."""


class DegenerateSignalError(EpicycleError):
    """All points coincide, so the signal cannot be normalised."""


class EmptySignalError(EpicycleError):
    """A zero-length signal was passed to the transform."""
