"""Fourier epicycles — approximate SVG outlines with chains of rotating vectors."""

__version__ = "0.1.0"
