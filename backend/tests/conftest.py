"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="40"/>
</svg>'''

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80"/>
</svg>'''

# Every supported shape type, nested in a group, in a known document order
MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <path d="M 10 10 L 50 10 L 50 50 Z"/>
  <g transform="translate(5,5)">
    <rect x="60" y="10" width="30" height="20"/>
    <circle cx="150" cy="30" r="15"/>
  </g>
  <ellipse cx="40" cy="120" rx="30" ry="10"/>
  <line x1="100" y1="100" x2="180" y2="180"/>
  <polyline points="10,150 30,170 50,150"/>
  <polygon points="120,20 140,60 100,60"/>
</svg>'''

HEART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M12 21.35l-1.45-1.32C5.4 15.36 2 12.28 2 8.5 2 5.42 4.42 3 7.5 3c1.74 0 3.41.81 4.5 2.09C13.09 3.81 14.76 3 16.5 3 19.58 3 22 5.42 22 8.5c0 3.78-3.4 6.86-8.55 11.54L12 21.35z"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <text x="2" y="12">no shapes here</text>
</svg>'''

DEGENERATE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <line x1="5" y1="5" x2="5" y2="5"/>
</svg>'''

INVALID_SVG = "<svg><path d='M 0 0 L 1 1'></svg"

# Unit square corners as complex samples, counter-clockwise from (0.5, 0.5)
SQUARE_CORNERS = np.array([0.5 + 0.5j, -0.5 + 0.5j, -0.5 - 0.5j, 0.5 - 0.5j])


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG


@pytest.fixture
def heart_svg() -> str:
    return HEART_SVG


@pytest.fixture
def random_signal() -> np.ndarray:
    rng = np.random.default_rng(1234)
    return rng.uniform(-0.5, 0.5, 37) + 1j * rng.uniform(-0.5, 0.5, 37)
