"""Tests for epicycle evaluation and coefficient scaling."""

import math

import numpy as np
import pytest

from epicycles.engine.context import Coefficient, Point
from epicycles.engine.epicycles import evaluate, scale_coefficients, trace
from epicycles.engine.spectrum import compute_spectrum
from tests.conftest import SQUARE_CORNERS


def _coef(freq: int, amp: float, phase: float = 0.0) -> Coefficient:
    return Coefficient(
        freq=freq,
        amp=amp,
        phase=phase,
        re=amp * math.cos(phase),
        im=amp * math.sin(phase),
    )


def test_reconstructs_square_corner_at_t0():
    frame = evaluate(0.0, compute_spectrum(SQUARE_CORNERS), 4)
    assert frame.endpoint.x == pytest.approx(0.5, abs=1e-12)
    assert frame.endpoint.y == pytest.approx(0.5, abs=1e-12)


@pytest.mark.parametrize("n", [16, 37, 40, 200])
def test_full_spectrum_reconstructs_every_sample(n):
    rng = np.random.default_rng(n)
    signal = rng.uniform(-0.5, 0.5, n) + 1j * rng.uniform(-0.5, 0.5, n)
    coeffs = compute_spectrum(signal)
    for i, sample in enumerate(signal):
        end = evaluate(i / n, coeffs, n).endpoint
        assert end.x == pytest.approx(sample.real, abs=1e-9)
        assert end.y == pytest.approx(sample.imag, abs=1e-9)


@pytest.mark.parametrize("num_circles", [0, -1, -50])
def test_non_positive_circle_count_gives_origin(num_circles):
    frame = evaluate(0.3, [_coef(1, 2.0), _coef(-1, 1.0)], num_circles)
    assert frame.circles == ()
    assert frame.endpoint == Point(0.0, 0.0)


def test_circle_count_capped_at_coefficients():
    coeffs = [_coef(1, 2.0), _coef(-1, 1.0), _coef(3, 0.5)]
    assert evaluate(0.0, coeffs, 2).num_circles == 2
    assert evaluate(0.0, coeffs, 100).num_circles == 3


def test_circles_chain_from_previous_tip():
    coeffs = [_coef(1, 3.0, 0.2), _coef(-2, 1.5, 1.0), _coef(4, 0.5, -2.0)]
    frame = evaluate(0.17, coeffs, 3)
    assert frame.circles[0].x == 0.0
    assert frame.circles[0].y == 0.0
    for prev, nxt in zip(frame.circles, frame.circles[1:]):
        assert nxt.x == pytest.approx(prev.tip.x)
        assert nxt.y == pytest.approx(prev.tip.y)
    assert frame.endpoint.x == pytest.approx(frame.circles[-1].tip.x)
    assert frame.endpoint.y == pytest.approx(frame.circles[-1].tip.y)


def test_angle_and_radius():
    frame = evaluate(0.25, [_coef(2, 4.0, 0.5)], 1)
    circle = frame.circles[0]
    assert circle.radius == 4.0
    assert circle.angle == pytest.approx(2 * math.pi * 2 * 0.25 + 0.5)


def test_period_wraps():
    coeffs = [_coef(1, 3.0, 0.2), _coef(-2, 1.5, 1.0)]
    a = evaluate(0.3, coeffs, 2).endpoint
    b = evaluate(1.3, coeffs, 2).endpoint
    c = evaluate(-0.7, coeffs, 2).endpoint
    assert b.x == pytest.approx(a.x) and b.y == pytest.approx(a.y)
    assert c.x == pytest.approx(a.x) and c.y == pytest.approx(a.y)


def test_truncation_converges_to_full_sum(random_signal):
    coeffs = compute_spectrum(random_signal)
    n = len(coeffs)
    full = evaluate(0.42, coeffs, n).endpoint
    errors = []
    for k in (n // 4, n // 2, n - 1, n):
        end = evaluate(0.42, coeffs, k).endpoint
        errors.append(math.hypot(end.x - full.x, end.y - full.y))
    assert errors[-1] == 0.0
    assert errors[-2] <= coeffs[-1].amp + 1e-12


def test_trace_samples_full_period():
    coeffs = [_coef(1, 1.0)]
    points = trace(coeffs, 1, 4)
    assert len(points) == 4
    expected = [(1, 0), (0, 1), (-1, 0), (0, -1)]
    for p, (x, y) in zip(points, expected):
        assert p.x == pytest.approx(x, abs=1e-12)
        assert p.y == pytest.approx(y, abs=1e-12)
    assert trace(coeffs, 1, 0) == []


def test_scale_multiplies_amplitude_only():
    coeffs = compute_spectrum(SQUARE_CORNERS)
    scaled = scale_coefficients(coeffs, 2.0)
    assert len(scaled) == len(coeffs)
    for original, s in zip(coeffs, scaled):
        assert s.amp == pytest.approx(original.amp * 2.0)
        assert s.freq == original.freq
        assert s.phase == original.phase
        assert s.re == original.re
        assert s.im == original.im
        assert s is not original


def test_scale_leaves_original_untouched():
    coeffs = (_coef(1, 1.0), _coef(0, 0.5))
    scale_coefficients(coeffs, 300.0)
    assert [c.amp for c in coeffs] == [1.0, 0.5]


def test_scaled_frame_is_scaled_geometry(random_signal):
    coeffs = compute_spectrum(random_signal)
    unit = evaluate(0.6, coeffs, 10).endpoint
    big = evaluate(0.6, scale_coefficients(coeffs, 300.0), 10).endpoint
    assert big.x == pytest.approx(unit.x * 300.0)
    assert big.y == pytest.approx(unit.y * 300.0)
