"""Tests for the direct-summation DFT."""

import math

import numpy as np
import pytest

from epicycles.engine.errors import EmptySignalError
from epicycles.engine.spectrum import compute_spectrum, dft, frequency_range
from tests.conftest import SQUARE_CORNERS


@pytest.mark.parametrize(
    "n, expected",
    [(1, [0]), (2, [-1, 0]), (4, [-2, -1, 0, 1]), (5, [-2, -1, 0, 1, 2])],
)
def test_frequency_range(n, expected):
    assert list(frequency_range(n)) == expected


def test_empty_signal_raises():
    with pytest.raises(EmptySignalError):
        compute_spectrum(np.array([], dtype=np.complex128))


@pytest.mark.parametrize("n", [1, 2, 7, 10, 33])
def test_one_coefficient_per_frequency(n):
    rng = np.random.default_rng(n)
    signal = rng.normal(size=n) + 1j * rng.normal(size=n)
    coeffs = compute_spectrum(signal)
    assert len(coeffs) == n
    assert sorted(c.freq for c in coeffs) == list(frequency_range(n))


def test_sorted_by_descending_amplitude(random_signal):
    amps = [c.amp for c in compute_spectrum(random_signal)]
    assert all(a >= b for a, b in zip(amps, amps[1:]))


def test_polar_form_matches_rectangular(random_signal):
    for c in compute_spectrum(random_signal):
        assert c.amp == pytest.approx(math.hypot(c.re, c.im))
        assert -math.pi < c.phase <= math.pi
        assert c.amp * math.cos(c.phase) == pytest.approx(c.re, abs=1e-12)
        assert c.amp * math.sin(c.phase) == pytest.approx(c.im, abs=1e-12)


def test_matches_numpy_fft(random_signal):
    n = len(random_signal)
    freqs, values = dft(random_signal)
    reference = np.fft.fft(random_signal) / n
    for k, v in zip(freqs, values):
        assert v == pytest.approx(reference[k % n], abs=1e-12)


def test_constant_signal_is_pure_dc():
    coeffs = compute_spectrum(np.full(8, 0.25 - 0.1j))
    assert coeffs[0].freq == 0
    assert coeffs[0].re == pytest.approx(0.25)
    assert coeffs[0].im == pytest.approx(-0.1)
    assert all(c.amp < 1e-12 for c in coeffs[1:])


def test_square_corners_single_component():
    coeffs = compute_spectrum(SQUARE_CORNERS)
    assert {c.freq for c in coeffs} == {-2, -1, 0, 1}
    top = coeffs[0]
    assert top.freq == 1
    assert top.amp == pytest.approx(math.sqrt(0.5))
    assert top.phase == pytest.approx(math.pi / 4)


def test_equal_amplitudes_ordered_by_frequency():
    coeffs = compute_spectrum(np.zeros(5, dtype=np.complex128))
    assert [c.freq for c in coeffs] == [-2, -1, 0, 1, 2]


def test_deterministic(random_signal):
    assert compute_spectrum(random_signal) == compute_spectrum(random_signal.copy())
