"""Spectrum analyzer — direct-summation DFT of a complex signal.

X_k = (1/N) Σ_n x_n · e^(-i·2πkn/N), for k in [-floor(N/2), ceil(N/2)).

Direct O(N²) summation, one frequency row at a time (O(N) memory). Bins are
centred on zero.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.context import Coefficient
from epicycles.engine.errors import EmptySignalError

logger = logging.getLogger(__name__)


def frequency_range(n: int) -> range:
    """Signed frequency indices for an n-sample signal: [-floor(n/2), ceil(n/2))."""
    return range(-(n // 2), (n + 1) // 2)


def dft(signal: NDArray[np.complex128]) -> tuple[NDArray[np.int64], NDArray[np.complex128]]:
    """Return (frequencies, coefficients) in ascending frequency order."""
    x = np.asarray(signal, dtype=np.complex128)
    n = len(x)
    if n == 0:
        raise EmptySignalError("Cannot transform an empty signal")

    freqs = np.array(frequency_range(n), dtype=np.int64)
    idx = np.arange(n, dtype=np.float64)
    re_in = x.real
    im_in = x.imag

    out = np.empty(n, dtype=np.complex128)
    for row, k in enumerate(freqs):
        phi = 2 * np.pi * k * idx / n
        cos_phi = np.cos(phi)
        sin_phi = np.sin(phi)
        re = np.sum(re_in * cos_phi + im_in * sin_phi) / n
        im = np.sum(im_in * cos_phi - re_in * sin_phi) / n
        out[row] = complex(re, im)

    return freqs, out


def compute_spectrum(signal: NDArray[np.complex128]) -> tuple[Coefficient, ...]:
    """DFT of ``signal`` ranked by amplitude, largest first.

    Equal amplitudes are ordered by ascending frequency.
    """
    freqs, values = dft(signal)

    amps = np.abs(values)
    phases = np.arctan2(values.imag, values.real)
    # atan2 yields -π for a negative real part with -0.0 imaginary; keep (-π, π]
    phases = np.where(phases <= -np.pi, np.pi, phases)

    order = np.lexsort((freqs, -amps))
    coefficients = tuple(
        Coefficient(
            freq=int(freqs[i]),
            amp=float(amps[i]),
            phase=float(phases[i]),
            re=float(values[i].real),
            im=float(values[i].imag),
        )
        for i in order
    )

    logger.debug(
        "DFT: %d bins, dominant freq %d (amp %.4f)",
        len(coefficients),
        coefficients[0].freq,
        coefficients[0].amp,
    )
    return coefficients
