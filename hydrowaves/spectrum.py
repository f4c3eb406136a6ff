"""Parametric wave spectra.

This module provides functions for:
- Building the spectrum frequency grid
- Evaluating Pierson-Moskowitz and JONSWAP spectral densities
- Creating a Spectrum from sea state parameters
"""

import numpy as np
from numpy.typing import NDArray

from .errors import WaveConfigurationError
from .types import Spectrum

# Default frequency grid (Hz)
DEFAULT_FREQ_MIN = 0.001
DEFAULT_FREQ_MAX = 1.0
DEFAULT_N_FREQS = 1000


def spectrum_frequencies(
    start: float = DEFAULT_FREQ_MIN,
    end: float = DEFAULT_FREQ_MAX,
    n_freqs: int = DEFAULT_N_FREQS,
) -> NDArray[np.floating]:
    """Linearly spaced frequency grid in Hz, both ends included."""
    if n_freqs < 2:
        raise WaveConfigurationError(f"n_freqs must be at least 2, got {n_freqs}")
    return np.linspace(start, end, n_freqs)


def _validate_sea_state(freqs: NDArray[np.floating], hs: float, tp: float) -> NDArray[np.floating]:
    freqs = np.sort(np.asarray(freqs, dtype=np.float64))
    if tp <= 0:
        raise WaveConfigurationError(f"Peak period must be positive, got {tp}")
    if hs < 0:
        raise WaveConfigurationError(f"Significant wave height must be non-negative, got {hs}")
    if freqs.size == 0 or freqs[0] <= 0:
        raise WaveConfigurationError("Spectrum frequencies must all be positive")
    return freqs


def pierson_moskowitz(
    freqs: NDArray[np.floating],
    hs: float,
    tp: float,
) -> NDArray[np.floating]:
    """Calculate Pierson-Moskowitz spectral density.

    S(f) = 1.25 / Tp^4 * (Hs/2)^2 * f^-5 * exp(-1.25 / Tp^4 * f^-4)

    Args:
        freqs: Frequency array in Hz. Sorted ascending before evaluation.
        hs: Significant wave height in meters.
        tp: Peak period in seconds.

    Returns:
        Spectral density in m^2/Hz at each sorted frequency.
    """
    f = _validate_sea_state(freqs, hs, tp)
    a = tp**-4.0
    return 1.25 * a * (hs / 2.0) ** 2 * f**-5.0 * np.exp(-1.25 * a * f**-4.0)


def jonswap(
    freqs: NDArray[np.floating],
    hs: float,
    tp: float,
    gamma: float = 1.0,
) -> NDArray[np.floating]:
    """Calculate JONSWAP spectral density.

    The Pierson-Moskowitz density is scaled by the peak enhancement
    gamma^exp(-(f*Tp - 1)^2 / (2*sigma^2)), with sigma = 0.07 for f <= 1/Tp
    and 0.09 above.

    Args:
        freqs: Frequency array in Hz. Sorted ascending before evaluation.
        hs: Significant wave height in meters.
        tp: Peak period in seconds.
        gamma: Peak enhancement factor (1.0 reduces to Pierson-Moskowitz).

    Returns:
        Spectral density in m^2/Hz at each sorted frequency.
    """
    if gamma <= 0:
        raise WaveConfigurationError(f"Peak enhancement factor must be positive, got {gamma}")

    f = np.sort(np.asarray(freqs, dtype=np.float64))
    S = pierson_moskowitz(f, hs, tp)

    sigma = np.where(f <= 1.0 / tp, 0.07, 0.09)
    r = np.exp(-((f * tp - 1.0) ** 2) / (2.0 * sigma**2))

    return S * gamma**r


def make_spectrum(
    hs: float,
    tp: float,
    gamma: float = 1.0,
    freqs: NDArray[np.floating] | None = None,
) -> Spectrum:
    """Generate a JONSWAP spectrum.

    Args:
        hs: Significant wave height in meters.
        tp: Peak period in seconds.
        gamma: Peak enhancement factor.
        freqs: Frequency grid in Hz. If None, uses the default 1000 point
            grid over [0.001, 1.0] Hz.

    Returns:
        Spectrum on the sorted frequency grid.

    Example:
        >>> spectrum = make_spectrum(hs=2.0, tp=8.0, gamma=3.3)
        >>> spectrum.hsig  # close to 2.0
    """
    if freqs is None:
        freqs = spectrum_frequencies()
    freqs = np.sort(np.asarray(freqs, dtype=np.float64))

    return Spectrum(freqs=freqs, S=jonswap(freqs, hs, tp, gamma))
