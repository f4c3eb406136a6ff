"""Utility functions for hydrowaves.

This module provides core numerical helpers used throughout the package:
- Wavenumber calculation (dispersion relation)
- Frequency to angular frequency conversion
- IRF integration widths
- Index search and axis normalization on sorted time axes
"""

import numpy as np
from numpy.typing import NDArray

# Gravitational acceleration (m/s^2)
G = 9.81


def wavenumber(
    sigma: NDArray[np.floating] | float,
    depth: float,
    tol: float = 1e-8,
    max_iter: int = 50,
) -> NDArray[np.floating]:
    """Calculate wavenumber from angular frequency using dispersion relation.

    Solves the linear dispersion relation: sigma^2 = g * k * tanh(k * d)
    using Newton-Raphson iteration.

    Args:
        sigma: Angular frequency in rad/s (scalar or array), positive.
        depth: Water depth in meters.
        tol: Convergence tolerance.
        max_iter: Maximum number of iterations.

    Returns:
        Wavenumber k in rad/m (same shape as sigma).

    Raises:
        ValueError: If iteration does not converge.
    """
    sigma = np.atleast_1d(np.asarray(sigma, dtype=np.float64))

    # Initial guess using deep water approximation: k = sigma^2 / g
    k = sigma**2 / G

    for _ in range(max_iter):
        tanh_kd = np.tanh(k * depth)
        # f(k) = sigma^2 - g*k*tanh(k*d)
        f = sigma**2 - G * k * tanh_kd
        # f'(k) = -g*tanh(k*d) - g*k*d*sech^2(k*d)
        sech2_kd = 1.0 / np.cosh(k * depth) ** 2
        fp = -G * tanh_kd - G * k * depth * sech2_kd

        dk = -f / fp

        k_new = np.maximum(k + dk, 1e-10)

        if np.all(np.abs(dk) < tol * np.abs(k_new)):
            return k_new

        k = k_new

    raise ValueError(f"Wavenumber iteration did not converge after {max_iter} iterations")


def frequency_to_angular(freq: NDArray[np.floating] | float) -> NDArray[np.floating]:
    """Convert frequency in Hz to angular frequency in rad/s."""
    return 2.0 * np.pi * np.asarray(freq)


def irf_width(time: NDArray[np.floating]) -> NDArray[np.floating]:
    """Calculate trapezoidal integration widths of an IRF time axis.

    width[i] = 0.5*|t[i+1] - t[i]| + 0.5*|t[i] - t[i-1]|, with the missing
    neighbour term dropped at either end. The widths sum to t[-1] - t[0].

    Args:
        time: IRF time axis [n_times].

    Returns:
        Width of each sample [n_times].
    """
    time = np.asarray(time, dtype=np.float64)
    half_steps = 0.5 * np.abs(np.diff(time))

    width = np.zeros_like(time)
    width[:-1] += half_steps
    width[1:] += half_steps

    return width


def lower_index(value: float, axis: NDArray[np.floating]) -> int:
    """Return i such that axis[i] <= value < axis[i + 1].

    Values outside the axis are clamped to the first or last bracket, so the
    result is always a valid lower bracket index in [0, len(axis) - 2].

    Args:
        value: Value to locate.
        axis: Strictly increasing axis with at least 2 points.

    Returns:
        Lower bracket index.
    """
    idx = int(np.searchsorted(axis, value, side="right")) - 1
    return min(max(idx, 0), len(axis) - 2)


def normalize_axis(axis: NDArray[np.floating]) -> NDArray[np.floating]:
    """Linearly rescale an increasing axis onto [0, 1]."""
    axis = np.asarray(axis, dtype=np.float64)
    span = axis[-1] - axis[0]
    if span <= 0:
        raise ValueError(f"Axis must span a positive range, got {span}")
    return (axis - axis[0]) / span
