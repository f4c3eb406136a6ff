"""Free surface elevation synthesis.

This module provides functions for:
- Building the padded time axis of a synthesized sea state
- Random-phase superposition of spectral components
- Linear fade-in of the elevation signal
- Free surface mesh geometry for visualization
"""

import numpy as np
from numpy.typing import NDArray

from .errors import WaveConfigurationError
from .types import Spectrum, SurfaceElevation
from .utils import frequency_to_angular


def surface_time_axis(
    t_irf_min: float,
    t_irf_max: float,
    duration: float,
    dt: float,
) -> NDArray[np.floating]:
    """Time axis of a synthesized elevation record.

    The axis starts at -t_irf_max and spans duration + 2 * (t_irf_max - t_irf_min)
    with step dt. It contains [-t_irf_max, duration + (t_irf_max - t_irf_min)],
    so a convolution at any simulation time in [0, duration] only reads
    elevations inside the record.

    Args:
        t_irf_min: Smallest IRF time over all bodies.
        t_irf_max: Largest IRF time over all bodies.
        duration: Simulation duration in seconds.
        dt: Simulation time step in seconds.

    Returns:
        Uniform time axis in seconds.
    """
    if dt <= 0:
        raise WaveConfigurationError(f"Simulation time step must be positive, got {dt}")

    start = -t_irf_max
    end = start + duration + 2.0 * (t_irf_max - t_irf_min)
    n_samples = int(round((end - start) / dt)) + 1

    return np.linspace(start, end, n_samples)


def random_phases(n: int, seed: int) -> NDArray[np.floating]:
    """Draw n independent uniform phases in [0, 2*pi) from a seeded generator."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 2.0 * np.pi, n)


def free_surface_elevation(
    spectrum: Spectrum,
    time: NDArray[np.floating],
    seed: int,
) -> NDArray[np.floating]:
    """Superpose random-phase cosines with amplitudes from a spectrum.

    eta(t) = sum_i sqrt(2 * S(f_i) * df) * cos(2*pi*f_i*t + phi_i)

    Args:
        spectrum: Wave spectrum.
        time: Times at which to evaluate the elevation in seconds.
        seed: Seed of the phase draw. Equal seeds give identical series.

    Returns:
        Surface elevation at each time in meters.
    """
    time = np.asarray(time, dtype=np.float64)

    amplitudes = np.sqrt(2.0 * spectrum.S * spectrum.df)
    omegas = frequency_to_angular(spectrum.freqs)
    phases = random_phases(spectrum.n_freqs, seed)

    # Accumulate per component to bound memory on long records
    eta = np.zeros_like(time)
    for amp, omega, phase in zip(amplitudes, omegas, phases):
        eta += amp * np.cos(omega * time + phase)

    return eta


def apply_ramp(
    eta: NDArray[np.floating],
    ramp_duration: float,
    dt: float,
) -> NDArray[np.floating]:
    """Scale the start of a signal by a linear ramp from 0 to 1.

    The ramp covers int(ramp_duration / dt) + 1 samples; later samples are
    left unscaled.

    Args:
        eta: Elevation samples.
        ramp_duration: Ramp length in seconds. Non-positive disables the ramp.
        dt: Sample spacing in seconds.

    Returns:
        Ramped copy of eta.
    """
    eta = np.array(eta, dtype=np.float64)
    if ramp_duration <= 0:
        return eta

    ramp = np.linspace(0.0, 1.0, int(round(ramp_duration / dt, 9)) + 1)
    n = min(len(ramp), len(eta))
    eta[:n] *= ramp[:n]

    return eta


def synthesize_surface(
    spectrum: Spectrum,
    time: NDArray[np.floating],
    seed: int,
    ramp_duration: float = 0.0,
    verbose: int = 1,
) -> SurfaceElevation:
    """Synthesize a free surface elevation record from a spectrum.

    Args:
        spectrum: Wave spectrum.
        time: Uniform time axis, see `surface_time_axis`.
        seed: Seed of the phase draw.
        ramp_duration: Length of the linear fade-in in seconds.
        verbose: Verbosity level (0=silent, 1=normal).

    Returns:
        Synthesized SurfaceElevation.
    """
    time = np.asarray(time, dtype=np.float64)

    if verbose >= 1:
        print(f"Precalculating free surface elevation from {time[0]:f} to {time[-1]:f}.")

    surface = SurfaceElevation(
        time=time,
        eta=free_surface_elevation(spectrum, time, seed),
        synthesized=True,
    )
    if ramp_duration > 0:
        surface.eta = apply_ramp(surface.eta, ramp_duration, surface.dt)

    if verbose >= 1:
        print(f"Finished precalculating free surface elevation ({surface.n_samples} samples).")

    return surface


def free_surface_points(
    time: NDArray[np.floating],
    eta: NDArray[np.floating],
    half_width: float = 10.0,
) -> NDArray[np.floating]:
    """Vertices of a free surface strip.

    Each sample contributes two points, (-t, -half_width, eta) and
    (-t, half_width, eta), so the wave travels along +x as time advances.

    Returns:
        Vertex coordinates [2 * n_samples x 3].
    """
    time = np.asarray(time, dtype=np.float64)
    eta = np.asarray(eta, dtype=np.float64)

    points = np.empty((2 * len(time), 3))
    points[0::2, 0] = -time
    points[1::2, 0] = -time
    points[0::2, 1] = -half_width
    points[1::2, 1] = half_width
    points[0::2, 2] = eta
    points[1::2, 2] = eta

    return points


def free_surface_triangles(n_samples: int) -> NDArray[np.integer]:
    """Triangles bridging consecutive sample pairs of a free surface strip.

    Returns:
        0-based vertex indices [2 * (n_samples - 1) x 3].
    """
    triangles = []
    for i in range(n_samples - 1):
        triangles.append((2 * i, 2 * i + 1, 2 * i + 3))
        triangles.append((2 * i, 2 * i + 3, 2 * i + 2))

    return np.array(triangles, dtype=np.int64).reshape(-1, 3)
