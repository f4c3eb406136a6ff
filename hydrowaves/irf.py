"""Excitation impulse response resampling.

IRFs are delivered on the time axis of the coefficient data, which is usually
non-uniform and coarser than the simulation step. Before convolution they are
re-gridded onto a uniform axis with a cubic spline fitted on a normalized
[0, 1] parameter so that absolute time magnitudes do not affect the fit.
"""

from collections.abc import Sequence

import numpy as np
from scipy.interpolate import make_interp_spline

from .errors import WaveConfigurationError
from .types import ImpulseResponse
from .utils import normalize_axis

SPLINE_DEGREE = 3


def resampled_length(t0: float, t1: float, dt: float) -> int:
    """Number of points of the uniform axis replacing [t0, t1] at step dt."""
    if dt <= 0:
        raise WaveConfigurationError(f"Resampling step must be positive, got {dt}")
    # Rounding keeps exact multiples of dt from gaining a point to float error
    return max(int(np.ceil(round((t1 - t0) / dt, 9))), 2)


def resample_irf(irf: ImpulseResponse, dt: float) -> ImpulseResponse:
    """Resample an IRF onto a uniform time axis.

    Args:
        irf: Impulse response on its original time axis.
        dt: Target time step in seconds.

    Returns:
        Impulse response on ceil((t1 - t0) / dt) points linearly spaced from
        the first to the last original time, with widths recomputed.
    """
    if irf.n_times < 2:
        raise WaveConfigurationError("IRF needs at least 2 samples to be resampled")

    t0, t1 = irf.t_min, irf.t_max
    time_new = np.linspace(t0, t1, resampled_length(t0, t1, dt))

    # Fit all 6 DOF curves on a shared [0, 1] parameter
    s_old = normalize_axis(irf.time)
    s_new = normalize_axis(time_new)
    k = min(SPLINE_DEGREE, irf.n_times - 1)
    spline = make_interp_spline(s_old, irf.values.T, k=k)

    return ImpulseResponse(values=spline(s_new).T, time=time_new)


def irf_time_bounds(irfs: Sequence[ImpulseResponse]) -> tuple[float, float]:
    """Smallest and largest IRF time over all bodies.

    Both bounds start from 0.0, so the returned range always contains t = 0.
    """
    t_min = 0.0
    t_max = 0.0
    for irf in irfs:
        t_min = min(t_min, irf.t_min)
        t_max = max(t_max, irf.t_max)
    return t_min, t_max
