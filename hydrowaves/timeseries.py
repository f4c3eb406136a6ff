"""Excitation force time series.

This module evaluates a wave force provider over a vector of times, the way a
dynamics loop would, and returns the result as a labelled xarray Dataset.
"""

import numpy as np
import xarray as xr
from numpy.typing import NDArray

from .types import DOF_NAMES
from .waves import IrregularWaves, WaveBase


def simulation_times(duration: float, dt: float) -> NDArray[np.floating]:
    """Uniform simulation times from 0 to duration with step dt."""
    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")
    return np.linspace(0.0, duration, int(round(duration / dt)) + 1)


def excitation_forces(
    provider: WaveBase,
    times: NDArray[np.floating],
    verbose: int = 0,
) -> xr.Dataset:
    """Evaluate wave excitation at every time.

    Args:
        provider: Initialized wave force provider.
        times: Query times in seconds.
        verbose: Verbosity level (0=silent, 1=normal).

    Returns:
        xarray Dataset with dimensions (time, body, dof) containing:
        - force: Excitation force/moment [N or N*m]
        - eta: Free surface elevation at each time [m] (irregular waves only)
    """
    times = np.asarray(times, dtype=np.float64)

    if verbose >= 1:
        print(f"Evaluating {provider.name} excitation at {len(times)} times")

    force = np.stack([provider.forces_at(t) for t in times], axis=0)

    ds = xr.Dataset(
        {"force": (["time", "body", "dof"], force)},
        coords={
            "time": times,
            "body": np.arange(provider.num_bodies),
            "dof": DOF_NAMES,
        },
        attrs={
            "wave_mode": provider.mode.value,
            "source": "hydrowaves",
        },
    )

    if isinstance(provider, IrregularWaves):
        surface = provider.surface
        ds["eta"] = ("time", np.interp(times, surface.time, surface.eta))
        ds["eta"].attrs = {"units": "m", "long_name": "Free surface elevation"}

    ds["force"].attrs = {"long_name": "Wave excitation force", "units": "N or N*m"}
    ds["time"].attrs = {"units": "s", "long_name": "Simulation time"}

    return ds
