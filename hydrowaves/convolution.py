"""Excitation force convolution.

The excitation force of one DOF at time t is the discrete convolution of the
excitation IRF with the free surface elevation:

    F(t) = sum_j IRF[dof, j] * eta(t - tau_j) * width[j]

eta is linearly interpolated from the precomputed elevation record. The IRF
time axis is ascending, so t - tau_j descends and the bracket index into the
elevation record only ever moves backward during one evaluation.
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import ConvolutionBoundsError
from .types import N_DOF, ImpulseResponse, SurfaceElevation
from .utils import lower_index


def elevation_history(
    surface: SurfaceElevation,
    time: float,
    irf_time: NDArray[np.floating],
) -> NDArray[np.floating]:
    """Interpolate the elevation at t - tau for every IRF time tau.

    Args:
        surface: Precomputed elevation record.
        time: Query time in seconds.
        irf_time: Ascending IRF time axis.

    Returns:
        eta(time - tau_j) for each j.

    Raises:
        ConvolutionBoundsError: If any time - tau_j lies outside the record.
    """
    t_surf = surface.time
    eta_surf = surface.eta
    t_min = t_surf[0]
    t_max = t_surf[-1]

    idx = lower_index(time - irf_time[0], t_surf)
    history = np.empty(len(irf_time))

    for j, tau in enumerate(irf_time):
        t_tau = time - tau
        if not t_min <= t_tau <= t_max:
            raise ConvolutionBoundsError(t_tau, float(t_min), float(t_max))

        while t_surf[idx] > t_tau:
            idx -= 1

        t1 = t_surf[idx]
        t2 = t_surf[idx + 1]
        if t_tau == t1:
            history[j] = eta_surf[idx]
        elif t_tau == t2:
            history[j] = eta_surf[idx + 1]
        elif t1 < t_tau < t2:
            w1 = (t2 - t_tau) / (t2 - t1)
            w2 = 1.0 - w1
            history[j] = w1 * eta_surf[idx] + w2 * eta_surf[idx + 1]
        else:
            raise RuntimeError(
                f"Excitation convolution: IRF time {tau} maps to {t_tau}, which is "
                f"not between {t1} and {t2}. IRF times must be ascending."
            )

    return history


def excitation_convolution(
    irf: ImpulseResponse,
    surface: SurfaceElevation,
    dof: int,
    time: float,
) -> float:
    """Excitation force of one DOF at the given time.

    Args:
        irf: Excitation IRF of the body.
        surface: Precomputed elevation record.
        dof: Degree of freedom index in 0..5.
        time: Query time in seconds.

    Returns:
        Force (or moment) in the DOF.
    """
    history = elevation_history(surface, time, irf.time)
    return float(np.sum(irf.values[dof] * history * irf.width))


class ExcitationConvolution:
    """Convolution engine over the IRFs of all bodies and one elevation record.

    Holds only read-only references; every query derives its scan state
    locally, so one instance can be queried from several threads.
    """

    def __init__(self, irfs: Sequence[ImpulseResponse], surface: SurfaceElevation):
        """Initialize the engine.

        Args:
            irfs: Excitation IRF of each body, in body order.
            surface: Precomputed elevation record.
        """
        self.irfs = list(irfs)
        self.surface = surface

    @property
    def num_bodies(self) -> int:
        """Number of bodies."""
        return len(self.irfs)

    def force(self, body: int, dof: int, time: float) -> float:
        """Excitation force of one body and DOF at the given time."""
        return excitation_convolution(self.irfs[body], self.surface, dof, time)

    def body_forces(self, body: int, time: float) -> NDArray[np.floating]:
        """Excitation forces of all DOFs of one body at the given time.

        Equivalent to calling `force` for each DOF, with the elevation
        history interpolated once.

        Returns:
            Force vector [6].
        """
        irf = self.irfs[body]
        history = elevation_history(self.surface, time, irf.time)
        return irf.values[:N_DOF] @ (history * irf.width)
