"""Regular (single frequency) wave excitation.

The excitation of a regular wave is closed-form:

    F(t) = |X(omega)| * A * cos(omega * t + phase(X(omega)))

with the magnitude and phase of the excitation coefficient X interpolated
linearly in frequency from the body's coefficient tables.
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..errors import WaveConfigurationError
from ..types import N_DOF, BodyExcitation, RegularWaveParams, WaveMode
from .base import WaveBase


class RegularWave(WaveBase):
    """Provider for a regular wave of fixed amplitude and frequency."""

    mode = WaveMode.REGULAR

    def __init__(self, params: RegularWaveParams | None = None):
        """Initialize regular wave provider.

        Args:
            params: Wave configuration. If None, uses defaults.
        """
        if params is None:
            params = RegularWaveParams()
        super().__init__(params.num_bodies)
        self.params = params
        self.excitation_mag = np.zeros((self.num_bodies, N_DOF))
        self.excitation_phase = np.zeros((self.num_bodies, N_DOF))
        self._hydro_data: list[BodyExcitation] = []
        self._initialized = False

    def add_hydro_data(self, hydro_data: Sequence[BodyExcitation]) -> None:
        """Attach per-body coefficients and interpolate them at the wave frequency."""
        if len(hydro_data) != self.num_bodies:
            raise WaveConfigurationError(
                f"Expected coefficients for {self.num_bodies} bodies, got {len(hydro_data)}"
            )
        for b, body in enumerate(hydro_data):
            if body.excitation_mag is None:
                raise WaveConfigurationError(f"Body {b} has no excitation magnitude/phase tables")
        self._hydro_data = list(hydro_data)
        self.initialize()

    def initialize(self) -> None:
        """Interpolate excitation magnitude and phase at the wave frequency."""
        freq_index = self.params.omega / self.omega_delta - 1.0

        for b, body in enumerate(self._hydro_data):
            self.excitation_mag[b] = _interp_table(body.excitation_mag, freq_index)
            self.excitation_phase[b] = _interp_table(body.excitation_phase, freq_index)
        self._initialized = True

    @property
    def omega_delta(self) -> float:
        """Frequency resolution of the coefficient tables in rad/s."""
        freq_list = self._hydro_data[0].freq_list
        return float(freq_list[-1] / len(freq_list))

    @property
    def initialized(self) -> bool:
        """True once coefficients have been attached."""
        return self._initialized

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise RuntimeError("RegularWave is not initialized; call add_hydro_data first.")

    def forces_at(self, t: float) -> NDArray[np.floating]:
        """Closed-form regular wave forces [num_bodies x 6]."""
        self._require_initialized()
        return (
            self.excitation_mag
            * self.params.amplitude
            * np.cos(self.params.omega * t + self.excitation_phase)
        )


def _interp_table(table: NDArray[np.floating], freq_index: float) -> NDArray[np.floating]:
    """Linearly interpolate a [6 x n_dirs x n_freqs] table at a fractional index.

    Only the first wave direction is used.
    """
    lower = int(np.floor(freq_index))
    if lower < 0 or lower + 1 >= table.shape[2]:
        raise WaveConfigurationError(
            f"Wave frequency index {freq_index} is outside the coefficient table "
            f"(0 to {table.shape[2] - 1})"
        )
    frac = freq_index - lower
    floor_val = table[:, 0, lower]
    ceil_val = table[:, 0, lower + 1]
    return frac * (ceil_val - floor_val) + floor_val
