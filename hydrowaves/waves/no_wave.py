"""Still water: no wave excitation."""

import numpy as np
from numpy.typing import NDArray

from ..types import N_DOF, WaveMode
from .base import WaveBase


class NoWave(WaveBase):
    """Provider returning zero excitation at every time."""

    mode = WaveMode.NONE

    def forces_at(self, t: float) -> NDArray[np.floating]:
        """Zero forces [num_bodies x 6]."""
        return np.zeros((self.num_bodies, N_DOF))
