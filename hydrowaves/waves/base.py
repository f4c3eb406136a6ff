"""Base class for wave force providers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..types import N_DOF, BodyExcitation, WaveMode


class WaveBase(ABC):
    """Abstract base class for wave force providers.

    A provider is configured and initialized once, then queried once per
    simulation step by the dynamics loop. Queries do not modify the provider.

    Subclasses must implement the `forces_at` method.
    """

    mode: WaveMode

    def __init__(self, num_bodies: int = 1):
        """Initialize wave force provider.

        Args:
            num_bodies: Number of bodies receiving excitation.
        """
        self.num_bodies = num_bodies

    def add_hydro_data(self, hydro_data: Sequence[BodyExcitation]) -> None:
        """Attach per-body hydrodynamic coefficients and initialize.

        Args:
            hydro_data: Coefficients of each body, in body order.
        """

    @abstractmethod
    def forces_at(self, t: float) -> NDArray[np.floating]:
        """Wave excitation on every body at time t.

        Args:
            t: Simulation time in seconds.

        Returns:
            Forces and moments [num_bodies x 6].
        """
        pass

    def force_vector_at(self, t: float) -> NDArray[np.floating]:
        """Wave excitation at time t as one flat vector [6 * num_bodies].

        Body b occupies entries 6*b to 6*b + 5.
        """
        return self.forces_at(t).reshape(self.num_bodies * N_DOF)

    @property
    def name(self) -> str:
        """Return the provider name."""
        return self.__class__.__name__
