"""Irregular wave excitation by IRF convolution.

Setup runs once, in order:

1. Build each body's excitation IRF from its coefficient data
2. Resample the IRFs to the simulation step (if one is configured)
3. Load the elevation record, or synthesize one from a JONSWAP spectrum on a
   time axis padded by the IRF time span
4. Write the spectrum and elevation records (if an output directory is set)

Afterwards `forces_at` is a read-only query over the precomputed tables.
"""

import os
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..convolution import ExcitationConvolution
from ..errors import SpectrumUnavailableError, WaveConfigurationError
from ..irf import irf_time_bounds, resample_irf
from ..records import read_eta_file, write_eta_file, write_free_surface_obj, write_spectrum_file
from ..spectrum import make_spectrum, spectrum_frequencies
from ..surface import (
    free_surface_points,
    free_surface_triangles,
    surface_time_axis,
    synthesize_surface,
)
from ..types import (
    BodyExcitation,
    ImpulseResponse,
    IrregularWaveParams,
    Spectrum,
    SurfaceElevation,
    WaveMode,
)
from ..utils import frequency_to_angular, wavenumber
from .base import WaveBase

SPECTRUM_FILE = "spectral_densities.txt"
ETA_FILE = "eta.txt"


class IrregularWaves(WaveBase):
    """Provider for an irregular sea state.

    Example:
        >>> params = IrregularWaveParams(
        ...     wave_height=2.0, wave_period=8.0, simulation_dt=0.1,
        ...     simulation_duration=100.0, seed=42,
        ... )
        >>> waves = IrregularWaves(params)
        >>> waves.add_hydro_data([body_coefficients])
        >>> f = waves.forces_at(50.0)  # [1 x 6]
    """

    mode = WaveMode.IRREGULAR

    def __init__(self, params: IrregularWaveParams | None = None, verbose: int = 1):
        """Initialize irregular wave provider.

        Args:
            params: Sea state configuration. If None, uses defaults.
            verbose: Verbosity level (0=silent, 1=normal, 2=detailed).
        """
        if params is None:
            params = IrregularWaveParams()
        super().__init__(params.num_bodies)
        self.params = params
        self.verbose = verbose

        self.irfs: list[ImpulseResponse] = []
        self.spectrum: Spectrum | None = None
        self.surface: SurfaceElevation | None = None
        self.wave_numbers: NDArray[np.floating] | None = None
        self.mesh_file: str | None = None
        self._convolution: ExcitationConvolution | None = None

    def add_hydro_data(self, hydro_data: Sequence[BodyExcitation]) -> None:
        """Attach per-body coefficients and run setup."""
        if len(hydro_data) != self.num_bodies:
            raise WaveConfigurationError(
                f"Expected coefficients for {self.num_bodies} bodies, got {len(hydro_data)}"
            )
        self.initialize([body.impulse_response() for body in hydro_data])

    def initialize(self, irfs: Sequence[ImpulseResponse]) -> None:
        """Precompute the resampled IRFs and the elevation record.

        Args:
            irfs: Excitation IRF of each body on its source time axis.
        """
        params = self.params

        if params.simulation_dt > 0.0:
            if self.verbose >= 2:
                print(f"Resampling excitation IRFs to dt = {params.simulation_dt} s.")
            irfs = [resample_irf(irf, params.simulation_dt) for irf in irfs]
        self.irfs = list(irfs)

        if params.loads_elevation:
            self.surface = read_eta_file(params.eta_file_path, verbose=self.verbose)
            self.spectrum = None
        elif params.synthesizes_elevation:
            self._create_spectrum()
            self._create_free_surface_elevation()
        else:
            raise WaveConfigurationError(
                "Irregular waves need an elevation file or a non-zero wave height and period"
            )

        self._convolution = ExcitationConvolution(self.irfs, self.surface)

    def _create_spectrum(self) -> None:
        params = self.params
        freqs = spectrum_frequencies(params.frequency_min, params.frequency_max, params.n_frequencies)
        self.spectrum = make_spectrum(
            params.wave_height,
            params.wave_period,
            params.peak_enhancement_factor,
            freqs=freqs,
        )
        self.wave_numbers = wavenumber(frequency_to_angular(self.spectrum.freqs), params.water_depth)

        if params.output_dir is not None:
            write_spectrum_file(self.spectrum, os.path.join(params.output_dir, SPECTRUM_FILE))

    def _create_free_surface_elevation(self) -> None:
        params = self.params
        t_irf_min, t_irf_max = irf_time_bounds(self.irfs)
        time = surface_time_axis(
            t_irf_min,
            t_irf_max,
            params.simulation_duration,
            params.simulation_dt,
        )
        self.surface = synthesize_surface(
            self.spectrum,
            time,
            params.seed,
            ramp_duration=params.ramp_duration,
            verbose=self.verbose,
        )

        if params.output_dir is not None:
            write_eta_file(self.surface, os.path.join(params.output_dir, ETA_FILE))

    @property
    def initialized(self) -> bool:
        """True once setup has completed."""
        return self._convolution is not None

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise RuntimeError("IrregularWaves is not initialized; call add_hydro_data first.")

    def get_spectrum(self) -> Spectrum:
        """Return the spectrum of a synthesized sea state."""
        if self.spectrum is None:
            raise SpectrumUnavailableError(
                "Spectrum has not been created. Initialize with wave height and "
                "period to create spectrum."
            )
        return self.spectrum

    def get_free_surface_elevation(self) -> NDArray[np.floating]:
        """Return the elevation samples of the precomputed record."""
        self._require_initialized()
        return self.surface.eta

    def get_eta_time_data(self) -> NDArray[np.floating]:
        """Return the sample times of the precomputed record."""
        self._require_initialized()
        return self.surface.time

    def force(self, body: int, dof: int, t: float) -> float:
        """Excitation force of one body and DOF at time t."""
        self._require_initialized()
        return self._convolution.force(body, dof, t)

    def forces_at(self, t: float) -> NDArray[np.floating]:
        """Convolution forces on every body [num_bodies x 6]."""
        self._require_initialized()
        return np.array([self._convolution.body_forces(b, t) for b in range(self.num_bodies)])

    def set_up_wave_mesh(self, filename: str) -> str:
        """Write the free surface mesh of the simulated time range.

        Samples in [0, simulation_duration] are used; the whole record is used
        when no duration is configured.

        Args:
            filename: Output OBJ path.

        Returns:
            The mesh file path.
        """
        self._require_initialized()
        time = self.surface.time
        eta = self.surface.eta
        if self.params.simulation_duration > 0:
            mask = (time >= 0.0) & (time <= self.params.simulation_duration)
            time = time[mask]
            eta = eta[mask]

        points = free_surface_points(time, eta)
        triangles = free_surface_triangles(len(time))
        write_free_surface_obj(points, triangles, filename)

        self.mesh_file = filename
        return filename
