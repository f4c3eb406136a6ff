"""Type definitions and data structures for hydrowaves.

This module defines the data model shared by the excitation pipeline:
- Spectrum: 1D wave energy spectrum
- SurfaceElevation: free surface elevation time series
- ImpulseResponse: per-body excitation impulse response function (IRF)
- BodyExcitation: per-body hydrodynamic coefficient data supplied by the caller
- IrregularWaveParams / RegularWaveParams: wave configuration
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
import pandas as pd
import xarray as xr
from numpy.typing import NDArray

from .errors import WaveConfigurationError
from .utils import frequency_to_angular, irf_width, wavenumber

# Number of rigid-body degrees of freedom per body
N_DOF = 6

# Labels used for the DOF axis of labelled outputs
DOF_NAMES = ["surge", "sway", "heave", "roll", "pitch", "yaw"]


class WaveMode(str, Enum):
    """Wave conditions a force provider can be built for."""

    NONE = "none"  # Still water, zero excitation
    REGULAR = "regular"  # Single frequency closed-form excitation
    IRREGULAR = "irregular"  # Spectral sea state, IRF convolution


def _strictly_increasing(values: NDArray[np.floating]) -> bool:
    return bool(np.all(np.diff(values) > 0))


@dataclass
class Spectrum:
    """Wave energy spectrum.

    Attributes:
        freqs: Frequencies in Hz, strictly increasing.
        S: Spectral density at each frequency in m^2/Hz.
    """

    freqs: NDArray[np.floating]
    S: NDArray[np.floating]

    def __post_init__(self) -> None:
        """Validate spectrum arrays."""
        self.freqs = np.asarray(self.freqs, dtype=np.float64)
        self.S = np.asarray(self.S, dtype=np.float64)
        if self.freqs.shape != self.S.shape:
            raise WaveConfigurationError(
                f"Spectral density shape {self.S.shape} must match "
                f"frequency shape {self.freqs.shape}"
            )
        if not _strictly_increasing(self.freqs):
            raise WaveConfigurationError("Spectrum frequencies must be strictly increasing")
        if np.any(self.S < 0):
            raise WaveConfigurationError("Spectral density must be non-negative")

    @property
    def n_freqs(self) -> int:
        """Number of frequency bins."""
        return len(self.freqs)

    @property
    def df(self) -> float:
        """Frequency resolution in Hz."""
        if len(self.freqs) < 2:
            return 0.0
        return float(np.mean(np.diff(self.freqs)))

    @property
    def m0(self) -> float:
        """Zeroth spectral moment (surface elevation variance)."""
        return float(np.sum(self.S) * self.df)

    @property
    def hsig(self) -> float:
        """Significant wave height, Hs = 4 * sqrt(m0)."""
        return 4.0 * np.sqrt(self.m0)

    def to_xarray(self, depth: float | None = None) -> xr.Dataset:
        """Convert to xarray Dataset.

        Args:
            depth: Water depth in meters. When given, the wavenumber of each
                frequency bin is included.

        Returns:
            xarray Dataset with 'efth' variable on a 'freq' coordinate.
        """
        ds = xr.Dataset(
            {"efth": (["freq"], self.S)},
            coords={"freq": self.freqs},
        )
        ds["efth"].attrs["units"] = "m^2/Hz"
        ds["efth"].attrs["long_name"] = "Spectral energy density"
        ds["freq"].attrs["units"] = "Hz"
        if depth is not None:
            ds["wavenumber"] = ("freq", wavenumber(frequency_to_angular(self.freqs), depth))
            ds["wavenumber"].attrs["units"] = "rad/m"
            ds.attrs["depth"] = depth
        return ds


@dataclass
class SurfaceElevation:
    """Free surface elevation time series.

    Attributes:
        time: Sample times in seconds, strictly increasing.
        eta: Surface elevation at each sample in meters.
        synthesized: True if generated from a spectrum, False if loaded.
    """

    time: NDArray[np.floating]
    eta: NDArray[np.floating]
    synthesized: bool = False

    def __post_init__(self) -> None:
        """Validate elevation record."""
        self.time = np.asarray(self.time, dtype=np.float64)
        self.eta = np.asarray(self.eta, dtype=np.float64)
        if self.time.shape != self.eta.shape or self.time.ndim != 1:
            raise WaveConfigurationError(
                f"Elevation shape {self.eta.shape} must match time shape {self.time.shape}"
            )
        if len(self.time) < 2:
            raise WaveConfigurationError(
                f"Elevation record needs at least 2 samples, got {len(self.time)}"
            )
        if not _strictly_increasing(self.time):
            raise WaveConfigurationError("Elevation times must be strictly increasing")

    @property
    def n_samples(self) -> int:
        """Number of samples."""
        return len(self.time)

    @property
    def t_min(self) -> float:
        """First sample time."""
        return float(self.time[0])

    @property
    def t_max(self) -> float:
        """Last sample time."""
        return float(self.time[-1])

    @property
    def dt(self) -> float:
        """Mean sample spacing in seconds."""
        return float(np.mean(np.diff(self.time)))

    def to_xarray(self) -> xr.Dataset:
        """Convert to xarray Dataset with 'eta' on a 'time' coordinate."""
        ds = xr.Dataset(
            {"eta": (["time"], self.eta)},
            coords={"time": self.time},
            attrs={"synthesized": int(self.synthesized)},
        )
        ds["eta"].attrs["units"] = "m"
        ds["eta"].attrs["long_name"] = "Free surface elevation"
        ds["time"].attrs["units"] = "s"
        return ds

    def to_series(self) -> pd.Series:
        """Convert to a pandas Series indexed by time in seconds."""
        return pd.Series(self.eta, index=pd.Index(self.time, name="time"), name="eta")

    @classmethod
    def from_series(cls, series: pd.Series) -> "SurfaceElevation":
        """Create a loaded elevation record from a pandas Series.

        Args:
            series: Elevations indexed by time in seconds.

        Returns:
            SurfaceElevation instance.
        """
        if isinstance(series.index, pd.DatetimeIndex):
            raise WaveConfigurationError(
                "Series index must hold times in seconds, got DatetimeIndex"
            )
        series = series.dropna()
        return cls(
            time=series.index.to_numpy(dtype=np.float64),
            eta=series.to_numpy(dtype=np.float64),
            synthesized=False,
        )


@dataclass
class ImpulseResponse:
    """Excitation impulse response function of one body.

    Attributes:
        values: IRF values [6 x n_times], one row per DOF.
        time: IRF time axis in seconds, strictly increasing.
        width: Trapezoidal integration width of each sample (derived).
    """

    values: NDArray[np.floating]
    time: NDArray[np.floating]
    width: NDArray[np.floating] = field(init=False)

    def __post_init__(self) -> None:
        """Validate IRF arrays and derive the width array."""
        self.values = np.asarray(self.values, dtype=np.float64)
        self.time = np.asarray(self.time, dtype=np.float64)
        if self.time.ndim != 1 or len(self.time) == 0:
            raise WaveConfigurationError("IRF time axis must be a non-empty 1D array")
        if self.values.shape != (N_DOF, len(self.time)):
            raise WaveConfigurationError(
                f"IRF values shape {self.values.shape} must be "
                f"({N_DOF}, {len(self.time)})"
            )
        if not _strictly_increasing(self.time):
            raise WaveConfigurationError("IRF time axis must be strictly increasing")
        self.width = irf_width(self.time)

    @property
    def n_times(self) -> int:
        """Number of IRF samples."""
        return len(self.time)

    @property
    def t_min(self) -> float:
        """First IRF time."""
        return float(self.time[0])

    @property
    def t_max(self) -> float:
        """Last IRF time."""
        return float(self.time[-1])


@dataclass
class BodyExcitation:
    """Hydrodynamic excitation coefficients of one body.

    Produced by an external coefficient reader; only the arrays used by the
    excitation pipeline are held here.

    Attributes:
        irf_values: Excitation IRF [6 x n_times].
        irf_time: Excitation IRF time axis [n_times] in seconds.
        freq_list: Angular frequencies of the magnitude/phase tables in rad/s.
        excitation_mag: Excitation magnitude [6 x n_dirs x n_freqs].
        excitation_phase: Excitation phase [6 x n_dirs x n_freqs] in radians.
    """

    irf_values: NDArray[np.floating]
    irf_time: NDArray[np.floating]
    freq_list: NDArray[np.floating] | None = None
    excitation_mag: NDArray[np.floating] | None = None
    excitation_phase: NDArray[np.floating] | None = None

    def __post_init__(self) -> None:
        """Validate regular wave tables if present."""
        if self.excitation_mag is None:
            return
        self.freq_list = np.asarray(self.freq_list, dtype=np.float64)
        self.excitation_mag = np.asarray(self.excitation_mag, dtype=np.float64)
        self.excitation_phase = np.asarray(self.excitation_phase, dtype=np.float64)
        expected = (N_DOF, self.excitation_mag.shape[1], len(self.freq_list))
        for name, table in (("magnitude", self.excitation_mag), ("phase", self.excitation_phase)):
            if table.ndim != 3 or table.shape != expected:
                raise WaveConfigurationError(
                    f"Excitation {name} shape {table.shape} must be {expected}"
                )

    def impulse_response(self) -> ImpulseResponse:
        """Build the excitation impulse response of this body."""
        return ImpulseResponse(values=self.irf_values, time=self.irf_time)

    @classmethod
    def from_xarray(cls, ds: xr.Dataset) -> "BodyExcitation":
        """Create BodyExcitation from an xarray Dataset.

        The dataset must contain 'excitation_irf' with dims (dof, irf_time).
        Optional 'excitation_mag' and 'excitation_phase' variables with dims
        (dof, dir, omega) provide the regular wave tables.

        Args:
            ds: xarray Dataset with excitation coefficients.

        Returns:
            BodyExcitation instance.
        """
        if "excitation_irf" not in ds.data_vars:
            raise WaveConfigurationError("Dataset has no 'excitation_irf' variable")

        irf = ds["excitation_irf"].transpose("dof", "irf_time")
        mag = phase = omega = None
        if "excitation_mag" in ds.data_vars:
            mag = ds["excitation_mag"].transpose("dof", "dir", "omega").values
            phase = ds["excitation_phase"].transpose("dof", "dir", "omega").values
            omega = ds["omega"].values

        return cls(
            irf_values=irf.values,
            irf_time=irf["irf_time"].values,
            freq_list=omega,
            excitation_mag=mag,
            excitation_phase=phase,
        )


@dataclass
class IrregularWaveParams:
    """Irregular sea state configuration.

    Attributes:
        num_bodies: Number of bodies receiving excitation.
        wave_height: Significant wave height Hs in meters.
        wave_period: Peak period Tp in seconds.
        peak_enhancement_factor: JONSWAP gamma (1.0 gives Pierson-Moskowitz).
        water_depth: Water depth in meters.
        seed: Seed of the random phase draw.
        simulation_dt: Simulation time step in seconds. IRFs are resampled to
            this step when positive.
        simulation_duration: Simulated time in seconds.
        ramp_duration: Length of the linear elevation fade-in in seconds.
        eta_file_path: Elevation record to load instead of synthesizing one.
        frequency_min: Lower bound of the spectrum frequency grid in Hz.
        frequency_max: Upper bound of the spectrum frequency grid in Hz.
        n_frequencies: Number of spectrum frequency bins.
        output_dir: Directory for spectrum and elevation records, if any.
    """

    num_bodies: int = 1
    wave_height: float = 0.0
    wave_period: float = 0.0
    peak_enhancement_factor: float = 1.0
    water_depth: float = 50.0
    seed: int = 1
    simulation_dt: float = 0.0
    simulation_duration: float = 0.0
    ramp_duration: float = 0.0
    eta_file_path: str | None = None
    frequency_min: float = 0.001
    frequency_max: float = 1.0
    n_frequencies: int = 1000
    output_dir: str | None = None

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.num_bodies < 1:
            raise WaveConfigurationError(f"num_bodies must be at least 1, got {self.num_bodies}")
        if self.water_depth <= 0:
            raise WaveConfigurationError(f"Water depth must be positive, got {self.water_depth}")
        if self.wave_height < 0:
            raise WaveConfigurationError(f"Wave height must be non-negative, got {self.wave_height}")
        if self.wave_period < 0:
            raise WaveConfigurationError(f"Wave period must be non-negative, got {self.wave_period}")
        if self.simulation_duration < 0:
            raise WaveConfigurationError(
                f"Simulation duration must be non-negative, got {self.simulation_duration}"
            )
        if self.ramp_duration < 0:
            raise WaveConfigurationError(
                f"Ramp duration must be non-negative, got {self.ramp_duration}"
            )
        if not 0 < self.frequency_min < self.frequency_max:
            raise WaveConfigurationError(
                f"Frequency band must satisfy 0 < min < max, got "
                f"[{self.frequency_min}, {self.frequency_max}]"
            )
        if self.n_frequencies < 2:
            raise WaveConfigurationError(
                f"n_frequencies must be at least 2, got {self.n_frequencies}"
            )

    @property
    def loads_elevation(self) -> bool:
        """True if the elevation comes from a file rather than a spectrum."""
        return bool(self.eta_file_path)

    @property
    def synthesizes_elevation(self) -> bool:
        """True if wave height and period select spectral synthesis."""
        return not self.loads_elevation and self.wave_height != 0.0 and self.wave_period != 0.0


@dataclass
class RegularWaveParams:
    """Regular (single frequency) wave configuration.

    Attributes:
        num_bodies: Number of bodies receiving excitation.
        amplitude: Wave amplitude in meters.
        omega: Wave angular frequency in rad/s.
    """

    num_bodies: int = 1
    amplitude: float = 0.0
    omega: float = 0.0

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.num_bodies < 1:
            raise WaveConfigurationError(f"num_bodies must be at least 1, got {self.num_bodies}")
        if self.omega < 0:
            raise WaveConfigurationError(f"omega must be non-negative, got {self.omega}")
