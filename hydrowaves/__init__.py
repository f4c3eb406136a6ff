"""hydrowaves - time-domain wave excitation forces on floating bodies.

A Python package that turns a sea state and precomputed hydrodynamic
coefficients into per-body, per-DOF excitation forces for a rigid-body
dynamics solver. Irregular seas are handled by convolving each body's
excitation impulse response function (IRF) with a free surface elevation
record that is either synthesized from a JONSWAP spectrum or loaded from file.

Main Functions
--------------
setup_waves : Build and initialize a wave force provider
excitation_forces : Evaluate a provider over a time vector (xarray output)

Wave Force Providers
--------------------
NoWave : Still water, zero excitation
RegularWave : Closed-form single frequency excitation
IrregularWaves : Spectral sea state with IRF convolution

Data Structures
---------------
Spectrum : 1D wave energy spectrum
SurfaceElevation : Free surface elevation time series
ImpulseResponse : Excitation IRF of one body
BodyExcitation : Hydrodynamic coefficients of one body
IrregularWaveParams : Irregular sea state configuration
RegularWaveParams : Regular wave configuration
WaveMode : Enum of wave conditions (NONE, REGULAR, IRREGULAR)

Building Blocks
---------------
make_spectrum : JONSWAP spectrum from Hs, Tp and gamma
synthesize_surface : Random-phase elevation record from a spectrum
resample_irf : Cubic spline resampling of an IRF to a uniform step
ExcitationConvolution : IRF/elevation convolution engine
read_eta_file : Load an elevation record

Example
-------
>>> import numpy as np
>>> from hydrowaves import BodyExcitation, IrregularWaveParams, setup_waves
>>>
>>> body = BodyExcitation(irf_values=irf, irf_time=irf_time)  # irf: [6 x n]
>>> params = IrregularWaveParams(
...     wave_height=2.0,
...     wave_period=8.0,
...     peak_enhancement_factor=3.3,
...     water_depth=50.0,
...     seed=42,
...     simulation_dt=0.1,
...     simulation_duration=100.0,
... )
>>> waves = setup_waves("irregular", params, hydro_data=[body])
>>>
>>> for t in np.arange(0.0, 100.0, 0.1):
...     f = waves.forces_at(t)  # [n_bodies x 6]
"""

__version__ = "0.1.0"

# Driver
from .core import setup_waves

# Force time series
from .timeseries import excitation_forces, simulation_times

# Wave force providers
from .waves import IrregularWaves, NoWave, RegularWave, WaveBase

# Data structures
from .types import (
    BodyExcitation,
    ImpulseResponse,
    IrregularWaveParams,
    RegularWaveParams,
    Spectrum,
    SurfaceElevation,
    WaveMode,
)

# Errors
from .errors import (
    ConvolutionBoundsError,
    ElevationParseError,
    SpectrumUnavailableError,
    WaveConfigurationError,
)

# Building blocks
from .convolution import ExcitationConvolution, excitation_convolution
from .irf import resample_irf
from .records import read_eta_file, write_eta_file, write_spectrum_file
from .spectrum import jonswap, make_spectrum, pierson_moskowitz, spectrum_frequencies
from .surface import free_surface_elevation, surface_time_axis, synthesize_surface
from .utils import irf_width, wavenumber

__all__ = [
    # Driver
    "setup_waves",
    "excitation_forces",
    "simulation_times",
    # Providers
    "WaveBase",
    "NoWave",
    "RegularWave",
    "IrregularWaves",
    # Data structures
    "Spectrum",
    "SurfaceElevation",
    "ImpulseResponse",
    "BodyExcitation",
    "IrregularWaveParams",
    "RegularWaveParams",
    # Enums
    "WaveMode",
    # Errors
    "WaveConfigurationError",
    "ElevationParseError",
    "ConvolutionBoundsError",
    "SpectrumUnavailableError",
    # Building blocks
    "ExcitationConvolution",
    "excitation_convolution",
    "resample_irf",
    "read_eta_file",
    "write_eta_file",
    "write_spectrum_file",
    "spectrum_frequencies",
    "pierson_moskowitz",
    "jonswap",
    "make_spectrum",
    "free_surface_elevation",
    "surface_time_axis",
    "synthesize_surface",
    "irf_width",
    "wavenumber",
]
