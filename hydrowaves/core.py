"""Core driver function for wave excitation setup.

This module provides the entry point `setup_waves` that selects a wave force
provider once, attaches the hydrodynamic coefficient data and runs the
provider's precomputation. The returned provider is what the dynamics loop
queries every time step.
"""

from collections.abc import Sequence

from .types import BodyExcitation, IrregularWaveParams, RegularWaveParams, WaveMode
from .waves import IrregularWaves, NoWave, RegularWave, WaveBase

# Mapping from wave mode enum to provider class
WAVE_CLASSES: dict[WaveMode, type[WaveBase]] = {
    WaveMode.NONE: NoWave,
    WaveMode.REGULAR: RegularWave,
    WaveMode.IRREGULAR: IrregularWaves,
}

# Parameter type expected by each provider
PARAM_CLASSES: dict[WaveMode, type | None] = {
    WaveMode.NONE: None,
    WaveMode.REGULAR: RegularWaveParams,
    WaveMode.IRREGULAR: IrregularWaveParams,
}


def setup_waves(
    mode: WaveMode | str,
    params: IrregularWaveParams | RegularWaveParams | None = None,
    hydro_data: Sequence[BodyExcitation] | None = None,
    num_bodies: int | None = None,
    verbose: int = 1,
) -> WaveBase:
    """Build and initialize a wave force provider.

    Args:
        mode: Wave condition ('none', 'regular' or 'irregular').
        params: Configuration matching the mode. Not used for 'none'.
        hydro_data: Per-body coefficient data. When given, the provider is
            initialized before being returned.
        num_bodies: Number of bodies for 'none'. Defaults to the number of
            coefficient entries, or 1.
        verbose: Verbosity level (0=silent, 1=normal, 2=detailed).

    Returns:
        The wave force provider.

    Example:
        >>> from hydrowaves import setup_waves, IrregularWaveParams
        >>> params = IrregularWaveParams(
        ...     wave_height=2.0, wave_period=8.0, peak_enhancement_factor=3.3,
        ...     simulation_dt=0.1, simulation_duration=600.0, seed=42,
        ... )
        >>> waves = setup_waves("irregular", params, hydro_data=[body])
        >>> waves.forces_at(10.0)
    """
    try:
        mode = WaveMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown wave mode '{mode}'. Must be one of: {[m.value for m in WaveMode]}"
        ) from None

    expected = PARAM_CLASSES[mode]
    if expected is not None and params is not None and not isinstance(params, expected):
        raise TypeError(
            f"{mode.value} waves need {expected.__name__}, got {type(params).__name__}"
        )

    wave_class = WAVE_CLASSES[mode]
    if mode is WaveMode.NONE:
        if num_bodies is None:
            num_bodies = len(hydro_data) if hydro_data is not None else 1
        provider = wave_class(num_bodies)
    elif mode is WaveMode.IRREGULAR:
        provider = wave_class(params, verbose=verbose)
    else:
        provider = wave_class(params)

    if verbose >= 1:
        print(f"Wave excitation: {provider.name}")
        print(f"  Bodies: {provider.num_bodies}")

    if hydro_data is not None:
        provider.add_hydro_data(hydro_data)

    return provider
