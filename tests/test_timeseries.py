"""Tests for excitation force time series."""

import numpy as np
import pytest

from hydrowaves import (
    BodyExcitation,
    IrregularWaveParams,
    NoWave,
    RegularWaveParams,
    excitation_forces,
    setup_waves,
    simulation_times,
)
from hydrowaves.types import DOF_NAMES


def regular_body():
    """Body with unit magnitude and zero phase at every frequency."""
    freq_list = np.arange(1, 11) * 0.1
    return BodyExcitation(
        irf_values=np.zeros((6, 2)),
        irf_time=np.array([0.0, 1.0]),
        freq_list=freq_list,
        excitation_mag=np.ones((6, 1, 10)),
        excitation_phase=np.zeros((6, 1, 10)),
    )


def causal_body():
    """Body with a decaying causal IRF on [0, 3]."""
    irf_time = np.linspace(0.0, 3.0, 31)
    return BodyExcitation(
        irf_values=np.tile(np.exp(-irf_time), (6, 1)),
        irf_time=irf_time,
    )


class TestSimulationTimes:
    """Tests for simulation time vectors."""

    def test_inclusive_end(self):
        """Times run from 0 to the duration inclusive."""
        times = simulation_times(10.0, 0.1)

        assert len(times) == 101
        assert times[0] == 0.0
        assert times[-1] == 10.0

    def test_rejects_non_positive_step(self):
        """The step must be positive."""
        with pytest.raises(ValueError):
            simulation_times(10.0, 0.0)


class TestExcitationForces:
    """Tests for labelled force time series."""

    def test_still_water(self):
        """Still water gives zero forces on a labelled grid."""
        times = simulation_times(5.0, 0.5)

        ds = excitation_forces(NoWave(num_bodies=2), times)

        assert ds["force"].dims == ("time", "body", "dof")
        assert ds["force"].shape == (11, 2, 6)
        assert list(ds["dof"].values) == DOF_NAMES
        assert ds.attrs["wave_mode"] == "none"
        assert "eta" not in ds
        np.testing.assert_array_equal(ds["force"].values, 0.0)

    def test_regular_wave(self):
        """Regular wave series follow A * cos(omega * t)."""
        params = RegularWaveParams(amplitude=2.0, omega=0.5)
        waves = setup_waves("regular", params, hydro_data=[regular_body()], verbose=0)
        times = simulation_times(20.0, 0.25)

        ds = excitation_forces(waves, times)

        expected = 2.0 * np.cos(0.5 * times)
        np.testing.assert_allclose(ds["force"].sel(dof="heave", body=0).values, expected)
        assert ds.attrs["wave_mode"] == "regular"

    def test_irregular_includes_elevation(self):
        """Irregular series carry the elevation at each time."""
        params = IrregularWaveParams(
            wave_height=1.0,
            wave_period=6.0,
            seed=3,
            simulation_dt=0.1,
            simulation_duration=10.0,
        )
        waves = setup_waves("irregular", params, hydro_data=[causal_body()], verbose=0)
        times = simulation_times(10.0, 0.1)

        ds = excitation_forces(waves, times)

        surface = waves.surface
        np.testing.assert_allclose(ds["eta"].values, np.interp(times, surface.time, surface.eta))
        np.testing.assert_allclose(ds["force"].values[37, 0], waves.forces_at(times[37])[0])
        assert ds["eta"].attrs["units"] == "m"

    def test_verbose(self, capsys):
        """Evaluation is announced at normal verbosity."""
        excitation_forces(NoWave(), simulation_times(1.0, 0.5), verbose=1)

        assert "Evaluating NoWave excitation at 3 times" in capsys.readouterr().out
