"""Tests for free surface elevation synthesis."""

import numpy as np
import pandas as pd
import pytest

from hydrowaves import Spectrum, SurfaceElevation, WaveConfigurationError
from hydrowaves.spectrum import make_spectrum
from hydrowaves.surface import (
    apply_ramp,
    free_surface_elevation,
    free_surface_points,
    free_surface_triangles,
    random_phases,
    surface_time_axis,
    synthesize_surface,
)


@pytest.fixture
def spectrum():
    """Default-grid JONSWAP spectrum."""
    return make_spectrum(hs=2.0, tp=8.0, gamma=3.3)


class TestSurfaceTimeAxis:
    """Tests for the padded elevation time axis."""

    def test_padding_causal_irf(self):
        """IRF on [0, 2] pads 2 s before 0 and 2 s after the duration."""
        time = surface_time_axis(0.0, 2.0, duration=100.0, dt=0.1)

        assert len(time) == 100 / 0.1 + 1 + 2 * 2.0 / 0.1
        assert time[0] == pytest.approx(-2.0)
        assert time[-1] == pytest.approx(102.0)
        np.testing.assert_allclose(np.diff(time), 0.1)

    def test_padding_non_causal_irf(self):
        """A negative IRF start widens the record to twice the IRF span."""
        time = surface_time_axis(-1.0, 2.0, duration=10.0, dt=0.5)

        assert time[0] == pytest.approx(-2.0)
        assert time[-1] == pytest.approx(14.0)
        assert len(time) == 10.0 / 0.5 + 1 + 2 * 3.0 / 0.5

    def test_contains_convolution_range(self):
        """The record covers every read of a convolution in [0, duration]."""
        t_irf_min, t_irf_max = -2.0, 3.0
        time = surface_time_axis(t_irf_min, t_irf_max, duration=100.0, dt=0.1)

        assert time[0] <= 0.0 - t_irf_max
        assert time[-1] >= 100.0 - t_irf_min

    def test_rejects_non_positive_step(self):
        """The time step must be positive."""
        with pytest.raises(WaveConfigurationError):
            surface_time_axis(0.0, 1.0, duration=10.0, dt=0.0)


class TestFreeSurfaceElevation:
    """Tests for random-phase superposition."""

    def test_same_seed_identical(self, spectrum):
        """Identical inputs and seed give bit-identical series."""
        time = np.arange(0.0, 50.0, 0.1)

        eta1 = free_surface_elevation(spectrum, time, seed=42)
        eta2 = free_surface_elevation(spectrum, time, seed=42)

        np.testing.assert_array_equal(eta1, eta2)

    def test_different_seed_differs(self, spectrum):
        """Different seeds give different series."""
        time = np.arange(0.0, 50.0, 0.1)

        eta1 = free_surface_elevation(spectrum, time, seed=42)
        eta2 = free_surface_elevation(spectrum, time, seed=43)

        assert not np.allclose(eta1, eta2)

    def test_single_component(self):
        """One non-zero bin gives a cosine of amplitude sqrt(2 * S * df)."""
        spectrum = Spectrum(freqs=np.array([0.1, 0.2]), S=np.array([0.5, 0.0]))
        time = np.linspace(0.0, 20.0, 201)

        eta = free_surface_elevation(spectrum, time, seed=7)

        phase = random_phases(2, seed=7)[0]
        expected = np.sqrt(2.0 * 0.5 * 0.1) * np.cos(2 * np.pi * 0.1 * time + phase)
        np.testing.assert_allclose(eta, expected, atol=1e-12)

    def test_variance_matches_m0(self, spectrum):
        """Over one full repeat period the elevation variance equals m0."""
        time = np.arange(0.0, 1000.0, 0.25)

        eta = free_surface_elevation(spectrum, time, seed=3)

        np.testing.assert_allclose(np.mean(eta**2), spectrum.m0, rtol=1e-4)

    def test_phases_in_range(self):
        """Phases are drawn from [0, 2*pi)."""
        phases = random_phases(10000, seed=0)

        assert np.all(phases >= 0.0)
        assert np.all(phases < 2 * np.pi)


class TestRamp:
    """Tests for the linear fade-in."""

    def test_ramp_samples(self):
        """The ramp covers ramp_duration / dt + 1 samples."""
        eta = apply_ramp(np.ones(10), ramp_duration=0.4, dt=0.1)
        np.testing.assert_allclose(eta, [0.0, 0.25, 0.5, 0.75, 1.0, 1, 1, 1, 1, 1])

    def test_ramp_longer_than_signal(self):
        """A ramp longer than the signal scales every sample."""
        eta = apply_ramp(np.ones(3), ramp_duration=1.0, dt=0.1)
        np.testing.assert_allclose(eta, [0.0, 0.1, 0.2])

    def test_no_ramp(self):
        """Zero ramp duration leaves the signal untouched."""
        eta = np.array([1.0, -2.0, 3.0])
        np.testing.assert_array_equal(apply_ramp(eta, 0.0, 0.1), eta)

    def test_input_not_modified(self):
        """The input array is not scaled in place."""
        eta = np.ones(5)
        apply_ramp(eta, ramp_duration=0.2, dt=0.1)
        np.testing.assert_array_equal(eta, np.ones(5))


class TestSynthesizeSurface:
    """Tests for elevation record synthesis."""

    def test_record(self, spectrum):
        """Synthesis returns a flagged record on the requested axis."""
        time = surface_time_axis(0.0, 1.0, duration=10.0, dt=0.1)

        surface = synthesize_surface(spectrum, time, seed=1, verbose=0)

        assert isinstance(surface, SurfaceElevation)
        assert surface.synthesized
        np.testing.assert_array_equal(surface.time, time)
        np.testing.assert_array_equal(surface.eta, free_surface_elevation(spectrum, time, 1))

    def test_ramped_record(self, spectrum):
        """With a ramp the first sample is zero and late samples are unscaled."""
        time = surface_time_axis(0.0, 1.0, duration=10.0, dt=0.1)

        surface = synthesize_surface(spectrum, time, seed=1, ramp_duration=2.0, verbose=0)
        raw = free_surface_elevation(spectrum, time, 1)

        assert surface.eta[0] == 0.0
        np.testing.assert_allclose(surface.eta[30:], raw[30:])

    def test_ramp_uses_record_step(self, spectrum):
        """The ramp length is counted in samples of the record's step."""
        time = surface_time_axis(0.0, 1.0, duration=10.0, dt=0.05)

        surface = synthesize_surface(spectrum, time, seed=1, ramp_duration=1.0, verbose=0)
        raw = free_surface_elevation(spectrum, time, 1)

        assert surface.dt == pytest.approx(0.05)
        np.testing.assert_allclose(surface.eta[:21], raw[:21] * np.linspace(0.0, 1.0, 21))
        np.testing.assert_allclose(surface.eta[21:], raw[21:])

    def test_reports_sample_count(self, spectrum, capsys):
        """Progress messages report the time range and the sample count."""
        time = surface_time_axis(0.0, 1.0, duration=10.0, dt=0.1)

        surface = synthesize_surface(spectrum, time, seed=1, verbose=1)

        out = capsys.readouterr().out
        assert surface.n_samples == len(time)
        assert "Precalculating free surface elevation from" in out
        assert f"({len(time)} samples)" in out

    def test_series_roundtrip(self, spectrum):
        """A record survives conversion to and from a pandas Series."""
        time = surface_time_axis(0.0, 1.0, duration=5.0, dt=0.1)
        surface = synthesize_surface(spectrum, time, seed=1, verbose=0)

        series = surface.to_series()
        loaded = SurfaceElevation.from_series(series)

        assert isinstance(series, pd.Series)
        assert not loaded.synthesized
        np.testing.assert_array_equal(loaded.time, surface.time)
        np.testing.assert_array_equal(loaded.eta, surface.eta)

    def test_to_xarray(self, spectrum):
        """Conversion to xarray keeps samples on a time coordinate."""
        time = surface_time_axis(0.0, 1.0, duration=5.0, dt=0.1)
        surface = synthesize_surface(spectrum, time, seed=1, verbose=0)

        ds = surface.to_xarray()

        np.testing.assert_array_equal(ds["time"].values, surface.time)
        np.testing.assert_array_equal(ds["eta"].values, surface.eta)


class TestFreeSurfaceMesh:
    """Tests for free surface mesh geometry."""

    def test_points(self):
        """Each sample gives two points mirrored across y = 0."""
        points = free_surface_points(np.array([0.0, 1.0]), np.array([0.5, -0.5]))

        expected = [
            [0.0, -10.0, 0.5],
            [0.0, 10.0, 0.5],
            [-1.0, -10.0, -0.5],
            [-1.0, 10.0, -0.5],
        ]
        np.testing.assert_allclose(points, expected)

    def test_triangles(self):
        """Consecutive sample pairs are bridged by two triangles."""
        triangles = free_surface_triangles(3)

        np.testing.assert_array_equal(
            triangles,
            [[0, 1, 3], [0, 3, 2], [2, 3, 5], [2, 5, 4]],
        )

    def test_single_sample_has_no_triangles(self):
        """A single sample cannot form a face."""
        assert free_surface_triangles(1).shape == (0, 3)
