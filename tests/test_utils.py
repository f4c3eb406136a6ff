"""Tests for utility functions."""

import numpy as np
import pytest

from hydrowaves.utils import (
    frequency_to_angular,
    irf_width,
    lower_index,
    normalize_axis,
    wavenumber,
)


class TestWavenumber:
    """Tests for wavenumber calculation."""

    def test_deep_water_limit(self):
        """In deep water, k ~ sigma^2 / g."""
        sigma = np.array([1.0, 2.0, 3.0])
        depth = 1000.0

        k = wavenumber(sigma, depth)

        k_deep = sigma**2 / 9.81
        np.testing.assert_allclose(k, k_deep, rtol=0.01)

    def test_shallow_water_limit(self):
        """In shallow water, k ~ sigma / sqrt(g*d)."""
        sigma = np.array([0.1, 0.2])
        depth = 1.0

        k = wavenumber(sigma, depth)

        k_shallow = sigma / np.sqrt(9.81 * depth)
        np.testing.assert_allclose(k, k_shallow, rtol=0.1)

    def test_dispersion_relation(self):
        """Verify wavenumber satisfies dispersion relation."""
        sigma = np.array([0.5, 1.0, 1.5, 2.0])
        depth = 10.0

        k = wavenumber(sigma, depth)

        lhs = sigma**2
        rhs = 9.81 * k * np.tanh(k * depth)
        np.testing.assert_allclose(lhs, rhs, rtol=1e-6)

    def test_scalar_input(self):
        """Test with scalar input."""
        k = wavenumber(1.0, 10.0)

        assert isinstance(k, np.ndarray)
        assert k.shape == (1,)


class TestFrequencyConversion:
    """Tests for frequency/angular frequency conversion."""

    def test_frequency_to_angular(self):
        """Test Hz to rad/s conversion."""
        freq = np.array([1.0, 2.0, 0.5])
        np.testing.assert_allclose(frequency_to_angular(freq), 2 * np.pi * freq)


class TestIrfWidth:
    """Tests for trapezoidal IRF widths."""

    def test_uniform_axis(self):
        """Interior samples get a full step, end samples half a step."""
        width = irf_width(np.array([0.0, 1.0, 2.0, 3.0]))
        np.testing.assert_allclose(width, [0.5, 1.0, 1.0, 0.5])

    def test_non_uniform_axis(self):
        """Each width is the half-sum of the adjacent steps."""
        width = irf_width(np.array([0.0, 0.1, 0.5, 2.0]))
        np.testing.assert_allclose(width, [0.05, 0.25, 0.95, 0.75])

    def test_single_sample(self):
        """A single sample has zero width."""
        width = irf_width(np.array([1.5]))
        np.testing.assert_array_equal(width, [0.0])

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_sum_equals_span(self, seed):
        """Widths sum to the length of the time axis."""
        rng = np.random.default_rng(seed)
        time = np.sort(rng.uniform(-3.0, 7.0, 57))

        width = irf_width(time)

        assert len(width) == len(time)
        assert np.all(width >= 0)
        np.testing.assert_allclose(np.sum(width), time[-1] - time[0], rtol=1e-12)


class TestLowerIndex:
    """Tests for bracket search on a sorted axis."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0), (0.5, 0), (1.0, 1), (1.5, 1), (2.999, 2)],
    )
    def test_inside(self, value, expected):
        """Index i satisfies axis[i] <= value < axis[i + 1]."""
        axis = np.array([0.0, 1.0, 2.0, 3.0])
        assert lower_index(value, axis) == expected

    @pytest.mark.parametrize("value, expected", [(-1.0, 0), (3.0, 2), (10.0, 2)])
    def test_clamped(self, value, expected):
        """Values at or beyond the ends map to the end brackets."""
        axis = np.array([0.0, 1.0, 2.0, 3.0])
        assert lower_index(value, axis) == expected


class TestNormalizeAxis:
    """Tests for [0, 1] axis normalization."""

    def test_linear_rescale(self):
        """Endpoints map to 0 and 1, interior points linearly."""
        np.testing.assert_allclose(normalize_axis(np.array([2.0, 3.0, 6.0])), [0.0, 0.25, 1.0])

    def test_zero_span(self):
        """An axis without extent cannot be normalized."""
        with pytest.raises(ValueError):
            normalize_axis(np.array([1.0, 1.0]))
