"""Unit tests for the symbolization strategies."""
import numpy as np
import pytest

from classa.core.symbolize import (
    UNASSIGNED,
    Symbolization,
    bin_uniform,
    symbolize,
)
from classa.exceptions import InsufficientLength, InvalidParameter


@pytest.fixture
def angles():
    """Angles (degrees) spread over the full circle."""
    return np.random.default_rng(11).uniform(0.0, 360.0, 400)


class TestBinUniform:
    """Test equal-width histogram binning."""

    def test_half_open_bins(self):
        labels = bin_uniform(np.array([0.0, 0.25, 0.5, 0.75, 1.0]), 0.0, 1.0, 4)
        np.testing.assert_array_equal(labels, [1, 2, 3, 4, 4])

    def test_last_bin_closed(self):
        labels = bin_uniform(np.array([1.0]), 0.0, 1.0, 3)
        assert labels[0] == 3

    def test_out_of_range_unassigned(self):
        labels = bin_uniform(np.array([-0.1, 1.1, np.nan]), 0.0, 1.0, 2)
        np.testing.assert_array_equal(labels, [UNASSIGNED] * 3)

    def test_degenerate_range(self):
        labels = bin_uniform(np.full(5, 0.3), 0.3, 0.3, 4)
        np.testing.assert_array_equal(labels, [4] * 5)


class TestStrategies:
    """Test the six strategies."""

    def test_equal(self):
        theta = np.array([1.0, 89.0, 91.0, 179.0, 181.0, 269.0, 271.0, 359.0])
        labels = symbolize(theta, k=4, strategy="equal")
        np.testing.assert_array_equal(labels, [1, 1, 2, 2, 3, 3, 4, 4])

    def test_kmeans_orders_clusters(self):
        theta = np.array([10, 11, 12, 100, 101, 102, 200, 201, 202, 300, 301, 302], dtype=float)
        labels = symbolize(theta, k=4, strategy="kmeans")
        np.testing.assert_array_equal(labels, [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4])

    def test_kmeans_deterministic(self, angles):
        a = symbolize(angles, k=5, strategy="kmeans", seed=1)
        b = symbolize(angles, k=5, strategy="kmeans", seed=1)
        np.testing.assert_array_equal(a, b)

    def test_kmeans_too_few_samples(self):
        with pytest.raises(InsufficientLength):
            symbolize(np.array([10.0, 20.0, 30.0]), k=4, strategy="kmeans")

    def test_ncdf(self):
        labels = symbolize(np.array([90.0, 180.0, 270.0]), k=3, strategy="ncdf")
        np.testing.assert_array_equal(labels, [1, 2, 3])

    def test_ncdf_constant_input(self):
        labels = symbolize(np.full(20, 45.0), k=4, strategy="ncdf")
        assert len(np.unique(labels)) == 1
        assert labels[0] != UNASSIGNED

    def test_sigmoid_decreasing(self, angles):
        order = np.argsort(angles)
        labels = symbolize(angles, k=6, strategy="sigmoid")
        assert np.all(labels >= 1)
        assert np.all(np.diff(labels[order]) <= 0)

    def test_gaussian_spans_all_bins(self, angles):
        labels = symbolize(angles, k=4, strategy="gaussian")
        assert labels.min() == 1
        assert labels.max() == 4

    def test_arctanh_positive_half(self, angles):
        labels = symbolize(angles, k=4, strategy="arctanh")
        assert set(np.unique(labels)) <= {3, 4}
        assert labels.max() == 4

    def test_arctanh_zero_angle(self):
        theta = np.array([0.0, 45.0, 90.0, 180.0, 270.0])
        labels = symbolize(theta, k=4, strategy="arctanh")
        assert np.all(labels != UNASSIGNED)

    @pytest.mark.parametrize("strategy", [s.value for s in Symbolization])
    def test_labels_in_range(self, angles, strategy):
        labels = symbolize(angles, k=5, strategy=strategy)
        assert labels.shape == angles.shape
        assert np.all((labels >= 0) & (labels <= 5))
        assert np.count_nonzero(labels) > 0


class TestStrategyNames:
    """Test strategy name resolution and parameter checks."""

    @pytest.mark.parametrize("name,expected", [
        ("equal", Symbolization.EQUAL),
        ("EQUAL", Symbolization.EQUAL),
        (" Sigmoid ", Symbolization.SIGMOID),
        ("ClusterBased", Symbolization.KMEANS),
        ("NormalCDF", Symbolization.NCDF),
        (Symbolization.ARCTANH, Symbolization.ARCTANH),
    ])
    def test_from_name(self, name, expected):
        assert Symbolization.from_name(name) is expected

    @pytest.mark.parametrize("name", ["uniform", "", 3, None])
    def test_unknown(self, name):
        with pytest.raises(InvalidParameter):
            Symbolization.from_name(name)

    @pytest.mark.parametrize("k", [1, 0, 2.5, True, "4"])
    def test_invalid_k(self, angles, k):
        with pytest.raises(InvalidParameter):
            symbolize(angles, k=k)
