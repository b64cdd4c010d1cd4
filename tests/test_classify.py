"""
Tests for the ClassA entropy pipeline.

Covers the classify() entry point, the ClassAEntropy estimator, the pinned
sawtooth regression fixture and the invariants of the output.
"""

import numpy as np
import pytest

from classa import (
    ClassAConfig,
    ClassAEntropy,
    ClassAResult,
    ClassAStats,
    InsufficientLength,
    InvalidParameter,
    classify,
)
from classa.core.symbolize import Symbolization

ATAN2_DEG = float(np.degrees(np.arctan(2.0)))


class TestSawtoothRegression:
    """Pinned values for the period-4 sawtooth [1,2,3,2,1,...]."""

    def test_angles(self, sawtooth):
        result = classify(sawtooth, scale=1, phase=1, k=4, symbolization="equal", normalize=True)
        a = ATAN2_DEG
        expected = [a, a + 270, a + 180, a + 90, a, a + 270, a + 180, a + 90, a]
        np.testing.assert_allclose(result.angles, expected, rtol=1e-12)

    def test_stats(self, sawtooth):
        stats, _, _, _ = classify(sawtooth, scale=1, phase=1, k=4, symbolization="equal")
        assert stats.ras == pytest.approx(183.43494882292202, rel=1e-12)
        assert stats.ras == pytest.approx(ATAN2_DEG + 120.0, rel=1e-12)
        assert stats.p1 == pytest.approx(3 / 9)
        assert stats.p24 == pytest.approx(4 / 9)
        assert stats.p3 == pytest.approx(2 / 9)

    def test_entropy(self, sawtooth):
        _, entropy, probabilities, _ = classify(sawtooth, k=4, symbolization="equal", normalize=True)
        expected = (np.log(3) / 3 + 2 / 3 * np.log(4.5)) / np.log(4)
        assert entropy == pytest.approx(expected, rel=1e-12)
        assert entropy == pytest.approx(0.98746875, rel=1e-6)
        np.testing.assert_allclose(probabilities, [3 / 9, 2 / 9, 2 / 9, 2 / 9])

    def test_raw_entropy(self, sawtooth):
        _, entropy, _, _ = classify(sawtooth, normalize=False)
        assert entropy == pytest.approx(np.log(3) / 3 + 2 / 3 * np.log(4.5), rel=1e-12)


class TestClassifyOutput:
    """Test the shape and invariants of classify()."""

    def test_result_type(self, rr_intervals):
        result = classify(rr_intervals)
        assert isinstance(result, ClassAResult)
        assert isinstance(result.stats, ClassAStats)
        assert len(result.angles) == len(rr_intervals) - 3

    @pytest.mark.parametrize("strategy", [s.value for s in Symbolization])
    @pytest.mark.parametrize("phase", [1, 2, 3])
    def test_invariants(self, sample_time_series, strategy, phase):
        stats, entropy, probabilities, angles = classify(
            sample_time_series, k=5, phase=phase, symbolization=strategy
        )
        assert stats.p1 + stats.p24 + stats.p3 == pytest.approx(1.0, abs=1e-12)
        assert 0.0 <= stats.ras < 360.0
        assert 0.0 <= entropy <= 1.0 + 1e-12
        assert probabilities.sum() == pytest.approx(1.0)
        assert np.all(probabilities > 0)
        assert np.all((angles >= 0.0) & (angles < 360.0))

    def test_angle_unit_round_trip(self, rr_intervals):
        deg = classify(rr_intervals, angle_unit="deg")
        rad = classify(rr_intervals, angle_unit="rad")
        np.testing.assert_allclose(np.array(rad.stats), np.array(deg.stats) * np.pi / 180.0)
        assert rad.entropy == pytest.approx(deg.entropy)
        np.testing.assert_array_equal(rad.angles, deg.angles)

    def test_takens_reproduces_poincare_map(self, rr_intervals):
        est = ClassAEntropy(scale=1, phase=3).fit(rr_intervals)
        np.testing.assert_array_equal(est.yn_, rr_intervals[:-1])
        np.testing.assert_array_equal(est.xn_, rr_intervals[1:])
        expected = np.degrees(np.arctan(rr_intervals[:-1] / rr_intervals[1:]))
        np.testing.assert_allclose(est.angles_, expected)

    def test_monotone_runs_second_order_diff(self):
        x = np.array([0, 1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1], dtype=float)
        est = ClassAEntropy(scale=1, phase=2).fit(x)
        same_sign = np.sign(est.xn_) == np.sign(est.yn_)
        assert np.count_nonzero(~same_sign) == 1
        assert est.stats_.p1 == pytest.approx(0.5)
        assert est.stats_.p3 == pytest.approx(0.4)
        assert est.stats_.p24 == pytest.approx(0.1)
        assert est.stats_.ras == pytest.approx(144.0)

    def test_zigzag_second_order_diff(self):
        x = np.tile([0.0, 1.0], 6)
        stats, _, _, _ = classify(x, phase=2)
        assert stats.p24 == pytest.approx(1.0)
        assert stats.p1 == 0.0
        assert stats.p3 == 0.0

    def test_scale_coarse_grains(self, rr_intervals):
        est = ClassAEntropy(scale=4, phase=2).fit(rr_intervals)
        assert len(est.coarse_) == len(rr_intervals) // 4
        assert len(est.angles_) == len(rr_intervals) // 4 - 2

    def test_log_base(self, rr_intervals):
        nats = classify(rr_intervals, normalize=False).entropy
        bits = classify(rr_intervals, normalize=False, log_base=2).entropy
        assert bits == pytest.approx(nats / np.log(2))

    def test_input_not_mutated(self, rr_intervals):
        x = rr_intervals.copy()
        classify(x, scale=3)
        np.testing.assert_array_equal(x, rr_intervals)

    def test_accepts_lists(self, sawtooth):
        a = classify(list(sawtooth))
        b = classify(sawtooth)
        assert a.stats == b.stats

    def test_config_object(self, rr_intervals):
        cfg = ClassAConfig(k=6, symbolization="ncdf")
        a = classify(rr_intervals, cfg)
        b = classify(rr_intervals, k=6, symbolization="NCDF")
        assert a.entropy == pytest.approx(b.entropy)

    def test_config_with_override(self, rr_intervals):
        cfg = ClassAConfig(k=6)
        est = ClassAEntropy(cfg, k=3)
        assert est.config.k == 3
        assert cfg.k == 6

    def test_constant_signal(self):
        with pytest.warns(UserWarning, match="Constant series"):
            stats, entropy, probabilities, angles = classify(np.full(20, 1.0))
        np.testing.assert_array_equal(angles, 0.0)
        assert stats.p1 == 1.0
        assert entropy == 0.0
        np.testing.assert_array_equal(probabilities, [1.0])


class TestClassifyErrors:
    """Pre-condition failures and insufficient data."""

    def test_k_one(self, rr_intervals):
        with pytest.raises(InvalidParameter):
            classify(rr_intervals, k=1)

    def test_scale_zero(self, rr_intervals):
        with pytest.raises(InvalidParameter):
            classify(rr_intervals, scale=0)

    def test_short_signal(self):
        with pytest.raises(InvalidParameter, match="more than 10"):
            classify(np.arange(8.0))

    def test_length_ten_rejected(self):
        with pytest.raises(InvalidParameter):
            classify(np.arange(10.0))

    @pytest.mark.parametrize("signal", [
        ["a"] * 20,
        np.ones((4, 5)),
        np.r_[np.ones(15), np.nan],
        np.r_[np.ones(15), np.inf],
        np.ones(20, dtype=bool),
    ])
    def test_invalid_signal(self, signal):
        with pytest.raises(InvalidParameter):
            classify(signal)

    @pytest.mark.parametrize("options", [
        {"phase": 0},
        {"symbolization": "fuzzy"},
        {"log_base": -1.0},
        {"angle_unit": "turns"},
        {"normalize": "true"},
        {"plot": 0},
        {"bins": 4},
    ])
    def test_invalid_options(self, rr_intervals, options):
        with pytest.raises(InvalidParameter):
            classify(rr_intervals, **options)

    def test_options_checked_before_signal(self):
        with pytest.raises(InvalidParameter, match="k must be"):
            classify(np.arange(5.0), k=1)

    def test_insufficient_length_after_coarse_graining(self):
        x = np.arange(12.0)
        with pytest.raises(InsufficientLength):
            classify(x, scale=4, phase=1)

    def test_scale_larger_than_signal(self):
        with pytest.raises(InsufficientLength):
            classify(np.arange(12.0), scale=13, phase=3)

    def test_kmeans_too_few_points(self):
        with pytest.raises(InsufficientLength):
            classify(np.arange(12.0), scale=3, phase=3, k=4, symbolization="kmeans")


class TestEstimator:

    def test_result_before_fit(self):
        with pytest.raises(ValueError, match="fit"):
            ClassAEntropy().result_

    def test_fit_transform(self, rr_intervals):
        result = ClassAEntropy(k=6).fit_transform(rr_intervals)
        assert isinstance(result, ClassAResult)

    def test_symbols_exposed(self, rr_intervals):
        est = ClassAEntropy(k=6, symbolization="gaussian").fit(rr_intervals)
        assert est.symbols_.shape == est.angles_.shape
        assert est.symbols_.max() <= 6
