"""Tests for git_provenance.math.statistics module."""

import pytest

from git_provenance.math import Statistics, percentage, round2


class TestMeanAndStdev:
    """Tests for basic statistics."""

    def test_mean_empty(self):
        """Mean of empty list is 0."""
        assert Statistics.mean([]) == 0.0

    def test_mean_known(self):
        assert Statistics.mean([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == 5.0

    def test_pstdev_is_population(self):
        """Population stddev of [2, 4, 4, 4, 5, 5, 7, 9] is exactly 2."""
        assert Statistics.pstdev([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == pytest.approx(2.0)

    def test_pstdev_single_value(self):
        assert Statistics.pstdev([42.0]) == 0.0


class TestOutlierMask:
    """Tests for the mean + k*stddev OR absolute rule."""

    def test_empty(self):
        assert Statistics.outlier_mask([], k=2.0, absolute=500) == []

    def test_statistical_outlier(self):
        values = [10.0] * 9 + [100.0]
        mask = Statistics.outlier_mask(values, k=2.0, absolute=500)
        assert mask == [False] * 9 + [True]

    def test_absolute_threshold_alone(self):
        """Uniformly huge values are flagged by the absolute ceiling."""
        assert Statistics.outlier_mask([600.0, 600.0], k=2.0, absolute=500) == [True, True]

    def test_equal_to_threshold_not_flagged(self):
        assert Statistics.outlier_mask([500.0], k=2.0, absolute=500) == [False]

    def test_cutoff_is_mean_plus_k_stdev(self):
        values = [1.0, 2.0, 3.0, 4.0, 30.0]
        cutoff = Statistics.mean(values) + 1.5 * Statistics.pstdev(values)
        expected = [v > cutoff for v in values]
        assert Statistics.outlier_mask(values, k=1.5, absolute=10_000) == expected


class TestPercentage:
    def test_zero_whole(self):
        assert percentage(3, 0) == 0.0

    def test_rounding(self):
        assert percentage(2, 3) == 66.67

    def test_half_rounds_up(self):
        """1 of 800 is 0.125%, which rounds to 0.13."""
        assert percentage(1, 800) == 0.13

    def test_bounded(self):
        assert percentage(0, 5) == 0.0
        assert percentage(5, 5) == 100.0


class TestRound2:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.125, 0.13), (0.375, 0.38), (2.675, 2.68), (1.005, 1.01), (39.0, 39.0), (0.124, 0.12)],
    )
    def test_half_up(self, value, expected):
        assert round2(value) == expected
