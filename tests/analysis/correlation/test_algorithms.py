"""Tests for pure correlation algorithms."""

import numpy as np
import pytest
from scipy import stats

from streamstats.analysis.correlation.algorithms import (
    classify_strength,
    correlation_matrix,
    pearson_p_value,
    pearson_single_pass,
    pearson_two_pass,
)
from streamstats.core.models.base import CorrelationMethod, CorrelationStrength


class TestPearson:
    """Tests for the two Pearson formulas."""

    @pytest.mark.parametrize("pearson", [pearson_single_pass, pearson_two_pass])
    def test_zero_variance_is_zero(self, pearson):
        x = np.array([1.0, 2.0, 3.0])
        y = np.array([5.0, 5.0, 5.0])

        assert pearson(x, y) == 0.0
        assert pearson(y, x) == 0.0

    @pytest.mark.parametrize("pearson", [pearson_single_pass, pearson_two_pass])
    @pytest.mark.parametrize("constant", [0.1, 0.7, 0.123])
    @pytest.mark.parametrize(
        "other",
        [
            np.array([119.0, 120.5, 121.0, 119.5, 120.0, 120.8, 119.2]),
            np.full(25, 3e9) + np.arange(25, dtype=np.float64),
            np.array([3e9, 3e9 + 1, 3e9 + 2]),
        ],
        ids=["tempo", "streams", "streams_short"],
    )
    def test_inexact_constant_is_zero(self, pearson, constant, other):
        """Constants without an exact float form still give exactly 0.0."""
        x = np.full(len(other), constant)

        assert pearson(x, other) == 0.0
        assert pearson(other, x) == 0.0

    @pytest.mark.parametrize("pearson", [pearson_single_pass, pearson_two_pass])
    def test_empty_arrays(self, pearson):
        assert pearson(np.array([]), np.array([])) == 0.0

    @pytest.mark.parametrize("pearson", [pearson_single_pass, pearson_two_pass])
    def test_matches_scipy(self, pearson):
        rng = np.random.default_rng(7)
        x = rng.normal(size=500)
        y = 0.3 * x + rng.normal(size=500)

        expected = stats.pearsonr(x, y)[0]

        assert pearson(x, y) == pytest.approx(float(expected), abs=1e-9)

    def test_single_pass_never_returns_nan(self):
        """Near-constant large values cancel to rounding noise, not NaN."""
        x = np.full(1000, 1e12) + np.tile([0.0, 1e-4], 500)
        y = np.arange(1000, dtype=np.float64)

        r = pearson_single_pass(x, y)

        assert not np.isnan(r)
        assert -1.0 <= r <= 1.0


class TestCorrelationMatrix:
    """Tests for the column-wise matrix."""

    def test_shape_and_diagonal(self):
        data = np.array([[1.0, 2.0, 0.5], [2.0, 4.1, 0.1], [3.0, 5.9, 0.7], [4.0, 8.2, 0.2]])

        matrix = correlation_matrix(data)

        assert matrix.shape == (3, 3)
        assert np.all(np.diag(matrix) == 1.0)
        assert np.array_equal(matrix, matrix.T)

    def test_accepts_method_strings(self):
        data = np.array([[1.0, 3.0], [2.0, 1.0], [3.0, 2.0]])

        by_enum = correlation_matrix(data, CorrelationMethod.TWO_PASS)
        by_name = correlation_matrix(data, "two_pass")

        assert np.array_equal(by_enum, by_name)

    def test_no_rows(self):
        matrix = correlation_matrix(np.empty((0, 2)))

        assert matrix.tolist() == [[1.0, 0.0], [0.0, 1.0]]


class TestPValue:
    """Tests for pearson_p_value."""

    def test_matches_scipy(self):
        rng = np.random.default_rng(3)
        x = rng.normal(size=40)
        y = 0.2 * x + rng.normal(size=40)
        r, expected_p = stats.pearsonr(x, y)

        assert pearson_p_value(float(r), 40) == pytest.approx(float(expected_p), rel=1e-6)

    def test_too_few_observations(self):
        assert pearson_p_value(0.5, 2) is None

    def test_perfect_correlation(self):
        assert pearson_p_value(1.0, 10) == 0.0
        assert pearson_p_value(-1.0, 10) == 0.0

    def test_zero_correlation(self):
        assert pearson_p_value(0.0, 30) == pytest.approx(1.0)


class TestClassifyStrength:
    """Heatmap bands."""

    @pytest.mark.parametrize(
        ("r", "expected"),
        [
            (1.0, CorrelationStrength.STRONG_POSITIVE),
            (0.7, CorrelationStrength.STRONG_POSITIVE),
            (0.69, CorrelationStrength.MODERATE_POSITIVE),
            (0.3, CorrelationStrength.MODERATE_POSITIVE),
            (0.0, CorrelationStrength.WEAK),
            (-0.3, CorrelationStrength.WEAK),
            (-0.31, CorrelationStrength.MODERATE_NEGATIVE),
            (-0.7, CorrelationStrength.MODERATE_NEGATIVE),
            (-0.71, CorrelationStrength.STRONG_NEGATIVE),
        ],
    )
    def test_bands(self, r, expected):
        assert classify_strength(r) == expected
