"""Pure numeric correlation algorithms.

Computes Pearson correlations on numpy arrays.
No row records, no logging - just math.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from streamstats.core.models.base import CorrelationMethod, CorrelationStrength


def _is_constant(values: np.ndarray) -> bool:
    return values.size == 0 or bool(values.min() == values.max())


def _finish(numerator: float, variance_product: float) -> float:
    """Turn numerator and variance product into a coefficient.

    A non-positive variance product (sums cancelled to rounding noise) is
    treated as zero variance: the coefficient is 0.0.
    """
    if not variance_product > 0.0:
        return 0.0
    denominator = math.sqrt(variance_product)
    if denominator == 0.0:
        return 0.0
    r = numerator / denominator
    return max(-1.0, min(1.0, r))


def pearson_single_pass(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson r from raw sums collected in a single pass.

    numerator   = n*sum(xy) - sum(x)*sum(y)
    denominator = sqrt((n*sum(x^2) - sum(x)^2) * (n*sum(y^2) - sum(y)^2))

    A constant column gives exactly 0.0 without evaluating the sums.
    """
    if _is_constant(x) or _is_constant(y):
        return 0.0
    n = float(len(x))
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))
    sum_y2 = float(np.dot(y, y))

    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    return _finish(numerator, variance_product)


def pearson_two_pass(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson r from mean-centered values.

    Stable for large magnitudes (e.g. raw stream counts in the billions)
    where the single-pass sums lose precision.
    """
    if _is_constant(x) or _is_constant(y):
        return 0.0
    dx = x - np.mean(x)
    dy = y - np.mean(y)
    numerator = float(np.dot(dx, dy))
    variance_product = float(np.dot(dx, dx)) * float(np.dot(dy, dy))
    return _finish(numerator, variance_product)


_PEARSON = {
    CorrelationMethod.SINGLE_PASS: pearson_single_pass,
    CorrelationMethod.TWO_PASS: pearson_two_pass,
}


def correlation_matrix(
    data: np.ndarray,
    method: CorrelationMethod = CorrelationMethod.SINGLE_PASS,
) -> np.ndarray:
    """Compute the Pearson correlation matrix of the columns of ``data``.

    Args:
        data: 2D array where each column is a variable (rows are observations)
        method: Pearson formula variant

    Returns:
        k x k array with 1.0 on the diagonal; each unordered pair is
        computed once and written to both cells
    """
    pearson = _PEARSON[CorrelationMethod(method)]
    n_cols = data.shape[1]
    matrix = np.zeros((n_cols, n_cols), dtype=np.float64)

    for i in range(n_cols):
        matrix[i, i] = 1.0
        for j in range(i + 1, n_cols):
            r = pearson(data[:, i], data[:, j])
            matrix[i, j] = r
            matrix[j, i] = r

    return matrix


def pearson_p_value(r: float, n: int) -> float | None:
    """Two-sided p-value for a Pearson r over n observations.

    Uses the t-distribution with n - 2 degrees of freedom. Returns None when
    n < 3 (no degrees of freedom left).
    """
    if n < 3:
        return None
    if abs(r) >= 1.0:
        return 0.0
    dof = n - 2
    t = r * math.sqrt(dof / (1.0 - r * r))
    return float(2.0 * stats.t.sf(abs(t), dof))


def classify_strength(r: float) -> CorrelationStrength:
    """Classify a coefficient into heatmap bands."""
    if r >= 0.7:
        return CorrelationStrength.STRONG_POSITIVE
    elif r >= 0.3:
        return CorrelationStrength.MODERATE_POSITIVE
    elif r >= -0.3:
        return CorrelationStrength.WEAK
    elif r >= -0.7:
        return CorrelationStrength.MODERATE_NEGATIVE
    return CorrelationStrength.STRONG_NEGATIVE
