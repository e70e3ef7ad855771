"""Correlation matrix over row datasets.

Bridges row records to the pure numpy algorithms: validates the feature
set, extracts a listwise-complete value array and labels the result.

Rows are expected to be pre-filtered with filter_complete(); the engine
rejects rows with missing or non-numeric feature values instead of
silently dropping them.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from streamstats.analysis.correlation.algorithms import (
    classify_strength,
    correlation_matrix,
    pearson_p_value,
)
from streamstats.analysis.correlation.models import CorrelationMatrix, PairCorrelation
from streamstats.core.config import get_settings
from streamstats.core.logging import get_logger
from streamstats.core.models.base import (
    CorrelationMethod,
    Dataset,
    InvalidArgumentError,
    Row,
    require_features,
    require_known_fields,
)
from streamstats.sources.rows import read_field

logger = get_logger(__name__)


def _resolve_method(method: CorrelationMethod | str | None) -> CorrelationMethod:
    if method is None:
        method = get_settings().correlation_method
    try:
        return CorrelationMethod(method)
    except ValueError as e:
        valid = [m.value for m in CorrelationMethod]
        raise InvalidArgumentError(
            f"Unknown correlation method {method!r} (expected one of {valid})"
        ) from e


def _feature_array(rows: Sequence[Row], features: Sequence[str]) -> np.ndarray:
    """Build an (n_rows, n_features) float array, rejecting non-numeric values."""
    data = np.empty((len(rows), len(features)), dtype=np.float64)
    for row_idx, row in enumerate(rows):
        for col_idx, name in enumerate(features):
            value = read_field(row, name)
            if not value.is_number:
                raise InvalidArgumentError(
                    f"Row {row_idx} has {value.kind.value} value for feature {name!r}; "
                    "filter rows with filter_complete() before computing correlations"
                )
            data[row_idx, col_idx] = value.number
    return data


def compute_correlation_matrix(
    dataset: Dataset,
    features: Sequence[str],
    method: CorrelationMethod | str | None = None,
) -> CorrelationMatrix:
    """Compute the Pearson correlation matrix of a feature set.

    Args:
        dataset: Rows, each holding a finite number for every feature
        features: Ordered feature names; defines matrix row/column order
        method: Formula variant (None = Settings.correlation_method)

    Returns:
        CorrelationMatrix with 1.0 on the diagonal. Pairs involving a
        constant feature, and every pair of an empty or single-row dataset,
        are 0.0.

    Raises:
        InvalidArgumentError: If the feature set is empty, a feature is in no
            row, a feature value is missing or non-numeric, or the method is unknown
    """
    names = require_features(features)
    resolved = _resolve_method(method)
    rows = tuple(dataset)
    require_known_fields(rows, names, "feature")

    data = _feature_array(rows, names)
    matrix = correlation_matrix(data, resolved)

    logger.debug(
        "correlation_matrix_computed",
        features=len(names),
        rows=len(rows),
        method=resolved.value,
    )
    return CorrelationMatrix(
        features=names,
        values=matrix.tolist(),
        sample_size=len(rows),
        method=resolved,
    )


def summarize_correlations(
    matrix: CorrelationMatrix,
    min_abs: float = 0.0,
    significance_level: float | None = None,
) -> list[PairCorrelation]:
    """List off-diagonal pairs with strength band and significance.

    Args:
        matrix: Result of compute_correlation_matrix()
        min_abs: Drop pairs with |r| below this value
        significance_level: p-value threshold (None = Settings.significance_level)

    Returns:
        One entry per unordered pair (i < j), strongest |r| first
    """
    if significance_level is None:
        significance_level = get_settings().significance_level

    pairs = []
    for i in range(matrix.size):
        for j in range(i + 1, matrix.size):
            r = matrix.values[i][j]
            if abs(r) < min_abs:
                continue
            p_value = pearson_p_value(r, matrix.sample_size)
            pairs.append(
                PairCorrelation(
                    feature1=matrix.features[i],
                    feature2=matrix.features[j],
                    r=r,
                    strength=classify_strength(r),
                    p_value=p_value,
                    is_significant=p_value is not None and p_value < significance_level,
                    sample_size=matrix.sample_size,
                )
            )

    pairs.sort(key=lambda p: abs(p.r), reverse=True)
    return pairs
