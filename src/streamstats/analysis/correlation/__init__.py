"""Correlation analysis module.

Pearson correlation matrices across the numeric features of a dataset,
plus pair summaries with heatmap strength bands and significance.
"""

# Algorithms (pure computation)
from streamstats.analysis.correlation.algorithms import (
    classify_strength,
    correlation_matrix,
    pearson_p_value,
    pearson_single_pass,
    pearson_two_pass,
)
from streamstats.analysis.correlation.matrix import (
    compute_correlation_matrix,
    summarize_correlations,
)

# Pydantic Models
from streamstats.analysis.correlation.models import CorrelationMatrix, PairCorrelation

__all__ = [
    # Main entry points
    "compute_correlation_matrix",
    "summarize_correlations",
    # Algorithms (pure computation)
    "classify_strength",
    "correlation_matrix",
    "pearson_p_value",
    "pearson_single_pass",
    "pearson_two_pass",
    # Pydantic Models
    "CorrelationMatrix",
    "PairCorrelation",
]
