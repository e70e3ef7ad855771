"""Analysis modules.

- filtering: listwise-complete row filters
- correlation: Pearson correlation matrices
- aggregation: group means, counts, radar pivots
- distribution: histograms
"""

from streamstats.analysis.aggregation import (
    GroupAverage,
    GroupCount,
    compute_group_averages,
    compute_group_counts,
    pivot_group_averages,
)
from streamstats.analysis.correlation import (
    CorrelationMatrix,
    PairCorrelation,
    compute_correlation_matrix,
    summarize_correlations,
)
from streamstats.analysis.distribution import (
    HistogramBucket,
    compute_field_histogram,
    compute_histogram,
)
from streamstats.analysis.filtering import filter_complete, filter_positive

__all__ = [
    "filter_complete",
    "filter_positive",
    "compute_correlation_matrix",
    "summarize_correlations",
    "CorrelationMatrix",
    "PairCorrelation",
    "compute_group_averages",
    "compute_group_counts",
    "pivot_group_averages",
    "GroupAverage",
    "GroupCount",
    "compute_field_histogram",
    "compute_histogram",
    "HistogramBucket",
]
