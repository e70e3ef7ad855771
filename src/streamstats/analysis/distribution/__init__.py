"""Distribution module: equal-width histograms of numeric fields."""

from streamstats.analysis.distribution.histogram import compute_field_histogram, compute_histogram
from streamstats.analysis.distribution.models import HistogramBucket

__all__ = [
    "compute_field_histogram",
    "compute_histogram",
    "HistogramBucket",
]
