"""streamstats - tabular statistics for music-streaming datasets.

Filters rows to listwise-complete subsets, computes Pearson correlation
matrices across audio features, and aggregates features per group.

Example:
    from streamstats import compute_correlation_matrix, filter_complete, load_dataset

    rows = load_dataset("data/tracks_sample.json")
    features = ["danceability", "energy", "valence", "tempo"]
    matrix = compute_correlation_matrix(filter_complete(rows, features), features)
    matrix.get("energy", "valence")
"""

__version__ = "0.1.0"

from streamstats.analysis import (
    CorrelationMatrix,
    GroupAverage,
    compute_correlation_matrix,
    compute_group_averages,
    filter_complete,
)
from streamstats.core.models.base import InvalidArgumentError, Result
from streamstats.sources import load_dataset

__all__ = [
    "CorrelationMatrix",
    "GroupAverage",
    "InvalidArgumentError",
    "Result",
    "compute_correlation_matrix",
    "compute_group_averages",
    "filter_complete",
    "load_dataset",
    "__version__",
]
