"""Aggregation module.

Per-group feature means (genre fingerprints), per-group counts and top-N
rankings (artist dominance), and the radar-chart pivot of group means.
"""

from streamstats.analysis.aggregation.grouping import (
    compute_group_averages,
    compute_group_counts,
    pivot_group_averages,
)
from streamstats.analysis.aggregation.models import GroupAverage, GroupCount

__all__ = [
    "compute_group_averages",
    "compute_group_counts",
    "pivot_group_averages",
    "GroupAverage",
    "GroupCount",
]
