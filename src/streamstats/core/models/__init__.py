"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- analysis/correlation/models.py  → Correlation matrix and pair summaries
- analysis/aggregation/models.py  → Group averages and counts
- analysis/distribution/models.py → Histogram buckets
- sources/catalog.py              → Dataset catalog entries
"""

from streamstats.core.models.base import (
    CorrelationMethod,
    CorrelationStrength,
    Dataset,
    GroupKey,
    InvalidArgumentError,
    Result,
    Row,
    ValueKind,
    require_features,
    require_known_fields,
)

__all__ = [
    "CorrelationMethod",
    "CorrelationStrength",
    "Dataset",
    "GroupKey",
    "InvalidArgumentError",
    "Result",
    "Row",
    "ValueKind",
    "require_features",
    "require_known_fields",
]
