"""Pure correlation algorithms.

These functions operate on numpy arrays and return plain floats and arrays.
No row records, no Pydantic models - just math.
"""

from streamstats.analysis.correlation.algorithms.numeric import (
    classify_strength,
    correlation_matrix,
    pearson_p_value,
    pearson_single_pass,
    pearson_two_pass,
)

__all__ = [
    "classify_strength",
    "correlation_matrix",
    "pearson_p_value",
    "pearson_single_pass",
    "pearson_two_pass",
]
