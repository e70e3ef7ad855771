"""Correlation Analysis Pydantic Models.

- CorrelationMatrix: Symmetric Pearson matrix labelled by feature order
- PairCorrelation: One off-diagonal pair with strength band and significance
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel

from streamstats.core.models.base import CorrelationMethod, CorrelationStrength


class CorrelationMatrix(BaseModel):
    """Pearson correlation matrix over a feature set.

    ``values`` is row-major, k x k where k = len(features); row and column i
    belong to ``features[i]``.
    """

    features: list[str]
    values: list[list[float]]
    sample_size: int
    method: CorrelationMethod = CorrelationMethod.SINGLE_PASS

    @property
    def size(self) -> int:
        return len(self.features)

    def get(self, feature_a: str, feature_b: str) -> float:
        """Look up a coefficient by feature name (first occurrence wins)."""
        try:
            i = self.features.index(feature_a)
            j = self.features.index(feature_b)
        except ValueError as e:
            raise KeyError(f"Feature not in matrix: {e}") from e
        return self.values[i][j]

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float64)


class PairCorrelation(BaseModel):
    """Pearson correlation between two features."""

    feature1: str
    feature2: str
    r: float
    strength: CorrelationStrength
    p_value: float | None = None  # None when sample_size < 3
    is_significant: bool
    sample_size: int
