"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (filtering, correlation, aggregation, distribution).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# A row is a record as decoded from JSON; a dataset is an ordered sequence of rows.
type Row = Mapping[str, Any]
type Dataset = Sequence[Row]
type GroupKey = str | int | float


class InvalidArgumentError(ValueError):
    """Caller error detected before any computation starts.

    Raised for empty feature sets, field names that appear in no row,
    and values the engine cannot interpret as numbers.
    """


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class ValueKind(str, Enum):
    """Kind of a single field value."""

    NUMBER = "number"
    MISSING = "missing"
    CATEGORY = "category"


class CorrelationMethod(str, Enum):
    """Pearson formula variant."""

    SINGLE_PASS = "single_pass"  # Raw sums of products in one pass
    TWO_PASS = "two_pass"  # Mean-centered, stable for large magnitudes


class CorrelationStrength(str, Enum):
    """Heatmap band of a correlation coefficient."""

    STRONG_POSITIVE = "strong_positive"  # r >= 0.7
    MODERATE_POSITIVE = "moderate_positive"  # 0.3 <= r < 0.7
    WEAK = "weak"  # -0.3 <= r < 0.3
    MODERATE_NEGATIVE = "moderate_negative"  # -0.7 <= r < -0.3
    STRONG_NEGATIVE = "strong_negative"  # r < -0.7


def require_features(features: Sequence[str]) -> list[str]:
    """Validate a feature set and return it as a list.

    Raises:
        InvalidArgumentError: If the feature set is empty or not a sequence of names
    """
    if isinstance(features, str):
        raise InvalidArgumentError(
            f"Feature set must be a sequence of field names, got the string {features!r}"
        )
    names = list(features)
    if not names:
        raise InvalidArgumentError("Feature set must not be empty")
    return names


def require_known_fields(rows: Sequence[Row], fields: Sequence[str], role: str) -> None:
    """Check that every field name appears in at least one row.

    An empty dataset has no schema to check against and always passes.

    Raises:
        InvalidArgumentError: If a non-empty dataset has no row with the field
    """
    if not rows:
        return
    pending = set(fields)
    for row in rows:
        pending.difference_update(row.keys())
        if not pending:
            return
    missing = [name for name in dict.fromkeys(fields) if name in pending]
    raise InvalidArgumentError(f"Unknown {role} field(s) {missing}: not present in any row")
