"""Aggregation Pydantic Models.

- GroupAverage: Per-group feature means (None = no qualifying rows)
- GroupCount: Per-group row or distinct-value count
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from streamstats.core.models.base import GroupKey


class GroupAverage(BaseModel):
    """Feature means over the rows of one group."""

    key: GroupKey
    row_count: int
    means: dict[str, float | None] = Field(default_factory=dict)
    counts: dict[str, int] = Field(default_factory=dict)  # rows contributing to each mean

    def get(self, feature: str) -> float | None:
        return self.means.get(feature)


class GroupCount(BaseModel):
    """Number of rows (or distinct values) in one group."""

    key: GroupKey
    count: int
