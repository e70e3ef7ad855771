"""Distribution Pydantic Models."""

from __future__ import annotations

from pydantic import BaseModel


class HistogramBucket(BaseModel):
    """A histogram bucket covering [bucket_min, bucket_max)."""

    bucket_min: float
    bucket_max: float
    label: str  # e.g. "120-124"
    count: int
