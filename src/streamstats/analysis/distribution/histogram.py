"""Equal-width histograms (tempo / duration distributions)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

import numpy as np

from streamstats.analysis.distribution.models import HistogramBucket
from streamstats.core.config import get_settings
from streamstats.core.logging import get_logger
from streamstats.core.models.base import Dataset, InvalidArgumentError, require_known_fields
from streamstats.sources.rows import classify_value, read_number

logger = get_logger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _label(start: float, end: float) -> str:
    return f"{_round_half_up(start)}-{_round_half_up(end)}"


def compute_histogram(values: Iterable[Any], bins: int | None = None) -> list[HistogramBucket]:
    """Bin values into equal-width buckets between their min and max.

    Non-numeric values are ignored. The last bucket is closed on the right,
    so the maximum lands in it.

    Args:
        values: Raw values (numbers, or anything read_field would classify)
        bins: Number of buckets (None = Settings.histogram_bins)

    Returns:
        Buckets in ascending order; [] for no numbers; a single bucket when
        every value is equal

    Raises:
        InvalidArgumentError: If bins < 1
    """
    if bins is None:
        bins = get_settings().histogram_bins
    if bins < 1:
        raise InvalidArgumentError(f"bins must be at least 1, got {bins}")

    numbers = []
    for raw in values:
        value = classify_value(raw)
        if value.is_number and value.number is not None:
            numbers.append(value.number)
    if not numbers:
        return []

    data = np.asarray(numbers, dtype=np.float64)
    low = float(data.min())
    high = float(data.max())
    if low == high:
        bucket = HistogramBucket(
            bucket_min=low, bucket_max=high, label=_label(low, high), count=len(numbers)
        )
        return [bucket]

    counts, edges = np.histogram(data, bins=bins, range=(low, high))
    buckets = [
        HistogramBucket(
            bucket_min=float(start),
            bucket_max=float(end),
            label=_label(float(start), float(end)),
            count=int(count),
        )
        for start, end, count in zip(edges[:-1], edges[1:], counts, strict=True)
    ]

    logger.debug("histogram_computed", values=len(numbers), bins=bins)
    return buckets


def compute_field_histogram(
    dataset: Dataset,
    field: str,
    bins: int | None = None,
    scale: float = 1.0,
) -> list[HistogramBucket]:
    """Histogram of one numeric field across a dataset.

    ``scale`` multiplies each value first, e.g. 1 / 60000 to show
    ``duration_ms`` in minutes.

    Raises:
        InvalidArgumentError: If the dataset is non-empty and no row has the field
    """
    rows = tuple(dataset)
    require_known_fields(rows, [field], "histogram")
    numbers = [read_number(row, field) for row in rows]
    return compute_histogram((n * scale for n in numbers if n is not None), bins=bins)
