"""Group-by aggregation over row datasets.

Groups are keyed by the exact value of a field (case-sensitive) and keep
the order in which each key first appears. Rows whose group field is
missing belong to no group.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from streamstats.analysis.aggregation.models import GroupAverage, GroupCount
from streamstats.core.logging import get_logger
from streamstats.core.models.base import (
    Dataset,
    GroupKey,
    InvalidArgumentError,
    require_features,
    require_known_fields,
)
from streamstats.sources.rows import group_key, read_field

logger = get_logger(__name__)


def compute_group_averages(
    dataset: Dataset,
    group_by: str,
    features: Sequence[str],
) -> dict[GroupKey, GroupAverage]:
    """Average each feature within each group.

    Only rows where the feature is a number contribute to its mean. A group
    with no such rows reports the feature as None, never 0.0.

    Args:
        dataset: Rows to aggregate
        group_by: Field whose value defines the group
        features: Numeric fields to average

    Returns:
        Mapping of group key to GroupAverage, in first-appearance order

    Raises:
        InvalidArgumentError: If the feature set is empty, or the dataset is
            non-empty and group_by appears in no row
    """
    names = require_features(features)
    rows = tuple(dataset)
    require_known_fields(rows, [group_by], "group-by")

    row_counts: dict[Any, int] = {}
    values: dict[Any, dict[str, list[float]]] = {}

    for row in rows:
        key = group_key(row, group_by)
        if key is None:
            continue
        if key not in values:
            row_counts[key] = 0
            values[key] = {name: [] for name in names}
        row_counts[key] += 1
        for name in names:
            value = read_field(row, name)
            if value.is_number:
                values[key][name].append(value.number)

    averages: dict[GroupKey, GroupAverage] = {}
    for key, feature_values in values.items():
        averages[key] = GroupAverage(
            key=key,
            row_count=row_counts[key],
            means={
                name: float(np.mean(vals)) if vals else None
                for name, vals in feature_values.items()
            },
            counts={name: len(vals) for name, vals in feature_values.items()},
        )

    logger.debug("group_averages_computed", group_by=group_by, groups=len(averages))
    return averages


def compute_group_counts(
    dataset: Dataset,
    group_by: str,
    distinct_field: str | None = None,
    top_n: int | None = None,
) -> list[GroupCount]:
    """Count rows per group, or distinct values of another field per group.

    e.g. chart appearances per artist (``distinct_field=None``) versus
    unique songs per artist (``distinct_field="song_title"``).

    Returns:
        Groups sorted by count, largest first; ties keep first-appearance
        order. Truncated to ``top_n`` when given.

    Raises:
        InvalidArgumentError: If a field appears in no row of a non-empty
            dataset, or top_n < 1
    """
    if top_n is not None and top_n < 1:
        raise InvalidArgumentError(f"top_n must be at least 1, got {top_n}")

    rows = tuple(dataset)
    require_known_fields(rows, [group_by], "group-by")
    if distinct_field is not None:
        require_known_fields(rows, [distinct_field], "distinct")

    counts: dict[Any, int] = {}
    distinct: dict[Any, set[Any]] = {}
    for row in rows:
        key = group_key(row, group_by)
        if key is None:
            continue
        if distinct_field is None:
            counts[key] = counts.get(key, 0) + 1
            continue
        seen = distinct.setdefault(key, set())
        value = group_key(row, distinct_field)
        if value is not None:
            seen.add(value)

    if distinct_field is not None:
        counts = {key: len(seen) for key, seen in distinct.items()}

    # sorted() is stable, so equal counts keep first-appearance order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if top_n is not None:
        ranked = ranked[:top_n]
    return [GroupCount(key=key, count=count) for key, count in ranked]


def pivot_group_averages(
    averages: Mapping[GroupKey, GroupAverage],
    features: Sequence[str],
) -> list[dict[str, Any]]:
    """Reshape group averages into one record per feature.

    Produces the layout a radar chart consumes:
    ``[{"feature": "energy", "pop": 0.71, "rock": 0.80}, ...]``.
    Absent means stay None. Group keys become strings.
    """
    names = require_features(features)
    records = []
    for name in names:
        record: dict[str, Any] = {"feature": name}
        for key, average in averages.items():
            record[str(key)] = average.get(name)
        records.append(record)
    return records
