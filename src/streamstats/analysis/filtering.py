"""Row completeness filters.

Filters return new lists and never mutate the input rows. They are used to
build listwise-complete datasets before correlation or aggregation.
"""

from __future__ import annotations

from collections.abc import Sequence

from streamstats.core.logging import get_logger
from streamstats.core.models.base import Dataset, Row, require_known_fields
from streamstats.sources.rows import read_field

logger = get_logger(__name__)


def _is_complete(row: Row, required: Sequence[str], numeric: Sequence[str]) -> bool:
    for name in required:
        if read_field(row, name).is_missing:
            return False
    for name in numeric:
        if not read_field(row, name).is_number:
            return False
    return True


def filter_complete(
    dataset: Dataset,
    required_fields: Sequence[str],
    numeric_fields: Sequence[str] = (),
) -> list[Row]:
    """Keep rows where every required field holds a usable value.

    A value is usable when it is a finite number or a non-empty category
    label. Fields in ``numeric_fields`` are required too, and must hold
    finite numbers.

    Args:
        dataset: Rows to filter
        required_fields: Fields that must be present (number or category)
        numeric_fields: Fields that must be present and numeric

    Returns:
        Matching rows in their original order

    Raises:
        InvalidArgumentError: If the dataset is non-empty and a field name
            appears in no row
    """
    rows = tuple(dataset)
    required = list(required_fields)
    numeric = list(numeric_fields)

    if not required and not numeric:
        return list(rows)

    require_known_fields(rows, required + numeric, "required")

    kept = [row for row in rows if _is_complete(row, required, numeric)]
    logger.debug(
        "rows_filtered",
        fields=required + numeric,
        rows_in=len(rows),
        rows_out=len(kept),
    )
    return kept


def filter_positive(dataset: Dataset, field: str) -> list[Row]:
    """Keep rows whose field is a finite number greater than zero.

    Raises:
        InvalidArgumentError: If the dataset is non-empty and no row has the field
    """
    rows = tuple(dataset)
    require_known_fields(rows, [field], "filter")

    kept = []
    for row in rows:
        value = read_field(row, field)
        if value.is_number and value.number is not None and value.number > 0:
            kept.append(row)
    return kept
