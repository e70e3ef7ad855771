"""JSON dataset loader.

Datasets are pre-generated JSON files holding an array of row objects,
e.g. ``tracks_sample.json`` with one object per track.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from streamstats.core.config import get_settings
from streamstats.core.logging import get_logger
from streamstats.core.models.base import Result

logger = get_logger(__name__)


class DatasetLoadError(Exception):
    """Error loading a dataset or dataset catalog."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def load_dataset(path: Path | str, row_cap: int | None = None) -> list[dict[str, Any]]:
    """Load a dataset from a JSON file.

    Args:
        path: JSON file containing an array of objects
        row_cap: Maximum rows to keep (None = Settings.row_cap, 0 = all)

    Returns:
        Rows in file order, truncated to the row cap

    Raises:
        DatasetLoadError: If the file is missing or unreadable, is not valid JSON,
            or is not an array of objects
    """
    path = Path(path)
    if row_cap is None:
        row_cap = get_settings().row_cap

    if not path.is_file():
        raise DatasetLoadError(path, "Dataset file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetLoadError(path, f"Invalid JSON: {e}") from e
    except OSError as e:
        raise DatasetLoadError(path, f"Cannot read dataset: {e}") from e

    if not isinstance(data, list):
        raise DatasetLoadError(path, f"Expected a JSON array, got {type(data).__name__}")

    for index, row in enumerate(data):
        if not isinstance(row, dict):
            raise DatasetLoadError(
                path, f"Row {index} is {type(row).__name__}, expected an object"
            )

    total = len(data)
    if row_cap and total > row_cap:
        logger.warning("dataset_truncated", path=str(path), rows=total, row_cap=row_cap)
        data = data[:row_cap]

    logger.info("dataset_loaded", path=str(path), rows=len(data))
    return data


def try_load_dataset(path: Path | str, row_cap: int | None = None) -> Result[list[dict[str, Any]]]:
    """Load a dataset, reporting failures as a Result instead of raising.

    Truncation to the row cap is reported in ``Result.warnings``.
    """
    if row_cap is None:
        row_cap = get_settings().row_cap
    try:
        rows = load_dataset(path, row_cap=0)
    except DatasetLoadError as e:
        return Result.fail(str(e))

    if row_cap and len(rows) > row_cap:
        warning = f"Kept the first {row_cap} of {len(rows)} rows (row cap)"
        return Result.ok(rows[:row_cap], warnings=[warning])
    return Result.ok(rows)
