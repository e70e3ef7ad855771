"""YAML catalog of named datasets.

A catalog maps dataset identifiers to their JSON file and default
analysis settings:

    datasets:
      tracks:
        path: tracks_sample.json
        description: Spotify track sample with audio features
        features: [danceability, energy, valence, tempo]
        group_by: track_genre
      weekly_chart:
        path: weekly_chart.json
        group_by: artist_name

Relative paths resolve against the data directory (Settings.data_dir).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from streamstats.core.config import get_settings
from streamstats.core.logging import get_logger
from streamstats.sources.loader import DatasetLoadError, load_dataset

logger = get_logger(__name__)


class DatasetEntry(BaseModel):
    """One dataset in the catalog."""

    dataset_id: str
    path: Path
    description: str | None = None
    features: list[str] = Field(default_factory=list)
    group_by: str | None = None
    required_fields: list[str] = Field(default_factory=list)


class DatasetCatalog(BaseModel):
    """All datasets declared in a catalog file."""

    datasets: dict[str, DatasetEntry] = Field(default_factory=dict)

    def get(self, dataset_id: str) -> DatasetEntry | None:
        return self.datasets.get(dataset_id)


def load_catalog(path: Path | str) -> DatasetCatalog:
    """Load a dataset catalog from YAML.

    Raises:
        DatasetLoadError: If the file is missing or unreadable, not valid YAML,
            or fails validation
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(path, "Catalog file not found")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DatasetLoadError(path, f"Invalid YAML: {e}") from e
    except OSError as e:
        raise DatasetLoadError(path, f"Cannot read catalog: {e}") from e

    if not raw:
        logger.warning("catalog_empty", path=str(path))
        return DatasetCatalog()

    if not isinstance(raw, dict) or not isinstance(raw.get("datasets", {}), dict):
        raise DatasetLoadError(path, "Catalog must be a mapping with a 'datasets' mapping")

    try:
        catalog = DatasetCatalog(datasets=_parse_entries(path, raw.get("datasets") or {}))
    except ValidationError as e:
        raise DatasetLoadError(path, f"Invalid catalog entry: {e}") from e

    logger.info("catalog_loaded", path=str(path), datasets=len(catalog.datasets))
    return catalog


def _parse_entries(path: Path, raw_entries: dict[str, Any]) -> dict[str, DatasetEntry]:
    entries: dict[str, DatasetEntry] = {}
    for dataset_id, raw_entry in raw_entries.items():
        if isinstance(raw_entry, str):
            raw_entry = {"path": raw_entry}
        if not isinstance(raw_entry, dict):
            raise DatasetLoadError(path, f"Entry {dataset_id!r} must be a mapping or a file path")
        entries[str(dataset_id)] = DatasetEntry(**{**raw_entry, "dataset_id": str(dataset_id)})
    return entries


def resolve_dataset(
    catalog: DatasetCatalog,
    dataset_id: str,
    data_dir: Path | None = None,
    row_cap: int | None = None,
) -> tuple[DatasetEntry, list[dict[str, Any]]]:
    """Produce the rows of a dataset given its identifier.

    Returns:
        The catalog entry and the loaded rows

    Raises:
        DatasetLoadError: If the identifier is unknown or the file cannot be loaded
    """
    entry = catalog.get(dataset_id)
    if entry is None:
        known = ", ".join(sorted(catalog.datasets)) or "none"
        raise DatasetLoadError(Path(dataset_id), f"Unknown dataset (known: {known})")

    path = entry.path
    if not path.is_absolute():
        path = (data_dir if data_dir is not None else get_settings().data_dir) / path

    return entry, load_dataset(path, row_cap=row_cap)
