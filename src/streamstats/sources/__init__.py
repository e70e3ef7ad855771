"""Data sources: dataset loading and typed row access."""

from streamstats.sources.catalog import (
    DatasetCatalog,
    DatasetEntry,
    load_catalog,
    resolve_dataset,
)
from streamstats.sources.loader import DatasetLoadError, load_dataset, try_load_dataset
from streamstats.sources.rows import (
    MISSING,
    FieldValue,
    classify_value,
    group_key,
    read_field,
    read_number,
)

__all__ = [
    # Loading
    "DatasetLoadError",
    "load_dataset",
    "try_load_dataset",
    # Catalog
    "DatasetCatalog",
    "DatasetEntry",
    "load_catalog",
    "resolve_dataset",
    # Row access
    "MISSING",
    "FieldValue",
    "classify_value",
    "group_key",
    "read_field",
    "read_number",
]
