"""Typed access to dynamically keyed row records.

Rows arrive as plain JSON objects. Every lookup goes through read_field(),
which classifies the raw value as a number, a category label, or missing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from streamstats.core.models.base import GroupKey, Row, ValueKind


@dataclass(frozen=True, slots=True)
class FieldValue:
    """Classified value of one field in one row."""

    kind: ValueKind
    number: float | None = None
    label: str | None = None

    @property
    def is_missing(self) -> bool:
        return self.kind is ValueKind.MISSING

    @property
    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER


MISSING = FieldValue(ValueKind.MISSING)


def classify_value(raw: Any) -> FieldValue:
    """Classify a raw JSON value.

    - bool -> number (1.0 / 0.0)
    - finite int/float -> number
    - NaN, +/-inf, None -> missing
    - non-empty str -> category, empty str -> missing
    - anything else (lists, dicts) -> missing
    """
    if raw is None:
        return MISSING
    if isinstance(raw, bool):
        return FieldValue(ValueKind.NUMBER, number=1.0 if raw else 0.0)
    if isinstance(raw, Real):
        value = float(raw)
        if not math.isfinite(value):
            return MISSING
        return FieldValue(ValueKind.NUMBER, number=value)
    if isinstance(raw, str):
        if raw == "":
            return MISSING
        return FieldValue(ValueKind.CATEGORY, label=raw)
    return MISSING


def read_field(row: Row, name: str) -> FieldValue:
    """Read and classify a field; an absent key reads as missing."""
    return classify_value(row.get(name))


def read_number(row: Row, name: str) -> float | None:
    """Read a field as a finite float, or None if it is not a number."""
    value = read_field(row, name)
    return value.number if value.is_number else None


def group_key(row: Row, name: str) -> GroupKey | None:
    """Read a field as a grouping key.

    Strings and numbers are returned as-is (genre labels, release years).
    Booleans become their JSON text "true" / "false", so an explicit flag
    never shares a group with the numbers 1 and 0. Missing fields give None.
    """
    raw = row.get(name)
    if read_field(row, name).is_missing:
        return None
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return raw
