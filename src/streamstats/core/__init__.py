"""Core module - configuration, logging, and shared models."""

from streamstats.core.config import Settings, get_settings
from streamstats.core.models.base import (
    CorrelationMethod,
    CorrelationStrength,
    InvalidArgumentError,
    Result,
    ValueKind,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models - enums
    "CorrelationMethod",
    "CorrelationStrength",
    "ValueKind",
    # Models - base data structures
    "InvalidArgumentError",
    "Result",
]
