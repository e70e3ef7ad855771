"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: STREAMSTATS_
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data loading
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory that relative dataset paths in a catalog resolve against",
    )
    row_cap: int = Field(
        default=50_000,
        ge=0,
        description="Maximum number of rows kept from a loaded dataset (0 = all)",
    )

    # Correlation
    correlation_method: Literal["single_pass", "two_pass"] = Field(
        default="single_pass",
        description="Pearson formula: single_pass sums or mean-centered two_pass",
    )
    significance_level: float = Field(
        default=0.05,
        gt=0.0,
        lt=1.0,
        description="p-value below which a pair correlation counts as significant",
    )

    # Aggregation
    histogram_bins: int = Field(default=30, ge=1)
    top_n: int = Field(default=20, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
