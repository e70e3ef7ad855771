"""Shared pytest fixtures for all tests."""

import json
from pathlib import Path

import pytest

from streamstats.core.config import get_settings
from streamstats.core.logging import configure_logging


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings for every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind structlog to the current sys.stderr (pytest swaps it per test)."""
    configure_logging(log_level="WARNING", log_format="console")
    yield


@pytest.fixture
def tracks() -> list[dict]:
    """Small track sample shaped like tracks_sample.json."""
    return [
        {"track_name": "A", "track_genre": "pop", "danceability": 0.8, "energy": 0.7,
         "valence": 0.9, "tempo": 120.0, "duration_ms": 200000, "explicit": False},
        {"track_name": "B", "track_genre": "rock", "danceability": 0.4, "energy": 0.9,
         "valence": 0.5, "tempo": 140.0, "duration_ms": 240000, "explicit": True},
        {"track_name": "C", "track_genre": "pop", "danceability": 0.7, "energy": None,
         "valence": 0.8, "tempo": 118.0, "duration_ms": 180000, "explicit": False},
        {"track_name": "D", "track_genre": "jazz", "danceability": 0.5, "energy": 0.3,
         "valence": float("nan"), "tempo": 95.0, "duration_ms": 300000, "explicit": False},
        {"track_name": "E", "track_genre": "rock", "danceability": 0.3, "energy": 0.95,
         "valence": 0.4, "tempo": 150.0, "duration_ms": 0, "explicit": True},
        {"track_name": "F", "track_genre": "", "danceability": 0.6, "energy": 0.6,
         "valence": 0.6, "tempo": 128.0, "duration_ms": 210000, "explicit": False},
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document to a file under tmp_path and return its path."""

    def _write(data, name: str = "dataset.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
