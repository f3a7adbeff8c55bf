"""
Pytest configuration and shared fixtures.

This module provides fixtures that are available to all test modules.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from slideshow.config.settings import AppSettings, StorageSettings, get_settings

ENV_OVERRIDES = ("PORT", "HOST", "LOG_LEVEL", "ENVIRONMENT", "SLIDESHOW_CONFIG")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """
    Clear settings cache before each test.

    This ensures each test gets fresh settings.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Remove environment overrides that would leak into settings."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any setup_logging() calls made during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    configured = getattr(root, "_slideshow_configured", False)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root._slideshow_configured = configured  # type: ignore[attr-defined]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """
    Settings whose storage paths all live under tmp_path.

    Returns:
        AppSettings with slides.json, static/ and images/ in tmp_path
    """
    return AppSettings(
        storage=StorageSettings(
            slides_file=tmp_path / "slides.json",
            static_dir=tmp_path / "static",
            images_dir=tmp_path / "images",
        )
    )


@pytest.fixture
def sample_slides() -> list[dict[str, Any]]:
    """Slides as they appear in a hand-edited slides.json."""
    return [
        {"id": 3, "imageUrl": "/images/sunrise.jpg", "quote": "Every day is a new day.", "author": "Anon"},
        {"id": 1, "imageUrl": "/images/harbor.png", "quote": "Stay the course."},
        {"id": 1, "imageUrl": "/images/ridge.gif", "quote": "Keep climbing.", "author": ""},
    ]


@pytest.fixture
def slides_file(settings: AppSettings, sample_slides: list[dict[str, Any]]) -> Path:
    """Write sample_slides to the configured slides.json."""
    path = settings.storage.slides_file
    path.write_text(json.dumps(sample_slides), encoding="utf-8")
    return path
