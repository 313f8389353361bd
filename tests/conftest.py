"""Shared fixtures for jsonfs tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.fake_observer import RecordingObserver


@pytest.fixture
def observer() -> RecordingObserver:
    """Observer that records events for assertions."""
    return RecordingObserver()


@pytest.fixture
def sample_record() -> dict:
    """Nested JSON document with every JSON value type."""
    return {
        "id": "1",
        "hello": "world",
        "count": 42,
        "ratio": 0.5,
        "active": True,
        "missing": None,
        "tags": ["a", "b", "ç"],
        "nested": {"items": [{"k": 1}, {"k": 2}]},
    }


@pytest.fixture
def existing_file(tmp_path: Path) -> Path:
    """A JSON file already on disk holding ``{"version": "A"}``."""
    path = tmp_path / "data.json"
    path.write_text('{"version":"A"}', encoding="utf-8")
    return path
