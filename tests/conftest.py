"""Shared pytest fixtures for the full keyprops test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.fixture_paths import fixture_path


@pytest.fixture
def files_path() -> Callable[[str], Path]:
    """Provide a resolver for fixture files under `tests/files`."""

    return fixture_path


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[..., Path]:
    """Write property text into a temporary file and return its path."""

    def _write(text: str, name: str = "app.properties") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
