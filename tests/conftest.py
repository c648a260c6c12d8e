"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import orjson
import pytest

from uiconfig.constants import MANIFEST_ENV_VAR
from uiconfig.flags import reset_default_reader


@pytest.fixture(autouse=True)
def _isolated_manifest(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from the bundled manifest with no cached reader."""
    monkeypatch.delenv(MANIFEST_ENV_VAR, raising=False)
    reset_default_reader()
    yield
    reset_default_reader()


@pytest.fixture
def write_json_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a JSON manifest and returns its path."""

    def _write(data: dict[str, Any], name: str = "manifest.json") -> Path:
        path = tmp_path / name
        path.write_bytes(orjson.dumps(data))
        return path

    return _write
