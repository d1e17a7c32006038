"""Pytest configuration and fixtures for waypath tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from waypath.core.config import WaypathSettings, get_settings
from waypath.fs.backend import LocalFileBackend, get_default_backend
from waypath.locations.models import PlatformFamily, WellKnownFolder


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep WAYPATH_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("WAYPATH_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    get_default_backend.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_backend.cache_clear()


@pytest.fixture
def folders(tmp_path: Path) -> dict[WellKnownFolder, Path]:
    """Well-known folders redirected into the test's temporary directory."""
    roots = {kind: tmp_path / kind.value.title() for kind in WellKnownFolder}
    for path in roots.values():
        path.mkdir()
    return roots


@pytest.fixture
def settings() -> WaypathSettings:
    """Settings with a small rename bound."""
    return WaypathSettings(max_rename_attempts=25)


@pytest.fixture
def backend(folders: dict[WellKnownFolder, Path]) -> LocalFileBackend:
    """Local backend using POSIX naming and the temporary well-known folders."""
    return LocalFileBackend(
        WaypathSettings(),
        folder_overrides=folders,
        platform_family=PlatformFamily.POSIX,
    )
