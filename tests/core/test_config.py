"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from waypath.core.config import WaypathSettings, get_settings, load_settings
from waypath.core.constants import DEFAULT_MAX_RENAME_ATTEMPTS
from waypath.locations.models import PlatformFamily, WellKnownFolder


class TestLoadSettings:
    """Test settings built from environment mappings."""

    def test_defaults_from_empty_environment(self) -> None:
        """Test that an empty environment yields the defaults."""
        settings = load_settings({})

        assert settings.debug is False
        assert settings.max_rename_attempts == DEFAULT_MAX_RENAME_ATTEMPTS
        assert settings.platform_family is None
        assert settings.folder_overrides == {}

    @pytest.mark.parametrize("value", ["1", "true", "YES", " True "])
    def test_debug_truthy_values(self, value: str) -> None:
        """Test accepted spellings of the debug flag."""
        assert load_settings({"WAYPATH_DEBUG": value}).debug is True

    def test_debug_other_values_disable(self) -> None:
        """Test that anything else leaves debug off."""
        assert load_settings({"WAYPATH_DEBUG": "0"}).debug is False

    def test_platform_and_rename_bound(self) -> None:
        """Test platform override and rename bound parsing."""
        settings = load_settings(
            {"WAYPATH_PLATFORM": "MacOS", "WAYPATH_MAX_RENAME_ATTEMPTS": "42"}
        )

        assert settings.platform_family is PlatformFamily.MACOS
        assert settings.max_rename_attempts == 42

    def test_folder_overrides(self, tmp_path: Path) -> None:
        """Test WAYPATH_<KIND>_DIR overrides."""
        settings = load_settings(
            {
                "WAYPATH_DOWNLOADS_DIR": str(tmp_path / "dl"),
                "WAYPATH_DATA_DIR": str(tmp_path / "data"),
            }
        )

        assert settings.folder_overrides == {
            WellKnownFolder.DOWNLOADS: tmp_path / "dl",
            WellKnownFolder.DATA: tmp_path / "data",
        }

    def test_invalid_rename_bound_rejected(self) -> None:
        """Test that a non-positive bound fails validation."""
        with pytest.raises(ValidationError):
            load_settings({"WAYPATH_MAX_RENAME_ATTEMPTS": "0"})

    def test_unknown_platform_rejected(self) -> None:
        """Test that an unknown platform family fails validation."""
        with pytest.raises(ValidationError):
            load_settings({"WAYPATH_PLATFORM": "plan9"})


class TestGetSettings:
    """Test the cached process-wide settings."""

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that get_settings reads os.environ once."""
        monkeypatch.setenv("WAYPATH_MAX_RENAME_ATTEMPTS", "7")

        first = get_settings()
        monkeypatch.setenv("WAYPATH_MAX_RENAME_ATTEMPTS", "8")

        assert first.max_rename_attempts == 7
        assert get_settings() is first

    def test_settings_are_frozen(self) -> None:
        """Test that settings cannot be mutated after construction."""
        settings = WaypathSettings()

        with pytest.raises(ValidationError):
            settings.debug = True  # type: ignore[misc]
