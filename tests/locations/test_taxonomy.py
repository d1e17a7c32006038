"""Tests for platform tables and segment derivation."""

import pytest

from waypath.locations.models import (
    PlatformFamily,
    ProjectIdentity,
    RawPath,
    WellKnownFolder,
    project_folder,
    user_folder,
)
from waypath.locations.taxonomy import (
    PROJECT_LAYOUTS,
    base_folder,
    detect_platform_family,
    location_segments,
    project_segments,
)


class TestDetectPlatformFamily:
    """Test sys.platform mapping."""

    @pytest.mark.parametrize(
        ("platform", "family"),
        [
            ("win32", PlatformFamily.WINDOWS),
            ("darwin", PlatformFamily.MACOS),
            ("linux", PlatformFamily.POSIX),
            ("freebsd14", PlatformFamily.POSIX),
        ],
    )
    def test_mapping(self, platform: str, family: PlatformFamily) -> None:
        """Test each platform string maps to its family."""
        assert detect_platform_family(platform) is family

    def test_every_family_has_a_layout(self) -> None:
        """Test the project layout table covers every family."""
        assert set(PROJECT_LAYOUTS) == set(PlatformFamily)


class TestProjectSegments:
    """Test per-family project folder naming."""

    identity = ProjectIdentity(
        qualifier="com", organization="Foo Corp", application="Bar App"
    )

    def test_windows_nests_organization_and_application(self) -> None:
        """Test Windows uses org/app plus the kind folder."""
        assert project_segments(
            self.identity, WellKnownFolder.CONFIG, PlatformFamily.WINDOWS
        ) == ("Foo Corp", "Bar App", "config")

    def test_windows_skips_empty_organization(self) -> None:
        """Test Windows omits a missing organization."""
        identity = ProjectIdentity(application="App")

        assert project_segments(
            identity, WellKnownFolder.DATA, PlatformFamily.WINDOWS
        ) == ("App", "data")

    def test_macos_uses_bundle_id(self) -> None:
        """Test macOS joins the identity into one hyphenated bundle id."""
        assert project_segments(
            self.identity, WellKnownFolder.DATA, PlatformFamily.MACOS
        ) == ("com.Foo-Corp.Bar-App",)

    def test_posix_uses_lowercase_application(self) -> None:
        """Test POSIX uses the application name only, squashed."""
        assert project_segments(
            self.identity, WellKnownFolder.CACHE, PlatformFamily.POSIX
        ) == ("barapp",)


class TestLocationSegments:
    """Test segment lists for every location variant."""

    def test_user_folder_segments_are_subpath(self) -> None:
        """Test user folders descend through their subpath in order."""
        location = user_folder("pictures", "Movie Trailer", "2024")

        assert location_segments(location, PlatformFamily.POSIX) == (
            "Movie Trailer",
            "2024",
        )

    def test_project_folder_segments(self) -> None:
        """Test identity folders come before the subpath."""
        location = project_folder("data", "org", "Acme", "App", "Ad Filters")

        assert location_segments(location, PlatformFamily.WINDOWS) == (
            "Acme",
            "App",
            "data",
            "Ad Filters",
        )
        assert location_segments(location, PlatformFamily.POSIX) == (
            "app",
            "Ad Filters",
        )

    def test_raw_path_has_no_segments(self) -> None:
        """Test raw paths are used as-is."""
        assert location_segments(RawPath(value="/srv"), PlatformFamily.POSIX) == ()

    def test_deterministic(self) -> None:
        """Test the same input always yields the same segments."""
        location = project_folder("data", "org", "Acme", "App")

        results = {location_segments(location, PlatformFamily.MACOS) for _ in range(5)}

        assert results == {("org.Acme.App",)}

    def test_base_folder(self) -> None:
        """Test base folder lookup per variant."""
        assert base_folder(user_folder("music")) is WellKnownFolder.MUSIC
        assert (
            base_folder(project_folder("cache", "", "", "App")) is WellKnownFolder.CACHE
        )
        assert base_folder(RawPath(value="/srv")) is None
