"""Platform tables that turn a location into directory segments.

Nothing here touches the filesystem. Given a location and a platform family,
:func:`location_segments` returns the folder names to descend into below the
platform's base folder. Project folder naming differs per family and lives in
:data:`PROJECT_LAYOUTS`, so supporting another family is a table entry.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

from waypath.locations.models import (
    PlatformFamily,
    ProjectFolder,
    ProjectIdentity,
    RawPath,
    UserFolder,
    WellKnownFolder,
)

__all__ = [
    "PROJECT_LAYOUTS",
    "ProjectLayout",
    "base_folder",
    "detect_platform_family",
    "location_segments",
    "project_segments",
]

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ProjectLayout:
    """How one platform family names an application's folders.

    Attributes:
        directory_names: Maps an identity to the nested folder names
        kind_suffix: Append the kind ('data', 'config', 'cache') as a folder
    """

    directory_names: Callable[[ProjectIdentity], tuple[str, ...]]
    kind_suffix: bool = False


def _nested_org_app(identity: ProjectIdentity) -> tuple[str, ...]:
    # Acme Corp\Bar App
    parts = (identity.organization.strip(), identity.application.strip())
    return tuple(part for part in parts if part)


def _bundle_id(identity: ProjectIdentity) -> tuple[str, ...]:
    # com.Acme-Corp.Bar-App
    parts = (identity.qualifier, identity.organization, identity.application)
    hyphenated = (_WHITESPACE.sub("-", part.strip()) for part in parts)
    name = ".".join(part for part in hyphenated if part)
    return (name,) if name else ()


def _lowercase_app(identity: ProjectIdentity) -> tuple[str, ...]:
    # barapp
    name = _WHITESPACE.sub("", identity.application).lower()
    return (name,) if name else ()


PROJECT_LAYOUTS: dict[PlatformFamily, ProjectLayout] = {
    PlatformFamily.WINDOWS: ProjectLayout(_nested_org_app, kind_suffix=True),
    PlatformFamily.MACOS: ProjectLayout(_bundle_id),
    PlatformFamily.POSIX: ProjectLayout(_lowercase_app),
}


def detect_platform_family(platform: str | None = None) -> PlatformFamily:
    """Map ``sys.platform`` (or the given value) onto a platform family."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return PlatformFamily.WINDOWS
    if platform == "darwin":
        return PlatformFamily.MACOS
    return PlatformFamily.POSIX


def project_segments(
    identity: ProjectIdentity,
    kind: WellKnownFolder,
    family: PlatformFamily,
) -> tuple[str, ...]:
    """Folder names identifying an application below the base folder.

    Returns an empty tuple when the identity yields no usable name.
    """
    layout = PROJECT_LAYOUTS[family]
    names = layout.directory_names(identity)
    if not names:
        return ()
    if layout.kind_suffix:
        return (*names, kind.value)
    return names


def base_folder(location: UserFolder | ProjectFolder | RawPath) -> WellKnownFolder | None:
    """The well-known folder a location hangs off, or None for raw paths."""
    if isinstance(location, RawPath):
        return None
    return location.kind


def location_segments(
    location: UserFolder | ProjectFolder | RawPath,
    family: PlatformFamily,
) -> tuple[str, ...]:
    """Ordered folder names to descend from the base folder to the location.

    Args:
        location: The logical location
        family: Platform family whose conventions apply

    Returns:
        Segment names; empty for a raw path or a bare user folder
    """
    if isinstance(location, UserFolder):
        return location.subpath
    if isinstance(location, ProjectFolder):
        identity_dirs = project_segments(location.identity, location.kind, family)
        return (*identity_dirs, *location.subpath)
    return ()
