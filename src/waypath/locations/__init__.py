"""Logical locations and the platform tables that resolve them.

This package is pure data: nothing here touches the filesystem.
"""

from waypath.locations.models import (
    LocationSpec,
    PlatformFamily,
    ProjectFolder,
    ProjectIdentity,
    RawPath,
    UserFolder,
    WellKnownFolder,
    project_folder,
    user_folder,
)
from waypath.locations.taxonomy import (
    PROJECT_LAYOUTS,
    detect_platform_family,
    location_segments,
)

__all__ = [
    "PROJECT_LAYOUTS",
    "LocationSpec",
    "PlatformFamily",
    "ProjectFolder",
    "ProjectIdentity",
    "RawPath",
    "UserFolder",
    "WellKnownFolder",
    "detect_platform_family",
    "location_segments",
    "project_folder",
    "user_folder",
]
