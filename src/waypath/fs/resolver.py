"""Turn logical locations into concrete paths.

Resolution is pure path construction: the backend is asked for base folders
only, and nothing is checked for existence or created here.
"""

from pathlib import Path

from waypath.core.errors import LocationUnavailable
from waypath.fs.backend import FileBackend
from waypath.locations.models import (
    ProjectFolder,
    RawPath,
    UserFolder,
    validate_segment,
)
from waypath.locations.taxonomy import location_segments, project_segments
from waypath.utils.log import get_logger

logger = get_logger("resolver")


class PathResolver:
    """Resolve locations against one backend's platform conventions."""

    def __init__(self, backend: FileBackend) -> None:
        self.backend = backend

    def base_path(self, location: UserFolder | ProjectFolder) -> Path:
        """Base directory the location's segments are applied beneath.

        Raises:
            LocationUnavailable: If the platform has no such folder
        """
        return self.backend.well_known_folder_path(location.kind)

    def resolve(
        self,
        location: UserFolder | ProjectFolder | RawPath,
        name: str | None = None,
    ) -> Path:
        """Build the concrete path for ``location`` and an optional name.

        Args:
            location: Logical location to resolve
            name: File or folder name appended last

        Returns:
            Concrete platform path; the same inputs always give the same path

        Raises:
            LocationUnavailable: If a base folder or project name is missing
            ValueError: If ``name`` is not a plain file or folder name
        """
        if name is not None:
            validate_segment(name)

        if isinstance(location, RawPath):
            path = location.path
        else:
            family = self.backend.platform_family
            if isinstance(location, ProjectFolder) and not project_segments(
                location.identity, location.kind, family
            ):
                raise LocationUnavailable(
                    location.kind.value,
                    f"identity {location.identity.app_id!r} yields no folder name "
                    f"on {family.value}",
                )
            path = self.base_path(location).joinpath(
                *location_segments(location, family)
            )

        if name is not None:
            path = path / name

        logger.debug("resolver.resolved", location=location.type, path=str(path))
        return path
