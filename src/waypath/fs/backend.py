"""File backends: the seam between waypath and the host platform.

:class:`FileBackend` is the minimal set of platform capabilities the rest of
the library relies on. :class:`LocalFileBackend` implements it on top of
``pathlib``, ``platformdirs`` and the platform's "open with default app"
command. Backends raise ``OSError`` for I/O failures; translating those into
waypath errors is the caller's job.
"""

import os
import subprocess
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from functools import lru_cache, partial
from pathlib import Path
from typing import BinaryIO

import platformdirs

from waypath.core.config import WaypathSettings, get_settings
from waypath.core.errors import LocationUnavailable
from waypath.locations.models import PlatformFamily, WellKnownFolder
from waypath.locations.taxonomy import detect_platform_family
from waypath.utils.log import get_logger

logger = get_logger("backend")

#: platformdirs lookups for every well-known folder except HOME
PLATFORMDIRS_LOOKUP: dict[WellKnownFolder, Callable[[], str]] = {
    WellKnownFolder.DOCUMENTS: platformdirs.user_documents_dir,
    WellKnownFolder.DOWNLOADS: platformdirs.user_downloads_dir,
    WellKnownFolder.DESKTOP: platformdirs.user_desktop_dir,
    WellKnownFolder.PICTURES: platformdirs.user_pictures_dir,
    WellKnownFolder.MUSIC: platformdirs.user_music_dir,
    WellKnownFolder.VIDEOS: platformdirs.user_videos_dir,
    WellKnownFolder.DATA: partial(platformdirs.user_data_dir, roaming=True),
    WellKnownFolder.CONFIG: partial(platformdirs.user_config_dir, roaming=True),
    WellKnownFolder.CACHE: platformdirs.user_cache_dir,
}


class AccessMode(str, Enum):
    """How a file handle is opened.

    READ, READ_REPLACE and READ_APPEND are readable; every mode but READ is
    writable. REPLACE and READ_REPLACE truncate the file; the append modes
    write at the end. Writable modes create a missing file.
    """

    READ = "read"
    REPLACE = "replace"
    APPEND = "append"
    READ_REPLACE = "read_replace"
    READ_APPEND = "read_append"

    @property
    def readable(self) -> bool:
        return self in (
            AccessMode.READ,
            AccessMode.READ_REPLACE,
            AccessMode.READ_APPEND,
        )

    @property
    def writable(self) -> bool:
        return self is not AccessMode.READ

    @property
    def appendable(self) -> bool:
        return self in (AccessMode.APPEND, AccessMode.READ_APPEND)

    @property
    def open_mode(self) -> str:
        """Binary mode string for ``open()``."""
        return OPEN_MODES[self]


#: Binary open() modes per access mode
OPEN_MODES: dict[AccessMode, str] = {
    AccessMode.READ: "rb",
    AccessMode.REPLACE: "wb",
    AccessMode.APPEND: "ab",
    AccessMode.READ_REPLACE: "w+b",
    AccessMode.READ_APPEND: "a+b",
}

#: Commands that open a path with its default handler (Windows uses startfile)
LAUNCH_COMMANDS: dict[PlatformFamily, tuple[str, ...]] = {
    PlatformFamily.MACOS: ("open",),
    PlatformFamily.POSIX: ("xdg-open",),
}


class FileBackend(ABC):
    """Platform capabilities required by resolvers, policies and entities."""

    @property
    @abstractmethod
    def platform_family(self) -> PlatformFamily:
        """Platform family whose folder conventions apply."""

    @abstractmethod
    def well_known_folder_path(self, kind: WellKnownFolder) -> Path:
        """Base directory of a well-known folder.

        Raises:
            LocationUnavailable: If the platform has no such folder
        """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Whether anything exists at ``path``."""

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Whether ``path`` is an existing directory."""

    @abstractmethod
    def create_directory_recursive(self, path: Path) -> bool:
        """Create ``path`` and missing parents.

        Returns:
            True if the directory was created, False if it already existed
        """

    @abstractmethod
    def create_file_if_absent(self, path: Path) -> bool:
        """Atomically create an empty file unless something exists there.

        Returns:
            True if the file was created, False if the path was taken
        """

    @abstractmethod
    def open_file(self, path: Path, mode: AccessMode) -> BinaryIO:
        """Open ``path`` as a binary handle in ``mode``."""

    @abstractmethod
    def read_lines(self, path: Path) -> Iterator[str]:
        """Lazily yield the lines of a text file without line endings."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a whole text file."""

    @abstractmethod
    def launch_default_handler(self, path: Path) -> None:
        """Open ``path`` with the platform's default application."""


class LocalFileBackend(FileBackend):
    """FileBackend for the machine the process runs on.

    Explicit ``folder_overrides`` and ``platform_family`` take precedence over
    the corresponding settings.
    """

    def __init__(
        self,
        settings: WaypathSettings | None = None,
        *,
        folder_overrides: Mapping[WellKnownFolder, Path] | None = None,
        platform_family: PlatformFamily | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        self._overrides: dict[WellKnownFolder, Path] = dict(settings.folder_overrides)
        if folder_overrides:
            self._overrides.update(
                {kind: Path(path) for kind, path in folder_overrides.items()}
            )
        self._platform_family = (
            platform_family or settings.platform_family or detect_platform_family()
        )

    def __repr__(self) -> str:
        return (
            f"LocalFileBackend(platform_family={self._platform_family.value!r}, "
            f"overrides={sorted(kind.value for kind in self._overrides)})"
        )

    @property
    def platform_family(self) -> PlatformFamily:
        return self._platform_family

    def well_known_folder_path(self, kind: WellKnownFolder) -> Path:
        override = self._overrides.get(kind)
        if override is not None:
            return override

        try:
            if kind is WellKnownFolder.HOME:
                return Path.home()
            value = PLATFORMDIRS_LOOKUP[kind]()
        except (KeyError, OSError, RuntimeError) as e:
            logger.debug("backend.folder_lookup_failed", folder=kind.value, error=str(e))
            raise LocationUnavailable(kind.value, str(e)) from e

        if not value:
            raise LocationUnavailable(kind.value, "platform reported no path")
        return Path(value)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def create_directory_recursive(self, path: Path) -> bool:
        try:
            path.mkdir(parents=True)
        except FileExistsError:
            if path.is_dir():
                return False
            raise
        logger.debug("backend.directory_created", path=str(path))
        return True

    def create_file_if_absent(self, path: Path) -> bool:
        try:
            # "x" fails if anything exists, so creation doubles as the check
            with path.open("xb"):
                pass
        except FileExistsError:
            return False
        logger.debug("backend.file_created", path=str(path))
        return True

    def open_file(self, path: Path, mode: AccessMode) -> BinaryIO:
        return path.open(mode.open_mode)  # type: ignore[return-value]

    def read_lines(self, path: Path) -> Iterator[str]:
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                yield line.removesuffix("\n")

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def launch_default_handler(self, path: Path) -> None:
        if self._platform_family is PlatformFamily.WINDOWS:
            startfile = getattr(os, "startfile", None)
            if startfile is None:
                raise OSError("os.startfile is not available on this interpreter")
            startfile(str(path))
            return

        command = LAUNCH_COMMANDS[self._platform_family]
        process = subprocess.Popen(
            [*command, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        # Reaped in the background; the caller never waits on the handler
        threading.Thread(target=process.wait, daemon=True).start()
        logger.debug("backend.launched", path=str(path), command=command[0])


@lru_cache(maxsize=1)
def get_default_backend() -> LocalFileBackend:
    """Shared backend configured from the process settings."""
    return LocalFileBackend(get_settings())
