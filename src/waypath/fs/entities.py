"""File system entities: one capability interface, several backing variants.

- Document: a file inside a logical location
- Folder: a logical location itself
- Project: an application's data/config/cache folder
- RawPathEntity: a literal path whose kind is whatever is found on disk

Entities are frozen. The concrete path is fixed when the entity is built;
operations that change what exists on disk return the entity (or an updated
copy) so calls can be chained:

    doc = Document.at(user_folder("downloads"), "notes.txt")
    for line in doc.append(b"hello\\n").read_lines():
        ...
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Self, cast

from rich.console import Console

from waypath.core.config import WaypathSettings, get_settings
from waypath.core.constants import DEFAULT_MAX_RENAME_ATTEMPTS
from waypath.core.errors import (
    AccessFailed,
    LaunchFailed,
    NotAFile,
    NotFound,
)
from waypath.fs.backend import AccessMode, FileBackend, get_default_backend
from waypath.fs.creation import (
    CreationMode,
    apply_creation_policy,
    ensure_created,
    suggest_rename,
)
from waypath.fs.resolver import PathResolver
from waypath.locations.models import (
    ProjectFolder,
    ProjectIdentity,
    RawPath,
    UserFolder,
)
from waypath.utils.log import get_logger

logger = get_logger("entity")

Location = UserFolder | ProjectFolder | RawPath


class Lines:
    """Restartable lazy sequence of the lines of a file.

    Each iteration opens the file afresh, so the sequence reflects the file's
    content at the time iteration starts.
    """

    def __init__(self, backend: FileBackend, path: Path) -> None:
        self._backend = backend
        self.path = path

    def __repr__(self) -> str:
        return f"Lines(path={str(self.path)!r})"

    def __iter__(self) -> Iterator[str]:
        try:
            yield from self._backend.read_lines(self.path)
        except FileNotFoundError as e:
            raise NotFound(self.path, str(e)) from e
        except IsADirectoryError as e:
            raise NotAFile(self.path, str(e)) from e
        except OSError as e:
            raise AccessFailed(self.path, str(e)) from e
        except UnicodeDecodeError as e:
            raise AccessFailed(self.path, f"not UTF-8 text: {e}") from e

    def print(self, console: Console | None = None) -> None:
        """Print the file line by line."""
        console = console or Console()
        for line in self:
            console.print(line, markup=False, highlight=False)


@dataclass(frozen=True)
class FileSystemEntity(ABC):
    """Common capabilities of documents, folders and raw paths.

    Attributes:
        location: Logical location the entity was declared with
        resolved_path: Concrete path, fixed for the entity's lifetime
        mode: Creation mode used when the entity was built
        policy_applied: Whether creation has been carried out for this entity
        max_rename_attempts: Bound used by auto-rename and rename suggestions
        backend: Backend performing all I/O
    """

    location: Location
    resolved_path: Path
    mode: CreationMode = CreationMode.NO
    policy_applied: bool = False
    max_rename_attempts: int = DEFAULT_MAX_RENAME_ATTEMPTS
    backend: FileBackend = field(
        default_factory=get_default_backend, compare=False, repr=False
    )

    @classmethod
    def _materialize(
        cls,
        location: Location,
        name: str | None,
        mode: CreationMode,
        is_folder: bool,
        backend: FileBackend | None,
        settings: WaypathSettings | None,
        **extra: object,
    ) -> Self:
        if backend is None:
            backend = get_default_backend()
        if settings is None:
            settings = get_settings()
        target = PathResolver(backend).resolve(location, name)
        path = apply_creation_policy(
            backend,
            mode,
            target,
            is_folder,
            max_attempts=settings.max_rename_attempts,
        )
        return cls(
            location=location,
            resolved_path=path,
            mode=mode,
            policy_applied=mode is not CreationMode.NO,
            max_rename_attempts=settings.max_rename_attempts,
            backend=backend,
            **extra,
        )

    @property
    @abstractmethod
    def is_folder(self) -> bool:
        """Whether the entity denotes a folder rather than a file."""

    @property
    def path(self) -> Path:
        return self.resolved_path

    @property
    def name(self) -> str:
        """Final path segment (file or folder name)."""
        return self.resolved_path.name

    @property
    def extension(self) -> str:
        """File extension without the dot; empty when there is none."""
        return self.resolved_path.suffix.removeprefix(".")

    def __str__(self) -> str:
        return f"{self.name} at {self.path}"

    def exists(self) -> bool:
        """Whether the entity exists. Never raises; I/O errors count as False."""
        try:
            return self.backend.exists(self.resolved_path)
        except (OSError, ValueError) as e:
            logger.warning(
                "entity.exists_failed", path=str(self.resolved_path), error=str(e)
            )
            return False

    def create(self) -> Self:
        """Create the entity if absent. Existing content is never touched.

        Returns:
            The entity, marked as created

        Raises:
            PathConflict: If the path is taken by the other kind of entry
            CreationFailed: On permission or I/O errors
        """
        ensure_created(self.backend, self.resolved_path, self.is_folder)
        if self.policy_applied:
            return self
        return dataclasses.replace(self, policy_applied=True)

    def suggest_rename(self) -> Path:
        """Path auto-rename would choose for this entity now (dry run)."""
        return suggest_rename(
            self.backend,
            self.resolved_path,
            self.is_folder,
            self.max_rename_attempts,
        )

    def _require_file(self) -> None:
        if self.is_folder:
            raise NotAFile(self.resolved_path, "entity denotes a folder")
        try:
            if self.backend.is_directory(self.resolved_path):
                raise NotAFile(self.resolved_path, "a folder exists at this path")
        except OSError as e:
            raise AccessFailed(self.resolved_path, str(e)) from e

    def _require_existing_file(self) -> None:
        self._require_file()
        if not self.exists():
            raise NotFound(self.resolved_path)

    def _open(self, mode: AccessMode) -> BinaryIO:
        self._require_file()
        try:
            return self.backend.open_file(self.resolved_path, mode)
        except FileNotFoundError as e:
            reason = "parent folder does not exist" if mode.writable else str(e)
            raise NotFound(self.resolved_path, reason) from e
        except IsADirectoryError as e:
            raise NotAFile(self.resolved_path, str(e)) from e
        except OSError as e:
            raise AccessFailed(self.resolved_path, str(e)) from e

    def _write(self, content: bytes, *, replace: bool) -> None:
        mode = AccessMode.REPLACE if replace else AccessMode.APPEND
        handle = self._open(mode)
        try:
            with handle:
                handle.write(content)
        except OSError as e:
            raise AccessFailed(self.resolved_path, str(e)) from e
        logger.debug(
            "entity.written",
            path=str(self.resolved_path),
            size=len(content),
            replace=replace,
        )

    def append(self, content: bytes) -> Self:
        """Add bytes to the end of the file, creating the file if absent.

        Raises:
            NotAFile: If the entity denotes a folder
            NotFound: If the parent folder does not exist
            AccessFailed: If the file cannot be opened or written
        """
        self._write(content, replace=False)
        return self

    def replace_with(self, content: bytes) -> Self:
        """Overwrite the whole file with ``content``.

        The previous content is discarded irreversibly.
        """
        self._write(content, replace=True)
        return self

    def file(self, mode: AccessMode = AccessMode.READ) -> BinaryIO:
        """Open the file as a binary handle for use with other libraries.

        The caller owns the handle and must close it. Writable modes create
        a missing file; REPLACE modes truncate it.

        Raises:
            NotAFile: If the entity denotes a folder
            NotFound: If the file (or, for writable modes, its parent) is missing
            AccessFailed: If the file cannot be opened
        """
        return self._open(mode)

    def read_lines(self) -> Lines:
        """Lines of the file as a restartable lazy sequence.

        Raises:
            NotAFile: If the entity denotes a folder
            NotFound: If the file does not exist
        """
        self._require_existing_file()
        return Lines(self.backend, self.resolved_path)

    def content(self) -> str:
        """Whole file content as text."""
        self._require_existing_file()
        try:
            return self.backend.read_text(self.resolved_path)
        except FileNotFoundError as e:
            raise NotFound(self.resolved_path, str(e)) from e
        except OSError as e:
            raise AccessFailed(self.resolved_path, str(e)) from e
        except UnicodeDecodeError as e:
            raise AccessFailed(self.resolved_path, f"not UTF-8 text: {e}") from e

    def launch_with_default_app(self) -> Self:
        """Open the entity with its default application, as a file manager would.

        Raises:
            LaunchFailed: If the path is missing or the handler cannot start
        """
        if not self.exists():
            raise LaunchFailed(self.resolved_path, "path does not exist")
        try:
            self.backend.launch_default_handler(self.resolved_path)
        except OSError as e:
            raise LaunchFailed(self.resolved_path, str(e)) from e
        logger.info("entity.launched", path=str(self.resolved_path))
        return self


@dataclass(frozen=True)
class Document(FileSystemEntity):
    """A file inside a logical location.

    Building a Document does not create a file unless ``mode`` asks for it.
    """

    @property
    def is_folder(self) -> bool:
        return False

    @classmethod
    def at(
        cls,
        location: Location,
        filename: str,
        mode: CreationMode = CreationMode.NO,
        *,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> Self:
        """Document named ``filename`` inside ``location``.

        Args:
            location: Folder holding the file, e.g. ``user_folder("pictures")``
            filename: File name including its extension
            mode: Creation mode applied now
            backend: Backend to use (defaults to the local machine)
            settings: Settings to use (defaults to the environment)

        Raises:
            LocationUnavailable: If the location cannot be resolved
            PathConflict, CreationFailed, ExhaustedRenameAttempts: From ``mode``
        """
        return cls._materialize(location, filename, mode, False, backend, settings)

    @classmethod
    def at_path(
        cls,
        path: str | Path,
        mode: CreationMode = CreationMode.NO,
        *,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> Self:
        """Document at a literal path.

        File paths differ between machines; prefer :meth:`at` with a
        well-known location unless the path comes from elsewhere.
        """
        location = RawPath(value=str(path))
        return cls._materialize(location, None, mode, False, backend, settings)


@dataclass(frozen=True)
class Folder(FileSystemEntity):
    """A logical location itself, e.g. the user's Pictures folder."""

    @property
    def is_folder(self) -> bool:
        return True

    @classmethod
    def at(
        cls,
        location: Location,
        mode: CreationMode = CreationMode.NO,
        *,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> Self:
        """Folder denoted by ``location``."""
        return cls._materialize(location, None, mode, True, backend, settings)

    def document(
        self,
        filename: str,
        mode: CreationMode = CreationMode.NO,
        *,
        settings: WaypathSettings | None = None,
    ) -> Document:
        """Document named ``filename`` directly inside this folder."""
        return Document.at(
            RawPath(value=str(self.resolved_path)),
            filename,
            mode,
            backend=self.backend,
            settings=settings,
        )


@dataclass(frozen=True)
class Project(Folder):
    """An application's per-identity folder.

    If the software is not registered with the platform the folder may not
    exist yet; build it with ``CreationMode.YES`` to have it created.
    """

    @classmethod
    def at(
        cls,
        location: Location,
        mode: CreationMode = CreationMode.NO,
        *,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> Self:
        if not isinstance(location, ProjectFolder):
            raise TypeError(
                f"Project needs a ProjectFolder location, got {type(location).__name__}"
            )
        return super().at(location, mode, backend=backend, settings=settings)

    @property
    def identity(self) -> ProjectIdentity:
        return cast(ProjectFolder, self.location).identity


@dataclass(frozen=True)
class RawPathEntity(FileSystemEntity):
    """A literal path; folder or file depending on what is on disk.

    Attributes:
        folder: Treat the path as a folder even while it does not exist
    """

    folder: bool = False

    @property
    def is_folder(self) -> bool:
        if self.folder:
            return True
        try:
            return self.backend.is_directory(self.resolved_path)
        except OSError:
            return False

    @classmethod
    def at(
        cls,
        path: str | Path,
        mode: CreationMode = CreationMode.NO,
        *,
        folder: bool = False,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> Self:
        """Entity for a literal path.

        An existing folder at ``path`` is treated as a folder; otherwise
        ``folder`` decides what ``mode`` creates.
        """
        location = RawPath(value=str(path))
        if backend is None:
            backend = get_default_backend()
        if not folder:
            try:
                folder = backend.is_directory(location.path)
            except OSError as e:
                raise AccessFailed(location.path, str(e)) from e
        return cls._materialize(
            location, None, mode, folder, backend, settings, folder=folder
        )
