"""Pydantic value types describing logical locations.

A location says *where* something lives in platform-neutral terms:
- UserFolder: a user's well-known folder plus nested subfolders
- ProjectFolder: an application's data/config/cache folder, keyed by identity
- RawPath: a literal path string, used as-is

All models are frozen; "moving" a location means building a new value.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

#: Characters that may never appear inside a single subpath segment
SEPARATORS: tuple[str, ...] = ("/", "\\")


class WellKnownFolder(str, Enum):
    """Semantically named folders whose real path varies per platform.

    HOME through VIDEOS are user folders; DATA, CONFIG and CACHE are only
    meaningful for a ProjectFolder.
    """

    HOME = "home"
    DOCUMENTS = "documents"
    DOWNLOADS = "downloads"
    DESKTOP = "desktop"
    PICTURES = "pictures"
    MUSIC = "music"
    VIDEOS = "videos"
    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"

    @property
    def is_project_kind(self) -> bool:
        return self in PROJECT_KINDS


PROJECT_KINDS: frozenset[WellKnownFolder] = frozenset(
    {WellKnownFolder.DATA, WellKnownFolder.CONFIG, WellKnownFolder.CACHE}
)


class PlatformFamily(str, Enum):
    """Platform families with distinct folder conventions."""

    WINDOWS = "windows"
    MACOS = "macos"
    POSIX = "posix"


def validate_segment(segment: str) -> str:
    """Check that one path segment is a plain, non-empty name.

    Raises:
        ValueError: If the segment is empty, a dot entry or holds a separator
    """
    if not segment:
        raise ValueError("path segments must be non-empty")
    if segment in (".", ".."):
        raise ValueError(f"path segment {segment!r} is not a folder name")
    if any(sep in segment for sep in SEPARATORS):
        raise ValueError(f"path segment {segment!r} contains a path separator")
    return segment


def _validate_subpath(subpath: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(validate_segment(segment) for segment in subpath)


class UserFolder(BaseModel):
    """A user's well-known folder, optionally descending into subfolders.

    Attributes:
        kind: Which well-known folder (pictures, downloads, ...)
        subpath: Nested folder names applied in order beneath it
    """

    type: Literal["user"] = "user"
    kind: WellKnownFolder
    subpath: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: WellKnownFolder) -> WellKnownFolder:
        if value.is_project_kind:
            raise ValueError(f"'{value.value}' is a project folder kind")
        return value

    @field_validator("subpath")
    @classmethod
    def validate_subpath(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _validate_subpath(value)

    def join(self, *segments: str) -> "UserFolder":
        """Return a new location nested further by ``segments``."""
        return UserFolder(kind=self.kind, subpath=(*self.subpath, *segments))


class ProjectIdentity(BaseModel):
    """Three-part application identity, e.g. ``com`` / ``Acme`` / ``App``.

    This should match the id the application registers with the platform
    (bundle id on Apple platforms, app id on Linux and Android).
    """

    qualifier: str = ""
    organization: str = ""
    application: str

    model_config = {"frozen": True}

    @field_validator("application")
    @classmethod
    def validate_application(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("application name must not be blank")
        return value

    @field_validator("qualifier", "organization", "application")
    @classmethod
    def validate_no_separator(cls, value: str) -> str:
        if any(sep in value for sep in SEPARATORS):
            raise ValueError(f"identity part {value!r} contains a path separator")
        return value

    @property
    def app_id(self) -> str:
        """Reverse-DNS id, skipping empty parts."""
        parts = (self.qualifier, self.organization, self.application)
        return ".".join(part for part in parts if part)


class ProjectFolder(BaseModel):
    """An application's per-identity folder.

    Attributes:
        kind: DATA, CONFIG or CACHE
        identity: Application identity the folder belongs to
        subpath: Nested folder names applied in order beneath it
    """

    type: Literal["project"] = "project"
    kind: WellKnownFolder = WellKnownFolder.DATA
    identity: ProjectIdentity
    subpath: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: WellKnownFolder) -> WellKnownFolder:
        if not value.is_project_kind:
            raise ValueError(f"'{value.value}' is not a project folder kind")
        return value

    @field_validator("subpath")
    @classmethod
    def validate_subpath(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _validate_subpath(value)

    def join(self, *segments: str) -> "ProjectFolder":
        """Return a new location nested further by ``segments``."""
        return ProjectFolder(
            kind=self.kind,
            identity=self.identity,
            subpath=(*self.subpath, *segments),
        )


class RawPath(BaseModel):
    """A literal platform path.

    Paths differ between machines; prefer UserFolder or ProjectFolder unless
    another library hands you the path.
    """

    type: Literal["raw"] = "raw"
    value: str

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("raw path must not be blank")
        return value

    @property
    def path(self) -> Path:
        return Path(self.value)


LocationSpec = Annotated[
    UserFolder | ProjectFolder | RawPath, Field(discriminator="type")
]


def user_folder(kind: WellKnownFolder | str, *subpath: str) -> UserFolder:
    """Shorthand: ``user_folder("pictures", "Screenshots")``."""
    return UserFolder(kind=WellKnownFolder(kind), subpath=subpath)


def project_folder(
    kind: WellKnownFolder | str,
    qualifier: str,
    organization: str,
    application: str,
    *subpath: str,
) -> ProjectFolder:
    """Shorthand: ``project_folder("data", "com", "Acme", "App", "Filters")``."""
    return ProjectFolder(
        kind=WellKnownFolder(kind),
        identity=ProjectIdentity(
            qualifier=qualifier,
            organization=organization,
            application=application,
        ),
        subpath=subpath,
    )
