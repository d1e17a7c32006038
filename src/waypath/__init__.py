"""waypath: semantic file and folder locations with one capability interface.

Declare *where* something lives (the user's Pictures folder, an application's
data folder, a literal path), let waypath resolve it for the current
platform, and operate on the result through the same methods whatever it is.
"""

from waypath.batch import AliasedEntry, BatchContext, EntryRequest, using
from waypath.core.config import WaypathSettings, get_settings, load_settings
from waypath.core.errors import (
    AccessFailed,
    AliasNotFound,
    CreationFailed,
    DuplicateAlias,
    ExhaustedRenameAttempts,
    IndexOutOfRange,
    LaunchFailed,
    LocationUnavailable,
    NotAFile,
    NotFound,
    PathConflict,
    WaypathError,
)
from waypath.fs import (
    AccessMode,
    CreationMode,
    Document,
    FileBackend,
    FileSystemEntity,
    Folder,
    Lines,
    LocalFileBackend,
    PathResolver,
    Project,
    RawPathEntity,
)
from waypath.locations import (
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
from waypath.utils.log import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "AccessFailed",
    "AccessMode",
    "AliasNotFound",
    "AliasedEntry",
    "BatchContext",
    "CreationFailed",
    "CreationMode",
    "Document",
    "DuplicateAlias",
    "EntryRequest",
    "ExhaustedRenameAttempts",
    "FileBackend",
    "FileSystemEntity",
    "Folder",
    "IndexOutOfRange",
    "LaunchFailed",
    "Lines",
    "LocalFileBackend",
    "LocationSpec",
    "LocationUnavailable",
    "NotAFile",
    "NotFound",
    "PathConflict",
    "PathResolver",
    "PlatformFamily",
    "Project",
    "ProjectFolder",
    "ProjectIdentity",
    "RawPath",
    "RawPathEntity",
    "UserFolder",
    "WaypathError",
    "WaypathSettings",
    "WellKnownFolder",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
    "project_folder",
    "user_folder",
    "using",
]
