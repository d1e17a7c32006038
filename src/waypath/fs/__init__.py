"""Filesystem layer: backends, path resolution, creation policy and entities.

This module turns logical locations into concrete paths, decides whether a
missing target is created (optionally under a non-colliding name), and
exposes the resulting files and folders through one capability interface.
"""

from waypath.fs.backend import (
    AccessMode,
    FileBackend,
    LocalFileBackend,
    get_default_backend,
)
from waypath.fs.creation import CreationMode, apply_creation_policy, rename_candidate
from waypath.fs.entities import (
    Document,
    FileSystemEntity,
    Folder,
    Lines,
    Project,
    RawPathEntity,
)
from waypath.fs.resolver import PathResolver

__all__ = [
    "AccessMode",
    "CreationMode",
    "Document",
    "FileBackend",
    "FileSystemEntity",
    "Folder",
    "Lines",
    "LocalFileBackend",
    "PathResolver",
    "Project",
    "RawPathEntity",
    "apply_creation_policy",
    "get_default_backend",
    "rename_candidate",
]
