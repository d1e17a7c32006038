"""Custom exceptions for waypath.

This module defines the typed exceptions raised while resolving locations,
materializing entities and operating on them. Every error carries the path
or key it concerns so callers can report it without parsing messages.
"""

from pathlib import Path
from typing import Any


class WaypathError(Exception):
    """Base exception for all waypath errors.

    Catch this to handle every failure the library can surface.
    """

    kind = "waypath_error"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary for diagnostics.

        Returns:
            Dictionary with the error kind and message
        """
        return {"error": self.kind, "message": str(self)}


class LocationUnavailable(WaypathError):
    """Raised when the platform cannot supply a requested well-known folder.

    Attributes:
        folder: Name of the well-known folder (e.g. 'downloads')
        reason: Human-readable reason reported by the platform lookup
    """

    kind = "location_unavailable"

    def __init__(self, folder: str, reason: str | None = None) -> None:
        self.folder = folder
        self.reason = reason

        message = f"Location '{folder}' is not available on this platform"
        if reason:
            message += f": {reason}"

        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["folder"] = self.folder
        if self.reason is not None:
            result["reason"] = self.reason
        return result

    def __repr__(self) -> str:
        return f"LocationUnavailable(folder={self.folder!r}, reason={self.reason!r})"


class PathError(WaypathError):
    """Base class for errors tied to one concrete path.

    Attributes:
        path: The concrete path the operation failed on
        reason: Optional detail (usually the backend's OSError text)
    """

    kind = "path_error"
    summary = "Path operation failed"

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason

        message = f"{self.summary}: {self.path}"
        if reason:
            message += f" ({reason})"

        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["path"] = str(self.path)
        if self.reason is not None:
            result["reason"] = self.reason
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r}, reason={self.reason!r})"


class PathConflict(PathError):
    """Raised when a directory exists where a file is requested, or vice versa."""

    kind = "path_conflict"
    summary = "File/folder type conflict at"


class CreationFailed(PathError):
    """Raised when the backend fails to create a file or folder."""

    kind = "creation_failed"
    summary = "Could not create"


class NotAFile(PathError):
    """Raised when a file operation targets a folder."""

    kind = "not_a_file"
    summary = "Not a file"


class NotFound(PathError):
    """Raised when an operation requires a file that does not exist."""

    kind = "not_found"
    summary = "File not found"


class AccessFailed(PathError):
    """Raised when an existing file cannot be opened, read or written."""

    kind = "access_failed"
    summary = "Could not access"


class LaunchFailed(PathError):
    """Raised when the default handler for a path could not be invoked."""

    kind = "launch_failed"
    summary = "Could not launch with default app"


class ExhaustedRenameAttempts(PathError):
    """Raised when auto-rename could not find a free name within its bound.

    Attributes:
        attempts: Number of candidate names that were tried
    """

    kind = "exhausted_rename_attempts"
    summary = "No free name found for"

    def __init__(self, path: Path | str, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(path, f"tried {attempts} candidates")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["attempts"] = self.attempts
        return result

    def __repr__(self) -> str:
        return (
            f"ExhaustedRenameAttempts(path={str(self.path)!r}, "
            f"attempts={self.attempts})"
        )


class AliasNotFound(WaypathError, KeyError):
    """Raised when a batch lookup names an alias that is not present.

    Attributes:
        alias: The alias that was looked up
    """

    kind = "alias_not_found"

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"No entry with alias '{alias}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["alias"] = self.alias
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alias={self.alias!r})"


class DuplicateAlias(AliasNotFound):
    """Raised when a batch is declared with the same alias more than once.

    Part of the alias error family so one handler covers both lookup misses
    and ambiguous declarations.
    """

    kind = "duplicate_alias"

    def __init__(self, alias: str) -> None:
        self.alias = alias
        WaypathError.__init__(self, f"Alias '{alias}' is declared more than once")


class IndexOutOfRange(WaypathError, IndexError):
    """Raised when a batch lookup uses a position outside the batch.

    Attributes:
        index: The requested position
        size: Number of entries in the batch
    """

    kind = "index_out_of_range"

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for batch of {size} entries")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["index"] = self.index
        result["size"] = self.size
        return result

    def __repr__(self) -> str:
        return f"IndexOutOfRange(index={self.index}, size={self.size})"
