"""Creation policy: what happens to a target that may not exist yet.

:class:`CreationMode` is chosen by the caller and applied once when an entity
is built:

- NO: nothing is created; later operations decide what a missing target means
- YES: parent folders and the target are created if absent, never truncated
- AUTO_RENAME_IF_EXISTS: like YES, except an existing target is left alone and
  the first free name ``stem (1).ext``, ``stem (2).ext``, ... is created

Auto-rename uses the backend's atomic create-if-absent as the existence test,
so two processes racing for the same name cannot both win it. Backends
without an atomic create leave a window between the check and the create.
"""

from enum import Enum
from itertools import chain
from pathlib import Path

from waypath.core.constants import RENAME_COUNTER_START, RENAME_SUFFIX_FORMAT
from waypath.core.errors import (
    AccessFailed,
    CreationFailed,
    ExhaustedRenameAttempts,
    PathConflict,
)
from waypath.fs.backend import FileBackend
from waypath.utils.log import get_logger

logger = get_logger("creation")


class CreationMode(str, Enum):
    """Whether a missing target is created when an entity is built."""

    NO = "no"
    YES = "yes"
    AUTO_RENAME_IF_EXISTS = "auto_rename_if_exists"


def rename_candidate(target: Path, counter: int, is_folder: bool) -> Path:
    """Path of the ``counter``-th renamed candidate for ``target``.

    The counter goes before the extension of files (``a (1).txt``) and at the
    end of folders and extension-less names (``Photos (1)``).

    Args:
        target: Original path
        counter: Candidate number, starting at 1
        is_folder: Whether the target is a folder

    Returns:
        Sibling path carrying the counter
    """
    suffix = RENAME_SUFFIX_FORMAT.format(counter=counter)
    if is_folder or not target.suffix:
        return target.with_name(f"{target.name}{suffix}")
    return target.with_name(f"{target.stem}{suffix}{target.suffix}")


def _check_kind(backend: FileBackend, target: Path, is_folder: bool) -> None:
    try:
        mismatch = (
            backend.exists(target) and backend.is_directory(target) != is_folder
        )
    except OSError as e:
        raise CreationFailed(target, str(e)) from e
    if mismatch:
        wanted = "folder" if is_folder else "file"
        raise PathConflict(target, f"expected a {wanted}")


def _ensure_parent(backend: FileBackend, target: Path) -> None:
    parent = target.parent
    try:
        backend.create_directory_recursive(parent)
    except (FileExistsError, NotADirectoryError) as e:
        raise PathConflict(parent, "a file is in the way of the parent folder") from e
    except OSError as e:
        raise CreationFailed(parent, str(e)) from e


def _create(backend: FileBackend, target: Path, is_folder: bool) -> bool:
    """Create the target; True if it was created, False if it was taken."""
    try:
        if is_folder:
            return backend.create_directory_recursive(target)
        return backend.create_file_if_absent(target)
    except (FileExistsError, NotADirectoryError, IsADirectoryError) as e:
        raise PathConflict(target, str(e)) from e
    except OSError as e:
        raise CreationFailed(target, str(e)) from e


def _claim(backend: FileBackend, candidate: Path, is_folder: bool) -> bool:
    # Anything already at the candidate, of either kind, makes it taken
    try:
        return _create(backend, candidate, is_folder)
    except PathConflict:
        return False


def ensure_created(backend: FileBackend, target: Path, is_folder: bool) -> Path:
    """Create ``target`` (and its parents) unless it already exists.

    Raises:
        PathConflict: If the existing target is of the other kind
        CreationFailed: On permission or I/O errors
    """
    _check_kind(backend, target, is_folder)
    _ensure_parent(backend, target)
    if not _create(backend, target, is_folder):
        # Taken meanwhile, possibly by the wrong kind of entry
        _check_kind(backend, target, is_folder)
    return target


def create_renamed(
    backend: FileBackend,
    target: Path,
    is_folder: bool,
    max_attempts: int,
) -> Path:
    """Create ``target``, or the first free renamed candidate if it exists.

    Raises:
        ExhaustedRenameAttempts: If ``max_attempts`` candidates are all taken
        PathConflict: If the parent folder cannot be a folder
        CreationFailed: On permission or I/O errors
    """
    _ensure_parent(backend, target)
    if _claim(backend, target, is_folder):
        return target

    for counter in range(RENAME_COUNTER_START, RENAME_COUNTER_START + max_attempts):
        candidate = rename_candidate(target, counter, is_folder)
        if _claim(backend, candidate, is_folder):
            logger.info(
                "creation.renamed",
                original=str(target),
                path=str(candidate),
                attempts=counter,
            )
            return candidate

    raise ExhaustedRenameAttempts(target, max_attempts)


def suggest_rename(
    backend: FileBackend,
    target: Path,
    is_folder: bool,
    max_attempts: int,
) -> Path:
    """Path that auto-rename would pick right now, without creating anything.

    Returns ``target`` itself when it is free.

    Raises:
        ExhaustedRenameAttempts: If ``max_attempts`` candidates are all taken
        AccessFailed: If a candidate cannot be checked
    """
    counters = range(RENAME_COUNTER_START, RENAME_COUNTER_START + max_attempts)
    candidates = chain(
        [target], (rename_candidate(target, counter, is_folder) for counter in counters)
    )
    for candidate in candidates:
        try:
            taken = backend.exists(candidate)
        except OSError as e:
            raise AccessFailed(candidate, str(e)) from e
        if not taken:
            return candidate
    raise ExhaustedRenameAttempts(target, max_attempts)


def apply_creation_policy(
    backend: FileBackend,
    mode: CreationMode,
    target: Path,
    is_folder: bool,
    *,
    max_attempts: int,
) -> Path:
    """Apply ``mode`` to ``target`` and return the entity's final path.

    Args:
        backend: Backend performing the I/O
        mode: Creation mode chosen by the caller
        target: Resolved path
        is_folder: Whether the target denotes a folder
        max_attempts: Bound for the auto-rename search

    Returns:
        ``target``, or the renamed candidate under AUTO_RENAME_IF_EXISTS
    """
    if mode is CreationMode.NO:
        return target
    if mode is CreationMode.YES:
        return ensure_created(backend, target, is_folder)
    return create_renamed(backend, target, is_folder, max_attempts)
