"""Batch context: a scoped, alias-addressable group of entities.

A batch is declared up front, resolved and created eagerly, and then handed
to a unit of work:

    def work(batch: BatchContext) -> None:
        batch["log"].append(b"started\\n")
        batch[0].launch_with_default_app()

    using(
        [
            EntryRequest(user_folder("pictures"), "1.png"),
            EntryRequest(user_folder("downloads"), "log.txt", alias="log"),
        ],
        work,
    )

Construction is fail-fast: the first entry that cannot be resolved or
created aborts the batch. Entries created before the failure stay on disk;
there is no rollback. Diagnostics noted during the unit of work are surfaced
through structlog and a rich console when the scope ends, whether the work
succeeded or raised. A context belongs to one thread of control.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, TypeVar

from rich.console import Console
from rich.text import Text

from waypath.core.config import WaypathSettings
from waypath.core.errors import (
    AliasNotFound,
    DuplicateAlias,
    IndexOutOfRange,
    WaypathError,
)
from waypath.fs.backend import FileBackend
from waypath.fs.creation import CreationMode
from waypath.fs.entities import (
    Document,
    FileSystemEntity,
    Folder,
    Location,
    Project,
    RawPathEntity,
)
from waypath.locations.models import ProjectFolder, RawPath
from waypath.utils.log import get_logger

__all__ = [
    "AliasedEntry",
    "BatchContext",
    "Diagnostic",
    "EntryRequest",
    "using",
]

T = TypeVar("T")

#: Keys structlog and the diagnostic itself already use
RESERVED_FIELDS = frozenset({"event", "message"})

logger = get_logger("batch")


@dataclass(frozen=True)
class EntryRequest:
    """Declaration of one batch entry.

    With a ``name`` the entry is a Document inside ``location``; without one
    it is the location itself (Folder, Project or RawPathEntity).

    Attributes:
        location: Logical location
        name: File name inside the location, or None for the location itself
        mode: Creation mode applied when the batch is built
        alias: Optional alias for lookup; unique within a batch
    """

    location: Location
    name: str | None = None
    mode: CreationMode = CreationMode.NO
    alias: str | None = None

    @classmethod
    def coerce(cls, item: EntryRequest | tuple[Any, ...]) -> EntryRequest:
        """Accept an EntryRequest or an ``(alias, location, name, mode)`` tuple."""
        if isinstance(item, EntryRequest):
            return item
        alias, location, name, mode = item
        return cls(location=location, name=name, mode=CreationMode(mode), alias=alias)

    def materialize(
        self,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
    ) -> FileSystemEntity:
        """Resolve the request and apply its creation mode."""
        if self.name is not None:
            return Document.at(
                self.location, self.name, self.mode, backend=backend, settings=settings
            )
        if isinstance(self.location, ProjectFolder):
            return Project.at(self.location, self.mode, backend=backend, settings=settings)
        if isinstance(self.location, RawPath):
            return RawPathEntity.at(
                self.location.value, self.mode, backend=backend, settings=settings
            )
        return Folder.at(self.location, self.mode, backend=backend, settings=settings)


@dataclass
class AliasedEntry:
    """One slot of a batch; assign ``entity`` to replace it in place."""

    alias: str | None
    entity: FileSystemEntity


@dataclass(frozen=True)
class Diagnostic:
    """Something worth reporting once the unit of work is over."""

    message: str
    level: str = "warning"
    fields: dict[str, Any] = field(default_factory=dict)


def _check_unique(aliases: Iterable[str | None]) -> None:
    seen: set[str] = set()
    for alias in aliases:
        if alias is None:
            continue
        if alias in seen:
            raise DuplicateAlias(alias)
        seen.add(alias)


class BatchContext:
    """Ordered entities addressable by position or alias.

    ``batch[0]`` and ``batch["alias"]`` look entries up; assigning to either
    replaces the entity. Iterating yields ``(alias or "", entity)`` pairs in
    insertion order; :meth:`entries` yields the mutable slots themselves.
    """

    def __init__(
        self,
        entries: Iterable[AliasedEntry] = (),
        *,
        console: Console | None = None,
    ) -> None:
        self._entries: list[AliasedEntry] = list(entries)
        _check_unique(entry.alias for entry in self._entries)
        self._console = console or Console(stderr=True)
        self._diagnostics: list[Diagnostic] = []

    @classmethod
    def build(
        cls,
        requests: Iterable[EntryRequest | tuple[Any, ...]],
        *,
        backend: FileBackend | None = None,
        settings: WaypathSettings | None = None,
        console: Console | None = None,
    ) -> BatchContext:
        """Resolve and create every requested entry, in order.

        Aliases are checked before any filesystem access.

        Raises:
            DuplicateAlias: If two requests share an alias
            WaypathError: The first resolution or creation failure
        """
        normalized = [EntryRequest.coerce(item) for item in requests]
        _check_unique(request.alias for request in normalized)

        entries: list[AliasedEntry] = []
        for index, request in enumerate(normalized):
            try:
                entity = request.materialize(backend, settings)
            except WaypathError as e:
                logger.error(
                    "batch.construction_failed",
                    index=index,
                    alias=request.alias,
                    built=len(entries),
                    error=e.kind,
                )
                raise
            entries.append(AliasedEntry(request.alias, entity))

        logger.debug("batch.built", size=len(entries))
        return cls(entries, console=console)

    def __repr__(self) -> str:
        return f"BatchContext(size={len(self._entries)}, aliases={self.aliases!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, FileSystemEntity]]:
        for entry in self._entries:
            yield entry.alias or "", entry.entity

    def __contains__(self, alias: object) -> bool:
        return any(entry.alias == alias for entry in self._entries if entry.alias)

    def _slot(self, key: int | str) -> AliasedEntry:
        if isinstance(key, str):
            for entry in self._entries:
                if entry.alias == key:
                    return entry
            raise AliasNotFound(key)
        if not 0 <= key < len(self._entries):
            raise IndexOutOfRange(key, len(self._entries))
        return self._entries[key]

    def __getitem__(self, key: int | str) -> FileSystemEntity:
        return self._slot(key).entity

    def __setitem__(self, key: int | str, entity: FileSystemEntity) -> None:
        self._slot(key).entity = entity

    @property
    def aliases(self) -> list[str]:
        return [entry.alias for entry in self._entries if entry.alias is not None]

    def entries(self) -> Iterator[AliasedEntry]:
        """Mutable pass over the slots in insertion order."""
        yield from self._entries

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def note(
        self, message: str, /, *, level: str = "warning", **fields: Any
    ) -> None:
        """Record a diagnostic to surface when the scope ends.

        Raises:
            ValueError: If ``fields`` uses a reserved key (event, message)
        """
        reserved = RESERVED_FIELDS.intersection(fields)
        if reserved:
            raise ValueError(f"reserved diagnostic field(s): {sorted(reserved)}")
        self._diagnostics.append(Diagnostic(message, level, fields))

    def flush(self) -> list[Diagnostic]:
        """Surface and clear accumulated diagnostics.

        Returns:
            The diagnostics that were surfaced
        """
        flushed, self._diagnostics = self._diagnostics, []
        for diagnostic in flushed:
            log = getattr(logger, diagnostic.level, logger.warning)
            log("batch.diagnostic", message=diagnostic.message, **diagnostic.fields)
            self._console.print(
                Text.assemble(("waypath ", "bold yellow"), diagnostic.message),
                highlight=False,
            )
        return flushed

    def __enter__(self) -> BatchContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_val is not None:
            details = (
                exc_val.to_dict()
                if isinstance(exc_val, WaypathError)
                else {"error": exc_type.__name__ if exc_type else "unknown"}
            )
            for key in RESERVED_FIELDS:
                details.pop(key, None)
            self.note(f"unit of work failed: {exc_val}", level="error", **details)
        self.flush()

    def run(self, work: Callable[[BatchContext], T]) -> T:
        """Run ``work`` with this context, then surface diagnostics.

        Exceptions raised by ``work`` propagate after diagnostics are flushed.
        """
        with self:
            return work(self)


def using(
    requests: Iterable[EntryRequest | tuple[Any, ...]],
    work: Callable[[BatchContext], T],
    *,
    backend: FileBackend | None = None,
    settings: WaypathSettings | None = None,
    console: Console | None = None,
) -> T:
    """Build a batch from ``requests`` and run ``work`` inside it."""
    context = BatchContext.build(
        requests, backend=backend, settings=settings, console=console
    )
    return context.run(work)
