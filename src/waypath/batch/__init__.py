"""Scoped batches of entities addressable by alias or position."""

from waypath.batch.context import (
    AliasedEntry,
    BatchContext,
    Diagnostic,
    EntryRequest,
    using,
)

__all__ = [
    "AliasedEntry",
    "BatchContext",
    "Diagnostic",
    "EntryRequest",
    "using",
]
