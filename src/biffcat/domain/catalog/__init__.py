"""Provenance-aware entry catalog and its table projection."""

from __future__ import annotations

from .catalog import Catalog
from .contracts import CatalogListener, ConflictChoice, InsertOutcome
from .errors import (
    CatalogError,
    DuplicateArchivedEntryError,
    DuplicateEntryError,
    DuplicateOverrideEntryError,
    ReentrantCatalogMutationError,
)
from .policy import (
    ConflictPolicy,
    ScriptedConflictPolicy,
    abort,
    constant_policy,
    keep_current,
    overwrite_with_incoming,
)
from .transfer import TransferResult, transfer
from .view import ALL_KINDS, CatalogView, SortDirection, SortKey

__all__ = [
    "ALL_KINDS",
    "Catalog",
    "CatalogError",
    "CatalogListener",
    "CatalogView",
    "ConflictChoice",
    "ConflictPolicy",
    "DuplicateArchivedEntryError",
    "DuplicateEntryError",
    "DuplicateOverrideEntryError",
    "InsertOutcome",
    "ReentrantCatalogMutationError",
    "ScriptedConflictPolicy",
    "SortDirection",
    "SortKey",
    "TransferResult",
    "abort",
    "constant_policy",
    "keep_current",
    "overwrite_with_incoming",
    "transfer",
]
