"""Shared catalog contract components.

This module intentionally holds only the outcome/decision enums and the
listener alias shared by the catalog, its policies and its views.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TypeAlias


class InsertOutcome(StrEnum):
    """Result of ``Catalog.insert``."""

    INSERTED = "inserted"
    # conflict policy kept the current entry
    REJECTED = "rejected"
    # conflict policy aborted; the caller keeps its pending entry
    CANCELLED = "cancelled"

    @property
    def consumed(self) -> bool:
        """Whether the caller should consider the offered entry handled."""
        return self is not InsertOutcome.CANCELLED


class ConflictChoice(StrEnum):
    """Decision returned by a conflict policy for archived-vs-override collisions."""

    KEEP_CURRENT = "keep_current"
    OVERWRITE_WITH_INCOMING = "overwrite_with_incoming"
    ABORT = "abort"


CatalogListener: TypeAlias = Callable[[], None]
