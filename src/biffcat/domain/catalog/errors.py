"""Catalog error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from biffcat.domain.model import Provenance

if TYPE_CHECKING:
    from biffcat.domain.model import Entry


class CatalogError(Exception):
    """Base class for catalog errors."""


class DuplicateEntryError(CatalogError, ValueError):
    """Raised when an entry collides with a visible entry of the same provenance.

    Archive enumeration and override scans never report one name twice, so a
    collision like this points at a bug in whatever fed the catalog.
    """

    def __init__(self, *, incoming: Entry, current: Entry) -> None:
        self.incoming = incoming
        self.current = current
        super().__init__(
            f"{incoming.provenance.capitalize()} entry {incoming.name!r} collides with "
            f"{current.provenance} entry {current.name!r}"
        )


class DuplicateArchivedEntryError(DuplicateEntryError):
    """Two archived entries were inserted for the same name."""


class DuplicateOverrideEntryError(DuplicateEntryError):
    """Two override entries were inserted for the same name."""


class ReentrantCatalogMutationError(CatalogError, RuntimeError):
    """Raised when a conflict policy tries to mutate the catalog that consulted it."""


def duplicate_entry_error(*, incoming: Entry, current: Entry) -> DuplicateEntryError:
    if incoming.provenance is Provenance.OVERRIDE:
        return DuplicateOverrideEntryError(incoming=incoming, current=current)
    return DuplicateArchivedEntryError(incoming=incoming, current=current)
