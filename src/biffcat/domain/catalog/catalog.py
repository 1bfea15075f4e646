"""Provenance-aware catalog of archive entries.

The catalog keeps at most one visible archived-or-override entry per
case-insensitive name. When an override replaces an archived entry the
archived entry is parked in the shadow store and comes back once the override
is removed. ``NEW`` entries sit outside all of this: they are never deduplicated,
never shadow anything and are never shadowed.

Visible entries keep catalog order (insertion order). A replacement takes the
slot of the entry it replaces, so shadowing and restoring round-trips the
visible order exactly.

The conflict policy is called synchronously from ``insert`` and must not call
back into the same catalog; doing so raises ``ReentrantCatalogMutationError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from biffcat.domain.model import Provenance, normalize_name

from .contracts import ConflictChoice, InsertOutcome
from .errors import ReentrantCatalogMutationError, duplicate_entry_error
from .policy import abort

if TYPE_CHECKING:
    from collections.abc import Iterator

    from biffcat.domain.model import Entry

    from .contracts import CatalogListener
    from .policy import ConflictPolicy

log = logging.getLogger(__name__)


class Catalog:
    """Visible entries plus a shadow store keyed by normalized name."""

    def __init__(self, *, policy: ConflictPolicy | None = None, name: str = "catalog") -> None:
        self.name = name
        self.policy: ConflictPolicy = policy or abort
        self._visible: list[Entry] = []
        self._shadow: dict[str, Entry] = {}
        self._listeners: list[CatalogListener] = []
        self._consulting_policy = False

    def __repr__(self) -> str:
        return (
            f"Catalog(name={self.name!r}, visible={len(self._visible)}, "
            f"shadowed={len(self._shadow)})"
        )

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._visible)

    def __len__(self) -> int:
        return len(self._visible)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._visible))

    def __contains__(self, entry: object) -> bool:
        return any(visible is entry for visible in self._visible)

    def is_empty(self) -> bool:
        return not self._visible

    def query_by_provenance(self, kind: Provenance) -> tuple[Entry, ...]:
        """All visible entries of ``kind`` in catalog order."""
        return tuple(entry for entry in self._visible if entry.provenance is kind)

    def shadowed(self, name: str) -> Entry | None:
        return self._shadow.get(normalize_name(name))

    def subscribe(self, listener: CatalogListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: CatalogListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in tuple(self._listeners):
            listener()

    def insert(self, entry: Entry) -> InsertOutcome:
        """Insert ``entry`` applying the reconciliation rules for its provenance.

        Raises ``DuplicateArchivedEntryError`` (or ``DuplicateOverrideEntryError``)
        when the entry meets a visible entry of the same name and provenance.
        """

        self._assert_not_consulting()
        if entry.provenance is Provenance.NEW:
            self._visible.append(entry)
            log.debug("%s: appended new entry %s", self.name, entry.name)
            self._notify()
            return InsertOutcome.INSERTED

        index = self._find_visible(entry.key)
        if index is None:
            self._visible.append(entry)
            log.debug("%s: appended %s entry %s", self.name, entry.provenance, entry.name)
            self._notify()
            return InsertOutcome.INSERTED

        existing = self._visible[index]
        if entry.provenance is existing.provenance:
            raise duplicate_entry_error(incoming=entry, current=existing)

        if entry.provenance is Provenance.OVERRIDE:
            self._shadow[existing.key] = existing
            self._visible[index] = entry
            log.debug(
                "%s: override %s shadows %s entry", self.name, entry.name, existing.provenance
            )
            self._notify()
            return InsertOutcome.INSERTED

        return self._resolve_conflict(entry, existing, index)

    def remove(self, entry: Entry) -> None:
        """Remove ``entry`` if visible; absent entries are ignored.

        Removing an override restores the archived entry it shadowed, if any.
        """

        self._assert_not_consulting()
        index = self._index_of(entry)
        if index is None:
            log.debug("%s: ignoring removal of absent entry %s", self.name, entry.name)
            return

        restored = None
        if entry.provenance is Provenance.OVERRIDE:
            restored = self._shadow.pop(entry.key, None)

        if restored is None:
            del self._visible[index]
            log.debug("%s: removed %s entry %s", self.name, entry.provenance, entry.name)
        else:
            self._visible[index] = restored
            log.debug("%s: removed override %s, restored shadowed entry", self.name, entry.name)
        self._notify()

    def clear(self) -> None:
        """Drop every visible and shadowed entry."""

        self._assert_not_consulting()
        self._visible.clear()
        self._shadow.clear()
        self._notify()

    def _resolve_conflict(self, entry: Entry, existing: Entry, index: int) -> InsertOutcome:
        self._consulting_policy = True
        try:
            choice = self.policy(entry, existing)
        finally:
            self._consulting_policy = False

        log.info("%s: conflict on %s resolved as %s", self.name, entry.name, choice)
        if choice is ConflictChoice.KEEP_CURRENT:
            return InsertOutcome.REJECTED
        if choice is ConflictChoice.ABORT:
            return InsertOutcome.CANCELLED
        if choice is ConflictChoice.OVERWRITE_WITH_INCOMING:
            # the discarded override can no longer restore what it shadowed
            self._shadow.pop(existing.key, None)
            self._visible[index] = entry
            self._notify()
            return InsertOutcome.INSERTED
        raise ValueError(f"Unsupported conflict choice: {choice!r}")

    def _find_visible(self, key: str) -> int | None:
        for index, visible in enumerate(self._visible):
            if visible.provenance is not Provenance.NEW and visible.key == key:
                return index
        return None

    def _index_of(self, entry: Entry) -> int | None:
        for index, visible in enumerate(self._visible):
            if visible is entry:
                return index
        return None

    def _assert_not_consulting(self) -> None:
        if self._consulting_policy:
            raise ReentrantCatalogMutationError(
                f"{self.name}: conflict policy must not mutate the catalog it was called from"
            )
