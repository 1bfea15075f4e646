"""Filtered, sorted projection of a catalog for table display.

The view never owns entries. It caches the last projection so that ``row`` and
``row_count`` are constant time, and rebuilds it eagerly whenever the catalog
changes or the filter/sort settings change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from biffcat.domain.model import Entry, Provenance

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .catalog import Catalog

log = logging.getLogger(__name__)


class SortKey(StrEnum):
    PROVENANCE = "provenance"
    EXTENSION = "extension"
    NAME = "name"


class SortDirection(StrEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


_KeyFunc: TypeAlias = Callable[[Entry], int | str]

_SORT_KEYS: dict[SortKey, _KeyFunc] = {
    SortKey.PROVENANCE: lambda entry: entry.provenance.display_rank,
    SortKey.EXTENSION: lambda entry: entry.extension,
    SortKey.NAME: lambda entry: entry.name,
}

ALL_KINDS: frozenset[Provenance] = frozenset(Provenance)


class CatalogView:
    """Table model over a ``Catalog``.

    Sorting is stable in both directions: entries with equal keys keep their
    catalog order whether the view is ascending or descending.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        visible_kinds: Iterable[Provenance] = ALL_KINDS,
        sort_key: SortKey = SortKey.NAME,
        direction: SortDirection = SortDirection.ASCENDING,
    ) -> None:
        self.catalog = catalog
        self._visible_kinds = frozenset(visible_kinds)
        self._sort_key = sort_key
        self._direction = direction
        self._rows: tuple[Entry, ...] = ()
        catalog.subscribe(self._on_catalog_changed)
        self.project()

    @property
    def visible_kinds(self) -> frozenset[Provenance]:
        return self._visible_kinds

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    @property
    def direction(self) -> SortDirection:
        return self._direction

    def project(self) -> tuple[Entry, ...]:
        """Recompute and return the filtered, sorted rows."""

        kinds = self._visible_kinds
        candidates = [entry for entry in self.catalog.entries if entry.provenance in kinds]
        self._rows = tuple(
            sorted(
                candidates,
                key=_SORT_KEYS[self._sort_key],
                reverse=self._direction is SortDirection.DESCENDING,
            )
        )
        return self._rows

    def row(self, index: int) -> Entry:
        """Entry at display row ``index``; negative indices are not supported."""
        if index < 0:
            raise IndexError(f"row index out of range: {index}")
        return self._rows[index]

    def row_count(self) -> int:
        return len(self._rows)

    def rows(self, indices: Iterable[int]) -> tuple[Entry, ...]:
        """Entries at the given row indices, e.g. a table selection."""
        return tuple(self.row(index) for index in indices)

    def toggle_visibility(self, kind: Provenance, enabled: bool) -> None:  # noqa: FBT001
        if enabled:
            self._visible_kinds = self._visible_kinds | {kind}
        else:
            self._visible_kinds = self._visible_kinds - {kind}
        self._invalidate()

    def set_sort(self, key: SortKey, direction: SortDirection = SortDirection.ASCENDING) -> None:
        self._sort_key = key
        self._direction = direction
        self._invalidate()

    def click_header(self, key: SortKey) -> None:
        """Clicking the active column flips direction; another column sorts ascending."""
        if key is self._sort_key:
            flipped = (
                SortDirection.ASCENDING
                if self._direction is SortDirection.DESCENDING
                else SortDirection.DESCENDING
            )
            self.set_sort(key, flipped)
        else:
            self.set_sort(key, SortDirection.ASCENDING)

    def close(self) -> None:
        self.catalog.unsubscribe(self._on_catalog_changed)

    def _invalidate(self) -> None:
        self._rows = ()
        self.project()
        log.debug(
            "%s view: %d rows, sort=%s %s",
            self.catalog.name,
            len(self._rows),
            self._sort_key,
            self._direction,
        )

    def _on_catalog_changed(self) -> None:
        self._invalidate()
