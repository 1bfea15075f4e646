"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Provenance(StrEnum):
    """Where an entry's content comes from."""

    ARCHIVED = "archived"
    OVERRIDE = "override"
    NEW = "new"

    @property
    def display_rank(self) -> int:
        return _DISPLAY_RANK[self]


# display grouping only: archived, then new, then override
_DISPLAY_RANK: dict[Provenance, int] = {
    Provenance.ARCHIVED: 0,
    Provenance.NEW: 1,
    Provenance.OVERRIDE: 2,
}
