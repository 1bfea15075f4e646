"""Catalog entries.

An entry pairs an immutable resource identity with the provenance it was
inserted under. The catalog only classifies and arranges entries; it never
creates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from biffcat.domain.model.enums import Provenance


def new_id() -> UUID:
    return uuid4()


def normalize_name(name: str) -> str:
    """Return the case-insensitive dedup key for a resource name."""

    return name.casefold()


def extension_of(name: str) -> str:
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


@dataclass(frozen=True, eq=False, kw_only=True)
class Entry:
    """One named resource as shown in an archive editor table.

    Entries compare by identity: two entries with the same name and provenance
    are still distinct rows.
    """

    name: str
    provenance: Provenance
    icon: object | None = field(default=None, repr=False)
    id: UUID = field(default_factory=new_id, repr=False)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("entry name must not be blank")

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    def with_provenance(self, provenance: Provenance) -> Entry:
        """Build a fresh entry for the same resource under another provenance."""
        return Entry(name=self.name, provenance=provenance, icon=self.icon)

    def __str__(self) -> str:
        return self.name
