"""Two-sided archive editing session.

An edit session holds the entries of one archive on the archive side and the
override-folder files that could go into it on the override side. Moving an
entry from one side to the other runs it through the receiving catalog's
reconciliation rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from biffcat.domain.catalog import Catalog, TransferResult, transfer
from biffcat.domain.model import Entry, Provenance, normalize_name

from .plan import BuildPlan

if TYPE_CHECKING:
    from collections.abc import Iterable

    from biffcat.domain.catalog import ConflictPolicy

log = logging.getLogger(__name__)

# base names are limited to 8 characters
MAX_RESOURCE_BASE_LENGTH: Final[int] = 8

RESOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {
        "2DA", "ACM", "ARE", "BAM", "BCS", "BIO", "BMP", "BS", "CHR", "CHU", "CRE",
        "DLG", "EFF", "GAM", "GLSL", "GUI", "IDS", "INI", "ITM", "LUA", "MENU",
        "MOS", "MVE", "PLT", "PNG", "PRO", "PVRZ", "SPL", "SQL", "SRC", "STO",
        "TIS", "TOH", "TOT", "TTF", "VEF", "VVC", "WAV", "WBM", "WED", "WFX",
        "WMP",
    }
)  # fmt: skip


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceRecord:
    """One resource known to the game installation."""

    name: str
    archive: str | None = None
    override: bool = False
    icon: object | None = None


def is_archivable_name(
    name: str, *, known_extensions: frozenset[str] = RESOURCE_EXTENSIONS
) -> bool:
    """Whether an override file can be stored in an archive under its name.

    The base name (everything before the last dot) may be at most eight
    characters and the extension must be a known resource type.
    """
    base, dot, extension = name.rpartition(".")
    if not dot or not base or len(base) > MAX_RESOURCE_BASE_LENGTH:
        return False
    return extension.upper() in known_extensions


@dataclass(slots=True)
class EditSession:
    """Archive-side and override-side catalogs for one archive."""

    archive_name: str
    archive: Catalog
    override: Catalog
    original_listing: tuple[Entry, ...] = ()
    dirty: bool = field(default=False)

    def move_to_archive(self, entries: Iterable[Entry]) -> TransferResult:
        return self._move(entries, source=self.override, target=self.archive)

    def move_to_override(self, entries: Iterable[Entry]) -> TransferResult:
        return self._move(entries, source=self.archive, target=self.override)

    def build_plan(self) -> BuildPlan:
        return BuildPlan.from_catalogs(
            archive_name=self.archive_name,
            archive=self.archive,
            override=self.override,
            original_listing=self.original_listing,
        )

    def _move(self, entries: Iterable[Entry], *, source: Catalog, target: Catalog) -> TransferResult:
        result = transfer(entries, source=source, target=target)
        if result.changed:
            self.dirty = True
        return result


def stage_session(
    records: Iterable[ResourceRecord],
    *,
    archive: str,
    policy: ConflictPolicy | None = None,
    known_extensions: frozenset[str] = RESOURCE_EXTENSIONS,
) -> EditSession:
    """Sort resource records into the two sides of an edit session.

    Override-only files with a valid archive name become ``NEW`` entries on
    the override side. Resources of ``archive`` become ``ARCHIVED`` entries on
    the archive side, and if an override file exists for one of them an
    ``OVERRIDE`` entry is placed on the override side as well.
    """

    archive_key = normalize_name(archive)
    archive_side = Catalog(policy=policy, name="archive")
    override_side = Catalog(policy=policy, name="override")
    original: list[Entry] = []
    skipped = 0

    for record in records:
        if record.archive is None:
            if record.override and is_archivable_name(
                record.name, known_extensions=known_extensions
            ):
                override_side.insert(
                    Entry(name=record.name, provenance=Provenance.NEW, icon=record.icon)
                )
            else:
                skipped += 1
            continue

        if normalize_name(record.archive) != archive_key:
            skipped += 1
            continue

        archived = Entry(name=record.name, provenance=Provenance.ARCHIVED, icon=record.icon)
        archive_side.insert(archived)
        original.append(archived)
        if record.override:
            override_side.insert(archived.with_provenance(Provenance.OVERRIDE))

    log.info(
        "Staged %s: archive=%d, override=%d, skipped=%d",
        archive,
        len(archive_side),
        len(override_side),
        skipped,
    )
    return EditSession(
        archive_name=archive,
        archive=archive_side,
        override=override_side,
        original_listing=tuple(original),
    )
