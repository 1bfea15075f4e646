"""Save plan for an edit session.

Computing the plan is pure: it only reads the two catalogs. Writing the
archive, touching the override folder and rewriting the key file are left to
whoever executes the plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from biffcat.domain.model import Entry, Provenance

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from biffcat.domain.catalog import Catalog


@dataclass(frozen=True, slots=True)
class PlanStep:
    label: str
    entries: tuple[Entry, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class BuildPlan:
    """What saving an edited archive has to do, in execution order.

    ``keep_in_archive`` entries are copied from the old archive ignoring any
    override, ``add_to_archive`` entries are read from their current source.
    """

    archive_name: str
    unregister: tuple[Entry, ...]
    extract: tuple[Entry, ...]
    keep_in_archive: tuple[Entry, ...]
    add_to_archive: tuple[Entry, ...]
    delete_from_override: tuple[Entry, ...]
    register_as_override: tuple[Entry, ...]

    @classmethod
    def from_catalogs(
        cls,
        *,
        archive_name: str,
        archive: Catalog,
        override: Catalog,
        original_listing: Iterable[Entry],
    ) -> BuildPlan:
        original = tuple(original_listing)
        keep = archive.query_by_provenance(Provenance.ARCHIVED)
        extract = override.query_by_provenance(Provenance.ARCHIVED)
        added = archive.query_by_provenance(Provenance.NEW) + archive.query_by_provenance(
            Provenance.OVERRIDE
        )
        accounted = {id(entry) for entry in keep + extract}
        return cls(
            archive_name=archive_name,
            unregister=original,
            extract=extract,
            keep_in_archive=keep,
            add_to_archive=added,
            delete_from_override=added,
            register_as_override=tuple(entry for entry in original if id(entry) not in accounted),
        )

    @property
    def archive_contents(self) -> tuple[Entry, ...]:
        return self.keep_in_archive + self.add_to_archive

    def steps(self) -> Iterator[PlanStep]:
        yield PlanStep("Remove old entries", self.unregister)
        yield PlanStep("Extract files", self.extract)
        yield PlanStep(f"Write new {self.archive_name}", self.archive_contents)
        yield PlanStep("Remove old files", self.delete_from_override)
        yield PlanStep("Add new files", self.register_as_override)
        yield PlanStep("Write new keyfile", ())
