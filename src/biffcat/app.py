"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from biffcat.adapters.manifest import load_manifest, to_resource_records
from biffcat.config import ViewConfig, get_editor_config, get_view_config
from biffcat.domain.catalog import CatalogView
from biffcat.domain.model import normalize_name
from biffcat.domain.session import EditSession, stage_session

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from biffcat.domain.catalog import Catalog, ConflictPolicy, TransferResult
    from biffcat.domain.model import Entry
    from biffcat.domain.plan import BuildPlan


log = getLogger(__name__)


class UnknownEntryError(LookupError):
    """Raised when a requested resource name is not visible in a catalog."""


def open_session(
    *,
    manifest_path: Path | None = None,
    archive: str | None = None,
    policy: ConflictPolicy | None = None,
) -> EditSession:
    """Load a resource manifest and stage an edit session for one archive."""

    config = get_editor_config(archive=archive, manifest_path=manifest_path)
    if config.manifest_path is None:
        raise ValueError("No manifest given (pass --manifest or set BIFFCAT_MANIFEST)")

    log.info("Opening %s from manifest %s", config.archive, config.manifest_path)
    payload = load_manifest(config.manifest_path)
    return stage_session(to_resource_records(payload), archive=config.archive, policy=policy)


def open_views(
    session: EditSession,
    *,
    config: ViewConfig | None = None,
) -> tuple[CatalogView, CatalogView]:
    """Build the archive-side and override-side table views of a session."""

    effective = config or get_view_config()

    def view_of(catalog: Catalog) -> CatalogView:
        return CatalogView(
            catalog,
            visible_kinds=effective.visible_kinds,
            sort_key=effective.sort_key,
            direction=effective.direction,
        )

    return view_of(session.archive), view_of(session.override)


def find_entries(catalog: Catalog, names: Iterable[str]) -> list[Entry]:
    """Resolve resource names to visible entries, first match per name."""

    found: list[Entry] = []
    for name in names:
        key = normalize_name(name)
        match = next((entry for entry in catalog if entry.key == key), None)
        if match is None:
            raise UnknownEntryError(f"{name} is not listed in {catalog.name}")
        found.append(match)
    return found


def apply_moves(
    session: EditSession,
    *,
    to_archive: Iterable[str] = (),
    to_override: Iterable[str] = (),
) -> list[TransferResult]:
    """Move named entries between the two sides of ``session``."""

    results: list[TransferResult] = []
    archive_names = list(to_archive)
    override_names = list(to_override)
    if archive_names:
        results.append(session.move_to_archive(find_entries(session.override, archive_names)))
    if override_names:
        results.append(session.move_to_override(find_entries(session.archive, override_names)))
    return results


def plan_session(
    session: EditSession,
    *,
    to_archive: Iterable[str] = (),
    to_override: Iterable[str] = (),
) -> BuildPlan:
    """Apply moves and compute the resulting save plan."""

    results = apply_moves(session, to_archive=to_archive, to_override=to_override)
    for result in results:
        if result.cancelled:
            log.warning(
                "Move cancelled, %d entries left in place: %s",
                len(result.pending),
                ", ".join(entry.name for entry in result.pending),
            )
    plan = session.build_plan()
    log.info(
        "Plan for %s: keep=%d, add=%d, extract=%d",
        session.archive_name,
        len(plan.keep_in_archive),
        len(plan.add_to_archive),
        len(plan.extract),
    )
    return plan
