from __future__ import annotations

from biffcat.domain.catalog import ConflictChoice, ScriptedConflictPolicy
from biffcat.domain.session import ResourceRecord, stage_session

RECORDS = [
    ResourceRecord(name="SW1H01.ITM", archive="items.bif"),
    ResourceRecord(name="SW1H02.ITM", archive="items.bif", override=True),
    ResourceRecord(name="AX1H01.ITM", archive="items.bif"),
    ResourceRecord(name="MYSWORD.ITM", override=True),
]


def names(entries: tuple[object, ...]) -> list[str]:
    return [str(entry) for entry in entries]


def test_untouched_session_rewrites_archive_as_is() -> None:
    session = stage_session(RECORDS, archive="items.bif")

    plan = session.build_plan()

    assert plan.unregister == session.original_listing
    assert names(plan.keep_in_archive) == ["SW1H01.ITM", "SW1H02.ITM", "AX1H01.ITM"]
    assert plan.add_to_archive == ()
    assert plan.extract == ()
    assert plan.delete_from_override == ()
    assert plan.register_as_override == ()


def test_plan_after_moves() -> None:
    session = stage_session(RECORDS, archive="items.bif")
    updated, fresh = session.override.entries
    axe = session.archive.entries[2]

    session.move_to_archive([updated, fresh])
    session.move_to_override([axe])
    plan = session.build_plan()

    assert names(plan.keep_in_archive) == ["SW1H01.ITM"]
    assert plan.add_to_archive == (fresh, updated)
    assert plan.delete_from_override == plan.add_to_archive
    assert plan.extract == (axe,)
    # shadowed by the override that now lives in the archive
    assert names(plan.register_as_override) == ["SW1H02.ITM"]
    assert plan.archive_contents == plan.keep_in_archive + plan.add_to_archive


def test_overwritten_override_drops_out_of_plan() -> None:
    policy = ScriptedConflictPolicy.of([ConflictChoice.OVERWRITE_WITH_INCOMING])
    session = stage_session(RECORDS, archive="items.bif", policy=policy)
    sword = session.archive.entries[1]

    session.move_to_override([sword])
    plan = session.build_plan()

    assert plan.extract == (sword,)
    assert sword not in plan.keep_in_archive
    assert plan.register_as_override == ()


def test_steps_are_ordered_and_labelled() -> None:
    plan = stage_session(RECORDS, archive="items.bif").build_plan()

    labels = [step.label for step in plan.steps()]

    assert labels == [
        "Remove old entries",
        "Extract files",
        "Write new items.bif",
        "Remove old files",
        "Add new files",
        "Write new keyfile",
    ]
