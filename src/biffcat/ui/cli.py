# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from biffcat.app import open_session, open_views, plan_session
from biffcat.config import ConfigurationError, configure_logging
from biffcat.domain.catalog import ConflictChoice, constant_policy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from biffcat.domain.catalog import CatalogView
    from biffcat.domain.plan import BuildPlan

log = logging.getLogger(__name__)

_CONFLICT_CHOICES: dict[str, ConflictChoice] = {
    "keep": ConflictChoice.KEEP_CURRENT,
    "overwrite": ConflictChoice.OVERWRITE_WITH_INCOMING,
    "abort": ConflictChoice.ABORT,
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect and plan BIFF archive edits")
    parser.add_argument(
        "--manifest",
        type=Path,
        help="JSON resource manifest (defaults to BIFFCAT_MANIFEST)",
    )
    parser.add_argument(
        "--archive",
        type=str,
        help="Archive to edit, as named in the manifest (defaults to BIFFCAT_ARCHIVE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log catalog changes at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="List both sides of the edit session")

    plan = subparsers.add_parser("plan", help="Apply moves and print the save plan")
    plan.add_argument(
        "--to-archive",
        action="append",
        default=[],
        metavar="NAME",
        help="Move an override-side resource into the archive (repeatable)",
    )
    plan.add_argument(
        "--to-override",
        action="append",
        default=[],
        metavar="NAME",
        help="Move an archive-side resource out to the override folder (repeatable)",
    )
    plan.add_argument(
        "--on-conflict",
        choices=sorted(_CONFLICT_CHOICES),
        default="abort",
        help="Answer for archived-vs-override conflicts (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _print_view(title: str, view: CatalogView) -> None:
    print(f"{title} ({view.row_count()} rows)")
    for index in range(view.row_count()):
        entry = view.row(index)
        print(f"  {entry.provenance:<8} {entry.extension:<5} {entry.name}")


def _print_plan(plan: BuildPlan) -> None:
    for number, step in enumerate(plan.steps(), start=1):
        print(f"{number}. {step.label} ({len(step.entries)})")
        for entry in step.entries:
            print(f"     {entry.name}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(verbose=parsed_args.verbose)
    policy = constant_policy(_CONFLICT_CHOICES[getattr(parsed_args, "on_conflict", "abort")])

    try:
        session = open_session(
            manifest_path=parsed_args.manifest,
            archive=parsed_args.archive,
            policy=policy,
        )
    except (ValueError, ConfigurationError):
        log.exception("Cannot open edit session")
        sys.exit(2)

    try:
        if parsed_args.command == "show":
            archive_view, override_view = open_views(session)
            _print_view(f"Files in {session.archive_name}", archive_view)
            _print_view("Files in override", override_view)
        elif parsed_args.command == "plan":
            plan = plan_session(
                session,
                to_archive=parsed_args.to_archive,
                to_override=parsed_args.to_override,
            )
            _print_plan(plan)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while planning archive edit")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
