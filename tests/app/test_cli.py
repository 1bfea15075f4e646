from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from biffcat.ui import cli as cli_module

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BIFFCAT_ARCHIVE", "BIFFCAT_MANIFEST", "BIFFCAT_VISIBLE_KINDS"):
        monkeypatch.delenv(name, raising=False)


def test_show_lists_both_sides(manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["--manifest", str(manifest_path), "--archive", "data/items.bif", "show"])

    out = capsys.readouterr().out
    assert "Files in data/items.bif (3 rows)" in out
    assert "Files in override (2 rows)" in out
    assert "MYSWORD.ITM" in out


def test_plan_prints_steps(manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(
        [
            "--manifest",
            str(manifest_path),
            "--archive",
            "data/items.bif",
            "plan",
            "--to-archive",
            "SW1H02.ITM",
        ]
    )

    out = capsys.readouterr().out
    assert "3. Write new data/items.bif (3)" in out
    assert "4. Remove old files (1)" in out
    assert "5. Add new files (1)" in out


def test_plan_passes_conflict_choice(
    monkeypatch: pytest.MonkeyPatch, manifest_path: Path
) -> None:
    captured: dict[str, object] = {}
    real_open_session = cli_module.open_session

    def spy_open_session(**kwargs: object) -> object:
        captured.update(kwargs)
        return real_open_session(**kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(cli_module, "open_session", spy_open_session)

    cli_module.main(
        [
            "--manifest",
            str(manifest_path),
            "--archive",
            "data/items.bif",
            "plan",
            "--to-override",
            "SW1H02.ITM",
            "--on-conflict",
            "overwrite",
        ]
    )

    policy = captured["policy"]
    assert callable(policy)
    assert getattr(policy, "__name__", "") == "overwrite_with_incoming"


def test_missing_archive_exits_with_config_error(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--manifest", str(manifest_path), "show"])

    assert excinfo.value.code == 2


def test_unknown_entry_exits_with_failure(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            [
                "--manifest",
                str(manifest_path),
                "--archive",
                "data/items.bif",
                "plan",
                "--to-archive",
                "NOPE.ITM",
            ]
        )

    assert excinfo.value.code == 1


def test_unknown_command_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["bogus"])

    assert excinfo.value.code == 2
