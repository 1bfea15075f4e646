from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from biffcat.domain.catalog import Catalog, ScriptedConflictPolicy

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def scripted_policy() -> ScriptedConflictPolicy:
    return ScriptedConflictPolicy()


@pytest.fixture
def catalog(scripted_policy: ScriptedConflictPolicy) -> Catalog:
    return Catalog(policy=scripted_policy)


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    payload = {
        "archives": ["data/items.bif", "data/spells.bif"],
        "resources": [
            {"name": "SW1H01.ITM", "archive": "data/items.bif"},
            {"name": "SW1H02.ITM", "archive": "data/items.bif", "override": True},
            {"name": "AX1H01.ITM", "archive": "data/items.bif"},
            {"name": "SPWI101.SPL", "archive": "data/spells.bif", "override": True},
            {"name": "MYSWORD.ITM", "override": True},
            {"name": "README.TXT", "override": True},
            {"name": "AVERYLONGNAME.ITM", "override": True},
        ],
    }
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(payload))
    return path
