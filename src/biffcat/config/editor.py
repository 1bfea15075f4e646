"""Editor session configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import optional_env_var, require_env_vars


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Which archive to edit and where its resource manifest lives."""

    archive: str
    manifest_path: Path | None = None


def get_editor_config(
    *,
    archive: str | None = None,
    manifest_path: Path | None = None,
) -> EditorConfig:
    """Build editor config, falling back to ``BIFFCAT_ARCHIVE``/``BIFFCAT_MANIFEST``."""

    if archive is None:
        archive = require_env_vars(("BIFFCAT_ARCHIVE",))["BIFFCAT_ARCHIVE"]
    if manifest_path is None:
        env_manifest = optional_env_var("BIFFCAT_MANIFEST")
        manifest_path = Path(env_manifest) if env_manifest else None
    return EditorConfig(archive=archive, manifest_path=manifest_path)
