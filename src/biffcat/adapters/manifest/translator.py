"""Translate manifest payloads into domain resource records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from biffcat.domain.session import ResourceRecord

from .schema import ManifestPayload

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


class ManifestError(ValueError):
    """Raised when a manifest cannot be read or does not validate."""


def parse_manifest(raw: str | bytes) -> ManifestPayload:
    try:
        return ManifestPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest: {exc}") from exc


def load_manifest(path: Path) -> ManifestPayload:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    payload = parse_manifest(raw)
    log.debug("Loaded manifest %s: %d resources", path, len(payload.resources))
    return payload


def to_resource_records(payload: ManifestPayload) -> list[ResourceRecord]:
    return [
        ResourceRecord(name=resource.name, archive=resource.archive, override=resource.override)
        for resource in payload.resources
    ]

