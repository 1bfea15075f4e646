"""Public interface for the resource manifest adapter."""

from __future__ import annotations

from .schema import ManifestPayload, ResourcePayload
from .translator import ManifestError, load_manifest, parse_manifest, to_resource_records

__all__ = [
    "ManifestError",
    "ManifestPayload",
    "ResourcePayload",
    "load_manifest",
    "parse_manifest",
    "to_resource_records",
]
