"""Public domain model surface."""

from __future__ import annotations

from biffcat.domain.model.entry import Entry, extension_of, new_id, normalize_name
from biffcat.domain.model.enums import Provenance

__all__ = [
    "Entry",
    "Provenance",
    "extension_of",
    "new_id",
    "normalize_name",
]
