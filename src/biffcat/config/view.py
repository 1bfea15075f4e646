"""Table view defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from biffcat.domain.catalog import ALL_KINDS, SortDirection, SortKey
from biffcat.domain.model import Provenance

from .env import optional_env_var
from .errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ViewConfig:
    sort_key: SortKey = SortKey.NAME
    direction: SortDirection = SortDirection.ASCENDING
    visible_kinds: frozenset[Provenance] = field(default=ALL_KINDS)


def get_view_config() -> ViewConfig:
    """Read view defaults from ``BIFFCAT_SORT_KEY``, ``BIFFCAT_SORT_DESCENDING``
    and ``BIFFCAT_VISIBLE_KINDS`` (comma separated provenance names)."""

    defaults = ViewConfig()
    sort_key = defaults.sort_key
    direction = defaults.direction
    visible_kinds = defaults.visible_kinds

    raw_key = optional_env_var("BIFFCAT_SORT_KEY")
    if raw_key is not None:
        try:
            sort_key = SortKey(raw_key.lower())
        except ValueError as exc:
            raise ConfigurationError(f"Invalid BIFFCAT_SORT_KEY: {raw_key}") from exc

    raw_descending = optional_env_var("BIFFCAT_SORT_DESCENDING")
    if raw_descending is not None:
        direction = (
            SortDirection.DESCENDING
            if _parse_bool("BIFFCAT_SORT_DESCENDING", raw_descending)
            else SortDirection.ASCENDING
        )

    raw_kinds = optional_env_var("BIFFCAT_VISIBLE_KINDS")
    if raw_kinds is not None:
        visible_kinds = _parse_kinds(raw_kinds)

    return ViewConfig(sort_key=sort_key, direction=direction, visible_kinds=visible_kinds)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value}")


def _parse_kinds(value: str) -> frozenset[Provenance]:
    kinds: set[Provenance] = set()
    for part in value.split(","):
        token = part.strip().lower()
        if not token:
            continue
        try:
            kinds.add(Provenance(token))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid BIFFCAT_VISIBLE_KINDS entry: {part.strip()}") from exc
    return frozenset(kinds)
