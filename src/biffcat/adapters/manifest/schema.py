"""Pydantic models describing a resource manifest.

A manifest is a JSON listing of the resources a game installation knows
about::

    {
      "archives": ["data/items.bif"],
      "resources": [
        {"name": "SW1H01.ITM", "archive": "data/items.bif", "override": true},
        {"name": "MYSWORD.ITM", "override": true}
      ]
    }
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

log = logging.getLogger(__name__)


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Manifest %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class ResourcePayload(ManifestBaseModel):
    name: str = Field(min_length=1)
    archive: str | None = Field(default=None, alias="bif")
    override: bool = False

    _normalize_archive = field_validator("archive", mode="before")(_blank_to_none)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("resource name must not be blank")
        return stripped


class ManifestPayload(ManifestBaseModel):
    archives: list[str] = Field(default_factory=list)
    resources: list[ResourcePayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_archive_references(self) -> ManifestPayload:
        if not self.archives:
            return self
        known = {archive.casefold() for archive in self.archives}
        unknown = sorted(
            {
                resource.archive
                for resource in self.resources
                if resource.archive is not None and resource.archive.casefold() not in known
            }
        )
        if unknown:
            raise ValueError(f"resources reference undeclared archives: {', '.join(unknown)}")
        return self
