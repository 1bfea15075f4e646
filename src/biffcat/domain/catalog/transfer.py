"""Move entries between two catalogs.

Each entry is offered to the target catalog. Entries the target accepted or
deliberately rejected are consumed and leave the source; a cancelled conflict
stops the move and leaves that entry, and every entry after it, where it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .contracts import InsertOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from biffcat.domain.model import Entry

    from .catalog import Catalog

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TransferResult:
    """Outcome of one ``transfer`` call."""

    moved: list[Entry] = field(default_factory=list["Entry"])
    rejected: list[Entry] = field(default_factory=list["Entry"])
    pending: list[Entry] = field(default_factory=list["Entry"])

    @property
    def cancelled(self) -> bool:
        return bool(self.pending)

    @property
    def changed(self) -> bool:
        return bool(self.moved or self.rejected)


def transfer(entries: Iterable[Entry], *, source: Catalog, target: Catalog) -> TransferResult:
    result = TransferResult()
    remaining = list(entries)
    for position, entry in enumerate(remaining):
        if entry not in source:
            log.debug("Skipping %s: no longer in %s", entry.name, source.name)
            continue
        outcome = target.insert(entry)
        if outcome is InsertOutcome.CANCELLED:
            result.pending.extend(e for e in remaining[position:] if e in source)
            break
        source.remove(entry)
        if outcome is InsertOutcome.INSERTED:
            result.moved.append(entry)
        else:
            result.rejected.append(entry)

    log.info(
        "Transfer %s -> %s: moved=%d, rejected=%d, pending=%d",
        source.name,
        target.name,
        len(result.moved),
        len(result.rejected),
        len(result.pending),
    )
    return result
