"""Conflict policy contracts for catalog insertion.

A policy is consulted only when an archived entry collides with a visible
override of the same name. It is a plain synchronous callable; it may block
(for instance on a user prompt) but must not call back into the catalog that
is consulting it.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .contracts import ConflictChoice

if TYPE_CHECKING:
    from collections.abc import Iterable

    from biffcat.domain.model import Entry

log = logging.getLogger(__name__)


class ConflictPolicy(Protocol):
    """Decide what happens when ``incoming`` (archived) meets ``current`` (override)."""

    def __call__(self, incoming: Entry, current: Entry) -> ConflictChoice: ...


def keep_current(incoming: Entry, current: Entry) -> ConflictChoice:  # noqa: ARG001
    return ConflictChoice.KEEP_CURRENT


def overwrite_with_incoming(incoming: Entry, current: Entry) -> ConflictChoice:  # noqa: ARG001
    return ConflictChoice.OVERWRITE_WITH_INCOMING


def abort(incoming: Entry, current: Entry) -> ConflictChoice:  # noqa: ARG001
    return ConflictChoice.ABORT


_STOCK_POLICIES: dict[ConflictChoice, ConflictPolicy] = {
    ConflictChoice.KEEP_CURRENT: keep_current,
    ConflictChoice.OVERWRITE_WITH_INCOMING: overwrite_with_incoming,
    ConflictChoice.ABORT: abort,
}


def constant_policy(choice: ConflictChoice) -> ConflictPolicy:
    """Return the stock policy that always answers ``choice``."""

    return _STOCK_POLICIES[choice]


@dataclass(slots=True)
class ScriptedConflictPolicy:
    """Answer conflicts from a prepared queue of choices.

    Stands in for an interactive "keep / overwrite / cancel" prompt. Every
    question is recorded in ``asked`` as ``(incoming, current)``. Once the
    queue runs dry ``fallback`` answers.
    """

    choices: deque[ConflictChoice] = field(default_factory=deque["ConflictChoice"])
    fallback: ConflictChoice = ConflictChoice.ABORT
    asked: list[tuple[Entry, Entry]] = field(default_factory=list["tuple[Entry, Entry]"])

    @classmethod
    def of(
        cls,
        choices: Iterable[ConflictChoice],
        *,
        fallback: ConflictChoice = ConflictChoice.ABORT,
    ) -> ScriptedConflictPolicy:
        return cls(choices=deque(choices), fallback=fallback)

    def __call__(self, incoming: Entry, current: Entry) -> ConflictChoice:
        self.asked.append((incoming, current))
        if self.choices:
            return self.choices.popleft()
        log.debug("No scripted choice left for %s, answering %s", incoming.name, self.fallback)
        return self.fallback
