"""Logging setup for the biffcat command line."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "biffcat"

_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Route log records to stderr.

    Other libraries stay at WARNING. The ``biffcat`` logger reports staging,
    conflicts and transfers at INFO, and every catalog mutation with
    ``verbose``. Pass ``force=True`` to replace handlers installed earlier.
    """

    logging.basicConfig(level=logging.WARNING, format=_FORMAT, force=force)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)
