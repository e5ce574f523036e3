"""Diagnostics for ``bud`` go through the ``bud`` logger tree on stderr.

Stdout carries the report and the malformed-line warnings, so log records
never mix with it. Modules ask for ``get_logger("bud.<module>")``; only the
CLI decides whether anything is emitted, by calling ``configure_logging``
with the level from ``--log-level`` (or ``BUD_LOG_LEVEL``).
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "bud"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def resolve_level(level: int | str | None) -> int:
    """Map ``"debug"``, ``"10"`` or ``10`` to a level; unknown names give WARNING."""

    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    mapped = logging.getLevelNamesMapping().get(name)
    return mapped if mapped is not None else DEFAULT_LEVEL


def configure_logging(level: int | str | None = None) -> None:
    """Install the stderr handler on the ``bud`` logger, once per process.

    Later calls keep the single handler and only rebind it to the current
    ``sys.stderr`` and adjust the level.
    """

    global _handler
    root = logging.getLogger(ROOT_LOGGER)

    if _handler is None:
        for h in list(root.handlers):
            if isinstance(h, logging.NullHandler):
                root.removeHandler(h)
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
        root.propagate = False
    else:
        _handler.setStream(sys.stderr)

    root.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if _handler is None and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
