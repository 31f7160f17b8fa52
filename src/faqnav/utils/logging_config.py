"""Logging setup shared by the library and the server.

Records carry structured context through ``extra={...}``; the formatter
appends those fields as ``key=value`` pairs after the message.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

from faqnav.config import FAQNAV_LOG_LEVEL

_ROOT_LOGGERS: Final[tuple[str, ...]] = ("faqnav", "server")
_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime", "taskName"}
)

_configured = False


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if not fields:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
        return f"{base} | {rendered}"


def configure_logging(level: str | int = FAQNAV_LOG_LEVEL, *, force: bool = False) -> None:
    """Attach a single stream handler to the package loggers.

    Args:
        level: Logging level name or number.
        force: Replace handlers installed by a previous call.
    """
    global _configured
    if _configured and not force:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_FORMAT))

    for name in _ROOT_LOGGERS:
        package_logger = logging.getLogger(name)
        for existing in list(package_logger.handlers):
            if isinstance(existing.formatter, ExtraFieldsFormatter):
                package_logger.removeHandler(existing)
        package_logger.addHandler(handler)
        package_logger.setLevel(level)
        package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for ``name``."""
    configure_logging()
    return logging.getLogger(name)
