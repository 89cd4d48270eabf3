"""Logging configuration for fairdesk.

Modules log through ``logging.getLogger(__name__)``; this module wires
the handlers once at startup.  Log output is for diagnostics only —
user-facing messages always go through the presenter.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME: str = "fairdesk"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Configure and return the ``fairdesk`` package logger.

    Idempotent: a logger that already has handlers is returned as-is
    with only its level updated.

    Parameters
    ----------
    level:
        Level name such as ``"INFO"``.  Unknown names fall back to
        ``WARNING``.
    log_file:
        Optional path for an additional UTF-8 file handler.  Parent
        directories are created.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if log.handlers:
        return log

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    return log
