"""Runtime settings loaded from the environment.

``.env`` in the working directory is honoured through python-dotenv.
Callers use :func:`get_settings` rather than reading ``os.environ``
directly, so environment handling stays in one place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_FILE: str = "data/fairdesk.json"
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    data_file: Path
    """Where the roster snapshot is read from and written to."""

    log_level: str

    log_file: Path | None = None
    """Optional log file in addition to stderr."""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    log_file = os.getenv("FAIRDESK_LOG_FILE", "").strip()
    return Settings(
        data_file=Path(os.getenv("FAIRDESK_DATA_FILE", "").strip() or DEFAULT_DATA_FILE),
        log_level=(os.getenv("FAIRDESK_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        log_file=Path(log_file) if log_file else None,
    )
