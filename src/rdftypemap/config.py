"""Library configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os


def _log_level(name: str) -> str:
    """Return *name* as a logging level name, or ``WARNING`` if it is not one."""
    level = name.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return "WARNING"
    return level


class Config:
    """Default configuration, read once at import time."""

    # IRI of the non-standard datatype used for single characters
    CHAR_DATATYPE = os.getenv(
        "RDFTYPEMAP_CHAR_DATATYPE", "http://rdftypemap.org/datatype#char",
    )

    # Log level used by the CLI when --verbose is not given
    LOG_LEVEL = _log_level(os.getenv("RDFTYPEMAP_LOG_LEVEL", "WARNING"))
