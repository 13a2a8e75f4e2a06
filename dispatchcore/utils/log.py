# dispatchcore/utils/log.py
"""
Logging setup for entry points.

Library modules only create loggers; handlers are installed here, by the
process that owns stderr.
"""

from __future__ import annotations

from typing import Optional, TextIO
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Send dispatchcore logs to stderr (stdout carries tool results).

    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("dispatchcore")
    root.handlers[:] = [handler]
    root.setLevel(numeric)
    root.propagate = False
