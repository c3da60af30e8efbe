from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "STROKE_DASHBOARD_LOG_FORMAT"

_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
_PLAIN = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _formatter_for(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(_PLAIN)
    # structured fields passed via extra= land as top-level JSON keys
    return jsonlogger.JsonFormatter(_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Send every log record to stderr through a single root handler.

    The output is JSON lines unless "plain" is requested, either with
    `force_format` or the STROKE_DASHBOARD_LOG_FORMAT variable (the argument
    wins). Calling this again swaps the handler rather than stacking another.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter_for(mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
