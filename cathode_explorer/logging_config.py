from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CATHODE_EXPLORER_LOG_FORMAT"
LOG_LEVEL_ENV = "CATHODE_EXPLORER_LOG_LEVEL"
APP_NAME = "cathode-explorer"

# Chatty third-party loggers kept at WARNING
_QUIET_LOGGERS = ("werkzeug", "urllib3")


class ExplorerJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines tagged with the app name and a lowercase level."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["app"] = APP_NAME
        log_record["level"] = record.levelname.lower()


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the explorer

    Modes:
    - JSON (default) for deployments
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var CATHODE_EXPLORER_LOG_FORMAT
        3) default = "json"

    The level comes from the argument, else CATHODE_EXPLORER_LOG_LEVEL, else INFO.
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(ExplorerJsonFormatter("%(asctime)s %(name)s %(message)s"))

    # One handler only, so repeated calls never duplicate lines
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
