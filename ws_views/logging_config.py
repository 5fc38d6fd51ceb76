from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

from ws_views.config.model import GlobalConfig

LOG_FORMAT_ENV = "WS_VIEWS_LOG_FORMAT"
LOG_FORMATS = ("json", "plain")
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_log_format(
        force_format: Optional[str] = None,
        config: Optional[GlobalConfig] = None,
) -> str:
    """
    Pick the log format for this process.

    Selection Order:
        1) force_format argument
        2) env var WS_VIEWS_LOG_FORMAT
        3) `log_format` from global.json (GlobalConfig)
        4) default = "json"

    Unrecognised values fall back to "json".
    """
    candidates = (
        force_format,
        os.getenv(LOG_FORMAT_ENV),
        config.log_format if config is not None else None,
    )
    for value in candidates:
        if isinstance(value, str) and value.strip():
            mode = value.strip().lower()
            return mode if mode in LOG_FORMATS else "json"
    return "json"


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
        config: Optional[GlobalConfig] = None,
) -> None:
    """
    Configure root logger for the host process

    Modes (see resolve_log_format):
    - JSON, one object per record; the `extra={...}` fields attached by the registry,
      controller and config loader (view, previous, n_views...) become top-level keys
    - plain text (dev mode)
    """
    format_mode = resolve_log_format(force_format, config)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
