"""Logging setup for processes embedding essential_core.

Library modules only create ``logging.getLogger(__name__)``; applications and
the CLI call ``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging.config
import os
from typing import Any, Dict, Optional

STANDARD_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_logging_config(level: Optional[str] = None, json_format: bool = False) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for console logging.

    Args:
        level: Root log level; defaults to ``LOG_LEVEL`` or INFO.
        json_format: Emit JSON lines through python-json-logger.
    """
    resolved_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json_format:
        formatter: Dict[str, Any] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": JSON_FORMAT,
        }
    else:
        formatter = {"format": STANDARD_FORMAT}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {
            "handlers": ["console"],
            "level": resolved_level,
        },
    }


def configure_logging(level: Optional[str] = None, json_format: bool = False) -> None:
    logging.config.dictConfig(build_logging_config(level=level, json_format=json_format))
