"""
Log setup for the geoquest CLI and scripts.

APP_ENV=production emits one JSON object per record; anything else gets a
plain single-line format. Library modules only create loggers and never call
this themselves.
"""

from __future__ import annotations

import logging
import sys

import json_log_formatter

from geoquest.config import get_settings


def setup_logging() -> None:
    """Install the root handler for the current APP_ENV and LOG_LEVEL."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.env == "production":
        # One JSON object per line on stderr; stdout carries command output
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(json_log_formatter.JSONFormatter())

        root = logging.getLogger()
        root.setLevel(level)
        root.handlers = [handler]
    else:
        _setup_basic_logging(level)


def _setup_basic_logging(level: int) -> None:
    """Plain-text records on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
