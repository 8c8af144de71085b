"""Logging setup shared by the CLI and the infrastructure adapters."""

from __future__ import annotations

import logging
import os
import sys

_configured = False

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once.

    *level* overrides ``LOG_LEVEL``. Once configured, only an explicit
    *level* changes the root level.
    """
    global _configured

    root = logging.getLogger()
    if _configured:
        if level:
            root.setLevel(getattr(logging, level.upper(), logging.WARNING))
        return

    log_level = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    log_to_stderr = os.getenv("LOG_TO_STDERR", "true").lower() == "true"
    root.setLevel(getattr(logging, log_level, logging.WARNING))

    # Avoid duplicate handlers
    if not root.handlers and log_to_stderr:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
