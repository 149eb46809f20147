"""Logging setup shared by the CLI and embedders."""
from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging; unknown level names fall back to INFO."""
    resolved = getattr(logging, level.upper(), None) if isinstance(level, str) else None
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
