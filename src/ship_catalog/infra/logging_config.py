"""Process-wide logging setup.

Modules log through logging.getLogger(__name__); this only installs the
root handler once, at the level named by LOG_LEVEL.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    global _configured
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(log_level())
    root.addHandler(handler)
