"""Logging setup shared by the application entry point and its modules."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "instafilter"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None, *, level: int = logging.INFO) -> logging.Logger:
    """Return the package logger, or the child logger called *name*.

    The first call installs a stream handler on the package logger; module
    loggers created with ``logging.getLogger(__name__)`` propagate into it.
    """

    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)
    if not name:
        return root
    return root.getChild(name)


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "get_logger"]
