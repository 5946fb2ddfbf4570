"""Shared logger initialization for the CLI.

Usage:
    from pomocli.utils.logger import get_logger
    log = get_logger(__name__)
    log.info("message")
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(message)s"  # rich handler already adds time & level


def _has_rich_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, RichHandler) for h in logger.handlers)


def configure_logging(level: int = logging.WARNING) -> None:
    """Idempotently attach a RichHandler (on stderr) to the root logger.

    Calling again only adjusts the level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if _has_rich_handler(root):
        for handler in root.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(level)
        return
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger (configuring root on first call)."""
    root = logging.getLogger()
    if not _has_rich_handler(root):
        configure_logging()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
