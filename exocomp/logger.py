"""Logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "exocomp"
FILE_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of the wiki client stack, raised to DEBUG with --debug
COLLABORATOR_LOGGERS = ("wikibaseintegrator", "urllib3")


def log_file_for(log_path: str | Path, day: date | None = None) -> Path:
    """Return the per-day log file inside ``log_path``."""
    day = day or date.today()
    return Path(log_path) / f"exocomp-{day.isoformat()}.log"


def configure_logging(
    log_path: str | Path,
    level: str | int = "info",
    debug: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """Attach console and per-day file handlers to the ``exocomp`` logger.

    Args:
        log_path: Directory holding the daily log files (created if missing)
        level: Threshold name (``debug``, ``info``, ``warning``, ``error``) or number
        debug: Also emit diagnostics from the wiki client libraries
        console: Rich console for the terminal handler

    Returns:
        The configured ``exocomp`` logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_dir = Path(log_path)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console,
        show_path=False,
        log_time_format=DATE_FORMAT,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file_for(log_dir), encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    for name in COLLABORATOR_LOGGERS:
        collaborator = logging.getLogger(name)
        for handler in list(collaborator.handlers):
            collaborator.removeHandler(handler)
        if debug:
            collaborator.setLevel(logging.DEBUG)
            collaborator.addHandler(console_handler)
            collaborator.addHandler(file_handler)
        else:
            collaborator.setLevel(logging.WARNING)

    return logger
