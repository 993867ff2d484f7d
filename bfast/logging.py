"""Logging setup shared by the bfast CLI and its collaborators."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

_ROOT = "bfast"
_CONSOLE_FORMAT = "[bfast] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``bfast.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a console level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach console (stderr unless ``stream`` is given) and optional file handlers.

    Notices such as the default-blurb message are INFO, so ``quiet`` hides
    them while keeping warnings like a forced badge after a failed
    registration. The file sink always records DEBUG.
    """
    logger = get_logger()
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = console_level(verbose=verbose, quiet=quiet)
    console = logging.StreamHandler(stream)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(level)
        return logger

    sink = logging.FileHandler(log_file, encoding="utf-8")
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(sink)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "console_level", "get_logger"]
