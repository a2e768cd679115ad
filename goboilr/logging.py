"""Logging for goboilr runs.

Progress lines ("goboilr: processing ...") are printed to stdout by the CLI.
Diagnostics go through the ``goboilr`` logger hierarchy to stderr, which stays
quiet below WARNING unless ``--verbose`` is given, so ``go generate`` output
is not cluttered. ``--log-file`` adds a DEBUG-level sink with timestamps.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .errors import ConfigurationError

_LOGGER_NAME = "goboilr"
CONSOLE_FORMAT = "[goboilr] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the goboilr hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach the console handler and, when requested, the log file sink.

    Raises ``ConfigurationError`` when ``log_file`` cannot be opened.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    # run() may be called several times in one process (tests, embedding).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [_console_handler(console_level)]
    if log_file is not None:
        handlers.append(_file_handler(log_file))

    logger.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        logger.addHandler(handler)
    return logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"cannot open log file {log_file}: {exc.strerror or exc}"
        ) from exc
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


__all__ = ["configure_logging", "get_logger"]
