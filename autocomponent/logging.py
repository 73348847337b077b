"""Logging for extraction runs.

Library modules only ever call ``get_logger``. A host opts in to output by
calling ``configure_logging``, usually through ``ComponentProcessor.from_config``
so the ``logging:`` block of .autocomponent.yml takes effect.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "autocomponent"
_CONSOLE_FORMAT = "[autocomponent] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the autocomponent hierarchy, e.g. ``autocomponent.processor``."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route autocomponent diagnostics to stderr and, optionally, ``log_file``.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), level, _CONSOLE_FORMAT)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
    return logger


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


__all__ = ["configure_logging", "get_logger"]
