"""Logging helpers for the markme package.

Every module logs through a child of the ``markme`` logger so the host
application decides where output goes. ``configure_logging`` is the default
wiring used by ``create_store``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

BASE_LOGGER_NAME = "markme"

_CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the package logger."""
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def configure_logging(level: Union[int, str] = logging.INFO, *, log_file: Optional[str] = None) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers instead of stacking them.
    """

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(level)
    base_logger.propagate = False
    for handler in list(base_logger.handlers):
        base_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    base_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            base_logger.warning("Failed to configure logfile '%s': %s", log_file, exc)
        else:
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            base_logger.addHandler(file_handler)

    return base_logger
