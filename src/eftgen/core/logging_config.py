"""Logging setup for applications embedding eftgen."""

from __future__ import annotations

import logging

from eftgen.core.config import EFTSettings

LOGGER_NAME = "eftgen"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the eftgen namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the eftgen logger.

    When ``level`` is omitted the level comes from ``EFTSettings.log_level``.
    Calling this twice does not stack handlers.
    """
    if level is None:
        level = EFTSettings().log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(getattr(h, "_eftgen", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._eftgen = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
