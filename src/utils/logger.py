"""Logging helpers for the idle-time insertion policies."""
from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER = "np_iip"


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"DEBUG"``/``"info"``/``10`` into a numeric logging level."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logger(name: str = ROOT_LOGGER, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure and return the project-wide logger.

    Handlers are attached exactly once, so analysis scripts and tests may call
    this repeatedly to adjust the level.
    """

    logger = logging.getLogger(name)
    numeric_level = resolve_level(level)
    if logger.handlers:
        logger.setLevel(numeric_level)
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger of the project logger."""

    if name is None:
        name = ROOT_LOGGER
    parent = configure_logger()
    return parent.getChild(name)
