"""Shared utility helpers."""

from .io import (
    ensure_parent_dir,
    read_dataframe,
    write_dataframe,
    load_json,
)
from .logger import configure_logger, get_logger, resolve_level

__all__ = [
    "ensure_parent_dir",
    "read_dataframe",
    "write_dataframe",
    "load_json",
    "configure_logger",
    "get_logger",
    "resolve_level",
]
