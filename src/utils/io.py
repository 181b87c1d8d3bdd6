"""Utility helpers for loading and saving job sets and probe results."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import pandas as pd

from .logger import get_logger

LOGGER = get_logger("utils.io")

PathLike = Union[str, Path]


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of *path* if it does not exist."""

    path.parent.mkdir(parents=True, exist_ok=True)


def write_dataframe(df: pd.DataFrame, path: PathLike, *, index: bool = False) -> None:
    """Write a :class:`~pandas.DataFrame` to ``path`` as CSV."""

    path = Path(path)
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    LOGGER.info("Wrote %s rows to %s", len(df), path)


def read_dataframe(path: PathLike) -> pd.DataFrame:
    """Load a CSV file into a dataframe.

    Job-set files written by hand often carry a space after each comma
    (``Task ID, Job ID, ...``); header and cell padding is dropped.
    """

    df = pd.read_csv(Path(path), skipinitialspace=True)
    df.columns = [str(column).strip() for column in df.columns]
    LOGGER.info("Loaded %s rows from %s", len(df), path)
    return df


def load_json(path: PathLike) -> Any:
    """Read JSON data from ``path``."""

    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    LOGGER.info("Loaded JSON file from %s", path)
    return data
