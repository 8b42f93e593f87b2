"""
Data loading utilities for goalscope.

This module reads the raw goal-scorer CSV and validates its schema.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from goalscope.data.schema import validate_raw_goals_df
from goalscope.utils.logging_utils import get_logger
from goalscope.utils.paths import get_raw_data_path

logger = get_logger(__name__)


def load_raw_goals(path: Optional[Path | str] = None) -> pd.DataFrame:
    """
    Load raw goal data from a CSV file and validate it.

    Parameters
    ----------
    path : pathlib.Path | str | None
        Path to the raw CSV file. If None, uses the default path from config.

    Returns
    -------
    pandas.DataFrame
        Raw goals restricted to the schema columns, types inferred by pandas.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    OSError
        If the file exists but cannot be read (e.g. PermissionError).
    SchemaError
        If a required column is missing.
    """
    csv_path = Path(path) if path is not None else get_raw_data_path()
    if not csv_path.is_file():
        raise FileNotFoundError(f"Raw goals file not found: {csv_path}")

    logger.info("Loading raw goal data from %s", csv_path)
    df = pd.read_csv(csv_path)
    df = validate_raw_goals_df(df)
    logger.info("Loaded %d raw goal rows.", len(df))
    return df
