"""
Schema and validation utilities for raw goal-scorer data.
"""

from __future__ import annotations

from typing import Dict, List

import pandas as pd

from goalscope.exceptions import SchemaError
from goalscope.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Expected columns in the raw dataset
RAW_GOALS_COLUMNS: List[str] = [
    "date",
    "team",
    "home_team",
    "away_team",
    "minute",
    "own_goal",
    "penalty",
]


def validate_raw_goals_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate that a DataFrame conforms to the expected raw goals schema.

    Checks that all required columns are present and projects the frame onto
    them; any other column is ignored.

    Parameters
    ----------
    df : pandas.DataFrame
        Raw goals DataFrame.

    Returns
    -------
    pandas.DataFrame
        A copy holding only the required columns, in schema order.

    Raises
    ------
    SchemaError
        If required columns are missing.
    """
    missing = [col for col in RAW_GOALS_COLUMNS if col not in df.columns]
    if missing:
        raise SchemaError(missing)

    extra = [col for col in df.columns if col not in RAW_GOALS_COLUMNS]
    if extra:
        logger.info("Ignoring non-schema columns: %s", extra)

    return df[RAW_GOALS_COLUMNS].copy()


def get_raw_schema_description() -> Dict[str, str]:
    """
    Return a human-readable description of the raw goals schema.

    Returns
    -------
    Dict[str, str]
        Mapping from column name to description.
    """
    return {
        "date": "Match date (YYYY-MM-DD)",
        "team": "Team credited with the goal",
        "home_team": "Name of home team",
        "away_team": "Name of away team",
        "minute": "Match minute of the goal (1-120)",
        "own_goal": "Whether the goal was an own goal (TRUE/FALSE or 1/0)",
        "penalty": "Whether the goal was a penalty (TRUE/FALSE or 1/0)",
    }
