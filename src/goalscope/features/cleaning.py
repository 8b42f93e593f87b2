"""
Cleaning utilities for goalscope.

This module turns the raw goal table into the analysis table:

- Parses match dates and derives the match year.
- Derives `goal_for` (Home/Away) from the scoring and home teams.
- Keeps only goals scored in minutes 1-120.
- Encodes the own_goal / penalty flags as two-level categoricals.
- Drops rows with missing values.

Every step returns a new DataFrame; the input frame is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from goalscope.config import DATE_FORMAT, FLAG_LEVELS, MINUTE_MAX, MINUTE_MIN
from goalscope.utils.logging_utils import get_logger

logger = get_logger(__name__)

FLAG_COLUMNS = ["own_goal", "penalty"]

# Accepted boolean-like encodings, matched after strip + lower-case
_FLAG_VALUES = {
    "true": "TRUE",
    "1": "TRUE",
    "1.0": "TRUE",
    "false": "FALSE",
    "0": "FALSE",
    "0.0": "FALSE",
}


@dataclass
class CleaningConfig:
    """Configuration for the cleaning steps."""

    date_format: str = DATE_FORMAT
    minute_min: int = MINUTE_MIN
    minute_max: int = MINUTE_MAX


@dataclass
class CleaningReport:
    """Row counts recorded while cleaning, for auditability."""

    rows_in: int
    dropped_out_of_range: int
    dropped_incomplete: int
    rows_out: int


def parse_dates(df: pd.DataFrame, date_format: str = DATE_FORMAT) -> pd.DataFrame:
    """Parse the `date` column; unparsable values become NaT."""
    out = df.copy()
    out["date"] = pd.to_datetime(out["date"], format=date_format, errors="coerce")
    n_bad = int(out["date"].isna().sum())
    if n_bad:
        logger.warning("%d rows have invalid 'date' values after parsing.", n_bad)
    return out


def add_year(df: pd.DataFrame) -> pd.DataFrame:
    """Add the calendar `year` of each (already parsed) match date."""
    out = df.copy()
    out["year"] = out["date"].dt.year
    return out


def add_goal_for(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add `goal_for`: "Home" when the scoring team is the home team, else "Away".
    """
    out = df.copy()
    out["goal_for"] = np.where(out["team"] == out["home_team"], "Home", "Away")
    return out


def filter_minute_range(
    df: pd.DataFrame,
    minute_min: int = MINUTE_MIN,
    minute_max: int = MINUTE_MAX,
) -> pd.DataFrame:
    """
    Keep rows whose `minute` is a whole number in [minute_min, minute_max].

    Non-numeric, missing or fractional minutes are treated as out of range.
    """
    minutes = pd.to_numeric(df["minute"], errors="coerce")
    mask = minutes.between(minute_min, minute_max) & (minutes % 1 == 0)
    out = df.loc[mask].copy()
    out["minute"] = minutes[mask]
    return out


def _normalize_flag(series: pd.Series) -> pd.Categorical:
    text = series.astype("string").str.strip().str.lower().astype(object)
    labels = text.map(_FLAG_VALUES)
    return pd.Categorical(labels, categories=FLAG_LEVELS)


def normalize_flags(df: pd.DataFrame) -> pd.DataFrame:
    """
    Encode `own_goal` and `penalty` as "FALSE"/"TRUE" categoricals.

    Unrecognized values become missing and are removed by `drop_incomplete`.
    """
    out = df.copy()
    for col in FLAG_COLUMNS:
        out[col] = _normalize_flag(out[col])
    return out


def drop_incomplete(df: pd.DataFrame) -> pd.DataFrame:
    """Drop every row with a missing value in any column."""
    return df.dropna()


def clean_goals(
    df_raw: pd.DataFrame,
    config: CleaningConfig | None = None,
) -> Tuple[pd.DataFrame, CleaningReport]:
    """
    Run the full cleaning sequence over a validated raw goal table.

    Parameters
    ----------
    df_raw : pandas.DataFrame
        Raw goals DataFrame (already validated).
    config : CleaningConfig | None
        Cleaning configuration. If None, uses defaults from config.py.

    Returns
    -------
    (cleaned_df, report)
        cleaned_df : one row per goal with integer `minute` and `year`,
            `goal_for`, categorical flags and no missing values.
        report : row counts dropped by each filtering step.
    """
    if config is None:
        config = CleaningConfig()

    rows_in = len(df_raw)

    df = parse_dates(df_raw, config.date_format)
    df = add_year(df)
    df = add_goal_for(df)

    in_range = filter_minute_range(df, config.minute_min, config.minute_max)
    dropped_out_of_range = len(df) - len(in_range)

    df = normalize_flags(in_range)
    complete = drop_incomplete(df)
    dropped_incomplete = len(df) - len(complete)

    cleaned = complete.reset_index(drop=True)
    cleaned["minute"] = cleaned["minute"].astype(int)
    cleaned["year"] = cleaned["year"].astype(int)

    report = CleaningReport(
        rows_in=rows_in,
        dropped_out_of_range=dropped_out_of_range,
        dropped_incomplete=dropped_incomplete,
        rows_out=len(cleaned),
    )
    logger.info(
        "Cleaned goals: %d in, %d outside minutes %d-%d, %d incomplete, %d kept.",
        report.rows_in,
        report.dropped_out_of_range,
        config.minute_min,
        config.minute_max,
        report.dropped_incomplete,
        report.rows_out,
    )
    return cleaned, report
