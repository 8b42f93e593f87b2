"""
Descriptive statistics over the cleaned goal table.

All functions are pure: they read a cleaned DataFrame and return a new
DataFrame/Series without modifying their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import pandas as pd

from goalscope.config import FLAG_LEVELS

MATCH_KEYS: List[str] = ["date", "home_team", "away_team"]


@dataclass
class DatasetOverview:
    """Structure, summary and first rows of a table."""

    n_rows: int
    n_columns: int
    dtypes: pd.Series
    head: pd.DataFrame
    summary: pd.DataFrame


def flag_labels(series: pd.Series) -> pd.Series:
    """Return a flag column as "FALSE"/"TRUE" strings (bool or categorical input)."""
    if pd.api.types.is_bool_dtype(series):
        return series.map({False: "FALSE", True: "TRUE"})
    return series.astype(str).str.upper()


def describe_table(df: pd.DataFrame, n_head: int = 10) -> DatasetOverview:
    """
    Summarize the structure and content of a table.

    Parameters
    ----------
    df : pandas.DataFrame
        Any goal table (raw or cleaned).
    n_head : int
        Number of leading rows to keep.

    Returns
    -------
    DatasetOverview
    """
    return DatasetOverview(
        n_rows=len(df),
        n_columns=df.shape[1],
        dtypes=df.dtypes,
        head=df.head(n_head),
        summary=df.describe(include="all"),
    )


def group_summary(
    df: pd.DataFrame,
    group_key: str | Sequence[str],
    value: str = "minute",
) -> pd.DataFrame:
    """
    Compute count, mean, sd, median, min and max of `value` per group.

    The standard deviation is the sample (n - 1) one, so a group with a
    single row gets a missing `sd`.

    Parameters
    ----------
    df : pandas.DataFrame
        Cleaned goal table.
    group_key : str | Sequence[str]
        Column(s) to group by, e.g. "own_goal" or ["goal_for", "own_goal"].
    value : str
        Numeric column to summarize.

    Returns
    -------
    pandas.DataFrame
        One row per observed group, indexed by the group key(s).
    """
    keys = [group_key] if isinstance(group_key, str) else list(group_key)
    grouped = df.groupby(keys, observed=True)[value]
    return grouped.agg(
        count="count",
        mean="mean",
        sd="std",
        median="median",
        min="min",
        max="max",
    )


def proportion_by_year(df: pd.DataFrame) -> pd.DataFrame:
    """
    Share of own goals among all goals, per year.

    Returns
    -------
    pandas.DataFrame
        Columns: year, total, own_goals, proportion. A year with no goals
        would get a missing proportion instead of a division by zero.
    """
    is_own_goal = flag_labels(df["own_goal"]).eq("TRUE")
    grouped = is_own_goal.groupby(df["year"])

    out = pd.DataFrame(
        {
            "total": grouped.size(),
            "own_goals": grouped.sum().astype(int),
        }
    )
    out["proportion"] = out["own_goals"] / out["total"].where(out["total"] > 0)
    out.index.name = "year"
    return out.reset_index()


def match_aggregate(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count goals per match, a match being a (date, home_team, away_team) triple.

    Returns
    -------
    pandas.DataFrame
        Columns: date, home_team, away_team, goals_in_match.
    """
    return (
        df.groupby(MATCH_KEYS, observed=True)
        .size()
        .reset_index(name="goals_in_match")
    )


def goals_per_match_summary(matches: pd.DataFrame) -> pd.Series:
    """
    Five-number summary (plus mean) of goals per match.

    Parameters
    ----------
    matches : pandas.DataFrame
        Output of `match_aggregate`.
    """
    goals = matches["goals_in_match"]
    return pd.Series(
        {
            "min": goals.min(),
            "q1": goals.quantile(0.25),
            "median": goals.median(),
            "mean": goals.mean(),
            "q3": goals.quantile(0.75),
            "max": goals.max(),
        },
        dtype=float,
    )


def contingency_table(
    df: pd.DataFrame,
    row: str = "own_goal",
    col: str = "penalty",
) -> pd.DataFrame:
    """
    Cross-tabulate two flag columns into a 2x2 table of counts.

    Both axes always carry the FALSE and TRUE levels, filled with zero when a
    level is absent.
    """
    table = pd.crosstab(flag_labels(df[row]), flag_labels(df[col]))
    table = table.reindex(index=FLAG_LEVELS, columns=FLAG_LEVELS, fill_value=0)
    return table.rename_axis(index=row, columns=col)
