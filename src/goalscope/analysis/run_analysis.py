"""
End-to-end analysis of women's international goal-scorer data.

Usage (from project root, with the virtualenv activated):

    python -m goalscope.analysis.run_analysis
    python -m goalscope.analysis.run_analysis --input data/raw/goalscorers.csv

This will:
- Load and validate the raw goals CSV (default: data/raw/sample_goalscorers.csv)
- Clean it (dates, year, goal_for, minute range, flags, missing values)
- Print minute summaries, own-goal share per year and goals per match
- Run normality, Welch t, rank-sum and chi-square tests
- Save charts into the `plots/` directory
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from goalscope.analysis.charts import render_all
from goalscope.analysis.hypothesis_tests import HypothesisTestSuite, run_hypothesis_tests
from goalscope.analysis.report import print_report
from goalscope.analysis.summaries import (
    DatasetOverview,
    contingency_table,
    describe_table,
    goals_per_match_summary,
    group_summary,
    match_aggregate,
    proportion_by_year,
)
from goalscope.config import LOG_LEVEL
from goalscope.data.data_loader import load_raw_goals
from goalscope.exceptions import SchemaError
from goalscope.features.cleaning import CleaningReport, clean_goals
from goalscope.utils.logging_utils import get_logger, set_log_level

logger = get_logger(__name__)

SUMMARY_KEYS = ["own_goal", "goal_for", "penalty"]


@dataclass
class AnalysisResult:
    """Every table and test result produced by one run."""

    overview: DatasetOverview
    cleaning_report: CleaningReport
    goals: pd.DataFrame
    summaries: Dict[str, pd.DataFrame]
    proportions: pd.DataFrame
    matches: pd.DataFrame
    goals_per_match: pd.Series
    contingency: pd.DataFrame
    tests: HypothesisTestSuite
    chart_paths: List[Path] = field(default_factory=list)


def run_analysis(
    path: Optional[Path | str] = None,
    plots_dir: Optional[Path | str] = None,
    make_plots: bool = True,
) -> AnalysisResult:
    """
    Run the full pipeline on one goals CSV.

    Parameters
    ----------
    path : pathlib.Path | str | None
        Input CSV. If None, uses the default raw file from config.
    plots_dir : pathlib.Path | str | None
        Where to save charts. If None, uses the `plots/` directory.
    make_plots : bool
        Whether to render charts.

    Returns
    -------
    AnalysisResult
    """
    logger.info("Starting goal analysis...")
    df_raw = load_raw_goals(path)
    overview = describe_table(df_raw)

    goals, cleaning_report = clean_goals(df_raw)

    summaries = {key: group_summary(goals, key) for key in SUMMARY_KEYS}
    proportions = proportion_by_year(goals)
    matches = match_aggregate(goals)

    result = AnalysisResult(
        overview=overview,
        cleaning_report=cleaning_report,
        goals=goals,
        summaries=summaries,
        proportions=proportions,
        matches=matches,
        goals_per_match=goals_per_match_summary(matches),
        contingency=contingency_table(goals, "own_goal", "penalty"),
        tests=run_hypothesis_tests(goals),
    )

    if make_plots:
        result.chart_paths = render_all(goals, proportions, plots_dir)

    logger.info("Analysis complete.")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Exploratory analysis of own goals in women's international football."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Goals CSV to analyse. If not provided, uses the sample file "
        "from config.py.",
    )
    parser.add_argument(
        "--plots-dir",
        type=Path,
        default=None,
        help="Directory for chart images (default: plots/).",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip chart rendering.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s).",
    )
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    try:
        result = run_analysis(
            args.input, plots_dir=args.plots_dir, make_plots=not args.no_plots
        )
    except (OSError, SchemaError) as exc:
        logger.error("%s", exc)
        return 1

    print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
