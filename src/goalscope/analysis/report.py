"""
Console report for an analysis run.

The `format_*` helpers return plain text so they can be tested; `print_report`
writes the whole report to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

import pandas as pd

from goalscope.analysis.hypothesis_tests import (
    ChiSquareResult,
    HypothesisTestSuite,
    NormalityResult,
    RankSumResult,
    TTestResult,
)
from goalscope.analysis.summaries import DatasetOverview
from goalscope.config import SIGNIFICANCE_LEVEL
from goalscope.features.cleaning import CleaningReport

if TYPE_CHECKING:
    from goalscope.analysis.run_analysis import AnalysisResult


def _section(title: str) -> str:
    return f"\n=== {title} ==="


def _decision(p_value: float, alpha: float, reject: str, keep: str) -> str:
    return reject if p_value < alpha else keep


def format_overview(overview: DatasetOverview) -> str:
    lines = [
        f"Rows: {overview.n_rows}, columns: {overview.n_columns}",
        "Column types:",
        overview.dtypes.to_string(),
        "Summary:",
        overview.summary.to_string(),
        "First rows:",
        overview.head.to_string(),
    ]
    return "\n".join(lines)


def format_cleaning_report(report: CleaningReport) -> str:
    return (
        f"  rows read: {report.rows_in}\n"
        f"  dropped (minute out of range): {report.dropped_out_of_range}\n"
        f"  dropped (incomplete): {report.dropped_incomplete}\n"
        f"  rows kept: {report.rows_out}"
    )


def format_frame(df: pd.DataFrame | pd.Series, float_format: str = "{:.4f}") -> str:
    return df.to_string(float_format=float_format.format)


def format_normality(result: NormalityResult, alpha: float = SIGNIFICANCE_LEVEL) -> str:
    decision = _decision(
        result.p_value, alpha, "reject normality", "normality not rejected"
    )
    return (
        f"  Anderson-Darling [{result.label}, n={result.n}]: "
        f"A = {result.statistic:.4f}, p = {result.p_value:.4g} ({decision})"
    )


def format_t_test(result: TTestResult, alpha: float = SIGNIFICANCE_LEVEL) -> str:
    decision = _decision(
        result.p_value, alpha, "means differ", "no evidence means differ"
    )
    level = int(round(result.confidence_level * 100))
    return (
        f"  Welch t-test: t = {result.statistic:.4f}, df = {result.df:.2f}, "
        f"p = {result.p_value:.4g} ({decision})\n"
        f"    means: {result.mean_a:.2f} vs {result.mean_b:.2f}, "
        f"difference {result.mean_difference:.2f}, "
        f"{level}% CI [{result.ci_low:.2f}, {result.ci_high:.2f}]"
    )


def format_rank_sum(result: RankSumResult, alpha: float = SIGNIFICANCE_LEVEL) -> str:
    decision = _decision(
        result.p_value, alpha, "distributions differ", "no evidence of a shift"
    )
    return (
        f"  Wilcoxon rank-sum: W = {result.statistic:.1f}, "
        f"p = {result.p_value:.4g} ({decision})"
    )


def format_chi_square(
    result: ChiSquareResult, alpha: float = SIGNIFICANCE_LEVEL
) -> str:
    decision = _decision(
        result.p_value, alpha, "not independent", "independence not rejected"
    )
    return (
        f"  Chi-square (Yates): X-squared = {result.statistic:.4f}, "
        f"df = {result.dof}, p = {result.p_value:.4g} ({decision})\n"
        f"  Expected counts:\n{format_frame(result.expected, '{:.2f}')}"
    )


def format_test_suite(
    suite: HypothesisTestSuite, alpha: float = SIGNIFICANCE_LEVEL
) -> str:
    lines: List[str] = [
        format_normality(res, alpha) for res in suite.normality.values()
    ]
    if suite.t_test is not None:
        lines.append(format_t_test(suite.t_test, alpha))
    if suite.rank_sum is not None:
        lines.append(format_rank_sum(suite.rank_sum, alpha))
    if suite.chi_square is not None:
        lines.append(format_chi_square(suite.chi_square, alpha))
    for name, message in suite.errors.items():
        lines.append(f"  {name}: skipped ({message})")
    return "\n".join(lines)


def format_summaries(summaries: Dict[str, pd.DataFrame]) -> str:
    blocks = [
        f"By {key}:\n{format_frame(summary)}" for key, summary in summaries.items()
    ]
    return "\n\n".join(blocks)


def print_report(result: "AnalysisResult") -> None:
    """Print every part of an analysis run to stdout."""
    print(_section("Dataset overview (raw)"))
    print(format_overview(result.overview))

    print(_section("Cleaning"))
    print(format_cleaning_report(result.cleaning_report))

    print(_section("Goal minute summaries"))
    print(format_summaries(result.summaries))

    print(_section("Own goals per year"))
    print(format_frame(result.proportions.set_index("year")))

    print(_section("Goals per match"))
    print(format_frame(result.goals_per_match, "{:.2f}"))

    print(_section("Own goal x penalty"))
    print(result.contingency.to_string())

    print(_section("Hypothesis tests"))
    print(format_test_suite(result.tests))

    if result.chart_paths:
        print(_section("Charts"))
        for path in result.chart_paths:
            print(f"  {path}")
