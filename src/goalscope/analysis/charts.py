"""
Charts comparing own goals with other goals.

`build_chart_specs` assembles the data series, labels and colours of each
chart; `render_chart` hands a spec to seaborn/matplotlib and saves a PNG.
Charts produced:

* minute_boxplot.png          - minute by own_goal
* minute_histogram.png        - overlaid minute histograms by own_goal
* minute_histogram_panels.png - one minute histogram per own_goal level
* minute_density.png          - overlaid minute densities by own_goal
* own_goal_share_by_year.png  - own-goal proportion per year
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from goalscope.analysis.summaries import flag_labels, proportion_by_year
from goalscope.config import FLAG_LEVELS, HISTOGRAM_BINS, OWN_GOAL_PALETTE
from goalscope.utils.logging_utils import get_logger
from goalscope.utils.paths import PathLike, ensure_plots_dir

logger = get_logger(__name__)


@dataclass
class ChartSpec:
    """Everything needed to draw one chart."""

    name: str
    kind: str
    data: pd.DataFrame
    x: str
    y: Optional[str]
    title: str
    xlabel: str
    ylabel: str
    hue: Optional[str] = None
    palette: Dict[str, str] = field(default_factory=lambda: dict(OWN_GOAL_PALETTE))
    bins: Optional[int] = None
    figsize: Tuple[float, float] = (7, 4.5)

    @property
    def filename(self) -> str:
        return f"{self.name}.png"


def _minutes_by_own_goal(df: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "minute": df["minute"].to_numpy(),
            "own_goal": flag_labels(df["own_goal"]).to_numpy(),
        }
    )


def build_chart_specs(
    df: pd.DataFrame,
    proportions: pd.DataFrame | None = None,
    bins: int = HISTOGRAM_BINS,
) -> List[ChartSpec]:
    """
    Assemble the five chart specs from a cleaned goal table.

    Parameters
    ----------
    df : pandas.DataFrame
        Cleaned goal table.
    proportions : pandas.DataFrame | None
        Output of `proportion_by_year`; computed from `df` if None.
    bins : int
        Bin count shared by all histograms.
    """
    if proportions is None:
        proportions = proportion_by_year(df)

    minutes = _minutes_by_own_goal(df)

    return [
        ChartSpec(
            name="minute_boxplot",
            kind="box",
            data=minutes,
            x="own_goal",
            y="minute",
            hue="own_goal",
            title="Goal minute: own goals vs. other goals",
            xlabel="Own goal",
            ylabel="Minute",
        ),
        ChartSpec(
            name="minute_histogram",
            kind="hist",
            data=minutes,
            x="minute",
            y=None,
            hue="own_goal",
            bins=bins,
            title="Distribution of goal minutes",
            xlabel="Minute",
            ylabel="Goals",
        ),
        ChartSpec(
            name="minute_histogram_panels",
            kind="hist_panels",
            data=minutes,
            x="minute",
            y=None,
            hue="own_goal",
            bins=bins,
            title="Goal minutes by own-goal status",
            xlabel="Minute",
            ylabel="Goals",
            figsize=(11, 4.5),
        ),
        ChartSpec(
            name="minute_density",
            kind="density",
            data=minutes,
            x="minute",
            y=None,
            hue="own_goal",
            title="Density of goal minutes",
            xlabel="Minute",
            ylabel="Density",
        ),
        ChartSpec(
            name="own_goal_share_by_year",
            kind="line",
            data=proportions[["year", "proportion"]].copy(),
            x="year",
            y="proportion",
            title="Share of own goals per year",
            xlabel="Year",
            ylabel="Proportion of own goals",
        ),
    ]


def _draw_box(spec: ChartSpec, fig: Figure, axes: List[Axes]) -> None:
    sns.boxplot(
        data=spec.data,
        x=spec.x,
        y=spec.y,
        hue=spec.hue,
        order=FLAG_LEVELS,
        hue_order=FLAG_LEVELS,
        palette=spec.palette,
        legend=False,
        ax=axes[0],
    )


def _draw_hist(spec: ChartSpec, fig: Figure, axes: List[Axes]) -> None:
    sns.histplot(
        data=spec.data,
        x=spec.x,
        hue=spec.hue,
        hue_order=FLAG_LEVELS,
        palette=spec.palette,
        bins=spec.bins,
        alpha=0.5,
        ax=axes[0],
    )


def _draw_hist_panels(spec: ChartSpec, fig: Figure, axes: List[Axes]) -> None:
    for ax, level in zip(axes, FLAG_LEVELS):
        subset = spec.data[spec.data[spec.hue] == level]
        sns.histplot(
            data=subset,
            x=spec.x,
            bins=spec.bins,
            color=spec.palette[level],
            ax=ax,
        )
        ax.set_title(f"{spec.hue} = {level}")
    fig.suptitle(spec.title)


def _draw_density(spec: ChartSpec, fig: Figure, axes: List[Axes]) -> None:
    sns.kdeplot(
        data=spec.data,
        x=spec.x,
        hue=spec.hue,
        hue_order=FLAG_LEVELS,
        palette=spec.palette,
        fill=True,
        common_norm=False,
        alpha=0.4,
        ax=axes[0],
    )


def _draw_line(spec: ChartSpec, fig: Figure, axes: List[Axes]) -> None:
    sns.lineplot(
        data=spec.data,
        x=spec.x,
        y=spec.y,
        marker="o",
        color=spec.palette["TRUE"],
        ax=axes[0],
    )


_DRAWERS: Dict[str, Callable[[ChartSpec, Figure, List[Axes]], None]] = {
    "box": _draw_box,
    "hist": _draw_hist,
    "hist_panels": _draw_hist_panels,
    "density": _draw_density,
    "line": _draw_line,
}


def _has_data(spec: ChartSpec) -> bool:
    column = spec.y if spec.y is not None else spec.x
    return not spec.data[column].dropna().empty


def render_chart(spec: ChartSpec, plots_dir: PathLike | None = None) -> Optional[Path]:
    """
    Draw one chart and save it as PNG.

    Returns
    -------
    pathlib.Path | None
        Path of the saved image, or None when the spec has no data to plot.
    """
    try:
        drawer = _DRAWERS[spec.kind]
    except KeyError:
        raise ValueError(f"Unknown chart kind: {spec.kind!r}") from None

    if not _has_data(spec):
        logger.warning("Skipping %s chart (no rows left to plot).", spec.name)
        return None

    out_dir = ensure_plots_dir(plots_dir)
    n_axes = len(FLAG_LEVELS) if spec.kind == "hist_panels" else 1
    fig, grid = plt.subplots(
        1, n_axes, figsize=spec.figsize, sharex=True, squeeze=False
    )
    axes = list(grid.flat)
    try:
        drawer(spec, fig, axes)

        # Panel charts carry the title on the figure instead
        if spec.kind != "hist_panels":
            axes[0].set_title(spec.title)
        for ax in axes:
            ax.set_xlabel(spec.xlabel)
            ax.set_ylabel(spec.ylabel)

        fig.tight_layout()
        path = out_dir / spec.filename
        fig.savefig(path)
    finally:
        plt.close(fig)

    logger.info("Saved %s chart to %s", spec.kind, path)
    return path


def render_all(
    df: pd.DataFrame,
    proportions: pd.DataFrame | None = None,
    plots_dir: PathLike | None = None,
) -> List[Path]:
    """Build and render every chart for a cleaned goal table; empty charts are skipped."""
    paths = [
        render_chart(spec, plots_dir) for spec in build_chart_specs(df, proportions)
    ]
    return [path for path in paths if path is not None]
