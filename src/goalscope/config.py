"""
Global configuration for the goalscope project.

This module centralizes paths and key analysis parameters (minute range,
significance level, plot styling), so you can tweak them in one place.
"""

from pathlib import Path

# Project root = folder that contains "src", "data", "plots", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

# Data directories
DATA_DIR: Path = PROJECT_ROOT / "data"
RAW_DATA_DIR: Path = DATA_DIR / "raw"

# Default raw dataset
RAW_GOALS_FILENAME: str = "sample_goalscorers.csv"

# Plot output directory
PLOTS_DIR: Path = PROJECT_ROOT / "plots"

# Cleaning parameters
DATE_FORMAT: str = "%Y-%m-%d"
MINUTE_MIN: int = 1
MINUTE_MAX: int = 120  # regulation + extra time

# Two-level encoding used for the own_goal / penalty flags
FLAG_LEVELS = ["FALSE", "TRUE"]

# Hypothesis testing
SIGNIFICANCE_LEVEL: float = 0.05
CONFIDENCE_LEVEL: float = 0.95

# Anderson-Darling needs at least this many observations per sample
MIN_NORMALITY_SAMPLE: int = 8

# Plot styling
HISTOGRAM_BINS: int = 30
OWN_GOAL_PALETTE = {"FALSE": "#1f77b4", "TRUE": "#d62728"}

# Logging
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
