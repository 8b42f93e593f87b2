"""
Helper functions for file and directory paths used in goalscope.
"""

from pathlib import Path
from typing import Union

from goalscope.config import PLOTS_DIR, RAW_DATA_DIR, RAW_GOALS_FILENAME

PathLike = Union[str, Path]


def get_raw_data_path(filename: str | None = None) -> Path:
    """
    Return the path to a raw data file.

    Parameters
    ----------
    filename : str | None
        Specific filename, or None for the default goalscorers CSV.

    Returns
    -------
    Path
        Full path to the raw data file.
    """
    if filename is None:
        filename = RAW_GOALS_FILENAME
    return RAW_DATA_DIR / filename


def ensure_plots_dir(plots_dir: PathLike | None = None) -> Path:
    """Return the plots directory, creating it if needed."""
    path = Path(plots_dir) if plots_dir is not None else PLOTS_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path
