import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from goalscope.features.cleaning import clean_goals  # noqa: E402

TEAMS = ["England", "Germany", "France", "Spain", "Sweden", "Brazil", "Japan", "Canada"]


def make_raw_goals(n_goals: int = 240, seed: int = 7) -> pd.DataFrame:
    """Deterministic raw goal table: 3 goals per match, every 6th an own goal."""
    rng = np.random.default_rng(seed)
    rows = []
    for i in range(n_goals):
        match = i // 3
        home = TEAMS[match % len(TEAMS)]
        away = TEAMS[(match + 3) % len(TEAMS)]
        own_goal = i % 6 == 0
        rows.append(
            {
                "date": f"{2015 + match % 8}-06-{match % 28 + 1:02d}",
                "home_team": home,
                "away_team": away,
                "team": home if i % 2 == 0 else away,
                "minute": int(rng.integers(1, 121)),
                "own_goal": "TRUE" if own_goal else "FALSE",
                "penalty": "TRUE" if (not own_goal and i % 7 == 0) else "FALSE",
            }
        )
    return pd.DataFrame(rows)


@pytest.fixture
def raw_goals() -> pd.DataFrame:
    return make_raw_goals()


@pytest.fixture
def cleaned_goals(raw_goals: pd.DataFrame) -> pd.DataFrame:
    cleaned, _ = clean_goals(raw_goals)
    return cleaned
