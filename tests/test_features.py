import pandas as pd

from goalscope.config import FLAG_LEVELS
from goalscope.features.cleaning import (
    CleaningConfig,
    clean_goals,
    filter_minute_range,
    normalize_flags,
    parse_dates,
)


def _extra_row(**overrides) -> dict:
    row = {
        "date": "2019-06-07",
        "home_team": "Iceland",
        "away_team": "Chile",
        "team": "Iceland",
        "minute": 50,
        "own_goal": "FALSE",
        "penalty": "FALSE",
    }
    row.update(overrides)
    return row


def _with_rows(raw: pd.DataFrame, *rows: dict) -> pd.DataFrame:
    return pd.concat([raw, pd.DataFrame(list(rows))], ignore_index=True)


def test_cleaned_rows_satisfy_invariants(cleaned_goals):
    assert len(cleaned_goals) > 0
    assert cleaned_goals["minute"].between(1, 120).all()
    assert not cleaned_goals.isna().any().any()

    assert pd.api.types.is_integer_dtype(cleaned_goals["minute"])
    assert pd.api.types.is_integer_dtype(cleaned_goals["year"])
    for col in ("own_goal", "penalty"):
        assert isinstance(cleaned_goals[col].dtype, pd.CategoricalDtype)
        assert cleaned_goals[col].cat.categories.tolist() == FLAG_LEVELS
        assert not cleaned_goals[col].cat.ordered


def test_goal_for_is_home_iff_team_is_home_team(cleaned_goals):
    is_home = cleaned_goals["team"] == cleaned_goals["home_team"]
    assert (cleaned_goals.loc[is_home, "goal_for"] == "Home").all()
    assert (cleaned_goals.loc[~is_home, "goal_for"] == "Away").all()


def test_year_comes_from_date(cleaned_goals):
    assert (cleaned_goals["year"] == cleaned_goals["date"].dt.year).all()


def test_minute_out_of_range_row_is_dropped(raw_goals):
    raw = _with_rows(raw_goals, _extra_row(minute=125))
    assert (raw["minute"] == 125).any()

    cleaned, report = clean_goals(raw)

    assert not (cleaned["minute"] == 125).any()
    assert "Iceland" not in set(cleaned["team"])
    assert report.dropped_out_of_range == 1


def test_null_team_row_is_dropped(raw_goals):
    raw = _with_rows(raw_goals, _extra_row(team=None))

    cleaned, report = clean_goals(raw)

    assert "Iceland" not in set(cleaned["home_team"])
    assert report.dropped_incomplete == 1


def test_unparsable_date_row_is_dropped(raw_goals):
    raw = _with_rows(raw_goals, _extra_row(date="2019-13-45"))

    cleaned, _ = clean_goals(raw)

    assert "Iceland" not in set(cleaned["home_team"])


def test_parse_dates_uses_fixed_format():
    df = pd.DataFrame({"date": ["2019-06-07", "07/06/2019", None]})
    parsed = parse_dates(df)
    assert parsed["date"].iloc[0] == pd.Timestamp(2019, 6, 7)
    assert parsed["date"].iloc[1:].isna().all()


def test_filter_minute_range_is_inclusive():
    df = pd.DataFrame({"minute": [0, 1, 60, 120, 121, "x", None]})
    kept = filter_minute_range(df)
    assert kept["minute"].tolist() == [1, 60, 120]


def test_filter_minute_range_custom_bounds(raw_goals):
    cleaned, _ = clean_goals(raw_goals, CleaningConfig(minute_min=1, minute_max=90))
    assert cleaned["minute"].max() <= 90


def test_normalize_flags_accepts_boolean_like_encodings():
    df = pd.DataFrame(
        {
            "own_goal": ["TRUE", "false", 1, 0, "maybe"],
            "penalty": [True, False, "1", "0", None],
        }
    )
    out = normalize_flags(df)

    assert out["own_goal"].tolist()[:4] == ["TRUE", "FALSE", "TRUE", "FALSE"]
    assert pd.isna(out["own_goal"].iloc[4])
    assert out["penalty"].tolist()[:4] == ["TRUE", "FALSE", "TRUE", "FALSE"]
    assert pd.isna(out["penalty"].iloc[4])


def test_clean_goals_does_not_mutate_input(raw_goals):
    before = raw_goals.copy()
    clean_goals(raw_goals)
    pd.testing.assert_frame_equal(raw_goals, before)


def test_cleaning_report_counts_add_up(raw_goals):
    raw = _with_rows(
        raw_goals,
        _extra_row(minute=0),
        _extra_row(minute=130),
        _extra_row(penalty=None),
    )
    cleaned, report = clean_goals(raw)

    assert report.rows_in == len(raw)
    assert report.rows_out == len(cleaned)
    assert report.dropped_out_of_range == 2
    assert report.dropped_incomplete == 1
    assert (
        report.rows_in - report.dropped_out_of_range - report.dropped_incomplete
        == report.rows_out
    )


def test_fractional_minute_is_dropped():
    df = pd.DataFrame({"minute": [45.7, 45.0, "90", "12.5"]})
    kept = filter_minute_range(df)
    assert kept["minute"].tolist() == [45, 90]


def test_fractional_minute_counts_as_out_of_range(raw_goals):
    raw = _with_rows(raw_goals, _extra_row(minute=45.7))

    cleaned, report = clean_goals(raw)

    assert "Iceland" not in set(cleaned["team"])
    assert report.dropped_out_of_range == 1
