import json

import pytest

from viewership.api.models import BrandRow, Team, WeekGroup, WeeklyReport
from viewership.constants import TAB_BRANDS, TAB_PREDICTOR
from viewership.state.view_state import (
    VIEW_BRANDS,
    VIEW_PREDICTION,
    VIEW_WEEKLY,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    LoadStatus,
    SelectTab,
    SetPredictorField,
    ToggleWeek,
    ViewState,
    reduce,
)


def _with_prediction() -> ViewState:
    s = reduce(ViewState(), FetchStarted(VIEW_PREDICTION, 1))
    return reduce(s, FetchSucceeded(VIEW_PREDICTION, 1, "7.2M"))


def test_select_tab():
    s = reduce(ViewState(), SelectTab(TAB_BRANDS))
    assert s.active_tab == TAB_BRANDS


def test_unknown_tab_is_ignored():
    s = ViewState()
    assert reduce(s, SelectTab("settings")) is s
    assert s.active_tab == TAB_PREDICTOR


def test_rejected_input_leaves_state_untouched():
    s = reduce(ViewState(), SetPredictorField("rank1", "12"))
    s = reduce(s, FetchStarted(VIEW_PREDICTION, 1))
    s = reduce(s, FetchSucceeded(VIEW_PREDICTION, 1, "7.2M"))
    assert reduce(s, SetPredictorField("rank1", "30")) is s
    assert reduce(s, SetPredictorField("spread", "3.2")) is s
    assert reduce(s, SetPredictorField("comp_tier1", "11")) is s


@pytest.mark.parametrize("name, raw", [
    ("team1", "OSU"),
    ("team2", "MI"),
    ("rank1", "3"),
    ("rank2", ""),
    ("spread", "3.5"),
    ("network", "FOX"),
    ("time_slot", "Sunday"),
    ("comp_tier1", "2"),
])
def test_any_accepted_change_clears_prediction(name, raw):
    s = _with_prediction()
    assert s.prediction == "7.2M"
    s = reduce(s, SetPredictorField(name, raw))
    assert s.prediction is None
    assert s.prediction_remote.status is LoadStatus.IDLE


def test_transient_spread_is_held_as_text():
    s = reduce(ViewState(), SetPredictorField("spread", "3."))
    assert s.inputs.spread == "3."
    assert s.inputs.to_request().spread == 3.0


def test_unknown_field_is_a_programming_error():
    with pytest.raises(ValueError):
        reduce(ViewState(), SetPredictorField("venue", "Rose Bowl"))


def test_brand_fetch_lifecycle():
    s = reduce(ViewState(), FetchStarted(VIEW_BRANDS, 4))
    assert s.brands_remote.loading
    rows = [BrandRow(1, "Ohio State", 150.0, 80)]
    s = reduce(s, FetchSucceeded(VIEW_BRANDS, 4, rows))
    assert s.brands_remote.status is LoadStatus.LOADED
    assert s.brand_rows == tuple(rows)


def test_stale_response_is_discarded():
    s = reduce(ViewState(), FetchStarted(VIEW_BRANDS, 1))
    s = reduce(s, FetchStarted(VIEW_BRANDS, 2))
    newest = [BrandRow(1, "Texas", 90.0, 50)]
    s = reduce(s, FetchSucceeded(VIEW_BRANDS, 2, newest))
    after = reduce(s, FetchSucceeded(VIEW_BRANDS, 1, [BrandRow(1, "Old", 1.0, 1)]))
    assert after is s
    assert after.brand_rows == tuple(newest)


def test_prediction_response_after_input_change_is_dropped():
    s = reduce(ViewState(), FetchStarted(VIEW_PREDICTION, 1))
    s = reduce(s, SetPredictorField("network", "CBS"))
    s = reduce(s, FetchSucceeded(VIEW_PREDICTION, 1, "7.2M"))
    assert s.prediction is None


def test_failure_sets_view_local_message():
    s = reduce(ViewState(), FetchStarted(VIEW_BRANDS, 1))
    s = reduce(s, FetchFailed(VIEW_BRANDS, 1, "/brand-rankings: 502"))
    assert s.brands_remote.failed
    assert s.brands_remote.error == "Failed to load brand rankings."
    assert s.brands_remote.detail == "/brand-rankings: 502"
    assert s.weekly_remote.status is LoadStatus.IDLE


def test_weekly_load_opens_first_week_and_toggle_collapses():
    report = WeeklyReport(weeks=(WeekGroup(12, 2025), WeekGroup(11, 2025)))
    s = reduce(ViewState(), FetchStarted(VIEW_WEEKLY, 1))
    s = reduce(s, FetchSucceeded(VIEW_WEEKLY, 1, report))
    assert s.open_week == (12, 2025)

    s = reduce(s, ToggleWeek((11, 2025)))
    assert s.open_week == (11, 2025)

    s = reduce(s, ToggleWeek((11, 2025)))
    assert s.open_week is None


def test_empty_weekly_report_opens_nothing():
    s = reduce(ViewState(), FetchStarted(VIEW_WEEKLY, 1))
    s = reduce(s, FetchSucceeded(VIEW_WEEKLY, 1, WeeklyReport()))
    assert s.open_week is None


def test_state_serializes_to_json():
    s = reduce(ViewState(teams=(Team("OSU", "Ohio State"),)), SetPredictorField("spread", "2.5"))
    s = reduce(s, FetchStarted(VIEW_WEEKLY, 1))
    s = reduce(s, FetchSucceeded(VIEW_WEEKLY, 1, WeeklyReport(weeks=(WeekGroup(1, 2024),))))
    data = json.loads(json.dumps(s.to_dict()))
    assert data["inputs"]["spread"] == "2.5"
    assert data["teams"] == [{"value": "OSU", "label": "Ohio State"}]
    assert data["weekly_remote"]["status"] == "loaded"
    assert data["open_week"] == [1, 2024]


def test_unknown_action_type():
    with pytest.raises(TypeError):
        reduce(ViewState(), object())
