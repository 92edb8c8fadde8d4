"""
View State Controller: the only place that talks to the backend.

Holds the current ViewState and a BackendClient.  Each public method is a
user intent; it dispatches actions through the pure reducer and, where the
intent needs data, runs the fetch as an explicit task:

    FetchStarted(view, id)  ->  client call  ->  FetchSucceeded / FetchFailed

Only BackendError is caught.  It is logged and becomes a view-local error
message; anything else is a bug and propagates.

Usage:
    controller = ViewController(BackendClient())
    controller.load_reference_data()
    controller.set_predictor_field("rank1", "5")
    controller.request_prediction()
    print(controller.state.prediction)
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable

from viewership.api.client import BackendClient, BackendError
from viewership.constants import ALL_YEARS
from viewership.state.view_state import (
    VIEW_BRANDS,
    VIEW_BRAND_YEARS,
    VIEW_PREDICTION,
    VIEW_TEAMS,
    VIEW_WEEKLY,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    LoadStatus,
    SelectBrandYear,
    SelectTab,
    SetPredictorField,
    ToggleWeek,
    ViewState,
    reduce,
)

logger = logging.getLogger(__name__)


class ViewController:
    def __init__(self, client: BackendClient, state: ViewState | None = None):
        self.client = client
        self.state = state or ViewState()
        self._ids = itertools.count(1)

    def dispatch(self, action) -> ViewState:
        self.state = reduce(self.state, action)
        return self.state

    # ------------------------------------------------------------------ #
    # User intents                                                         #
    # ------------------------------------------------------------------ #

    def select_tab(self, tab: str) -> None:
        self.dispatch(SelectTab(tab))

    def set_predictor_field(self, name: str, raw: Any) -> bool:
        """Apply one keystroke/selection.  Returns False when it was rejected."""
        before = self.state
        after = self.dispatch(SetPredictorField(name, raw))
        return after is not before

    def request_prediction(self) -> str | None:
        request = self.state.inputs.to_request()
        logger.info("Requesting prediction: %s vs %s", request.team1, request.team2)
        self._run(VIEW_PREDICTION, lambda: self.client.predict(request))
        return self.state.prediction

    def load_reference_data(self) -> None:
        """Session start: teams, brand years and all-years rankings.

        Teams and years are independent fetches.  Calling again retries
        whichever of them failed and leaves loaded ones alone.
        """
        if self._needs_load(self.state.teams_remote):
            self._run(VIEW_TEAMS, self.client.fetch_teams)
        if self._needs_load(self.state.years_remote):
            self._run(VIEW_BRAND_YEARS, self.client.fetch_brand_years)
        if self.state.brands_remote.status is LoadStatus.IDLE:
            self._fetch_brands()

    def set_brand_year(self, year) -> None:
        self.dispatch(SelectBrandYear(str(year)))
        self._fetch_brands()

    def load_weekly(self) -> None:
        self._run(VIEW_WEEKLY, self.client.fetch_weekly_predictions)

    def ensure_weekly_loaded(self) -> None:
        """First display of the weekly tab triggers its single fetch."""
        if self.state.weekly_remote.status is LoadStatus.IDLE:
            self.load_weekly()

    def toggle_week(self, key) -> None:
        self.dispatch(ToggleWeek(tuple(key)))

    # ------------------------------------------------------------------ #
    # Tasks                                                                #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _needs_load(remote) -> bool:
        return remote.status in (LoadStatus.IDLE, LoadStatus.FAILED)

    def _fetch_brands(self) -> None:
        year = self.state.brand_year
        scoped = None if year == ALL_YEARS else int(year)
        self._run(VIEW_BRANDS, lambda: self.client.fetch_brand_rankings(scoped))

    def _run(self, view: str, call: Callable[[], Any]) -> None:
        request_id = next(self._ids)
        self.dispatch(FetchStarted(view, request_id))
        try:
            payload = call()
        except BackendError as exc:
            logger.error("%s fetch failed: %s", view, exc)
            self.dispatch(FetchFailed(view, request_id, str(exc)))
            return
        self.dispatch(FetchSucceeded(view, request_id, payload))
