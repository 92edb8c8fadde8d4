"""
Serializable view state and the pure reducer that evolves it.

The whole dashboard session is one frozen ViewState.  Nothing mutates it:
every user intent or completed fetch is an action, and

    new_state = reduce(state, action)

returns a fresh state.  The reducer has no I/O and no Streamlit imports,
so every transition can be tested on plain values and the state can be
dumped to JSON (``state.to_dict()``) for debugging.

Fetches are tracked per view with a Remote record (idle / loading /
loaded / failed).  Each fetch carries a request id issued by the
controller; a response whose id is not the view's latest is dropped, so
the newest request always wins regardless of arrival order.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any

from viewership.api.models import BrandRow, PredictionRequest, Team, WeeklyReport
from viewership.constants import ALL_YEARS, TAB_PREDICTOR, TABS
from viewership.utils.validators import (
    spread_value,
    validate_comp_games,
    validate_rank,
    validate_spread,
)


class LoadStatus(str, Enum):
    IDLE    = "idle"
    LOADING = "loading"
    LOADED  = "loaded"
    FAILED  = "failed"


@dataclass(frozen=True)
class Remote:
    """Tri-state status of one view's fetch."""
    status: LoadStatus = LoadStatus.IDLE
    request_id: int = 0
    error: str = ""         # user-facing message
    detail: str = ""        # underlying cause, for the log and a caption

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def failed(self) -> bool:
        return self.status is LoadStatus.FAILED


@dataclass(frozen=True)
class PredictorInputs:
    team1: str = ""
    team2: str = ""
    rank1: int = 0
    rank2: int = 0
    spread: str = ""        # raw text, may be transient ("3.")
    network: str = ""
    time_slot: str = ""
    comp_tier1: int = 0

    def to_request(self) -> PredictionRequest:
        return PredictionRequest(
            team1=self.team1,
            team2=self.team2,
            rank1=self.rank1,
            rank2=self.rank2,
            spread=spread_value(self.spread),
            network=self.network,
            time_slot=self.time_slot,
            comp_tier1=self.comp_tier1,
        )


# field name -> validator; None means the selector already constrains it
FIELD_VALIDATORS = {
    "team1":      None,
    "team2":      None,
    "rank1":      validate_rank,
    "rank2":      validate_rank,
    "spread":     validate_spread,
    "network":    None,
    "time_slot":  None,
    "comp_tier1": validate_comp_games,
}


# ── Views ────────────────────────────────────────────────────────────────────

VIEW_TEAMS       = "teams"
VIEW_BRAND_YEARS = "brand_years"
VIEW_PREDICTION = "prediction"
VIEW_BRANDS     = "brands"
VIEW_WEEKLY     = "weekly"

ERROR_MESSAGES = {
    VIEW_TEAMS:       "Failed to load the team list.",
    VIEW_BRAND_YEARS: "Failed to load brand-ranking years.",
    VIEW_PREDICTION: "Prediction request failed. Please try again.",
    VIEW_BRANDS:     "Failed to load brand rankings.",
    VIEW_WEEKLY:     "Failed to load weekly predictions.",
}


@dataclass(frozen=True)
class ViewState:
    active_tab: str = TAB_PREDICTOR

    # reference data
    teams: tuple[Team, ...] = ()
    teams_remote: Remote = field(default_factory=Remote)
    brand_years: tuple[int, ...] = ()
    years_remote: Remote = field(default_factory=Remote)

    # predictor
    inputs: PredictorInputs = field(default_factory=PredictorInputs)
    prediction: str | None = None
    prediction_remote: Remote = field(default_factory=Remote)

    # brand rankings
    brand_year: str = ALL_YEARS
    brand_rows: tuple[BrandRow, ...] = ()
    brands_remote: Remote = field(default_factory=Remote)

    # weekly predictions
    weekly: WeeklyReport = field(default_factory=WeeklyReport)
    weekly_remote: Remote = field(default_factory=Remote)
    open_week: tuple[int, int | None] | None = None

    def remote(self, view: str) -> Remote:
        return getattr(self, _REMOTE_FIELDS[view])

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_REMOTE_FIELDS = {
    VIEW_TEAMS:       "teams_remote",
    VIEW_BRAND_YEARS: "years_remote",
    VIEW_PREDICTION: "prediction_remote",
    VIEW_BRANDS:     "brands_remote",
    VIEW_WEEKLY:     "weekly_remote",
}


# ── Actions ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SelectTab:
    tab: str


@dataclass(frozen=True)
class SetPredictorField:
    name: str
    raw: Any


@dataclass(frozen=True)
class SelectBrandYear:
    year: str


@dataclass(frozen=True)
class ToggleWeek:
    key: tuple[int, int | None]


@dataclass(frozen=True)
class FetchStarted:
    view: str
    request_id: int


@dataclass(frozen=True)
class FetchSucceeded:
    view: str
    request_id: int
    payload: Any


@dataclass(frozen=True)
class FetchFailed:
    view: str
    request_id: int
    error: str = ""


# ── Reducer ──────────────────────────────────────────────────────────────────

def apply_field(inputs: PredictorInputs, name: str, raw: Any) -> PredictorInputs | None:
    """Validated copy of ``inputs`` with one field changed, or None on rejection."""
    if name not in FIELD_VALIDATORS:
        raise ValueError(f"unknown predictor field: {name!r}")
    validator = FIELD_VALIDATORS[name]
    value = "" if raw is None else str(raw)
    if validator is not None:
        value = validator(value)
        if value is None:
            return None
    return replace(inputs, **{name: value})


def _set_remote(state: ViewState, view: str, remote: Remote, **changes) -> ViewState:
    return replace(state, **{_REMOTE_FIELDS[view]: remote}, **changes)


def _on_started(state: ViewState, a: FetchStarted) -> ViewState:
    remote = Remote(status=LoadStatus.LOADING, request_id=a.request_id)
    if a.view == VIEW_PREDICTION:
        return _set_remote(state, a.view, remote, prediction=None)
    return _set_remote(state, a.view, remote)


def _on_succeeded(state: ViewState, a: FetchSucceeded) -> ViewState:
    remote = Remote(status=LoadStatus.LOADED, request_id=a.request_id)
    if a.view == VIEW_TEAMS:
        return _set_remote(state, a.view, remote, teams=tuple(a.payload))
    if a.view == VIEW_BRAND_YEARS:
        return _set_remote(state, a.view, remote, brand_years=tuple(a.payload))
    if a.view == VIEW_PREDICTION:
        return _set_remote(state, a.view, remote, prediction=a.payload)
    if a.view == VIEW_BRANDS:
        return _set_remote(state, a.view, remote, brand_rows=tuple(a.payload))
    if a.view == VIEW_WEEKLY:
        report: WeeklyReport = a.payload
        first = report.weeks[0].key if report.weeks else None
        return _set_remote(state, a.view, remote, weekly=report, open_week=first)
    raise ValueError(f"unknown view: {a.view!r}")


def _on_failed(state: ViewState, a: FetchFailed) -> ViewState:
    remote = Remote(
        status=LoadStatus.FAILED,
        request_id=a.request_id,
        error=ERROR_MESSAGES[a.view],
        detail=a.error,
    )
    return _set_remote(state, a.view, remote)


def reduce(state: ViewState, action) -> ViewState:
    if isinstance(action, SelectTab):
        if action.tab not in TABS:
            return state
        return replace(state, active_tab=action.tab)

    if isinstance(action, SetPredictorField):
        inputs = apply_field(state.inputs, action.name, action.raw)
        if inputs is None:
            return state
        return replace(
            state,
            inputs=inputs,
            prediction=None,
            prediction_remote=replace(state.prediction_remote, status=LoadStatus.IDLE, error=""),
        )

    if isinstance(action, SelectBrandYear):
        return replace(state, brand_year=str(action.year))

    if isinstance(action, ToggleWeek):
        key = tuple(action.key)
        return replace(state, open_week=None if state.open_week == key else key)

    if isinstance(action, (FetchStarted, FetchSucceeded, FetchFailed)):
        if action.view not in _REMOTE_FIELDS:
            raise ValueError(f"unknown view: {action.view!r}")
        if isinstance(action, FetchStarted):
            return _on_started(state, action)
        # superseded request, or one invalidated by an input change
        current = state.remote(action.view)
        if action.request_id != current.request_id or not current.loading:
            return state
        if isinstance(action, FetchSucceeded):
            return _on_succeeded(state, action)
        return _on_failed(state, action)

    raise TypeError(f"unknown action: {action!r}")
