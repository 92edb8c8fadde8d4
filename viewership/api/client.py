"""
HTTP client for the viewership prediction backend.

Wraps the five JSON endpoints the dashboard needs:

    GET  /teams                 -> list[Team]
    GET  /brand-years           -> list[int]
    GET  /brand-rankings[?year] -> list[BrandRow]
    POST /predict               -> str   (backend-formatted viewer count)
    GET  /weekly-predictions    -> WeeklyReport

Any transport error, HTTP error status, non-JSON body or payload that does
not match the expected shape is raised as BackendError, so callers only
ever handle one exception type.

Usage:
    from viewership.api.client import BackendClient
    client = BackendClient()
    teams = client.fetch_teams()
    # [Team(value="OSU", label="Ohio State"), ...]
"""

from __future__ import annotations

import logging

import requests

from viewership import config
from viewership.api.models import BrandRow, PredictionRequest, Team, WeeklyReport

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """A backend call failed; ``path`` names the endpoint."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class BackendClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or config.BACKEND_URL).rstrip("/")
        self.timeout  = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.session  = session or requests.Session()

    # ------------------------------------------------------------------ #
    # Endpoints                                                            #
    # ------------------------------------------------------------------ #

    def fetch_teams(self) -> list[Team]:
        data = self._request("GET", "/teams")
        return self._parse("/teams", lambda: [Team.from_dict(t) for t in data.get("teams") or []])

    def fetch_brand_years(self) -> list[int]:
        data = self._request("GET", "/brand-years")
        return self._parse("/brand-years", lambda: [int(y) for y in data.get("years") or []])

    def fetch_brand_rankings(self, year: int | None = None) -> list[BrandRow]:
        """Rankings for one season, or across all seasons when year is None."""
        params = {"year": year} if year is not None else None
        data = self._request("GET", "/brand-rankings", params=params)
        return self._parse(
            "/brand-rankings",
            lambda: [BrandRow.from_dict(r) for r in data.get("rows") or []],
        )

    def predict(self, request: PredictionRequest) -> str:
        data = self._request("POST", "/predict", json=request.to_payload())
        formatted = data.get("prediction_formatted")
        if formatted is None:
            raise BackendError("/predict", "response has no prediction_formatted")
        return str(formatted)

    def fetch_weekly_predictions(self) -> WeeklyReport:
        data = self._request("GET", "/weekly-predictions")
        return self._parse("/weekly-predictions", lambda: WeeklyReport.from_dict(data))

    # ------------------------------------------------------------------ #
    # Internals                                                            #
    # ------------------------------------------------------------------ #

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s %s", method, url, kwargs.get("params") or "")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise BackendError(path, str(exc)) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise BackendError(path, "response is not JSON") from exc
        if not isinstance(data, dict):
            raise BackendError(path, f"expected a JSON object, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse(path: str, build):
        try:
            return build()
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise BackendError(path, f"malformed payload ({exc!r})") from exc
