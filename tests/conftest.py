import pytest
import requests

from viewership.api.client import BackendClient


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.text is not None:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Records every request and answers from a path -> response table."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        path = "/" + url.split("://", 1)[-1].split("/", 1)[-1]
        if kwargs.get("params"):
            path += "?" + "&".join(f"{k}={v}" for k, v in kwargs["params"].items())
        answer = self.routes.get(path)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return FakeResponse(status_code=404)
        return answer


@pytest.fixture
def weekly_payload() -> dict:
    """Weekly report in the split pregame/postgame schema."""
    return {
        "weeks": [
            {
                "week": 12,
                "year": 2025,
                "games": [
                    {
                        "date": "2025-11-22",
                        "time_slot": "Sat Mid",
                        "matchup": "Ohio State vs Rutgers",
                        "spread": -24.5,
                        "network": "FOX",
                        "predicted": "5.1M",
                        "percent_error": 40.0,
                        "accuracy": "Miss",
                        "post_predicted": "4.0M",
                        "post_percent_error": 30.0,
                        "post_accuracy": "Close",
                        "actual": "3.6M",
                    },
                    {
                        "date": "2025-11-22",
                        "time_slot": "Primetime",
                        "matchup": "Texas vs Kentucky",
                        "spread": -10,
                        "network": "ABC",
                        "predicted": "6.0M",
                        "percent_error": 10.0,
                        "accuracy": "Hit",
                        "post_predicted": None,
                        "post_percent_error": None,
                        "post_accuracy": None,
                        "actual": None,
                    },
                ],
            },
            {"week": 11, "year": 2025, "games": []},
        ],
        "metrics": {
            "pregame": {"median_error": 14.26, "mean_error": 19.0, "pct_within_10": 38, "pct_within_25": 71.5},
            "postgame": {"median_error": 9.0, "mean_error": 12.5, "pct_within_10": 55, "pct_within_25": 88},
        },
    }


@pytest.fixture
def routes(weekly_payload) -> dict:
    return {
        "/teams": FakeResponse({"teams": [{"value": "OSU", "label": "Ohio State"}]}),
        "/brand-years": FakeResponse({"years": [2023, 2024]}),
        "/brand-rankings": FakeResponse({"rows": [
            {"rank": 1, "team": "Ohio State", "viewership_lift_pct": 151.27, "games_used": 80},
            {"rank": 2, "team": "Michigan", "viewership_lift_pct": 120.0, "games_used": 78},
        ]}),
        "/brand-rankings?year=2024": FakeResponse({"rows": []}),
        "/predict": FakeResponse({"prediction_formatted": "7.2M"}),
        "/weekly-predictions": FakeResponse(weekly_payload),
    }


@pytest.fixture
def session(routes) -> FakeSession:
    return FakeSession(routes)


@pytest.fixture
def client(session) -> BackendClient:
    return BackendClient(base_url="http://backend.test", timeout=5, session=session)
