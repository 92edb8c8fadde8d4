"""
Request and response shapes of the viewership prediction backend.

Every entity is a frozen dataclass built from the backend's JSON with a
``from_dict`` classmethod.  Parsing is strict about required keys (a
missing key raises KeyError) and lenient about optional ones, so the
client can turn any malformed payload into a single BackendError.

The weekly schema exists in two shapes in the wild:

    old:  {"metrics": {"median_error": ..., "mean_error": ..., ...}}
    new:  {"metrics": {"pregame": {...}, "postgame": {...}}}

WeeklyMetrics reads both; the flat form becomes the pregame block.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _opt_float(value) -> float | None:
    """None stays None; anything else must be numeric."""
    if value is None:
        return None
    return float(value)


def _opt_str(value) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Team:
    value: str   # backend identifier sent in /predict
    label: str   # display name

    @classmethod
    def from_dict(cls, d: dict) -> Team:
        return cls(value=str(d["value"]), label=str(d["label"]))


@dataclass(frozen=True)
class PredictionRequest:
    team1: str = ""
    team2: str = ""
    rank1: int = 0          # 0 = unranked
    rank2: int = 0
    spread: float = 0.0
    network: str = ""
    time_slot: str = ""
    comp_tier1: int = 0     # major competing games, 0-10

    def to_payload(self) -> dict:
        """JSON body for POST /predict."""
        return {
            "team1":      self.team1,
            "team2":      self.team2,
            "rank1":      self.rank1,
            "rank2":      self.rank2,
            "spread":     self.spread,
            "network":    self.network,
            "time_slot":  self.time_slot,
            "comp_tier1": self.comp_tier1,
        }


@dataclass(frozen=True)
class BrandRow:
    rank: int
    team: str
    viewership_lift_pct: float
    games_used: int

    @classmethod
    def from_dict(cls, d: dict) -> BrandRow:
        return cls(
            rank=int(d["rank"]),
            team=str(d["team"]),
            viewership_lift_pct=float(d["viewership_lift_pct"]),
            games_used=int(d["games_used"]),
        )


@dataclass(frozen=True)
class ErrorMetrics:
    median_error: float
    mean_error: float
    pct_within_10: float
    pct_within_25: float

    @classmethod
    def from_dict(cls, d: dict) -> ErrorMetrics:
        return cls(
            median_error=float(d["median_error"]),
            mean_error=float(d["mean_error"]),
            pct_within_10=float(d["pct_within_10"]),
            pct_within_25=float(d["pct_within_25"]),
        )


@dataclass(frozen=True)
class WeeklyMetrics:
    pregame: ErrorMetrics
    postgame: ErrorMetrics | None = None

    @classmethod
    def from_dict(cls, d: dict) -> WeeklyMetrics:
        if "pregame" not in d:
            return cls(pregame=ErrorMetrics.from_dict(d))
        post = d.get("postgame")
        return cls(
            pregame=ErrorMetrics.from_dict(d["pregame"]),
            postgame=ErrorMetrics.from_dict(post) if post else None,
        )


@dataclass(frozen=True)
class GameRow:
    date: str
    time_slot: str
    matchup: str
    spread: str
    network: str
    predicted: str
    percent_error: float | None = None
    accuracy: str = ""
    post_predicted: str = ""
    post_percent_error: float | None = None
    post_accuracy: str = ""
    actual: str = ""

    @property
    def has_postgame(self) -> bool:
        return bool(self.post_predicted) or self.post_percent_error is not None

    @classmethod
    def from_dict(cls, d: dict) -> GameRow:
        return cls(
            date=_opt_str(d["date"]),
            time_slot=_opt_str(d.get("time_slot")),
            matchup=_opt_str(d["matchup"]),
            spread=_opt_str(d.get("spread")),
            network=_opt_str(d.get("network")),
            predicted=_opt_str(d.get("predicted")),
            percent_error=_opt_float(d.get("percent_error")),
            accuracy=_opt_str(d.get("accuracy")),
            post_predicted=_opt_str(d.get("post_predicted")),
            post_percent_error=_opt_float(d.get("post_percent_error")),
            post_accuracy=_opt_str(d.get("post_accuracy")),
            actual=_opt_str(d.get("actual")),
        )


@dataclass(frozen=True)
class WeekGroup:
    week: int
    year: int | None = None
    games: tuple[GameRow, ...] = field(default_factory=tuple)

    @property
    def key(self) -> tuple[int, int | None]:
        """Identity used to track which group is expanded."""
        return (self.week, self.year)

    @property
    def title(self) -> str:
        return f"Week {self.week} ({self.year})" if self.year else f"Week {self.week}"

    @property
    def has_postgame(self) -> bool:
        return any(g.has_postgame for g in self.games)

    @classmethod
    def from_dict(cls, d: dict) -> WeekGroup:
        year = d.get("year")
        return cls(
            week=int(d["week"]),
            year=int(year) if year else None,
            games=tuple(GameRow.from_dict(g) for g in d.get("games") or []),
        )


@dataclass(frozen=True)
class WeeklyReport:
    """Payload of GET /weekly-predictions."""
    weeks: tuple[WeekGroup, ...] = field(default_factory=tuple)
    metrics: WeeklyMetrics | None = None

    @classmethod
    def from_dict(cls, d: dict) -> WeeklyReport:
        metrics = d.get("metrics")
        return cls(
            weeks=tuple(WeekGroup.from_dict(w) for w in d.get("weeks") or []),
            metrics=WeeklyMetrics.from_dict(metrics) if metrics else None,
        )
