"""
Pure table builders for the dashboard tabs.

Nothing here touches Streamlit: each helper turns view-state values into a
pandas DataFrame (or Styler) that the app hands to ``st.dataframe``, so the
formatting rules can be tested directly.
"""

from __future__ import annotations

import pandas as pd

from viewership.api.models import (
    BrandRow,
    ErrorMetrics,
    GameRow,
    Team,
    WeekGroup,
    WeeklyMetrics,
)
from viewership.constants import BAND_HIGH_THRESHOLD, BAND_MEDIUM_THRESHOLD

BAND_HIGH   = "high"
BAND_MEDIUM = "medium"

# background colours per band (Nord red / yellow, softened)
BAND_COLORS = {
    BAND_HIGH:   "background-color: rgba(191, 97, 106, 0.35)",
    BAND_MEDIUM: "background-color: rgba(235, 203, 139, 0.35)",
}

PRE_ERROR_COL  = "% Error (Pre)"
POST_ERROR_COL = "% Error (Post)"

_PREGAME_COLS = ["Pregame Pred", PRE_ERROR_COL, "Accuracy (Pre)"]
_POSTGAME_COLS = ["Postgame Pred", POST_ERROR_COL, "Accuracy (Post)"]


def error_band(pct: float | None) -> str | None:
    """Severity band for a percent error: high >= 35, medium >= 25, else none."""
    if pct is None:
        return None
    if pct >= BAND_HIGH_THRESHOLD:
        return BAND_HIGH
    if pct >= BAND_MEDIUM_THRESHOLD:
        return BAND_MEDIUM
    return None


def fmt_pct(pct: float | None) -> str:
    return "" if pct is None else f"{pct:.1f}%"


# ── Predictor ────────────────────────────────────────────────────────────────

def team_options(teams: tuple[Team, ...]) -> list[tuple[str, str]]:
    """(value, label) pairs for a team selector, in backend order."""
    return [(t.value, t.label) for t in teams]


def team_label(teams: tuple[Team, ...], value: str) -> str:
    return next((t.label for t in teams if t.value == value), value)


def prediction_caption(team1: str, team2: str, network: str, time_slot: str) -> str:
    """Subtitle under a prediction, e.g. "OSU vs MI | FOX | Sunday"."""
    caption = f"{team1} vs {team2}" if team1 and team2 else ""
    if network:
        caption += f" | {network}"
    if time_slot:
        caption += f" | {time_slot}"
    return caption


# ── Brand rankings ───────────────────────────────────────────────────────────

def brand_table(rows: tuple[BrandRow, ...]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Rank":       r.rank,
                "Team":       r.team,
                "Lift (%)":   round(r.viewership_lift_pct, 1),
                "Games Used": r.games_used,
            }
            for r in rows
        ],
        columns=["Rank", "Team", "Lift (%)", "Games Used"],
    )
    return df


def style_brand_table(df: pd.DataFrame):
    return df.style.format({"Lift (%)": "{:.1f}"}).hide(axis="index")


# ── Weekly predictions ───────────────────────────────────────────────────────

def metric_tiles(metrics: ErrorMetrics) -> list[tuple[str, str]]:
    """(label, value) pairs for one model's summary tiles."""
    return [
        ("Median % Error", f"{metrics.median_error:.1f}%"),
        ("Mean % Error",   f"{metrics.mean_error:.1f}%"),
        ("Within 10%",     f"{metrics.pct_within_10:g}%"),
        ("Within 25%",     f"{metrics.pct_within_25:g}%"),
    ]


def metric_sections(metrics: WeeklyMetrics | None) -> list[tuple[str, list[tuple[str, str]]]]:
    if metrics is None:
        return []
    sections = [("Pregame Model", metric_tiles(metrics.pregame))]
    if metrics.postgame is not None:
        sections.append(("Postgame Model", metric_tiles(metrics.postgame)))
    return sections


def _game_record(g: GameRow, postgame: bool) -> dict:
    row = {
        "Date":           g.date,
        "Time":           g.time_slot,
        "Matchup":        g.matchup,
        "Spread":         g.spread,
        "Network":        g.network,
        "Pregame Pred":   g.predicted,
        PRE_ERROR_COL:    fmt_pct(g.percent_error),
        "Accuracy (Pre)": g.accuracy,
    }
    if postgame:
        row.update({
            "Postgame Pred":   g.post_predicted,
            POST_ERROR_COL:    fmt_pct(g.post_percent_error),
            "Accuracy (Post)": g.post_accuracy,
        })
    row["Actual"] = g.actual
    return row


def week_columns(week: WeekGroup) -> list[str]:
    cols = ["Date", "Time", "Matchup", "Spread", "Network"] + _PREGAME_COLS
    if week.has_postgame:
        cols += _POSTGAME_COLS
    return cols + ["Actual"]


def week_table(week: WeekGroup) -> pd.DataFrame:
    """Game table for one week; postgame columns only when the week has them."""
    postgame = week.has_postgame
    return pd.DataFrame(
        [_game_record(g, postgame) for g in week.games],
        columns=week_columns(week),
    )


def week_bands(week: WeekGroup) -> pd.DataFrame:
    """Band per game and error column, aligned with ``week_table``."""
    bands = {PRE_ERROR_COL: [error_band(g.percent_error) for g in week.games]}
    if week.has_postgame:
        bands[POST_ERROR_COL] = [error_band(g.post_percent_error) for g in week.games]
    return pd.DataFrame(bands)


def style_week_table(week: WeekGroup):
    df = week_table(week)
    bands = week_bands(week)

    def colour(col: pd.Series) -> list[str]:
        return [BAND_COLORS.get(b, "") for b in bands[col.name]]

    return (
        df.style
        .apply(colour, subset=list(bands.columns))
        .hide(axis="index")
        .set_properties(**{"font-size": "12px"})
    )
