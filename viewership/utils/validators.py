"""
Keystroke validators for the predictor inputs.

Each validator takes the raw text of an input box and returns the value to
store, or None when the text must be rejected.  A rejection is not an
error: the caller keeps its previous value and the input box snaps back,
which gives masked input (ranks 1-25, whole or half-point spreads) without
any dedicated masking widget.

    validate_rank("12")        -> 12
    validate_rank("")          -> 0      (unranked)
    validate_rank("26")        -> None
    validate_spread("3.")      -> "3."   (transient, user is still typing)
    validate_spread("3.2")     -> None
    spread_value("3.5")        -> 3.5
"""

import re

from viewership.constants import COMP_GAMES_MAX, COMP_GAMES_MIN, RANK_MAX, RANK_MIN

_DIGITS = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[0-9]*\.?[0-9]*")   # ASCII, unsigned; "", "3", "3.", ".5", "3.5"


def _bounded_int(raw: str, lo: int, hi: int) -> int | None:
    v = raw.strip()
    if v == "":
        return 0
    if not _DIGITS.fullmatch(v):
        return None
    n = int(v)
    return n if lo <= n <= hi else None


def validate_rank(raw: str) -> int | None:
    """Poll rank: empty means unranked (0), otherwise 1-25."""
    return _bounded_int(raw, RANK_MIN, RANK_MAX)


def validate_comp_games(raw: str) -> int | None:
    """Number of major competing games in the same window, 0-10."""
    return _bounded_int(raw, COMP_GAMES_MIN, COMP_GAMES_MAX)


def validate_spread(raw: str) -> str | None:
    """
    Betting spread text.  Only whole and half points are real lines, so the
    only fractional part allowed is ".5".  A trailing "." is kept as-is
    because the user is mid-way through typing "3.5".
    """
    if raw == "":
        return ""
    if not _DECIMAL.fullmatch(raw):
        return None
    if raw.endswith("."):
        return raw
    if "." in raw and raw.split(".")[1] != "5":
        return None
    return raw


def is_transient_spread(text: str) -> bool:
    """True while the spread ends in a bare decimal point."""
    return text.endswith(".")


def spread_value(text: str) -> float:
    """Numeric spread sent to the backend; empty (or a lone ".") is 0."""
    v = text.rstrip(".")
    return float(v) if v else 0.0
