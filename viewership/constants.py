"""
Fixed option lists shared by the validators, the view state and the UI.
"""

# ── Tabs ─────────────────────────────────────────────────────────────────────

TAB_PREDICTOR = "predictor"
TAB_BRANDS    = "brands"
TAB_WEEKLY    = "weekly"
TAB_MODEL     = "model"

TABS = {
    TAB_PREDICTOR: "Game Predictor",
    TAB_BRANDS:    "Brand Rankings",
    TAB_WEEKLY:    "Weekly Predictions",
    TAB_MODEL:     "Model Explanation",
}

# ── Predictor options ────────────────────────────────────────────────────────

NETWORKS = [
    "ABC", "CBS", "NBC", "FOX",
    "ESPN", "ESPN2", "ESPNU",
    "FS1", "FS2", "BTN", "CW", "NFLN", "ESPNNEWS",
]

# backend value -> label shown in the selector (EST)
TIME_SLOTS = {
    "Primetime (7:00p–9:00p)":  "Primetime (7:00p-9:00p EST)",
    "Sunday":                   "Sunday",
    "Monday":                   "Monday",
    "Weekday (Tue–Thu)":        "Weekday",
    "Friday":                   "Friday",
    "Sat Early (11:00a–2:00p)": "Sat Early (11:00a-2:00p EST)",
    "Sat Mid (2:30p–6:30p)":    "Sat Mid (2:30p-6:30p EST)",
    "Sat Late (9:30p–11:30p)":  "Sat Late (9:30p-12:00a EST)",
}

RANK_MIN, RANK_MAX             = 1, 25
COMP_GAMES_MIN, COMP_GAMES_MAX = 0, 10

# ── Brand rankings ───────────────────────────────────────────────────────────

ALL_YEARS = "all"

# ── Weekly accuracy banding (percent error) ──────────────────────────────────

BAND_HIGH_THRESHOLD   = 35.0
BAND_MEDIUM_THRESHOLD = 25.0
