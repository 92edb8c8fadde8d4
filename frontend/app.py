"""
College Football Viewership Model | dashboard
===============================================
Run from the project root:
    streamlit run frontend/app.py

Point at another backend with VIEWERSHIP_BACKEND_URL.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st

from viewership import config
from viewership.api.client import BackendClient
from viewership.constants import (
    ALL_YEARS,
    NETWORKS,
    TAB_BRANDS,
    TAB_MODEL,
    TAB_PREDICTOR,
    TAB_WEEKLY,
    TABS,
    TIME_SLOTS,
)
from viewership.state.controller import ViewController
from viewership.views import content
from viewership.views.charts import plotly_lift_bar
from viewership.views.tables import (
    brand_table,
    metric_sections,
    prediction_caption,
    style_brand_table,
    style_week_table,
    team_label,
    team_options,
)

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="CFB Viewership Model",
    page_icon="📺",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ── Session controller ────────────────────────────────────────────────────────

# predictor field -> widget key
_FIELD_KEYS = {
    "team1":      "in_team1",
    "team2":      "in_team2",
    "rank1":      "in_rank1",
    "rank2":      "in_rank2",
    "spread":     "in_spread",
    "network":    "in_network",
    "time_slot":  "in_time_slot",
    "comp_tier1": "in_comp_tier1",
}


def _ctl() -> ViewController:
    return st.session_state.controller


def _field_text(name: str) -> str:
    """What an input box should show for the stored value (0 shows empty)."""
    value = getattr(_ctl().state.inputs, name)
    if isinstance(value, int):
        return "" if value == 0 else str(value)
    return value


def _on_field_change(name: str) -> None:
    key = _FIELD_KEYS[name]
    if not _ctl().set_predictor_field(name, st.session_state[key]):
        logger.debug("Rejected %s input %r", name, st.session_state[key])
    # snap the widget back to the stored value (masked input)
    st.session_state[key] = _field_text(name)


def _on_tab_change() -> None:
    _ctl().select_tab(st.session_state.active_tab)


def _on_brand_year_change() -> None:
    _ctl().set_brand_year(st.session_state.brand_year)


if "controller" not in st.session_state:
    st.session_state.controller = ViewController(BackendClient())
    with st.spinner("Loading teams and rankings…"):
        st.session_state.controller.load_reference_data()
    for _name, _key in _FIELD_KEYS.items():
        st.session_state[_key] = _field_text(_name)

ctl = _ctl()

# ── Page layout ────────────────────────────────────────────────────────────────

st.markdown("""
<style>
    .block-container { padding-top: 1.2rem; }
    div[data-testid="stRadio"] label p { font-weight: 600; }
    div[data-testid="metric-container"] {
        border: 1px solid #D8DEE9;
        border-radius: 8px;
        padding: 12px 16px;
    }
</style>
""", unsafe_allow_html=True)

st.markdown(f"## {content.TITLE}")
st.caption(content.SUBTITLE)

st.radio(
    "View",
    options=list(TABS),
    format_func=TABS.get,
    horizontal=True,
    key="active_tab",
    on_change=_on_tab_change,
    label_visibility="collapsed",
)

st.markdown("---")

state = ctl.state


# ════════════════════════════════════════════════════════════════════════════ #
# TAB 1: Game Predictor
# ════════════════════════════════════════════════════════════════════════════ #

def _retry_reference() -> None:
    with st.spinner("Loading teams and rankings…"):
        _ctl().load_reference_data()


def render_predictor():
    st.subheader("Game Predictor")
    if state.teams_remote.failed:
        st.error(state.teams_remote.error)
        st.button("Retry", key="teams_retry", on_click=_retry_reference)

    teams = team_options(state.teams)
    team_values = [""] + [v for v, _ in teams]

    def team_fmt(value: str) -> str:
        return team_label(state.teams, value) if value else "Select a team"

    c1, c2 = st.columns(2)
    with c1:
        st.selectbox("Team 1", team_values, format_func=team_fmt,
                     key="in_team1", on_change=_on_field_change, args=("team1",))
        st.text_input("Team 1 Rank (1-25)", placeholder="Unranked",
                      key="in_rank1", on_change=_on_field_change, args=("rank1",))
    with c2:
        st.selectbox("Team 2", team_values, format_func=team_fmt,
                     key="in_team2", on_change=_on_field_change, args=("team2",))
        st.text_input("Team 2 Rank (1-25)", placeholder="Unranked",
                      key="in_rank2", on_change=_on_field_change, args=("rank2",))

    st.text_input('Betting Spread (ex: "2.5")', placeholder="Enter spread",
                  key="in_spread", on_change=_on_field_change, args=("spread",))

    c3, c4 = st.columns(2)
    with c3:
        st.selectbox("Network", [""] + NETWORKS,
                     format_func=lambda n: n or "Select Network",
                     key="in_network", on_change=_on_field_change, args=("network",))
    with c4:
        st.selectbox("Time Slot (EST)", [""] + list(TIME_SLOTS),
                     format_func=lambda s: TIME_SLOTS.get(s, "Select Time Slot"),
                     key="in_time_slot", on_change=_on_field_change, args=("time_slot",))

    st.text_input("Major Competing Games", placeholder="None",
                  help=content.COMP_GAMES_HELP,
                  key="in_comp_tier1", on_change=_on_field_change, args=("comp_tier1",))

    if st.button("Predict Viewership", type="primary"):
        with st.spinner("Running the model…"):
            ctl.request_prediction()

    current = ctl.state
    if current.prediction_remote.failed:
        st.error(current.prediction_remote.error)
    if current.prediction:
        inputs = current.inputs
        st.markdown(
            f"<h2 style='text-align:center'>Predicted Viewers: {current.prediction}</h2>",
            unsafe_allow_html=True,
        )
        caption = prediction_caption(
            team_label(current.teams, inputs.team1) if inputs.team1 else "",
            team_label(current.teams, inputs.team2) if inputs.team2 else "",
            inputs.network,
            inputs.time_slot,
        )
        if caption:
            st.markdown(f"<p style='text-align:center'>{caption}</p>", unsafe_allow_html=True)


# ════════════════════════════════════════════════════════════════════════════ #
# TAB 2: Brand Rankings
# ════════════════════════════════════════════════════════════════════════════ #

def render_brands():
    st.subheader("Brand Pull Rankings")
    st.caption(content.BRANDS_INTRO)

    if state.years_remote.failed:
        st.error(state.years_remote.error)
        st.button("Retry", key="years_retry", on_click=_retry_reference)

    years = [ALL_YEARS] + [str(y) for y in state.brand_years]
    if st.session_state.get("brand_year") not in years:
        st.session_state.brand_year = state.brand_year if state.brand_year in years else ALL_YEARS
    _c, _ = st.columns([1, 3])
    with _c:
        st.selectbox(
            "Select Year", years,
            format_func=lambda y: "All Years" if y == ALL_YEARS else y,
            key="brand_year",
            on_change=_on_brand_year_change,
        )

    remote = state.brands_remote
    if remote.loading:
        st.write("Loading…")
    elif remote.failed:
        st.error(remote.error)
    else:
        df = brand_table(state.brand_rows)
        t_col, c_col = st.columns([3, 2])
        with t_col:
            st.dataframe(style_brand_table(df), hide_index=True, use_container_width=True,
                         height=min(900, 38 + 35 * max(1, len(df))))
        with c_col:
            if state.brand_rows:
                st.plotly_chart(plotly_lift_bar(state.brand_rows), use_container_width=True)

    st.markdown(content.LIFT_EXPLAINER)


# ════════════════════════════════════════════════════════════════════════════ #
# TAB 3: Weekly Predictions
# ════════════════════════════════════════════════════════════════════════════ #

def render_weekly():
    with st.spinner("Loading weekly predictions…"):
        ctl.ensure_weekly_loaded()
    current = ctl.state
    remote  = current.weekly_remote

    if remote.loading:
        st.write("Loading weekly predictions…")
        return
    if remote.failed:
        st.error(remote.error)
        if st.button("Retry", key="weekly_retry"):
            with st.spinner("Loading weekly predictions…"):
                ctl.load_weekly()
            st.rerun()
        return

    st.subheader("Weekly Predictions")

    for title, tiles in metric_sections(current.weekly.metrics):
        st.markdown(f"#### {title}")
        for col, (label, value) in zip(st.columns(len(tiles)), tiles):
            col.metric(label, value)

    for week in current.weekly.weeks:
        is_open = current.open_week == week.key
        st.button(
            f"{'▾' if is_open else '▸'}  {week.title}",
            key=f"week_{week.week}_{week.year}",
            on_click=ctl.toggle_week,
            args=(week.key,),
            use_container_width=True,
        )
        if is_open:
            st.dataframe(style_week_table(week), hide_index=True, use_container_width=True)


# ════════════════════════════════════════════════════════════════════════════ #
# TAB 4: Model Explanation
# ════════════════════════════════════════════════════════════════════════════ #

def render_model():
    st.subheader("Model Explanation")
    for paragraph in content.MODEL_EXPLANATION:
        st.markdown(paragraph)


_RENDERERS = {
    TAB_PREDICTOR: render_predictor,
    TAB_BRANDS:    render_brands,
    TAB_WEEKLY:    render_weekly,
    TAB_MODEL:     render_model,
}

_RENDERERS[state.active_tab]()

st.markdown("---")
st.caption(content.FOOTER)
