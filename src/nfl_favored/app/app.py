from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from nfl_favored.app.charts import delta_bar_chart, scatter_chart
from nfl_favored.config import DEFAULT_THRESHOLD, ReportConfig
from nfl_favored.ingest.fetch import load_seasons, load_team_branding
from nfl_favored.metrics.enrich import league_means
from nfl_favored.report import TABLE_COLUMNS, build_table

SEASONS = list(range(2009, 2025))


@st.cache_data(show_spinner="Loading play-by-play...")
def get_pbp(seasons: List[int], season_type: str) -> pd.DataFrame:
    return load_seasons(seasons, season_type=None if season_type == "ALL" else season_type)


@st.cache_data(show_spinner=False)
def get_branding() -> pd.DataFrame:
    return load_team_branding()


st.set_page_config(page_title="Winning vs. Being Favored", page_icon="🏈", layout="wide")
st.title("Winning vs. Being Favored")
st.caption("How often did each team win, compared to how much of the game it spent favored?")

colA, colB, colC = st.columns([1.4, 1, 1.2])

with colA:
    seasons = st.multiselect("Seasons", SEASONS, default=[2019])
with colB:
    season_type = st.selectbox("Season Type", ["REG", "POST", "ALL"], index=0)
with colC:
    threshold = st.slider("Win Probability Threshold", 0.05, 0.95, DEFAULT_THRESHOLD, 0.05)

st.divider()

if not seasons:
    st.info("Pick at least one season.")
    st.stop()

cfg = ReportConfig(seasons=seasons, threshold=threshold)
tables = build_table(cfg, pbp=get_pbp(seasons, season_type), branding=get_branding())
table = tables.enriched

if table.empty:
    st.warning("No team-seasons available for this selection.")
    st.stop()

means = league_means(table)
col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Team-Seasons", f"{len(table):,}")
with col2:
    st.metric("Avg Win %", f"{means['win_pct']:.1%}")
with col3:
    st.metric(
        "Avg % Favored",
        f"{means['favored_pct']:.1%}",
        help=f"Offense with wp > {threshold:g} or defense with wp < {threshold:g}",
    )

st.plotly_chart(scatter_chart(table, title=f"{cfg.season_label} Win % vs. % of Game Favored"), use_container_width=True)
st.markdown(
    "Teams above the diagonal won more often than their share of favored snaps suggests; "
    "teams below it spent plenty of time in front and still lost."
)
st.plotly_chart(delta_bar_chart(table, title=f"{cfg.season_label} Win % Minus % of Game Favored"), use_container_width=True)

with st.expander("📊 View Ranked Table"):
    display_df = table[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
    display_df["Win %"] = (display_df["Win %"] * 100).round(1)
    display_df["Favored %"] = (display_df["Favored %"] * 100).round(1)
    display_df["Delta"] = display_df["Delta"].round(1)
    st.dataframe(display_df, use_container_width=True, hide_index=True)
