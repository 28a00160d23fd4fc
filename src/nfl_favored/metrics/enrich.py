from __future__ import annotations

from typing import Dict

import pandas as pd
from loguru import logger

from nfl_favored.metrics.outcomes import OUTCOME_COLUMNS
from nfl_favored.metrics.threshold import THRESHOLD_COLUMNS

DEFAULT_COLOR = "#8c8c8c"
KEYS = ["season", "team"]

ENRICHED_COLUMNS = (
    OUTCOME_COLUMNS
    + [c for c in THRESHOLD_COLUMNS if c not in KEYS]
    + ["delta", "rank"]
)


def merge_team_stats(outcomes: pd.DataFrame, threshold: pd.DataFrame) -> pd.DataFrame:
    """Join outcomes with the favored share and rank teams by ``delta``.

    ``delta`` is ``100 * (win_pct - favored_pct)``. Team-seasons missing
    from either table are dropped.
    """
    if outcomes.empty or threshold.empty:
        logger.warning("Outcome or snap table is empty; enriched table is empty.")
        return pd.DataFrame(columns=ENRICHED_COLUMNS)

    merged = outcomes.merge(threshold, on=KEYS, how="left", indicator=True)
    unmatched = merged["_merge"] == "left_only"
    if unmatched.any():
        teams = ", ".join(f"{r.team} {r.season}" for r in merged[unmatched].itertuples())
        logger.warning(f"Dropping {int(unmatched.sum())} team-seasons without snap data: {teams}")
    merged = merged[~unmatched].drop(columns="_merge")
    for col in ["off_plays", "off_favored", "def_plays", "def_favored", "plays"]:
        merged[col] = merged[col].astype("int64")

    if merged.empty:
        logger.warning("No team-seasons in common; enriched table is empty.")
        return pd.DataFrame(columns=ENRICHED_COLUMNS)

    merged["delta"] = 100 * (merged["win_pct"] - merged["favored_pct"])
    merged = merged.sort_values(["delta", "season", "team"], ascending=[False, True, True])
    merged["rank"] = range(1, len(merged) + 1)
    return merged[ENRICHED_COLUMNS].reset_index(drop=True)


def attach_branding(table: pd.DataFrame, branding: pd.DataFrame) -> pd.DataFrame:
    out = table.merge(branding, on="team", how="left")
    missing = out.loc[out["team_color"].isna(), "team"].unique().tolist()
    if missing:
        logger.warning(f"No branding for {missing}; using default color")
    out["team_color"] = out["team_color"].fillna(DEFAULT_COLOR)
    out["team_color2"] = out["team_color2"].fillna(out["team_color"])
    out["team_name"] = out["team_name"].fillna(out["team"])
    out["team_logo"] = out["team_logo"].astype(object).where(out["team_logo"].notna(), None)
    return out


def league_means(table: pd.DataFrame) -> Dict[str, float]:
    return {
        "win_pct": float(table["win_pct"].mean()),
        "favored_pct": float(table["favored_pct"].mean()),
    }
