from __future__ import annotations

import pandas as pd
from loguru import logger

from nfl_favored.config import DEFAULT_THRESHOLD

THRESHOLD_COLUMNS = [
    "season",
    "team",
    "off_plays",
    "off_favored",
    "def_plays",
    "def_favored",
    "plays",
    "favored_pct",
]


def _count(df: pd.DataFrame, team_col: str, favored: pd.Series, prefix: str) -> pd.DataFrame:
    out = (
        df.assign(_favored=favored.astype(int))
        .groupby(["season", team_col], as_index=False)
        .agg(**{f"{prefix}_plays": ("_favored", "size"), f"{prefix}_favored": ("_favored", "sum")})
    )
    return out.rename(columns={team_col: "team"})


def favored_share(pbp: pd.DataFrame, threshold: float = DEFAULT_THRESHOLD) -> pd.DataFrame:
    """Share of each team's snaps played while favored.

    On offense a snap counts when ``wp > threshold``; on defense when
    ``wp < threshold`` (the possessing opponent is the underdog). A snap
    exactly at the threshold counts for neither side.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1], got {threshold}")

    plays = pbp.dropna(subset=["wp", "posteam", "defteam"])
    dropped = len(pbp) - len(plays)
    if dropped:
        logger.info(f"Excluded {dropped:,} plays missing wp or team")
    if plays.empty:
        logger.warning("No plays with win probability; threshold table is empty.")
        return pd.DataFrame(columns=THRESHOLD_COLUMNS)

    offense = _count(plays, "posteam", plays["wp"] > threshold, "off")
    defense = _count(plays, "defteam", plays["wp"] < threshold, "def")
    out = offense.merge(defense, on=["season", "team"], how="outer").fillna(0)

    for col in ["off_plays", "off_favored", "def_plays", "def_favored"]:
        out[col] = out[col].astype("int64")
    out["plays"] = out["off_plays"] + out["def_plays"]
    out["favored_pct"] = (out["off_favored"] + out["def_favored"]) / out["plays"]

    out["season"] = out["season"].astype("int64")
    return out[THRESHOLD_COLUMNS].sort_values(["season", "team"]).reset_index(drop=True)
