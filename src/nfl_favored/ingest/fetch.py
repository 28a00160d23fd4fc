from __future__ import annotations

from typing import Iterable, List, Optional

import nflreadpy as nfl
import pandas as pd
from loguru import logger

from nfl_favored.config import PBP_URL_TEMPLATE

PBP_COLUMNS = [
    "season",
    "season_type",
    "game_id",
    "home_team",
    "away_team",
    "result",
    "wp",
    "posteam",
    "defteam",
    "pass",
    "rush",
]

BRANDING_COLUMNS = ["team", "team_name", "team_color", "team_color2", "team_logo"]


def _require_columns(df: pd.DataFrame, cols: Iterable[str], table: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns {missing} in {table}")


def _filter_plays(pbp: pd.DataFrame, season_type: Optional[str]) -> pd.DataFrame:
    # Only snaps that are a pass or a rush count
    is_snap = (pbp["pass"].fillna(0) == 1) | (pbp["rush"].fillna(0) == 1)
    out = pbp[is_snap]
    if season_type:
        out = out[out["season_type"] == season_type]
    return out.reset_index(drop=True)


def load_pbp(
    season: int,
    url_template: str = PBP_URL_TEMPLATE,
    season_type: Optional[str] = "REG",
    columns: Optional[List[str]] = None,
) -> pd.DataFrame:
    """Read one season of play-by-play and keep pass or rush plays.

    ``url_template`` is formatted with ``season`` and may point to a URL or a
    local parquet file. Fetch and parse errors are not caught.
    """
    source = url_template.format(season=season)
    logger.info(f"Fetching play-by-play for {season} from {source}")
    pbp = pd.read_parquet(source)
    pbp.columns = [c.lower() for c in pbp.columns]

    _require_columns(pbp, PBP_COLUMNS, f"play_by_play_{season}")
    raw_rows = len(pbp)
    pbp = _filter_plays(pbp, season_type)
    # Select after filtering; the filter needs pass, rush and season_type
    keep = columns or PBP_COLUMNS
    pbp = pbp[[c for c in keep if c in pbp.columns]]
    logger.info(f"Kept {len(pbp):,} of {raw_rows:,} plays for {season}")
    if pbp.empty:
        logger.warning(f"No pass or rush plays for season {season}")
    return pbp


def load_seasons(
    seasons: List[int],
    url_template: str = PBP_URL_TEMPLATE,
    season_type: Optional[str] = "REG",
) -> pd.DataFrame:
    parts = [load_pbp(s, url_template, season_type) for s in seasons]
    if not parts:
        return pd.DataFrame(columns=PBP_COLUMNS)
    return pd.concat(parts, ignore_index=True)


def load_team_branding() -> pd.DataFrame:
    """Team colors and logos from nflverse team descriptions."""
    teams = nfl.load_teams().to_pandas()
    teams.columns = [c.lower() for c in teams.columns]
    return normalize_branding(teams)


def normalize_branding(teams: pd.DataFrame) -> pd.DataFrame:
    teams = teams.rename(
        columns={
            "team_abbr": "team",
            "team_logo_espn": "team_logo",
        }
    )
    _require_columns(teams, ["team", "team_color"], "team_desc")
    for col in BRANDING_COLUMNS:
        if col not in teams.columns:
            teams[col] = None
    return teams[BRANDING_COLUMNS].drop_duplicates("team").reset_index(drop=True)
