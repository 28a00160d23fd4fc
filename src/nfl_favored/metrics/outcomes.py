from __future__ import annotations

import pandas as pd
from loguru import logger

GAME_COLUMNS = ["season", "game_id", "home_team", "away_team", "result"]
OUTCOME_COLUMNS = ["season", "team", "games", "wins", "losses", "ties", "win_pct"]


def distinct_games(pbp: pd.DataFrame) -> pd.DataFrame:
    """One row per finished game; plays without a final ``result`` are ignored."""
    games = pbp.loc[pbp["result"].notna(), GAME_COLUMNS]
    return games.drop_duplicates(["season", "game_id"]).reset_index(drop=True)


def _side_records(games: pd.DataFrame, team_col: str, win_sign: int) -> pd.DataFrame:
    side = games.assign(
        win=(games["result"] * win_sign > 0).astype(int),
        tie=(games["result"] == 0).astype(int),
    )
    out = side.groupby(["season", team_col], as_index=False).agg(
        games=("game_id", "size"),
        wins=("win", "sum"),
        ties=("tie", "sum"),
    )
    return out.rename(columns={team_col: "team"})


def team_outcomes(pbp: pd.DataFrame) -> pd.DataFrame:
    """Games, wins, losses, ties and win percentage per team-season.

    Home and away records are summed; a tie counts as half a win.
    """
    games = distinct_games(pbp)
    if games.empty:
        logger.warning("No completed games found; outcome table is empty.")
        return pd.DataFrame(columns=OUTCOME_COLUMNS)

    home = _side_records(games, "home_team", 1)
    away = _side_records(games, "away_team", -1)
    out = home.merge(away, on=["season", "team"], how="outer", suffixes=("_home", "_away"))
    out = out.fillna(0)

    for col in ["games", "wins", "ties"]:
        out[col] = (out[f"{col}_home"] + out[f"{col}_away"]).astype("int64")
    out["losses"] = out["games"] - out["wins"] - out["ties"]
    out["win_pct"] = (out["wins"] + 0.5 * out["ties"]) / out["games"]

    out["season"] = out["season"].astype("int64")
    out = out[OUTCOME_COLUMNS].sort_values(["season", "team"]).reset_index(drop=True)
    logger.info(f"Computed outcomes for {len(out):,} team-seasons from {len(games):,} games")
    return out
