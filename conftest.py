"""Synthetic play-by-play frames shared by the test modules."""

import pandas as pd
import pytest


def make_pbp(games, season=2019, season_type="REG"):
    """Build pbp rows from ``(game_id, home, away, result, plays)`` tuples.

    ``plays`` is a list of ``(posteam, wp)`` pairs; each one becomes a pass
    snap with the other team on defense.
    """
    rows = []
    for game_id, home, away, result, plays in games:
        for posteam, wp in plays:
            defteam = away if posteam == home else home
            rows.append({
                "season": season,
                "season_type": season_type,
                "game_id": game_id,
                "home_team": home,
                "away_team": away,
                "result": result,
                "wp": wp,
                "posteam": posteam,
                "defteam": defteam,
                "pass": 1,
                "rush": 0,
            })
    return pd.DataFrame(rows)


@pytest.fixture
def seahawks_season():
    """SEA 2019-style season: 16 games, 11 wins, 4 losses, 1 tie."""
    home_results = [7, 7, 7, 7, 7, -3, -3, 0]
    away_results = [-10, -10, -10, -10, -10, -10, 3, 3]
    games = []
    for i, result in enumerate(home_results):
        games.append((f"2019_H{i}", "SEA", f"OP{i}", result, [("SEA", 0.6), (f"OP{i}", 0.3)]))
    for i, result in enumerate(away_results):
        games.append((f"2019_A{i}", f"OQ{i}", "SEA", result, [("SEA", 0.55), (f"OQ{i}", 0.7)]))
    return make_pbp(games)


@pytest.fixture
def small_league():
    """Three teams, three games, hand-checkable wp values."""
    games = [
        ("2019_01_KC_DEN", "KC", "DEN", 10, [("KC", 0.7), ("KC", 0.8), ("DEN", 0.2), ("DEN", 0.6)]),
        ("2019_02_DEN_LV", "DEN", "LV", -3, [("DEN", 0.4), ("LV", 0.5), ("LV", 0.9)]),
        ("2019_03_LV_KC", "LV", "KC", 0, [("LV", 0.5), ("KC", 0.45)]),
    ]
    return make_pbp(games)


@pytest.fixture
def branding():
    return pd.DataFrame({
        "team": ["KC", "DEN", "LV", "SEA"],
        "team_name": ["Kansas City Chiefs", "Denver Broncos", "Las Vegas Raiders", "Seattle Seahawks"],
        "team_color": ["#E31837", "#FB4F14", "#000000", "#002244"],
        "team_color2": ["#FFB612", "#002244", "#A5ACAF", "#69BE28"],
        "team_logo": [None, None, None, None],
    })
