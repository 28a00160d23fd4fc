"""
Play-by-play loading from a season-templated parquet source.
"""

import pandas as pd
import pytest

from conftest import make_pbp
from nfl_favored.ingest.fetch import load_pbp, load_seasons, normalize_branding


@pytest.fixture
def pbp_source(tmp_path, small_league):
    pbp = small_league.copy()
    # A kickoff and a playoff snap that should both be filtered out
    extra = pbp.iloc[[0, 0]].copy()
    extra["pass"] = [0, 1]
    extra["rush"] = [0, 0]
    extra["season_type"] = ["REG", "POST"]
    pbp = pd.concat([pbp, extra], ignore_index=True)
    pbp = pbp.rename(columns={"wp": "WP"})
    pbp["desc"] = "play"
    pbp.to_parquet(tmp_path / "play_by_play_2019.parquet", index=False)
    return str(tmp_path / "play_by_play_{season}.parquet")


def test_load_filters_to_snaps(pbp_source, small_league):
    pbp = load_pbp(2019, url_template=pbp_source)
    assert len(pbp) == len(small_league)
    assert "wp" in pbp.columns
    assert "desc" not in pbp.columns
    assert ((pbp["pass"] == 1) | (pbp["rush"] == 1)).all()


def test_load_all_season_types(pbp_source, small_league):
    pbp = load_pbp(2019, url_template=pbp_source, season_type=None)
    assert len(pbp) == len(small_league) + 1


def test_missing_columns_raise(tmp_path):
    make_pbp([("g1", "BUF", "MIA", 3, [("BUF", 0.9)])]).drop(columns=["wp"]).to_parquet(
        tmp_path / "play_by_play_2020.parquet", index=False
    )
    with pytest.raises(ValueError, match="wp"):
        load_pbp(2020, url_template=str(tmp_path / "play_by_play_{season}.parquet"))


def test_missing_source_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pbp(1999, url_template=str(tmp_path / "play_by_play_{season}.parquet"))


def test_load_seasons_concatenates(pbp_source, small_league):
    pbp = load_seasons([2019, 2019], url_template=pbp_source)
    assert len(pbp) == 2 * len(small_league)


def test_normalize_branding():
    teams = pd.DataFrame({
        "team_abbr": ["SEA", "SEA", "KC"],
        "team_name": ["Seattle Seahawks", "Seattle Seahawks", "Kansas City Chiefs"],
        "team_color": ["#002244", "#002244", "#E31837"],
        "team_logo_espn": ["https://a.espncdn.com/i/teamlogos/nfl/500/sea.png", None, None],
        "team_division": ["NFC West", "NFC West", "AFC West"],
    })
    out = normalize_branding(teams)
    assert out.columns.tolist() == ["team", "team_name", "team_color", "team_color2", "team_logo"]
    assert out["team"].tolist() == ["SEA", "KC"]
    assert out["team_color2"].isna().all()


def test_load_narrow_columns(pbp_source, small_league):
    pbp = load_pbp(2019, url_template=pbp_source, columns=["season", "game_id", "wp", "posteam"])
    assert pbp.columns.tolist() == ["season", "game_id", "wp", "posteam"]
    # Snap and season type filtering still applied
    assert len(pbp) == len(small_league)


def test_load_extra_columns(pbp_source):
    pbp = load_pbp(2019, url_template=pbp_source, columns=["game_id", "desc"])
    assert pbp.columns.tolist() == ["game_id", "desc"]
