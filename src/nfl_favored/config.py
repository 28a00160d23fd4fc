from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

PBP_URL_TEMPLATE = (
    "https://github.com/nflverse/nflverse-data/releases/download/pbp/"
    "play_by_play_{season}.parquet"
)
DEFAULT_THRESHOLD = 0.5


class ReportConfig(BaseModel):
    seasons: List[int] = Field(default_factory=lambda: [2019], min_length=1)
    threshold: float = Field(DEFAULT_THRESHOLD, ge=0.0, le=1.0)
    # None keeps every season type (REG and POST)
    season_type: Optional[Literal["REG", "POST"]] = "REG"
    url_template: str = PBP_URL_TEMPLATE
    out_dir: Path = Field(default_factory=lambda: Path("reports"))
    write_csv: bool = True

    @field_validator("season_type", mode="before")
    @classmethod
    def _normalize_season_type(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
            return None if value == "ALL" else value
        return value

    @property
    def season_label(self) -> str:
        seasons = sorted(set(self.seasons))
        if len(seasons) == 1:
            return str(seasons[0])
        return f"{seasons[0]}-{seasons[-1]}"
