from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich import print

from nfl_favored.config import DEFAULT_THRESHOLD, PBP_URL_TEMPLATE, ReportConfig
from nfl_favored.report import run as run_report

app = typer.Typer(add_completion=False)


@app.command()
def run(
    season: Optional[List[int]] = typer.Option(
        None, "--season", "-s", help="Repeat for each season, e.g. -s 2019 -s 2020"
    ),
    threshold: float = typer.Option(DEFAULT_THRESHOLD, "--threshold", help="Win probability cutoff"),
    season_type: str = typer.Option("REG", "--season-type", help="REG, POST or ALL"),
    out_dir: Path = typer.Option(Path("reports"), "--out-dir", help="Output directory"),
    url_template: str = typer.Option(PBP_URL_TEMPLATE, "--url-template", help="Play-by-play source, {season} is filled in"),
    csv: bool = typer.Option(True, "--csv/--no-csv", help="Also write the ranked table as CSV"),
):
    cfg = ReportConfig(
        seasons=season or [2019],
        threshold=threshold,
        season_type=season_type,
        out_dir=out_dir,
        url_template=url_template,
        write_csv=csv,
    )
    res = run_report(cfg)
    print(res)


if __name__ == "__main__":
    app()
