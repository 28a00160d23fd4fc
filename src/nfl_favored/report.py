from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd
from loguru import logger

from nfl_favored.app.charts import delta_bar_chart, scatter_chart
from nfl_favored.config import ReportConfig
from nfl_favored.ingest.fetch import load_seasons, load_team_branding
from nfl_favored.metrics.enrich import attach_branding, league_means, merge_team_stats
from nfl_favored.metrics.outcomes import team_outcomes
from nfl_favored.metrics.threshold import favored_share

TABLE_COLUMNS = {
    "rank": "Rank",
    "team": "Team",
    "season": "Season",
    "wins": "W",
    "losses": "L",
    "ties": "T",
    "win_pct": "Win %",
    "favored_pct": "Favored %",
    "delta": "Delta",
}


@dataclass
class ReportTables:
    pbp_rows: int
    outcomes: pd.DataFrame
    threshold: pd.DataFrame
    enriched: pd.DataFrame


@dataclass
class ReportResult:
    report_path: Path
    csv_path: Optional[Path]
    teams: int


def build_table(
    cfg: ReportConfig,
    pbp: Optional[pd.DataFrame] = None,
    branding: Optional[pd.DataFrame] = None,
) -> ReportTables:
    """Run loader, aggregators and enricher. Frames passed in skip the fetch."""
    if pbp is None:
        pbp = load_seasons(cfg.seasons, cfg.url_template, cfg.season_type)
    if branding is None:
        branding = load_team_branding()

    outcomes = team_outcomes(pbp)
    threshold = favored_share(pbp, cfg.threshold)
    enriched = attach_branding(merge_team_stats(outcomes, threshold), branding)
    logger.info(f"Enriched table has {len(enriched):,} team-seasons")
    return ReportTables(
        pbp_rows=len(pbp),
        outcomes=outcomes,
        threshold=threshold,
        enriched=enriched,
    )


def _ranked_table_html(table: pd.DataFrame) -> str:
    display = table[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
    return display.to_html(
        index=False,
        classes="ranked",
        border=0,
        formatters={
            "Win %": lambda v: f"{v:.1%}",
            "Favored %": lambda v: f"{v:.1%}",
            "Delta": lambda v: f"{v:+.1f}",
        },
    )


def _intro(tables: ReportTables, cfg: ReportConfig) -> str:
    table = tables.enriched
    if table.empty:
        return "<p>No team-seasons were available for this report.</p>"
    means = league_means(table)
    top = table.iloc[0]
    bottom = table.iloc[-1]
    return (
        f"<p>Win probability gives every snap a favorite. Counting the snaps on which a team "
        f"was favored (offense with <code>wp &gt; {cfg.threshold:g}</code>, defense with "
        f"<code>wp &lt; {cfg.threshold:g}</code>) gives a rough share of the game it spent "
        f"in control. Across {len(table)} team-seasons and {tables.pbp_rows:,} snaps the "
        f"average team was favored on {means['favored_pct']:.1%} of snaps and won "
        f"{means['win_pct']:.1%} of its games.</p>"
        f"<p>The gap between the two is the delta. {top['team_name']} won the most relative "
        f"to how often they were favored ({top['delta']:+.1f}); {bottom['team_name']} "
        f"won the least ({bottom['delta']:+.1f}).</p>"
    )


def render_report(tables: ReportTables, cfg: ReportConfig) -> ReportResult:
    out_dir = Path(cfg.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    label = cfg.season_label

    scatter = scatter_chart(tables.enriched, title=f"{label} Win % vs. % of Game Favored")
    bars = delta_bar_chart(tables.enriched, title=f"{label} Win % Minus % of Game Favored")

    html = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{label} NFL: Winning vs. Being Favored</title>
<style>
body {{ font-family: sans-serif; max-width: 960px; margin: 2em auto; }}
table.ranked {{ border-collapse: collapse; }}
table.ranked td, table.ranked th {{ padding: 2px 10px; text-align: right; }}
</style>
</head>
<body>
<h1>{label} NFL: Winning vs. Being Favored</h1>
{_intro(tables, cfg)}
<h2>Win % vs. % of Game Favored</h2>
{scatter.to_html(full_html=False, include_plotlyjs="cdn")}
<h2>Who Outperformed Their Win Probability?</h2>
{bars.to_html(full_html=False, include_plotlyjs=False)}
<h2>Ranked Table</h2>
{_ranked_table_html(tables.enriched)}
<p><small>Generated {datetime.now():%Y-%m-%d %H:%M}. Data: nflverse play-by-play.</small></p>
</body>
</html>
"""
    report_path = out_dir / f"favored_report_{label}.html"
    report_path.write_text(html, encoding="utf-8")
    logger.info(f"Wrote report to {report_path}")

    csv_path = None
    if cfg.write_csv:
        csv_path = out_dir / f"favored_table_{label}.csv"
        tables.enriched.to_csv(csv_path, index=False)
        logger.info(f"Wrote {len(tables.enriched):,} rows to {csv_path}")

    return ReportResult(report_path=report_path, csv_path=csv_path, teams=len(tables.enriched))


def run(cfg: ReportConfig) -> ReportResult:
    return render_report(build_table(cfg), cfg)
