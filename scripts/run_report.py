from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from nfl_favored.config import DEFAULT_THRESHOLD, PBP_URL_TEMPLATE, ReportConfig
from nfl_favored.report import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the win % vs. % favored report")
    parser.add_argument(
        "--seasons",
        nargs="+",
        type=int,
        help="Seasons to include, e.g. --seasons 2019 2020",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Win probability cutoff for a favored snap",
    )
    parser.add_argument(
        "--season-type",
        default="REG",
        help="REG, POST or ALL",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("reports"),
        help="Output directory for the HTML report and CSV",
    )
    parser.add_argument(
        "--url-template",
        default=PBP_URL_TEMPLATE,
        help="Play-by-play source, {season} is filled in",
    )
    parser.add_argument(
        "--csv",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Also write the ranked table as CSV",
    )
    return parser


def config_from_args(argv: Optional[List[str]] = None) -> ReportConfig:
    args = build_parser().parse_args(argv)
    return ReportConfig(
        seasons=args.seasons or [2019],
        threshold=args.threshold,
        season_type=args.season_type,
        out_dir=args.out_dir,
        url_template=args.url_template,
        write_csv=args.csv,
    )


def main() -> None:
    res = run(config_from_args())
    print(res)


if __name__ == "__main__":
    main()
