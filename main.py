"""Command-line entry point: parse marketplace/short-video exports and write the board summary."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ops_board.application.report_service import run_reporting_pipeline
from ops_board.application.trend import DateRange
from ops_board.sample_data import SampleDataProvider
from ops_board.settings import Settings


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the ops board summary from marketplace and video exports.")
    parser.add_argument("--listings", type=Path, help="Marketplace listing export (comma separated, header row first).")
    parser.add_argument("--content", type=Path, help="Short-video post export (comma separated, header row first).")
    parser.add_argument("--output-dir", type=Path, default=settings.output_dir)
    parser.add_argument(
        "--range",
        dest="date_range",
        choices=[item.value for item in DateRange],
        default=settings.date_range.value,
    )
    parser.add_argument("--top", dest="top_n", type=int, default=settings.top_n)
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for the synthesized trend/baseline.")
    parser.add_argument("--with-samples", action="store_true", help="Start from the bundled sample records.")
    parser.add_argument("--no-excel", action="store_true", help="Skip the Excel workbook.")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)
    setup_logging(args.verbose)
    if args.top_n < 1:
        raise SystemExit(f"--top must be >= 1, got {args.top_n}")

    run_reporting_pipeline(
        listings_path=args.listings,
        content_path=args.content,
        output_dir=args.output_dir,
        date_range=args.date_range,
        top_n=args.top_n,
        seed=args.seed,
        samples=SampleDataProvider() if args.with_samples else None,
        write_excel=not args.no_excel,
    )


if __name__ == "__main__":
    main()
