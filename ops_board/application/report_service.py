"""Application service assembling the dashboard report from parsed record sets."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from datetime import date
from pathlib import Path
from time import perf_counter
from typing import Any, Sequence, TypeVar

import polars as pl

from ops_board.application.aggregation import (
    DEFAULT_TOP_N,
    category_breakdown,
    overview_metrics,
    revenue_mix,
    top_content,
    top_listings,
)
from ops_board.application.reporting.rendering import risk_and_opportunities, summary_comment
from ops_board.application.summary_service import build_comparative_summary
from ops_board.application.trend import DateRange, engagement_trend, generate_trend
from ops_board.domain.models import (
    CategoryShare,
    ComparativeSummary,
    ContentRecord,
    EngagementPoint,
    Insights,
    ListingRecord,
    OverviewMetrics,
    PeriodMetric,
)
from ops_board.infrastructure import read_upload_text, save_output_workbook, save_summary_json
from ops_board.ingestion import parse_content, parse_listings
from ops_board.sample_data import SampleDataProvider

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class DashboardReport:
    date_range: DateRange
    overview: OverviewMetrics
    summary: ComparativeSummary
    trend: list[PeriodMetric]
    engagement: list[EngagementPoint]
    top_listings: list[ListingRecord]
    top_content: list[ContentRecord]
    category_mix: list[CategoryShare]
    revenue_mix: list[CategoryShare]
    insights: Insights

    def to_dict(self) -> dict[str, Any]:
        return {
            "date_range": self.date_range.value,
            "overview": asdict(self.overview),
            "summary": self.summary.to_dict(),
            "summary_comment": summary_comment(self.summary),
            "trend": [asdict(point) for point in self.trend],
            "engagement_trend": [asdict(point) for point in self.engagement],
            "top_listings": [item.to_dict() for item in self.top_listings],
            "top_content": [item.to_dict() for item in self.top_content],
            "category_mix": [asdict(share) for share in self.category_mix],
            "revenue_mix": [asdict(share) for share in self.revenue_mix],
            "insights": asdict(self.insights),
        }


def resolve_records(parsed: Sequence[RecordT], previous: Sequence[RecordT]) -> list[RecordT]:
    """An empty parse means "no update": keep the previous record set."""
    if parsed:
        return list(parsed)
    return list(previous)


def build_dashboard_report(
    listings: Sequence[ListingRecord],
    content: Sequence[ContentRecord],
    date_range: DateRange | str = DateRange.LAST_30_DAYS,
    top_n: int = DEFAULT_TOP_N,
    rng: random.Random | None = None,
    today: date | None = None,
) -> DashboardReport:
    rng = rng or random.Random()
    window = DateRange(date_range)
    summary = build_comparative_summary(listings, rng=rng)
    return DashboardReport(
        date_range=window,
        overview=overview_metrics(listings, content),
        summary=summary,
        trend=generate_trend(window, summary.revenue.current, content, rng=rng, today=today),
        engagement=engagement_trend(content),
        top_listings=top_listings(listings, n=top_n),
        top_content=top_content(content, n=top_n),
        category_mix=category_breakdown(listings, value="sold"),
        revenue_mix=revenue_mix(listings),
        insights=risk_and_opportunities(listings, content),
    )


def _report_sheets(
    listings: Sequence[ListingRecord],
    content: Sequence[ContentRecord],
    report: DashboardReport,
) -> dict[str, pl.DataFrame]:
    listing_rows = [item.to_dict() for item in listings]
    content_rows = [{**item.to_dict(), "tags": " ".join(item.tags)} for item in content]
    return {
        "listings": pl.DataFrame(listing_rows) if listing_rows else pl.DataFrame(),
        "content": pl.DataFrame(content_rows) if content_rows else pl.DataFrame(),
        "trend": pl.DataFrame([asdict(point) for point in report.trend]) if report.trend else pl.DataFrame(),
        "categories": pl.DataFrame(
            {
                "category": [share.name for share in report.category_mix],
                "units_sold": [share.value for share in report.category_mix],
            }
        ),
    }


def run_reporting_pipeline(
    listings_path: str | Path | None = None,
    content_path: str | Path | None = None,
    output_dir: str | Path = "output",
    date_range: DateRange | str = DateRange.LAST_30_DAYS,
    top_n: int = DEFAULT_TOP_N,
    seed: int | None = None,
    samples: SampleDataProvider | None = None,
    write_excel: bool = True,
) -> DashboardReport:
    pipeline_start = perf_counter()
    stage_start = pipeline_start
    stage_timings: list[tuple[str, float]] = []

    def _mark(stage_name: str) -> None:
        nonlocal stage_start
        now = perf_counter()
        stage_timings.append((stage_name, now - stage_start))
        stage_start = now

    samples = samples or SampleDataProvider(listings=(), content=())
    listings: list[ListingRecord] = samples.sample_listings()
    content: list[ContentRecord] = samples.sample_content()

    if listings_path is not None:
        parsed_listings = parse_listings(read_upload_text(listings_path))
        if not parsed_listings:
            logger.warning("No valid listing rows in %s; keeping %d existing records", listings_path, len(listings))
        listings = resolve_records(parsed_listings, listings)
    if content_path is not None:
        parsed_content = parse_content(read_upload_text(content_path))
        if not parsed_content:
            logger.warning("No valid content rows in %s; keeping %d existing records", content_path, len(content))
        content = resolve_records(parsed_content, content)
    _mark("load_records")

    report = build_dashboard_report(
        listings,
        content,
        date_range=date_range,
        top_n=top_n,
        rng=random.Random(seed),
    )
    _mark("build_report")

    output_root = Path(output_dir)
    output_json_path = output_root / "summary.json"
    output_excel_path = output_root / "summary.xlsx"
    save_summary_json(output_json_path, report.to_dict())
    _mark("save_json")

    excel_saved, excel_error_message = False, "disabled"
    if write_excel:
        excel_saved, excel_error_message = save_output_workbook(
            output_excel_path,
            _report_sheets(listings, content, report),
        )
        _mark("save_excel")
    total_elapsed = perf_counter() - pipeline_start

    print(
        "Summary prepared: "
        f"listings={len(listings)}, "
        f"content={len(content)}, "
        f"periods={len(report.trend)}"
    )
    print(summary_comment(report.summary))
    stage_text = ", ".join([f"{name}={seconds:.3f}s" for name, seconds in stage_timings])
    print(f"Stage Timing: {stage_text}")
    print(f"Total Elapsed: {total_elapsed:.3f}s")
    print(f"Saved JSON: {output_json_path}")
    if excel_saved:
        print(f"Saved Excel: {output_excel_path}")
    else:
        print(f"Excel save skipped: {excel_error_message}")
    return report
