"""Application layer package."""

from .aggregation import category_breakdown, overview_metrics, revenue_mix, top_content, top_listings
from .report_service import DashboardReport, build_dashboard_report, resolve_records, run_reporting_pipeline
from .summary_service import build_comparative_summary
from .trend import DateRange, engagement_trend, generate_trend

__all__ = [
    "category_breakdown",
    "overview_metrics",
    "revenue_mix",
    "top_content",
    "top_listings",
    "DashboardReport",
    "build_dashboard_report",
    "resolve_records",
    "run_reporting_pipeline",
    "build_comparative_summary",
    "DateRange",
    "engagement_trend",
    "generate_trend",
]
