"""Marketplace and short-video ops board package."""

from .application import DashboardReport, DateRange, build_dashboard_report, run_reporting_pipeline
from .ingestion import parse_content, parse_listings
from .sample_data import SampleDataProvider

__all__ = [
    "DashboardReport",
    "DateRange",
    "build_dashboard_report",
    "run_reporting_pipeline",
    "parse_content",
    "parse_listings",
    "SampleDataProvider",
]
