"""Domain layer package."""

from .categories import CATEGORY_RULES, FALLBACK_CATEGORY, CategoryRule, classify
from .models import (
    CategoryShare,
    ComparativeSummary,
    ContentRecord,
    EngagementPoint,
    Insights,
    ListingRecord,
    MetricDelta,
    OverviewMetrics,
    PeriodMetric,
)

__all__ = [
    "CATEGORY_RULES",
    "FALLBACK_CATEGORY",
    "CategoryRule",
    "classify",
    "CategoryShare",
    "ComparativeSummary",
    "ContentRecord",
    "EngagementPoint",
    "Insights",
    "ListingRecord",
    "MetricDelta",
    "OverviewMetrics",
    "PeriodMetric",
]
