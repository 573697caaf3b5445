"""Domain records for marketplace listings, short-video posts and derived KPIs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ListingRecord:
    """One marketplace product snapshot."""

    id: int
    name: str
    price: int
    discount: str
    tag: str
    rating: float
    sold: float
    sold_label: str
    image: str
    url: str

    @property
    def revenue(self) -> float:
        return self.price * self.sold

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ContentRecord:
    """One short-video post snapshot. ``caption`` is always a prefix of ``full_caption``."""

    id: int
    caption: str
    full_caption: str
    tags: tuple[str, ...]
    likes: int
    shares: int
    plays: int
    comments: int
    date: str

    @property
    def engagement(self) -> int:
        return self.likes + self.shares + self.comments

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["tags"] = list(self.tags)
        return payload


@dataclass(frozen=True)
class PeriodMetric:
    date: str
    iso_date: str
    revenue: int
    reach: int
    event: str | None = None


@dataclass(frozen=True)
class EngagementPoint:
    date: str
    plays: int
    engagement: int


@dataclass(frozen=True)
class CategoryShare:
    name: str
    value: float


@dataclass(frozen=True)
class MetricDelta:
    current: float
    previous: float
    delta: float


@dataclass(frozen=True)
class ComparativeSummary:
    """Current vs previous period for revenue, orders and average order value."""

    revenue: MetricDelta
    orders: MetricDelta
    aov: MetricDelta

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            "revenue": asdict(self.revenue),
            "orders": asdict(self.orders),
            "aov": asdict(self.aov),
        }


@dataclass(frozen=True)
class OverviewMetrics:
    total_revenue: float
    total_units: float
    total_reach: int
    total_engagement: int
    engagement_rate: float


@dataclass(frozen=True)
class Insights:
    risk: str
    opportunity: str
    action: str
