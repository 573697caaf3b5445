"""Stateless roll-ups over listing and content record sets."""

from __future__ import annotations

from typing import Literal, Sequence

import polars as pl

from ops_board.application.reporting.metrics import safe_ratio
from ops_board.domain.categories import CATEGORY_RULES, CategoryRule, category_order, classify
from ops_board.domain.models import CategoryShare, ContentRecord, ListingRecord, OverviewMetrics

DEFAULT_TOP_N = 5
REVENUE_MIX_LIMIT = 4

LISTING_SCHEMA: dict[str, pl.DataType] = {
    "position": pl.Int64,
    "id": pl.Int64,
    "name": pl.Utf8,
    "price": pl.Int64,
    "sold": pl.Float64,
}
CONTENT_SCHEMA: dict[str, pl.DataType] = {
    "position": pl.Int64,
    "id": pl.Int64,
    "likes": pl.Int64,
    "shares": pl.Int64,
    "plays": pl.Int64,
    "comments": pl.Int64,
    "date": pl.Utf8,
}


def listings_frame(listings: Sequence[ListingRecord]) -> pl.DataFrame:
    frame = pl.DataFrame(
        {
            "position": list(range(len(listings))),
            "id": [item.id for item in listings],
            "name": [item.name for item in listings],
            "price": [item.price for item in listings],
            "sold": [float(item.sold) for item in listings],
        },
        schema=LISTING_SCHEMA,
    )
    return frame.with_columns((pl.col("price").cast(pl.Float64) * pl.col("sold")).alias("revenue"))


def content_frame(content: Sequence[ContentRecord]) -> pl.DataFrame:
    frame = pl.DataFrame(
        {
            "position": list(range(len(content))),
            "id": [item.id for item in content],
            "likes": [item.likes for item in content],
            "shares": [item.shares for item in content],
            "plays": [item.plays for item in content],
            "comments": [item.comments for item in content],
            "date": [item.date for item in content],
        },
        schema=CONTENT_SCHEMA,
    )
    engagement = pl.sum_horizontal(pl.col("likes", "shares", "comments").cast(pl.Float64))
    return frame.with_columns(engagement.alias("engagement"))


def _column_sum(frame: pl.DataFrame, column: str) -> float:
    if frame.is_empty():
        return 0
    value = frame.select(pl.col(column).cast(pl.Float64).sum()).item()
    return value or 0


def total_revenue(listings: Sequence[ListingRecord]) -> float:
    return float(_column_sum(listings_frame(listings), "revenue"))


def total_units(listings: Sequence[ListingRecord]) -> float:
    return float(_column_sum(listings_frame(listings), "sold"))


def total_reach(content: Sequence[ContentRecord]) -> int:
    return int(_column_sum(content_frame(content), "plays"))


def total_engagement(content: Sequence[ContentRecord]) -> int:
    return int(_column_sum(content_frame(content), "engagement"))


def engagement_rate(content: Sequence[ContentRecord]) -> float:
    ratio = safe_ratio(total_engagement(content), total_reach(content))
    return ratio if ratio is not None else 0.0


def overview_metrics(listings: Sequence[ListingRecord], content: Sequence[ContentRecord]) -> OverviewMetrics:
    return OverviewMetrics(
        total_revenue=total_revenue(listings),
        total_units=total_units(listings),
        total_reach=total_reach(content),
        total_engagement=total_engagement(content),
        engagement_rate=engagement_rate(content),
    )


def _top_positions(frame: pl.DataFrame, column: str, n: int) -> list[int]:
    if frame.is_empty() or n <= 0:
        return []
    ranked = frame.sort(column, descending=True, maintain_order=True).head(n)
    return ranked.get_column("position").to_list()


def top_listings(listings: Sequence[ListingRecord], n: int = DEFAULT_TOP_N) -> list[ListingRecord]:
    """Best sellers by units sold; equal counts keep their input order."""
    return [listings[pos] for pos in _top_positions(listings_frame(listings), "sold", n)]


def top_content(content: Sequence[ContentRecord], n: int = DEFAULT_TOP_N) -> list[ContentRecord]:
    """Most played posts; equal play counts keep their input order."""
    return [content[pos] for pos in _top_positions(content_frame(content), "plays", n)]


def category_breakdown(
    listings: Sequence[ListingRecord],
    rules: Sequence[CategoryRule] = CATEGORY_RULES,
    value: Literal["sold", "revenue"] = "sold",
) -> list[CategoryShare]:
    """Sum ``value`` per category; each listing lands in exactly one category.

    Output follows rule order with the catch-all last. Empty categories are omitted.
    """
    if value not in ("sold", "revenue"):
        raise ValueError(f"value must be 'sold' or 'revenue', got {value!r}")
    frame = listings_frame(listings)
    if frame.is_empty():
        return []

    categorized = frame.with_columns(
        pl.Series("category", [classify(name, rules) for name in frame.get_column("name").to_list()], dtype=pl.Utf8)
    )
    totals = {
        row["category"]: row["total"]
        for row in categorized.group_by("category", maintain_order=True)
        .agg(pl.col(value).sum().alias("total"))
        .iter_rows(named=True)
    }
    return [
        CategoryShare(name=name, value=float(totals[name]))
        for name in category_order(rules)
        if totals.get(name, 0) > 0
    ]


def revenue_mix(
    listings: Sequence[ListingRecord],
    rules: Sequence[CategoryRule] = CATEGORY_RULES,
    limit: int = REVENUE_MIX_LIMIT,
) -> list[CategoryShare]:
    shares = category_breakdown(listings, rules=rules, value="revenue")
    return sorted(shares, key=lambda share: -share.value)[: max(limit, 0)]
