"""Text rendering helpers for the executive panel."""

from __future__ import annotations

from typing import Sequence

from ops_board.application.aggregation import top_content, top_listings
from ops_board.application.reporting.metrics import fmt_compact, fmt_money, fmt_pct, trend
from ops_board.domain.models import ComparativeSummary, ContentRecord, Insights, ListingRecord

DEFAULT_TAG = "#tweely"


def risk_and_opportunities(listings: Sequence[ListingRecord], content: Sequence[ContentRecord]) -> Insights:
    best_listing = next(iter(top_listings(listings, n=1)), None)
    best_post = next(iter(top_content(content, n=1)), None)
    top_tag = best_post.tags[0] if best_post is not None and best_post.tags else DEFAULT_TAG

    if best_listing is not None:
        risk = (
            f"Inventory Alert: stock for top SKU '{best_listing.name}' "
            f"({best_listing.sold_label or fmt_compact(best_listing.sold)} sold) may run low against daily run-rate."
        )
    else:
        risk = "Inventory Alert: no listing data uploaded yet."

    opportunity = f"UGC Surge: engagement on {top_tag} is leading the content mix."
    if best_post is not None:
        action = f"Recommended: amplify post #{best_post.id} ({fmt_compact(best_post.plays)} plays) to sustain momentum."
    else:
        action = "Recommended: upload a content export to pick a post to amplify."
    return Insights(risk=risk, opportunity=opportunity, action=action)


def summary_comment(summary: ComparativeSummary) -> str:
    direction = {"up": "growing", "down": "declining", "flat": "flat"}.get(trend(summary.revenue.delta), "flat")
    return (
        f"Revenue {fmt_money(summary.revenue.current)} ({fmt_pct(summary.revenue.delta)}) is {direction}. "
        f"Orders {fmt_compact(summary.orders.current)} ({fmt_pct(summary.orders.delta)}), "
        f"AOV {fmt_money(summary.aov.current)} ({fmt_pct(summary.aov.delta)})."
    )
