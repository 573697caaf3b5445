"""Current vs previous period summary for revenue, orders and average order value.

No order history is available, so the previous period is synthesized from
the current snapshot with a single random variance per call. Callers should
rely on the (current, previous, delta) shape and the zero-order guard only.
"""

from __future__ import annotations

import random
from typing import Sequence

from ops_board.application.aggregation import total_revenue, total_units
from ops_board.application.reporting.metrics import pct_delta, safe_ratio
from ops_board.domain.models import ComparativeSummary, ListingRecord, MetricDelta

VARIANCE_RANGE = (0.85, 1.15)
ORDER_VARIANCE_OFFSET = 0.05


def _metric(current: float, previous: float) -> MetricDelta:
    return MetricDelta(current=current, previous=previous, delta=pct_delta(current, previous))


def build_comparative_summary(
    listings: Sequence[ListingRecord],
    rng: random.Random | None = None,
) -> ComparativeSummary:
    rng = rng or random.Random()
    variance = rng.uniform(*VARIANCE_RANGE)

    current_revenue = total_revenue(listings)
    current_orders = total_units(listings)
    current_aov = safe_ratio(current_revenue, current_orders) or 0.0

    previous_revenue = current_revenue * variance
    previous_orders = current_orders * (variance + ORDER_VARIANCE_OFFSET)
    previous_aov = safe_ratio(previous_revenue, previous_orders) or 0.0

    return ComparativeSummary(
        revenue=_metric(current_revenue, previous_revenue),
        orders=_metric(current_orders, previous_orders),
        aov=_metric(current_aov, previous_aov),
    )
