"""Daily revenue/reach series for the executive view.

Revenue per day is backfilled from the current snapshot: the total is spread
evenly over the window and jittered per day. This is demo data, not a
forecast; a deployment with real order history should replace
``generate_trend`` with actual daily figures.
"""

from __future__ import annotations

import math
import random
from collections import defaultdict
from datetime import date, timedelta
from enum import Enum
from typing import Sequence

from ops_board.domain.models import ContentRecord, EngagementPoint, PeriodMetric
from ops_board.normalizers import format_date, parse_iso_date

JITTER_RANGE = (0.7, 1.3)
SYNTHETIC_REACH_RANGE = (10_000, 60_000)

# offset (days before today) -> (event label, revenue/reach multiplier)
TREND_EVENTS: dict[int, tuple[str, float]] = {
    5: ("Payday Sale", 1.8),
    12: ("Viral UGC", 1.4),
    25: ("Flash Sale", 1.5),
}


class DateRange(str, Enum):
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    YEAR_TO_DATE = "ytd"

    @property
    def periods(self) -> int:
        if self is DateRange.LAST_7_DAYS:
            return 7
        if self is DateRange.LAST_30_DAYS:
            return 30
        # approximation: the dashboard shows one quarter for YTD
        return 90


def plays_by_date(content: Sequence[ContentRecord]) -> dict[date, int]:
    totals: dict[date, int] = defaultdict(int)
    for item in content:
        published = parse_iso_date(item.date)
        if published is not None:
            totals[published] += item.plays
    return dict(totals)


def generate_trend(
    date_range: DateRange | str,
    total_revenue: float,
    content: Sequence[ContentRecord],
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[PeriodMetric]:
    """Build one ``PeriodMetric`` per day of ``date_range``, oldest first."""
    window = DateRange(date_range).periods
    rng = rng or random.Random()
    today = today or date.today()
    real_reach = plays_by_date(content)
    base_revenue = total_revenue / window

    series: list[PeriodMetric] = []
    for offset in range(window - 1, -1, -1):
        day = today - timedelta(days=offset)
        event, spike = TREND_EVENTS.get(offset, (None, 1.0))
        jitter = rng.uniform(*JITTER_RANGE)
        if day in real_reach:
            reach = real_reach[day]
        else:
            reach = math.floor(math.floor(rng.uniform(*SYNTHETIC_REACH_RANGE)) * spike)
        series.append(
            PeriodMetric(
                date=format_date(day.isoformat()),
                iso_date=day.isoformat(),
                revenue=math.floor(base_revenue * jitter * spike),
                reach=reach,
                event=event,
            )
        )
    return series


def engagement_trend(content: Sequence[ContentRecord]) -> list[EngagementPoint]:
    """Observed plays and likes+shares per post, ordered by publish date."""
    ordered = sorted(content, key=lambda item: parse_iso_date(item.date) or date.min)
    return [
        EngagementPoint(date=format_date(item.date), plays=item.plays, engagement=item.likes + item.shares)
        for item in ordered
    ]
