"""Trend synthesizer tests."""

import math
import random
from datetime import date

import pytest

from ops_board.application.trend import DateRange, engagement_trend, generate_trend
from tests.factories import MidpointRandom, make_post

TODAY = date(2025, 7, 15)


class TestGenerateTrend:
    @pytest.mark.parametrize("date_range, periods", [("7d", 7), ("30d", 30), ("ytd", 90)])
    def test_window_length(self, date_range, periods):
        series = generate_trend(date_range, 1_000_000, [], rng=random.Random(1), today=TODAY)
        assert len(series) == periods

    def test_most_recent_last(self):
        series = generate_trend(DateRange.LAST_7_DAYS, 7000, [], rng=MidpointRandom(), today=TODAY)

        assert series[-1].iso_date == "2025-07-15"
        assert series[-1].date == "Jul 15"
        assert series[0].iso_date == "2025-07-09"

    def test_event_offsets(self):
        series = generate_trend("30d", 30_000, [], rng=MidpointRandom(), today=TODAY)
        events = {index: point.event for index, point in enumerate(series) if point.event}

        assert events == {24: "Payday Sale", 17: "Viral UGC", 4: "Flash Sale"}

    def test_event_boost_and_flat_baseline(self):
        series = generate_trend("7d", 7000, [], rng=MidpointRandom(), today=TODAY)

        assert [point.revenue for point in series] == [1000, 1800, 1000, 1000, 1000, 1000, 1000]
        assert series[1].reach == 63000
        assert series[2].reach == 35000

    def test_real_plays_override_synthetic_reach(self):
        posts = [
            make_post(1, plays=940_800, date="2025-07-09T10:00:00.000Z"),
            make_post(2, plays=200, date="2025-07-09"),
            make_post(3, plays=5, date="2024-01-01"),
        ]
        series = generate_trend("7d", 7000, posts, rng=MidpointRandom(), today=TODAY)

        assert series[0].reach == 941_000

    def test_jitter_bounds(self):
        base = 3_000_000 / 30
        series = generate_trend("30d", 3_000_000, [], rng=random.Random(99), today=TODAY)

        for point in series:
            if point.event is None:
                assert math.floor(base * 0.7) <= point.revenue <= math.floor(base * 1.3)

    def test_seeded_source_is_reproducible(self):
        first = generate_trend("30d", 5_000_000, [], rng=random.Random(7), today=TODAY)
        second = generate_trend("30d", 5_000_000, [], rng=random.Random(7), today=TODAY)
        assert first == second

    def test_zero_revenue(self):
        series = generate_trend("7d", 0, [], rng=random.Random(3), today=TODAY)
        assert all(point.revenue == 0 for point in series)

    def test_unknown_range_rejected(self):
        with pytest.raises(ValueError):
            generate_trend("14d", 100, [], rng=random.Random(3), today=TODAY)


class TestEngagementTrend:
    def test_ordered_by_publish_date(self):
        posts = [
            make_post(1, plays=10, likes=3, shares=1, comments=50, date="2025-07-09"),
            make_post(2, plays=20, likes=5, shares=2, date="2025-05-10"),
            make_post(3, plays=30, date=""),
        ]
        points = engagement_trend(posts)

        assert [p.date for p in points] == ["", "May 10", "Jul 9"]
        assert [p.plays for p in points] == [30, 20, 10]
        assert points[-1].engagement == 4

    def test_empty(self):
        assert engagement_trend([]) == []
