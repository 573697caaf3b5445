"""Record factories and deterministic random sources for tests."""

from __future__ import annotations

from ops_board.domain.models import ContentRecord, ListingRecord


def make_listing(row_id: int, name: str, price: int = 10000, sold: float = 1) -> ListingRecord:
    return ListingRecord(
        id=row_id,
        name=name,
        price=price,
        discount="",
        tag="",
        rating=0.0,
        sold=sold,
        sold_label=str(sold),
        image="",
        url="",
    )


def make_post(
    row_id: int,
    plays: int = 0,
    likes: int = 0,
    shares: int = 0,
    comments: int = 0,
    date: str = "",
    tags: tuple[str, ...] = (),
) -> ContentRecord:
    return ContentRecord(
        id=row_id,
        caption="",
        full_caption="",
        tags=tags,
        likes=likes,
        shares=shares,
        plays=plays,
        comments=comments,
        date=date,
    )


class MidpointRandom:
    """Deterministic stand-in for ``random.Random``: every draw lands mid-range."""

    def uniform(self, a: float, b: float) -> float:
        return (a + b) / 2

    def random(self) -> float:
        return 0.5


class LowRandom:
    """Every draw returns the lower bound."""

    def uniform(self, a: float, b: float) -> float:
        return a

    def random(self) -> float:
        return 0.0


