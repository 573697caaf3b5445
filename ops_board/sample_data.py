"""Seed record sets shown before any export has been uploaded.

Nothing in the pipeline loads these implicitly; callers pass a provider to
``run_reporting_pipeline`` when they want a populated board without uploads.
"""

from __future__ import annotations

from dataclasses import dataclass

from ops_board.domain.models import ContentRecord, ListingRecord
from ops_board.ingestion import CAPTION_PREVIEW_LENGTH
from ops_board.normalizers import extract_hashtags

_IMAGE_BASE = "https://github.com/user-attachments/assets"

SAMPLE_LISTINGS: tuple[ListingRecord, ...] = (
    ListingRecord(1, "Tweelyforbag Flessy NEW Mini Backpack", 96000, "36%", "Diskon Rp3RB", 4.9, 6000, "6RB+",
                  f"{_IMAGE_BASE}/71c61563-0056-4c75-9c86-185440618051", "#"),
    ListingRecord(2, "Tweelyforbag Gigi Dompet Lipat Wanita", 35000, "41%", "Voucher 50%", 4.8, 3000, "3RB+",
                  f"{_IMAGE_BASE}/38435136-1506-4444-9080-366551820612", "#"),
    ListingRecord(3, "Tweelyforbag Elody Small Size KECIL", 85000, "25%", "Cashback XTRA", 4.7, 1500, "1.5RB+",
                  f"{_IMAGE_BASE}/68310006-2c5e-47f9-8d76-189689617260", "#"),
    ListingRecord(4, "Tweelyforbag Cecille Totebag Canvas", 120000, "10%", "Terlaris", 4.9, 800, "800",
                  f"{_IMAGE_BASE}/19f39088-333e-46d2-bb82-411327142416", "#"),
    ListingRecord(5, "Tweelyforbag Pouch Makeup Travel", 25000, "50%", "Flash Sale", 4.6, 10000, "10RB+",
                  f"{_IMAGE_BASE}/c6607212-325b-4860-96f8-985226759755", "#"),
    ListingRecord(6, "Tweelyforbag Shoulder Bag Retro", 110000, "15%", "Diskon Rp10RB", 4.5, 500, "500",
                  f"{_IMAGE_BASE}/10101150-5100-4354-9915-101112201222", "#"),
    ListingRecord(7, "Tweelyforbag Sling Phone Case", 45000, "20%", "Murah Lebay", 4.8, 2200, "2.2RB+",
                  f"{_IMAGE_BASE}/19323382-3580-4565-9830-478631525011", "#"),
    ListingRecord(8, "Tweelyforbag Laptop Sleeve 14 Inch", 75000, "30%", "", 4.9, 450, "450",
                  f"{_IMAGE_BASE}/05933615-5205-4085-8833-255011880562", "#"),
)


def _post(post_id: int, caption: str, likes: int, shares: int, plays: int, comments: int, published: str) -> ContentRecord:
    return ContentRecord(
        id=post_id,
        caption=caption[:CAPTION_PREVIEW_LENGTH],
        full_caption=caption,
        tags=tuple(extract_hashtags(caption)),
        likes=likes,
        shares=shares,
        plays=plays,
        comments=comments,
        date=published,
    )


SAMPLE_CONTENT: tuple[ContentRecord, ...] = (
    _post(1, "Get yours! Cecille Totebag #tweelyforbag #totebag", 830, 118, 121900, 31, "2025-05-10"),
    _post(2, "NOT YOUR ORDINARY BACKPACK Elody Large size is back! #backpack #racuntiktok",
          12600, 1507, 940800, 174, "2025-07-09"),
    _post(3, "Packing orders for 12.12 Sale! #packingasmr", 5400, 200, 450000, 89, "2025-06-15"),
    _post(4, "New color alert! Pastel Pink Series #newarrival #pink", 3200, 450, 210000, 120, "2025-06-20"),
    _post(5, "What fits in my Tweely Bag? #whatsinmybag", 9800, 890, 780000, 230, "2025-07-01"),
    _post(6, "Flash Sale Spoiler Don't tell boss #flashsale #spill", 15000, 3000, 1200000, 560, "2025-07-15"),
    _post(7, "Styling tips for college students #ootd #campus", 4500, 320, 340000, 95, "2025-05-25"),
)


@dataclass(frozen=True)
class SampleDataProvider:
    listings: tuple[ListingRecord, ...] = SAMPLE_LISTINGS
    content: tuple[ContentRecord, ...] = SAMPLE_CONTENT

    def sample_listings(self) -> list[ListingRecord]:
        return list(self.listings)

    def sample_content(self) -> list[ContentRecord]:
        return list(self.content)
