"""Shared fixtures: canonical export blobs."""

from __future__ import annotations

import pytest


LISTING_BLOB = "\n".join(
    [
        "url,image,shop,name,price,discount,tag,rating,sold",
        "https://shopee.co.id/a,https://img.example/a.jpg,tweely,\"Tweelyforbag Flessy NEW Mini Backpack\",96,36%,Diskon Rp3RB,4.9,6RB+ terjual",
        "https://shopee.co.id/b,,tweely,Tweelyforbag Gigi Dompet Lipat Wanita,35,41%,Voucher 50%,4.8,3RB+",
        "https://shopee.co.id/c,https://img.example/c.jpg,tweely,Tweelyforbag Elody Small Size KECIL,85,25%,Cashback XTRA,4.7,1.5RB+",
        "https://shopee.co.id/d,https://img.example/d.jpg,tweely,Tweelyforbag Cecille Totebag Canvas,120.000,10%,Terlaris,4.9,800",
        "https://shopee.co.id/e,https://img.example/e.jpg,tweely,Broken Row,50",
        "https://shopee.co.id/f,https://img.example/f.jpg,tweely,\"\",45,20%,,4.8,2.2RB+",
        "",
    ]
)

CONTENT_BLOB = "\r\n".join(
    [
        "id,author,text,diggCount,shareCount,playCount,commentCount,musicName,webVideoUrl,createTimeISO",
        "1,tweely,Get yours! Cecille Totebag #tweelyforbag #totebag,830,118,121900,31,orig,https://vt.example/1,2025-05-10T08:00:00.000Z",
        "2,tweely,NOT YOUR ORDINARY BACKPACK Elody Large size is back and better than ever #backpack,12600,1507,940800,174,orig,https://vt.example/2,2025-07-09T10:00:00.000Z",
        "3,tweely,\"Packing orders #packingasmr\",5400,200,450000,89",
        "4,tweely,broken,1,2",
    ]
)


@pytest.fixture
def listing_blob() -> str:
    return LISTING_BLOB


@pytest.fixture
def content_blob() -> str:
    return CONTENT_BLOB
