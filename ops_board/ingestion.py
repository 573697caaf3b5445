"""Text-export ingestion for marketplace listings and short-video posts.

Exports are split on newlines and commas only. Quoted fields containing the
delimiter are not supported and will shift the remaining columns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Sequence

from ops_board.domain.models import ContentRecord, ListingRecord
from ops_board.normalizers import (
    DEFAULT_PRICE_POLICY,
    PricePolicy,
    extract_hashtags,
    normalize_price,
    normalize_units_sold,
    parse_count,
    parse_rating,
    strip_quotes,
)

logger = logging.getLogger(__name__)

DELIMITER = ","
CAPTION_PREVIEW_LENGTH = 50
PLACEHOLDER_IMAGE_TEMPLATE = "https://picsum.photos/100/100?random={row_id}"

LISTING_FIELDS: tuple[str, ...] = ("url", "image", "name", "price", "discount", "tag", "rating", "sold")
CONTENT_FIELDS: tuple[str, ...] = ("caption", "likes", "shares", "plays", "comments", "date")


@dataclass(frozen=True)
class ColumnMapping:
    """Fixed field -> column index layout for one export kind."""

    columns: Mapping[str, int]
    required: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name, index in self.columns.items():
            if not isinstance(index, int) or isinstance(index, bool) or index < 0:
                raise ValueError(f"Invalid column index for {name!r}: {index!r}")
        indices = list(self.columns.values())
        if len(indices) != len(set(indices)):
            raise ValueError(f"Duplicate column indices in mapping: {dict(self.columns)}")
        unknown = sorted(set(self.required).difference(self.columns))
        if unknown:
            raise ValueError(f"Required fields missing from mapping: {unknown}")

    @property
    def min_columns(self) -> int:
        if not self.required:
            return 0
        return max(self.columns[name] for name in self.required) + 1

    def ensure_fields(self, fields: Sequence[str]) -> None:
        missing = sorted(set(fields).difference(self.columns))
        if missing:
            raise ValueError(f"Mapping does not cover fields: {missing}")

    def cell(self, cols: Sequence[str], name: str) -> str:
        index = self.columns[name]
        if index >= len(cols):
            return ""
        return cols[index]


LISTING_COLUMNS = ColumnMapping(
    columns={"url": 0, "image": 1, "name": 3, "price": 4, "discount": 5, "tag": 6, "rating": 7, "sold": 8},
    required=frozenset(LISTING_FIELDS),
)
CONTENT_COLUMNS = ColumnMapping(
    columns={"caption": 2, "likes": 3, "shares": 4, "plays": 5, "comments": 6, "date": 9},
    required=frozenset({"caption", "likes", "shares", "plays", "comments"}),
)
LISTING_COLUMNS.ensure_fields(LISTING_FIELDS)
CONTENT_COLUMNS.ensure_fields(CONTENT_FIELDS)


def _data_rows(text: str | None, mapping: ColumnMapping) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(row_id, columns)`` for every data line wide enough for ``mapping``."""
    if not text:
        return
    lines = str(text).split("\n")
    for row_id, line in enumerate(lines[1:], start=1):
        cols = line.rstrip("\r").split(DELIMITER)
        if len(cols) < mapping.min_columns:
            continue
        yield row_id, cols


def _row_count(text: str | None) -> int:
    if not text:
        return 0
    return max(0, len(str(text).split("\n")) - 1)


def parse_listings(
    text: str | None,
    mapping: ColumnMapping = LISTING_COLUMNS,
    price_policy: PricePolicy = DEFAULT_PRICE_POLICY,
) -> list[ListingRecord]:
    """Parse a marketplace export into listing records, dropping unusable rows."""
    mapping.ensure_fields(LISTING_FIELDS)
    records: list[ListingRecord] = []
    for row_id, cols in _data_rows(text, mapping):
        name = strip_quotes(mapping.cell(cols, "name")).strip()
        if not name:
            continue
        sold_label = strip_quotes(mapping.cell(cols, "sold")).strip()
        image = mapping.cell(cols, "image").strip()
        records.append(
            ListingRecord(
                id=row_id,
                name=name,
                price=normalize_price(mapping.cell(cols, "price"), policy=price_policy),
                discount=strip_quotes(mapping.cell(cols, "discount")).strip(),
                tag=strip_quotes(mapping.cell(cols, "tag")).strip(),
                rating=parse_rating(mapping.cell(cols, "rating")),
                sold=normalize_units_sold(sold_label),
                sold_label=sold_label,
                image=image or PLACEHOLDER_IMAGE_TEMPLATE.format(row_id=row_id),
                url=mapping.cell(cols, "url").strip(),
            )
        )
    logger.debug("listing export: kept %d of %d rows", len(records), _row_count(text))
    return records


def parse_content(text: str | None, mapping: ColumnMapping = CONTENT_COLUMNS) -> list[ContentRecord]:
    """Parse a short-video export into content records, dropping unusable rows."""
    mapping.ensure_fields(CONTENT_FIELDS)
    records: list[ContentRecord] = []
    for row_id, cols in _data_rows(text, mapping):
        full_caption = strip_quotes(mapping.cell(cols, "caption"))
        records.append(
            ContentRecord(
                id=row_id,
                caption=full_caption[:CAPTION_PREVIEW_LENGTH],
                full_caption=full_caption,
                tags=tuple(extract_hashtags(full_caption)),
                likes=parse_count(mapping.cell(cols, "likes")),
                shares=parse_count(mapping.cell(cols, "shares")),
                plays=parse_count(mapping.cell(cols, "plays")),
                comments=parse_count(mapping.cell(cols, "comments")),
                date=strip_quotes(mapping.cell(cols, "date")).strip(),
            )
        )
    logger.debug("content export: kept %d of %d rows", len(records), _row_count(text))
    return records
