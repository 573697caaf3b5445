"""Field normalizers for marketplace and short-video exports.

Every function here is total: absent or malformed tokens degrade to the
type's zero value instead of raising.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date

SOLD_MARKER = "TERJUAL"
THOUSAND_SUFFIX = "RB"
HASHTAG_PATTERN = re.compile(r"#[A-Za-z0-9_]+")

_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_INTEGER_PREFIX = re.compile(r"^[+-]?\d+")
_CURRENCY_MARKER = re.compile(r"RP", re.IGNORECASE)

# Amounts above this do not fit the Int64 frame columns and degrade to zero.
MAX_AMOUNT = 2**63 - 1


@dataclass(frozen=True)
class PricePolicy:
    """Scaling rule for prices exported without their trailing thousands.

    The marketplace export writes small prices in thousands ("96" means
    96.000). Any parsed value below ``threshold`` is multiplied by
    ``multiplier``.
    """

    threshold: float = 1000
    multiplier: int = 1000


DEFAULT_PRICE_POLICY = PricePolicy()


def _leading_number(text: str) -> float | None:
    match = _NUMBER_PREFIX.match(text.strip())
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def normalize_units_sold(value: str | None) -> float:
    """Convert a sold-count label such as ``"6RB+"`` or ``"1.5RB+"`` to a number."""
    if not value:
        return 0.0
    text = str(value).upper().replace(SOLD_MARKER, "").replace("+", "").replace(",", "").strip()
    if THOUSAND_SUFFIX in text:
        number = _leading_number(text.split(THOUSAND_SUFFIX, 1)[0])
        scale = 1000.0
    else:
        number = _leading_number(text)
        scale = 1.0
    if number is None or number <= 0:
        return 0.0
    result = number * scale
    if not math.isfinite(result) or result > MAX_AMOUNT:
        return 0.0
    return result


def normalize_price(value: str | None, policy: PricePolicy = DEFAULT_PRICE_POLICY) -> int:
    """Convert a dot-grouped price (``"120.000"``, ``"Rp96"``) to an integer amount."""
    if not value:
        return 0
    text = _CURRENCY_MARKER.sub("", str(value).replace(".", "")).strip()
    number = _leading_number(text)
    if number is None or number <= 0:
        return 0
    if number < policy.threshold:
        number *= policy.multiplier
    price = int(round(number))
    return price if price <= MAX_AMOUNT else 0


def extract_hashtags(text: str | None) -> list[str]:
    if not text:
        return []
    return HASHTAG_PATTERN.findall(str(text))


def parse_iso_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def format_date(value: str | None) -> str:
    """Render an ISO date as a short ``"May 10"`` label; empty string when invalid."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return ""
    return f"{parsed:%b} {parsed.day}"


def parse_rating(value: str | None) -> float:
    if not value:
        return 0.0
    number = _leading_number(strip_quotes(value))
    return number if number is not None else 0.0


def parse_count(value: str | None) -> int:
    """Leading-integer parse for engagement counters, clamped at zero."""
    if not value:
        return 0
    match = _INTEGER_PREFIX.match(strip_quotes(value).strip())
    if not match:
        return 0
    count = int(match.group(0))
    if count <= 0 or count > MAX_AMOUNT:
        return 0
    return count


def strip_quotes(value: str | None) -> str:
    if not value:
        return ""
    return str(value).replace('"', "")
