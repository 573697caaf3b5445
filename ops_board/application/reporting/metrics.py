"""Shared numeric/formatting utilities for reporting."""

from __future__ import annotations


def safe_ratio(num: float, den: float) -> float | None:
    if den <= 0:
        return None
    return num / den


def pct_delta(curr: float, prev: float) -> float:
    """Change of ``curr`` over ``prev`` measured against ``curr``; 0 when ``curr`` is 0."""
    ratio = safe_ratio(prev, curr)
    if ratio is None:
        return 0.0
    return (1 - ratio) * 100


def fmt_compact(value: float | None) -> str:
    if value is None:
        return "0"
    abs_value = abs(value)
    sign = "-" if value < 0 else ""
    if abs_value >= 1_000_000_000:
        return f"{sign}{abs_value / 1_000_000_000:.1f}B"
    if abs_value >= 1_000_000:
        return f"{sign}{abs_value / 1_000_000:.1f}M"
    if abs_value >= 1_000:
        return f"{sign}{abs_value / 1_000:.0f}K"
    return f"{sign}{abs_value:.0f}"


def fmt_money(value: float | None) -> str:
    if value is None:
        return "Rp0"
    return f"Rp{fmt_compact(value)}"


def fmt_pct(value: float | None, signed: bool = True) -> str:
    if value is None:
        return "N/A"
    if signed:
        return f"{value:+.1f}%"
    return f"{value:.1f}%"


def trend(value: float | None, eps: float = 1e-9) -> str:
    if value is None:
        return "unknown"
    if value > eps:
        return "up"
    if value < -eps:
        return "down"
    return "flat"
