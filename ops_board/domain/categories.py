"""Keyword policy for grouping listings into product categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

FALLBACK_CATEGORY = "Other"


@dataclass(frozen=True)
class CategoryRule:
    category: str
    keywords: tuple[str, ...]

    def matches(self, name: str) -> bool:
        text = str(name or "").lower()
        return any(keyword in text for keyword in self.keywords)


# Order matters: the first matching rule wins.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("Backpack", ("backpack", "ransel")),
    CategoryRule("Totebag", ("tote", "totebag")),
    CategoryRule("Wallet", ("dompet", "wallet")),
    CategoryRule("Shoulder Bag", ("shoulder",)),
    CategoryRule("Sling Bag", ("sling", "selempang")),
    CategoryRule("Laptop Case", ("laptop", "sleeve")),
    CategoryRule("Pouch", ("pouch", "tempat", "makeup")),
)


def classify(name: str, rules: Sequence[CategoryRule] = CATEGORY_RULES) -> str:
    for rule in rules:
        if rule.matches(name):
            return rule.category
    return FALLBACK_CATEGORY


def category_order(rules: Sequence[CategoryRule] = CATEGORY_RULES) -> list[str]:
    order: list[str] = []
    for rule in rules:
        if rule.category not in order:
            order.append(rule.category)
    if FALLBACK_CATEGORY not in order:
        order.append(FALLBACK_CATEGORY)
    return order
