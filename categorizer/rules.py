# categorizer/rules.py
"""
Keyword rules engine for transaction categorization.

Rules are plain data: an ordered table of (category, keywords). The first rule
with any keyword contained in the lowercased "description merchant" text wins;
table order is the only tie-break. Text matching no rule falls back to
DEFAULT_CATEGORY.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class CategoryRule:
    """A single categorization rule: category plus lowercase keywords."""

    category: str
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)


DEFAULT_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(
        "Dining",
        (
            "restaurant",
            "cafe",
            "coffee",
            "starbucks",
            "dinner",
            "lunch",
            "food",
            "grill",
            "bistro",
            "sakura",
        ),
    ),
    CategoryRule(
        "Groceries", ("grocery", "supermarket", "whole foods", "market", "trader")
    ),
    CategoryRule(
        "Transport", ("uber", "lyft", "gas", "fuel", "shell", "exxon", "ride", "taxi")
    ),
    CategoryRule(
        "Subscriptions",
        (
            "netflix",
            "spotify",
            "prime",
            "subscription",
            "membership",
            "gym",
            "fitness",
            "icloud",
        ),
    ),
    CategoryRule(
        "Shopping",
        ("amazon", "shop", "purchase", "store", "mall", "target", "walmart"),
    ),
    CategoryRule(
        "Entertainment", ("movie", "cinema", "theater", "ticket", "game", "ppac")
    ),
    CategoryRule(
        "Utilities", ("electric", "water", "internet", "phone", "utility", "bill")
    ),
    CategoryRule(
        "Health", ("pharmacy", "doctor", "clinic", "medical", "hospital", "cvs")
    ),
)


def _match_text(description: Optional[str], merchant: Optional[str]) -> str:
    return f"{description or ''} {merchant or ''}".lower()


def parse_rule(r: Dict[str, Any]) -> Optional[CategoryRule]:
    """Parse a rule from YAML config dict; None when it has nothing to match."""
    category = str(r.get("category") or "").strip()
    keywords = r.get("keywords") or []
    if isinstance(keywords, str):
        keywords = [keywords]
    keywords = tuple(str(k).lower() for k in keywords if str(k).strip())
    if not category or not keywords:
        return None
    return CategoryRule(category, keywords)


def compile_rules(cfg: Dict[str, Any]) -> Tuple[CategoryRule, ...]:
    """Compile rules from config, keeping file order."""
    rules = [parse_rule(r) for r in cfg.get("rules", []) or []]
    return tuple(r for r in rules if r is not None)


def match_rule(
    description: Optional[str],
    merchant: Optional[str],
    rules: Sequence[CategoryRule] = DEFAULT_RULES,
) -> Optional[CategoryRule]:
    """Return the first rule matching the text, or None."""
    text = _match_text(description, merchant)
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def categorize(
    description: Optional[str],
    merchant: Optional[str],
    rules: Sequence[CategoryRule] = DEFAULT_RULES,
    default: str = DEFAULT_CATEGORY,
) -> str:
    rule = match_rule(description, merchant, rules)
    return rule.category if rule else default
