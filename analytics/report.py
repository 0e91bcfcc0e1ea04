# analytics/report.py
"""
Spending report over a finished transaction list.

generate_report() is pure and total: every input, the empty list included,
maps to a well-formed Report. Nothing is cached; each call recomputes from
scratch in O(n).
"""
from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from bsense_core.models import (
    Forecast,
    HealthScore,
    MerchantSpend,
    PeriodHint,
    Report,
    Totals,
    Transaction,
)

TOP_MERCHANTS = 10
BUDGET_HEADROOM = 1.1
FORECAST_WINDOW = 3
FORECAST_METHOD = "Average of last 3 months"

BASE_SCORE = 75
HIGH_MONTHLY_SPEND = 3000
VERY_HIGH_MONTHLY_SPEND = 5000
DINING_SHARE_LIMIT = 0.3


def _empty_report() -> Report:
    return Report(
        totals=Totals(),
        by_category={},
        by_month={},
        top_merchants=[],
        budget={},
        forecast=None,
        health_score=HealthScore(score=0, summary="No data available"),
        period_hint=PeriodHint(),
    )


def _sum_by(txns: Sequence[Transaction], key) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for t in txns:
        k = key(t)
        out[k] = out.get(k, 0) + t.amount
    return out


def top_merchants(
    txns: Sequence[Transaction], limit: int = TOP_MERCHANTS
) -> List[MerchantSpend]:
    """Merchants by spend, highest first; ties keep first-seen order."""
    spent: Dict[str, float] = {}
    count: Dict[str, int] = {}
    for t in txns:
        spent[t.merchant] = spent.get(t.merchant, 0) + t.amount
        count[t.merchant] = count.get(t.merchant, 0) + 1
    # sorted() is stable and dicts keep insertion order
    ranked = sorted(spent, key=lambda m: spent[m], reverse=True)
    return [MerchantSpend(m, spent[m], count[m]) for m in ranked[:limit]]


def suggest_budget(by_category: Dict[str, float]) -> Dict[str, int]:
    """Category spend plus 10% headroom, rounded up to a whole unit."""
    return {cat: math.ceil(amt * BUDGET_HEADROOM) for cat, amt in by_category.items()}


def forecast_next_month(by_month: Dict[str, float]) -> Optional[Forecast]:
    """Mean of the latest (up to) three months; None with fewer than two."""
    months = sorted(by_month)
    if len(months) < 2:
        return None
    recent = months[-FORECAST_WINDOW:]
    avg = sum(by_month[m] for m in recent) / len(recent)
    return Forecast(
        # round half up, not half to even
        next_month_spend=math.floor(avg + 0.5),
        confidence="High" if len(months) >= 3 else "Medium",
        method=FORECAST_METHOD,
    )


def health_score(
    total_spent: float, by_category: Dict[str, float], month_count: int
) -> HealthScore:
    avg_monthly = total_spent / month_count if month_count else 0
    score = BASE_SCORE
    if avg_monthly > HIGH_MONTHLY_SPEND:
        score -= 15
    # stacks with the penalty above
    if avg_monthly > VERY_HIGH_MONTHLY_SPEND:
        score -= 10
    if by_category.get("Dining", 0) > total_spent * DINING_SHARE_LIMIT:
        score -= 10
    score = max(0, min(100, score))

    if score >= 80:
        summary = "Excellent financial health!"
    elif score >= 60:
        summary = "Good, with room for improvement"
    else:
        summary = "Consider reducing spending"
    return HealthScore(score=score, summary=summary)


def generate_report(transactions: Sequence[Transaction]) -> Report:
    txns = list(transactions)
    if not txns:
        return _empty_report()

    total_spent = sum(t.amount for t in txns)
    count = len(txns)

    by_category = _sum_by(txns, lambda t: t.category)
    by_month = _sum_by(txns, lambda t: t.month)

    # YYYY-MM-DD strings sort chronologically
    dates = sorted(t.date for t in txns)

    return Report(
        totals=Totals(
            transaction_count=count,
            total_spent=total_spent,
            avg_spend_per_txn=total_spent / count,
        ),
        by_category=by_category,
        by_month=by_month,
        top_merchants=top_merchants(txns),
        budget=suggest_budget(by_category),
        forecast=forecast_next_month(by_month),
        health_score=health_score(total_spent, by_category, len(by_month)),
        period_hint=PeriodHint(
            start=dates[0], end=dates[-1], months_detected=len(by_month)
        ),
    )
