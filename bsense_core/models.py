from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RawRecord:
    """One source row as key -> value, before role resolution."""

    fields: Dict[str, Any] = field(default_factory=dict)
    # 1-based row number in the source, for diagnostics
    row: int = 0


@dataclass(frozen=True)
class Transaction:
    date: str  # YYYY-MM-DD
    merchant: str
    amount: float
    category: str
    description: Optional[str] = None

    @property
    def month(self) -> str:
        return self.date[:7]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "merchant": self.merchant,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
        }


@dataclass(frozen=True)
class Totals:
    transaction_count: int = 0
    total_spent: float = 0.0
    avg_spend_per_txn: float = 0.0


@dataclass(frozen=True)
class MerchantSpend:
    merchant: str
    spent: float
    count: int


@dataclass(frozen=True)
class Forecast:
    next_month_spend: int
    confidence: str
    method: str


@dataclass(frozen=True)
class HealthScore:
    score: int
    summary: str


@dataclass(frozen=True)
class PeriodHint:
    start: str = ""
    end: str = ""
    months_detected: int = 0


@dataclass(frozen=True)
class Report:
    totals: Totals
    by_category: Dict[str, float]
    by_month: Dict[str, float]
    top_merchants: List[MerchantSpend]
    budget: Dict[str, int]
    forecast: Optional[Forecast]
    health_score: HealthScore
    period_hint: PeriodHint

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape consumed by the web client."""
        forecast = None
        if self.forecast is not None:
            forecast = {
                "nextMonthSpend": self.forecast.next_month_spend,
                "confidence": self.forecast.confidence,
                "method": self.forecast.method,
            }
        return {
            "totals": {
                "transactionCount": self.totals.transaction_count,
                "totalSpent": self.totals.total_spent,
                "avgSpendPerTxn": self.totals.avg_spend_per_txn,
            },
            "byCategory": dict(self.by_category),
            "byMonth": dict(self.by_month),
            "topMerchants": [
                {"merchant": m.merchant, "spent": m.spent, "count": m.count}
                for m in self.top_merchants
            ],
            "budget": dict(self.budget),
            "forecast": forecast,
            "healthScore": {
                "score": self.health_score.score,
                "summary": self.health_score.summary,
            },
            "periodHint": {
                "start": self.period_hint.start,
                "end": self.period_hint.end,
                "monthsDetected": self.period_hint.months_detected,
            },
        }
