# analytics/summary.py
from __future__ import annotations

from typing import List

from bsense_core.models import Report

_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "INR": "₹"}


def _money(value: float, currency: str) -> str:
    symbol = _SYMBOLS.get(currency.upper())
    if symbol:
        return f"{symbol}{value:,.2f}"
    return f"{value:,.2f} {currency}"


def render_summary(report: Report, currency: str = "USD", top: int = 5) -> str:
    """Plain-text digest of a report for terminals and advisor prompts."""
    t = report.totals
    if t.transaction_count == 0:
        return "No transactions found."

    lines: List[str] = [
        f"Total Transactions: {t.transaction_count}",
        f"Total Spent: {_money(t.total_spent, currency)}",
        f"Average per Transaction: {_money(t.avg_spend_per_txn, currency)}",
        f"Period: {report.period_hint.start} to {report.period_hint.end}",
        "",
        "Spending by Category:",
    ]
    for cat, amt in sorted(report.by_category.items(), key=lambda kv: kv[1], reverse=True):
        lines.append(f"- {cat}: {_money(amt, currency)}")

    lines += ["", "Monthly Spending:"]
    for month in sorted(report.by_month):
        lines.append(f"- {month}: {_money(report.by_month[month], currency)}")

    lines += ["", "Top Merchants:"]
    for m in report.top_merchants[:top]:
        lines.append(f"- {m.merchant}: {_money(m.spent, currency)} ({m.count} txns)")

    lines.append("")
    if report.forecast:
        f = report.forecast
        lines.append(
            f"Forecast: {_money(f.next_month_spend, currency)} next month "
            f"({f.confidence} confidence, {f.method})"
        )
    else:
        lines.append("Forecast: not enough months of data")
    hs = report.health_score
    lines.append(f"Health Score: {hs.score}/100 - {hs.summary}")
    return "\n".join(lines)
