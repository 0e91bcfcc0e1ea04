"""
Core value objects for BillSense.

The entry points callers use live in bsense_core.api.
"""

from .models import (
    RawRecord,
    Transaction,
    Totals,
    MerchantSpend,
    Forecast,
    HealthScore,
    PeriodHint,
    Report,
)

__all__ = [
    "RawRecord",
    "Transaction",
    "Totals",
    "MerchantSpend",
    "Forecast",
    "HealthScore",
    "PeriodHint",
    "Report",
]
