# parser/normalizer.py
"""
Map raw records onto the canonical Transaction shape.

Field roles are found by case-insensitive substring match on the record's
keys; the first key in record order wins. A record without a date key or an
amount key is dropped, never defaulted.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Iterable, List, Optional

from bsense_core.models import RawRecord, Transaction
from bsense_utils.normalizers import coerce_amount, find_key, non_blank, to_iso_date
from categorizer.rules import categorize

log = logging.getLogger(__name__)

DATE_KEYS = ("date",)
MERCHANT_KEYS = ("merchant", "description", "name")
AMOUNT_KEYS = ("amount", "price", "total")
DESCRIPTION_KEYS = ("description",)
CATEGORY_KEYS = ("category", "type")

UNKNOWN_MERCHANT = "Unknown"
UNCATEGORIZED = "Uncategorized"

Categorizer = Callable[[Optional[str], Optional[str]], str]


def normalize_record(
    record: RawRecord,
    *,
    categorizer: Categorizer = categorize,
    trust_category_column: bool = False,
    today: Optional[date] = None,
) -> Optional[Transaction]:
    """Build a Transaction from one raw record, or None if it must be dropped."""
    fields = record.fields
    keys = list(fields.keys())

    date_key = find_key(keys, DATE_KEYS)
    amount_key = find_key(keys, AMOUNT_KEYS)
    if date_key is None or amount_key is None:
        log.debug(
            "Row %s dropped: date=%r amount=%r", record.row, date_key, amount_key
        )
        return None

    iso = to_iso_date(non_blank(fields, date_key))
    if iso is None:
        iso = (today or datetime.now(timezone.utc).date()).isoformat()

    merchant_val = non_blank(fields, find_key(keys, MERCHANT_KEYS))
    merchant = str(merchant_val).strip() if merchant_val is not None else UNKNOWN_MERCHANT
    desc_val = non_blank(fields, find_key(keys, DESCRIPTION_KEYS))
    description = str(desc_val).strip() if desc_val is not None else merchant

    if trust_category_column:
        cat_val = non_blank(fields, find_key(keys, CATEGORY_KEYS))
        category = str(cat_val) if cat_val is not None else UNCATEGORIZED
    else:
        category = categorizer(description, merchant)

    return Transaction(
        date=iso,
        merchant=merchant,
        amount=coerce_amount(fields.get(amount_key)),
        category=category,
        description=description,
    )


def normalize_records(
    records: Iterable[RawRecord],
    *,
    categorizer: Categorizer = categorize,
    trust_category_column: bool = False,
    today: Optional[date] = None,
) -> List[Transaction]:
    out: List[Transaction] = []
    dropped = 0
    for rec in records:
        txn = normalize_record(
            rec,
            categorizer=categorizer,
            trust_category_column=trust_category_column,
            today=today,
        )
        if txn is None:
            dropped += 1
        else:
            out.append(txn)
    if dropped:
        log.info("Dropped %d row(s) without a date or amount column", dropped)
    return out
