"""
Ingest facade: raw upload -> categorized transactions.

    bytes/text --adapter--> raw records --normalize/categorize--> transactions

parse() never raises. Unknown formats and adapter failures produce an empty
list and a log line instead.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from adapters.base import RawInput
from adapters.registry import UnsupportedFormatError, get_adapter
from bsense_core.models import Transaction
from categorizer.rules import categorize
from parser.normalizer import Categorizer, normalize_records

log = logging.getLogger("ingest")


def parse(
    fmt: Optional[str],
    raw: RawInput,
    *,
    categorizer: Optional[Categorizer] = None,
    delimiter: str = ",",
    today: Optional[date] = None,
) -> List[Transaction]:
    try:
        adapter = get_adapter(fmt, delimiter=delimiter)
        records = adapter.read_records(raw)
        txns = normalize_records(
            records,
            categorizer=categorizer or categorize,
            trust_category_column=adapter.trusts_category_column,
            today=today,
        )
    except UnsupportedFormatError as exc:
        log.warning("%s", exc)
        return []
    except Exception as exc:  # guardrail: a bad upload must not crash the caller
        log.warning("%r parsing failed: %s", fmt, exc, exc_info=True)
        return []

    log.info("Parsed %d transaction(s) from %s input", len(txns), fmt)
    return txns
