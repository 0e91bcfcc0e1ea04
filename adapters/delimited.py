# adapters/delimited.py
"""
Delimited-text (CSV/TSV) adapter.

The first non-blank line is the header. Fields are split on a literal
separator: there is no quoting, so a field containing the separator shifts
the rest of its row.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from adapters.base import BaseAdapter, RawInput, decode_text
from bsense_core.models import RawRecord

log = logging.getLogger(__name__)


class DelimitedAdapter(BaseAdapter):
    name = "delimited"
    trusts_category_column = False

    def __init__(self, delimiter: str = ","):
        if not delimiter:
            raise ValueError("DelimitedAdapter requires a non-empty delimiter")
        self.delimiter = delimiter

    def _split(self, line: str) -> List[str]:
        return [v.strip() for v in line.split(self.delimiter)]

    def read_records(self, raw: RawInput) -> List[RawRecord]:
        lines = [ln for ln in decode_text(raw).split("\n") if ln.strip()]
        if len(lines) < 2:
            return []

        headers = self._split(lines[0])
        records: List[RawRecord] = []
        for row_no, line in enumerate(lines[1:], start=2):
            fields: Dict[str, str] = {}
            # zip stops at the shorter side: a short row has no trailing cells
            for header, value in zip(headers, self._split(line)):
                # duplicate header: the earliest column keeps the key
                fields.setdefault(header, value)
            records.append(RawRecord(fields=fields, row=row_no))

        log.debug("Read %d delimited rows (%d columns)", len(records), len(headers))
        return records
