# adapters/spreadsheet.py
"""
Spreadsheet (xlsx/xls) adapter.

Only the first sheet is read. Every row becomes its own record holding just
its non-empty cells, so field roles are resolved per row rather than once per
sheet.
"""
from __future__ import annotations

import io
import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from adapters.base import BaseAdapter, RawInput
from bsense_core.models import RawRecord

log = logging.getLogger(__name__)


def _cell(value: Any) -> Any:
    """numpy scalars -> plain Python; blanks -> None."""
    if value is None:
        return None
    if isinstance(value, np.generic):
        value = value.item()
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    if isinstance(value, str) and not value.strip():
        return None
    return value


class SpreadsheetAdapter(BaseAdapter):
    name = "spreadsheet"
    trusts_category_column = True

    def read_records(self, raw: RawInput) -> List[RawRecord]:
        if not isinstance(raw, (bytes, bytearray)):
            raise TypeError("SpreadsheetAdapter expects the workbook as bytes")

        df = pd.read_excel(io.BytesIO(bytes(raw)), sheet_name=0)
        if df.empty:
            return []

        records: List[RawRecord] = []
        # header is sheet row 1, so data starts at row 2
        for row_no, row in enumerate(df.to_dict(orient="records"), start=2):
            fields: Dict[str, Any] = {}
            for key, value in row.items():
                value = _cell(value)
                if value is not None:
                    fields[str(key)] = value
            if fields:
                records.append(RawRecord(fields=fields, row=row_no))

        log.debug("Read %d spreadsheet rows from first sheet", len(records))
        return records
