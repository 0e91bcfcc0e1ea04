# bsense_utils/normalizers.py
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Mapping, Optional, Tuple


# ---------------- Amount normalization ----------------

# Everything except digits, dot and minus is noise ("$1,234.50", "USD 12")
_AMOUNT_NOISE = re.compile(r"[^0-9.\-]")
# Longest leading number, the way a lenient parseFloat reads it ("40.00-" -> 40.00)
_AMOUNT_PREFIX = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")


def coerce_amount(raw: Any) -> float:
    """Absolute numeric value of an amount cell; 0 when it cannot be parsed."""
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        val = float(raw)
    else:
        m = _AMOUNT_PREFIX.match(_AMOUNT_NOISE.sub("", str(raw)))
        if not m:
            return 0.0
        val = float(m.group(0))
    if math.isnan(val) or math.isinf(val):
        return 0.0
    return abs(val)


# ---------------- Dates ----------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MDY_RX = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})\s*$")
YMD_RX = re.compile(r"^\s*(\d{4})[./-](\d{1,2})[./-](\d{1,2})(?:[T ][\d:.]+Z?)?\s*$")
MON_D_Y_RX = re.compile(r"^\s*([A-Za-z]{3,})\.?\s+(\d{1,2}),?\s+(\d{2,4})\s*$")

# Excel stores dates as days since 1899-12-30 (the 1900 leap-year bug included)
_EXCEL_EPOCH = date(1899, 12, 30)
_EXCEL_MAX_SERIAL = 2958465  # 9999-12-31


def _clip_year(y: int) -> int:
    if y < 100:
        return 2000 + y if y < 70 else 1900 + y
    return y


def _safe_iso(y: int, m: int, d: int) -> Optional[str]:
    try:
        return date(y, m, d).isoformat()
    except ValueError:
        return None


def _from_excel_serial(value: float) -> Optional[str]:
    if not 1 <= value <= _EXCEL_MAX_SERIAL:
        return None
    return (_EXCEL_EPOCH + timedelta(days=int(value))).isoformat()


def to_iso_date(raw: Any) -> Optional[str]:
    """Canonical YYYY-MM-DD for a date cell, or None when unrecognised."""
    if raw is None or isinstance(raw, bool):
        return None
    # pandas.Timestamp is a datetime subclass
    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and math.isnan(raw):
            return None
        return _from_excel_serial(raw)

    s = str(raw).strip()
    if not s:
        return None

    m = YMD_RX.match(s)
    if m:
        return _safe_iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = MON_D_Y_RX.match(s)
    if m:
        mon = MONTHS.get(m.group(1).upper()[:4], MONTHS.get(m.group(1).upper()[:3]))
        if mon:
            return _safe_iso(_clip_year(int(m.group(3))), mon, int(m.group(2)))
        return None

    m = MDY_RX.match(s)
    if m:
        a = int(m.group(1))
        b = int(m.group(2))
        y = _clip_year(int(m.group(3)))
        if a > 12 and b <= 12:
            d, mon = a, b
        else:
            mon, d = a, b
        return _safe_iso(y, mon, d)

    return None


# ---------------- Role resolution ----------------


def find_key(keys: Iterable[str], needles: Tuple[str, ...]) -> Optional[str]:
    """First key whose lowercased name contains any needle, in key order."""
    for key in keys:
        low = str(key).lower()
        if any(n in low for n in needles):
            return key
    return None


def non_blank(record: Mapping[str, Any], key: Optional[str]) -> Any:
    """Value under key, or None when the key is absent or the value is empty."""
    if key is None:
        return None
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value
