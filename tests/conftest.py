# tests/conftest.py
from datetime import date

import pandas as pd
import pytest

from bsense_core.models import Transaction


SAMPLE_CSV = (
    "Date,Merchant,Amount\n"
    "2024-01-05,Starbucks,-4.50\n"
    "2024-01-20,Shell Gas,40.00\n"
)


@pytest.fixture
def sample_csv_text():
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_file(tmp_path):
    p = tmp_path / "statement.csv"
    p.write_text(SAMPLE_CSV, encoding="utf-8")
    return p


@pytest.fixture
def today():
    return date(2024, 6, 1)


@pytest.fixture
def statement_xlsx(tmp_path):
    """First sheet holds the statement; a second sheet must be ignored."""
    p = tmp_path / "statement.xlsx"
    first = pd.DataFrame(
        {
            "Posted Date": [
                pd.Timestamp("2024-02-03"),
                pd.Timestamp("2024-02-10"),
                pd.Timestamp("2024-02-11"),
            ],
            "Merchant Name": ["Blue Bottle", "Trader Joe's", "Mystery Row"],
            "Amount": [-6.25, 54.10, None],
            "Category": ["Coffee Shops", None, "Misc"],
        }
    )
    second = pd.DataFrame(
        {"Date": ["2024-03-01"], "Merchant": ["Other Sheet"], "Amount": [99.0]}
    )
    with pd.ExcelWriter(p, engine="openpyxl") as xw:
        first.to_excel(xw, sheet_name="Statement", index=False)
        second.to_excel(xw, sheet_name="Notes", index=False)
    return p


@pytest.fixture
def make_txn():
    def _make(
        date="2024-01-01",
        merchant="Test Merchant",
        amount=10.0,
        category="Other",
        description=None,
    ):
        return Transaction(
            date=date,
            merchant=merchant,
            amount=amount,
            category=category,
            description=description or merchant,
        )

    return _make
