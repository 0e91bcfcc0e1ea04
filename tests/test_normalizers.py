# tests/test_normalizers.py
from datetime import date, datetime

import pandas as pd

from bsense_utils.normalizers import coerce_amount, find_key, non_blank, to_iso_date


def test_amount_sign_and_noise_stripped():
    assert coerce_amount("-4.50") == 4.50
    assert coerce_amount("$1,234.50") == 1234.50
    assert coerce_amount("USD 12") == 12.0
    assert coerce_amount(-7) == 7.0


def test_malformed_amounts_coerce_to_zero():
    assert coerce_amount("N/A") == 0
    assert coerce_amount("") == 0
    assert coerce_amount(None) == 0
    assert coerce_amount(float("nan")) == 0
    assert coerce_amount("--5") == 0
    assert coerce_amount(".") == 0


def test_amount_reads_leading_number_only():
    assert coerce_amount("1-2") == 1.0
    assert coerce_amount("40.00-") == 40.0
    assert coerce_amount("1.2.3") == 1.2
    assert coerce_amount("$-12.5 CR") == 12.5


def test_date_parsing_to_iso():
    assert to_iso_date("2021-05-17") == "2021-05-17"
    assert to_iso_date("2021/5/7") == "2021-05-07"
    assert to_iso_date("2021-05-17T10:30:00") == "2021-05-17"
    assert to_iso_date("May 5, 21") == "2021-05-05"
    assert to_iso_date("March 3, 2024") == "2024-03-03"
    assert to_iso_date("12/31/2020") == "2020-12-31"
    assert to_iso_date("31/12/2020") == "2020-12-31"


def test_date_objects_and_excel_serials():
    assert to_iso_date(date(2024, 1, 5)) == "2024-01-05"
    assert to_iso_date(datetime(2024, 1, 5, 13, 0)) == "2024-01-05"
    assert to_iso_date(pd.Timestamp("2024-01-05")) == "2024-01-05"
    assert to_iso_date(45296) == "2024-01-05"


def test_unparseable_dates_return_none():
    assert to_iso_date("yesterday") is None
    assert to_iso_date("") is None
    assert to_iso_date("2024-02-30") is None
    assert to_iso_date(None) is None


def test_find_key_first_match_wins():
    keys = ["Transaction Date", "Posting Date", "Amount"]
    assert find_key(keys, ("date",)) == "Transaction Date"
    assert find_key(keys, ("merchant",)) is None
    assert find_key(["DESCRIPTION", "Merchant"], ("merchant", "description")) == "DESCRIPTION"


def test_non_blank():
    rec = {"a": "  ", "b": float("nan"), "c": "x"}
    assert non_blank(rec, "a") is None
    assert non_blank(rec, "b") is None
    assert non_blank(rec, "c") == "x"
    assert non_blank(rec, None) is None
