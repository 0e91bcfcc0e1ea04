# tests/test_normalizer.py
from datetime import datetime, timezone

from bsense_core.models import RawRecord
from parser.normalizer import normalize_record, normalize_records


def rec(**fields):
    return RawRecord(fields=dict(fields), row=2)


def test_missing_amount_column_drops_record(today):
    assert normalize_record(rec(Date="2024-01-01", Merchant="Cafe"), today=today) is None


def test_missing_date_column_drops_record(today):
    assert normalize_record(rec(Merchant="Cafe", Amount="5"), today=today) is None


def test_malformed_amount_is_zero_not_dropped(today):
    txn = normalize_record(rec(Date="2024-01-01", Merchant="Cafe", Amount="N/A"), today=today)
    assert txn is not None
    assert txn.amount == 0


def test_unparseable_or_blank_date_falls_back_to_today(today):
    txn = normalize_record(rec(Date="someday", Amount="5"), today=today)
    assert txn.date == "2024-06-01"
    txn = normalize_record(rec(Date="", Amount="5"), today=today)
    assert txn.date == "2024-06-01"


def test_date_fallback_defaults_to_utc_today():
    before = datetime.now(timezone.utc).date().isoformat()
    txn = normalize_record(rec(Date="someday", Amount="5"))
    after = datetime.now(timezone.utc).date().isoformat()
    assert txn.date in {before, after}


def test_defaults_for_merchant_and_description(today):
    txn = normalize_record(rec(Date="2024-01-01", Amount="5"), today=today)
    assert txn.merchant == "Unknown"
    assert txn.description == "Unknown"


def test_role_keywords_and_first_match(today):
    txn = normalize_record(
        rec(
            **{
                "Description": "Coffee at Blue Bottle",
                "Payee Name": "Blue Bottle",
                "Posting Date": "01/15/2024",
                "Total": "$12.00",
            }
        ),
        today=today,
    )
    # "Description" precedes "Payee Name" so it is also the merchant column
    assert txn.merchant == "Coffee at Blue Bottle"
    assert txn.description == "Coffee at Blue Bottle"
    assert txn.date == "2024-01-15"
    assert txn.amount == 12.0
    assert txn.category == "Dining"


def test_trusted_category_column_skips_rules(today):
    def boom(description, merchant):
        raise AssertionError("categorizer must not run")

    txn = normalize_record(
        rec(Date="2024-01-01", Merchant="Starbucks", Amount="5", Type="Treats"),
        categorizer=boom,
        trust_category_column=True,
        today=today,
    )
    assert txn.category == "Treats"

    txn = normalize_record(
        rec(Date="2024-01-01", Merchant="Starbucks", Amount="5"),
        categorizer=boom,
        trust_category_column=True,
        today=today,
    )
    assert txn.category == "Uncategorized"


def test_category_column_ignored_when_not_trusted(today):
    txn = normalize_record(
        rec(Date="2024-01-01", Merchant="Starbucks", Amount="5", Category="Treats"),
        today=today,
    )
    assert txn.category == "Dining"


def test_normalize_records_keeps_order_and_drops(today):
    out = normalize_records(
        [
            rec(Date="2024-01-02", Merchant="B", Amount="2"),
            rec(Merchant="dropped", Amount="9"),
            rec(Date="2024-01-01", Merchant="A", Amount="1"),
        ],
        today=today,
    )
    assert [t.merchant for t in out] == ["B", "A"]
