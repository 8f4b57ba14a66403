"""
Unit tests for kti.csv_export
"""
# =========================
# Imports
# =========================
from datetime import datetime, timezone
from decimal import Decimal
from kti.csv_export import to_csv, export_filename

HEADER = ('"sku","brand","model","size","ply","price","condition",'
          '"quantity","notes","image_path"')


# -------------------------
# Tests
# -------------------------
def test_header_only_for_empty_set():
    assert to_csv([]) == HEADER


def test_every_field_quoted_and_quotes_doubled(make_record):
    rec = make_record(notes='He said "ok"', image_path=None)
    lines = to_csv([rec]).split("\n")
    assert lines[0] == HEADER
    assert lines[1] == ('"T-100","Acme","Grip","225/45R17","4","49.99",'
                        '"New","4","He said ""ok""",""')


def test_rows_keep_given_order_and_no_trailing_newline(make_record):
    recs = [make_record("a", sku="A", price=Decimal("50.00")),
            make_record("b", sku="B", quantity=0)]
    text = to_csv(recs)
    assert not text.endswith("\n")
    lines = text.split("\n")
    assert len(lines) == 3
    assert lines[1].startswith('"A"')
    assert ',"50",' in lines[1]
    assert lines[2].startswith('"B"')
    assert ',"0",' in lines[2]


def test_export_filename_uses_utc_timestamp():
    now = datetime(2026, 10, 17, 8, 30, 0, tzinfo=timezone.utc)
    assert export_filename("csv", now) == \
        "king-tire-inventory-2026-10-17T08:30:00.000Z.csv"
