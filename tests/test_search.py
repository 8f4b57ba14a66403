"""
Unit tests for the search filter and header totals in kti.inventory.
"""
# =========================
# Imports
# =========================
from kti.inventory import filter_records, total_items


# -------------------------
# Tests: Search
# -------------------------
def test_search_is_case_insensitive(make_record):
    recs = [make_record("a", brand="Acme Tires"),
            make_record("b", brand="Bolt", sku="B-1", model="X")]
    assert [r.id for r in filter_records(recs, "acme")] == ["a"]


def test_search_matches_any_of_brand_model_size_sku(make_record):
    recs = [make_record("a", brand="Zed", model="Trail", size="1", sku="1"),
            make_record("b", brand="Zed", model="x", size="265/70R17",
                        sku="2"),
            make_record("c", brand="Zed", model="x", size="3", sku="TR-9"),
            make_record("d", brand="Zed", model="x", size="4", sku="4",
                        notes="trail")]
    assert [r.id for r in filter_records(recs, "tr")] == ["a", "c"]
    assert [r.id for r in filter_records(recs, "70r")] == ["b"]


def test_blank_query_returns_everything_in_order(make_record):
    recs = [make_record(str(i)) for i in range(5)]
    assert filter_records(recs, "") == recs
    assert filter_records(recs, "   ") == recs


def test_filter_then_clear_restores_original(make_record):
    recs = [make_record("a", brand="Acme"), make_record("b", brand="Bolt"),
            make_record("c", brand="Acme")]
    filtered = filter_records(recs, "acme")
    assert [r.id for r in filtered] == ["a", "c"]
    assert filter_records(recs, "acme") == filtered
    assert filter_records(recs, "") == recs


# -------------------------
# Tests: Totals
# -------------------------
def test_total_items_sums_quantities(make_record):
    recs = [make_record("a", quantity=3), make_record("b", quantity=5)]
    assert total_items(recs) == 8
    assert len(recs) == 2
