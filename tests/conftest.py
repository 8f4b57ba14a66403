"""
Shared fixtures: a self-hosted store on in-memory SQLite and a tmp
upload dir, plus record builders.
"""
# =========================
# Imports
# =========================
from decimal import Decimal
import pytest
from kti.db import make_engine, make_session_factory
from kti.entities import TireRecord
from kti.repository import SqlInventoryStore


# -------------------------
# Fixtures
# -------------------------
@pytest.fixture
def sql_store(tmp_path):
    engine = make_engine("sqlite://")
    store = SqlInventoryStore(make_session_factory(engine),
                              upload_dir=str(tmp_path / "uploads"),
                              lock_path=str(tmp_path / "write.lock"))
    yield store
    engine.dispose()


@pytest.fixture
def make_record():
    def _make(rid="t1", **kw):
        defaults = dict(sku="T-100", brand="Acme", model="Grip",
                        size="225/45R17", ply="4", price=Decimal("49.99"),
                        condition="New", quantity=4, notes="",
                        image_path=None)
        defaults.update(kw)
        return TireRecord(id=rid, **defaults)
    return _make
