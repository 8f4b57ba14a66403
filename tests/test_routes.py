"""
Tests for the Flask routes through the test client, backed by the
self-hosted store on in-memory SQLite.
"""
# =========================
# Imports
# =========================
import io
import pytest
from kti.app import create_app

TOKEN = "test-token"


# -------------------------
# Fixtures
# -------------------------
@pytest.fixture
def app(sql_store):
    app = create_app(store=sql_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    c = app.test_client()
    with c.session_transaction() as sess:
        sess["_csrf_token"] = TOKEN
    return c


@pytest.fixture
def manager(app):
    return app.extensions["kti.manager"]


def post_tire(client, url="/tires/new", **fields):
    data = {"_csrf_token": TOKEN, "sku": "", "brand": "", "model": "",
            "size": "", "ply": "", "price": "", "condition": "New",
            "quantity": "1", "notes": ""}
    data.update(fields)
    return client.post(url, data=data, content_type="multipart/form-data")


# -------------------------
# Tests: Pages
# -------------------------
def test_index_empty(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"No tires found." in resp.data
    assert b'id="total-items">0<' in resp.data


def test_new_form_defaults(client):
    resp = client.get("/tires/new")
    assert resp.status_code == 200
    assert b"Add Tire" in resp.data
    assert b'name="quantity" value="1"' in resp.data


def test_create_and_list(client, manager):
    resp = post_tire(client, sku="T-100", brand="Acme", price="49.99",
                     quantity="4")
    assert resp.status_code == 302
    resp = client.get("/")
    assert b"Acme" in resp.data
    assert b'id="total-items">4<' in resp.data
    assert b'id="sku-count">1<' in resp.data
    assert b"Tire added" in resp.data


def test_create_with_image_and_serve_it(client, manager):
    post_tire(client, sku="IMG", image=(io.BytesIO(b"imgbytes"), "t.png"))
    rec = manager.records[0]
    assert rec.image_path.endswith(".png")
    resp = client.get(f"/images/{rec.image_path}")
    assert resp.status_code == 200
    assert resp.data == b"imgbytes"


def test_post_without_csrf_is_rejected(client):
    resp = client.post("/tires/new", data={"sku": "x"})
    assert resp.status_code == 400


def test_failed_save_rerenders_populated_form(client):
    resp = post_tire(client, sku="NEG", price="-5")
    assert resp.status_code == 422
    assert b'value="NEG"' in resp.data
    assert b"price must not be negative" in resp.data


def test_edit(client, manager):
    post_tire(client, sku="T-1", brand="Acme", quantity="2")
    rid = manager.records[0].id
    resp = client.get(f"/tires/{rid}/edit")
    assert b"Edit Tire" in resp.data
    assert b'value="Acme"' in resp.data
    resp = post_tire(client, url=f"/tires/{rid}/edit", sku="T-1",
                     brand="Bolt", quantity="2")
    assert resp.status_code == 302
    client.get("/")
    assert manager.find(rid).brand == "Bolt"
    assert manager.sku_count == 1


def test_edit_unknown_is_404(client):
    assert client.get("/tires/does-not-exist/edit").status_code == 404


# -------------------------
# Tests: Search
# -------------------------
def test_live_search_filters_cache(client):
    post_tire(client, sku="A-1", brand="Acme Tires")
    post_tire(client, sku="B-1", brand="Bolt")
    client.get("/")
    resp = client.get("/tires/grid?q=acme")
    assert b"Acme Tires" in resp.data
    assert b"Bolt" not in resp.data
    resp = client.get("/tires/grid?q=")
    assert b"Acme Tires" in resp.data and b"Bolt" in resp.data


# -------------------------
# Tests: Delete
# -------------------------
def test_delete_flow(client, manager):
    post_tire(client, sku="A", quantity="3")
    post_tire(client, sku="B", quantity="5")
    client.get("/")
    victim = next(r for r in manager.records if r.sku == "A")
    resp = client.get(f"/tires/{victim.id}/delete")
    assert b"cannot be undone" in resp.data
    resp = client.post(f"/tires/{victim.id}/delete",
                       data={"_csrf_token": TOKEN, "confirm": "yes"})
    assert resp.status_code == 302
    assert [r.sku for r in manager.records] == ["B"]
    assert manager.total_items == 5


def test_delete_requires_confirmation(client, manager):
    post_tire(client, sku="A")
    rid = manager.records[0].id
    client.post(f"/tires/{rid}/delete", data={"_csrf_token": TOKEN})
    assert manager.sku_count == 1


# -------------------------
# Tests: Export
# -------------------------
def test_export_csv_download(client):
    post_tire(client, sku="A", notes='He said "ok"')
    client.get("/")
    resp = client.get("/export.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    disp = resp.headers["Content-Disposition"]
    assert 'filename="king-tire-inventory-' in disp
    lines = resp.get_data(as_text=True).split("\n")
    assert lines[0].startswith('"sku","brand"')
    assert '"He said ""ok"""' in lines[1]


def test_export_xlsx_download(client):
    resp = client.get("/export.xlsx")
    assert resp.status_code == 200
    assert resp.data[:2] == b"PK"


def test_favicon(client):
    assert client.get("/favicon.ico").status_code == 204


# -------------------------
# Tests: Rejected input keeps the form
# -------------------------
def test_huge_quantity_rerenders_form(client, manager):
    resp = post_tire(client, sku="BIG", quantity="1e30")
    assert resp.status_code == 422
    assert b'value="BIG"' in resp.data
    assert b"quantity is too large" in resp.data
    assert manager.sku_count == 0


def test_oversized_image_rerenders_form(client, manager, sql_store):
    manager.max_image_bytes = 100
    resp = post_tire(client, sku="KEEPME",
                     image=(io.BytesIO(b"x" * 1000), "big.png"))
    assert resp.status_code == 422
    assert b'value="KEEPME"' in resp.data
    assert b"file is too large" in resp.data
    assert list(sql_store.upload_dir.iterdir()) == []
    assert manager.sku_count == 0
