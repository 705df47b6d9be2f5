"""
Tests API : boutiques, produits, templates, page builder, page publique /s/{numéro}.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture(params=["sql", "local"])
def client(request, tmp_path, monkeypatch):
    """Client de test avec DB SQLite temporaire ; pages en SQL ou en fichiers."""
    monkeypatch.setenv("DB_PATH", str(tmp_path / "test.db"))
    monkeypatch.setenv("PAGE_STORE", request.param)
    monkeypatch.setenv("LOCAL_PAGE_DIR", str(tmp_path / "pages"))

    from storefront.api.main import app
    from storefront.database import init_db
    init_db()

    with TestClient(app) as c:
        yield c


def _create_store(client, **extra) -> dict:
    body = {"name": "Amar Dokan", "type": "saree", "whatsapp": "09876543210", **extra}
    r = client.post("/api/stores", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def _auth(store) -> dict:
    return {"x-store-owner-token": store["ownerToken"]}


# ── Santé ─────────────────────────────────────────────────────────────────

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ── Boutiques ─────────────────────────────────────────────────────────────

class TestStores:
    def test_create_normalizes_whatsapp_and_returns_token(self, client):
        store = _create_store(client)
        assert store["whatsapp"] == "919876543210"
        assert len(store["ownerToken"]) == 64
        assert store["products"] == []
        assert store["pageConfig"] is None

    def test_create_from_template(self, client):
        store = _create_store(client, templateId="boutique")
        assert store["templateId"] == "boutique"
        assert [s["id"] for s in store["pageConfig"]["sections"]] == ["h1", "t1", "p1", "c1"]

    def test_explicit_page_config_wins(self, client):
        page = {"sections": [{"id": "x1", "type": "text", "props": {"content": "Hi"}}]}
        store = _create_store(client, templateId="classic", pageConfig=page)
        assert store["pageConfig"] == page

    def test_create_rejects_bad_input(self, client):
        base = {"name": "A", "type": "saree", "whatsapp": "9876543210"}
        assert client.post("/api/stores", json={**base, "type": "cars"}).status_code == 422
        assert client.post("/api/stores", json={**base, "templateId": "nope"}).status_code == 422
        bad_page = {"sections": [{"id": "x", "type": "carousel"}]}
        assert client.post("/api/stores", json={**base, "pageConfig": bad_page}).status_code == 422
        dup_page = {"sections": [{"id": "x", "type": "hero"}, {"id": "x", "type": "cta"}]}
        assert client.post("/api/stores", json={**base, "pageConfig": dup_page}).status_code == 422

    def test_duplicate_whatsapp_conflict(self, client):
        _create_store(client)
        r = client.post("/api/stores", json={"name": "B", "type": "food", "whatsapp": "+91 98765 43210"})
        assert r.status_code == 409

    def test_get_by_id_and_whatsapp(self, client):
        store = _create_store(client)
        r = client.get(f"/api/stores/{store['id']}")
        assert r.status_code == 200
        assert "ownerToken" not in r.json()
        r = client.get("/api/stores/by-whatsapp/9876543210")
        assert r.status_code == 200
        assert r.json()["id"] == store["id"]

    def test_get_missing(self, client):
        assert client.get("/api/stores/nope").status_code == 404
        assert client.get("/api/stores/by-whatsapp/1111111111").status_code == 404

    def test_patch_requires_owner_token(self, client):
        store = _create_store(client)
        url = f"/api/stores/{store['id']}"
        assert client.patch(url, json={"name": "X"}).status_code == 404
        assert client.patch(url, json={"name": "X"}, headers={"x-store-owner-token": "wrong"}).status_code == 404
        r = client.patch(url, json={"name": "X"}, headers=_auth(store))
        assert r.status_code == 200
        assert r.json()["name"] == "X"

    def test_patch_page_config_replaces_whole_document(self, client):
        store = _create_store(client, templateId="classic")
        page = {"sections": [{"id": "b1", "type": "banner", "props": {"image": "https://img/b.jpg"}}]}
        r = client.patch(f"/api/stores/{store['id']}", json={"pageConfig": page}, headers=_auth(store))
        assert r.status_code == 200
        assert r.json()["pageConfig"] == page
        assert client.get(f"/api/stores/{store['id']}").json()["pageConfig"] == page

    def test_patch_keeps_unset_fields(self, client):
        store = _create_store(client, templateId="minimal")
        r = client.patch(f"/api/stores/{store['id']}", json={"type": "food"}, headers=_auth(store))
        body = r.json()
        assert body["type"] == "food"
        assert body["name"] == "Amar Dokan"
        assert body["templateId"] == "minimal"
        assert len(body["pageConfig"]["sections"]) == 3


# ── Produits ──────────────────────────────────────────────────────────────

class TestProducts:
    def test_add_list_delete(self, client):
        store = _create_store(client)
        url = f"/api/stores/{store['id']}/products"
        r = client.post(url, json={"name": "Silk Saree", "price": 1250}, headers=_auth(store))
        assert r.status_code == 201
        product = r.json()
        assert product["image"].startswith("https://")

        listed = client.get(f"/api/stores/{store['id']}").json()["products"]
        assert [p["name"] for p in listed] == ["Silk Saree"]

        assert client.delete(f"{url}/{product['id']}", headers=_auth(store)).status_code == 204
        assert client.get(f"/api/stores/{store['id']}").json()["products"] == []
        assert client.delete(f"{url}/{product['id']}", headers=_auth(store)).status_code == 404

    def test_add_requires_token(self, client):
        store = _create_store(client)
        r = client.post(f"/api/stores/{store['id']}/products", json={"name": "A", "price": 10})
        assert r.status_code == 403
        assert client.post("/api/stores/nope/products", json={"name": "A", "price": 10}).status_code == 404

    def test_invalid_price(self, client):
        store = _create_store(client)
        r = client.post(f"/api/stores/{store['id']}/products", json={"name": "A", "price": 0}, headers=_auth(store))
        assert r.status_code == 422

    def test_sorted_by_sort_order(self, client):
        store = _create_store(client)
        url = f"/api/stores/{store['id']}/products"
        client.post(url, json={"name": "Second", "price": 10, "sortOrder": 2}, headers=_auth(store))
        client.post(url, json={"name": "First", "price": 10, "sortOrder": 1}, headers=_auth(store))
        listed = client.get(f"/api/stores/{store['id']}").json()["products"]
        assert [p["name"] for p in listed] == ["First", "Second"]


# ── Templates + page builder ──────────────────────────────────────────────

class TestPageBuilder:
    def test_templates(self, client):
        r = client.get("/api/templates")
        assert [t["id"] for t in r.json()] == ["minimal", "boutique", "food", "classic"]
        r = client.get("/api/templates/classic")
        assert r.json()["pageConfig"]["sections"][1]["type"] == "features"
        assert client.get("/api/templates/nope").status_code == 404

    def test_catalog(self, client):
        entries = client.get("/api/page-builder/catalog").json()
        assert [e["type"] for e in entries] == ["hero", "products_grid", "cta", "text", "banner", "features"]

    def test_validate(self, client):
        ok = client.post("/api/page-builder/validate", json={"sections": [{"id": "h", "type": "hero"}]}).json()
        assert ok == {"valid": True, "sections": 1}
        bad = client.post("/api/page-builder/validate", json={"sections": [{"id": "h", "type": "slider"}]}).json()
        assert bad["valid"] is False
        assert bad["errors"]
        dup = client.post("/api/page-builder/validate",
                          json={"sections": [{"id": "h", "type": "hero"}, {"id": "h", "type": "cta"}]}).json()
        assert dup["valid"] is False

    def test_render_preview(self, client):
        r = client.post("/api/page-builder/render", json={
            "pageConfig": {"sections": [{"id": "p", "type": "products_grid"}]},
            "storeName": "Amar Dokan",
            "whatsapp": "9876543210",
            "products": [{"id": 1, "name": "Silk Saree", "price": 1250}],
        })
        assert r.status_code == 200
        assert "text/html" in r.headers["content-type"]
        assert "₹1250" in r.text
        assert "Chat with Seller" in r.text


# ── Page publique ─────────────────────────────────────────────────────────

class TestPublicPage:
    def test_store_without_page_renders_blank_document(self, client):
        _create_store(client)
        r = client.get("/s/9876543210")
        assert r.status_code == 200
        assert "Welcome" in r.text
        assert "No products yet. Check back soon!" in r.text

    def test_store_page_with_products(self, client):
        store = _create_store(client, templateId="minimal")
        client.post(f"/api/stores/{store['id']}/products",
                    json={"name": "Silk Saree", "price": 1250}, headers=_auth(store))
        r = client.get("/s/919876543210")
        assert "Welcome to our store" in r.text
        assert "Silk Saree" in r.text
        assert "I%20want%20to%20order%3A%20Silk%20Saree" in r.text

    def test_unknown_store(self, client):
        assert client.get("/s/1111111111").status_code == 404
