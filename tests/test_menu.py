from app.models.sql_models import MenuItem
from app.services.seed import DEFAULT_MENU, seed_default_menu


def _create(client, **overrides):
    payload = {
        "name": "Plov",
        "price": 12.5,
        "description": "Ənənəvi plov",
        "category": "Əsas yeməklər",
        "imageUrl": "https://example.com/plov.jpg",
    }
    payload.update(overrides)
    return client.post("/api/menu", json=payload)


def test_create_menu_item_assigns_id(client):
    resp = _create(client)
    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Plov"
    assert body["price"] == 12.5
    assert body["imageUrl"] == "https://example.com/plov.jpg"


def test_create_accepts_legacy_image_key(client):
    resp = client.post("/api/menu", json={"name": "Çay", "price": 2, "image": "https://example.com/tea.jpg"})
    assert resp.status_code == 201
    assert resp.json()["imageUrl"] == "https://example.com/tea.jpg"


def test_create_requires_name_and_price(client):
    resp = client.post("/api/menu", json={"description": "nameless"})
    assert resp.status_code == 422
    assert resp.json()["error"] == "Invalid request body"
    fields = {d["field"] for d in resp.json()["details"]}
    assert {"name", "price"} <= fields


def test_list_menu_groups_by_category(client):
    _create(client, name="Paxlava", category="Desertlər")
    _create(client, name="Dolma", category="Əsas yeməklər")
    _create(client, name="Şəkərbura", category="Desertlər")

    resp = client.get("/api/menu")
    assert resp.status_code == 200
    assert [i["name"] for i in resp.json()] == ["Paxlava", "Şəkərbura", "Dolma"]


def test_update_menu_item_partial(client):
    item_id = _create(client).json()["id"]

    resp = client.put(f"/api/menu/{item_id}", json={"price": 14, "description": None})
    assert resp.status_code == 200
    body = resp.json()
    assert body["price"] == 14
    assert body["description"] is None
    assert body["name"] == "Plov"


def test_update_missing_menu_item_returns_404(client):
    resp = client.put("/api/menu/999", json={"name": "Ghost", "price": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Menu item not found"}


def test_delete_menu_item_returns_deleted_row(client):
    item_id = _create(client).json()["id"]

    resp = client.delete(f"/api/menu/{item_id}")
    assert resp.status_code == 200
    assert resp.json()["id"] == item_id
    assert client.get(f"/api/menu/{item_id}").status_code == 404


def test_delete_missing_menu_item_returns_404(client):
    resp = client.delete("/api/menu/12345")
    assert resp.status_code == 404


def test_seed_default_menu_only_when_empty(db):
    assert seed_default_menu(db) == len(DEFAULT_MENU)
    assert db.query(MenuItem).count() == len(DEFAULT_MENU)

    assert seed_default_menu(db) == 0
    assert db.query(MenuItem).count() == len(DEFAULT_MENU)


def test_create_rejects_overflowing_price(client):
    resp = client.post(
        "/api/menu",
        content=b'{"name": "X", "price": 1e999}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert client.get("/api/menu").json() == []


def test_create_rejects_nan_price(client):
    assert client.post("/api/menu", json={"name": "X", "price": "NaN"}).status_code == 422


def test_update_rejects_infinite_price(client):
    item_id = _create(client).json()["id"]
    resp = client.put(f"/api/menu/{item_id}", json={"price": "Infinity"})
    assert resp.status_code == 422
    assert client.get(f"/api/menu/{item_id}").json()["price"] == 12.5
