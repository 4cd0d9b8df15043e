# tests/test_products_api.py
from fastapi.testclient import TestClient
from app.main import app
from app.database import _LOCKS

client = TestClient(app)

def reset():
    client.post("/reset")

def test_create_list_update_delete():
    reset()
    r = client.post("/products", json={"name": "Mug", "price": 9.99, "description": "", "image": None})
    assert r.status_code == 201
    pid = r.json()["_id"]
    assert r.json()["name"] == "Mug"

    listed = client.get("/products").json()
    assert [p["_id"] for p in listed] == [pid]

    r2 = client.put(f"/products/{pid}", json={"name": "Big mug", "description": "500ml"})
    assert r2.status_code == 200
    body = r2.json()
    # whole-record replace: price was not sent, so it is gone
    assert body["name"] == "Big mug"
    assert "price" not in body

    r3 = client.delete(f"/products/{pid}")
    assert r3.status_code == 200
    assert client.get("/products").json() == []

def test_unknown_id_and_blank_name():
    reset()
    assert client.put("/products/nope", json={"name": "x"}).status_code == 404
    assert client.delete("/products/nope").status_code == 404
    assert client.post("/products", json={"name": "   "}).status_code == 422
    assert client.post("/products", json={"price": 3}).status_code == 422

def test_list_preserves_insertion_order():
    reset()
    names = ["a", "b", "c"]
    for n in names:
        client.post("/products", json={"name": n})
    assert [p["name"] for p in client.get("/products").json()] == names

def test_delete_releases_product_lock():
    reset()
    pid = client.post("/products", json={"name": "x"}).json()["_id"]
    client.put(f"/products/{pid}", json={"name": "y"})
    assert f"product:{pid}" in _LOCKS
    client.delete(f"/products/{pid}")
    assert f"product:{pid}" not in _LOCKS
