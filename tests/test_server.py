from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import server.app as app_module
from orderboard.core import OrderRegistry


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(app_module, "registry", OrderRegistry())
    return TestClient(app_module.app)


def test_create_list_and_cancel(client):
    res = client.post("/api/orders", json={"user_id": "userIdA", "quantity": 10, "price": "301", "order_type": "BUY"})
    assert res.status_code == 201
    oid = res.json()["id"]

    orders = client.get("/api/orders").json()
    assert orders == [{"id": oid, "user_id": "userIdA", "quantity": 10.0, "price": "301", "order_type": "BUY"}]

    assert client.delete(f"/api/orders/{oid}").status_code == 204
    assert client.delete(f"/api/orders/{oid}").status_code == 204
    assert client.get("/api/orders").json() == []


def test_invalid_order_is_rejected(client):
    res = client.post("/api/orders", json={"user_id": "", "quantity": 10, "price": "301", "order_type": "BUY"})
    assert res.status_code == 400
    assert "User id" in res.json()["detail"]
    res = client.post("/api/orders", json={"user_id": "userIdA", "quantity": 10, "price": 0, "order_type": "BUY"})
    assert res.status_code == 400
    assert client.get("/api/orders").json() == []


def test_summaries_and_depth(client):
    for qty, px, side in [(10, "301", "BUY"), (12, "301", "BUY"), (100, "120", "BUY"), (5, "310.5", "SELL")]:
        client.post("/api/orders", json={"user_id": "u", "quantity": qty, "price": px, "order_type": side})

    summaries = client.get("/api/summaries").json()
    assert summaries == [
        {"quantity": 22.0, "price": "301", "order_type": "BUY"},
        {"quantity": 100.0, "price": "120", "order_type": "BUY"},
        {"quantity": 5.0, "price": "310.5", "order_type": "SELL"},
    ]

    depth = client.get("/api/depth", params={"levels": 1}).json()
    assert depth == {"bids": [["301", 22.0]], "asks": [["310.5", 5.0]]}
    assert client.get("/api/depth", params={"levels": 0}).status_code == 422


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "Live Order Board" in res.text
