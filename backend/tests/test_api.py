"""HTTP tests for the Tourbook API."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from tourbook.integrations.mock_catalog import BOOKINGS_DATA, MockCatalog, get_catalog
from tourbook.main import app

VALID_CARD = {
    "card_name": "Vanessa Johnson",
    "card_number": "4111111111111111",
    "expiry": "12/68",
    "cvv": "123",
}


@pytest.fixture
def client():
    future = (date.today() + timedelta(days=90)).isoformat()
    bookings = [dict(item, start_date=future) for item in BOOKINGS_DATA]
    catalog = MockCatalog(bookings=bookings)
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_search_filters_and_sorts(client):
    response = client.post(
        "/api/search",
        json={"query": "a", "filters": {"price_range": {"min": 0, "max": 3000}, "sort_by": "price_asc"}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [tour["price"] for tour in body["tours"]] == [1850, 2850]
    assert len(body["search_key"]) == 64


def test_search_rejects_unknown_sort_option(client):
    response = client.post("/api/search", json={"filters": {"sort_by": "cheapest"}})
    assert response.status_code == 422


def test_default_filters(client):
    body = client.get("/api/search/defaults").json()
    assert body["sort_by"] == "popularity"
    assert body["duration"] == {"min": 1, "max": 30}


def test_featured_and_single_tour(client):
    featured = client.get("/api/tours/featured").json()
    assert [tour["id"] for tour in featured] == ["1", "3"]
    assert client.get("/api/tours/2").json()["title"] == "Patagonia Wilderness Trek"
    assert client.get("/api/tours/99").status_code == 404


def test_popular_destinations_limit(client):
    body = client.get("/api/destinations/popular", params={"limit": 2}).json()
    assert [destination["name"] for destination in body] == ["Rio de Janeiro", "Patagonia"]


def test_validate_payment_returns_first_failure(client):
    response = client.post("/api/payments/validate", json=dict(VALID_CARD, card_name="Jane99"))
    assert response.status_code == 200
    assert response.json()["reason"] == "invalid_name"
    assert client.post("/api/payments/validate", json=VALID_CARD).json() == {
        "valid": True,
        "reason": None,
        "message": None,
    }


def test_list_upcoming_bookings_with_labels(client):
    body = client.get("/api/bookings", params={"tab": "upcoming"}).json()
    assert [item["status_label"] for item in body] == ["Confirmed", "Pending Payment"]
    assert client.get("/api/bookings", params={"tab": "cancelled"}).json() == []


def test_pay_booking_flow(client):
    rejected = client.post("/api/bookings/2/pay", json=dict(VALID_CARD, cvv="12"))
    assert rejected.status_code == 400
    assert rejected.json()["detail"]["error"] == "invalid_cvv"

    paid = client.post("/api/bookings/2/pay", json=VALID_CARD)
    assert paid.status_code == 200
    assert paid.json()["booking"]["payment_status"] == "paid"
    assert paid.json()["status_label"] == "Confirmed"

    again = client.post("/api/bookings/2/pay", json=VALID_CARD)
    assert again.status_code == 409
    assert client.post("/api/bookings/99/pay", json=VALID_CARD).status_code == 404
