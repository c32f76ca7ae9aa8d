"""
Tests for the Shipping service RPC endpoint.
"""

import pytest
from fastapi.testclient import TestClient

from service_shipping.app.main import create_app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(create_app())


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "shipping"


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_shipping_rate(client):
    response = client.post("/rpc/GetShippingRate", json={"zipcode": "30130-000"})
    assert response.status_code == 200
    assert response.json() == {"value": 15.2}


def test_get_shipping_rate_does_not_echo_zipcode(client):
    response = client.post("/rpc/GetShippingRate", json={"zipcode": "30130-000"})
    assert "zipcode" not in response.json()
    assert "cep" not in response.json()


def test_get_shipping_rate_is_stable(client):
    values = {
        client.post("/rpc/GetShippingRate", json={"zipcode": "01310-200"}).json()["value"]
        for _ in range(3)
    }
    assert len(values) == 1


def test_get_shipping_rate_rejects_malformed_zipcode(client):
    response = client.post("/rpc/GetShippingRate", json={"zipcode": "12-34"})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "INVALID_INPUT"
    assert data["details"] == {"zipcode": "12-34"}


def test_get_shipping_rate_requires_zipcode(client):
    response = client.post("/rpc/GetShippingRate", json={})
    assert response.status_code == 422
