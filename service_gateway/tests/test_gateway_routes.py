"""
Unit tests for the Gateway routes and error mapping.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from service_gateway.app.adapters import InventoryClient, ShippingClient
from service_gateway.app.main import GENERIC_ERROR_MESSAGE, create_app
from shared.contracts import Product, ShippingRateResponse
from shared.errors import (
    BackendCallError,
    BackendUnavailableError,
    InvalidInputError,
    NotFoundError,
)

BACKEND_SECRET = "grpc://10.0.0.5:3002 StatusCode.UNAVAILABLE"


@pytest.fixture
def products():
    return [
        Product(id=1, name="Clean Code", quantity=10, price=Decimal("39.99"), photo="/img/cc.png", author="Robert C. Martin"),
        Product(id=2, name="Refactoring", quantity=4, price=Decimal("47.49"), photo="/img/rf.png", author="Martin Fowler"),
    ]


@pytest.fixture
def inventory_client(products):
    """InventoryClient with its RPCs mocked out."""
    client = InventoryClient("http://inventory:3002")
    client.search_all_products = AsyncMock(return_value=products)
    client.search_product_by_id = AsyncMock(return_value=products[0])
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
def shipping_client():
    """ShippingClient with its RPC mocked out."""
    client = ShippingClient("http://shipping:3001")
    client.get_shipping_rate = AsyncMock(return_value=ShippingRateResponse(value=Decimal("15.20")))
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
def client(inventory_client, shipping_client):
    """Create test client."""
    return TestClient(create_app(inventory_client, shipping_client), raise_server_exceptions=False)


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "gateway"


def test_list_products_passes_products_through(client, inventory_client):
    response = client.get("/products")

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == [1, 2]
    assert data[0] == {
        "id": 1,
        "name": "Clean Code",
        "quantity": 10,
        "price": 39.99,
        "photo": "/img/cc.png",
        "author": "Robert C. Martin",
    }
    inventory_client.search_all_products.assert_awaited_once()


def test_list_products_backend_failure_is_masked(client, inventory_client):
    inventory_client.search_all_products.side_effect = BackendUnavailableError("inventory", BACKEND_SECRET)

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert BACKEND_SECRET not in response.text
    assert "inventory" not in response.text


def test_shipping_quote_echoes_postal_code(client, shipping_client):
    response = client.get("/shipping/30130-000")

    assert response.status_code == 200
    assert response.json() == {"cep": "30130-000", "value": 15.2}
    shipping_client.get_shipping_rate.assert_awaited_once_with("30130-000")


def test_shipping_quote_echoes_postal_code_verbatim(client, shipping_client):
    response = client.get("/shipping/30130000")

    assert response.status_code == 200
    assert response.json()["cep"] == "30130000"


def test_shipping_quote_invalid_postal_code(client, shipping_client):
    shipping_client.get_shipping_rate.side_effect = InvalidInputError("Postal code must contain exactly 8 digits")

    response = client.get("/shipping/123")

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request"}


def test_shipping_quote_backend_failure_is_masked(client, shipping_client):
    shipping_client.get_shipping_rate.side_effect = BackendCallError(
        "shipping", "unexpected status 500", details={"body": BACKEND_SECRET}
    )

    response = client.get("/shipping/30130-000")

    assert response.status_code == 500
    assert response.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert BACKEND_SECRET not in response.text


def test_get_product(client, inventory_client):
    response = client.get("/product/1")

    assert response.status_code == 200
    assert response.json()["id"] == 1
    inventory_client.search_product_by_id.assert_awaited_once_with(1)


def test_get_product_not_found(client, inventory_client):
    inventory_client.search_product_by_id.side_effect = NotFoundError("Product 999 not found")

    response = client.get("/product/999")

    assert response.status_code == 404
    assert response.json() == {"error": "not found"}


def test_get_product_malformed_id(client, inventory_client):
    response = client.get("/product/abc")

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request"}
    inventory_client.search_product_by_id.assert_not_awaited()


def test_unexpected_exception_is_masked(client, inventory_client):
    inventory_client.search_all_products.side_effect = RuntimeError(BACKEND_SECRET)

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert BACKEND_SECRET not in response.text


def test_health_reports_backends(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "gateway"
    assert data["status"] == "ok"
    assert data["dependencies"] == {"inventory": "ok", "shipping": "ok"}


def test_health_degraded_when_backend_down(client, shipping_client):
    shipping_client.ping.return_value = False

    data = client.get("/health").json()

    assert data["status"] == "degraded"
    assert data["dependencies"]["shipping"] == "error"


def test_cors_allows_browser_origin(client):
    response = client.get("/products", headers={"Origin": "http://localhost:5000"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_metrics_counts_masked_errors(client, inventory_client):
    inventory_client.search_all_products.side_effect = BackendUnavailableError("inventory")

    client.get("/products")
    response = client.get("/metrics")

    assert 'errors_total{error_type="BACKEND_UNAVAILABLE",service="gateway"} 1.0' in response.text
