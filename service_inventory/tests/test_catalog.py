"""
Tests for the Inventory service catalog.
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from service_inventory.app.catalog import Catalog
from shared.contracts import Product
from shared.errors import NotFoundError


def _product(product_id: int, name: str = "Book") -> Product:
    return Product(
        id=product_id,
        name=f"{name} {product_id}",
        quantity=5,
        price=Decimal("10.00") + product_id,
        photo=f"/img/{product_id}.png",
        author="Author"
    )


@pytest.fixture
def catalog():
    """Catalog seeded with three products."""
    return Catalog([_product(1), _product(2), _product(3)])


def test_list_all_returns_every_product_in_load_order(catalog):
    products = catalog.list_all()
    assert len(products) == 3
    assert [p.id for p in products] == [1, 2, 3]


def test_list_all_has_no_duplicate_ids(catalog):
    ids = [p.id for p in catalog.list_all()]
    assert len(ids) == len(set(ids))


def test_empty_catalog_lists_nothing():
    catalog = Catalog([])
    assert catalog.list_all() == ()
    assert len(catalog) == 0


@pytest.mark.parametrize("product_id", [1, 2, 3])
def test_find_by_id_returns_matching_product(catalog, product_id):
    product = catalog.find_by_id(product_id)
    assert product.id == product_id


def test_find_by_id_missing_raises_not_found(catalog):
    with pytest.raises(NotFoundError) as exc_info:
        catalog.find_by_id(999)
    assert exc_info.value.code == "NOT_FOUND"
    assert exc_info.value.details == {"product_id": 999}


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate product id 2"):
        Catalog([_product(1), _product(2), _product(2, name="Other")])


def test_products_are_immutable(catalog):
    product = catalog.find_by_id(1)
    with pytest.raises(ValidationError):
        product.quantity = 0
    assert catalog.find_by_id(1).quantity == 5


def test_from_file_keeps_decimal_prices(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps([
        {"id": 7, "name": "Refactoring", "quantity": 3, "price": 29.90, "photo": "/img/r.png", "author": "Fowler"}
    ]))

    catalog = Catalog.from_file(path)

    product = catalog.find_by_id(7)
    assert product.price == Decimal("29.9")
    assert product.author == "Fowler"


def test_load_default_bundled_dataset():
    catalog = Catalog.load_default()
    products = catalog.list_all()
    assert len(products) > 0
    assert all(p.price >= 0 for p in products)
    assert len({p.id for p in products}) == len(products)
