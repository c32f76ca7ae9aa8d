"""
Read-only product catalog for the Inventory service.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from pydantic import TypeAdapter

from shared.contracts import Product
from shared.errors import NotFoundError
from shared.logging import get_logger

DEFAULT_CATALOG_FILE = Path(__file__).parent / "data" / "products.json"

_product_list = TypeAdapter(List[Product])


class Catalog:
    """Immutable set of products loaded once at startup.

    Products keep the order they were loaded in. There is no way to add,
    remove or update a product after construction.
    """

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id {product.id} in catalog")
            self._by_id[product.id] = product

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Catalog":
        """Load a catalog from a JSON array of product objects."""
        path = Path(path)
        with path.open(encoding="utf-8") as handle:
            raw = json.load(handle, parse_float=Decimal)

        catalog = cls(_product_list.validate_python(raw))
        get_logger("inventory.catalog").info("Catalog loaded", path=str(path), products=len(catalog))
        return catalog

    @classmethod
    def load_default(cls) -> "Catalog":
        """Load the bundled catalog dataset."""
        return cls.from_file(DEFAULT_CATALOG_FILE)

    def list_all(self) -> Tuple[Product, ...]:
        """Return every product in load order."""
        return self._products

    def find_by_id(self, product_id: int) -> Product:
        """Return the product with the given id or raise NotFoundError."""
        try:
            return self._by_id[product_id]
        except KeyError:
            raise NotFoundError(
                f"Product {product_id} not found",
                details={"product_id": product_id}
            ) from None

    def __len__(self) -> int:
        return len(self._products)
