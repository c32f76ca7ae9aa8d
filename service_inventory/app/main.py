"""
Inventory service for the Micro Bookstore.

Serves the read-only product catalog to the gateway over RPC-style endpoints.
"""

from typing import Optional

from shared.base_service import BaseService
from shared.contracts import (
    Product,
    ProductsResponse,
    SearchAllProductsRequest,
    SearchProductByIdRequest,
)
from shared.errors import NotFoundError
from .catalog import Catalog

INVENTORY_PORT = 3002


class InventoryService(BaseService):
    """Inventory service implementation."""

    def __init__(self, catalog: Optional[Catalog] = None):
        super().__init__("inventory", INVENTORY_PORT)
        if catalog is None:
            if self.config.catalog_file:
                catalog = Catalog.from_file(self.config.catalog_file)
            else:
                catalog = Catalog.load_default()
        self.catalog = catalog

        self._setup_inventory_routes()

    def _setup_inventory_routes(self):
        """Set up inventory-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "inventory",
                "message": "Micro Bookstore - Inventory Service",
                "version": "1.0.0",
                "products": len(self.catalog)
            }

        @self.app.post("/rpc/SearchAllProducts", response_model=ProductsResponse)
        async def search_all_products(request: Optional[SearchAllProductsRequest] = None):
            """Return every product in the catalog."""
            products = self.catalog.list_all()
            self.metrics.increment_counter("catalog_lookups_total", operation="search_all", outcome="ok")
            return ProductsResponse(products=list(products))

        @self.app.post("/rpc/SearchProductByID", response_model=Product)
        async def search_product_by_id(request: SearchProductByIdRequest):
            """Return one product by id."""
            try:
                product = self.catalog.find_by_id(request.id)
            except NotFoundError:
                self.metrics.increment_counter("catalog_lookups_total", operation="search_by_id", outcome="not_found")
                raise
            self.metrics.increment_counter("catalog_lookups_total", operation="search_by_id", outcome="ok")
            return product


def create_app(catalog: Optional[Catalog] = None):
    """Create FastAPI application."""
    service = InventoryService(catalog)
    return service.app


def main():
    service = InventoryService()
    service.run()


if __name__ == "__main__":
    main()
