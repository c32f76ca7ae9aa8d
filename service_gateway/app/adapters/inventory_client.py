"""
Inventory service client for Gateway.
"""

from typing import List

from shared.contracts import (
    Product,
    ProductsResponse,
    SearchAllProductsRequest,
    SearchProductByIdRequest,
)
from .rpc_client import RpcClient


class InventoryClient(RpcClient):
    """Client for the Inventory service (Catalog Provider)."""

    service_name = "inventory"

    async def search_all_products(self) -> List[Product]:
        """Fetch every product, in catalog order."""
        response = await self._call("SearchAllProducts", SearchAllProductsRequest(), ProductsResponse)
        return response.products

    async def search_product_by_id(self, product_id: int) -> Product:
        """Fetch one product. Raises NotFoundError when the id is unknown."""
        return await self._call("SearchProductByID", SearchProductByIdRequest(id=product_id), Product)
