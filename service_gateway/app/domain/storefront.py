"""
Storefront routing and response shaping for the Gateway.

Each operation makes exactly one backend call. Backends answer with minimal
payloads; this is the only place where they are adapted to the shapes the
browser expects.
"""

from typing import List

from shared.contracts import Product, ShippingQuoteView
from ..adapters import InventoryClient, ShippingClient


class StorefrontService:
    """Maps client operations onto backend calls."""

    def __init__(self, inventory_client: InventoryClient, shipping_client: ShippingClient) -> None:
        self.inventory_client = inventory_client
        self.shipping_client = shipping_client

    async def list_products(self) -> List[Product]:
        return await self.inventory_client.search_all_products()

    async def get_product(self, product_id: int) -> Product:
        return await self.inventory_client.search_product_by_id(product_id)

    async def get_shipping_quote(self, postal_code: str) -> ShippingQuoteView:
        """Quote shipping and echo the requested postal code verbatim."""
        rate = await self.shipping_client.get_shipping_rate(postal_code)
        return ShippingQuoteView(cep=postal_code, value=rate.value)
