"""
Shipping service client for Gateway.
"""

from shared.contracts import ShippingRateRequest, ShippingRateResponse
from .rpc_client import RpcClient


class ShippingClient(RpcClient):
    """Client for the Shipping service (Rate Calculator)."""

    service_name = "shipping"

    async def get_shipping_rate(self, zipcode: str) -> ShippingRateResponse:
        """Quote a postal code. Raises InvalidInputError for malformed codes."""
        return await self._call("GetShippingRate", ShippingRateRequest(zipcode=zipcode), ShippingRateResponse)
