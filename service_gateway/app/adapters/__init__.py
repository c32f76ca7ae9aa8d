"""
Adapters package for the Gateway Service.

Contains HTTP client wrappers for the backend services (Inventory,
Shipping). These adapters encapsulate:

- Base URLs, RPC paths and typed request/response shapes
- A timeout on every call
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .rpc_client import RpcClient
from .inventory_client import InventoryClient
from .shipping_client import ShippingClient

__all__ = [
    "RpcClient",
    "InventoryClient",
    "ShippingClient",
]
