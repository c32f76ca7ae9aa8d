"""
Domain utilities for the Gateway Service.

Holds the storefront operations: which backend each client route calls and
how the backend reply is reshaped for the browser.
"""

from .storefront import StorefrontService

__all__ = [
    "StorefrontService",
]
