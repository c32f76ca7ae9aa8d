"""
Shipping Service package for the Micro Bookstore.

Structure:
- app.rates: the deterministic rate calculator.
- app.main: FastAPI app exposing the GetShippingRate RPC.
"""
