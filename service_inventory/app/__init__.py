"""
Inventory Service package for the Micro Bookstore.

Owns the product catalog:
- app.catalog: the read-only, load-once product set.
- app.main: FastAPI app exposing the catalog RPCs.
"""
