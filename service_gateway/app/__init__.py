"""
API Gateway Service package for the Micro Bookstore.

The gateway fronts browser requests:
- Routing: each client route maps to exactly one backend RPC
- Shaping: backend replies are adapted to the client JSON format
- Error mapping: backend failures become one generic client error

Structure:
- app.main: FastAPI app, routes, and error mapping.
- app.adapters: HTTP clients for the Inventory and Shipping services.
- app.domain: Storefront operations and response shaping.
"""
