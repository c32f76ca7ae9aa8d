"""
API Gateway service for the Micro Bookstore.

The only service the browser talks to. Every route performs exactly one
backend call, reshapes the reply and translates failures. Backend error
detail is logged here and never returned to the client.
"""

import asyncio
from typing import Dict, List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.base_service import BaseService
from shared.contracts import ClientError, Product, ShippingQuoteView
from shared.errors import BookstoreException, InvalidInputError, NotFoundError
from .adapters import InventoryClient, ShippingClient
from .domain import StorefrontService

GATEWAY_PORT = 3000
GENERIC_ERROR_MESSAGE = "something failed :("


def client_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ClientError(error=message).model_dump())


class GatewayService(BaseService):
    """API Gateway service implementation."""

    def __init__(self, inventory_client: Optional[InventoryClient] = None,
                 shipping_client: Optional[ShippingClient] = None):
        super().__init__("gateway", GATEWAY_PORT)
        timeout = self.config.backend_timeout_seconds
        self.inventory_client = inventory_client or InventoryClient(
            self.config.inventory_service_url, timeout=timeout, metrics=self.metrics
        )
        self.shipping_client = shipping_client or ShippingClient(
            self.config.shipping_service_url, timeout=timeout, metrics=self.metrics
        )
        self.storefront = StorefrontService(self.inventory_client, self.shipping_client)

        self._setup_gateway_routes()
        self._setup_error_mapping()

        # Expose service instance via app state for introspection/testing
        self.app.state.gateway_service = self

    def _setup_gateway_routes(self):
        """Set up client-facing routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "gateway",
                "message": "Micro Bookstore - API Gateway",
                "version": "1.0.0"
            }

        @self.app.get(
            "/products",
            response_model=List[Product],
            responses={500: {"model": ClientError}},
        )
        async def list_products():
            """Return the store's product list."""
            return await self.storefront.list_products()

        @self.app.get(
            "/shipping/{postal_code}",
            response_model=ShippingQuoteView,
            responses={400: {"model": ClientError}, 500: {"model": ClientError}},
        )
        async def get_shipping_quote(postal_code: str):
            """Quote the shipping cost for a postal code."""
            return await self.storefront.get_shipping_quote(postal_code)

        @self.app.get(
            "/product/{product_id}",
            response_model=Product,
            responses={400: {"model": ClientError}, 404: {"model": ClientError}, 500: {"model": ClientError}},
        )
        async def get_product(product_id: int):
            """Return one product by id."""
            return await self.storefront.get_product(product_id)

    def _setup_error_mapping(self):
        """Replace the base error handlers with the client-facing error policy."""

        @self.app.exception_handler(NotFoundError)
        async def not_found_handler(request: Request, exc: NotFoundError):
            self.logger.info("Resource not found", path=request.url.path, details=exc.details)
            return client_error(404, "not found")

        @self.app.exception_handler(InvalidInputError)
        async def invalid_input_handler(request: Request, exc: InvalidInputError):
            self.logger.info("Invalid input", path=request.url.path, message=exc.message, details=exc.details)
            return client_error(400, "invalid request")

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            self.logger.info("Malformed request", path=request.url.path, errors=str(exc.errors()))
            return client_error(400, "invalid request")

        @self.app.exception_handler(BookstoreException)
        async def backend_failure_handler(request: Request, exc: BookstoreException):
            self.logger.error(
                "Backend call failed",
                path=request.url.path,
                code=exc.code,
                message=exc.message,
                details=exc.details,
                exc_info=exc
            )
            self.metrics.record_error(exc.code)
            return client_error(500, GENERIC_ERROR_MESSAGE)

        @self.app.exception_handler(Exception)
        async def unexpected_failure_handler(request: Request, exc: Exception):
            self.logger.error("Unhandled exception", path=request.url.path, error=repr(exc), exc_info=exc)
            self.metrics.record_error("INTERNAL_ERROR")
            return client_error(500, GENERIC_ERROR_MESSAGE)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check that both backends answer their health endpoint."""
        inventory_ok, shipping_ok = await asyncio.gather(
            self.inventory_client.ping(),
            self.shipping_client.ping(),
        )
        return {
            "inventory": "ok" if inventory_ok else "error",
            "shipping": "ok" if shipping_ok else "error",
        }


def create_app(inventory_client: Optional[InventoryClient] = None,
               shipping_client: Optional[ShippingClient] = None):
    """Create FastAPI application."""
    service = GatewayService(inventory_client, shipping_client)
    return service.app


def main():
    service = GatewayService()
    service.run()


if __name__ == "__main__":
    main()
