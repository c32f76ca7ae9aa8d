"""
Shipping service for the Micro Bookstore.
"""

from typing import Optional

from shared.base_service import BaseService
from shared.contracts import ShippingRateRequest, ShippingRateResponse
from shared.errors import InvalidInputError
from .rates import RateCalculator

SHIPPING_PORT = 3001


class ShippingService(BaseService):
    """Shipping service implementation."""

    def __init__(self, calculator: Optional[RateCalculator] = None):
        super().__init__("shipping", SHIPPING_PORT)
        self.calculator = calculator or RateCalculator()

        self._setup_shipping_routes()

    def _setup_shipping_routes(self):
        """Set up shipping-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "shipping",
                "message": "Micro Bookstore - Shipping Service",
                "version": "1.0.0"
            }

        @self.app.post("/rpc/GetShippingRate", response_model=ShippingRateResponse)
        async def get_shipping_rate(request: ShippingRateRequest):
            """Quote the shipping cost for a postal code."""
            try:
                quote = self.calculator.quote(request.zipcode)
            except InvalidInputError:
                self.metrics.increment_counter("shipping_quotes_total", outcome="invalid")
                raise

            self.metrics.increment_counter("shipping_quotes_total", outcome="ok")
            self.logger.debug("Shipping quoted", zipcode=quote.zipcode, cost=str(quote.cost))
            return ShippingRateResponse(value=quote.cost)


def create_app(calculator: Optional[RateCalculator] = None):
    """Create FastAPI application."""
    service = ShippingService(calculator)
    return service.app


def main():
    service = ShippingService()
    service.run()


if __name__ == "__main__":
    main()
