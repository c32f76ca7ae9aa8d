"""
Typed wire records exchanged between the gateway and the backend services.

Field names are the stable identifiers of the contract; renaming one breaks
every peer that talks to the service.
"""

from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Decimal in memory, JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Product(BaseModel):
    """A sellable catalog item."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    quantity: int = Field(ge=0)
    price: Money = Field(ge=0)
    photo: str
    author: str


class SearchAllProductsRequest(BaseModel):
    """Request body for the SearchAllProducts RPC."""


class ProductsResponse(BaseModel):
    """Response body for the SearchAllProducts RPC."""

    products: List[Product]


class SearchProductByIdRequest(BaseModel):
    """Request body for the SearchProductByID RPC."""

    id: int


class ShippingRateRequest(BaseModel):
    """Request body for the GetShippingRate RPC."""

    zipcode: str


class ShippingRateResponse(BaseModel):
    """Response body for the GetShippingRate RPC. Carries the cost only."""

    value: Money = Field(ge=0)


class ShippingQuoteView(BaseModel):
    """Client-facing shipping quote: the queried postal code plus its cost."""

    cep: str
    value: Money


class ClientError(BaseModel):
    """Client-facing error body."""

    error: str
