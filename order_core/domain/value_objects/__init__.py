"""Domain value objects."""

from .money import Money
from .identifiers import (
    CustomerId,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)
from .street_address import StreetAddress

__all__ = [
    "CustomerId",
    "Money",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
