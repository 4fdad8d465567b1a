"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderItem, OrderParams, Product, Restaurant
from .enums import OrderStatus
from .event_publisher import DomainEventPublisher
from .events import (
    DomainEvent,
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
)
from .exceptions import DomainException, ErrorKind, OrderDomainException
from .repositories import OrderRepository
from .services import OrderDomainService
from .value_objects import (
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)

__all__ = [
    "CustomerId",
    "DomainEvent",
    "DomainEventPublisher",
    "DomainException",
    "ErrorKind",
    "Money",
    "Order",
    "OrderCancelledEvent",
    "OrderCreatedEvent",
    "OrderDomainException",
    "OrderDomainService",
    "OrderId",
    "OrderItem",
    "OrderItemId",
    "OrderPaidEvent",
    "OrderParams",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "ProductId",
    "Restaurant",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
