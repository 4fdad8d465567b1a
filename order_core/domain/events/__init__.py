"""Domain events emitted by the Order core."""
from .base import DomainEvent
from .order_events import (
    OrderEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
    OrderCancelledEvent,
)

__all__ = [
    "DomainEvent",
    "OrderEvent",
    "OrderCreatedEvent",
    "OrderPaidEvent",
    "OrderCancelledEvent",
]
