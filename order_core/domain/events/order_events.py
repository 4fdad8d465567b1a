"""
Order Domain Events.

Produced by OrderDomainService at the three transition points a downstream
publisher cares about: order initiated, order paid, payment cancelling.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, TYPE_CHECKING

from .base import DomainEvent, utc_now

if TYPE_CHECKING:
    from ..entities.order import Order


@dataclass(frozen=True, kw_only=True)
class OrderEvent(DomainEvent):
    """
    Snapshot reference to an Order plus the moment the transition happened.

    ``created_at`` is captured by the domain service when it returns the
    event and is always UTC.
    """

    order: "Order"
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Set aggregate_id to the order id."""
        if not self.aggregate_id and self.order.id is not None:
            object.__setattr__(self, 'aggregate_id', str(self.order.id))
        super().__post_init__()

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "order": self.order.to_snapshot_dict(),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class OrderCreatedEvent(OrderEvent):
    """
    Order passed validation and was initialized (status PENDING).

    Consumers: payment request publisher
    """


@dataclass(frozen=True)
class OrderPaidEvent(OrderEvent):
    """
    Payment for the order completed (status PAID).

    Consumers: restaurant approval request publisher
    """


@dataclass(frozen=True)
class OrderCancelledEvent(OrderEvent):
    """
    Restaurant rejected a paid order; payment is being rolled back
    (status CANCELLING).

    Consumers: payment cancel request publisher
    """
