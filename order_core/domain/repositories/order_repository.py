"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId, TrackingId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist an initialized order aggregate.

        Args:
            order: Order aggregate to persist

        Returns:
            The saved order
        """

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by its internal identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """

    @abstractmethod
    def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        """Retrieve order by its customer-facing tracking identifier.

        Args:
            tracking_id: TrackingId identifier

        Returns:
            Order if found, None otherwise
        """
