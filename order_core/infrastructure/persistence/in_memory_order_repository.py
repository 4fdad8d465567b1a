"""
In-memory Order Repository Implementation.

This is an in-memory implementation for testing and demos.
"""
from typing import Dict, Optional
import logging

from order_core.domain.entities.order import Order
from order_core.domain.repositories.order_repository import OrderRepository
from order_core.domain.value_objects import OrderId, TrackingId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores order snapshots, not instances: every lookup rehydrates a fresh
    Order, the way a database-backed repository would.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, dict] = {}
        self._tracking_index: Dict[str, str] = {}

    def save(self, order: Order) -> Order:
        """
        Save order snapshot to in-memory storage.

        Args:
            order: Initialized Order to save

        Raises:
            ValueError: If the order has no id yet
        """
        if order.id is None:
            raise ValueError("Cannot save an order that has not been initialized")

        snapshot = order.to_snapshot_dict()
        self._storage[snapshot['order_id']] = snapshot
        if snapshot['tracking_id']:
            self._tracking_index[snapshot['tracking_id']] = snapshot['order_id']
        logger.info(f"Order saved: {order.id} (status: {order.order_status})")
        return order

    def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        snapshot = self._storage.get(str(order_id))
        if snapshot is None:
            logger.info(f"Order not found: {order_id}")
            return None
        return Order.from_snapshot_dict(snapshot)

    def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        order_id = self._tracking_index.get(str(tracking_id))
        if order_id is None:
            logger.info(f"Order not found for tracking id: {tracking_id}")
            return None
        return Order.from_snapshot_dict(self._storage[order_id])

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        self._tracking_index.clear()
