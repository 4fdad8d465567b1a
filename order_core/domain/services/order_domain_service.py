"""
Order domain service.

Stateless coordination between the Order aggregate and the Restaurant
snapshot. Cross-aggregate checks run here, then the Order's own transition
methods take over. Each operation either returns its event or raises.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..entities.order import Order
from ..entities.restaurant import Restaurant
from ..events.order_events import (
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
)
from ..exceptions import ErrorKind, OrderDomainException


logger = logging.getLogger(__name__)


class OrderDomainService:
    """
    Sequences restaurant checks and Order transitions.

    Holds no state, so one instance can serve any number of orders
    concurrently as long as each order is only touched by one caller.
    """

    def validate_and_initiate_order(self, order: Order, restaurant: Restaurant) -> OrderCreatedEvent:
        """
        Validate a new order against its restaurant and initialize it.

        Args:
            order: Freshly built order (no id, no status)
            restaurant: Current restaurant snapshot

        Returns:
            OrderCreatedEvent wrapping the initialized order

        Raises:
            OrderDomainException: Restaurant inactive or order invalid
        """
        self._validate_restaurant(restaurant)
        self._set_order_product_information(order, restaurant)
        order.validate_order()
        order.initialize_order()
        logger.info(f"Order with id: {order.id} is initiated")
        return OrderCreatedEvent(order=order, created_at=datetime.now(timezone.utc))

    def pay_order(self, order: Order) -> OrderPaidEvent:
        order.pay()
        logger.info(f"Order with id: {order.id} is paid")
        return OrderPaidEvent(order=order, created_at=datetime.now(timezone.utc))

    def approve_order(self, order: Order) -> None:
        order.approve()
        logger.info(f"Order with id: {order.id} is approved")

    def cancel_order_payment(
        self,
        order: Order,
        failure_messages: Optional[List[str]],
    ) -> OrderCancelledEvent:
        """Start rolling back the payment of a paid order."""
        order.init_cancel(failure_messages)
        logger.info(f"Order payment is cancelling for order id: {order.id}")
        return OrderCancelledEvent(order=order, created_at=datetime.now(timezone.utc))

    def cancel_order(self, order: Order, failure_messages: Optional[List[str]]) -> None:
        order.cancel(failure_messages)
        logger.info(f"Order with id: {order.id} is cancelled")

    @staticmethod
    def _validate_restaurant(restaurant: Restaurant) -> None:
        if not restaurant.active:
            logger.warning(f"Rejecting order for inactive restaurant: {restaurant.id}")
            raise OrderDomainException(ErrorKind.RESTAURANT_NOT_ACTIVE, restaurant.id.value)

    @staticmethod
    def _set_order_product_information(order: Order, restaurant: Restaurant) -> None:
        """Confirm item product names and prices against the restaurant catalog."""
        for order_item in order.items:
            current_product = order_item.product
            for restaurant_product in restaurant.products:
                if current_product == restaurant_product:
                    current_product.update_with_confirmed_name_and_price(
                        restaurant_product.name,
                        restaurant_product.price,
                    )
