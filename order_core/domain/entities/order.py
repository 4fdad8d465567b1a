"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- any persistence or transport library

State machine:
    PENDING -> PAID -> APPROVED
    PAID -> CANCELLING -> CANCELLED
    PENDING -> CANCELLED
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..enums import OrderStatus
from ..exceptions import ErrorKind, OrderDomainException
from ..value_objects import (
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)
from .order_item import OrderItem
from .product import Product


# Statuses from which each transition is allowed
_ALLOWED_SOURCES = {
    "pay": {OrderStatus.PENDING},
    "approve": {OrderStatus.PAID},
    "initCancel": {OrderStatus.PAID},
    "cancel": {OrderStatus.CANCELLING, OrderStatus.PENDING},
}


@dataclass
class OrderParams:
    """
    Everything needed to construct an Order.

    A new order only fills the first five fields. A rehydrated order (loaded
    by a persistence collaborator) fills the rest as well.
    """
    customer_id: CustomerId
    restaurant_id: RestaurantId
    delivery_address: StreetAddress
    price: Optional[Money]
    items: List[OrderItem]
    order_id: Optional[OrderId] = None
    tracking_id: Optional[TrackingId] = None
    order_status: Optional[OrderStatus] = None
    failure_messages: Optional[List[str]] = None


class Order:
    """
    Order aggregate root.

    Owns its line items and guards the pricing invariants and the status
    lifecycle. Every check runs before any mutation, so a refused operation
    leaves the order untouched.

    Not safe for concurrent use: callers serialize access per instance.
    """

    def __init__(self, params: OrderParams):
        self._id: Optional[OrderId] = params.order_id
        self._customer_id = params.customer_id
        self._restaurant_id = params.restaurant_id
        self._delivery_address = params.delivery_address
        self._price = params.price
        self._items = params.items
        self._tracking_id: Optional[TrackingId] = params.tracking_id
        self._order_status: Optional[OrderStatus] = params.order_status
        self._failure_messages: Optional[List[str]] = (
            list(params.failure_messages) if params.failure_messages is not None else None
        )

    # =========================================================================
    # IDENTITY
    # =========================================================================

    @property
    def id(self) -> Optional[OrderId]:
        return self._id

    @id.setter
    def id(self, value: OrderId) -> None:
        if self._id is not None:
            raise OrderDomainException(ErrorKind.ORDER_ID_ALREADY_SET, self._id)
        self._id = value

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def restaurant_id(self) -> RestaurantId:
        return self._restaurant_id

    @property
    def delivery_address(self) -> StreetAddress:
        return self._delivery_address

    @property
    def price(self) -> Optional[Money]:
        return self._price

    @property
    def items(self) -> List[OrderItem]:
        return self._items

    @property
    def tracking_id(self) -> Optional[TrackingId]:
        return self._tracking_id

    @property
    def order_status(self) -> Optional[OrderStatus]:
        """Changes only through initialize_order and the transition methods."""
        return self._order_status

    @property
    def failure_messages(self) -> Optional[List[str]]:
        return self._failure_messages

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        # The hash must not change once the order sits in a set or dict key,
        # so only initialized orders are hashable.
        if self._id is None:
            raise TypeError("unhashable Order: initialize_order() has not assigned an id")
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Order(id={self._id}, status={self.order_status}, price={self._price})"

    # =========================================================================
    # INITIALIZATION & VALIDATION
    # =========================================================================

    def initialize_order(self) -> None:
        """
        Assign identity, tracking id, PENDING status and item ids 1..N.

        Raises:
            OrderDomainException: If the order was already initialized
        """
        self._validate_initial_order()
        self.id = OrderId.generate()
        self._tracking_id = TrackingId.generate()
        self._order_status = OrderStatus.PENDING
        self._initialize_order_items()

    def validate_order(self) -> None:
        """
        Check initial state, total price, and item prices, in that order.

        Raises:
            OrderDomainException: On the first violated rule
        """
        self._validate_initial_order()
        self._validate_total_price()
        self._validate_items_price()

    def _validate_initial_order(self) -> None:
        if self.order_status is not None or self._id is not None:
            raise OrderDomainException(ErrorKind.ORDER_NOT_IN_INITIAL_STATE)

    def _validate_total_price(self) -> None:
        if self._price is None or not self._price.is_greater_than_zero():
            raise OrderDomainException(ErrorKind.PRICE_NOT_GREATER_THAN_ZERO)

    def _validate_items_price(self) -> None:
        order_items_total = Money.ZERO
        for order_item in self._items:
            self._validate_item_price(order_item)
            order_items_total = order_items_total.add(order_item.sub_total)

        if self._price != order_items_total:
            raise OrderDomainException(
                ErrorKind.TOTAL_PRICE_MISMATCH,
                str(self._price),
                str(order_items_total),
            )

    @staticmethod
    def _validate_item_price(order_item: OrderItem) -> None:
        if not order_item.is_price_valid():
            raise OrderDomainException(
                ErrorKind.ORDER_ITEM_PRICE_INVALID,
                str(order_item.price),
                order_item.product.id.value,
            )

    def _initialize_order_items(self) -> None:
        for item_id, order_item in enumerate(self._items, start=1):
            order_item.initialize_order_item(self._id, OrderItemId(item_id))

    # =========================================================================
    # LIFECYCLE TRANSITIONS
    # =========================================================================

    def pay(self) -> None:
        """Business rule: PENDING -> PAID."""
        self._assert_can("pay")
        self._order_status = OrderStatus.PAID

    def approve(self) -> None:
        """Business rule: PAID -> APPROVED."""
        self._assert_can("approve")
        self._order_status = OrderStatus.APPROVED

    def init_cancel(self, failure_messages: Optional[List[str]]) -> None:
        """Business rule: PAID -> CANCELLING (payment is being rolled back)."""
        self._assert_can("initCancel")
        self._order_status = OrderStatus.CANCELLING
        self._update_failure_messages(failure_messages)

    def cancel(self, failure_messages: Optional[List[str]]) -> None:
        """Business rule: CANCELLING or PENDING -> CANCELLED."""
        self._assert_can("cancel")
        self._order_status = OrderStatus.CANCELLED
        self._update_failure_messages(failure_messages)

    def _assert_can(self, operation: str) -> None:
        if self.order_status not in _ALLOWED_SOURCES[operation]:
            raise OrderDomainException(ErrorKind.INVALID_STATE_FOR_OPERATION, operation)

    def _update_failure_messages(self, failure_messages: Optional[List[str]]) -> None:
        """
        Accumulate cancellation reasons.

        Empty strings are dropped only when appending to an existing list.
        When there is no list yet, the incoming one is taken unfiltered.
        """
        if self._failure_messages is not None and failure_messages is not None:
            self._failure_messages.extend(message for message in failure_messages if message)
        if self._failure_messages is None and failure_messages is not None:
            self._failure_messages = list(failure_messages)

    # =========================================================================
    # SNAPSHOT SUPPORT (rehydration by persistence collaborators)
    # =========================================================================

    def to_snapshot_dict(self) -> Dict[str, Any]:
        """
        Serialize Order state to a JSON-ready dictionary.

        Returns:
            Dictionary containing all Order state
        """
        address = self._delivery_address
        return {
            'order_id': str(self._id) if self._id else None,
            'tracking_id': str(self.tracking_id) if self.tracking_id else None,
            'customer_id': str(self._customer_id),
            'restaurant_id': str(self._restaurant_id),
            'delivery_address': {
                'id': str(address.id),
                'street': address.street,
                'postal_code': address.postal_code,
                'city': address.city,
            },
            'price': str(self._price.amount) if self._price is not None else None,
            'order_status': self.order_status.value if self.order_status else None,
            'failure_messages': (
                list(self.failure_messages) if self.failure_messages is not None else None
            ),
            'items': [
                {
                    'id': item.id.value if item.id else None,
                    'product_id': str(item.product.id),
                    'product_name': item.product.name,
                    'product_price': (
                        str(item.product.price.amount) if item.product.price is not None else None
                    ),
                    'quantity': item.quantity,
                    'price': str(item.price.amount),
                    'sub_total': str(item.sub_total.amount),
                }
                for item in self._items
            ],
        }

    @classmethod
    def from_snapshot_dict(cls, snapshot_data: Dict[str, Any]) -> 'Order':
        """
        Restore Order from snapshot dictionary.

        Args:
            snapshot_data: Dictionary produced by ``to_snapshot_dict``

        Returns:
            Restored Order instance
        """
        order_id = OrderId(UUID(snapshot_data['order_id'])) if snapshot_data.get('order_id') else None

        items = []
        for item_data in snapshot_data.get('items', []):
            product_price = item_data.get('product_price')
            items.append(
                OrderItem(
                    product=Product(
                        id=ProductId(UUID(item_data['product_id'])),
                        name=item_data.get('product_name'),
                        price=Money(Decimal(product_price)) if product_price is not None else None,
                    ),
                    quantity=item_data['quantity'],
                    price=Money(Decimal(item_data['price'])),
                    sub_total=Money(Decimal(item_data['sub_total'])),
                    id=OrderItemId(item_data['id']) if item_data.get('id') else None,
                    order_id=order_id if item_data.get('id') else None,
                )
            )

        address_data = snapshot_data['delivery_address']
        status = snapshot_data.get('order_status')
        price = snapshot_data.get('price')
        failure_messages = snapshot_data.get('failure_messages')

        return cls(
            OrderParams(
                customer_id=CustomerId(UUID(snapshot_data['customer_id'])),
                restaurant_id=RestaurantId(UUID(snapshot_data['restaurant_id'])),
                delivery_address=StreetAddress(
                    id=UUID(address_data['id']),
                    street=address_data['street'],
                    postal_code=address_data['postal_code'],
                    city=address_data['city'],
                ),
                price=Money(Decimal(price)) if price is not None else None,
                items=items,
                order_id=order_id,
                tracking_id=(
                    TrackingId(UUID(snapshot_data['tracking_id']))
                    if snapshot_data.get('tracking_id') else None
                ),
                order_status=OrderStatus(status) if status else None,
                failure_messages=list(failure_messages) if failure_messages is not None else None,
            )
        )
