"""Order line item entity."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Money, OrderId, OrderItemId
from .product import Product


@dataclass(eq=False)
class OrderItem:
    """
    Individual line item within an order.

    Owned by its Order. The item id and the owning order id are assigned
    when the order is initialized. ``sub_total`` defaults to
    ``price * quantity`` when not supplied (fresh items); rehydrated items
    carry the stored value.
    """
    product: Product
    quantity: int
    price: Money
    sub_total: Optional[Money] = None
    id: Optional[OrderItemId] = None
    order_id: Optional[OrderId] = None

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got: {self.quantity}")
        if self.sub_total is None:
            self.sub_total = self.price.multiply(self.quantity)

    def initialize_order_item(self, order_id: OrderId, order_item_id: OrderItemId) -> None:
        self.order_id = order_id
        self.id = order_item_id

    def is_price_valid(self) -> bool:
        """
        Business rule: unit price is positive, matches the product price,
        and multiplied by the quantity gives the sub-total.
        """
        return (
            self.price.is_greater_than_zero()
            and self.price == self.product.price
            and self.price.multiply(self.quantity) == self.sub_total
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderItem):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id and self.order_id == other.order_id

    def __hash__(self) -> int:
        if self.id is None:
            raise TypeError("unhashable OrderItem: the owning order has not numbered it yet")
        return hash((self.id, self.order_id))
