"""Domain entities."""
from .product import Product
from .order_item import OrderItem
from .restaurant import Restaurant
from .order import Order, OrderParams

__all__ = [
    "Order",
    "OrderItem",
    "OrderParams",
    "Product",
    "Restaurant",
]
