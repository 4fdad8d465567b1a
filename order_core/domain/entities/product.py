"""Product referenced by an order line item."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Money, ProductId


@dataclass(eq=False)
class Product:
    """
    Product as the customer saw it when ordering.

    Name and price may be stale until confirmed against the restaurant's
    current catalog. Two products are equal when their ids are equal.
    """
    id: ProductId
    name: Optional[str] = None
    price: Optional[Money] = None

    def update_with_confirmed_name_and_price(self, name: str, price: Money) -> None:
        """Overwrite name and price with the restaurant's authoritative values."""
        self.name = name
        self.price = price

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
