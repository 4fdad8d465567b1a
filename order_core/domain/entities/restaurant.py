"""Restaurant snapshot supplied by the restaurant lookup collaborator."""
from dataclasses import dataclass, field
from typing import List

from ..value_objects import RestaurantId
from .product import Product


@dataclass
class Restaurant:
    """
    Read-only view of a restaurant at order time.

    ``products`` is the authoritative current catalog used to confirm the
    names and prices on incoming order items.
    """
    id: RestaurantId
    active: bool
    products: List[Product] = field(default_factory=list)
