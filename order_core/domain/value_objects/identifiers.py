"""Identifier value objects for the ordering domain."""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class OrderId:
    """Internal identity of an Order aggregate."""

    value: UUID

    @classmethod
    def generate(cls) -> "OrderId":
        """Generate a new OrderId."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TrackingId:
    """
    Externally shareable order reference.

    Independent of OrderId so the internal identity is never exposed.
    """

    value: UUID

    @classmethod
    def generate(cls) -> "TrackingId":
        """Generate a new TrackingId."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CustomerId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RestaurantId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderItemId:
    """Position of an item inside its order, assigned 1..N on initialization."""

    value: int

    def __post_init__(self):
        if self.value < 1:
            raise ValueError(f"Order item id must be positive, got: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
