"""Delivery address value object."""
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class StreetAddress:
    """
    Delivery address captured when the order is placed.

    Immutable once recorded on an Order. Formatting and validation of the
    individual parts belong to the customer-facing layers.
    """
    id: UUID
    street: str
    postal_code: str
    city: str

    def __str__(self) -> str:
        return f"{self.street}, {self.postal_code} {self.city}"
