"""Money value object - pure Python immutable type."""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    Comparison is exact value equality on the Decimal amount, no tolerance.
    Arithmetic results are scaled to two decimal places (HALF_EVEN).

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal

    ZERO: ClassVar["Money"]

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    def __str__(self) -> str:
        """Amount with two decimal places (the form used in error messages)."""
        return f"{self._set_scale(self.amount)}"

    def is_greater_than_zero(self) -> bool:
        """Check if amount is strictly positive."""
        return self.amount > 0

    def add(self, other: 'Money') -> 'Money':
        return Money(amount=self._set_scale(self.amount + other.amount))

    def multiply(self, multiplier: int) -> 'Money':
        """Multiply by an item quantity."""
        return Money(amount=self._set_scale(self.amount * multiplier))

    @staticmethod
    def _set_scale(value: Decimal) -> Decimal:
        return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)


Money.ZERO = Money(amount=Decimal("0.00"))
