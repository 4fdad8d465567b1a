"""
Order domain exceptions and error message templates.

Templates are percent-style format strings. Downstream systems may parse
the resulting messages, so the wording must not drift.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Conditions under which the Order core refuses an operation."""

    ORDER_NOT_IN_INITIAL_STATE = "order_not_in_initial_state"
    PRICE_NOT_GREATER_THAN_ZERO = "price_not_greater_than_zero"
    TOTAL_PRICE_MISMATCH = "total_price_mismatch"
    ORDER_ITEM_PRICE_INVALID = "order_item_price_invalid"
    INVALID_STATE_FOR_OPERATION = "invalid_state_for_operation"
    RESTAURANT_NOT_ACTIVE = "restaurant_not_active"
    ORDER_ID_ALREADY_SET = "order_id_already_set"


ERROR_MESSAGES = {
    ErrorKind.ORDER_NOT_IN_INITIAL_STATE: "Order is not in correct state for initialization!",
    ErrorKind.PRICE_NOT_GREATER_THAN_ZERO: "Total price must be greater than zero!",
    ErrorKind.TOTAL_PRICE_MISMATCH: "Total price:%s is not equal to Order items total:%s !",
    ErrorKind.ORDER_ITEM_PRICE_INVALID: "Order item price: %s is not valid for product %s",
    ErrorKind.INVALID_STATE_FOR_OPERATION: "Order is not in correct state for %s operation!",
    ErrorKind.RESTAURANT_NOT_ACTIVE: "Restaurant with id %s is currently not active!",
    ErrorKind.ORDER_ID_ALREADY_SET: "Order id is already set to %s and cannot be changed!",
}


class DomainException(Exception):
    """Base class for rule violations raised by the domain layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OrderDomainException(DomainException):
    """
    An Order operation was refused.

    The order is left exactly as it was before the call.
    """

    def __init__(self, kind: ErrorKind, *args):
        message = ERROR_MESSAGES[kind] % args if args else ERROR_MESSAGES[kind]
        super().__init__(message)
        self.kind = kind
