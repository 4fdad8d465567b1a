"""Shared fixtures for Order core tests."""
import pytest

from order_core.domain.entities import Order, Product, Restaurant
from order_core.domain.services import OrderDomainService

from order_factories import (
    PRODUCT_ID_1,
    PRODUCT_ID_2,
    RESTAURANT_ID,
    make_item,
    make_order,
    money,
)


@pytest.fixture
def restaurant() -> Restaurant:
    """Active restaurant offering two products."""
    return Restaurant(
        id=RESTAURANT_ID,
        active=True,
        products=[
            Product(id=PRODUCT_ID_1, name="product-1", price=money("50.00")),
            Product(id=PRODUCT_ID_2, name="product-2", price=money("50.00")),
        ],
    )


@pytest.fixture
def order() -> Order:
    """Fresh order: 1 x 50.00 + 3 x 50.00 = 200.00."""
    return make_order(
        "200.00",
        [
            make_item(PRODUCT_ID_1, 1, "50.00"),
            make_item(PRODUCT_ID_2, 3, "50.00"),
        ],
    )


@pytest.fixture
def initialized_order(order: Order) -> Order:
    """Order validated and initialized, status PENDING."""
    order.validate_order()
    order.initialize_order()
    return order


@pytest.fixture
def paid_order(initialized_order: Order) -> Order:
    initialized_order.pay()
    return initialized_order


@pytest.fixture
def domain_service() -> OrderDomainService:
    return OrderDomainService()
