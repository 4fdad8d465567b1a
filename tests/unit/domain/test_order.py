"""
Tests for the Order aggregate.

Covers initialization, price validation, the status state machine and
failure message accumulation.
"""
import pytest

from order_core.domain.entities import Order
from order_core.domain.enums import OrderStatus
from order_core.domain.exceptions import ErrorKind, OrderDomainException
from order_core.domain.value_objects import OrderId, OrderItemId, TrackingId

from order_factories import PRODUCT_ID_1, PRODUCT_ID_2, make_item, make_order


class TestInitializeOrder:
    """Order can be initialized exactly once."""

    def test_fresh_order_is_uninitialized(self, order):
        assert order.id is None
        assert order.tracking_id is None
        assert order.order_status is None
        assert order.failure_messages is None

    def test_initialize_assigns_identity_tracking_and_pending(self, order):
        order.initialize_order()

        assert isinstance(order.id, OrderId)
        assert isinstance(order.tracking_id, TrackingId)
        assert order.tracking_id.value != order.id.value
        assert order.order_status == OrderStatus.PENDING

    def test_initialize_numbers_items_in_list_order(self, order):
        order.initialize_order()

        assert [item.id for item in order.items] == [OrderItemId(1), OrderItemId(2)]
        assert all(item.order_id == order.id for item in order.items)

    def test_second_initialize_fails(self, initialized_order):
        first_id = initialized_order.id

        with pytest.raises(OrderDomainException) as exc_info:
            initialized_order.initialize_order()

        assert str(exc_info.value) == "Order is not in correct state for initialization!"
        assert initialized_order.id == first_id

    def test_initialize_fails_when_only_status_is_set(self):
        order = make_order(
            "50.00",
            [make_item(PRODUCT_ID_1, 1, "50.00")],
            order_status=OrderStatus.PENDING,
        )

        with pytest.raises(OrderDomainException):
            order.initialize_order()
        assert order.id is None

    def test_id_cannot_be_reassigned(self, initialized_order):
        with pytest.raises(OrderDomainException) as exc_info:
            initialized_order.id = OrderId.generate()

        assert exc_info.value.kind == ErrorKind.ORDER_ID_ALREADY_SET


class TestValidateOrder:
    """validate_order runs state, total price and item price checks in order."""

    def test_valid_order_passes(self, order):
        order.validate_order()

    def test_initialized_order_fails_initial_state_check(self, initialized_order):
        with pytest.raises(OrderDomainException) as exc_info:
            initialized_order.validate_order()

        assert exc_info.value.kind == ErrorKind.ORDER_NOT_IN_INITIAL_STATE

    @pytest.mark.parametrize("price", [None, "0.00", "-10.00"])
    def test_non_positive_price_fails(self, price):
        order = make_order(price, [make_item(PRODUCT_ID_1, 1, "50.00")])

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert str(exc_info.value) == "Total price must be greater than zero!"

    def test_total_mismatch_cites_both_totals(self):
        order = make_order(
            "250.00",
            [
                make_item(PRODUCT_ID_1, 1, "50.00"),
                make_item(PRODUCT_ID_2, 3, "50.00"),
            ],
        )

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert str(exc_info.value) == "Total price:250.00 is not equal to Order items total:200.00 !"

    def test_total_mismatch_formats_amounts_to_two_decimals(self):
        order = make_order("10", [make_item(PRODUCT_ID_1, 3, "3.3")])

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert str(exc_info.value) == "Total price:10.00 is not equal to Order items total:9.90 !"

    def test_item_price_not_matching_product_fails(self):
        order = make_order(
            "60.00",
            [make_item(PRODUCT_ID_1, 1, "60.00", product_price="50.00")],
        )

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert str(exc_info.value) == (
            f"Order item price: 60.00 is not valid for product {PRODUCT_ID_1.value}"
        )

    def test_item_price_checked_before_total(self):
        order = make_order(
            "999.00",
            [make_item(PRODUCT_ID_1, 1, "60.00", product_price="50.00")],
        )

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert exc_info.value.kind == ErrorKind.ORDER_ITEM_PRICE_INVALID

    def test_failed_validation_does_not_mutate(self):
        order = make_order("250.00", [make_item(PRODUCT_ID_1, 1, "50.00")])

        with pytest.raises(OrderDomainException):
            order.validate_order()

        assert order.id is None
        assert order.order_status is None
        assert order.items[0].id is None

    def test_order_without_items_fails_total_check(self):
        """An empty item list sums to zero, which never equals a positive price."""
        order = make_order("10.00", [])

        with pytest.raises(OrderDomainException) as exc_info:
            order.validate_order()

        assert exc_info.value.kind == ErrorKind.TOTAL_PRICE_MISMATCH
        assert "Order items total:0.00" in str(exc_info.value)


class TestStateTransitions:
    """PENDING -> PAID -> APPROVED, PAID -> CANCELLING -> CANCELLED, PENDING -> CANCELLED."""

    def test_happy_path(self, initialized_order):
        initialized_order.pay()
        assert initialized_order.order_status == OrderStatus.PAID

        initialized_order.approve()
        assert initialized_order.order_status == OrderStatus.APPROVED

    def test_pay_twice_fails_and_keeps_paid(self, paid_order):
        with pytest.raises(OrderDomainException) as exc_info:
            paid_order.pay()

        assert str(exc_info.value) == "Order is not in correct state for pay operation!"
        assert paid_order.order_status == OrderStatus.PAID

    def test_pay_before_initialization_fails(self, order):
        with pytest.raises(OrderDomainException):
            order.pay()
        assert order.order_status is None

    def test_approve_requires_paid(self, initialized_order):
        with pytest.raises(OrderDomainException) as exc_info:
            initialized_order.approve()

        assert str(exc_info.value) == "Order is not in correct state for approve operation!"
        assert initialized_order.order_status == OrderStatus.PENDING

    def test_pending_order_cancels_directly(self, initialized_order):
        initialized_order.cancel(["customer changed mind"])

        assert initialized_order.order_status == OrderStatus.CANCELLED

    def test_paid_order_cancels_through_cancelling(self, paid_order):
        with pytest.raises(OrderDomainException) as exc_info:
            paid_order.cancel(["restaurant rejected"])
        assert str(exc_info.value) == "Order is not in correct state for cancel operation!"
        assert paid_order.order_status == OrderStatus.PAID

        paid_order.init_cancel(["restaurant rejected"])
        assert paid_order.order_status == OrderStatus.CANCELLING

        paid_order.cancel(["payment refunded"])
        assert paid_order.order_status == OrderStatus.CANCELLED

    def test_init_cancel_requires_paid(self, initialized_order):
        with pytest.raises(OrderDomainException) as exc_info:
            initialized_order.init_cancel(["x"])

        assert str(exc_info.value) == "Order is not in correct state for initCancel operation!"
        assert initialized_order.failure_messages is None

    def test_cancel_from_approved_fails(self, paid_order):
        paid_order.approve()

        with pytest.raises(OrderDomainException):
            paid_order.cancel(["too late"])
        assert paid_order.order_status == OrderStatus.APPROVED

    @pytest.mark.parametrize(
        "transition",
        [
            lambda order: order.pay(),
            lambda order: order.approve(),
            lambda order: order.init_cancel(["x"]),
            lambda order: order.cancel(["x"]),
        ],
        ids=["pay", "approve", "init_cancel", "cancel"],
    )
    def test_nothing_leaves_cancelled(self, initialized_order, transition):
        initialized_order.cancel(None)

        with pytest.raises(OrderDomainException):
            transition(initialized_order)
        assert initialized_order.order_status == OrderStatus.CANCELLED


class TestFailureMessages:
    """
    Accumulation of cancellation reasons.

    Empty strings are dropped when appending to an existing list, but an
    incoming list that becomes the first list is stored unfiltered.
    """

    def test_appending_drops_empty_strings(self):
        order = make_order(
            "50.00",
            [make_item(PRODUCT_ID_1, 1, "50.00")],
            order_status=OrderStatus.PENDING,
            failure_messages=["a"],
        )

        order.cancel(["", "b"])

        assert order.failure_messages == ["a", "b"]

    def test_first_list_is_stored_unfiltered(self):
        order = make_order(
            "50.00",
            [make_item(PRODUCT_ID_1, 1, "50.00")],
            order_status=OrderStatus.PENDING,
        )

        order.cancel(["", "b"])

        assert order.failure_messages == ["", "b"]

    def test_duplicates_are_kept(self, paid_order):
        paid_order.init_cancel(["rejected"])
        paid_order.cancel(["rejected"])

        assert paid_order.failure_messages == ["rejected", "rejected"]

    def test_none_incoming_leaves_list_unchanged(self, paid_order):
        paid_order.init_cancel(["rejected"])
        paid_order.cancel(None)

        assert paid_order.failure_messages == ["rejected"]


class TestOrderIdentity:
    """Orders compare by id once initialized."""

    def test_rehydrated_order_equals_original(self, initialized_order):
        copy = Order.from_snapshot_dict(initialized_order.to_snapshot_dict())

        assert copy == initialized_order
        assert copy is not initialized_order

    def test_uninitialized_orders_compare_by_instance(self, order):
        other = make_order("200.00", list(order.items))

        assert order == order
        assert order != other

    def test_uninitialized_order_is_unhashable(self, order):
        with pytest.raises(TypeError):
            hash(order)

    def test_hash_follows_id_once_initialized(self, initialized_order):
        copy = Order.from_snapshot_dict(initialized_order.to_snapshot_dict())

        assert hash(copy) == hash(initialized_order)
        assert {initialized_order, copy} == {initialized_order}


class TestOrderEncapsulation:
    """Lifecycle state changes only through the aggregate's own methods."""

    @pytest.mark.parametrize(
        "attribute, value",
        [
            ("order_status", OrderStatus.APPROVED),
            ("tracking_id", TrackingId.generate()),
            ("failure_messages", ["forged"]),
        ],
    )
    def test_lifecycle_fields_are_read_only(self, initialized_order, attribute, value):
        with pytest.raises(AttributeError):
            setattr(initialized_order, attribute, value)

        assert initialized_order.order_status == OrderStatus.PENDING

    def test_rehydrated_order_does_not_share_caller_list(self):
        caller_messages = ["payment declined"]
        order = make_order(
            "50.00",
            [make_item(PRODUCT_ID_1, 1, "50.00")],
            order_status=OrderStatus.PENDING,
            failure_messages=caller_messages,
        )

        order.cancel(["customer left"])

        assert caller_messages == ["payment declined"]
        assert order.failure_messages == ["payment declined", "customer left"]
