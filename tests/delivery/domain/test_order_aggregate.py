"""Tests for Order creation and events."""

import pytest
from delivery.courier.courier import Courier
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.order.order import Order, OrderStatus
from delivery.shared.location import Location
from delivery.shared.transport import Transport, TransportType
from delivery.shared.weight import Weight
from protean.exceptions import ValidationError
from protean.utils import DomainObjects


def _make_order(order_id="O1"):
    return Order.create(order_id, Location.create(4, 1), Weight.create(3))


def _ready_courier():
    courier = Courier.create("Bob", Transport.of(TransportType.BICYCLE))
    courier.start_work()
    return courier


class TestOrderCreation:
    def test_element_type(self):
        assert Order.element_type == DomainObjects.AGGREGATE

    def test_new_order_defaults(self):
        order = _make_order()
        assert order.id == "O1"
        assert order.location == Location.create(4, 1)
        assert order.weight == Weight.create(3)
        assert order.status == OrderStatus.CREATED.value
        assert order.courier_id is None

    @pytest.mark.parametrize("order_id", ["", "  ", None])
    def test_id_required(self, order_id):
        with pytest.raises(ValidationError) as exc:
            Order.create(order_id, Location.create(1, 1), Weight.create(1))
        assert "id" in exc.value.messages

    def test_location_required(self):
        with pytest.raises(ValidationError) as exc:
            Order.create("O1", None, Weight.create(1))
        assert "location" in exc.value.messages

    def test_weight_required(self):
        with pytest.raises(ValidationError) as exc:
            Order.create("O1", Location.create(1, 1), None)
        assert "weight" in exc.value.messages


class TestOrderInvariants:
    def test_assigned_order_must_reference_courier(self):
        with pytest.raises(ValidationError) as exc:
            Order(
                id="O2",
                location=Location.create(2, 2),
                weight=Weight.create(1),
                status=OrderStatus.ASSIGNED.value,
            )
        assert "courier_id" in exc.value.messages

    def test_created_order_cannot_reference_courier(self):
        with pytest.raises(ValidationError) as exc:
            Order(
                id="O3",
                location=Location.create(2, 2),
                weight=Weight.create(1),
                courier_id="courier-1",
            )
        assert "courier_id" in exc.value.messages

    def test_completed_order_keeps_courier(self):
        order = _make_order()
        courier = _ready_courier()
        order.assign_to_courier(courier)
        order.complete()
        assert order.courier_id == courier.id


class TestOrderEvents:
    def test_create_raises_order_created(self):
        order = _make_order()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderCreated)
        assert event.order_id == "O1"
        assert (event.location_x, event.location_y, event.weight) == (4, 1, 3)

    def test_assign_raises_order_assigned(self):
        order = _make_order()
        courier = _ready_courier()
        order.assign_to_courier(courier)
        event = order._events[-1]
        assert isinstance(event, OrderAssigned)
        assert event.courier_id == str(courier.id)

    def test_complete_raises_order_completed(self):
        order = _make_order()
        order.assign_to_courier(_ready_courier())
        order.complete()
        assert isinstance(order._events[-1], OrderCompleted)
