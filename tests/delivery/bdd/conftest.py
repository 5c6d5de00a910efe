"""Shared BDD fixtures and step definitions for the delivery domain."""

import pytest
from delivery.courier.courier import Courier
from delivery.order.order import Order
from delivery.shared.errors import DeliveryRuleError
from delivery.shared.location import Location
from delivery.shared.transport import Transport
from delivery.shared.weight import Weight
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a courier "{name}" on a "{transport}"'), target_fixture="courier")
def courier_on_transport(name, transport):
    return Courier.create(name, Transport.of(transport))


@given(
    parsers.cfparse('an order "{order_id}" to location {x:d},{y:d} weighing {weight:d}'),
    target_fixture="order",
)
def order_to_location(order_id, x, y, weight):
    return Order.create(order_id, Location.create(x, y), Weight.create(weight))


@given("the courier is already delivering another order")
def courier_already_delivering(courier):
    courier.start_work()
    Order.create("O-other", Location.create(9, 9), Weight.create(1)).assign_to_courier(courier)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the courier is "{status}"'))
def courier_has_status(courier, status):
    assert courier.status == status


@then(parsers.cfparse('the order is "{status}"'))
def order_has_status(order, status):
    assert order.status == status


@then(parsers.cfparse("the courier is at {x:d},{y:d}"))
def courier_is_at(courier, x, y):
    assert courier.location == Location.create(x, y)


@then(parsers.cfparse('the assignment fails with "{error_name}"'))
def assignment_failed(error, error_name):
    assert isinstance(error["exc"], DeliveryRuleError)
    assert type(error["exc"]).__name__ == error_name
