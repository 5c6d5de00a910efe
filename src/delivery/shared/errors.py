"""Domain rule violations raised by the Courier and Order aggregates.

Missing or malformed input is reported with Protean's ``ValidationError``.
The errors here cover the other case: well-formed requests that the current
lifecycle state of an aggregate does not allow. Each carries a stable dotted
``code`` for callers to branch on and a human-readable ``message``.
"""

from protean.exceptions import InvalidOperationError


class DeliveryRuleError(InvalidOperationError):
    code = "delivery.rule.violated"
    default_message = "Operation is not allowed in the current state"

    def __init__(self, message: str | None = None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__({"status": [self.message]})

    def __str__(self):
        return self.message


# ---------------------------------------------------------------------------
# Courier
# ---------------------------------------------------------------------------
class AlreadyStartedError(DeliveryRuleError):
    code = "courier.try.start.working.when.already.started"
    default_message = "Cannot start working while a delivery is in progress"


class NotAvailableError(DeliveryRuleError):
    code = "courier.try.assign.order.when.not.available"
    default_message = "Cannot take an order before the courier has started working"


class AlreadyBusyError(DeliveryRuleError):
    code = "courier.try.assign.order.when.courier.has.already.busy"
    default_message = "Cannot take an order while the courier is already busy"


class IncompleteDeliveryError(DeliveryRuleError):
    code = "courier.try.stop.working.with.incomplete.delivery"
    default_message = "Cannot stop working while a delivery is incomplete"


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------
class BusyCourierError(DeliveryRuleError):
    code = "order.cant.assign.order.to.busy.courier"

    def __init__(self, courier_id):
        self.courier_id = courier_id
        super().__init__(
            f"Cannot assign an order to a busy courier (courier id = {courier_id})",
            courier_id=courier_id,
        )


class NotAssignedError(DeliveryRuleError):
    code = "order.cant.complete.not.assigned.order"
    default_message = "Cannot complete an order that has not been assigned"


class OrderAlreadyAssignedError(DeliveryRuleError):
    code = "order.cant.assign.already.assigned.order"
    default_message = "Order has already been assigned to a courier"
