"""Order assignment — binds an order to a courier chosen by the caller.

Which courier serves which order is decided outside this context; the handler
only applies the decision. Both aggregates are persisted in the handler's unit
of work, so the order never ends up ASSIGNED while its courier is still free.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class AssignOrder:
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)


@delivery.command_handler(part_of=Order)
class AssignmentHandler:
    @handle(AssignOrder)
    def assign_order(self, command):
        orders = current_domain.repository_for(Order)
        couriers = current_domain.repository_for(Courier)

        order = orders.get(command.order_id)
        courier = couriers.get(command.courier_id)

        order.assign_to_courier(courier)

        orders.add(order)
        couriers.add(courier)
        logger.info(
            "Order assigned",
            order_id=str(order.id),
            courier_id=str(courier.id),
        )
