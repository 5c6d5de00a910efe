"""Delivery progress — one simulation step for an assigned order.

The courier serving the order moves toward the order's location. When it
arrives, the courier is released and the order is completed in the same unit
of work.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order, OrderStatus
from delivery.shared.errors import NotAssignedError

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class AdvanceDelivery:
    order_id = Identifier(required=True)


@delivery.command_handler(part_of=Order)
class DeliveryProgressHandler:
    @handle(AdvanceDelivery)
    def advance_delivery(self, command) -> bool:
        orders = current_domain.repository_for(Order)
        couriers = current_domain.repository_for(Courier)

        order = orders.get(command.order_id)
        if OrderStatus(order.status) != OrderStatus.ASSIGNED:
            raise NotAssignedError()

        courier = couriers.get(order.courier_id)
        courier.move(order.location)

        delivered = courier.location == order.location
        if delivered:
            courier.complete_order()
            order.complete()
            orders.add(order)

        couriers.add(courier)
        logger.info(
            "Delivery advanced",
            order_id=str(order.id),
            courier_id=str(courier.id),
            location=(courier.location.x, courier.location.y),
            delivered=delivered,
        )
        return delivered
