"""Order creation — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.order.order import Order
from delivery.shared.location import Location
from delivery.shared.weight import Weight

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class CreateOrder:
    """Place an order under a caller-supplied id."""

    order_id = Identifier(required=True)
    location_x = Integer(required=True)
    location_y = Integer(required=True)
    weight = Integer(required=True)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        order = Order.create(
            order_id=command.order_id,
            location=Location.create(command.location_x, command.location_y),
            weight=Weight.create(command.weight),
        )
        current_domain.repository_for(Order).add(order)
        logger.info(
            "Order created",
            order_id=str(order.id),
            location=(order.location.x, order.location.y),
            weight=order.weight.value,
        )
        return str(order.id)
