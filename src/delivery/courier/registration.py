"""Courier registration — command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.shared.transport import Transport

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Courier")
class AddCourier:
    """Add a courier with one of the catalogue transports."""

    name = String(required=True, max_length=100)
    transport = String(required=True, max_length=50)


@delivery.command_handler(part_of=Courier)
class AddCourierHandler:
    @handle(AddCourier)
    def add_courier(self, command):
        courier = Courier.create(name=command.name, transport=Transport.of(command.transport))
        current_domain.repository_for(Courier).add(courier)
        logger.info(
            "Courier added",
            courier_id=str(courier.id),
            transport=courier.transport.name,
        )
        return str(courier.id)
