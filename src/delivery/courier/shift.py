"""Courier shifts — starting and stopping work."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Courier")
class StartCourierWork:
    courier_id = Identifier(required=True)


@delivery.command(part_of="Courier")
class StopCourierWork:
    courier_id = Identifier(required=True)


@delivery.command_handler(part_of=Courier)
class ShiftHandler:
    @handle(StartCourierWork)
    def start_work(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.start_work()
        repo.add(courier)
        logger.info("Courier started work", courier_id=str(courier.id))

    @handle(StopCourierWork)
    def stop_work(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.stop_work()
        repo.add(courier)
        logger.info("Courier stopped work", courier_id=str(courier.id))
