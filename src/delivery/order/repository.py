"""Repository for the Order aggregate."""

from delivery.domain import delivery
from delivery.order.order import Order, OrderStatus


@delivery.repository(part_of=Order)
class OrderRepository:
    """Standard ``add``/``get`` plus the status queries dispatchers poll."""

    def get_all_created(self) -> list[Order]:
        """Orders still waiting for a courier."""
        return self._dao.query.filter(status=OrderStatus.CREATED.value).all().items

    def get_all_assigned(self) -> list[Order]:
        """Orders currently on their way."""
        return self._dao.query.filter(status=OrderStatus.ASSIGNED.value).all().items
