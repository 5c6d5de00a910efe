"""Repository for the Courier aggregate.

``add`` inserts or updates and ``get`` raises ``ObjectNotFoundError`` for
unknown ids; both come from the base repository.
"""

from delivery.courier.courier import Courier, CourierStatus
from delivery.domain import delivery


@delivery.repository(part_of=Courier)
class CourierRepository:
    def get_all_ready(self) -> list[Courier]:
        """Couriers that are working and free to take an order."""
        return self._dao.query.filter(status=CourierStatus.READY.value).all().items
