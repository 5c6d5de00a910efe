"""Courier aggregate — a member of the delivery fleet.

A courier owns its transport, its position on the grid, and its availability.
Movement is simulated in discrete steps: every call to ``move`` spends at most
the transport's speed in grid cells, closing the X gap first and the Y gap with
whatever budget is left. The resulting path is rook-style (axis then axis),
never diagonal, and never overshoots the target.

State Machine:
    NOT_AVAILABLE → READY → BUSY → READY → …
    READY → NOT_AVAILABLE
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, ValueObject

from delivery.courier.events import (
    CourierAdded,
    CourierCompletedOrder,
    CourierMoved,
    CourierStartedWork,
    CourierStoppedWork,
    CourierTookOrder,
)
from delivery.domain import delivery
from delivery.shared.errors import (
    AlreadyBusyError,
    AlreadyStartedError,
    IncompleteDeliveryError,
    NotAvailableError,
)
from delivery.shared.location import Location
from delivery.shared.transport import Transport
from delivery.shared.weight import Weight


class CourierStatus(Enum):
    NOT_AVAILABLE = "NotAvailable"
    READY = "Ready"
    BUSY = "Busy"


def _close_gap(current: int, goal: int, budget: int) -> tuple[int, int]:
    """Step from ``current`` toward ``goal`` on one axis.

    Returns the new coordinate and the budget left over.
    """
    gap = goal - current
    step = min(budget, abs(gap))
    if gap < 0:
        step = -step
    return current + step, budget - abs(step)


@delivery.aggregate
class Courier:
    name: String(required=True, max_length=100)
    transport: ValueObject(Transport, required=True)
    location: ValueObject(Location, required=True)
    status: String(choices=CourierStatus, default=CourierStatus.NOT_AVAILABLE.value)
    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name: str, transport: Transport) -> "Courier":
        """Add a courier to the fleet, parked at the grid's minimum location."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError({"name": ["Courier name is required"]})
        if transport is None:
            raise ValidationError({"transport": ["Transport is required"]})

        now = datetime.now(UTC)
        location = Location.minimum()
        courier = cls(
            name=name,
            transport=transport,
            location=location,
            status=CourierStatus.NOT_AVAILABLE.value,
            created_at=now,
            updated_at=now,
        )
        courier.raise_(
            CourierAdded(
                courier_id=str(courier.id),
                name=name,
                transport=transport.name,
                location_x=location.x,
                location_y=location.y,
                added_at=now,
            )
        )
        return courier

    # -------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------
    def move(self, target: Location) -> None:
        """Advance one simulation step toward ``target``."""
        if target is None:
            raise ValidationError({"target": ["Target location is required"]})

        origin = self.location
        budget = self.transport.speed
        new_x, budget = _close_gap(origin.x, target.x, budget)
        new_y, _ = _close_gap(origin.y, target.y, budget)

        if (new_x, new_y) == (origin.x, origin.y):
            return

        now = datetime.now(UTC)
        self.location = Location(x=new_x, y=new_y)
        self.updated_at = now
        self.raise_(
            CourierMoved(
                courier_id=str(self.id),
                from_x=origin.x,
                from_y=origin.y,
                to_x=new_x,
                to_y=new_y,
                moved_at=now,
            )
        )

    def calculate_time_to_location(self, location: Location) -> float:
        """Simulation steps needed to reach ``location``, as a real number."""
        if location is None:
            raise ValidationError({"location": ["Location is required"]})
        return self.location.distance_to(location) / self.transport.speed

    def can_carry(self, weight: Weight) -> bool:
        return self.transport.can_carry(weight)

    # -------------------------------------------------------------------
    # Availability
    # -------------------------------------------------------------------
    def start_work(self) -> None:
        if CourierStatus(self.status) == CourierStatus.BUSY:
            raise AlreadyStartedError()

        now = datetime.now(UTC)
        self.status = CourierStatus.READY.value
        self.updated_at = now
        self.raise_(CourierStartedWork(courier_id=str(self.id), started_at=now))

    def in_work(self) -> None:
        """Take an order: READY → BUSY."""
        current = CourierStatus(self.status)
        if current == CourierStatus.NOT_AVAILABLE:
            raise NotAvailableError()
        if current == CourierStatus.BUSY:
            raise AlreadyBusyError()

        now = datetime.now(UTC)
        self.status = CourierStatus.BUSY.value
        self.updated_at = now
        self.raise_(CourierTookOrder(courier_id=str(self.id), taken_at=now))

    def complete_order(self) -> None:
        """Finish the current delivery. Always succeeds."""
        now = datetime.now(UTC)
        self.status = CourierStatus.READY.value
        self.updated_at = now
        self.raise_(CourierCompletedOrder(courier_id=str(self.id), completed_at=now))

    def stop_work(self) -> None:
        if CourierStatus(self.status) == CourierStatus.BUSY:
            raise IncompleteDeliveryError()

        now = datetime.now(UTC)
        self.status = CourierStatus.NOT_AVAILABLE.value
        self.updated_at = now
        self.raise_(CourierStoppedWork(courier_id=str(self.id), stopped_at=now))
