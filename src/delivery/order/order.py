"""Order aggregate — a parcel to be delivered to a grid location.

The order keeps only the identity of the courier serving it, never the courier
object itself, so both aggregates can be loaded and persisted independently.
Assignment is the one operation that touches two aggregates: the courier is
passed in for the duration of the call and transitioned to BUSY alongside the
order. Callers persist both in the same unit of work.

State Machine:
    CREATED → ASSIGNED → COMPLETED (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, ValueObject

from delivery.courier.courier import Courier, CourierStatus
from delivery.domain import delivery
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.shared.errors import BusyCourierError, NotAssignedError, OrderAlreadyAssignedError
from delivery.shared.location import Location
from delivery.shared.weight import Weight


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


# Statuses in which the order must know its courier
_COURIER_BOUND_STATUSES = {OrderStatus.ASSIGNED, OrderStatus.COMPLETED}


@delivery.aggregate
class Order:
    id: Identifier(identifier=True)
    location: ValueObject(Location, required=True)
    weight: ValueObject(Weight, required=True)
    courier_id: Identifier()
    status: String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def courier_is_known_once_assigned(self):
        bound = OrderStatus(self.status) in _COURIER_BOUND_STATUSES
        if bound and self.courier_id is None:
            raise ValidationError({"courier_id": [f"A {self.status} order must reference its courier"]})
        if not bound and self.courier_id is not None:
            raise ValidationError({"courier_id": ["Only assigned or completed orders reference a courier"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id, location: Location, weight: Weight) -> "Order":
        """Place a new order for delivery to ``location``."""
        if order_id is None or not str(order_id).strip():
            raise ValidationError({"id": ["Order id is required"]})
        if location is None:
            raise ValidationError({"location": ["Delivery location is required"]})
        if weight is None:
            raise ValidationError({"weight": ["Weight is required"]})

        now = datetime.now(UTC)
        order = cls(
            id=order_id,
            location=location,
            weight=weight,
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                location_x=location.x,
                location_y=location.y,
                weight=weight.value,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------
    def assign_to_courier(self, courier: Courier) -> None:
        """Bind this order to ``courier`` and put the courier to work."""
        if courier is None:
            raise ValidationError({"courier": ["Courier is required"]})
        if CourierStatus(courier.status) == CourierStatus.BUSY:
            raise BusyCourierError(courier.id)
        if OrderStatus(self.status) != OrderStatus.CREATED:
            raise OrderAlreadyAssignedError()

        # The courier transition comes first: if it is refused, neither aggregate changes.
        courier.in_work()

        now = datetime.now(UTC)
        with atomic_change(self):
            self.courier_id = courier.id
            self.status = OrderStatus.ASSIGNED.value
            self.updated_at = now
        self.raise_(
            OrderAssigned(
                order_id=str(self.id),
                courier_id=str(courier.id),
                assigned_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------
    def complete(self) -> None:
        if OrderStatus(self.status) != OrderStatus.ASSIGNED:
            raise NotAssignedError()

        now = datetime.now(UTC)
        self.status = OrderStatus.COMPLETED.value
        self.updated_at = now
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                courier_id=str(self.courier_id),
                completed_at=now,
            )
        )
