"""Order domain events."""

from protean.fields import DateTime, Identifier, Integer

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderCreated:
    """An order was placed and awaits a courier."""

    __version__ = 1

    order_id = Identifier(required=True)
    location_x = Integer(required=True)
    location_y = Integer(required=True)
    weight = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderAssigned:
    """The order was bound to a courier."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    assigned_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderCompleted:
    """The order was delivered."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    completed_at = DateTime(required=True)
