"""Courier domain events — immutable facts about courier state changes."""

from protean.fields import DateTime, Identifier, Integer, String

from delivery.domain import delivery


@delivery.event(part_of="Courier")
class CourierAdded:
    """A courier joined the fleet."""

    __version__ = 1

    courier_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    transport = String(required=True, max_length=50)
    location_x = Integer(required=True)
    location_y = Integer(required=True)
    added_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierStartedWork:
    """The courier is ready to take orders."""

    __version__ = 1

    courier_id = Identifier(required=True)
    started_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierTookOrder:
    """The courier became busy with a delivery."""

    __version__ = 1

    courier_id = Identifier(required=True)
    taken_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierMoved:
    """The courier advanced one simulation step."""

    __version__ = 1

    courier_id = Identifier(required=True)
    from_x = Integer(required=True)
    from_y = Integer(required=True)
    to_x = Integer(required=True)
    to_y = Integer(required=True)
    moved_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierCompletedOrder:
    """The courier handed over its delivery and is ready again."""

    __version__ = 1

    courier_id = Identifier(required=True)
    completed_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierStoppedWork:
    """The courier is no longer available for orders."""

    __version__ = 1

    courier_id = Identifier(required=True)
    stopped_at = DateTime(required=True)
