"""Transport value object and the fixed transport catalogue."""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer, String

from delivery.domain import delivery
from delivery.shared.weight import Weight


class TransportType(Enum):
    PEDESTRIAN = "Pedestrian"
    BICYCLE = "Bicycle"
    SCOOTER = "Scooter"
    CAR = "Car"


# (speed in cells per step, capacity in kilograms)
_CATALOGUE = {
    TransportType.PEDESTRIAN: (1, 1),
    TransportType.BICYCLE: (2, 4),
    TransportType.SCOOTER: (3, 6),
    TransportType.CAR: (4, 8),
}

_NAMES = frozenset(transport_type.value for transport_type in TransportType)


@delivery.value_object
class Transport:
    """How a courier travels.

    Speed is the movement budget a courier spends per simulation step; capacity
    is the heaviest order the courier can carry. Only the catalogue entries are
    valid transports.
    """

    name: String(required=True, max_length=50, choices=TransportType)
    speed: Integer(required=True, min_value=1)
    capacity: Integer(required=True, min_value=1)

    @invariant.post
    def must_match_catalogue_entry(self):
        if self.name not in _NAMES or self.speed is None or self.capacity is None:
            return

        expected = _CATALOGUE[TransportType(self.name)]
        if (self.speed, self.capacity) != expected:
            raise ValidationError(
                {"name": [f"{self.name} travels at speed {expected[0]} and carries up to {expected[1]}"]}
            )

    @classmethod
    def of(cls, kind) -> "Transport":
        """Build the catalogue transport for a ``TransportType`` or its name."""
        if kind is None:
            raise ValidationError({"transport": ["Transport is required"]})
        try:
            transport_type = kind if isinstance(kind, TransportType) else TransportType(kind)
        except ValueError:
            raise ValidationError({"transport": [f"Unknown transport: {kind!r}"]}) from None

        speed, capacity = _CATALOGUE[transport_type]
        return cls(name=transport_type.value, speed=speed, capacity=capacity)

    @classmethod
    def catalogue(cls) -> list["Transport"]:
        return [cls.of(transport_type) for transport_type in TransportType]

    def can_carry(self, weight: Weight) -> bool:
        if weight is None:
            raise ValidationError({"weight": ["Weight is required"]})
        return weight <= Weight(value=self.capacity)

    def __hash__(self):
        return hash((self.name, self.speed, self.capacity))
