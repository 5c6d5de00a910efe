"""Location value object — a cell on the delivery grid."""

import random

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer

from delivery.domain import delivery
from delivery.shared.grid import grid_bounds


@delivery.value_object
class Location:
    """A pair of integer grid coordinates.

    Both coordinates must lie within the grid bounds (1..10 unless configured
    otherwise). Distances between locations are measured in grid steps along
    the axes (Manhattan distance), matching how couriers move.
    """

    x: Integer(required=True)
    y: Integer(required=True)

    @invariant.post
    def coordinates_must_be_within_grid(self):
        if self.x is None or self.y is None:
            return

        lower, upper = grid_bounds()
        errors = {}
        for axis, value in (("x", self.x), ("y", self.y)):
            if not lower <= value <= upper:
                errors[axis] = [f"{axis}={value} is outside the grid ({lower}..{upper})"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def create(cls, x: int, y: int) -> "Location":
        return cls(x=x, y=y)

    @classmethod
    def minimum(cls) -> "Location":
        """Lower-left corner of the grid, where new couriers start."""
        lower, _ = grid_bounds()
        return cls(x=lower, y=lower)

    @classmethod
    def maximum(cls) -> "Location":
        _, upper = grid_bounds()
        return cls(x=upper, y=upper)

    @classmethod
    def random(cls) -> "Location":
        lower, upper = grid_bounds()
        return cls(x=random.randint(lower, upper), y=random.randint(lower, upper))

    def distance_to(self, other: "Location") -> int:
        """Number of grid steps between this location and ``other``."""
        if other is None:
            raise ValidationError({"location": ["Target location is required"]})
        return abs(other.x - self.x) + abs(other.y - self.y)

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Location(x={self.x}, y={self.y})"
