"""Weight value object for order payloads and transport capacity."""

from protean.fields import Integer

from delivery.domain import delivery


@delivery.value_object
class Weight:
    """A positive whole number of kilograms. Weights are ordered by value."""

    value: Integer(required=True, min_value=1)

    @classmethod
    def create(cls, value: int) -> "Weight":
        return cls(value=value)

    def __lt__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self):
        return hash(self.value)
