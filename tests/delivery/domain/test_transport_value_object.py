"""Tests for the Transport value object and its catalogue."""

import pytest
from delivery.shared.transport import Transport, TransportType
from delivery.shared.weight import Weight
from protean.exceptions import ValidationError


class TestCatalogue:
    @pytest.mark.parametrize(
        "kind, speed, capacity",
        [
            (TransportType.PEDESTRIAN, 1, 1),
            (TransportType.BICYCLE, 2, 4),
            (TransportType.SCOOTER, 3, 6),
            (TransportType.CAR, 4, 8),
        ],
    )
    def test_catalogue_entries(self, kind, speed, capacity):
        transport = Transport.of(kind)
        assert transport.name == kind.value
        assert transport.speed == speed
        assert transport.capacity == capacity

    def test_lookup_by_name(self):
        assert Transport.of("Bicycle") == Transport.of(TransportType.BICYCLE)

    def test_speeds_are_distinct(self):
        speeds = [t.speed for t in Transport.catalogue()]
        assert len(set(speeds)) == len(speeds)

    def test_unknown_transport_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Transport.of("Helicopter")
        assert "transport" in exc.value.messages

    def test_missing_transport_rejected(self):
        with pytest.raises(ValidationError):
            Transport.of(None)


class TestTransportInvariants:
    def test_speed_must_match_catalogue(self):
        with pytest.raises(ValidationError):
            Transport(name="Bicycle", speed=5, capacity=4)

    def test_capacity_must_match_catalogue(self):
        with pytest.raises(ValidationError):
            Transport(name="Car", speed=4, capacity=100)

    def test_name_outside_catalogue_rejected(self):
        with pytest.raises(ValidationError):
            Transport(name="Rocket", speed=2, capacity=4)


class TestCapacity:
    def test_can_carry_up_to_capacity(self):
        bicycle = Transport.of(TransportType.BICYCLE)
        assert bicycle.can_carry(Weight.create(4))
        assert bicycle.can_carry(Weight.create(1))

    def test_cannot_carry_beyond_capacity(self):
        assert not Transport.of(TransportType.PEDESTRIAN).can_carry(Weight.create(2))
