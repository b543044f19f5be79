import dataclasses

import pytest

from dispatch import Direction, FleetConfig, Trip


def test_trip_direction_up():
    assert Trip(2, 8).direction == Direction.UP


def test_trip_direction_down():
    assert Trip(8, 2).direction == Direction.DOWN


def test_trip_is_immutable():
    trip = Trip(3, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        trip.pickup_floor = 4


def test_trips_with_same_floors_are_equal():
    assert Trip(3, 1) == Trip(3, 1)


@pytest.mark.parametrize("num_cars,num_floors", [(0, 10), (2, 1), (-1, -1)])
def test_fleet_config_rejects_invalid_sizes(num_cars, num_floors):
    with pytest.raises(ValueError):
        FleetConfig(num_cars=num_cars, num_floors=num_floors)
