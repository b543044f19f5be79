from dispatch import Car, CarArrived, CarMoved, Direction, Trip


def test_new_car_starts_idle_on_first_floor():
    car = Car(1)
    assert car.current_floor == 1
    assert car.direction == Direction.IDLE
    assert car.destinations == ()


def test_idle_car_accepts_any_trip():
    car = Car(1, current_floor=6)
    assert car.can_accept(Trip(2, 9))
    assert car.can_accept(Trip(9, 2))
    assert car.can_accept(Trip(6, 1))


def test_car_moving_up_only_accepts_up_trips_ahead():
    car = Car(1, current_floor=3, direction=Direction.UP)
    assert car.can_accept(Trip(5, 8))
    assert not car.can_accept(Trip(3, 8))
    assert not car.can_accept(Trip(2, 8))
    assert not car.can_accept(Trip(5, 1))


def test_car_moving_down_only_accepts_down_trips_ahead():
    car = Car(1, current_floor=6, direction=Direction.DOWN)
    assert car.can_accept(Trip(4, 1))
    assert not car.can_accept(Trip(6, 1))
    assert not car.can_accept(Trip(8, 1))
    assert not car.can_accept(Trip(4, 9))


def test_can_accept_has_no_side_effects():
    car = Car(1, current_floor=3, direction=Direction.UP)
    car.can_accept(Trip(5, 8))
    assert car.destinations == ()
    assert car.direction == Direction.UP


def test_accept_appends_pickup_then_dropoff_without_changing_direction():
    car = Car(1)
    car.accept(Trip(5, 9))
    car.accept(Trip(3, 1))
    assert car.destinations == (5, 9, 3, 1)
    assert car.load == 4
    assert car.direction == Direction.IDLE


def test_advance_on_idle_car_is_a_no_op():
    car = Car(1, current_floor=4)
    for _ in range(5):
        assert car.advance() is None
        assert car.current_floor == 4
        assert car.direction == Direction.IDLE


def test_advance_without_destinations_resets_direction():
    car = Car(1, current_floor=9, direction=Direction.UP)
    assert car.advance() is None
    assert car.direction == Direction.IDLE


def test_advance_converges_one_floor_per_call():
    car = Car(2)
    car.accept(Trip(4, 2))

    distances = []
    while car.destinations and car.destinations[0] == 4:
        distances.append(abs(car.current_floor - 4))
        events = car.advance()
    assert distances == [3, 2, 1]
    assert car.current_floor == 4
    assert events == [CarMoved(2, 4, Direction.UP), CarArrived(2, 4)]
    assert car.destinations == (2,)


def test_advance_reports_moves_before_arrival():
    car = Car(1)
    car.accept(Trip(3, 2))
    assert car.advance() == [CarMoved(1, 2, Direction.UP)]
    assert car.advance() == [CarMoved(1, 3, Direction.UP), CarArrived(1, 3)]
    assert car.advance() == [CarMoved(1, 2, Direction.DOWN), CarArrived(1, 2)]
    assert car.direction == Direction.DOWN
    assert car.advance() is None
    assert car.direction == Direction.IDLE


def test_arrival_without_movement_when_parked_at_target():
    car = Car(1)
    car.accept(Trip(1, 3))
    assert car.advance() == [CarArrived(1, 1)]
    assert car.current_floor == 1
    assert car.direction == Direction.IDLE
    assert car.destinations == (3,)
    assert car.advance() == [CarMoved(1, 2, Direction.UP)]


def test_snapshot_is_a_read_only_copy():
    car = Car(3, current_floor=5)
    car.accept(Trip(6, 2))
    snapshot = car.snapshot()
    assert snapshot.car_id == 3
    assert snapshot.floor == 5
    assert snapshot.direction == Direction.IDLE
    assert snapshot.destinations == (6, 2)
    assert snapshot.load == 2

    car.advance()
    assert snapshot.floor == 5
    assert snapshot.destinations == (6, 2)
