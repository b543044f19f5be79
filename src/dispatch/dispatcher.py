from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from scheduler import CarSnapshot, NearestAvailableScheduler, Scheduler

from .car import Car
from .config import FleetConfig
from .events import (
    Event,
    RejectionReason,
    RequestOutcome,
    StepReport,
    TripAssigned,
    TripQueued,
    TripRejected,
)
from .trip import Trip

logger = logging.getLogger(__name__)

EventCallback = Callable[[Event], None]


class Dispatcher:
    """Owns the fleet and the backlog of trips no car could take yet.

    Not thread-safe: callers running it concurrently must serialize every
    ``request_trip``, ``step`` and query behind a single lock.
    """

    def __init__(
        self,
        config: Optional[FleetConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.config = config or FleetConfig()
        self.scheduler: Scheduler = scheduler or NearestAvailableScheduler()
        self._cars: List[Car] = [Car(car_id) for car_id in range(1, self.config.num_cars + 1)]
        self._pending: List[Trip] = []
        self._listeners: List[EventCallback] = []
        self.current_time: int = 0

    @property
    def num_floors(self) -> int:
        return self.config.num_floors

    @property
    def cars(self) -> Tuple[CarSnapshot, ...]:
        return tuple(car.snapshot() for car in self._cars)

    @property
    def pending_trips(self) -> Tuple[Trip, ...]:
        return tuple(self._pending)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def get_car(self, car_id: int) -> CarSnapshot:
        for car in self._cars:
            if car.car_id == car_id:
                return car.snapshot()
        raise KeyError(car_id)

    def on_event(self, callback: EventCallback) -> None:
        self._listeners.append(callback)

    def request_trip(self, pickup_floor: int, dropoff_floor: int) -> RequestOutcome:
        reason = self._validate(pickup_floor, dropoff_floor)
        if reason is not None:
            logger.warning(
                "Rejected trip %s -> %s: %s", pickup_floor, dropoff_floor, reason.value
            )
            rejected = TripRejected(pickup_floor, dropoff_floor, reason)
            self._emit(rejected)
            return rejected

        trip = Trip(pickup_floor, dropoff_floor)
        logger.info("Trip requested: %s -> %s (%s)", pickup_floor, dropoff_floor, trip.direction.name)
        car = self.find_best_car(trip)
        outcome: RequestOutcome
        if car is None:
            self._pending.append(trip)
            logger.info("No eligible car, trip queued (%d pending)", len(self._pending))
            outcome = TripQueued(trip)
        else:
            car.accept(trip)
            logger.info("Trip assigned to car %s", car.car_id)
            outcome = TripAssigned(car.car_id, trip)
        self._emit(outcome)
        return outcome

    def find_best_car(self, trip: Trip) -> Optional[Car]:
        eligible = [car for car in self._cars if car.can_accept(trip)]
        chosen = self.scheduler.select_car([car.snapshot() for car in eligible], trip)
        if chosen is None:
            return None
        for car in eligible:
            if car.car_id == chosen.car_id:
                return car
        raise ValueError(f"Scheduler selected car {chosen.car_id}, which is not eligible")

    def step(self) -> StepReport:
        report = StepReport(time_step=self.current_time)
        for car in self._cars:
            events = car.advance()
            if events:
                report.events.extend(events)
        report.events.extend(self._assign_pending())
        self.current_time += 1

        for event in report.events:
            self._emit(event)
        return report

    def snapshot(self) -> dict:
        return {
            "time": self.current_time,
            "num_floors": self.num_floors,
            "cars": [
                {
                    "id": car.car_id,
                    "floor": car.current_floor,
                    "direction": car.direction.name,
                    "destinations": list(car.destinations),
                }
                for car in self._cars
            ],
            "pending": [
                {"pickup_floor": trip.pickup_floor, "dropoff_floor": trip.dropoff_floor}
                for trip in self._pending
            ],
        }

    def _validate(self, pickup_floor: int, dropoff_floor: int) -> Optional[RejectionReason]:
        if not 1 <= pickup_floor <= self.num_floors:
            return RejectionReason.PICKUP_OUT_OF_RANGE
        if not 1 <= dropoff_floor <= self.num_floors:
            return RejectionReason.DROPOFF_OUT_OF_RANGE
        if pickup_floor == dropoff_floor:
            return RejectionReason.SAME_FLOOR
        return None

    def _assign_pending(self) -> List[TripAssigned]:
        assigned: List[TripAssigned] = []
        remaining: List[Trip] = []
        for trip in self._pending:
            car = self.find_best_car(trip)
            if car is None:
                remaining.append(trip)
                continue
            car.accept(trip)
            logger.info(
                "Pending trip %s -> %s assigned to car %s",
                trip.pickup_floor,
                trip.dropoff_floor,
                car.car_id,
            )
            assigned.append(TripAssigned(car.car_id, trip, from_backlog=True))
        self._pending = remaining
        return assigned

    def _emit(self, event: Event) -> None:
        for callback in self._listeners:
            callback(event)
