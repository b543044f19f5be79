from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from scheduler import CarSnapshot

from .events import CarArrived, CarEvent, CarMoved
from .trip import Direction, Trip

logger = logging.getLogger(__name__)


@dataclass
class Car:
    """A single elevator car serving its destinations in FIFO order."""

    car_id: int
    current_floor: int = 1
    direction: Direction = Direction.IDLE
    _destinations: List[int] = field(default_factory=list, repr=False)

    @property
    def destinations(self) -> Tuple[int, ...]:
        return tuple(self._destinations)

    @property
    def load(self) -> int:
        return len(self._destinations)

    def is_idle(self) -> bool:
        return self.direction == Direction.IDLE

    def can_accept(self, trip: Trip) -> bool:
        if self.is_idle():
            return True
        if trip.direction != self.direction:
            return False
        # a pickup at the current floor or behind the car is never eligible
        if self.direction == Direction.UP:
            return trip.pickup_floor > self.current_floor
        return trip.pickup_floor < self.current_floor

    def accept(self, trip: Trip) -> None:
        self._destinations.append(trip.pickup_floor)
        self._destinations.append(trip.dropoff_floor)

    def advance(self) -> Optional[List[CarEvent]]:
        """Move at most one floor toward the first destination.

        Returns ``None`` when the car has nothing to do, otherwise the move
        and/or arrival events produced by this call.
        """

        if not self._destinations:
            self.direction = Direction.IDLE
            return None

        events: List[CarEvent] = []
        target = self._destinations[0]
        if target > self.current_floor:
            self.direction = Direction.UP
            self.current_floor += 1
            events.append(CarMoved(self.car_id, self.current_floor, self.direction))
        elif target < self.current_floor:
            self.direction = Direction.DOWN
            self.current_floor -= 1
            events.append(CarMoved(self.car_id, self.current_floor, self.direction))

        if self.current_floor == target:
            self._destinations.pop(0)
            events.append(CarArrived(self.car_id, self.current_floor))
        logger.debug("Car %s at floor %s heading %s", self.car_id, self.current_floor, self.direction.name)
        return events

    def snapshot(self) -> CarSnapshot:
        return CarSnapshot(
            car_id=self.car_id,
            floor=self.current_floor,
            direction=int(self.direction),
            destinations=self.destinations,
        )
