from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from .trip import Direction, Trip


class RejectionReason(str, Enum):
    PICKUP_OUT_OF_RANGE = "pickup_out_of_range"
    DROPOFF_OUT_OF_RANGE = "dropoff_out_of_range"
    SAME_FLOOR = "same_floor"


@dataclass(frozen=True)
class CarMoved:
    car_id: int
    floor: int
    direction: Direction


@dataclass(frozen=True)
class CarArrived:
    car_id: int
    floor: int


@dataclass(frozen=True)
class TripAssigned:
    car_id: int
    trip: Trip
    from_backlog: bool = False


@dataclass(frozen=True)
class TripQueued:
    trip: Trip


@dataclass(frozen=True)
class TripRejected:
    pickup_floor: int
    dropoff_floor: int
    reason: RejectionReason


CarEvent = Union[CarMoved, CarArrived]
RequestOutcome = Union[TripAssigned, TripQueued, TripRejected]
Event = Union[CarMoved, CarArrived, TripAssigned, TripQueued, TripRejected]


@dataclass
class StepReport:
    """Everything that happened during one tick, in emission order."""

    time_step: int
    events: List[Event] = field(default_factory=list)

    @property
    def moves(self) -> List[CarMoved]:
        return [e for e in self.events if isinstance(e, CarMoved)]

    @property
    def arrivals(self) -> List[CarArrived]:
        return [e for e in self.events if isinstance(e, CarArrived)]

    @property
    def assignments(self) -> List[TripAssigned]:
        return [e for e in self.events if isinstance(e, TripAssigned)]


def _trip_to_dict(trip: Trip) -> dict:
    return {
        "pickup_floor": trip.pickup_floor,
        "dropoff_floor": trip.dropoff_floor,
        "direction": trip.direction.name,
    }


def event_to_dict(event: Event) -> dict:
    """Convert an event into a JSON-ready dict tagged with its ``type``."""

    if isinstance(event, CarMoved):
        return {
            "type": "moved",
            "car_id": event.car_id,
            "floor": event.floor,
            "direction": event.direction.name,
        }
    if isinstance(event, CarArrived):
        return {"type": "arrived", "car_id": event.car_id, "floor": event.floor}
    if isinstance(event, TripAssigned):
        return {
            "type": "assigned",
            "car_id": event.car_id,
            "trip": _trip_to_dict(event.trip),
            "from_backlog": event.from_backlog,
        }
    if isinstance(event, TripQueued):
        return {"type": "queued", "trip": _trip_to_dict(event.trip)}
    if isinstance(event, TripRejected):
        return {
            "type": "rejected",
            "pickup_floor": event.pickup_floor,
            "dropoff_floor": event.dropoff_floor,
            "reason": event.reason.value,
        }
    raise TypeError(f"Unsupported event type: {type(event).__name__}")


def report_to_dict(report: StepReport) -> dict:
    return {
        "time": report.time_step,
        "events": [event_to_dict(event) for event in report.events],
    }
