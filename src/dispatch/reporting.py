"""Console formatting for dispatcher events and fleet status."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .events import (
    CarArrived,
    CarMoved,
    Event,
    RejectionReason,
    TripAssigned,
    TripQueued,
    TripRejected,
)
from .trip import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .dispatcher import Dispatcher


_REJECTION_MESSAGES = {
    RejectionReason.PICKUP_OUT_OF_RANGE: "Invalid pickup floor: {pickup}",
    RejectionReason.DROPOFF_OUT_OF_RANGE: "Invalid dropoff floor: {dropoff}",
    RejectionReason.SAME_FLOOR: "Pickup and dropoff floors cannot be the same",
}


def format_event(event: Event) -> str:
    if isinstance(event, CarMoved):
        return f"Elevator {event.car_id}: Moving {event.direction.name} to floor {event.floor}"
    if isinstance(event, CarArrived):
        return f"Elevator {event.car_id}: Arrived at floor {event.floor}"
    if isinstance(event, TripAssigned):
        if event.from_backlog:
            return (
                f"Pending request (Floor {event.trip.pickup_floor} → "
                f"{event.trip.dropoff_floor}) assigned to Elevator {event.car_id}"
            )
        return f"Assigned to Elevator {event.car_id}"
    if isinstance(event, TripQueued):
        return "Request queued (no suitable elevator available)"
    if isinstance(event, TripRejected):
        return _REJECTION_MESSAGES[event.reason].format(
            pickup=event.pickup_floor, dropoff=event.dropoff_floor
        )
    raise TypeError(f"Unsupported event type: {type(event).__name__}")


def format_request(pickup_floor: int, dropoff_floor: int) -> str:
    direction = Direction.UP if dropoff_floor > pickup_floor else Direction.DOWN
    return f"Request received: Floor {pickup_floor} → {dropoff_floor} ({direction.name})"


def format_status(dispatcher: "Dispatcher") -> str:
    lines = ["", "=== ELEVATOR STATUS ==="]
    for car in dispatcher.cars:
        lines.append(
            f"Elevator {car.car_id}: Floor {car.floor}, "
            f"Direction: {Direction(car.direction).name}, "
            f"Destinations: {list(car.destinations)}"
        )
    lines.append(f"Pending requests: {dispatcher.pending_count}")
    lines.append("=======================")
    return "\n".join(lines)
