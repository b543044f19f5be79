"""Elevator dispatch core for liftdispatch."""

from .car import Car
from .config import FleetConfig
from .dispatcher import Dispatcher
from .events import (
    CarArrived,
    CarMoved,
    RejectionReason,
    StepReport,
    TripAssigned,
    TripQueued,
    TripRejected,
    event_to_dict,
    report_to_dict,
)
from .trip import Direction, Trip

__all__ = [
    "Car",
    "CarArrived",
    "CarMoved",
    "Direction",
    "Dispatcher",
    "FleetConfig",
    "RejectionReason",
    "StepReport",
    "Trip",
    "TripAssigned",
    "TripQueued",
    "TripRejected",
    "event_to_dict",
    "report_to_dict",
]
