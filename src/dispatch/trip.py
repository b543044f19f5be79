from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Direction(IntEnum):
    """Travel direction, encoded the same way scheduler snapshots expect."""

    DOWN = -1
    IDLE = 0
    UP = 1


@dataclass(frozen=True)
class Trip:
    """One rider's pickup-to-dropoff journey."""

    pickup_floor: int
    dropoff_floor: int
    direction: Direction = field(init=False)

    def __post_init__(self) -> None:
        direction = Direction.UP if self.dropoff_floor > self.pickup_floor else Direction.DOWN
        object.__setattr__(self, "direction", direction)
