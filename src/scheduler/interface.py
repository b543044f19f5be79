from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.trip import Trip


@dataclass(frozen=True)
class CarSnapshot:
    """Read-only view of a car for assignment decisions and status queries."""

    car_id: int
    floor: int
    direction: int
    destinations: Tuple[int, ...]

    @property
    def load(self) -> int:
        return len(self.destinations)


class Scheduler(Protocol):
    """Strategy interface for picking a car for a trip."""

    def select_car(
        self,
        candidates: Iterable[CarSnapshot],
        trip: "Trip",
    ) -> Optional[CarSnapshot]:
        """
        Return the car that should take ``trip``, or ``None``.

        ``candidates`` only contains cars that are already eligible for the
        trip, in fleet order.
        """
        ...
