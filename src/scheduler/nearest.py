from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .interface import CarSnapshot

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.trip import Trip


class NearestAvailableScheduler:
    """Picks the eligible car closest to the pickup floor, then the least loaded.

    Remaining ties go to the first candidate in fleet order.
    """

    def select_car(
        self,
        candidates: Iterable[CarSnapshot],
        trip: "Trip",
    ) -> Optional[CarSnapshot]:
        available = list(candidates)
        if not available:
            return None
        # list.sort is stable, so equal keys keep fleet order
        available.sort(
            key=lambda car: (
                abs(car.floor - trip.pickup_floor),
                car.load,
            )
        )
        return available[0]
