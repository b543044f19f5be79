from __future__ import annotations

from .interface import CarSnapshot, Scheduler
from .nearest import NearestAvailableScheduler

__all__ = [
    "CarSnapshot",
    "NearestAvailableScheduler",
    "Scheduler",
]
