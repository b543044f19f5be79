from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FleetConfig:
    """Fleet size and building height, fixed for the lifetime of a dispatcher."""

    num_cars: int = 2
    num_floors: int = 10

    def __post_init__(self) -> None:
        if self.num_cars < 1:
            raise ValueError(f"num_cars must be at least 1, got {self.num_cars}")
        if self.num_floors < 2:
            raise ValueError(f"num_floors must be at least 2, got {self.num_floors}")
