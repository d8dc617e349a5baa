from dataclasses import dataclass, field
from typing import TypeVar

import numpy as np

from .events import RegionEvent

T = TypeVar("T", bound=RegionEvent)


@dataclass
class Region:
    name: str
    water_level: float
    water_need: float
    water_capacity: float
    is_flooded: bool = field(default=False, init=False)
    is_in_drought: bool = field(default=False, init=False)
    events: list[RegionEvent] = field(default_factory=list, init=False, repr=False)
    _initial_level: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")
        values = np.asarray([self.water_level, self.water_need, self.water_capacity], dtype=float)
        if not np.all(np.isfinite(values)):
            raise ValueError("water quantities must be finite")
        if self.water_level < 0:
            raise ValueError("water_level cannot be negative")
        if self.water_need < 0:
            raise ValueError("water_need cannot be negative")
        if self.water_capacity <= 0:
            raise ValueError("water_capacity must be positive")
        self._initial_level = self.water_level

    def record(self, event: RegionEvent) -> None:
        self.events.append(event)

    def events_at(self, t: int) -> list[RegionEvent]:
        return [e for e in self.events if e.t == t]

    def events_of_type(self, event_type: type[T]) -> list[T]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear_events(self) -> None:
        self.events.clear()

    def update_status(self) -> None:
        self.is_flooded = self.water_level > self.water_capacity
        self.is_in_drought = self.water_level < self.water_need

    def reset(self) -> None:
        """Restore the initial water level and clear flags and events."""
        self.clear_events()
        self.water_level = self._initial_level
        self.is_flooded = False
        self.is_in_drought = False
