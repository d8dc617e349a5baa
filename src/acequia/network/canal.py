from dataclasses import dataclass, field
from typing import TypeVar

from acequia.validation import BoundViolationError

from .events import CanalEvent

T = TypeVar("T", bound=CanalEvent)

MIN_FLOW_RATE = 0.0
MAX_FLOW_RATE = 1.0


@dataclass
class Canal:
    name: str
    source: str
    target: str
    flow_rate: float = field(default=0.0, init=False)
    is_open: bool = field(default=False, init=False)
    events: list[CanalEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")
        if not self.source:
            raise ValueError("source cannot be empty")
        if not self.target:
            raise ValueError("target cannot be empty")
        if self.source == self.target:
            raise ValueError("source and target must differ")

    def set_flow_rate(self, rate: float) -> None:
        if not (MIN_FLOW_RATE <= rate <= MAX_FLOW_RATE):
            raise BoundViolationError("flow_rate", rate, (MIN_FLOW_RATE, MAX_FLOW_RATE))
        self.flow_rate = rate

    def toggle_open(self, is_open: bool) -> None:
        self.is_open = is_open

    def record(self, event: CanalEvent) -> None:
        self.events.append(event)

    def events_of_type(self, event_type: type[T]) -> list[T]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear_events(self) -> None:
        self.events.clear()

    def reset(self) -> None:
        """Close the gate, zero the rate and clear events."""
        self.clear_events()
        self.flow_rate = 0.0
        self.is_open = False
