from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WaterReceived:
    amount: float
    source_id: str
    t: int  # hour


@dataclass(frozen=True, slots=True)
class WaterReleased:
    amount: float
    target_id: str
    t: int


@dataclass(frozen=True, slots=True)
class FloodRecorded:
    level: float
    capacity: float
    excess: float
    t: int


@dataclass(frozen=True, slots=True)
class DroughtRecorded:
    level: float
    need: float
    deficit: float
    t: int


@dataclass(frozen=True, slots=True)
class FlowDelivered:
    amount: float
    flow_rate: float
    t: int


RegionEvent = WaterReceived | WaterReleased | FloodRecorded | DroughtRecorded
CanalEvent = FlowDelivered
