from .canal import MAX_FLOW_RATE, MIN_FLOW_RATE, Canal
from .events import (
    CanalEvent,
    DroughtRecorded,
    FloodRecorded,
    FlowDelivered,
    RegionEvent,
    WaterReceived,
    WaterReleased,
)
from .network import DEFAULT_HOUR_LIMIT, AcequiaNetwork
from .protocols import CanalControl, Engine, RegionView
from .region import Region

__all__ = [
    # Events
    "CanalEvent",
    "DroughtRecorded",
    "FloodRecorded",
    "FlowDelivered",
    "RegionEvent",
    "WaterReceived",
    "WaterReleased",
    # Protocols
    "CanalControl",
    "Engine",
    "RegionView",
    # Entities
    "Canal",
    "MAX_FLOW_RATE",
    "MIN_FLOW_RATE",
    "Region",
    # Engine
    "AcequiaNetwork",
    "DEFAULT_HOUR_LIMIT",
]
