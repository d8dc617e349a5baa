"""
acequia

Hourly allocation policy for a small network of water regions joined by
directional canals.

Each simulated hour the policy closes every canal, then tries one transfer
per canal in a fixed priority order, moving safely available surplus toward
regions short of their need without pushing the receiver toward overflow.

Classes:
    AllocationPolicy: Drives a simulation engine hour by hour.
    AllocationParams: Safety margins used to size transfers.
    Topology: Regions and canals resolved by logical role.
    AcequiaNetwork: Reference simulation engine (flow, flood/drought, scoring).
    Region: A node holding water, with a need and a capacity.
    Canal: A directed, gated connection between two regions.
"""

from .common import SkipReason, Strategy
from .network import AcequiaNetwork, Canal, Region
from .policy import (
    AllocationParams,
    AllocationPolicy,
    Applied,
    CanalRole,
    HourPlan,
    RunResult,
    Skipped,
    StopReason,
    Topology,
    deficit,
    flow_rate_for,
    safe_surplus,
)
from .validation import BoundViolationError, TopologyError, ValidationError

__all__ = [
    "AcequiaNetwork",
    "AllocationParams",
    "AllocationPolicy",
    "Applied",
    "BoundViolationError",
    "Canal",
    "CanalRole",
    "HourPlan",
    "Region",
    "RunResult",
    "SkipReason",
    "Skipped",
    "StopReason",
    "Strategy",
    "Topology",
    "TopologyError",
    "ValidationError",
    "deficit",
    "flow_rate_for",
    "safe_surplus",
]

__version__ = "0.1.0"
