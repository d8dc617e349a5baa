from acequia.common import MISSING_ENTITY, NO_AMOUNT, NO_DEFICIT, NO_HEADROOM, NO_SURPLUS, SkipReason

from .allocation import AllocationPolicy, RegionState, check_water_budget
from .params import DEFAULT_PARAMS, AllocationParams
from .quantities import (
    FLOW_VOLUME_DIVISOR,
    MAX_FLOW_RATE,
    SECONDS_PER_HOUR,
    VOLUME_PER_RATE_HOUR,
    deficit,
    flow_rate_for,
    minimum_level,
    safe_surplus,
    volume_for,
)
from .result import HourPlan, RunResult, StopReason, WaterBudget
from .topology import EAST, NORTH, PRIORITY, REGION_NAMES, SOUTH, CanalRole, Topology
from .transfer import Applied, Decision, Skipped, apply_decision, close_all_canals, evaluate_transfer, schedule_transfer

__all__ = [
    # Skip reasons
    "MISSING_ENTITY",
    "NO_AMOUNT",
    "NO_DEFICIT",
    "NO_HEADROOM",
    "NO_SURPLUS",
    "SkipReason",
    # Parameters and constants
    "AllocationParams",
    "DEFAULT_PARAMS",
    "FLOW_VOLUME_DIVISOR",
    "MAX_FLOW_RATE",
    "SECONDS_PER_HOUR",
    "VOLUME_PER_RATE_HOUR",
    # Quantities
    "deficit",
    "flow_rate_for",
    "minimum_level",
    "safe_surplus",
    "volume_for",
    # Topology
    "CanalRole",
    "EAST",
    "NORTH",
    "PRIORITY",
    "REGION_NAMES",
    "SOUTH",
    "Topology",
    # Transfers
    "Applied",
    "Decision",
    "Skipped",
    "apply_decision",
    "close_all_canals",
    "evaluate_transfer",
    "schedule_transfer",
    # Orchestration
    "AllocationPolicy",
    "HourPlan",
    "RegionState",
    "RunResult",
    "StopReason",
    "WaterBudget",
    "check_water_budget",
]
