from acequia.network.protocols import RegionView

from .params import DEFAULT_PARAMS, AllocationParams

# The engine adds the flow rate once per second and divides the hourly
# total by FLOW_VOLUME_DIVISOR to get the volume moved.
SECONDS_PER_HOUR = 3600
FLOW_VOLUME_DIVISOR = 1000.0
MAX_FLOW_RATE = 1.0
VOLUME_PER_RATE_HOUR = SECONDS_PER_HOUR / FLOW_VOLUME_DIVISOR


def minimum_level(region: RegionView, params: AllocationParams = DEFAULT_PARAMS) -> float:
    by_need = params.need_margin * region.water_need
    by_capacity = params.capacity_margin * region.water_capacity
    return max(by_need, by_capacity)


def safe_surplus(region: RegionView | None, params: AllocationParams = DEFAULT_PARAMS) -> float:
    """Volume a region can give this hour without dropping below what it keeps.

    The kept level is the larger of the safety floor and the region's own
    need. Returns 0.0 for a missing region.
    """
    if region is None:
        return 0.0

    floor = minimum_level(region, params)
    if region.water_level <= floor:
        return 0.0

    keep_level = max(floor, region.water_need)
    if region.water_level <= keep_level:
        return 0.0

    return region.water_level - keep_level


def deficit(region: RegionView | None) -> float:
    """Shortfall of a region's level below its need; 0.0 for a missing region."""
    if region is None:
        return 0.0
    if region.water_level >= region.water_need:
        return 0.0
    return region.water_need - region.water_level


def flow_rate_for(amount: float) -> float:
    """Convert a one-hour transfer volume into a canal flow rate.

    Rates above MAX_FLOW_RATE are clamped, so the canal moves less than
    ``amount`` this hour; the remainder shows up again as next hour's deficit.
    """
    if amount <= 0:
        return 0.0
    return min(amount / VOLUME_PER_RATE_HOUR, MAX_FLOW_RATE)


def volume_for(rate: float) -> float:
    return rate * VOLUME_PER_RATE_HOUR
