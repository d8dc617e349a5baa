from collections.abc import Iterable
from dataclasses import dataclass

from acequia.common import MISSING_ENTITY, NO_AMOUNT, NO_DEFICIT, NO_HEADROOM, NO_SURPLUS, SkipReason
from acequia.network.protocols import CanalControl, RegionView

from .params import DEFAULT_PARAMS, AllocationParams
from .quantities import MAX_FLOW_RATE, VOLUME_PER_RATE_HOUR, deficit, flow_rate_for, safe_surplus, volume_for
from .topology import CanalRole


@dataclass(frozen=True, slots=True)
class Applied:
    role: CanalRole
    amount: float  # volume wanted this hour
    flow_rate: float

    @property
    def expected_volume(self) -> float:
        return volume_for(self.flow_rate)

    @property
    def capped(self) -> bool:
        return self.amount / VOLUME_PER_RATE_HOUR > MAX_FLOW_RATE


@dataclass(frozen=True, slots=True)
class Skipped:
    role: CanalRole
    reason: SkipReason


Decision = Applied | Skipped


def close_all_canals(canals: Iterable[CanalControl]) -> None:
    for canal in canals:
        canal.set_flow_rate(0.0)
        canal.toggle_open(False)


def schedule_transfer(canal: CanalControl | None, amount: float) -> float:
    """Set the canal to move ``amount`` over the next hour and open it.

    Returns the rate set, or 0.0 when nothing was scheduled.
    """
    if canal is None or amount <= 0:
        return 0.0
    rate = flow_rate_for(amount)
    if rate <= 0:
        return 0.0
    canal.set_flow_rate(rate)
    canal.toggle_open(True)
    return rate


def evaluate_transfer(
    role: CanalRole,
    source: RegionView | None,
    destination: RegionView | None,
    canal: CanalControl | None,
    params: AllocationParams = DEFAULT_PARAMS,
) -> Decision:
    """Decide how much the canal should move from source to destination.

    The amount is bounded by the destination's deficit, the source's safe
    surplus and a share of the destination's headroom to capacity. Nothing
    is written to the canal here.
    """
    if source is None or destination is None or canal is None:
        return Skipped(role=role, reason=MISSING_ENTITY)

    need = deficit(destination)
    if need <= 0:
        return Skipped(role=role, reason=NO_DEFICIT)

    surplus = safe_surplus(source, params)
    if surplus <= 0:
        return Skipped(role=role, reason=NO_SURPLUS)

    headroom = destination.water_capacity - destination.water_level
    if headroom <= 0:
        return Skipped(role=role, reason=NO_HEADROOM)

    amount = min(need, surplus, headroom * params.headroom_fraction)
    rate = flow_rate_for(amount)
    if amount <= 0 or rate <= 0:
        return Skipped(role=role, reason=NO_AMOUNT)

    return Applied(role=role, amount=amount, flow_rate=rate)


def apply_decision(decision: Decision, canal: CanalControl | None) -> float:
    if not isinstance(decision, Applied):
        return 0.0
    return schedule_transfer(canal, decision.amount)
