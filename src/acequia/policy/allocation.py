import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from acequia.network.protocols import CanalControl, Engine, RegionView

from .params import AllocationParams
from .result import HourPlan, RunResult, StopReason, WaterBudget
from .topology import PRIORITY, CanalRole, Topology
from .transfer import Decision, apply_decision, close_all_canals, evaluate_transfer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegionState:
    """Start-of-hour reading of a region."""

    name: str
    water_level: float
    water_need: float
    water_capacity: float

    @classmethod
    def of(cls, region: RegionView) -> "RegionState":
        return cls(
            name=region.name,
            water_level=region.water_level,
            water_need=region.water_need,
            water_capacity=region.water_capacity,
        )


def check_water_budget(regions: Iterable[RegionView]) -> WaterBudget:
    total_level = 0.0
    total_need = 0.0
    for region in regions:
        total_level += region.water_level
        total_need += region.water_need
    return WaterBudget(total_level=total_level, total_need=total_need)


@dataclass
class AllocationPolicy:
    """Greedy hourly controller for the North/South/East canal network.

    Every hour all canals are closed, then each role in PRIORITY gets one
    transfer attempt sized from a snapshot taken at the start of the hour.
    """

    params: AllocationParams = field(default_factory=AllocationParams)
    strict_topology: bool = True
    canal_keys: Mapping[CanalRole, str] | None = None
    priority: tuple[CanalRole, ...] = PRIORITY

    def resolve(self, regions: Iterable[RegionView], canals: Iterable[CanalControl]) -> Topology:
        return Topology.resolve(regions, canals, strict=self.strict_topology, keys=self.canal_keys)

    def plan_hour(self, topology: Topology, hour: int = 0) -> HourPlan:
        close_all_canals(topology.all_canals)

        snapshot = {name: RegionState.of(r) if r is not None else None for name, r in topology.regions.items()}

        decisions: list[Decision] = []
        for role in self.priority:
            decision = evaluate_transfer(
                role,
                snapshot.get(role.source),
                snapshot.get(role.destination),
                topology.canal(role),
                self.params,
            )
            decisions.append(decision)

        for decision in decisions:
            rate = apply_decision(decision, topology.canal(decision.role))
            logger.debug("hour %d %s: %s (rate %.4f)", hour, decision.role, decision, rate)

        return HourPlan(hour=hour, decisions=tuple(decisions))

    def plan(self, regions: Iterable[RegionView], canals: Iterable[CanalControl], hour: int = 0) -> HourPlan:
        """Resolve the topology and plan a single hour."""
        return self.plan_hour(self.resolve(regions, canals), hour)

    def run(self, engine: Engine) -> RunResult:
        """Drive the engine hour by hour until it is solved or hits its hour limit."""
        budget = check_water_budget(engine.regions)
        if not budget.is_sufficient:
            logger.info(
                "Total water %.2f is below total need %.2f: a perfect solution is impossible, "
                "running best-effort allocation",
                budget.total_level,
                budget.total_need,
            )

        topology = self.resolve(engine.regions, engine.canals)
        logger.info("Running allocation policy from hour %d up to hour %d", engine.hour, engine.hour_limit)

        plans: list[HourPlan] = []
        while not engine.is_solved and engine.hour < engine.hour_limit:
            plans.append(self.plan_hour(topology, engine.hour))
            engine.advance_one_hour()

        stop_reason = StopReason.SOLVED if engine.is_solved else StopReason.HOUR_LIMIT
        logger.info("Allocation stopped at hour %d: %s after %d hours", engine.hour, stop_reason.value, len(plans))
        return RunResult(stop_reason=stop_reason, budget=budget, plans=plans)
