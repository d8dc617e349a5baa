from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .transfer import Applied, Decision, Skipped

if TYPE_CHECKING:
    import pandas as pd


class StopReason(Enum):
    SOLVED = "solved"
    HOUR_LIMIT = "hour_limit"


@dataclass(frozen=True, slots=True)
class WaterBudget:
    total_level: float
    total_need: float

    @property
    def is_sufficient(self) -> bool:
        return self.total_level >= self.total_need

    @property
    def shortfall(self) -> float:
        return max(0.0, self.total_need - self.total_level)


@dataclass(frozen=True, slots=True)
class HourPlan:
    hour: int
    decisions: tuple[Decision, ...]

    def applied(self) -> list[Applied]:
        return [d for d in self.decisions if isinstance(d, Applied)]

    def skipped(self) -> list[Skipped]:
        return [d for d in self.decisions if isinstance(d, Skipped)]


@dataclass(frozen=True, slots=True)
class RunResult:
    stop_reason: StopReason
    budget: WaterBudget
    plans: list[HourPlan] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.plans)

    @property
    def hours_run(self) -> int:
        return len(self.plans)

    @property
    def solved(self) -> bool:
        return self.stop_reason is StopReason.SOLVED

    def applied(self) -> list[Applied]:
        return [d for plan in self.plans for d in plan.applied()]

    def skipped(self) -> list[Skipped]:
        return [d for plan in self.plans for d in plan.skipped()]

    def total_scheduled(self) -> float:
        """Volume the canals were set to move over the whole run."""
        return sum(d.expected_volume for d in self.applied())

    def to_frame(self) -> pd.DataFrame:
        """One row per decision, with hour, role, outcome and volumes."""
        import pandas as pd

        rows = []
        for plan in self.plans:
            for d in plan.decisions:
                applied = isinstance(d, Applied)
                rows.append(
                    {
                        "hour": plan.hour,
                        "role": d.role.name,
                        "applied": applied,
                        "reason": None if applied else str(d.reason),
                        "amount": d.amount if applied else 0.0,
                        "flow_rate": d.flow_rate if applied else 0.0,
                        "expected_volume": d.expected_volume if applied else 0.0,
                    }
                )
        columns = ["hour", "role", "applied", "reason", "amount", "flow_rate", "expected_volume"]
        return pd.DataFrame(rows, columns=columns)
