from dataclasses import dataclass
from typing import ClassVar

from acequia.common import Strategy


@dataclass(frozen=True)
class AllocationParams(Strategy):
    """Safety margins used when sizing hourly transfers.

    need_margin and capacity_margin set the floor a giving region must stay
    above; headroom_fraction caps how much of a receiving region's remaining
    space one hour's transfer may fill.
    """

    __params__: ClassVar[tuple[str, ...]] = ("need_margin", "capacity_margin", "headroom_fraction")
    __bounds__: ClassVar[dict[str, tuple[float, float]]] = {
        "need_margin": (0.0, 1.0),
        "capacity_margin": (0.0, 1.0),
        "headroom_fraction": (0.0, 1.0),
    }
    need_margin: float = 0.8
    capacity_margin: float = 0.3
    headroom_fraction: float = 0.8


DEFAULT_PARAMS = AllocationParams()
