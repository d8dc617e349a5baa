import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import networkx as nx

from acequia.validation import ValidationError

from .canal import Canal
from .events import DroughtRecorded, FloodRecorded, FlowDelivered, WaterReceived, WaterReleased
from .region import Region

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600
FLOW_VOLUME_DIVISOR = 1000.0
DEFAULT_HOUR_LIMIT = 168


@dataclass
class AcequiaNetwork:
    """Reference simulation engine for a network of regions joined by canals.

    Owns the physical model: canal flow accumulation, flood and drought
    status, penalty accounting, the hour counter and the solved flag.
    """

    hour_limit: int = DEFAULT_HOUR_LIMIT

    _regions: dict[str, Region] = field(default_factory=dict, init=False, repr=False)
    _canals: dict[str, Canal] = field(default_factory=dict, init=False, repr=False)
    _graph: nx.DiGraph = field(default_factory=nx.DiGraph, init=False, repr=False)
    _validated: bool = field(default=False, init=False, repr=False)
    hour: int = field(default=0, init=False)
    is_solved: bool = field(default=False, init=False)
    penalties: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.hour_limit <= 0:
            raise ValueError("hour_limit must be positive")

    def add_region(self, region: Region) -> None:
        if region.name in self._regions:
            raise ValueError(f"Region '{region.name}' already exists")
        self._regions[region.name] = region
        self._graph.add_node(region.name)
        self._validated = False

    def add_canal(self, canal: Canal) -> None:
        if canal.name in self._canals:
            raise ValueError(f"Canal '{canal.name}' already exists")
        self._canals[canal.name] = canal
        self._validated = False

    def validate(self) -> None:
        errors: list[str] = []

        # 1. Check region existence for canal endpoints
        for name, canal in self._canals.items():
            if canal.source not in self._regions:
                errors.append(f"Canal '{name}': source region '{canal.source}' does not exist")
            if canal.target not in self._regions:
                errors.append(f"Canal '{name}': target region '{canal.target}' does not exist")

        if errors:
            raise ValidationError("\n".join(errors))

        # 2. Build graph edges from canal definitions
        for canal in self._canals.values():
            self._graph.add_edge(canal.source, canal.target, canal=canal.name)

        # 3. Check connectivity (weakly connected)
        if len(self._regions) > 0 and not nx.is_weakly_connected(self._graph):
            raise ValidationError("Network is not connected")

        self._validated = True

    @property
    def regions(self) -> list[Region]:
        return list(self._regions.values())

    @property
    def canals(self) -> list[Canal]:
        return list(self._canals.values())

    def region(self, name: str) -> Region:
        return self._regions[name]

    def canal(self, name: str) -> Canal:
        return self._canals[name]

    def advance_one_hour(self) -> None:
        if not self._validated:
            self.validate()

        t = self.hour
        for canal in self._canals.values():
            self._move_water(canal, t)

        flagged = 0
        for region in self._regions.values():
            region.update_status()
            if region.is_flooded:
                excess = region.water_level - region.water_capacity
                region.record(
                    FloodRecorded(level=region.water_level, capacity=region.water_capacity, excess=excess, t=t)
                )
                flagged += 1
            if region.is_in_drought:
                shortfall = region.water_need - region.water_level
                region.record(DroughtRecorded(level=region.water_level, need=region.water_need, deficit=shortfall, t=t))
                flagged += 1

        self.penalties += flagged
        self.hour += 1
        self.is_solved = flagged == 0
        logger.debug("hour %d done: %d flagged regions, %d penalties", t, flagged, self.penalties)

    def _move_water(self, canal: Canal, t: int) -> float:
        if not canal.is_open or canal.flow_rate <= 0:
            return 0.0

        # The rate accumulates once per second over the hour
        accumulated = canal.flow_rate * SECONDS_PER_HOUR
        requested = accumulated / FLOW_VOLUME_DIVISOR

        source = self._regions[canal.source]
        target = self._regions[canal.target]
        moved = min(requested, source.water_level)
        if moved <= 0:
            return 0.0

        source.water_level -= moved
        target.water_level += moved
        source.record(WaterReleased(amount=moved, target_id=target.name, t=t))
        target.record(WaterReceived(amount=moved, source_id=source.name, t=t))
        canal.record(FlowDelivered(amount=moved, flow_rate=canal.flow_rate, t=t))
        return moved

    def reset(self) -> None:
        """Reset all regions and canals for a fresh simulation run.

        Preserves topology, restores initial levels and clears the hour
        counter, penalties and solved flag.
        """
        for region in self._regions.values():
            region.reset()
        for canal in self._canals.values():
            canal.reset()
        self.hour = 0
        self.penalties = 0
        self.is_solved = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AcequiaNetwork":
        """Build a network from a scenario mapping.

        Expected layout::

            {
                "hour_limit": 168,
                "regions": [{"name", "water_level", "water_need", "water_capacity"}, ...],
                "canals": [{"name", "source", "target"}, ...],
            }
        """
        for key in ("regions", "canals"):
            if key not in data:
                raise ValidationError(f"Scenario is missing '{key}'")

        network = cls(hour_limit=data.get("hour_limit", DEFAULT_HOUR_LIMIT))
        try:
            for entry in data["regions"]:
                network.add_region(
                    Region(
                        name=entry["name"],
                        water_level=float(entry["water_level"]),
                        water_need=float(entry["water_need"]),
                        water_capacity=float(entry["water_capacity"]),
                    )
                )
            for entry in data["canals"]:
                network.add_canal(Canal(name=entry["name"], source=entry["source"], target=entry["target"]))
        except KeyError as e:
            raise ValidationError(f"Scenario entry is missing key {e}") from e

        network.validate()
        return network

    @classmethod
    def from_json(cls, path: str | Path) -> "AcequiaNetwork":
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)
