import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from acequia.network.protocols import CanalControl, RegionView
from acequia.validation import TopologyError

logger = logging.getLogger(__name__)

NORTH = "North"
SOUTH = "South"
EAST = "East"
REGION_NAMES = (NORTH, SOUTH, EAST)


class CanalRole(Enum):
    """Logical role of each canal: (source region, destination region, name key)."""

    NORTH_TO_SOUTH = (NORTH, SOUTH, "A")
    SOUTH_TO_EAST = (SOUTH, EAST, "B")
    NORTH_TO_EAST = (NORTH, EAST, "C")
    EAST_TO_NORTH = (EAST, NORTH, "D")

    def __init__(self, source: str, destination: str, key: str) -> None:
        self.source = source
        self.destination = destination
        self.key = key

    def __str__(self) -> str:
        return f"{self.source}->{self.destination}"


PRIORITY: tuple[CanalRole, ...] = (
    CanalRole.NORTH_TO_SOUTH,
    CanalRole.NORTH_TO_EAST,
    CanalRole.SOUTH_TO_EAST,
    CanalRole.EAST_TO_NORTH,
)


def _match_role(name: str, keys: Mapping[CanalRole, str]) -> CanalRole | None:
    # First key found as a whole word wins, in role declaration order
    for role in CanalRole:
        if re.search(rf"\b{re.escape(keys[role])}\b", name):
            return role
    return None


@dataclass(frozen=True)
class Topology:
    """Regions and canals of the three-region network, resolved by role."""

    regions: Mapping[str, RegionView | None]
    canals: Mapping[CanalRole, CanalControl | None]
    all_canals: tuple[CanalControl, ...]

    def region(self, name: str) -> RegionView | None:
        return self.regions.get(name)

    def canal(self, role: CanalRole) -> CanalControl | None:
        return self.canals.get(role)

    @property
    def is_complete(self) -> bool:
        return all(r is not None for r in self.regions.values()) and all(c is not None for c in self.canals.values())

    @classmethod
    def resolve(
        cls,
        regions: Iterable[RegionView],
        canals: Iterable[CanalControl],
        *,
        strict: bool = True,
        keys: Mapping[CanalRole, str] | None = None,
    ) -> "Topology":
        """Match regions by exact name and canals by a whole-word name key.

        In strict mode any missing region, missing or duplicated role, or a
        canal wired between the wrong regions raises TopologyError. Otherwise
        the gaps are left as None and logged.
        """
        role_keys = {role: role.key for role in CanalRole}
        if keys is not None:
            role_keys.update(keys)

        problems: list[str] = []

        found_regions: dict[str, RegionView | None] = dict.fromkeys(REGION_NAMES)
        for region in regions:
            if region.name in found_regions:
                found_regions[region.name] = region
        for name, region in found_regions.items():
            if region is None:
                problems.append(f"Region '{name}' not found")

        all_canals = tuple(canals)
        found_canals: dict[CanalRole, CanalControl | None] = dict.fromkeys(CanalRole)
        for canal in all_canals:
            role = _match_role(canal.name, role_keys)
            if role is None:
                continue
            if found_canals[role] is not None:
                holder = found_canals[role].name
                problems.append(f"Canal '{canal.name}' duplicates role {role} already held by '{holder}'")
                continue
            source = getattr(canal, "source", role.source)
            target = getattr(canal, "target", role.destination)
            if (source, target) != (role.source, role.destination):
                problems.append(f"Canal '{canal.name}' connects {source}->{target}, expected {role}")
                continue
            found_canals[role] = canal
        for role, canal in found_canals.items():
            if canal is None:
                problems.append(f"No canal found for role {role} (key '{role_keys[role]}')")

        if problems:
            if strict:
                raise TopologyError(problems)
            for problem in problems:
                logger.warning("topology: %s", problem)

        return cls(regions=found_regions, canals=found_canals, all_canals=all_canals)
