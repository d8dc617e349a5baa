from typing import Any

from acequia.network import AcequiaNetwork, Canal, Region
from acequia.policy.topology import EAST, NORTH, SOUTH, CanalRole

__all__ = [
    "STANDARD_CANALS",
    "make_region",
    "make_canal",
    "make_network",
]


STANDARD_CANALS: dict[CanalRole, str] = {role: f"Canal {role.key}" for role in CanalRole}


# --- Factory Functions ---


def make_region(name: str = NORTH, **overrides: Any) -> Region:
    overrides.setdefault("water_level", 50.0)
    overrides.setdefault("water_need", 50.0)
    overrides.setdefault("water_capacity", 100.0)
    return Region(name=name, **overrides)


def make_canal(role: CanalRole, name: str | None = None) -> Canal:
    return Canal(name=name or STANDARD_CANALS[role], source=role.source, target=role.destination)


# --- Network Builder ---


def make_network(
    north: dict[str, float] | None = None,
    south: dict[str, float] | None = None,
    east: dict[str, float] | None = None,
    *,
    hour_limit: int = 24,
    canals: tuple[CanalRole, ...] = tuple(CanalRole),
    validate: bool = True,
) -> AcequiaNetwork:
    """Build the three-region network with the standard canal names."""
    network = AcequiaNetwork(hour_limit=hour_limit)
    network.add_region(make_region(NORTH, **(north or {})))
    network.add_region(make_region(SOUTH, **(south or {})))
    network.add_region(make_region(EAST, **(east or {})))
    for role in canals:
        network.add_canal(make_canal(role))
    if validate:
        network.validate()
    return network
