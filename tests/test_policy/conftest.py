from dataclasses import dataclass, field

import pytest

from acequia.policy.topology import EAST, NORTH, SOUTH, CanalRole


@dataclass
class FakeRegion:
    name: str
    water_level: float
    water_need: float
    water_capacity: float


@dataclass
class SpyCanal:
    """Canal stand-in that records every call made on it."""

    name: str
    flow_rate: float = 0.0
    is_open: bool = False
    calls: list[tuple[str, object]] = field(default_factory=list)

    def set_flow_rate(self, rate: float) -> None:
        self.calls.append(("set_flow_rate", rate))
        self.flow_rate = rate

    def toggle_open(self, is_open: bool) -> None:
        self.calls.append(("toggle_open", is_open))
        self.is_open = is_open


@dataclass
class FakeEngine:
    regions: list[FakeRegion]
    canals: list[SpyCanal]
    hour_limit: int = 5
    solve_at: int | None = None
    hour: int = 0
    is_solved: bool = False
    advanced: int = 0

    def advance_one_hour(self) -> None:
        self.advanced += 1
        self.hour += 1
        if self.solve_at is not None and self.hour >= self.solve_at:
            self.is_solved = True


def make_regions(
    north: tuple[float, float, float] = (50.0, 50.0, 100.0),
    south: tuple[float, float, float] = (50.0, 50.0, 100.0),
    east: tuple[float, float, float] = (50.0, 50.0, 100.0),
) -> list[FakeRegion]:
    return [
        FakeRegion(NORTH, *north),
        FakeRegion(SOUTH, *south),
        FakeRegion(EAST, *east),
    ]


def make_canals() -> list[SpyCanal]:
    return [SpyCanal(name=f"Canal {role.key}") for role in CanalRole]


@pytest.fixture
def region_factory():
    return FakeRegion


@pytest.fixture
def regions_factory():
    return make_regions


@pytest.fixture
def spy_canal() -> SpyCanal:
    return SpyCanal(name="Canal A")


@pytest.fixture
def spy_canals() -> list[SpyCanal]:
    return make_canals()


@pytest.fixture
def engine_factory():
    def _make(regions: list[FakeRegion] | None = None, **kwargs) -> FakeEngine:
        return FakeEngine(regions=regions or make_regions(), canals=make_canals(), **kwargs)

    return _make


@pytest.fixture
def dry_south_regions() -> list[FakeRegion]:
    return make_regions(
        north=(100.0, 50.0, 200.0),
        south=(10.0, 80.0, 100.0),
        east=(50.0, 50.0, 100.0),
    )


@pytest.fixture
def canal_factory():
    return SpyCanal
