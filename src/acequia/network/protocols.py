from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class RegionView(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def water_level(self) -> float: ...

    @property
    def water_need(self) -> float: ...

    @property
    def water_capacity(self) -> float: ...


@runtime_checkable
class CanalControl(Protocol):
    @property
    def name(self) -> str: ...

    def set_flow_rate(self, rate: float) -> None: ...

    def toggle_open(self, is_open: bool) -> None: ...


@runtime_checkable
class Engine(Protocol):
    """What the allocation policy needs from a simulation engine."""

    @property
    def regions(self) -> Sequence[RegionView]: ...

    @property
    def canals(self) -> Sequence[CanalControl]: ...

    @property
    def is_solved(self) -> bool: ...

    @property
    def hour(self) -> int: ...

    @property
    def hour_limit(self) -> int: ...

    def advance_one_hour(self) -> None: ...
