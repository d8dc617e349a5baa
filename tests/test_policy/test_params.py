from dataclasses import FrozenInstanceError, dataclass
from typing import ClassVar

import pytest

from acequia.common import Strategy
from acequia.policy.params import DEFAULT_PARAMS, AllocationParams
from acequia.validation import BoundViolationError


class TestAllocationParamsDefaults:
    def test_default_margins(self):
        params = AllocationParams()
        assert params.need_margin == 0.8
        assert params.capacity_margin == 0.3
        assert params.headroom_fraction == 0.8

    def test_default_instance_matches(self):
        assert DEFAULT_PARAMS == AllocationParams()

    def test_params_lists_tunables(self):
        assert AllocationParams().params() == {
            "need_margin": 0.8,
            "capacity_margin": 0.3,
            "headroom_fraction": 0.8,
        }

    def test_bounds_are_unit_interval(self):
        bounds = AllocationParams().bounds()
        assert set(bounds) == {"need_margin", "capacity_margin", "headroom_fraction"}
        assert all(b == (0.0, 1.0) for b in bounds.values())


class TestAllocationParamsValidation:
    @pytest.mark.parametrize("name", ["need_margin", "capacity_margin", "headroom_fraction"])
    def test_rejects_above_bounds(self, name):
        with pytest.raises(BoundViolationError, match=name):
            AllocationParams(**{name: 1.5})

    @pytest.mark.parametrize("name", ["need_margin", "capacity_margin", "headroom_fraction"])
    def test_rejects_below_bounds(self, name):
        with pytest.raises(BoundViolationError):
            AllocationParams(**{name: -0.1})

    @pytest.mark.parametrize("value", [0.0, 1.0])
    def test_accepts_closed_interval_ends(self, value):
        params = AllocationParams(need_margin=value, capacity_margin=value, headroom_fraction=value)
        assert set(params.params().values()) == {value}

    def test_bound_violation_is_value_error(self):
        with pytest.raises(ValueError):
            AllocationParams(headroom_fraction=2.0)

    def test_error_carries_details(self):
        with pytest.raises(BoundViolationError) as exc_info:
            AllocationParams(need_margin=3.0)
        assert exc_info.value.param == "need_margin"
        assert exc_info.value.value == 3.0
        assert exc_info.value.bounds == (0.0, 1.0)


class TestAllocationParamsImmutability:
    def test_frozen(self):
        params = AllocationParams()
        with pytest.raises(FrozenInstanceError):
            params.need_margin = 0.5

    def test_with_params_returns_new_instance(self):
        params = AllocationParams()
        updated = params.with_params(headroom_fraction=0.5)

        assert updated.headroom_fraction == 0.5
        assert params.headroom_fraction == 0.8

    def test_with_params_validates(self):
        with pytest.raises(BoundViolationError):
            AllocationParams().with_params(need_margin=1.2)

    def test_with_params_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown parameters"):
            AllocationParams().with_params(speed=1.0)


class TestStrategySubclassing:
    def test_bounds_for_unknown_param_rejected(self):
        with pytest.raises(TypeError, match="unknown params"):

            @dataclass(frozen=True)
            class Broken(Strategy):
                __params__: ClassVar[tuple[str, ...]] = ("a",)
                __bounds__: ClassVar[dict[str, tuple[float, float]]] = {"b": (0.0, 1.0)}
                a: float = 0.5

    def test_unbounded_param_is_not_checked(self):
        @dataclass(frozen=True)
        class Loose(Strategy):
            __params__: ClassVar[tuple[str, ...]] = ("a",)
            a: float = 99.0

        assert Loose().params() == {"a": 99.0}
