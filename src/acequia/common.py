from dataclasses import replace
from typing import ClassVar, Self

from acequia.validation import BoundViolationError

ParamBounds = tuple[float, float]


class SkipReason(str):
    """A typed string explaining why a transfer was not scheduled."""

    __slots__ = ()


MISSING_ENTITY = SkipReason("missing_entity")
NO_DEFICIT = SkipReason("no_deficit")
NO_SURPLUS = SkipReason("no_surplus")
NO_HEADROOM = SkipReason("no_headroom")
NO_AMOUNT = SkipReason("no_amount")


class Strategy:
    """Mixin for policy settings with tunable, bounded parameters.

    Concrete strategies should:
    1. Inherit from Strategy
    2. Be frozen dataclasses
    3. Declare __params__ listing tunable field names
    """

    __params__: ClassVar[tuple[str, ...]] = ()
    __bounds__: ClassVar[dict[str, ParamBounds]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        invalid = set(cls.__bounds__) - set(cls.__params__)
        if invalid:
            raise TypeError(f"{cls.__name__}: __bounds__ references unknown params: {invalid}")

    def __post_init__(self) -> None:
        """Validate parameter values against bounds."""
        for param in self.__params__:
            if param not in self.__bounds__:
                continue
            value = getattr(self, param)
            lo, hi = self.__bounds__[param]
            if not (lo <= value <= hi):
                raise BoundViolationError(param, value, (lo, hi))

    def params(self) -> dict[str, float]:
        """Return current parameter values."""
        return {name: getattr(self, name) for name in self.__params__}

    def bounds(self) -> dict[str, ParamBounds]:
        return dict(self.__bounds__)

    def with_params(self, **kwargs: float) -> Self:
        """Create new instance with updated parameters (immutable)."""
        invalid = set(kwargs) - set(self.__params__)
        if invalid:
            raise ValueError(f"Unknown parameters: {invalid}")
        return replace(self, **kwargs)
