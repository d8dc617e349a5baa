class ValidationError(Exception):
    pass


class BoundViolationError(ValueError):
    """Raised when a value violates its declared bounds."""

    def __init__(self, param: str, value: float, bounds: tuple[float, float]):
        self.param = param
        self.value = value
        self.bounds = bounds
        lo, hi = bounds
        super().__init__(f"Parameter '{param}' value {value} outside bounds [{lo}, {hi}]")


class TopologyError(ValidationError):
    """Raised when regions or canals cannot be matched to their logical roles."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("\n".join(problems))
