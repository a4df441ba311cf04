import math
from dataclasses import dataclass, asdict
from typing import Any, Dict


class InvalidScenario(ValueError):
    """Raised when scenario values would make the income model undefined."""


WIRE_FIELDS = {
    "variable_expenses": "variableExpenses",
    "childcare_cost": "childcareCost",
    "savings_rate": "savingsRate",
    "tax_rate": "taxRate",
}


def _check_number(name: str, value: Any) -> None:
    # bool is an int subclass; a slider never produces one
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidScenario(f"{name} must be a number, got {type(value).__name__}")
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidScenario(f"{name} is too large") from None
    if not math.isfinite(as_float):
        raise InvalidScenario(f"{name} must be finite")
    if as_float < 0:
        raise InvalidScenario(f"{name} must be non-negative")


@dataclass(frozen=True)
class ScenarioParameters:
    variable_expenses: float = 3000
    childcare_cost: float = 3000
    savings_rate: float = 10
    tax_rate: float = 41

    @classmethod
    def create(
        cls,
        variable_expenses: float,
        childcare_cost: float,
        savings_rate: float,
        tax_rate: float,
    ) -> "ScenarioParameters":
        """Validating constructor. Rates are percentage points and must stay below 100."""
        values = {
            "variable_expenses": variable_expenses,
            "childcare_cost": childcare_cost,
            "savings_rate": savings_rate,
            "tax_rate": tax_rate,
        }
        for name, value in values.items():
            _check_number(name, value)
        if savings_rate >= 100:
            raise InvalidScenario("savings_rate must be below 100")
        if tax_rate >= 100:
            raise InvalidScenario("tax_rate must be below 100")
        return cls(**values)

    def replace(self, **changes: Any) -> "ScenarioParameters":
        merged = asdict(self)
        merged.update(changes)
        return ScenarioParameters.create(**merged)

    def to_wire(self) -> Dict[str, Any]:
        return {wire: getattr(self, name) for name, wire in WIRE_FIELDS.items()}

    @classmethod
    def from_wire(cls, payload: Dict[str, Any]) -> "ScenarioParameters":
        missing = [wire for wire in WIRE_FIELDS.values() if wire not in payload]
        if missing:
            raise InvalidScenario(f"missing fields: {', '.join(missing)}")
        return cls.create(**{name: payload[wire] for name, wire in WIRE_FIELDS.items()})


DEFAULT_SCENARIO = ScenarioParameters()


# One point per housing-cost sample; recomputed, never stored.
@dataclass(frozen=True)
class DataPoint:
    housing_cost: float
    with_childcare: float
    without_childcare: float
    take_home_pay: float

    def to_wire(self) -> Dict[str, float]:
        return {
            "housingCost": self.housing_cost,
            "withChildcare": self.with_childcare,
            "withoutChildcare": self.without_childcare,
            "takeHomePay": self.take_home_pay,
        }
