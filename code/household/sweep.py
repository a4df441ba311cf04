from typing import List

from .config import HOUSING_RANGE
from .model import required_income, take_home_pay
from .schemas import DataPoint, ScenarioParameters


def housing_costs() -> List[int]:
    lo, hi, step = HOUSING_RANGE
    return list(range(lo, hi + 1, step))


def compute_point(housing_cost: float, params: ScenarioParameters) -> DataPoint:
    savings = params.savings_rate / 100
    tax = params.tax_rate / 100
    base_monthly_expenses = housing_cost + params.variable_expenses
    without_childcare = required_income(base_monthly_expenses, savings, tax)
    with_childcare = required_income(base_monthly_expenses + params.childcare_cost, savings, tax)
    return DataPoint(
        housing_cost=housing_cost,
        with_childcare=with_childcare,
        without_childcare=without_childcare,
        take_home_pay=take_home_pay(without_childcare, tax, base_monthly_expenses),
    )


def sweep(params: ScenarioParameters) -> List[DataPoint]:
    """Required-income series across the housing-cost axis, ascending."""
    return [compute_point(cost, params) for cost in housing_costs()]
