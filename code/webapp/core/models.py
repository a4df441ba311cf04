from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from household.config import MEDIAN_HOUSEHOLD_INCOME, MEDIAN_HOUSEHOLD_INCOME_LABEL
from household.schemas import DataPoint, ScenarioParameters


class Scenario(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    variable_expenses: float = Field(ge=0, default=3000, alias="variableExpenses")
    childcare_cost: float = Field(ge=0, default=3000, alias="childcareCost")
    savings_rate: float = Field(ge=0, lt=100, default=10, alias="savingsRate")
    tax_rate: float = Field(ge=0, lt=100, default=41, alias="taxRate")

    def to_params(self) -> ScenarioParameters:
        return ScenarioParameters.create(
            variable_expenses=self.variable_expenses,
            childcare_cost=self.childcare_cost,
            savings_rate=self.savings_rate,
            tax_rate=self.tax_rate,
        )

    @classmethod
    def from_params(cls, params: ScenarioParameters) -> "Scenario":
        return cls.model_validate(params.to_wire())


class Point(BaseModel):
    housingCost: float
    withChildcare: float
    withoutChildcare: float
    takeHomePay: float

    @classmethod
    def from_data_point(cls, point: DataPoint) -> "Point":
        return cls(**point.to_wire())


class ReferenceLine(BaseModel):
    value: float = MEDIAN_HOUSEHOLD_INCOME
    label: str = MEDIAN_HOUSEHOLD_INCOME_LABEL


class SweepResponse(BaseModel):
    scenario: Scenario
    points: List[Point]
    reference: ReferenceLine = ReferenceLine()
    notes: List[str]


class ShareRequest(BaseModel):
    scenario: Scenario
    base_url: Optional[str] = None


class ShareResponse(BaseModel):
    token: str
    url: str


class ScenarioLookup(BaseModel):
    scenario: Scenario
    source: Literal["shared", "default"]
