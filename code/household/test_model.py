import math

import pytest

from household.model import required_income, take_home_pay
from household.utils import ieee_div


def test_no_savings_no_tax_is_annualized():
    assert required_income(1000, 0, 0) == 12000


def test_half_savings_doubles():
    assert required_income(1000, 0.5, 0) == 24000


def test_half_tax_doubles():
    assert required_income(1000, 0, 0.5) == 24000


@pytest.mark.parametrize("expenses", [0, 1, 2500, 13000, 99999.5])
@pytest.mark.parametrize("savings", [0, 0.1, 0.2, 0.75])
@pytest.mark.parametrize("tax", [0, 0.22, 0.41, 0.9])
def test_gross_up_never_below_annual_expenses(expenses, savings, tax):
    assert required_income(expenses, savings, tax) >= expenses * 12


def test_rate_of_one_is_infinite():
    assert required_income(1000, 1, 0) == math.inf
    assert required_income(1000, 0, 1) == math.inf


def test_rate_above_one_goes_negative():
    assert required_income(1000, 0, 1.5) < 0


def test_zero_over_zero_is_nan():
    assert math.isnan(ieee_div(0, 0))


def test_take_home_only_subtracts_base_expenses():
    gross = required_income(5000, 0.1, 0.41)
    expected = gross * 0.59 - 60000
    assert take_home_pay(gross, 0.41, 5000) == pytest.approx(expected)
