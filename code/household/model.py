from .utils import ieee_div


def required_income(monthly_expenses: float, savings_rate: float, tax_rate: float) -> float:
    """Gross annual income needed to cover `monthly_expenses` after savings and tax.

    Rates are fractions. Nothing is validated here: a rate of 1 or more gives
    inf or a negative number, and callers are expected to keep rates below 1.
    """
    annual_expenses = monthly_expenses * 12
    after_savings_needed = ieee_div(annual_expenses, 1 - savings_rate)
    return ieee_div(after_savings_needed, 1 - tax_rate)


def take_home_pay(gross_income: float, tax_rate: float, base_monthly_expenses: float) -> float:
    # Only housing and variable expenses are subtracted; childcare and savings are not.
    return gross_income * (1 - tax_rate) - base_monthly_expenses * 12
