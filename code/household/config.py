import os

SHARE_BASE_URL = os.getenv("INCOME_CALC_SHARE_BASE_URL", "http://localhost:8501/")
LOG_LEVEL = os.getenv("INCOME_CALC_LOG_LEVEL", "INFO").upper()

SHARE_QUERY_KEY = "scenario"

# (min, max, step); housing max is inclusive
HOUSING_RANGE = (2000, 20000, 500)
VARIABLE_EXPENSES_RANGE = (1000, 10000, 500)
CHILDCARE_RANGE = (1000, 10000, 500)
SAVINGS_RATE_RANGE = (0, 20, 1)
TAX_RATE_RANGE = (0, 99, 1)

MEDIAN_HOUSEHOLD_INCOME = 75000
MEDIAN_HOUSEHOLD_INCOME_LABEL = "Median Household Income"

COLOR_SCHEME = {
    "with_childcare": "#8B008B",
    "without_childcare": "#484848",
    "take_home_pay": "#4CAF50",
    "reference_line": "#E91E63",
}

SERIES_LABELS = {
    "with_childcare": "Required Income (With Childcare)",
    "without_childcare": "Required Income (No Childcare)",
    "take_home_pay": "Take Home Pay (After Expenses)",
}
