import math

from household.utils import format_currency, format_percent


def test_format_currency():
    assert format_currency(3000) == "$3,000"
    assert format_currency(75000.4) == "$75,000"
    assert format_currency(-1234.2) == "-$1,234"
    assert format_currency(0) == "$0"


def test_format_currency_non_finite():
    assert format_currency(math.inf) == "∞"
    assert format_currency(-math.inf) == "-∞"
    assert format_currency(math.nan) == "NaN"


def test_format_percent():
    assert format_percent(10) == "10%"
    assert format_percent(12.5) == "12.5%"
