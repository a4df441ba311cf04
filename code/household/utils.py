import math


def ieee_div(a: float, b: float) -> float:
    """Float division that returns inf/nan on a zero divisor instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def format_currency(value: float) -> str:
    # en-US USD, whole dollars
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    rounded = round(value)
    if rounded < 0:
        return f"-${abs(rounded):,.0f}"
    return f"${rounded:,.0f}"


def format_percent(value: float) -> str:
    return f"{value:g}%"
