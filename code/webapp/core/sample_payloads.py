SAMPLE_SCENARIO = {
    "variableExpenses": 4500,
    "childcareCost": 2500,
    "savingsRate": 15,
    "taxRate": 35,
}

SAMPLE_SHARE_REQUEST = {
    "scenario": SAMPLE_SCENARIO,
    "base_url": "https://calc.example.org/",
}

# taxRate at 100 would divide by zero
INVALID_SCENARIO = {
    "variableExpenses": 3000,
    "childcareCost": 3000,
    "savingsRate": 10,
    "taxRate": 100,
}
