# streamlit_app.py
import os
import sys

import streamlit as st

# Make `household` and `webapp` importable when launched with `streamlit run`.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from household.config import (  # noqa: E402
    CHILDCARE_RANGE,
    SAVINGS_RATE_RANGE,
    SHARE_BASE_URL,
    SHARE_QUERY_KEY,
    TAX_RATE_RANGE,
    VARIABLE_EXPENSES_RANGE,
)
from household.utils import format_currency, format_percent  # noqa: E402
from webapp.core.chart import build_income_figure  # noqa: E402
from webapp.core.session import ScenarioSession, slider_result, slider_start  # noqa: E402

st.set_page_config(page_title="Income Scenario Calculator", layout="wide")

# The share token is read once, when the session starts.
if "session" not in st.session_state:
    st.session_state.session = ScenarioSession.from_query(st.query_params)
session: ScenarioSession = st.session_state.session
params = session.params

header_left, header_right = st.columns([4, 1])
with header_left:
    st.title("Income Scenario Calculator")
with header_right:
    share_clicked = st.button("Share Scenario", icon=":material/share:")

if share_clicked:
    st.query_params[SHARE_QUERY_KEY] = session.share_token()
    st.success("Scenario link ready. Use the copy button to share it.")
    st.code(session.share_url(SHARE_BASE_URL), language=None)


def _slider(label: str, bounds, value, fmt):
    lo, hi, step = bounds
    # a shared scenario may sit outside the slider range or between steps
    picked = st.slider(label, min_value=lo, max_value=hi, step=step, value=slider_start(value, bounds))
    kept = slider_result(value, bounds, picked)
    st.caption(fmt(kept))
    return kept


col1, col2, col3, col4 = st.columns(4)
with col1:
    variable_expenses = _slider(
        "Variable Expenses (Monthly)", VARIABLE_EXPENSES_RANGE, params.variable_expenses, format_currency
    )
with col2:
    childcare_cost = _slider("Childcare Cost (Monthly)", CHILDCARE_RANGE, params.childcare_cost, format_currency)
with col3:
    savings_rate = _slider("Target Savings Rate", SAVINGS_RATE_RANGE, params.savings_rate, format_percent)
with col4:
    lo, hi, step = TAX_RATE_RANGE
    picked_tax = st.number_input(
        "Effective Tax Rate (%)",
        min_value=lo,
        max_value=hi,
        step=step,
        value=slider_start(params.tax_rate, TAX_RATE_RANGE),
    )
    tax_rate = slider_result(params.tax_rate, TAX_RATE_RANGE, picked_tax)

params = session.update(
    variable_expenses=variable_expenses,
    childcare_cost=childcare_cost,
    savings_rate=savings_rate,
    tax_rate=tax_rate,
)

st.plotly_chart(build_income_figure(session.chart_data), use_container_width=True)

st.markdown("Notes:")
st.markdown("\n".join(f"- {note}" for note in session.notes()))

with st.expander("Data"):
    st.dataframe([p.to_wire() for p in session.chart_data], use_container_width=True)
