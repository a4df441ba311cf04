from typing import List

import plotly.graph_objects as go

from household.config import (
    COLOR_SCHEME,
    MEDIAN_HOUSEHOLD_INCOME,
    MEDIAN_HOUSEHOLD_INCOME_LABEL,
    SERIES_LABELS,
)
from household.schemas import DataPoint

SERIES = ("with_childcare", "without_childcare", "take_home_pay")


def build_income_figure(points: List[DataPoint]) -> go.Figure:
    """Line chart of the three income series over monthly housing cost."""
    x = [p.housing_cost for p in points]
    fig = go.Figure()
    for key in SERIES:
        fig.add_trace(go.Scatter(
            x=x,
            y=[getattr(p, key) for p in points],
            mode="lines",
            name=SERIES_LABELS[key],
            line=dict(color=COLOR_SCHEME[key], width=2, shape="spline"),
            hovertemplate="%{y:$,.0f}<extra>%{fullData.name}</extra>",
        ))

    fig.add_hline(
        y=MEDIAN_HOUSEHOLD_INCOME,
        line_dash="dash",
        line_color=COLOR_SCHEME["reference_line"],
        annotation_text=MEDIAN_HOUSEHOLD_INCOME_LABEL,
        annotation_position="right",
        annotation_font_color=COLOR_SCHEME["reference_line"],
    )

    fig.update_layout(
        xaxis=dict(title="Monthly Housing Cost", tickformat="$,.0f", nticks=8),
        yaxis=dict(title="Annual Income", tickformat="$,.0f", nticks=12),
        hovermode="x unified",
        margin=dict(t=20, r=30, l=20, b=20),
        legend=dict(orientation="h", yanchor="top", y=-0.15),
    )
    return fig
