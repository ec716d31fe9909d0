# finance_planner/components/charts.py
# Plotly/pandas helpers for the compound interest value series.
# Chart functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from ..calculators.compound_interest import SeriesPoint
from .formatting import CURRENCY_PREFIX, PLOTLY_SEPARATORS

LINE_COLOR = "#171717"


# ---------- Investment growth line ----------
def growth_chart(series: Sequence[SeriesPoint],
                 title: str = "Evolução do investimento") -> go.Figure:
    """Line with markers, one point per sampled period."""
    labels = [p.label for p in series]
    amounts = [p.amount for p in series]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=amounts, mode="lines+markers", name="Valor",
        line=dict(color=LINE_COLOR, width=2),
        marker=dict(color=LINE_COLOR, size=7),
        hovertemplate=f"%{{x}}<br>{CURRENCY_PREFIX} %{{y:,.2f}}<extra></extra>"
    ))

    fig.update_layout(
        title=title,
        template="plotly_white",
        height=320,
        margin=dict(l=10, r=10, t=40, b=10),
        separators=PLOTLY_SEPARATORS,
        showlegend=False,
        xaxis_title="",
        yaxis=dict(title="", tickprefix=f"{CURRENCY_PREFIX} ", tickformat="~s"),
    )
    return fig


# ---------- Tabular view (st.dataframe / CSV) ----------
def series_frame(series: Sequence[SeriesPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        {"Período": [p.label for p in series], "Valor": [p.amount for p in series]}
    )
