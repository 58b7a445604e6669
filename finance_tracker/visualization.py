"""Plotly visualisation helpers for the finance tracker reports.

Each function accepts one of the report objects produced by
:mod:`finance_tracker.aggregation` or :mod:`finance_tracker.budgets` and
returns an interactive ``plotly.graph_objects.Figure``.  Empty inputs
yield an empty figure titled "No data to display" so that callers can
render the result unconditionally.

Amounts are never formatted here beyond hover labels; masking of amounts
is controlled by the ``visible`` flag passed through to
:func:`finance_tracker.formatting.format_currency`.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .aggregation import IncomeExpense
from .formatting import format_currency

INCOME_COLOR = "#82ca9d"
EXPENSE_COLOR = "#ff6b6b"
BALANCE_COLOR = "#8884d8"
CATEGORY_COLORS = [
    "#8884d8", "#82ca9d", "#ffc658", "#ff8042", "#a4de6c",
    "#d0ed57", "#ff7300", "#0088FE", "#00C49F", "#FFBB28",
]


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_category_pie_chart(
    breakdown: pd.DataFrame,
    title: str | None = None,
    visible: bool = True,
) -> go.Figure:
    """Generate a donut chart of totals per category.

    Parameters
    ----------
    breakdown : pandas.DataFrame
        Output of :func:`~finance_tracker.aggregation.category_breakdown`
        with ``Category`` and ``Total`` columns.
    title : str, optional
        Chart title.
    visible : bool
        Whether amounts are shown in hover labels.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart.
    """
    if breakdown.empty:
        return _empty_figure()
    df = breakdown.copy()
    df["Label"] = df["Total"].apply(lambda v: format_currency(v, visible=visible))
    fig = px.pie(
        df,
        names="Category",
        values="Total",
        hole=0.5,
        color_discrete_sequence=CATEGORY_COLORS,
        custom_data=["Label"],
    )
    fig.update_traces(textinfo="percent", hovertemplate="%{label}: %{customdata[0]}<extra></extra>")
    fig.update_layout(title=title or "Expenses by category")
    return fig


def create_income_expense_chart(summary: IncomeExpense, title: str | None = None) -> go.Figure:
    """Render total income and outflow side by side."""
    if summary.income == 0 and summary.expense == 0:
        return _empty_figure()
    fig = go.Figure(
        data=[
            go.Bar(name="Income", x=["Total"], y=[float(summary.income)], marker_color=INCOME_COLOR),
            go.Bar(name="Expense", x=["Total"], y=[float(summary.expense)], marker_color=EXPENSE_COLOR),
        ]
    )
    fig.update_layout(title=title or "Income vs. expenses", barmode="group", yaxis_title="Amount")
    return fig


def create_monthly_balance_chart(monthly: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Visualise monthly income, expenses and balance including projections.

    Parameters
    ----------
    monthly : pandas.DataFrame
        Output of :func:`~finance_tracker.aggregation.monthly_balance`.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Grouped bars for income/expense with a balance line; projected
        months are drawn with reduced opacity.
    """
    if monthly.empty:
        return _empty_figure()
    opacity = monthly["Projection"].map({True: 0.45, False: 1.0}).tolist()
    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Income", x=monthly["Month"], y=monthly["Income"],
        marker=dict(color=INCOME_COLOR, opacity=opacity),
    ))
    fig.add_trace(go.Bar(
        name="Expense", x=monthly["Month"], y=monthly["Expense"],
        marker=dict(color=EXPENSE_COLOR, opacity=opacity),
    ))
    fig.add_trace(go.Scatter(
        name="Balance", x=monthly["Month"], y=monthly["Balance"],
        mode="lines+markers", line=dict(color=BALANCE_COLOR),
    ))
    fig.update_layout(
        title=title or "Monthly balance",
        barmode="group",
        xaxis_title="Month",
        yaxis_title="Amount",
    )
    return fig


def create_trend_chart(trend: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Generate a line chart of daily totals from :func:`daily_trend`."""
    if trend.empty:
        return _empty_figure()
    fig = px.line(trend, x="Date", y="Total", markers=True)
    fig.update_traces(line_color=EXPENSE_COLOR)
    fig.update_layout(title=title or "Expense trend", xaxis_title="Date", yaxis_title="Amount")
    return fig


def create_budget_progress_chart(progress: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Horizontal bars of percent used per budget, red when overspent."""
    if progress.empty:
        return _empty_figure()
    colors = [EXPENSE_COLOR if status == "Over" else INCOME_COLOR for status in progress["Status"]]
    fig = go.Figure(go.Bar(
        x=progress["Percent Used"],
        y=progress["Budget"],
        orientation="h",
        marker_color=colors,
        text=[f"{value:.0f}%" for value in progress["Percent Used"]],
        textposition="auto",
    ))
    fig.update_layout(
        title=title or "Budget progress",
        xaxis=dict(title="Percent used", range=[0, 100]),
        yaxis_title="Budget",
    )
    return fig
