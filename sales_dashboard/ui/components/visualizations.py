"""
Visualization components for the sales dashboard.
"""
from typing import List, Tuple, Union

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from sales_dashboard.config.app_config import (
    CASH_SERIES,
    CHART_HEIGHT,
    CURRENCY_PREFIX,
    EMPTY_SALES_TEXT,
    ONLINE_SERIES,
    SERIES_COLORS,
)
from sales_dashboard.data.models.sales import SalesSummary
from sales_dashboard.utils.formatting import (
    format_currency,
    format_phone,
    format_sold_time,
    format_transactions,
)

PRICE_COLUMN = f"Price ({CURRENCY_PREFIX})"
TABLE_COLUMNS = ["Product Name", PRICE_COLUMN, "Payment Method", "Phone Number", "Sold At"]

# Title, value, subvalue
StatCard = Tuple[str, Union[str, int], str]

HOVER_TEMPLATE = f"%{{x}}<br>%{{fullData.name}}: {CURRENCY_PREFIX} %{{y:.2f}}<extra></extra>"


def today_cards(summary: SalesSummary) -> List[StatCard]:
    return [
        ("Total Sells", summary.count, format_currency(summary.total)),
        ("Cash Sales", format_currency(summary.cash_total), format_transactions(summary.cash_count)),
        ("Online Sales", format_currency(summary.online_total), format_transactions(summary.online_count)),
    ]


def total_cards(summary: SalesSummary) -> List[StatCard]:
    return [
        ("Total Products Sold", summary.count, format_currency(summary.total)),
        ("Total Cash Sales", format_currency(summary.cash_total), format_transactions(summary.cash_count)),
        ("Total Online Sales", format_currency(summary.online_total), format_transactions(summary.online_count)),
    ]


def create_stat_cards(cards: List[StatCard]) -> None:
    """
    Display a row of stat cards.

    Args:
        cards (List[StatCard]): (title, value, subvalue) per card
    """
    columns = st.columns(len(cards))
    for column, (title, value, subvalue) in zip(columns, cards):
        with column.container(border=True):
            st.metric(title, value)
            st.caption(subvalue)


def build_line_chart(monthly: pd.DataFrame) -> go.Figure:
    """
    Build the monthly line chart.

    Args:
        monthly (pd.DataFrame): Output of ``monthly_totals``

    Returns:
        go.Figure: Cash and online lines over the twelve months
    """
    fig = go.Figure()
    for series in (CASH_SERIES, ONLINE_SERIES):
        fig.add_trace(go.Scatter(
            x=monthly["month"],
            y=monthly[series],
            name=series,
            mode="lines+markers",
            line=dict(color=SERIES_COLORS[series], width=2, shape="spline"),
            hovertemplate=HOVER_TEMPLATE
        ))
    return _apply_layout(fig)


def build_bar_chart(monthly: pd.DataFrame) -> go.Figure:
    """
    Build the grouped bar chart of the same monthly series.

    Args:
        monthly (pd.DataFrame): Output of ``monthly_totals``

    Returns:
        go.Figure: Cash and online bars per month
    """
    fig = go.Figure()
    for series in (CASH_SERIES, ONLINE_SERIES):
        fig.add_trace(go.Bar(
            x=monthly["month"],
            y=monthly[series],
            name=series,
            marker_color=SERIES_COLORS[series],
            hovertemplate=HOVER_TEMPLATE
        ))
    fig.update_layout(barmode="group")
    return _apply_layout(fig)


def _apply_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=10, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=-0.25, xanchor="center", x=0.5),
        plot_bgcolor="white"
    )
    fig.update_xaxes(showgrid=True, gridcolor="#e5e7eb", griddash="dash")
    fig.update_yaxes(showgrid=True, gridcolor="#e5e7eb", griddash="dash")
    return fig


def create_chart_card(title: str, fig: go.Figure) -> None:
    with st.container(border=True):
        st.subheader(title)
        st.plotly_chart(fig, use_container_width=True)


def build_sales_table(sales: pd.DataFrame) -> pd.DataFrame:
    """
    Prepare the sale list for display.

    Args:
        sales (pd.DataFrame): Sales to show

    Returns:
        pd.DataFrame: Display columns with formatted values
    """
    if sales.empty:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    return pd.DataFrame({
        "Product Name": sales["name"].to_numpy(),
        PRICE_COLUMN: [f"{price:.2f}" for price in sales["price"]],
        "Payment Method": sales["payment_method"].str.capitalize().to_numpy(),
        "Phone Number": [format_phone(phone) for phone in sales["phone_number"]],
        "Sold At": [format_sold_time(sold_at) for sold_at in sales["sold_at"]],
    })


def create_sales_table(title: str, sales: pd.DataFrame) -> None:
    """
    Display a sale list card with its total.

    Args:
        title (str): Card title
        sales (pd.DataFrame): Sales to show
    """
    with st.container(border=True):
        st.subheader(title)
        if sales.empty:
            st.caption(EMPTY_SALES_TEXT)
        else:
            st.dataframe(build_sales_table(sales), hide_index=True, use_container_width=True)
        st.markdown(f"**Total Cost: {format_currency(float(sales['price'].sum()))}**")
