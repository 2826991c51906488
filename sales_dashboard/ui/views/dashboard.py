"""
Dashboard page: filters, today/total overviews, charts and sale lists.
"""
import atexit

import streamlit as st

from sales_dashboard.analysis.aggregations import monthly_totals, summarize
from sales_dashboard.analysis.filters import filter_sales, today_sales
from sales_dashboard.auth.session import SessionContext, handle_logout
from sales_dashboard.config.app_config import BAR_CHART_TITLE, LINE_CHART_TITLE, REFRESH_INTERVAL_SECONDS
from sales_dashboard.data.connectors.firebase_connector import get_connector
from sales_dashboard.data.live_feed import LiveSalesFeed
from sales_dashboard.data.repositories.sales_repository import SalesRepository
from sales_dashboard.ui.components.filters import clear_filters, create_all_filters, get_filter_criteria
from sales_dashboard.ui.components.header import create_header
from sales_dashboard.ui.components.visualizations import (
    build_bar_chart,
    build_line_chart,
    create_chart_card,
    create_sales_table,
    create_stat_cards,
    today_cards,
    total_cards,
)
from sales_dashboard.ui.navigation import go_to_login
from sales_dashboard.utils.errors import BackendConnectionError


@st.cache_resource
def initialize_repository() -> SalesRepository:
    """Initialize the backend connection and the sales repository."""
    return SalesRepository(get_connector())


@st.cache_resource
def initialize_feed() -> LiveSalesFeed:
    """
    Create the process-wide live feed.

    Every session reads the same ``sell`` collection, so one listener serves
    them all. It is cancelled when the process exits.
    """
    feed = LiveSalesFeed(initialize_repository())
    atexit.register(feed.stop)
    return feed


def get_feed() -> LiveSalesFeed:
    """
    Get the shared live feed, starting it if needed.

    Returns:
        LiveSalesFeed: The running (or failed) feed
    """
    feed = initialize_feed()
    feed.start()
    return feed


@st.fragment(run_every=REFRESH_INTERVAL_SECONDS)
def render_overview() -> None:
    """
    Render everything derived from the sale list.

    Re-runs on a timer to pick up the feed's latest snapshot.
    """
    state = initialize_feed().state()

    if state.error:
        st.error(f"Live sales data is unavailable: {state.error}")
    elif not state.loaded:
        st.info("Waiting for sales data...")

    filter_criteria = get_filter_criteria()
    sales = state.sales
    filtered = filter_sales(sales, filter_criteria)
    today = today_sales(sales, filtered, filter_criteria)

    st.header("Todays Overview")
    create_stat_cards(today_cards(summarize(today)))
    create_sales_table("Todays Sell List", today)

    st.header("Total Overview")
    create_stat_cards(total_cards(summarize(filtered)))

    monthly = monthly_totals(filtered)
    line_col, bar_col = st.columns(2)
    with line_col:
        create_chart_card(LINE_CHART_TITLE, build_line_chart(monthly))
    with bar_col:
        create_chart_card(BAR_CHART_TITLE, build_bar_chart(monthly))

    create_sales_table("Sell List", filtered)


def render_dashboard() -> None:
    """
    Dashboard page entry point.
    """
    session = SessionContext(st.session_state)
    if not session.signed_in:
        go_to_login()

    try:
        get_feed()
    except BackendConnectionError as e:
        st.error(f"Could not connect to the sales database: {str(e)}")
        st.stop()

    if create_header(session.email):
        signed_out = handle_logout(
            initialize_repository().connector.auth,
            session,
            navigate=go_to_login,
            on_signed_out=clear_filters
        )
        if not signed_out:
            st.toast("Sign-out failed. Please try again.")

    st.title("Dashboard")
    create_all_filters()
    render_overview()
