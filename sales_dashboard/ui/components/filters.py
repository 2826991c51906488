"""
Filter components for the dashboard.
"""
from typing import List

import streamlit as st

from sales_dashboard.config.app_config import ALL_OPTION, YEAR_OPTION_COUNT
from sales_dashboard.data.models.sales import FilterCriteria
from sales_dashboard.utils.date_helpers import MONTH_NAMES, get_year_options, month_index, month_name

CRITERIA_KEY = "filter_criteria"
MONTH_KEY = "filter_month"
YEAR_KEY = "filter_year"
DAY_KEY = "filter_day"


def get_filter_criteria() -> FilterCriteria:
    """
    Get the session's filter criteria, creating it on first use.

    Returns:
        FilterCriteria: The criteria the widgets edit
    """
    if CRITERIA_KEY not in st.session_state:
        st.session_state[CRITERIA_KEY] = FilterCriteria()
    return st.session_state[CRITERIA_KEY]


def _selected_int(key: str):
    value = st.session_state.get(key, ALL_OPTION)
    return None if value == ALL_OPTION else int(value)


def _on_month_change() -> None:
    value = st.session_state[MONTH_KEY]
    get_filter_criteria().set_month(None if value == ALL_OPTION else month_index(value))
    st.session_state[DAY_KEY] = ALL_OPTION


def _on_year_change() -> None:
    get_filter_criteria().set_year(_selected_int(YEAR_KEY))
    st.session_state[DAY_KEY] = ALL_OPTION


def _on_day_change() -> None:
    get_filter_criteria().set_day(_selected_int(DAY_KEY))


def _on_reset() -> None:
    get_filter_criteria().reset()
    for key in (MONTH_KEY, YEAR_KEY, DAY_KEY):
        st.session_state[key] = ALL_OPTION


def restore_widget_values(filter_criteria: FilterCriteria) -> None:
    """
    Put the criteria back into any selector key Streamlit has dropped.

    Streamlit deletes a widget's key on runs where the widget is not drawn
    (e.g. while the user is on the login page), so the keys are rebuilt from
    the criteria before the selectors are created.

    Args:
        filter_criteria (FilterCriteria): The session's current criteria
    """
    values = {
        MONTH_KEY: ALL_OPTION if filter_criteria.month is None else month_name(filter_criteria.month),
        YEAR_KEY: ALL_OPTION if filter_criteria.year is None else str(filter_criteria.year),
        DAY_KEY: ALL_OPTION if filter_criteria.day is None else str(filter_criteria.day),
    }
    for key, value in values.items():
        if key not in st.session_state:
            st.session_state[key] = value


def clear_filters() -> None:
    """Forget the session's criteria and selector values."""
    for key in (CRITERIA_KEY, MONTH_KEY, YEAR_KEY, DAY_KEY):
        st.session_state.pop(key, None)


def month_options() -> List[str]:
    return [ALL_OPTION] + list(MONTH_NAMES)


def year_options() -> List[str]:
    return [ALL_OPTION] + [str(year) for year in get_year_options(YEAR_OPTION_COUNT)]


def day_options(filter_criteria: FilterCriteria) -> List[str]:
    return [ALL_OPTION] + [str(day) for day in filter_criteria.day_options()]


def create_month_filter() -> str:
    """
    Create the month selector.

    Returns:
        str: Selected month name or "All"
    """
    return st.selectbox("Filter by Month", options=month_options(), key=MONTH_KEY, on_change=_on_month_change)


def create_year_filter() -> str:
    """
    Create the year selector (current year and the four before it).

    Returns:
        str: Selected year or "All"
    """
    if st.session_state.get(YEAR_KEY, ALL_OPTION) not in year_options():
        st.session_state[YEAR_KEY] = ALL_OPTION
        st.session_state[DAY_KEY] = ALL_OPTION
        get_filter_criteria().set_year(None)
    return st.selectbox("Filter by Year", options=year_options(), key=YEAR_KEY, on_change=_on_year_change)


def create_day_filter(filter_criteria: FilterCriteria) -> str:
    """
    Create the day selector. Disabled until both month and year are chosen.

    Args:
        filter_criteria (FilterCriteria): Current criteria, for the valid days

    Returns:
        str: Selected day or "All"
    """
    return st.selectbox(
        "Filter by Day",
        options=day_options(filter_criteria),
        key=DAY_KEY,
        on_change=_on_day_change,
        disabled=not filter_criteria.day_enabled
    )


def create_reset_button() -> bool:
    return st.button("Reset Filters", type="secondary", on_click=_on_reset)


def create_all_filters() -> FilterCriteria:
    """
    Create the filter row and return the current criteria.

    Returns:
        FilterCriteria: Month/year/day selectors
    """
    filter_criteria = get_filter_criteria()
    restore_widget_values(filter_criteria)

    month_col, year_col, day_col, reset_col = st.columns([3, 3, 3, 2], vertical_alignment="bottom")
    with month_col:
        create_month_filter()
    with year_col:
        create_year_filter()
    with day_col:
        create_day_filter(filter_criteria)
    with reset_col:
        create_reset_button()

    return filter_criteria
