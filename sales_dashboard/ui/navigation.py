"""
Page registry used to move between the login and dashboard views.
"""
from typing import Any, Dict

import streamlit as st

from sales_dashboard.config.app_config import DASHBOARD_URL_PATH, LOGIN_URL_PATH

# url_path -> page, filled in by the app entry point on every run
_pages: Dict[str, Any] = {}


def register_page(page) -> None:
    _pages[page.url_path] = page


def go_to(url_path: str) -> None:
    """
    Switch to a registered page. Stops the current script run.

    Args:
        url_path (str): The page's url_path
    """
    st.switch_page(_pages[url_path])


def go_to_login() -> None:
    go_to(LOGIN_URL_PATH)


def go_to_dashboard() -> None:
    go_to(DASHBOARD_URL_PATH)
