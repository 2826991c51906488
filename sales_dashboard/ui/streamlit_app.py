"""
Streamlit web interface for the sales dashboard.
"""
import os
import sys

import streamlit as st

# Add the parent directory to the path so we can import the package
# This is only needed when running the script directly
parent_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from sales_dashboard.config.app_config import (
    DASHBOARD_URL_PATH,
    LOGIN_URL_PATH,
    PAGE_ICON,
    PAGE_TITLE,
)
from sales_dashboard.ui.navigation import register_page
from sales_dashboard.ui.views.dashboard import render_dashboard
from sales_dashboard.ui.views.login import render_login
from sales_dashboard.utils.logging_config import setup_logging

setup_logging()

# Set page configuration
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide"
)

dashboard_page = st.Page(render_dashboard, title="Dashboard", url_path=DASHBOARD_URL_PATH, default=True)
login_page = st.Page(render_login, title="Login", url_path=LOGIN_URL_PATH)

for page in (dashboard_page, login_page):
    register_page(page)

st.navigation([dashboard_page, login_page], position="hidden").run()
