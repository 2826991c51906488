"""
Login page.
"""
import streamlit as st

from sales_dashboard.auth.session import SessionContext
from sales_dashboard.data.connectors.firebase_connector import get_connector
from sales_dashboard.ui.navigation import go_to_dashboard
from sales_dashboard.utils.errors import SalesDashboardError


def render_login() -> None:
    session = SessionContext(st.session_state)
    if session.signed_in:
        go_to_dashboard()

    st.title("Sign in")

    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if not submitted:
        return

    if not email or not password:
        st.error("Enter your email and password.")
        return

    try:
        user = get_connector().auth.sign_in_with_password(email.strip(), password)
    except SalesDashboardError as e:
        st.error(f"Sign-in failed: {str(e)}")
        return

    session.sign_in(user)
    go_to_dashboard()
