"""
Header with the user menu.
"""
from typing import Optional

import streamlit as st

from sales_dashboard.utils.formatting import avatar_initial


def create_header(email: Optional[str]) -> bool:
    """
    Display the header and user menu.

    Args:
        email (Optional[str]): The signed-in user's email

    Returns:
        bool: True if "Log out" was clicked
    """
    _, menu_col = st.columns([12, 1])
    with menu_col:
        with st.popover(avatar_initial(email)):
            st.caption(email or "Signed in")
            return st.button("Log out", icon=":material/logout:", use_container_width=True)
