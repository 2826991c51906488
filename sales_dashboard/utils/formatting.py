"""
Display formatting shared by the dashboard and the CLI.
"""
from datetime import datetime
from typing import Optional

from sales_dashboard.config.app_config import CURRENCY_PREFIX, MISSING_PHONE_TEXT


def format_currency(value: float) -> str:
    """Format an amount as ``Rs. 1234.50``."""
    return f"{CURRENCY_PREFIX} {value:.2f}"


def format_transactions(count: int) -> str:
    return f"{count} Transactions"


def format_phone(phone_number: Optional[str]) -> str:
    return phone_number if phone_number else MISSING_PHONE_TEXT


def format_sold_time(sold_at: datetime) -> str:
    """Format a sale time as 24-hour ``HH:MM``."""
    return sold_at.strftime("%H:%M")


def avatar_initial(email: Optional[str]) -> str:
    """
    Get the avatar letter for a user.

    Args:
        email (Optional[str]): The signed-in user's email

    Returns:
        str: First character of the email upper-cased, or "U" when unknown
    """
    if email:
        return email[0].upper()
    return "U"
