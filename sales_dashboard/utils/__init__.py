"""
Utility package for the sales dashboard.
"""
from sales_dashboard.utils.date_helpers import (
    MONTH_NAMES,
    month_index,
    days_in_month,
    get_day_options,
    get_year_options,
    parse_sold_at,
)
from sales_dashboard.utils.formatting import format_currency, avatar_initial
from sales_dashboard.utils.logging_config import setup_logging, get_logger
