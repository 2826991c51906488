"""
Date filters over the in-memory sale list.
"""
from datetime import date
from typing import Optional

import pandas as pd

from sales_dashboard.data.models.sales import FilterCriteria


def filter_sales(sales: pd.DataFrame, filter_criteria: FilterCriteria) -> pd.DataFrame:
    """
    Apply the month/year/day selectors to the sale list.

    Unset selectors match every row; set selectors are ANDed.

    Args:
        sales (pd.DataFrame): The full sale list
        filter_criteria (FilterCriteria): The selectors to apply

    Returns:
        pd.DataFrame: The matching rows, in their original order
    """
    sold_at = sales["sold_at"]
    mask = pd.Series(True, index=sales.index)

    if filter_criteria.month is not None:
        mask &= sold_at.dt.month == filter_criteria.month

    if filter_criteria.year is not None:
        mask &= sold_at.dt.year == filter_criteria.year

    if filter_criteria.day is not None:
        mask &= sold_at.dt.day == filter_criteria.day

    return sales[mask]


def sales_on(sales: pd.DataFrame, day: date) -> pd.DataFrame:
    """Return the sales made on one calendar day."""
    return sales[sales["sold_at"].dt.date == day]


def today_sales(
    sales: pd.DataFrame,
    filtered_sales: pd.DataFrame,
    filter_criteria: FilterCriteria,
    today: Optional[date] = None
) -> pd.DataFrame:
    """
    Get the sales for the "Todays Overview" section.

    While any filter is active this is the filtered set; otherwise it is the
    sales made on the current calendar day.

    Args:
        sales (pd.DataFrame): The full sale list
        filtered_sales (pd.DataFrame): The result of ``filter_sales``
        filter_criteria (FilterCriteria): The active selectors
        today (Optional[date]): Reference date (default: today)

    Returns:
        pd.DataFrame: The sales to show
    """
    if filter_criteria.is_active:
        return filtered_sales
    return sales_on(sales, today or date.today())
