"""
Validation utilities for sale records and filter input.
"""
import math
from typing import Any, Dict, Iterable, List, Optional

from sales_dashboard.utils.date_helpers import month_index, get_day_options


def missing_fields(payload: Dict[str, Any], required_fields: Iterable[str]) -> List[str]:
    """
    List the required fields that are absent or None in a payload.

    Args:
        payload (Dict[str, Any]): Raw record from the store
        required_fields (Iterable[str]): Field names that must be present

    Returns:
        List[str]: Missing field names, in the order given
    """
    return [name for name in required_fields if payload.get(name) is None]


def coerce_price(value: Any) -> Optional[float]:
    """
    Convert a stored price to a float.

    Numeric strings are accepted; booleans, NaN and infinities are not.

    Args:
        value (Any): The stored price

    Returns:
        Optional[float]: The price, or None if it is not a finite number
    """
    if isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(price) or math.isinf(price):
        return None
    return price


def validate_month_name(month_name: str) -> bool:
    """Return True if the string names a calendar month."""
    try:
        month_index(month_name)
        return True
    except (ValueError, AttributeError):
        return False


def validate_year(year: Any) -> bool:
    """Return True if the value is a plausible four-digit year."""
    try:
        return 1 <= int(year) <= 9999
    except (TypeError, ValueError):
        return False


def validate_day(day: int, month: Optional[int], year: Optional[int]) -> bool:
    """
    Check that a day is selectable for the given month and year.

    A day is only meaningful once both month and year are chosen.
    """
    return day in get_day_options(month, year)
