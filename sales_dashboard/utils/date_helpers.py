"""
Calendar helpers for the sales dashboard.

Month names are a fixed English table rather than ``calendar.month_name``,
which follows the process locale.
"""
import calendar
from datetime import date, datetime
from typing import List, Optional

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)


def month_index(month_name: str) -> int:
    """
    Convert a month name to its calendar index.

    Args:
        month_name (str): Full or three-letter month name, any case

    Returns:
        int: Month number from 1 (January) to 12 (December)

    Raises:
        ValueError: If the name is not a month
    """
    key = month_name.strip().lower()
    for index, name in enumerate(MONTH_NAMES, start=1):
        if key in (name.lower(), name[:3].lower()):
            return index
    raise ValueError(f"Unknown month name: {month_name!r}")


def month_name(index: int) -> str:
    """Return the full English name for a month number (1-12)."""
    if not 1 <= index <= 12:
        raise ValueError(f"Month index out of range: {index}")
    return MONTH_NAMES[index - 1]


def days_in_month(month: int, year: int) -> int:
    """
    Get the number of days in a month, accounting for leap years.

    Args:
        month (int): Month number (1-12)
        year (int): Four-digit year

    Returns:
        int: Number of days in the month
    """
    return calendar.monthrange(year, month)[1]


def get_day_options(month: Optional[int], year: Optional[int]) -> List[int]:
    """
    Get the selectable day numbers for a month and year.

    Args:
        month (Optional[int]): Month number, or None when unset
        year (Optional[int]): Year, or None when unset

    Returns:
        List[int]: Days 1..N, or an empty list if month or year is unset
    """
    if month is None or year is None:
        return []
    return list(range(1, days_in_month(month, year) + 1))


def get_year_options(count: int = 5, today: Optional[date] = None) -> List[int]:
    """
    Get the selectable years, most recent first.

    Args:
        count (int): Number of years to offer
        today (Optional[date]): Reference date (default: today)

    Returns:
        List[int]: The current year followed by the previous count - 1 years
    """
    current_year = (today or date.today()).year
    return [current_year - offset for offset in range(count)]


def parse_sold_at(value: str) -> datetime:
    """
    Parse a sale timestamp.

    Accepts ISO 8601 strings, including the trailing ``Z`` produced by
    JavaScript's ``Date.toISOString``. Timezone-aware values are converted
    to local time so calendar filters match the wall clock of the viewer.

    Args:
        value (str): Timestamp string

    Returns:
        datetime: Naive local datetime

    Raises:
        ValueError: If the value is not a parseable timestamp
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
