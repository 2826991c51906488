"""
Tests for the calendar helpers.
"""
from datetime import date, datetime, timezone

import pytest

from sales_dashboard.utils.date_helpers import (
    MONTH_NAMES,
    days_in_month,
    get_day_options,
    get_year_options,
    month_index,
    month_name,
    parse_sold_at,
)


class TestMonthNames:
    """Month name <-> index conversion."""

    def test_every_month_round_trips(self):
        for index, name in enumerate(MONTH_NAMES, start=1):
            assert month_index(name) == index
            assert month_name(index) == name

    def test_abbreviations_and_case(self):
        assert month_index("feb") == 2
        assert month_index("  DECEMBER ") == 12

    def test_unknown_month(self):
        with pytest.raises(ValueError):
            month_index("Smarch")

    def test_month_name_out_of_range(self):
        with pytest.raises(ValueError):
            month_name(13)


class TestDayOptions:
    """Days offered by the day selector."""

    def test_february_leap_year(self):
        assert days_in_month(2, 2024) == 29
        assert get_day_options(2, 2024)[-1] == 29
        assert len(get_day_options(2, 2024)) == 29

    def test_february_common_year(self):
        assert len(get_day_options(2, 2023)) == 28

    def test_century_rule(self):
        assert len(get_day_options(2, 1900)) == 28
        assert len(get_day_options(2, 2000)) == 29

    def test_january_any_year(self):
        for year in (1999, 2023, 2024):
            assert get_day_options(1, year) == list(range(1, 32))

    def test_unset_month_or_year(self):
        assert get_day_options(None, 2024) == []
        assert get_day_options(3, None) == []
        assert get_day_options(None, None) == []


class TestYearOptions:

    def test_current_and_four_previous(self):
        assert get_year_options(5, today=date(2026, 10, 19)) == [2026, 2025, 2024, 2023, 2022]


class TestParseSoldAt:
    """Parsing of stored sale timestamps."""

    def test_naive_iso(self):
        assert parse_sold_at("2024-01-05T10:30:00") == datetime(2024, 1, 5, 10, 30)

    def test_date_only(self):
        assert parse_sold_at("2024-01-05") == datetime(2024, 1, 5)

    def test_utc_suffix_converted_to_local_time(self):
        expected = datetime(2024, 1, 5, 10, 30, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
        assert parse_sold_at("2024-01-05T10:30:00.000Z") == expected

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", None, 1704450600])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            parse_sold_at(value)
