"""Tests for compute_duration — elapsed years/months/days with borrowing."""

from datetime import date, datetime

from app.core.duration import compute_duration, days_in_month, format_duration

START = date(2021, 8, 15)


def test_exact_years():
    result = compute_duration(START, date(2023, 8, 15))
    assert (result.years, result.months, result.days) == (2, 0, 0)
    assert result.formatted == "2 years"


def test_borrows_month_and_year():
    result = compute_duration(START, date(2023, 8, 10))
    assert (result.years, result.months, result.days) == (1, 11, 26)
    assert result.formatted == "1 year, 11 months, 26 days"


def test_same_day_is_zero_days():
    result = compute_duration(START, START)
    assert (result.years, result.months, result.days) == (0, 0, 0)
    assert result.formatted == "0 days"


def test_january_borrows_from_previous_december():
    result = compute_duration(date(2022, 12, 20), date(2023, 1, 5))
    assert (result.years, result.months, result.days) == (0, 0, 16)


def test_march_borrows_from_leap_february():
    result = compute_duration(date(2024, 1, 30), date(2024, 3, 1))
    assert (result.years, result.months, result.days) == (0, 1, 0)
    assert result.formatted == "1 month"


def test_accepts_datetime_now():
    result = compute_duration(START, datetime(2022, 9, 16, 23, 59))
    assert result.formatted == "1 year, 1 month, 1 day"


def test_days_in_month_wraps_month_zero_to_december():
    assert days_in_month(2024, 0) == 31
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28


def test_format_skips_zero_components():
    assert format_duration(3, 0, 2) == "3 years, 2 days"
    assert format_duration(0, 5, 0) == "5 months"
    assert format_duration(0, 0, 1) == "1 day"
