"""Tests for compute_countdown — pure anniversary countdown, no IO."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.core.countdown import CountdownResult, compute_countdown, occurrence_in_year

ANNIVERSARY = date(2021, 8, 15)
UTC = timezone.utc


def _as_seconds(result: CountdownResult) -> int:
    return (
        result.days * 86400 + result.hours * 3600
        + result.minutes * 60 + result.seconds
    )


def test_exact_midnight_two_weeks_before():
    result = compute_countdown(ANNIVERSARY, datetime(2024, 8, 1, tzinfo=UTC))
    assert (result.days, result.hours, result.minutes, result.seconds) == (14, 0, 0, 0)
    assert result.is_anniversary_today is False
    assert result.years_passed == 3


def test_anniversary_day_forces_zero_fields():
    result = compute_countdown(ANNIVERSARY, datetime(2024, 8, 15, 9, 0, tzinfo=UTC))
    assert result.is_anniversary_today is True
    assert (result.days, result.hours, result.minutes, result.seconds) == (0, 0, 0, 0)
    assert result.years_passed == 3


def test_anniversary_day_zero_even_just_before_midnight():
    result = compute_countdown(ANNIVERSARY, datetime(2024, 8, 15, 23, 59, 59, tzinfo=UTC))
    assert result.is_anniversary_today is True
    assert _as_seconds(result) == 0


def test_day_after_anniversary_rolls_to_next_year():
    now = datetime(2024, 8, 16, tzinfo=UTC)
    result = compute_countdown(ANNIVERSARY, now)
    assert result.is_anniversary_today is False
    assert result.days == 364
    assert _as_seconds(result) == int(
        (datetime(2025, 8, 15, tzinfo=UTC) - now).total_seconds()
    )


def test_decomposition_truncates_to_whole_seconds():
    now = datetime(2024, 8, 14, 22, 58, 30, 750_000, tzinfo=UTC)
    result = compute_countdown(ANNIVERSARY, now)
    assert (result.days, result.hours, result.minutes, result.seconds) == (0, 1, 1, 29)


@pytest.mark.parametrize("now", [
    datetime(2023, 1, 1, 0, 0, 1, tzinfo=UTC),
    datetime(2023, 8, 14, 12, 30, tzinfo=UTC),
    datetime(2023, 12, 31, 23, 59, 59, tzinfo=UTC),
    datetime(2024, 2, 29, 6, 15, 42, tzinfo=UTC),
])
def test_components_sum_to_gap_before_next_occurrence(now):
    result = compute_countdown(ANNIVERSARY, now)
    target = datetime(now.year, 8, 15, tzinfo=UTC)
    if now > target:
        target = datetime(now.year + 1, 8, 15, tzinfo=UTC)
    assert _as_seconds(result) == (target - now) // timedelta(seconds=1)
    assert 0 <= result.hours < 24
    assert 0 <= result.minutes < 60
    assert 0 <= result.seconds < 60


def test_years_passed_steps_by_one_between_anniversaries():
    on_day = compute_countdown(ANNIVERSARY, datetime(2024, 8, 15, 1, tzinfo=UTC))
    mid_year = compute_countdown(ANNIVERSARY, datetime(2025, 3, 1, tzinfo=UTC))
    next_on_day = compute_countdown(ANNIVERSARY, datetime(2025, 8, 15, tzinfo=UTC))
    assert on_day.years_passed == 3
    assert next_on_day.years_passed == 4
    assert on_day.years_passed <= mid_year.years_passed <= next_on_day.years_passed


def test_first_year_years_passed_is_zero():
    result = compute_countdown(ANNIVERSARY, datetime(2021, 9, 1, tzinfo=UTC))
    assert result.years_passed == 0


def test_target_uses_timezone_of_now():
    tz = timezone(timedelta(hours=5, minutes=30))
    result = compute_countdown(ANNIVERSARY, datetime(2024, 8, 14, 18, 0, tzinfo=tz))
    assert (result.days, result.hours, result.minutes) == (0, 6, 0)


def test_naive_now_gives_naive_target():
    result = compute_countdown(ANNIVERSARY, datetime(2024, 8, 14, 12, 0))
    assert (result.days, result.hours) == (0, 12)


def test_leap_day_anniversary_rolls_to_march_first_off_leap_years():
    assert occurrence_in_year(date(2020, 2, 29), 2023) == date(2023, 3, 1)
    assert occurrence_in_year(date(2020, 2, 29), 2024) == date(2024, 2, 29)
    result = compute_countdown(date(2020, 2, 29), datetime(2023, 2, 28, tzinfo=UTC))
    assert result.days == 1
    assert result.is_anniversary_today is False


def test_display_pads_to_two_digits():
    display = CountdownResult(5, 3, 0, 9, False, 2).to_display()
    assert display == {
        "days": "05", "hours": "03", "minutes": "00", "seconds": "09",
        "isAnniversary": False, "yearsPassed": 2,
    }


def test_display_keeps_three_digit_days():
    assert CountdownResult(364, 0, 0, 0, False, 3).to_display()["days"] == "364"
