"""Relationship Duration — elapsed years/months/days since a start date.

Invariants:
    - Negative days borrow one month plus the length of the month before now's month
    - Negative months (after the day borrow) borrow one year
    - formatted lists non-zero components in order years, months, days
    - formatted is never empty: all-zero durations render as "0 days"
"""

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DurationResult:
    years: int
    months: int
    days: int
    formatted: str


def days_in_month(year: int, month: int) -> int:
    """Length of a month. Month 0 is December of the previous year."""
    if month == 0:
        year, month = year - 1, 12
    return calendar.monthrange(year, month)[1]


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(years: int, months: int, days: int) -> str:
    """Human-readable duration, e.g. "1 year, 11 months, 26 days"."""
    parts = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0 or not parts:
        parts.append(_plural(days, "day"))
    return ", ".join(parts)


def compute_duration(start_date: date, now: date) -> DurationResult:
    """Elapsed calendar duration from start_date to now. Pure, no IO.

    ``now`` may be a datetime; only its calendar date is used.
    """
    years = now.year - start_date.year
    months = now.month - start_date.month
    days = now.day - start_date.day

    if days < 0:
        months -= 1
        days += days_in_month(now.year, now.month - 1)
    if months < 0:
        years -= 1
        months += 12

    return DurationResult(years, months, days, format_duration(years, months, days))
