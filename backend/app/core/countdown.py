"""Anniversary Countdown — pure time-to-next-anniversary computation.

Invariants:
    - Target is midnight of the anniversary's month/day, in now's timezone
    - Target already passed this year → advanced to next year
    - is_anniversary_today compares month/day only (year-independent)
    - On the anniversary day all four time fields are 0 for the whole day,
      not only at the exact anniversary instant
    - years_passed = now.year - anniversary.year (unclamped)

Design Decisions:
    - Feb 29 in a non-leap year rolls over to Mar 1 (calendar roll-over)
    - Integer fields in CountdownResult; zero-padded strings only in to_display()
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 60 * _SECONDS_PER_MINUTE
_SECONDS_PER_DAY = 24 * _SECONDS_PER_HOUR


@dataclass(frozen=True)
class CountdownResult:
    """Remaining time until the next anniversary occurrence."""
    days: int
    hours: int
    minutes: int
    seconds: int
    is_anniversary_today: bool
    years_passed: int

    def to_display(self) -> dict:
        """External contract: two-digit strings for the four time fields."""
        return {
            "days": f"{self.days:02d}",
            "hours": f"{self.hours:02d}",
            "minutes": f"{self.minutes:02d}",
            "seconds": f"{self.seconds:02d}",
            "isAnniversary": self.is_anniversary_today,
            "yearsPassed": self.years_passed,
        }


def occurrence_in_year(anniversary: date, year: int) -> date:
    """Anniversary month/day in the given year. Feb 29 → Mar 1 off leap years."""
    try:
        return anniversary.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def _elapsed(start: datetime, end: datetime) -> timedelta:
    """Elapsed time; aware values are compared in UTC."""
    if start.tzinfo is None:
        return end - start
    return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)


def compute_countdown(anniversary_date: date, now: datetime) -> CountdownResult:
    """Countdown to the next occurrence of anniversary_date. Pure, no IO."""
    target = datetime.combine(
        occurrence_in_year(anniversary_date, now.year), time.min, tzinfo=now.tzinfo,
    )
    if now > target:
        target = datetime.combine(
            occurrence_in_year(anniversary_date, now.year + 1),
            time.min, tzinfo=now.tzinfo,
        )

    is_today = (
        now.month == anniversary_date.month and now.day == anniversary_date.day
    )
    years_passed = now.year - anniversary_date.year

    if is_today:
        return CountdownResult(0, 0, 0, 0, True, years_passed)

    remaining = _elapsed(now, target) // timedelta(seconds=1)
    days, remaining = divmod(remaining, _SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, _SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, _SECONDS_PER_MINUTE)
    return CountdownResult(days, hours, minutes, seconds, False, years_passed)
