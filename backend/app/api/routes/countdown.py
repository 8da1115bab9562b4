"""Countdown Route — anniversary countdown, relationship duration and birthday countdown.

Invariants:
    - Dates come from the caller's stored settings (defaults created on first read)
    - "now" is the server clock in display_timezone unless the client passes ?now=
    - A naive ?now= is interpreted in display_timezone
    - message is the anniversary message on the anniversary day, else the birthday
      message on the birthday, else null

Design Decisions:
    - All date math delegated to core.countdown / core.duration (pure functions)
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_app_settings, get_storage, require_session
from app.config import Settings
from app.core.auth_sessions import AuthSession
from app.core.countdown import compute_countdown
from app.core.duration import compute_duration
from app.schemas.settings import CountdownDisplay, CountdownResponse, DurationDisplay
from app.services.storage import Storage

router = APIRouter(prefix="/api/v1/countdown", tags=["countdown"])


def _resolve_now(now: datetime | None, tz_name: str) -> datetime:
    tz = ZoneInfo(tz_name)
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now


def _parse_stored_date(value: str | None) -> date | None:
    if not value:
        return None
    return date.fromisoformat(value)


@router.get("", response_model=CountdownResponse)
async def get_countdown(
    now: datetime | None = Query(None, description="ISO datetime; defaults to server time"),
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
):
    user_settings = await storage.get_settings(session.user_id)
    current = _resolve_now(now, settings.display_timezone)

    anniversary = _parse_stored_date(user_settings.anniversary_date)
    countdown = compute_countdown(anniversary, current)
    duration = compute_duration(anniversary, current)

    birthday_display = None
    birthday_today = False
    birthday = _parse_stored_date(user_settings.birthday_date)
    if birthday is not None:
        birthday_countdown = compute_countdown(birthday, current)
        birthday_today = birthday_countdown.is_anniversary_today
        birthday_display = CountdownDisplay(**birthday_countdown.to_display())

    message = None
    if countdown.is_anniversary_today:
        message = user_settings.anniversary_message
    elif birthday_today:
        message = user_settings.birthday_message

    return CountdownResponse(
        anniversary=CountdownDisplay(**countdown.to_display()),
        duration=DurationDisplay(
            years=duration.years, months=duration.months,
            days=duration.days, formatted=duration.formatted,
        ),
        birthday=birthday_display,
        message=message or None,
    )
