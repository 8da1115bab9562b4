"""Settings & Countdown Schemas — per-user dates/messages and the countdown payload.

Invariants:
    - anniversaryDate/birthdayDate are ISO calendar dates; "" clears the birthday
    - CountdownDisplay time fields are zero-padded strings (min two digits)
"""

from datetime import date

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class SettingsUpdate(CamelModel):
    anniversary_date: date | None = None
    birthday_date: date | None = None
    anniversary_message: str | None = Field(None, max_length=2000)
    birthday_message: str | None = Field(None, max_length=2000)

    @field_validator("birthday_date", mode="before")
    @classmethod
    def blank_birthday_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SettingsResponse(CamelModel):
    id: int
    anniversary_date: str
    birthday_date: str | None = None
    anniversary_message: str | None = None
    birthday_message: str | None = None
    user_id: int


class CountdownDisplay(CamelModel):
    days: str
    hours: str
    minutes: str
    seconds: str
    is_anniversary: bool
    years_passed: int


class DurationDisplay(CamelModel):
    years: int
    months: int
    days: int
    formatted: str


class CountdownResponse(CamelModel):
    anniversary: CountdownDisplay
    duration: DurationDisplay
    birthday: CountdownDisplay | None = None
    message: str | None = None
