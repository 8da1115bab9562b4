"""Content/settings schemas — camelCase wire names, date validation, partial updates."""

from datetime import date

import pytest
from pydantic import ValidationError

from app.schemas.content import (
    NoteUpdate, PhotoCreate, TimelineEventCreate, TimelineEventUpdate,
)
from app.schemas.settings import SettingsUpdate


def test_accepts_camel_and_snake_case_keys():
    camel = PhotoCreate.model_validate(
        {"title": "x", "date": "2024-01-01", "imageUrl": "/uploads/a.jpg"},
    )
    snake = PhotoCreate.model_validate(
        {"title": "x", "date": "2024-01-01", "image_url": "/uploads/a.jpg"},
    )
    assert camel.image_url == snake.image_url == "/uploads/a.jpg"
    assert camel.date == date(2024, 1, 1)


def test_dumps_camel_case_by_alias():
    photo = PhotoCreate(title="x", date=date(2024, 1, 1), image_url="/u/a.jpg")
    assert "imageUrl" in photo.model_dump(by_alias=True)


def test_rejects_non_iso_dates():
    with pytest.raises(ValidationError):
        TimelineEventCreate.model_validate(
            {"title": "x", "date": "August 15", "description": "y"},
        )


def test_strips_whitespace_from_text():
    event = TimelineEventCreate.model_validate(
        {"title": "  Met  ", "date": "2021-08-15", "description": " cafe "},
    )
    assert event.title == "Met"
    assert event.description == "cafe"


def test_partial_update_only_dumps_sent_fields():
    update = NoteUpdate.model_validate({"content": "hi"})
    assert update.model_dump(exclude_unset=True) == {"content": "hi"}


def test_blank_birthday_becomes_none():
    update = SettingsUpdate.model_validate({"birthdayDate": "  "})
    assert update.birthday_date is None
    assert update.model_dump(exclude_unset=True) == {"birthday_date": None}


@pytest.mark.parametrize("field", ["title", "date", "description"])
def test_timeline_update_rejects_null_for_required_columns(field):
    with pytest.raises(ValidationError):
        TimelineEventUpdate.model_validate({field: None})


def test_timeline_update_allows_clearing_optional_columns():
    update = TimelineEventUpdate.model_validate({"location": None, "imageUrl": None})
    assert update.model_dump(exclude_unset=True) == {"location": None, "image_url": None}
