"""Content Schemas — timeline events, photos and notes at the API boundary.

Invariants:
    - Dates are ISO calendar dates (YYYY-MM-DD); anything else is a 400
    - Text fields are stripped and must be non-empty where required
    - *Update schemas are partial: only fields sent by the client are applied
    - Omitted fields are left alone; an explicit null is rejected for NOT NULL columns

Design Decisions:
    - Dates typed as datetime.date on input, str on output (stored as ISO text)
    - user_id never accepted from the client: taken from the login session
"""

import datetime as dt

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


def _reject_null(v):
    if v is None:
        raise ValueError("cannot be null")
    return v


# --- Timeline -----------------------------------------------------------------

class TimelineEventCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    date: dt.date
    description: str = Field(min_length=1, max_length=5000)
    location: str | None = Field(None, max_length=200)
    image_url: str | None = Field(None, max_length=500)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)


class TimelineEventUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    date: dt.date | None = None
    description: str | None = Field(None, min_length=1, max_length=5000)
    location: str | None = Field(None, max_length=200)
    image_url: str | None = Field(None, max_length=500)

    @field_validator("title", "date", "description", mode="before")
    @classmethod
    def not_null(cls, v):
        return _reject_null(v)

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_required(v) if v is not None else v


class TimelineEventResponse(CamelModel):
    id: int
    title: str
    date: str
    description: str
    location: str | None = None
    image_url: str | None = None
    created_at: dt.datetime | None = None
    user_id: int


# --- Photos -------------------------------------------------------------------

class PhotoCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    date: dt.date
    image_url: str = Field(min_length=1, max_length=500)
    liked: bool = False

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v)


class PhotoResponse(CamelModel):
    id: int
    title: str
    date: str
    image_url: str
    liked: bool
    created_at: dt.datetime | None = None
    user_id: int


# --- Notes --------------------------------------------------------------------

class NoteCreate(CamelModel):
    content: str = Field(min_length=1, max_length=5000)
    author: str = Field(min_length=1, max_length=80)

    @field_validator("content", "author")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)


class NoteUpdate(CamelModel):
    content: str | None = Field(None, min_length=1, max_length=5000)
    author: str | None = Field(None, min_length=1, max_length=80)

    @field_validator("content", "author", mode="before")
    @classmethod
    def not_null(cls, v):
        return _reject_null(v)

    @field_validator("content", "author")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_required(v) if v is not None else v


class NoteResponse(CamelModel):
    id: int
    content: str
    author: str
    created_at: dt.datetime | None = None
    user_id: int


class DeletedResponse(CamelModel):
    message: str


class UploadResponse(CamelModel):
    image_url: str
