"""Storage — persistence operations for users, timeline, photos, notes and settings.

Invariants:
    - Every public method commits its own unit of work
    - Lookups by id return None / False when the row is missing (routes map to 404)
    - Timeline ordered by date ascending; photos by date descending; notes newest first
    - get_settings never returns None: a defaults row is created on first read
    - Lazily created rows (user, settings) tolerate a concurrent insert: the loser
      rolls back and re-reads the winner's row

Design Decisions:
    - One class over the request's AsyncSession (same shape as the handler classes)
    - Partial updates take plain dicts of already-validated fields (exclude_unset dumps)
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.note import Note
from app.models.photo import Photo
from app.models.timeline_event import TimelineEvent
from app.models.user import User
from app.models.user_settings import UserSettings

logger = logging.getLogger(__name__)

DEFAULT_ANNIVERSARY_MESSAGE = (
    "Today marks another beautiful year of our journey together. "
    "Every moment with you has been a blessing. Here's to many more years "
    "of love, laughter, and creating precious memories."
)


def _to_columns(data: dict) -> dict:
    """Dates arrive as datetime.date from the schemas; columns store ISO text."""
    return {
        k: (v.isoformat() if isinstance(v, date) else v) for k, v in data.items()
    }


class Storage:
    """Database access for one request/unit of work."""

    def __init__(self, db: AsyncSession, default_anniversary_date: date = date(2021, 8, 15)):
        self.db = db
        self.default_anniversary_date = default_anniversary_date

    # --- users ----------------------------------------------------------------

    async def _find_user(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_or_create_user(self, username: str) -> User:
        user = await self._find_user(username)
        if user:
            return user
        user = User(username=username)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # Concurrent first login inserted the same username
            await self.db.rollback()
            return await self._find_user(username)
        await self.db.refresh(user)
        logger.info(f"Created user {username}", extra={"username": username})
        return user

    # --- timeline -------------------------------------------------------------

    async def list_timeline_events(self) -> list[TimelineEvent]:
        result = await self.db.execute(
            select(TimelineEvent).order_by(TimelineEvent.date.asc(), TimelineEvent.id.asc()),
        )
        return list(result.scalars().all())

    async def create_timeline_event(self, data: dict, user_id: int) -> TimelineEvent:
        event = TimelineEvent(**_to_columns(data), user_id=user_id)
        self.db.add(event)
        await self.db.commit()
        await self.db.refresh(event)
        return event

    async def update_timeline_event(self, event_id: int, data: dict) -> TimelineEvent | None:
        event = await self.db.get(TimelineEvent, event_id)
        if not event:
            return None
        for key, value in _to_columns(data).items():
            setattr(event, key, value)
        await self.db.commit()
        await self.db.refresh(event)
        return event

    async def delete_timeline_event(self, event_id: int) -> bool:
        event = await self.db.get(TimelineEvent, event_id)
        if not event:
            return False
        await self.db.delete(event)
        await self.db.commit()
        return True

    # --- photos ---------------------------------------------------------------

    async def list_photos(self) -> list[Photo]:
        result = await self.db.execute(
            select(Photo).order_by(Photo.date.desc(), Photo.id.desc()),
        )
        return list(result.scalars().all())

    async def create_photo(self, data: dict, user_id: int) -> Photo:
        photo = Photo(**_to_columns(data), user_id=user_id)
        self.db.add(photo)
        await self.db.commit()
        await self.db.refresh(photo)
        return photo

    async def toggle_photo_like(self, photo_id: int) -> Photo | None:
        photo = await self.db.get(Photo, photo_id)
        if not photo:
            return None
        photo.liked = not photo.liked
        await self.db.commit()
        await self.db.refresh(photo)
        return photo

    async def delete_photo(self, photo_id: int) -> Photo | None:
        """Delete a photo row. Returns the deleted row so callers can clean up its file."""
        photo = await self.db.get(Photo, photo_id)
        if not photo:
            return None
        await self.db.delete(photo)
        await self.db.commit()
        return photo

    # --- notes ----------------------------------------------------------------

    async def list_notes(self) -> list[Note]:
        result = await self.db.execute(
            select(Note).order_by(Note.created_at.desc(), Note.id.desc()),
        )
        return list(result.scalars().all())

    async def create_note(self, data: dict, user_id: int) -> Note:
        note = Note(**data, user_id=user_id)
        self.db.add(note)
        await self.db.commit()
        await self.db.refresh(note)
        return note

    async def update_note(self, note_id: int, data: dict) -> Note | None:
        note = await self.db.get(Note, note_id)
        if not note:
            return None
        for key, value in data.items():
            setattr(note, key, value)
        await self.db.commit()
        await self.db.refresh(note)
        return note

    async def delete_note(self, note_id: int) -> bool:
        note = await self.db.get(Note, note_id)
        if not note:
            return False
        await self.db.delete(note)
        await self.db.commit()
        return True

    # --- settings -------------------------------------------------------------

    async def _find_settings(self, user_id: int) -> UserSettings | None:
        result = await self.db.execute(
            select(UserSettings).where(UserSettings.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def get_settings(self, user_id: int) -> UserSettings:
        settings = await self._find_settings(user_id)
        if settings:
            return settings
        settings = UserSettings(
            anniversary_date=self.default_anniversary_date.isoformat(),
            birthday_date="",
            anniversary_message=DEFAULT_ANNIVERSARY_MESSAGE,
            birthday_message="",
            user_id=user_id,
        )
        self.db.add(settings)
        try:
            await self.db.commit()
        except IntegrityError:
            # Concurrent first read created the row
            await self.db.rollback()
            return await self._find_settings(user_id)
        await self.db.refresh(settings)
        logger.info("Created default settings", extra={"resource": "settings", "resource_id": settings.id})
        return settings

    async def update_settings(self, user_id: int, data: dict) -> UserSettings:
        values = _to_columns(data)
        if values.get("anniversary_date") is None:
            values.pop("anniversary_date", None)
        settings = await self.get_settings(user_id)
        for key, value in values.items():
            setattr(settings, key, value)
        await self.db.commit()
        await self.db.refresh(settings)
        return settings
