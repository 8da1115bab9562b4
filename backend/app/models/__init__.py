"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Timeline events, photos, notes and settings are owned by a User (user_id FK)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.user import User  # noqa: F401
from app.models.timeline_event import TimelineEvent  # noqa: F401
from app.models.photo import Photo  # noqa: F401
from app.models.note import Note  # noqa: F401
from app.models.user_settings import UserSettings  # noqa: F401
