"""UserSettings ORM — anniversary/birthday dates and messages, one row per user.

Invariants:
    - user_id is unique: at most one settings row per user
    - anniversary_date is always set (defaults applied by Storage, never NULL)
    - birthday_date may be NULL or empty (no birthday countdown)
"""

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class UserSettings(Base):
    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    anniversary_date: Mapped[str] = mapped_column(String(10), nullable=False)
    birthday_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    anniversary_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    birthday_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), unique=True, nullable=False,
    )
