from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habitlog.models.base import Base
from habitlog.models.habit_log import HabitLog


class Habit(Base):
    __tablename__ = "habits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    motivation: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    # A habit owns its log entries: dropping one from the list deletes it.
    logs: Mapped[list[HabitLog]] = relationship(
        back_populates="habit",
        cascade="all, delete-orphan",
    )

    def __init__(self, **kwargs):
        # Column defaults only fire on INSERT; a new habit is active and unarchived straight away.
        kwargs.setdefault("motivation", "")
        kwargs.setdefault("is_active", True)
        kwargs.setdefault("is_archived", False)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"Habit(id={self.id!r}, name={self.name!r})"
