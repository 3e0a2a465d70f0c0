import enum
from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, Enum, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habitlog.models.base import Base

if TYPE_CHECKING:
    from habitlog.models.habit import Habit


class LogStatus(str, enum.Enum):
    COMPLETED = "completed"
    RESET = "reset"
    PAUSED = "paused"


class HabitLog(Base):
    __tablename__ = "habit_logs"
    __table_args__ = (UniqueConstraint("habit_id", "day", name="uq_habit_log_per_day"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    habit_id: Mapped[int] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), index=True)
    day: Mapped[date] = mapped_column(Date, index=True)
    status: Mapped[LogStatus] = mapped_column(
        Enum(
            LogStatus,
            name="log_status",
            native_enum=False,
            length=16,
            values_callable=lambda members: [m.value for m in members],
        )
    )
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    habit: Mapped["Habit"] = relationship(back_populates="logs")

    def __repr__(self) -> str:
        return f"HabitLog(day={self.day!r}, status={self.status!r})"
