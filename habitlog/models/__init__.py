from habitlog.models.base import Base
from habitlog.models.habit_log import HabitLog, LogStatus
from habitlog.models.habit import Habit

__all__ = [
    "Base",
    "Habit",
    "HabitLog",
    "LogStatus",
]
