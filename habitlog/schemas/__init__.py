from habitlog.schemas.habit import HabitCreateIn, HabitDetailOut, HabitOut, HabitStatsOut
from habitlog.schemas.log import CalendarDayOut, CalendarOut, HabitLogOut, LogDayIn, ResetIn, ToggleOut

__all__ = [
    "HabitCreateIn",
    "HabitOut",
    "HabitDetailOut",
    "HabitStatsOut",
    "LogDayIn",
    "ResetIn",
    "HabitLogOut",
    "ToggleOut",
    "CalendarDayOut",
    "CalendarOut",
]
