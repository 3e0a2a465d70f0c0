from habitlog.core.commands import delete_entry, log_completion, pause, reset_streak, toggle_today_completion
from habitlog.core.days import day_key
from habitlog.core.log_store import entry_for, list_logs, remove_completed, upsert
from habitlog.core.stats import (
    MILESTONES,
    HabitStats,
    current_streak,
    is_completed_today,
    milestone,
    month_calendar,
    monthly_completion_rate,
    summarize,
)

__all__ = [
    "day_key",
    "upsert",
    "entry_for",
    "list_logs",
    "remove_completed",
    "delete_entry",
    "log_completion",
    "pause",
    "reset_streak",
    "toggle_today_completion",
    "MILESTONES",
    "HabitStats",
    "current_streak",
    "milestone",
    "monthly_completion_rate",
    "is_completed_today",
    "month_calendar",
    "summarize",
]
