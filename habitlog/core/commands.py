"""Logging commands built on the log store.

These are the only writers of a habit's log. Each one mutates ``habit.logs``
in memory and returns what changed.
"""

from datetime import tzinfo
from typing import Optional

from habitlog.core import log_store
from habitlog.core.days import UTC, DayLike, day_key
from habitlog.core.log_store import delete_entry
from habitlog.core.stats import is_completed_today
from habitlog.errors import InvalidCommand
from habitlog.models import Habit, HabitLog, LogStatus

__all__ = ["log_completion", "pause", "reset_streak", "toggle_today_completion", "delete_entry"]


def log_completion(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> HabitLog:
    return log_store.upsert(habit, day, LogStatus.COMPLETED, tz=tz)


def pause(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> HabitLog:
    return log_store.upsert(habit, day, LogStatus.PAUSED, tz=tz)


def reset_streak(habit: Habit, day: DayLike, note: str, tz: tzinfo = UTC) -> HabitLog:
    """Mark ``day`` as the day the streak broke, with the reason why."""
    note = (note or "").strip()
    if not note:
        raise InvalidCommand("a reset needs a note explaining why the streak broke")
    return log_store.upsert(habit, day, LogStatus.RESET, note=note, tz=tz)


def toggle_today_completion(habit: Habit, today: DayLike, tz: tzinfo = UTC) -> bool:
    """Complete today, or undo today's completion if it is already there.

    Returns whether today is completed after the toggle.
    """
    today = day_key(today, tz)
    if is_completed_today(habit, today):
        removed: Optional[HabitLog] = log_store.remove_completed(habit, today)
        return removed is None
    log_completion(habit, today)
    return True
