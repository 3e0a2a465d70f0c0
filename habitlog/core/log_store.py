"""Per-habit, day-indexed log collection.

A habit holds at most one ``HabitLog`` per calendar day. These functions work
directly on ``habit.logs`` and never touch a session, so they behave the same
on a detached habit as on one loaded from the database. Flushing the change
is up to the caller.
"""

import logging
from datetime import tzinfo
from typing import Optional

from habitlog.core.days import UTC, DayLike, day_key
from habitlog.models import Habit, HabitLog, LogStatus

logger = logging.getLogger(__name__)


def entry_for(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> Optional[HabitLog]:
    key = day_key(day, tz)
    for entry in habit.logs:
        if entry.day == key:
            return entry
    return None


def list_logs(habit: Habit) -> list[HabitLog]:
    """Entries ordered by day, most recent first."""
    return sorted(habit.logs, key=lambda entry: entry.day, reverse=True)


def upsert(
    habit: Habit,
    day: DayLike,
    status: LogStatus,
    note: Optional[str] = None,
    tz: tzinfo = UTC,
) -> HabitLog:
    """Set the status for ``day``, replacing an existing entry in place.

    ``note`` is cleared on overwrite unless it is passed again.
    """
    key = day_key(day, tz)
    status = LogStatus(status)

    entry = entry_for(habit, key)
    if entry is not None:
        logger.debug("habit %s: %s %s -> %s", habit.id, key, entry.status.value, status.value)
        entry.status = status
        entry.note = note
        return entry

    entry = HabitLog(day=key, status=status, note=note)
    habit.logs.append(entry)
    logger.debug("habit %s: %s new %s", habit.id, key, status.value)
    return entry


def remove_completed(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> Optional[HabitLog]:
    """Drop the entry for ``day`` if it is a completion. No-op otherwise."""
    entry = entry_for(habit, day, tz)
    if entry is None or entry.status != LogStatus.COMPLETED:
        return None
    habit.logs.remove(entry)
    return entry


def delete_entry(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> Optional[HabitLog]:
    entry = entry_for(habit, day, tz)
    if entry is None:
        return None
    habit.logs.remove(entry)
    return entry
