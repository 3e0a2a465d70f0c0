from datetime import date, datetime, timedelta, timezone

from habitlog.models import Habit, HabitLog

NOW = datetime(2026, 3, 15, 9, 30, tzinfo=timezone.utc)
TODAY = NOW.date()


def days_ago(count: int, today: date = TODAY) -> date:
    return today - timedelta(days=count)


def make_habit(*entries: tuple) -> Habit:
    """A detached habit holding ``(day, status[, note])`` entries."""
    habit = Habit(name="Read")
    for entry in entries:
        day, status, *rest = entry
        habit.logs.append(HabitLog(day=day, status=status, note=rest[0] if rest else None))
    return habit
