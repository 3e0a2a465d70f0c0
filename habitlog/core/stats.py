"""Derived statistics over a habit's log.

Nothing here reads the clock: every function takes the reference day
explicitly and is recomputed on demand rather than cached.
"""

import calendar
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional

from habitlog.core.days import UTC, DayLike, day_key, days_before, previous_day
from habitlog.errors import InvalidDate
from habitlog.models import Habit, LogStatus

MILESTONES = (365, 100, 30, 7)
RATE_WINDOW_DAYS = 30


@dataclass(frozen=True)
class HabitStats:
    streak: int
    milestone: Optional[int]
    completed_today: bool
    monthly_completion_rate: float


def _completed_days(habit: Habit) -> list[date]:
    return sorted(
        (entry.day for entry in habit.logs if entry.status == LogStatus.COMPLETED),
        reverse=True,
    )


def current_streak(habit: Habit, today: DayLike, tz: tzinfo = UTC) -> int:
    """Consecutive completed days ending on ``today``.

    A day without a completion, including a paused or reset day, ends the
    streak. If ``today`` itself is not completed the streak is 0.
    """
    today = day_key(today, tz)
    days = _completed_days(habit)
    if not days or days[0] != today:
        return 0

    streak = 1
    cursor = today
    for day in days[1:]:
        if cursor == date.min:
            break
        cursor = previous_day(cursor)
        if day != cursor:
            break
        streak += 1
    return streak


def milestone(streak: int) -> Optional[int]:
    for threshold in MILESTONES:
        if streak >= threshold:
            return threshold
    return None


def monthly_completion_rate(habit: Habit, today: DayLike, tz: tzinfo = UTC) -> float:
    """Completed days in the trailing window over a flat 30.

    The denominator ignores how long the habit has existed and any
    non-daily schedule.
    """
    today = day_key(today, tz)
    window_start = days_before(today, RATE_WINDOW_DAYS)
    completed = [day for day in _completed_days(habit) if window_start <= day <= today]
    if not completed:
        return 0.0
    return len(completed) / float(RATE_WINDOW_DAYS)


def is_completed_today(habit: Habit, today: DayLike, tz: tzinfo = UTC) -> bool:
    today = day_key(today, tz)
    return any(entry.day == today and entry.status == LogStatus.COMPLETED for entry in habit.logs)


def month_calendar(habit: Habit, year: int, month: int) -> dict[date, Optional[LogStatus]]:
    """Every day of the month mapped to its logged status, or None."""
    try:
        _, last_day = calendar.monthrange(year, month)
        days = [date(year, month, number) for number in range(1, last_day + 1)]
    except (ValueError, calendar.IllegalMonthError) as exc:
        raise InvalidDate(f"{year}-{month}", "not a valid month") from exc

    by_day = {entry.day: entry.status for entry in habit.logs}
    return {day: by_day.get(day) for day in days}


def summarize(habit: Habit, today: DayLike, tz: tzinfo = UTC) -> HabitStats:
    today = day_key(today, tz)
    streak = current_streak(habit, today)
    return HabitStats(
        streak=streak,
        milestone=milestone(streak),
        completed_today=is_completed_today(habit, today),
        monthly_completion_rate=monthly_completion_rate(habit, today),
    )
