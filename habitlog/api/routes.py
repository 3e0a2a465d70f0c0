from datetime import date, datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from habitlog import core
from habitlog.api.deps import get_db, get_now
from habitlog.config import settings
from habitlog.core.days import day_key
from habitlog.crud import (
    apply_log_command,
    archive_habit,
    create_habit,
    delete_habit,
    get_entry_or_raise,
    get_habit_or_raise,
    list_habits,
    unarchive_habit,
)
from habitlog.models import Habit
from habitlog.schemas import (
    CalendarDayOut,
    CalendarOut,
    HabitCreateIn,
    HabitDetailOut,
    HabitLogOut,
    HabitStatsOut,
    LogDayIn,
    ResetIn,
    ToggleOut,
)

router = APIRouter(prefix="/v1/habits", tags=["habits"])


def _target_day(payload: Optional[LogDayIn], now: datetime) -> date:
    raw = payload.day if payload and payload.day else now
    return day_key(raw, settings.tz)


def _detail(habit: Habit, now: datetime) -> HabitDetailOut:
    stats = core.summarize(habit, now, settings.tz)
    return HabitDetailOut(
        id=habit.id,
        name=habit.name,
        motivation=habit.motivation,
        created_at=habit.created_at,
        is_active=habit.is_active,
        is_archived=habit.is_archived,
        stats=HabitStatsOut(
            streak=stats.streak,
            milestone=stats.milestone,
            completed_today=stats.completed_today,
            monthly_completion_rate=stats.monthly_completion_rate,
        ),
    )


@router.get("", response_model=list[HabitDetailOut])
def habits_list(
    include_archived: bool = False,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> list[HabitDetailOut]:
    return [_detail(habit, now) for habit in list_habits(db, include_archived=include_archived)]


@router.post("", response_model=HabitDetailOut, status_code=201)
def habits_create(
    payload: HabitCreateIn,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> HabitDetailOut:
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name must not be blank")
    habit = create_habit(db, name=name, motivation=payload.motivation.strip(), created_at=now)
    return _detail(habit, now)


@router.get("/{habit_id}", response_model=HabitDetailOut)
def habits_get(habit_id: int, db: Session = Depends(get_db), now: datetime = Depends(get_now)) -> HabitDetailOut:
    return _detail(get_habit_or_raise(db, habit_id), now)


@router.post("/{habit_id}/archive", response_model=HabitDetailOut)
def habits_archive(habit_id: int, db: Session = Depends(get_db), now: datetime = Depends(get_now)) -> HabitDetailOut:
    return _detail(archive_habit(db, habit_id), now)


@router.post("/{habit_id}/unarchive", response_model=HabitDetailOut)
def habits_unarchive(habit_id: int, db: Session = Depends(get_db), now: datetime = Depends(get_now)) -> HabitDetailOut:
    return _detail(unarchive_habit(db, habit_id), now)


@router.delete("/{habit_id}", status_code=204)
def habits_delete(habit_id: int, db: Session = Depends(get_db)) -> Response:
    delete_habit(db, habit_id)
    return Response(status_code=204)


@router.get("/{habit_id}/logs", response_model=list[HabitLogOut])
def logs_list(habit_id: int, db: Session = Depends(get_db)) -> list[HabitLogOut]:
    habit = get_habit_or_raise(db, habit_id)
    return [HabitLogOut.model_validate(entry) for entry in core.list_logs(habit)]


@router.get("/{habit_id}/logs/{day}", response_model=HabitLogOut)
def logs_get(habit_id: int, day: str, db: Session = Depends(get_db)) -> HabitLogOut:
    habit = get_habit_or_raise(db, habit_id)
    return HabitLogOut.model_validate(get_entry_or_raise(habit, day, settings.tz))


@router.post("/{habit_id}/logs/complete", response_model=HabitLogOut)
def logs_complete(
    habit_id: int,
    payload: Optional[LogDayIn] = None,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> HabitLogOut:
    entry = apply_log_command(db, habit_id, core.log_completion, _target_day(payload, now))
    return HabitLogOut.model_validate(entry)


@router.post("/{habit_id}/logs/pause", response_model=HabitLogOut)
def logs_pause(
    habit_id: int,
    payload: Optional[LogDayIn] = None,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> HabitLogOut:
    entry = apply_log_command(db, habit_id, core.pause, _target_day(payload, now))
    return HabitLogOut.model_validate(entry)


@router.post("/{habit_id}/logs/reset", response_model=HabitLogOut)
def logs_reset(
    habit_id: int,
    payload: ResetIn,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> HabitLogOut:
    entry = apply_log_command(db, habit_id, core.reset_streak, _target_day(payload, now), payload.note)
    return HabitLogOut.model_validate(entry)


@router.delete("/{habit_id}/logs/{day}", status_code=204)
def logs_delete(habit_id: int, day: str, db: Session = Depends(get_db)) -> Response:
    apply_log_command(db, habit_id, core.delete_entry, day_key(day, settings.tz))
    return Response(status_code=204)


@router.post("/{habit_id}/toggle", response_model=ToggleOut)
def habits_toggle(habit_id: int, db: Session = Depends(get_db), now: datetime = Depends(get_now)) -> ToggleOut:
    today = day_key(now, settings.tz)
    completed = apply_log_command(db, habit_id, core.toggle_today_completion, today)
    habit = get_habit_or_raise(db, habit_id)
    streak = core.current_streak(habit, today)
    return ToggleOut(completed_today=completed, streak=streak, milestone=core.milestone(streak))


@router.get("/{habit_id}/calendar", response_model=CalendarOut)
def habits_calendar(
    habit_id: int,
    year: Optional[int] = None,
    month: Optional[int] = None,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
) -> Dict[str, Any]:
    habit = get_habit_or_raise(db, habit_id)
    today = day_key(now, settings.tz)
    if year is None:
        year = today.year
    if month is None:
        month = today.month
    days = core.month_calendar(habit, year, month)
    return {
        "year": year,
        "month": month,
        "days": [CalendarDayOut(day=day, status=status) for day, status in days.items()],
    }
