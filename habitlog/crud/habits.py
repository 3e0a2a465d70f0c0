import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from habitlog.errors import HabitNotFound
from habitlog.models import Habit

logger = logging.getLogger(__name__)


def create_habit(db: Session, name: str, motivation: str, created_at: datetime) -> Habit:
    habit = Habit(
        name=name,
        motivation=motivation or "",
        created_at=created_at,
        is_active=True,
        is_archived=False,
    )
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("created habit %s (%s)", habit.id, habit.name)
    return habit


def get_habit(db: Session, habit_id: int) -> Optional[Habit]:
    return db.get(Habit, habit_id)


def get_habit_or_raise(db: Session, habit_id: int) -> Habit:
    habit = get_habit(db, habit_id)
    if habit is None:
        raise HabitNotFound(habit_id)
    return habit


def list_habits(db: Session, include_archived: bool = False) -> list[Habit]:
    query = select(Habit).order_by(Habit.created_at.desc(), Habit.id.desc())
    if not include_archived:
        query = query.where(Habit.is_archived.is_(False))
    return list(db.scalars(query))


def set_archived(db: Session, habit_id: int, archived: bool) -> Habit:
    habit = get_habit_or_raise(db, habit_id)
    habit.is_archived = archived
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("habit %s %s", habit_id, "archived" if archived else "unarchived")
    return habit


def archive_habit(db: Session, habit_id: int) -> Habit:
    return set_archived(db, habit_id, True)


def unarchive_habit(db: Session, habit_id: int) -> Habit:
    return set_archived(db, habit_id, False)


def delete_habit(db: Session, habit_id: int) -> None:
    habit = get_habit_or_raise(db, habit_id)
    db.delete(habit)
    db.commit()
    logger.info("deleted habit %s and its logs", habit_id)
