from sqlalchemy import func, select, text

from habitlog.db import _normalize_database_url
from habitlog.models import Habit, HabitLog, LogStatus
from tests.helpers import NOW, TODAY, days_ago


def test_postgres_urls_use_psycopg():
    assert _normalize_database_url("postgres://u:p@db:5432/habits") == "postgresql+psycopg://u:p@db:5432/habits"
    assert _normalize_database_url("postgresql://u@db/habits") == "postgresql+psycopg://u@db/habits"
    assert _normalize_database_url("postgresql+psycopg://u@db/habits") == "postgresql+psycopg://u@db/habits"


def test_sqlite_urls_untouched():
    assert _normalize_database_url("  sqlite:///./habitlog.db ") == "sqlite:///./habitlog.db"
    assert _normalize_database_url("") == ""


def test_sqlite_connections_enforce_foreign_keys(db_session):
    assert db_session.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_database_cascade_removes_logs_on_raw_delete(db_session):
    habit = Habit(name="Swim", created_at=NOW)
    habit.logs.append(HabitLog(day=TODAY, status=LogStatus.COMPLETED))
    habit.logs.append(HabitLog(day=days_ago(1), status=LogStatus.PAUSED))
    db_session.add(habit)
    db_session.commit()

    db_session.execute(text("DELETE FROM habits WHERE id = :id"), {"id": habit.id})
    db_session.commit()

    assert db_session.scalar(select(func.count()).select_from(HabitLog)) == 0
