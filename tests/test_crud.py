import threading
from datetime import timedelta

import pytest
from sqlalchemy import func, select

from habitlog import core
from habitlog.crud import logs as logs_crud
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
from habitlog.errors import EntryNotFound, HabitNotFound, InvalidCommand
from habitlog.models import HabitLog, LogStatus
from tests.helpers import NOW, TODAY, days_ago


def test_create_habit_defaults(db_session):
    habit = create_habit(db_session, name="Walk", motivation="clear head", created_at=NOW)

    assert habit.id is not None
    assert habit.is_active is True
    assert habit.is_archived is False
    assert habit.logs == []


def test_list_habits_newest_first_without_archived(db_session):
    older = create_habit(db_session, name="Older", motivation="", created_at=NOW - timedelta(days=2))
    newer = create_habit(db_session, name="Newer", motivation="", created_at=NOW)
    archived = create_habit(db_session, name="Shelved", motivation="", created_at=NOW)
    archive_habit(db_session, archived.id)

    assert [h.name for h in list_habits(db_session)] == [newer.name, older.name]
    assert archived.id in {h.id for h in list_habits(db_session, include_archived=True)}


def test_archive_keeps_logs(db_session):
    habit = create_habit(db_session, name="Stretch", motivation="", created_at=NOW)
    apply_log_command(db_session, habit.id, core.log_completion, TODAY)

    archive_habit(db_session, habit.id)
    habit = unarchive_habit(db_session, habit.id)

    assert habit.is_archived is False
    assert [entry.day for entry in habit.logs] == [TODAY]


def test_delete_habit_cascades_logs(db_session):
    habit = create_habit(db_session, name="Journal", motivation="", created_at=NOW)
    apply_log_command(db_session, habit.id, core.log_completion, TODAY)
    apply_log_command(db_session, habit.id, core.pause, days_ago(1))

    delete_habit(db_session, habit.id)

    assert db_session.scalar(select(func.count()).select_from(HabitLog)) == 0
    with pytest.raises(HabitNotFound):
        get_habit_or_raise(db_session, habit.id)


def test_unknown_habit_raises(db_session):
    with pytest.raises(HabitNotFound):
        archive_habit(db_session, 404)
    with pytest.raises(HabitNotFound):
        apply_log_command(db_session, 404, core.log_completion, TODAY)


def test_apply_log_command_persists_upsert(db_session, session_factory):
    habit = create_habit(db_session, name="Meditate", motivation="", created_at=NOW)
    apply_log_command(db_session, habit.id, core.log_completion, TODAY)
    apply_log_command(db_session, habit.id, core.reset_streak, TODAY, "skipped")

    with session_factory() as other:
        rows = list(other.scalars(select(HabitLog).where(HabitLog.habit_id == habit.id)))
    assert len(rows) == 1
    assert rows[0].status == LogStatus.RESET
    assert rows[0].note == "skipped"


def test_apply_log_command_rolls_back_on_error(db_session):
    habit = create_habit(db_session, name="Floss", motivation="", created_at=NOW)
    with pytest.raises(InvalidCommand):
        apply_log_command(db_session, habit.id, core.reset_streak, TODAY, " ")
    assert get_habit_or_raise(db_session, habit.id).logs == []


def test_toggle_removes_stored_completion(db_session):
    habit = create_habit(db_session, name="Run", motivation="", created_at=NOW)
    assert apply_log_command(db_session, habit.id, core.toggle_today_completion, TODAY) is True
    assert apply_log_command(db_session, habit.id, core.toggle_today_completion, TODAY) is False
    assert db_session.scalar(select(func.count()).select_from(HabitLog)) == 0


def test_get_entry_or_raise(db_session):
    habit = create_habit(db_session, name="Read", motivation="", created_at=NOW)
    apply_log_command(db_session, habit.id, core.pause, TODAY)

    assert get_entry_or_raise(habit, TODAY).status == LogStatus.PAUSED
    with pytest.raises(EntryNotFound):
        get_entry_or_raise(habit, days_ago(1))


def test_missing_habits_leave_no_locks_behind(db_session):
    for habit_id in range(10_000, 10_200):
        with pytest.raises(HabitNotFound):
            apply_log_command(db_session, habit_id, core.toggle_today_completion, TODAY)
    assert logs_crud._habit_locks == {}


def test_lock_released_after_write(db_session):
    habit = create_habit(db_session, name="Plank", motivation="", created_at=NOW)
    apply_log_command(db_session, habit.id, core.log_completion, TODAY)
    assert logs_crud._habit_locks == {}


def _run_concurrently(session_factory, habit_id, command, workers):
    barrier = threading.Barrier(workers)
    errors = []
    results = []

    def write():
        with session_factory() as session:
            barrier.wait()
            try:
                results.append(apply_log_command(session, habit_id, command, TODAY))
            except Exception as exc:
                errors.append(exc)

    threads = [threading.Thread(target=write) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    return results, errors


def _rows_for_today(session_factory, habit_id):
    with session_factory() as session:
        return list(
            session.scalars(select(HabitLog).where(HabitLog.habit_id == habit_id, HabitLog.day == TODAY))
        )


def test_concurrent_completions_keep_one_row(file_session_factory):
    with file_session_factory() as session:
        habit_id = create_habit(session, name="Water", motivation="", created_at=NOW).id

    results, errors = _run_concurrently(file_session_factory, habit_id, core.log_completion, workers=8)

    assert errors == []
    assert len(results) == 8
    rows = _rows_for_today(file_session_factory, habit_id)
    assert len(rows) == 1
    assert rows[0].status == LogStatus.COMPLETED
    assert logs_crud._habit_locks == {}


def test_concurrent_toggles_see_each_other(file_session_factory):
    with file_session_factory() as session:
        habit_id = create_habit(session, name="Sleep", motivation="", created_at=NOW).id

    results, errors = _run_concurrently(file_session_factory, habit_id, core.toggle_today_completion, workers=6)

    assert errors == []
    # Serialized toggles alternate on, off, on...
    assert sorted(results) == [False, False, False, True, True, True]
    assert _rows_for_today(file_session_factory, habit_id) == []
