import logging
import threading
from contextlib import contextmanager
from datetime import tzinfo
from typing import Any, Callable, Iterator, TypeVar

from sqlalchemy.orm import Session

from habitlog.core.days import UTC, DayLike, day_key
from habitlog.core.log_store import entry_for
from habitlog.crud.habits import get_habit_or_raise
from habitlog.errors import EntryNotFound
from habitlog.models import Habit, HabitLog

logger = logging.getLogger(__name__)

T = TypeVar("T")

_locks_guard = threading.Lock()
# habit id -> (lock, number of writers holding or waiting on it)
_habit_locks: dict[int, tuple[threading.Lock, int]] = {}


@contextmanager
def _habit_lock(habit_id: int) -> Iterator[None]:
    with _locks_guard:
        lock, users = _habit_locks.get(habit_id, (None, 0))
        if lock is None:
            lock = threading.Lock()
        _habit_locks[habit_id] = (lock, users + 1)
    try:
        with lock:
            yield
    finally:
        with _locks_guard:
            lock, users = _habit_locks[habit_id]
            if users <= 1:
                del _habit_locks[habit_id]
            else:
                _habit_locks[habit_id] = (lock, users - 1)


def apply_log_command(db: Session, habit_id: int, command: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a core logging command against a stored habit and commit it.

    Writes to one habit are serialized; the core's one-entry-per-day rule
    relies on nobody else mutating the log in between. Unknown habits fail
    before any lock is taken.
    """
    habit = get_habit_or_raise(db, habit_id)
    with _habit_lock(habit_id):
        # Reload inside the lock so the log reflects the previous writer's commit.
        db.expire(habit)
        try:
            result = command(habit, *args, **kwargs)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("habit %s: applied %s", habit_id, getattr(command, "__name__", command))
        return result


def get_entry_or_raise(habit: Habit, day: DayLike, tz: tzinfo = UTC) -> HabitLog:
    entry = entry_for(habit, day, tz)
    if entry is None:
        raise EntryNotFound(habit.id, day_key(day, tz))
    return entry
