from habitlog.crud.habits import (
    archive_habit,
    create_habit,
    delete_habit,
    get_habit,
    get_habit_or_raise,
    list_habits,
    unarchive_habit,
)
from habitlog.crud.logs import apply_log_command, get_entry_or_raise

__all__ = [
    "create_habit",
    "get_habit",
    "get_habit_or_raise",
    "list_habits",
    "archive_habit",
    "unarchive_habit",
    "delete_habit",
    "apply_log_command",
    "get_entry_or_raise",
]
