from typing import Any


class HabitLogError(Exception):
    """Base class for every error raised by habitlog."""


class InvalidDate(HabitLogError, ValueError):
    """A value could not be normalized to a calendar day."""

    def __init__(self, value: Any, reason: str = "not a valid calendar date") -> None:
        self.value = value
        super().__init__(f"{value!r}: {reason}")


class HabitNotFound(HabitLogError, LookupError):
    def __init__(self, habit_id: int) -> None:
        self.habit_id = habit_id
        super().__init__(f"habit {habit_id} not found")


class EntryNotFound(HabitLogError, LookupError):
    def __init__(self, habit_id: Any, day: Any) -> None:
        self.habit_id = habit_id
        self.day = day
        super().__init__(f"no log entry for habit {habit_id} on {day}")


class InvalidCommand(HabitLogError, ValueError):
    """A logging command was called with arguments it cannot act on."""
