from datetime import date
from typing import Optional

from pydantic import BaseModel

from habitlog.models import LogStatus


class LogDayIn(BaseModel):
    # Left as a string so the day-key rules decide what is a valid day.
    day: Optional[str] = None


class ResetIn(LogDayIn):
    note: str


class HabitLogOut(BaseModel):
    day: date
    status: LogStatus
    note: Optional[str] = None

    class Config:
        from_attributes = True


class ToggleOut(BaseModel):
    completed_today: bool
    streak: int
    milestone: Optional[int] = None


class CalendarDayOut(BaseModel):
    day: date
    status: Optional[LogStatus] = None


class CalendarOut(BaseModel):
    year: int
    month: int
    days: list[CalendarDayOut]
