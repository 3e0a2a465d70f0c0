from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HabitCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    motivation: str = ""


class HabitStatsOut(BaseModel):
    streak: int
    milestone: Optional[int] = None
    completed_today: bool
    monthly_completion_rate: float


class HabitOut(BaseModel):
    id: int
    name: str
    motivation: str
    created_at: datetime
    is_active: bool
    is_archived: bool

    class Config:
        from_attributes = True


class HabitDetailOut(HabitOut):
    stats: HabitStatsOut
