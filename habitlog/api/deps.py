from datetime import datetime
from typing import Iterator

from sqlalchemy.orm import Session

from habitlog.config import settings
from habitlog.db import SessionLocal


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_now() -> datetime:
    """The single place the service reads the clock."""
    return datetime.now(settings.tz)
