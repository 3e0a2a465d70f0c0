"""Day-key normalization.

Every log entry is keyed by a plain calendar ``date``. Callers may hand in a
``date``, a ``datetime`` (naive or aware) or an ISO 8601 string; all of them
are reduced to the calendar day they fall on in a single reference timezone.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union

from habitlog.errors import InvalidDate

DayLike = Union[date, datetime, str]

UTC = timezone.utc


def day_key(value: DayLike, tz: tzinfo = UTC) -> date:
    """Return the calendar day ``value`` falls on in ``tz``.

    Naive datetimes are taken to already be wall-clock time in ``tz``.
    Raises ``InvalidDate`` for anything that cannot be resolved to a day.
    """
    if isinstance(value, str):
        value = _parse(value)

    # datetime subclasses date, so it has to be checked first.
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            try:
                value = value.astimezone(tz)
            except OverflowError as exc:
                raise InvalidDate(value, "outside the supported calendar range") from exc
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDate(value, f"expected a date, datetime or ISO string, got {type(value).__name__}")


def previous_day(day: date) -> date:
    try:
        return day - timedelta(days=1)
    except OverflowError as exc:
        raise InvalidDate(day, "no calendar day before it") from exc


def days_before(day: date, count: int) -> date:
    try:
        return day - timedelta(days=count)
    except OverflowError:
        return date.min


def _parse(raw: str) -> Union[date, datetime]:
    text = raw.strip()
    if not text:
        raise InvalidDate(raw, "empty string")
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidDate(raw) from exc
