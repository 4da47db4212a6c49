import math
from datetime import date, datetime, time, timezone

from jobnote.config import settings
from jobnote.schemas.job import DueStatus

_DAY_SECONDS = 24 * 60 * 60
_EPOCH = datetime(1970, 1, 1)
_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_due(value: object) -> datetime | None:
    """Parse a stored due date. Date-only values mean local midnight.

    Returns None for anything that is not a usable ISO date or datetime.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return datetime.combine(date.fromisoformat(text), time())
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def effective_due_time(value: object) -> float:
    due = parse_due(value)
    if due is None:
        return math.inf
    # Plain subtraction stays valid for year 1 and 9999, unlike timestamp().
    epoch = _EPOCH if due.tzinfo is None else _EPOCH_UTC
    return (due - epoch).total_seconds()


def days_until(due_date: object, today: date | None = None) -> int | None:
    due = parse_due(due_date)
    if due is None:
        return None
    start = datetime.combine(today or date.today(), time())
    end = datetime.combine(due.date(), time())
    return math.ceil((end - start).total_seconds() / _DAY_SECONDS)


def classify(due_date: object, today: date | None = None) -> DueStatus:
    diff_days = days_until(due_date, today)
    if diff_days is None:
        return DueStatus.NONE
    if diff_days <= 0:
        return DueStatus.ENDED
    if diff_days <= settings.soon_threshold_days:
        return DueStatus.SOON
    return DueStatus.NONE
