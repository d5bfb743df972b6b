"""30-day calendar window builder"""
from datetime import date, datetime, timedelta
from .models import CalendarDay, OCCUPIED, FREE, DEFAULT_PARAMS

def as_date(value) -> date:
    """Coerce a date, datetime or ISO 'YYYY-MM-DD...' string to a date (time dropped)"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])

def maybe_date(value):
    """as_date, or None when the value is not a date"""
    try:
        return as_date(value)
    except (TypeError, ValueError):
        return None

def window_dates(start=None, days: int = DEFAULT_PARAMS.horizon_days) -> list[date]:
    start_d = as_date(start) if start is not None else date.today()
    return [start_d + timedelta(days=i) for i in range(days)]

def make_calendar(start=None, days: int = DEFAULT_PARAMS.horizon_days) -> tuple:
    """
    Synthetic demo calendar: day i is occupied when i % 5 == 0 or i % 7 == 0.

    Not a booking source of truth, only a deterministic baseline.
    """
    return tuple(
        CalendarDay(d, OCCUPIED if (i % 5 == 0 or i % 7 == 0) else FREE)
        for i, d in enumerate(window_dates(start, days))
    )

def calendar_from_availability(availability_30, start=None,
                               days: int = DEFAULT_PARAMS.horizon_days) -> tuple:
    """First `availability_30` days are free, the remainder occupied"""
    try:
        avail = int(float(availability_30 or 0))
    except (TypeError, ValueError):
        avail = 0
    avail = max(0, min(days, avail))
    return tuple(
        CalendarDay(d, FREE if i < avail else OCCUPIED)
        for i, d in enumerate(window_dates(start, days))
    )
