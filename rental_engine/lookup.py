"""Date-keyed holiday index and event matching"""
from .window import as_date, maybe_date

def build_holiday_index(holidays) -> dict:
    """
    Map ISO date -> first Holiday seen for that date; later duplicates are ignored.

    Records whose date does not parse are skipped.
    """
    index = {}
    for h in holidays or []:
        d = maybe_date(getattr(h, "date", None))
        if d is None:
            continue
        key = d.isoformat()
        if key not in index:
            index[key] = h
    return index

def holiday_for(day, index: dict):
    if not index:
        return None
    return index.get(as_date(day).isoformat())

def find_event(day, city: str, events):
    """
    First event with an exact city match whose inclusive [start, end] holds `day`.

    Start/end may be dates or ISO strings; events with unparsable bounds never match.
    """
    d = as_date(day)
    for ev in events or []:
        if ev.city != city:
            continue
        start, end = maybe_date(ev.start), maybe_date(ev.end)
        if start is None or end is None:
            continue
        if start <= d <= end:
            return ev
    return None
