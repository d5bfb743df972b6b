"""
Holiday feed adapter.

The feed answers GET ?calendarId=&days=&boost= with {"items": [{date, reason, boost}]}
or, on failure, a non-2xx status and {error, message}. A raw Google Calendar
events response (items carrying start.date / start.dateTime) is accepted too.
Any failure here degrades to "no holidays".
"""
import logging

import requests

from .loader import holiday_from_record
from .models import DEFAULT_PARAMS

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_ID = "pt-br.brazilian#holiday@group.v.calendar.google.com"
DEFAULT_DAYS = 180
DEFAULT_TIMEOUT = 15

def holidays_from_calendar_events(events, boost: float = DEFAULT_PARAMS.default_holiday_boost) -> list[dict]:
    """
    Convert Google Calendar event resources into feed items.

    All-day events carry start.date; timed ones start.dateTime, truncated to the date.
    Events without either are dropped.
    """
    items = []
    for ev in events or []:
        start = ev.get("start") or {}
        day = start.get("date") or (start.get("dateTime") or "")[:10]
        if not day:
            continue
        items.append({"date": day, "reason": ev.get("summary") or "Feriado", "boost": float(boost)})
    return items

def _is_calendar_event(item: dict) -> bool:
    return "date" not in item and isinstance(item.get("start"), dict)

def parse_holiday_payload(payload, default_boost: float = DEFAULT_PARAMS.default_holiday_boost) -> list:
    """Holidays from a feed response body; error bodies and junk give []"""
    if not isinstance(payload, dict):
        return []
    if payload.get("error"):
        logger.warning("Holiday feed error %s: %s", payload.get("error"), payload.get("message"))
        return []
    items = payload.get("items") or []
    if not isinstance(items, list):
        return []
    holidays = []
    for item in items:
        if not isinstance(item, dict):
            continue
        records = holidays_from_calendar_events([item], default_boost) if _is_calendar_event(item) else [item]
        for record in records:
            h = holiday_from_record(record, default_boost)
            if h is not None:
                holidays.append(h)
    return holidays

def fetch_holidays(url: str, calendar_id: str = DEFAULT_CALENDAR_ID, days: int = DEFAULT_DAYS,
                   boost: float = DEFAULT_PARAMS.default_holiday_boost, session=None,
                   timeout: float = DEFAULT_TIMEOUT) -> list:
    """Fetch holidays from the feed; never raises, returns [] on any failure"""
    if not url:
        return []
    http = session or requests
    params = {"calendarId": calendar_id, "days": days, "boost": boost}
    try:
        resp = http.get(url, params=params, timeout=timeout)
        payload = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Holiday fetch failed for %s: %s", url, e)
        return []
    if not resp.ok:
        logger.warning("Holiday feed returned HTTP %s", resp.status_code)
        return []
    return parse_holiday_payload(payload, boost)
