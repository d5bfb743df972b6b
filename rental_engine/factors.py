"""
Per-day price multipliers.

All factors are pure functions of the date (and city / reference lists for
events and holidays). The price calculator multiplies them in the order
weekday x season x lead time x event; the holiday factor is applied afterwards.
"""
from datetime import date, datetime, time
from .models import PricingParams, DEFAULT_PARAMS
from .numeric import round_half_away
from .window import as_date
from .lookup import find_event, holiday_for

SECONDS_PER_DAY = 86400.0

def day_of_week(day) -> int:
    """0=Sunday .. 6=Saturday"""
    return (as_date(day).weekday() + 1) % 7

def weekday_factor(day, params: PricingParams = DEFAULT_PARAMS) -> float:
    d = day_of_week(day)
    if d == 5 or d == 6:  # Fri/Sat
        return params.weekend_factor
    if d == 0:
        return params.sunday_factor
    return 1.0

def seasonal_factor(day, params: PricingParams = DEFAULT_PARAMS) -> float:
    m = as_date(day).month
    if m in params.summer_months:
        return params.summer_factor
    if m in params.winter_months:
        return params.winter_factor
    return 1.0

def lead_days(day, now=None) -> int:
    """Whole days from `now` to midnight of `day`, never negative"""
    if now is None:
        now = datetime.now()
    elif not isinstance(now, datetime) and isinstance(now, date):
        now = datetime.combine(now, time())
    target = datetime.combine(as_date(day), time())
    if now.tzinfo is not None:
        now = now.replace(tzinfo=None)
    delta = (target - now).total_seconds() / SECONDS_PER_DAY
    return max(0, round_half_away(delta))

def lead_time_factor(days: int, params: PricingParams = DEFAULT_PARAMS) -> float:
    # order matters: <=3 is checked before <=7
    if days <= params.short_lead_days:
        return params.short_lead_factor
    if days <= params.mid_lead_days:
        return params.mid_lead_factor
    if days >= params.far_lead_days:
        return params.far_lead_factor
    return 1.0

def event_factor(day, city: str, events) -> float:
    """1 + factor of the first matching event (list order is significant)"""
    ev = find_event(day, city, events)
    return 1.0 + (ev.factor or 0.0) if ev else 1.0

def holiday_factor(day, holiday_index: dict,
                   params: PricingParams = DEFAULT_PARAMS) -> float:
    h = holiday_for(day, holiday_index)
    if h is None:
        return 1.0
    boost = params.default_holiday_boost if h.boost is None else h.boost
    return 1.0 + boost
