"""Dynamic nightly price: base x factors, clamped to [min, max]"""
import math
from .models import PricingParams, DEFAULT_PARAMS
from .numeric import clamp, round_half_away
from .factors import (
    weekday_factor, seasonal_factor, lead_days, lead_time_factor,
    event_factor, holiday_factor
)

def coerce_base(value) -> float:
    """Numeric base price from user input; anything non-numeric becomes 0"""
    if isinstance(value, bool):
        return 0.0
    try:
        v = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0

def raw_price(base: float, day, city: str, events=None, now=None,
              params: PricingParams = DEFAULT_PARAMS) -> float:
    """Unclamped, unrounded price; factors multiplied left to right"""
    return (
        coerce_base(base) *
        weekday_factor(day, params) *
        seasonal_factor(day, params) *
        lead_time_factor(lead_days(day, now), params) *
        event_factor(day, city, events)
    )

def dynamic_price(base: float, day, city: str, min_price=None, max_price=None,
                  events=None, now=None, params: PricingParams = DEFAULT_PARAMS) -> int:
    """
    round(clamp(base x weekday x season x lead x event, min, max))

    Args:
        base: nightly base price (non-numeric input is treated as 0)
        day: date being priced
        city: listing city, matched exactly against event cities
        min_price / max_price: clamp bounds, defaults 120 / 1800 when None
        events: ordered event list, first match wins
        now: reference "today" for lead time (defaults to wall clock)

    Returns:
        Integer price within [min, max]
    """
    lo = params.default_min_price if min_price is None else min_price
    hi = params.default_max_price if max_price is None else max_price
    price = raw_price(base, day, city, events, now, params)
    return round_half_away(clamp(price, lo, hi))

def holiday_price(price: float, day, holiday_index: dict,
                  params: PricingParams = DEFAULT_PARAMS) -> int:
    """Second pass: scale by the holiday factor; deliberately not re-clamped"""
    return round_half_away(price * holiday_factor(day, holiday_index, params))
