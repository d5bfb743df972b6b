from .models import PricedDay, DashboardStats, PricingParams, DEFAULT_PARAMS
from .lookup import build_holiday_index, holiday_for, find_event
from .pricing import dynamic_price, holiday_price, coerce_base
from .probability import booking_probability
from .revenue import potential_revenue, average_probability

def listing_warnings(listing) -> list[str]:
    """Configuration problems the caller should surface; pricing still runs"""
    if listing is None:
        return ["WARN: No listing selected"]
    warnings = []
    if listing.min_price > listing.max_price:
        warnings.append(
            f"WARN: Listing {listing.id} has min price {listing.min_price:g} above "
            f"max price {listing.max_price:g}; every day prices at the minimum"
        )
    if not (listing.min_price <= listing.base_price <= listing.max_price):
        warnings.append(
            f"WARN: Listing {listing.id} base price {listing.base_price:g} outside "
            f"[{listing.min_price:g}, {listing.max_price:g}]"
        )
    if not listing.calendar:
        warnings.append(f"WARN: Listing {listing.id} has an empty calendar")
    return warnings

def price_calendar(listing, adjusted_base=None, events=None, holidays=None, now=None,
                   params: PricingParams = DEFAULT_PARAMS) -> list[PricedDay]:
    """
    Price every calendar day of a listing and simulate its booking probability.

    Two prices are computed per day: a reference at the listing's original
    base price and the current price at `adjusted_base` (the owner's override,
    None keeps the listing base). The holiday multiplier is applied to both
    after clamping. Probability reacts to the ratio between them.

    Returns:
        A new list of PricedDay, empty for a missing listing or calendar
    """
    if listing is None or not listing.calendar:
        return []

    base = listing.base_price if adjusted_base is None else coerce_base(adjusted_base)
    holiday_index = build_holiday_index(holidays)

    rows = []
    for d in listing.calendar:
        ref = dynamic_price(listing.base_price, d.date, listing.city,
                            listing.min_price, listing.max_price, events, now, params)
        price = dynamic_price(base, d.date, listing.city,
                              listing.min_price, listing.max_price, events, now, params)
        ref = holiday_price(ref, d.date, holiday_index, params)
        price = holiday_price(price, d.date, holiday_index, params)

        reason, boost = "", 0.0
        h = holiday_for(d.date, holiday_index)
        if h is not None:
            reason = h.reason
            boost = params.default_holiday_boost if h.boost is None else h.boost
        else:
            ev = find_event(d.date, listing.city, events)
            if ev is not None:
                reason, boost = ev.title, ev.factor

        rows.append(PricedDay(
            date=d.date,
            status=d.status,
            price=price,
            probability=booking_probability(d.status, ref, price, params),
            reason=reason,
            boost=boost,
        ))
    return rows

def owner_dashboard(listing, adjusted_base=None, events=None, holidays=None, now=None,
                    params: PricingParams = DEFAULT_PARAMS) -> DashboardStats:
    """Priced rows plus probability-weighted occupancy and revenue potential"""
    rows = price_calendar(listing, adjusted_base, events, holidays, now, params)
    return DashboardStats(
        occupancy_rate=average_probability(rows),
        potential_revenue=potential_revenue(rows),
        days=rows,
    )

def revenue_sensitivity(listing, bases, events=None, holidays=None, now=None,
                        params: PricingParams = DEFAULT_PARAMS) -> list[dict]:
    """Dashboard aggregates for each candidate base price (owner what-if sweep)"""
    points = []
    for b in bases:
        stats = owner_dashboard(listing, b, events, holidays, now, params)
        points.append({
            "base": coerce_base(b),
            "occupancy_rate": stats.occupancy_rate,
            "potential_revenue": stats.potential_revenue,
        })
    return points
