from .models import OCCUPIED, PricingParams, DEFAULT_PARAMS
from .numeric import round_half_away
from .pricing import dynamic_price

# Catalog view (nominal calendar) and owner dashboard (simulated) use different
# aggregation semantics; keep them as separate operations.

def nominal_occupancy(listing) -> float:
    """Booked fraction of the nominal 30-day calendar"""
    days = list(listing.calendar) if listing is not None else []
    if not days:
        return 0.0
    booked = sum(1 for d in days if d.status == OCCUPIED)
    return booked / len(days)

def occupancy_gated_revenue(listing, events=None, now=None,
                            params: PricingParams = DEFAULT_PARAMS) -> int:
    """Sum of price at the listing's own base over nominally occupied days"""
    if listing is None:
        return 0
    total = 0.0
    for d in listing.calendar:
        if d.status != OCCUPIED:
            continue
        total += dynamic_price(
            listing.base_price, d.date, listing.city,
            listing.min_price, listing.max_price, events, now, params
        )
    return round_half_away(total)

def potential_revenue(rows) -> float:
    """Probability-weighted revenue: sum(price x probability)"""
    return sum(r.price * r.probability for r in rows or [])

def average_probability(rows) -> float:
    rows = list(rows or [])
    if not rows:
        return 0.0
    return sum(r.probability for r in rows) / len(rows)
