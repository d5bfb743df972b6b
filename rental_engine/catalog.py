"""Guest-facing browse: filters, facets and stay quotes"""
from datetime import timedelta
from .models import CatalogStats, PricingParams, DEFAULT_PARAMS
from .numeric import round_half_away
from .pricing import dynamic_price
from .revenue import nominal_occupancy, occupancy_gated_revenue
from .window import as_date

FACET_FIELDS = ("city", "neighborhood", "type", "agency")

def filter_listings(listings, city="", neighborhood="", type="", agency="") -> list:
    """Exact-match filters; an empty value matches everything"""
    wanted = {"city": city, "neighborhood": neighborhood, "type": type, "agency": agency}
    return [
        l for l in listings or []
        if all(not v or getattr(l, k) == v for k, v in wanted.items())
    ]

def facets(listings) -> dict:
    """Distinct values per filter field, in first-seen order"""
    return {
        f: list(dict.fromkeys(getattr(l, f) for l in listings or []))
        for f in FACET_FIELDS
    }

def stay_nights(start, end) -> int:
    if not start or not end:
        return 0
    return max(0, (as_date(end) - as_date(start)).days)

def suggested_stay_total(listing, start, end, events=None, now=None,
                         params: PricingParams = DEFAULT_PARAMS) -> int:
    """Sum of nightly prices for nights in [start, end) at the listing's base"""
    nights = stay_nights(start, end)
    if listing is None or not nights:
        return 0
    first = as_date(start)
    return sum(
        dynamic_price(listing.base_price, first + timedelta(days=i), listing.city,
                      listing.min_price, listing.max_price, events, now, params)
        for i in range(nights)
    )

def catalog_card(listing, events=None, start=None, end=None, now=None,
                 params: PricingParams = DEFAULT_PARAMS) -> CatalogStats:
    """Stats shown on a browse card: nominal occupancy, ADR, gated 30-day revenue"""
    if listing is None:
        return CatalogStats()
    nights = stay_nights(start, end)
    total = suggested_stay_total(listing, start, end, events, now, params)
    adr = total / nights if total and nights else listing.base_price
    return CatalogStats(
        occupancy=nominal_occupancy(listing),
        suggested_adr=round_half_away(adr),
        revenue_30d=occupancy_gated_revenue(listing, events, now, params),
        nights=nights,
        stay_total=total,
    )
