"""Booking probability heuristic (closed form, not fit from data)"""
from .models import OCCUPIED, PricingParams, DEFAULT_PARAMS
from .numeric import clamp

def baseline_probability(status: str, params: PricingParams = DEFAULT_PARAMS) -> float:
    return params.p_occupied if status == OCCUPIED else params.p_free

def price_factor(ref_price: float, price: float,
                 params: PricingParams = DEFAULT_PARAMS) -> float:
    """
    (ref / max(price, 1)) ^ elasticity

    Price above the reference gives a factor < 1, below gives > 1.
    A zero reference falls back to the current price, then to 1.
    """
    ref = ref_price or price or 1
    return (ref / max(price, 1)) ** params.elasticity

def booking_probability(status: str, ref_price: float, price: float,
                        params: PricingParams = DEFAULT_PARAMS) -> float:
    p0 = baseline_probability(status, params)
    return clamp(p0 * price_factor(ref_price, price, params), params.prob_min, params.prob_max)
