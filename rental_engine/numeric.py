import math

def clamp(v: float, lo: float, hi: float) -> float:
    """max(lo, min(hi, v)); with lo > hi this returns lo (not reordered)"""
    return max(lo, min(hi, v))

def round_half_away(x: float) -> int:
    """Round to units, halves away from zero (2.5 -> 3, -2.5 -> -3)"""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))
