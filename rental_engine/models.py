from dataclasses import dataclass, field
from datetime import date

OCCUPIED = "occupied"
FREE = "free"

@dataclass(frozen=True)
class CalendarDay:
    date: date
    status: str = FREE  # baseline occupancy, seeds probability only

@dataclass(frozen=True)
class Event:
    city: str
    title: str
    start: date
    end: date        # inclusive
    factor: float = 0.0  # additive, 0.25 = +25%

@dataclass(frozen=True)
class Holiday:
    date: date
    reason: str = "Holiday"
    boost: float = 0.2

@dataclass
class Listing:
    id: str
    title: str = ""
    city: str = ""
    neighborhood: str = ""
    type: str = ""
    agency: str = ""
    base_price: float = 0.0
    min_price: float = 120.0
    max_price: float = 1800.0
    calendar: tuple = ()
    photo: str = ""

@dataclass(frozen=True)
class PricedDay:
    date: date
    status: str
    price: int
    probability: float
    reason: str = ""
    boost: float = 0.0

@dataclass
class PricingParams:
    # weekday multipliers
    weekend_factor: float = 1.12   # Fri/Sat
    sunday_factor: float = 1.05
    # seasonality (Brazilian summer bump, mild winter drop)
    summer_months: tuple = (12, 1, 2)
    summer_factor: float = 1.18
    winter_months: tuple = (6, 7)
    winter_factor: float = 0.95
    # lead time: closer = small markdown, far = light bump
    short_lead_days: int = 3
    short_lead_factor: float = 0.92
    mid_lead_days: int = 7
    mid_lead_factor: float = 0.97
    far_lead_days: int = 45
    far_lead_factor: float = 1.06
    # booking probability heuristic
    p_occupied: float = 0.85
    p_free: float = 0.35
    elasticity: float = 1.2
    prob_min: float = 0.05
    prob_max: float = 0.98
    # bounds and defaults
    default_min_price: float = 120.0
    default_max_price: float = 1800.0
    default_holiday_boost: float = 0.2
    horizon_days: int = 30

DEFAULT_PARAMS = PricingParams()

@dataclass
class DashboardStats:
    occupancy_rate: float = 0.0     # mean simulated probability
    potential_revenue: float = 0.0  # sum of price x probability
    days: list = field(default_factory=list)

@dataclass
class CatalogStats:
    occupancy: float = 0.0      # booked fraction of nominal statuses
    suggested_adr: int = 0
    revenue_30d: int = 0        # occupied days only
    nights: int = 0
    stay_total: int = 0
