"""
Data-loading boundary.

External listing, event and holiday records arrive loosely typed, with field
names that vary by source (camelCase JSON, Inside Airbnb CSV columns, Portuguese
status labels). They are normalized here, once, into the dataclasses in
`models`, so the pricing modules never deal with fallback chains.
"""
import json
import logging
from pathlib import Path

import pandas as pd

from .models import Listing, CalendarDay, Event, Holiday, OCCUPIED, FREE, DEFAULT_PARAMS
from .numeric import round_half_away
from .pricing import coerce_base
from .window import maybe_date, calendar_from_availability
from .compute import listing_warnings

logger = logging.getLogger(__name__)

OCCUPIED_LABELS = {"occupied", "ocupado", "booked", "reserved", "unavailable"}
DEFAULT_OWNER_BASE = 200.0
DEFAULT_CSV_PRICE = 250

def pick(row: dict, keys, fallback=""):
    """First non-blank value among `keys` (naming variants of one field)"""
    for k in keys:
        v = row.get(k)
        if v is not None and str(v).strip() != "":
            return v
    return fallback

def parse_price(text) -> int:
    """'$1,234.00' -> 1234; anything unparsable -> 0"""
    if text is None:
        return 0
    cleaned = "".join(ch for ch in str(text) if ch.isdigit() or ch in ".,-").replace(",", "")
    try:
        value = float(cleaned)
    except ValueError:
        return 0
    return round_half_away(value)

def normalize_status(value) -> str:
    return OCCUPIED if str(value or "").strip().lower() in OCCUPIED_LABELS else FREE

def calendar_from_records(records) -> tuple:
    days = []
    for rec in records or []:
        if isinstance(rec, CalendarDay):
            days.append(rec)
            continue
        d = maybe_date(rec.get("date")) if isinstance(rec, dict) else None
        if d is None:
            logger.warning("Skipping calendar day with bad date: %r", rec)
            continue
        days.append(CalendarDay(d, normalize_status(rec.get("status"))))
    return tuple(days)

def _price_field(record: dict, keys, default: float) -> float:
    """`default` only when every variant is missing or blank; explicit 0 stays 0"""
    value = pick(record, keys, None)
    return float(default) if value is None else coerce_base(value)

def listing_from_record(record: dict) -> Listing:
    """Normalize one listing dict (JSON or API shape) into a Listing"""
    base = _price_field(record, ["basePrice", "base_price", "price"], DEFAULT_OWNER_BASE)
    min_p = _price_field(record, ["minPrice", "min_price"], DEFAULT_PARAMS.default_min_price)
    max_p = _price_field(record, ["maxPrice", "max_price"], DEFAULT_PARAMS.default_max_price)
    listing_id = str(pick(record, ["id", "listing_id", "Listing ID", "ID"], ""))
    listing = Listing(
        id=listing_id,
        title=str(pick(record, ["title", "name"], f"Listing {listing_id}" if listing_id else "Listing")),
        city=str(pick(record, ["city", "City"], "")),
        neighborhood=str(pick(record, ["neighborhood", "neighbourhood"], "")),
        type=str(pick(record, ["type", "room_type"], "")),
        agency=str(pick(record, ["agency", "operadora"], "")),
        base_price=base,
        min_price=min_p,
        max_price=max_p,
        calendar=calendar_from_records(pick(record, ["calendar30", "calendar"], [])),
        photo=str(pick(record, ["photo", "picture_url"], "")),
    )
    for w in listing_warnings(listing):
        logger.warning(w)
    return listing

def listing_from_airbnb_row(row: dict, city: str, start=None) -> Listing:
    """Map an Inside Airbnb `visualisations/listings.csv` row to a Listing"""
    listing_id = pick(row, ["id", "listing_id", "Listing ID", "ID"])
    price = parse_price(pick(row, ["price", "Price"], 0)) or DEFAULT_CSV_PRICE
    try:
        agency = "ImobX" if int(float(listing_id)) % 2 == 0 else "ImobY"
    except (TypeError, ValueError):
        agency = "ImobX"
    return Listing(
        id=str(listing_id or ""),
        title=str(pick(row, ["name", "Listing Name"], f"Listing {listing_id}" if listing_id else "Listing")),
        city=str(pick(row, ["city", "City"], city)),
        neighborhood=str(pick(row, ["neighbourhood_cleansed", "neighbourhood", "Neighbourhood"], "")),
        type=str(pick(row, ["room_type", "Room Type"], "Apartment")),
        agency=agency,
        base_price=float(price),
        min_price=float(max(120, round_half_away(price * 0.6))),
        max_price=float(max(600, round_half_away(price * 3))),
        calendar=calendar_from_availability(pick(row, ["availability_30", "Availability 30"], 0), start),
        photo=str(pick(row, ["picture_url", "Picture URL", "picture_url_https", "Thumbnail URL"], "")),
    )

def load_listings_csv(path, city: str, limit: int = 24, start=None) -> list[Listing]:
    """Read an Inside Airbnb listings CSV (plain or .gz); failures give []"""
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, nrows=limit)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        logger.warning("Could not read listings CSV %s: %s", path, e)
        return []
    return [listing_from_airbnb_row(row, city, start) for row in df.to_dict("records")]

def event_from_record(record: dict):
    start = maybe_date(pick(record, ["start", "start_date"], None))
    end = maybe_date(pick(record, ["end", "end_date"], None))
    if start is None or end is None:
        logger.warning("Skipping event %r: bad start/end", record.get("title"))
        return None
    return Event(
        city=str(record.get("city") or ""),
        title=str(record.get("title") or ""),
        start=start,
        end=end,
        factor=coerce_base(record.get("factor")),
    )

def holiday_from_record(record: dict, default_boost: float = DEFAULT_PARAMS.default_holiday_boost):
    d = maybe_date(record.get("date"))
    if d is None:
        return None
    boost = record.get("boost")
    return Holiday(
        date=d,
        reason=str(record.get("reason") or "Holiday"),
        boost=default_boost if boost is None or boost == "" else coerce_base(boost),
    )

def load_events(records) -> list[Event]:
    """Keeps list order, which decides which overlapping event applies"""
    return [e for e in (event_from_record(r) for r in records or []) if e is not None]

def load_listings(records) -> list[Listing]:
    return [listing_from_record(r) for r in records or []]

def read_json_records(path) -> list:
    """Array of records from a JSON file; missing or malformed files give []"""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return []
    return data if isinstance(data, list) else []
