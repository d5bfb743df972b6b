"""Test normalization of loosely typed listing/event/holiday records"""
import json
from datetime import date, datetime
from rental_engine.models import OCCUPIED, FREE
from rental_engine.compute import price_calendar
from rental_engine.loader import (
    pick, parse_price, normalize_status, listing_from_record, listing_from_airbnb_row,
    load_listings_csv, load_events, load_listings, holiday_from_record, read_json_records
)

START = date(2026, 11, 1)

def test_pick_skips_blank_variants():
    row = {"id": "", "listing_id": "  ", "ID": 7}
    assert pick(row, ["id", "listing_id", "ID"]) == 7
    assert pick(row, ["nope"], "fallback") == "fallback"

def test_parse_price():
    assert parse_price("$1,234.00") == 1234
    assert parse_price("R$ 99.50") == 100
    assert parse_price("abc") == 0
    assert parse_price(None) == 0
    assert parse_price(250) == 250

def test_normalize_status_aliases():
    assert normalize_status("ocupado") == OCCUPIED
    assert normalize_status("Occupied") == OCCUPIED
    assert normalize_status("livre") == FREE
    assert normalize_status(None) == FREE

def test_listing_from_camelcase_record():
    listing = listing_from_record({
        "id": "SSA-1203", "title": "Studio", "city": "Salvador", "neighborhood": "Ondina",
        "type": "Studio", "agency": "ImobX", "basePrice": 240, "minPrice": 150, "maxPrice": 900,
        "calendar30": [{"date": "2026-11-01", "status": "ocupado"},
                       {"date": "2026-11-02", "status": "livre"},
                       {"date": "garbage", "status": "livre"}],
    })
    assert listing.base_price == 240.0
    assert (listing.min_price, listing.max_price) == (150.0, 900.0)
    assert [d.status for d in listing.calendar] == [OCCUPIED, FREE]
    assert listing.calendar[0].date == START

def test_listing_record_defaults_applied_once():
    listing = listing_from_record({"id": 5, "basePrice": "  "})
    assert listing.id == "5"
    assert listing.title == "Listing 5"
    assert listing.base_price == 200.0
    assert (listing.min_price, listing.max_price) == (120.0, 1800.0)
    assert listing.calendar == ()

def test_listing_record_explicit_zero_is_not_missing():
    """Zero or non-numeric prices are real values, not a cue for the defaults"""
    listing = listing_from_record({"id": 6, "basePrice": 0, "minPrice": 0, "maxPrice": 1000})
    assert (listing.base_price, listing.min_price, listing.max_price) == (0.0, 0.0, 1000.0)
    assert listing_from_record({"id": 7, "basePrice": "not a number"}).base_price == 0.0

def test_zero_priced_record_flows_through_pipeline():
    listing = listing_from_record({
        "id": 8, "city": "Salvador", "basePrice": 0, "minPrice": 0, "maxPrice": 1000,
        "calendar30": [{"date": "2026-12-05", "status": "livre"}],
    })
    rows = price_calendar(listing, None, [], [], datetime(2026, 10, 16))
    assert [r.price for r in rows] == [0]

def test_listing_from_airbnb_row():
    row = {"id": "42", "name": "Canal view", "neighbourhood_cleansed": "Centrum-West",
           "room_type": "Entire home/apt", "price": "$100.00", "availability_30": "10",
           "picture_url": "https://example.org/p.jpg"}
    listing = listing_from_airbnb_row(row, "amsterdam", START)
    assert listing.agency == "ImobX"
    assert listing.city == "amsterdam"
    assert listing.base_price == 100.0
    assert listing.min_price == 120.0    # max(120, 60)
    assert listing.max_price == 600.0    # max(600, 300)
    assert sum(1 for d in listing.calendar if d.status == FREE) == 10
    assert len(listing.calendar) == 30

def test_airbnb_row_price_fallback_and_odd_id():
    listing = listing_from_airbnb_row({"id": "43", "price": ""}, "amsterdam", START)
    assert listing.agency == "ImobY"
    assert listing.base_price == 250.0
    assert listing.min_price == 150.0
    assert listing.max_price == 750.0
    assert listing.title == "Listing 43"

def test_load_listings_csv(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(
        "id,name,neighbourhood,room_type,price,availability_30\n"
        "1,A,Oud-West,Private room,$80.00,5\n"
        "2,B,Centrum,Entire home/apt,$300.00,0\n"
        "3,C,Noord,Entire home/apt,$90.00,30\n",
        encoding="utf-8",
    )
    listings = load_listings_csv(path, "amsterdam", limit=2, start=START)
    assert [l.id for l in listings] == ["1", "2"]
    assert listings[1].base_price == 300.0
    assert listings[1].max_price == 900.0

def test_load_listings_csv_missing_file(tmp_path):
    assert load_listings_csv(tmp_path / "missing.csv", "amsterdam") == []

def test_load_events_skips_bad_records_keeps_order():
    events = load_events([
        {"city": "Salvador", "title": "Festival", "start": "2025-11-20", "end": "2025-11-23", "factor": 0.25},
        {"city": "Salvador", "title": "Broken", "start": "soon", "end": "2025-11-23", "factor": 0.5},
        {"city": "Aracaju", "title": "Corrida", "start": "2025-11-16", "end": "2025-11-16"},
    ])
    assert [e.title for e in events] == ["Festival", "Corrida"]
    assert events[0].start == date(2025, 11, 20)
    assert events[1].factor == 0.0

def test_holiday_from_record_default_boost():
    h = holiday_from_record({"date": "2026-11-15"})
    assert h.boost == 0.2 and h.reason == "Holiday"
    assert holiday_from_record({"date": "2026-11-15", "boost": "0.3"}).boost == 0.3
    assert holiday_from_record({"date": None}) is None

def test_read_json_records(tmp_path):
    good = tmp_path / "listings.json"
    good.write_text(json.dumps([{"id": "X"}]), encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert read_json_records(good) == [{"id": "X"}]
    assert read_json_records(bad) == []
    assert read_json_records(tmp_path / "missing.json") == []
    assert [l.id for l in load_listings(read_json_records(good))] == ["X"]
