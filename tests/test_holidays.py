"""Test the holiday feed adapter degrades to no holidays on any failure"""
from datetime import date
import requests
from rental_engine.holidays import (
    parse_holiday_payload, holidays_from_calendar_events, fetch_holidays, DEFAULT_CALENDAR_ID
)

class FakeResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload

class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.error:
            raise self.error
        return self.response

def test_parse_payload_items():
    holidays = parse_holiday_payload({"items": [
        {"date": "2026-11-15", "reason": "Proclamação da República", "boost": 0.2},
        {"date": "2026-11-20", "reason": "Consciência Negra"},
        {"date": "??", "reason": "bad"},
        "junk",
    ]})
    assert [h.date for h in holidays] == [date(2026, 11, 15), date(2026, 11, 20)]
    assert holidays[1].boost == 0.2

def test_parse_payload_errors_and_junk():
    assert parse_holiday_payload({"error": "CONFIG", "message": "missing key"}) == []
    assert parse_holiday_payload({"items": "nope"}) == []
    assert parse_holiday_payload(None) == []
    assert parse_holiday_payload({}) == []

def test_calendar_events_to_items():
    items = holidays_from_calendar_events([
        {"summary": "Natal", "start": {"date": "2026-12-25"}},
        {"start": {"dateTime": "2026-11-02T00:00:00-03:00"}},
        {"summary": "No start"},
    ], boost="0.3")
    assert items == [
        {"date": "2026-12-25", "reason": "Natal", "boost": 0.3},
        {"date": "2026-11-02", "reason": "Feriado", "boost": 0.3},
    ]

def test_fetch_sends_contract_params():
    session = FakeSession(FakeResponse(200, {"items": [{"date": "2026-12-25", "reason": "Natal", "boost": 0.2}]}))
    holidays = fetch_holidays("https://example.org/api/holidays", session=session)
    assert len(holidays) == 1 and holidays[0].reason == "Natal"
    url, params, timeout = session.calls[0]
    assert params == {"calendarId": DEFAULT_CALENDAR_ID, "days": 180, "boost": 0.2}
    assert timeout > 0

def test_fetch_failures_return_empty():
    url = "https://example.org/api/holidays"
    assert fetch_holidays(url, session=FakeSession(error=requests.ConnectionError("down"))) == []
    assert fetch_holidays(url, session=FakeSession(error=requests.Timeout("slow"))) == []
    assert fetch_holidays(url, session=FakeSession(FakeResponse(500, {"error": "SERVER_ERROR"}))) == []
    assert fetch_holidays(url, session=FakeSession(FakeResponse(200, bad_json=True))) == []
    assert fetch_holidays("", session=FakeSession()) == []

def test_fetch_accepts_google_calendar_events_response():
    payload = {"kind": "calendar#events", "items": [
        {"summary": "Natal", "start": {"date": "2026-12-25"}},
        {"summary": "Reunião", "start": {"dateTime": "2026-11-02T10:00:00-03:00"}},
        {"summary": "No start"},
        {"date": "2026-11-15", "reason": "Proclamação da República"},
    ]}
    holidays = fetch_holidays("https://example.org/api/holidays", boost=0.3,
                              session=FakeSession(FakeResponse(200, payload)))
    assert [(h.date, h.reason, h.boost) for h in holidays] == [
        (date(2026, 12, 25), "Natal", 0.3),
        (date(2026, 11, 2), "Reunião", 0.3),
        (date(2026, 11, 15), "Proclamação da República", 0.3),
    ]
