"""
Short-Term Rental Pricing Assistant - Streamlit UI
A thin interface over rental_engine; all pricing logic lives in the engine
"""

import os
import logging
from pathlib import Path

import streamlit as st

from config.default_params import ENV_DEFAULTS, FALLBACK_EVENTS, FALLBACK_LISTINGS, HOLIDAY_FEED_DEFAULTS
from rental_engine.loader import load_listings, load_events, load_listings_csv, read_json_records
from rental_engine.holidays import fetch_holidays
from rental_engine.leads import InMemoryLeadStore
from rental_engine.window import make_calendar
from components.explore_tab import render_explore_tab
from components.owner_tab import render_owner_tab
from components.lead_tab import render_lead_tab


logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

st.set_page_config(
    page_title="Temporada Lite - Pricing Assistant",
    page_icon="🏖️",
    layout="wide"
)


def env(name):
    return os.getenv(name, ENV_DEFAULTS[name])


def _with_demo_calendar(records):
    """Records without a calendar get the synthetic 30-day pattern."""
    cal = [{'date': d.date.isoformat(), 'status': d.status} for d in make_calendar()]
    return [r if r.get('calendar30') or r.get('calendar') else {**r, 'calendar30': cal} for r in records]


@st.cache_data(ttl=600, show_spinner=False)
def load_data():
    """Listings and events from the configured source, falling back to demo data."""
    data_dir = Path(env('DATA_DIR'))
    if env('DATA_MODE') == 'csv' and env('LISTINGS_CSV'):
        listings = load_listings_csv(env('LISTINGS_CSV'), env('CITY'))
        events = []
    else:
        listings = load_listings(_with_demo_calendar(read_json_records(data_dir / 'listings.json')))
        events = load_events(read_json_records(data_dir / 'events.json'))
    if not listings:
        listings = load_listings(_with_demo_calendar(FALLBACK_LISTINGS))
        events = events or load_events(FALLBACK_EVENTS)
    return listings, events


@st.cache_data(ttl=3600, show_spinner=False)
def load_holidays():
    return fetch_holidays(
        env('HOLIDAYS_URL'),
        HOLIDAY_FEED_DEFAULTS['calendar_id'],
        HOLIDAY_FEED_DEFAULTS['days'],
        HOLIDAY_FEED_DEFAULTS['boost'],
    )


def main():
    st.title("🏖️ Temporada Lite")

    if 'lead_store' not in st.session_state:
        st.session_state['lead_store'] = InMemoryLeadStore()

    listings, events = load_data()
    holidays = load_holidays()

    tab1, tab2, tab3 = st.tabs(["🔎 Explore", "🏠 Owner Dashboard", "📝 List your property"])
    with tab1:
        render_explore_tab(listings, events)
    with tab2:
        render_owner_tab(listings, events, holidays)
    with tab3:
        render_lead_tab(st.session_state['lead_store'])

    st.caption("Multi-agency: filter by agency in Explore; each card shows the responsible agency.")


if __name__ == "__main__":
    main()
