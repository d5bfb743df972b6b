"""Explore tab: guest-style catalog browse."""

import streamlit as st
from rental_engine.catalog import filter_listings, facets, catalog_card


def _select(col, label, options):
    return col.selectbox(label, [''] + options, format_func=lambda v: v or 'All')


def render_explore_tab(listings, events):
    """Render filters and one card per matching listing."""
    opts = facets(listings)
    c1, c2, c3, c4 = st.columns(4)
    city = _select(c1, "City", opts['city'])
    neighborhood = _select(c2, "Neighborhood", opts['neighborhood'])
    type_ = _select(c3, "Type", opts['type'])
    agency = _select(c4, "Agency", opts['agency'])

    d1, d2 = st.columns(2)
    start = d1.date_input("From", value=None)
    end = d2.date_input("Until", value=None)

    filtered = filter_listings(listings, city, neighborhood, type_, agency)
    if not filtered:
        st.info("No listings match these filters.")
        return

    cols = st.columns(3)
    for i, listing in enumerate(filtered):
        stats = catalog_card(listing, events, start, end)
        with cols[i % 3]:
            with st.container(border=True):
                if listing.photo:
                    st.image(listing.photo, use_container_width=True)
                st.caption(f"{listing.city} • {listing.neighborhood} • {listing.type}")
                st.subheader(listing.title)
                m1, m2, m3 = st.columns(3)
                m1.metric("Occupancy 30d", f"{stats.occupancy * 100:.0f}%")
                m2.metric("Suggested ADR", f"R$ {stats.suggested_adr}")
                m3.metric("Revenue 30d", f"R$ {stats.revenue_30d:,}")
                if stats.nights > 0:
                    st.markdown(f"{stats.nights} nights • Suggested total: **R$ {stats.stay_total:,}**")
                st.caption(f"Agency: {listing.agency}")
