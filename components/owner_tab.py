"""Owner dashboard tab: adjustable base price and 30-day simulation."""

import streamlit as st
from config.default_params import OWNER_DEFAULT_BASE
from rental_engine.compute import owner_dashboard, listing_warnings, revenue_sensitivity
from utils.tables import priced_days_frame, sensitivity_frame
from utils.visualizations import create_price_calendar_chart, create_sensitivity_chart


def render_owner_tab(listings, events, holidays):
    """Render the owner pricing dashboard."""
    if not listings:
        st.warning("No listings found. Check the data source settings.")
        return

    by_id = {l.id: l for l in listings}
    col1, col2, col3 = st.columns(3)
    selected_id = col1.selectbox(
        "Listing", list(by_id),
        format_func=lambda i: f"{i} — {by_id[i].title}"
    )
    selected = by_id[selected_id]
    base = col2.number_input(
        "Base Price (R$)",
        min_value=0,
        value=int(selected.base_price or OWNER_DEFAULT_BASE),
        step=10,
        key=f"base_{selected_id}"
    )

    for w in listing_warnings(selected):
        st.warning(w)

    stats = owner_dashboard(selected, base, events, holidays)
    with col3:
        m1, m2 = st.columns(2)
        m1.metric("Occupancy 30d", f"{stats.occupancy_rate * 100:.0f}%")
        m2.metric("Potential Revenue 30d", f"R$ {stats.potential_revenue:,.0f}")

    days_df = priced_days_frame(stats.days)
    if days_df.empty:
        st.info("This listing has no calendar days to price.")
        return

    st.plotly_chart(create_price_calendar_chart(days_df), use_container_width=True)
    st.dataframe(days_df, use_container_width=True, hide_index=True)

    with st.expander("Base price sensitivity"):
        step = max(10, int(selected.base_price * 0.1))
        bases = [max(0, int(selected.base_price) + k * step) for k in range(-5, 6)]
        sens_df = sensitivity_frame(revenue_sensitivity(selected, bases, events, holidays))
        st.plotly_chart(create_sensitivity_chart(sens_df, base), use_container_width=True)

    st.caption("Formula: price = base × weekday × season × lead × event (clamped to min/max) × holiday.")
