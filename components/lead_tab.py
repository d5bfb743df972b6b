"""Lead capture tab for owners who want to list a property."""

import streamlit as st
from rental_engine.leads import register_lead, LeadValidationError, CREATED


def render_lead_tab(store):
    """Render the lead form; `store` is the session's LeadStore."""
    st.header("List your property")
    with st.form("lead_form"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        phone = st.text_input("Phone")
        city = st.text_input("City", value="Aracaju")
        title = st.text_input("Property title")
        submitted = st.form_submit_button("Send")

    if not submitted:
        return
    try:
        status, lead = register_lead(store, {
            'name': name, 'email': email, 'phone': phone,
            'city': city, 'propertyTitle': title, 'source': 'site',
        })
    except LeadValidationError as e:
        st.error(str(e))
        return
    if status == CREATED:
        st.success(f"Thanks {lead.name}! We will get in touch soon.")
    else:
        st.info(f"Welcome back {lead.name}, we updated your contact details.")
