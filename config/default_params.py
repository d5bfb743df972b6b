"""Default parameters and demo data for the pricing assistant."""

HOLIDAY_FEED_DEFAULTS = {
    'calendar_id': 'pt-br.brazilian#holiday@group.v.calendar.google.com',
    'days': 180,
    'boost': 0.2,
}

# Environment switches read by app.py
ENV_DEFAULTS = {
    'DATA_MODE': 'local',          # local (JSON files) | csv (Inside Airbnb export)
    'DATA_DIR': 'data',
    'LISTINGS_CSV': '',
    'CITY': 'amsterdam',
    'HOLIDAYS_URL': '',
}

OWNER_DEFAULT_BASE = 200

FALLBACK_EVENTS = [
    {'city': 'Salvador', 'title': 'Festival de Verão', 'start': '2025-11-20', 'end': '2025-11-23', 'factor': 0.25},
    {'city': 'Aracaju', 'title': 'Corrida de Rua', 'start': '2025-11-16', 'end': '2025-11-16', 'factor': 0.10},
]

# Calendars are generated at load time (synthetic 30-day pattern)
FALLBACK_LISTINGS = [
    {'id': 'SSA-1203', 'title': 'Studio Vista Mar em Ondina', 'city': 'Salvador', 'neighborhood': 'Ondina',
     'type': 'Studio', 'agency': 'ImobX', 'basePrice': 240, 'minPrice': 150, 'maxPrice': 900},
    {'id': 'SSA-4310', 'title': '2Q Pé na Areia — Barra', 'city': 'Salvador', 'neighborhood': 'Barra',
     'type': 'Apartamento', 'agency': 'ImobY', 'basePrice': 380, 'minPrice': 220, 'maxPrice': 1200},
    {'id': 'AJU-2211', 'title': 'Casa 3Q Próx. Orla de Atalaia', 'city': 'Aracaju', 'neighborhood': 'Atalaia',
     'type': 'Casa', 'agency': 'ImobX', 'basePrice': 500, 'minPrice': 260, 'maxPrice': 1800},
]
