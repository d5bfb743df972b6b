"""
Owner lead capture ("I want to list my property").

Storage is injected: anything implementing `LeadStore` works. A lead matching
an existing email or phone is updated and reported as DUPLICATE instead of
being inserted twice.
"""
import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime
from itertools import count

logger = logging.getLogger(__name__)

CREATED = "CREATED"
DUPLICATE = "DUPLICATE"

class LeadValidationError(ValueError):
    pass

@dataclass
class Lead:
    id: int
    name: str
    email: str = ""
    phone: str = ""
    city: str = "Aracaju"
    property_title: str = ""
    source: str = "site"
    created_at: datetime = None
    last_contact_at: datetime = None

def normalize_email(value) -> str:
    return str(value or "").strip().lower()

def normalize_phone(value) -> str:
    return re.sub(r"\D+", "", str(value or ""))

class LeadStore:
    """Storage interface for leads"""

    def find_by_contact(self, email: str, phone: str):
        raise NotImplementedError

    def create(self, lead: Lead) -> Lead:
        raise NotImplementedError

    def update(self, lead: Lead) -> Lead:
        raise NotImplementedError

class InMemoryLeadStore(LeadStore):
    def __init__(self):
        self._leads = {}
        self._ids = count(1)

    def find_by_contact(self, email: str, phone: str):
        for lead in self._leads.values():
            if (email and lead.email == email) or (phone and lead.phone == phone):
                return lead
        return None

    def create(self, lead: Lead) -> Lead:
        stored = replace(lead, id=next(self._ids))
        self._leads[stored.id] = stored
        return stored

    def update(self, lead: Lead) -> Lead:
        if lead.id not in self._leads:
            raise KeyError(lead.id)
        self._leads[lead.id] = lead
        return lead

    def __len__(self):
        return len(self._leads)

def register_lead(store: LeadStore, payload: dict, now: datetime = None) -> tuple[str, Lead]:
    """
    Create or refresh a lead from a form payload.

    Returns:
        (CREATED | DUPLICATE, stored lead)

    Raises:
        LeadValidationError: name missing, or neither email nor phone given
    """
    now = now or datetime.now()
    payload = payload or {}
    name = str(payload.get("name") or "").strip()
    email = normalize_email(payload.get("email"))
    phone = normalize_phone(payload.get("phone"))
    city = str(payload.get("city") or "Aracaju").strip()
    title = str(payload.get("propertyTitle") or payload.get("property_title") or "").strip()
    source = str(payload.get("source") or "site")

    if not name:
        raise LeadValidationError("Name is required.")
    if not email and not phone:
        raise LeadValidationError("Email or phone is required.")

    found = store.find_by_contact(email, phone)
    if found is not None:
        updated = store.update(replace(
            found, name=name, email=email, phone=phone, city=city,
            property_title=title, last_contact_at=now,
        ))
        logger.info("Lead %s contacted again", updated.id)
        return DUPLICATE, updated

    created = store.create(Lead(
        id=0, name=name, email=email, phone=phone, city=city,
        property_title=title, source=source, created_at=now, last_contact_at=now,
    ))
    logger.info("Lead %s created", created.id)
    return CREATED, created
