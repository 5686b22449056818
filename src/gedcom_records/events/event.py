# src/gedcom_records/events/event.py

from __future__ import annotations

from typing import Dict


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS: frozenset[str] = frozenset({
    "BIRT", "CHR", "CHRA", "BAPM", "BARM", "BASM", "BLES",
    "ADOP", "CONF", "FCOM", "GRAD", "ORDN", "EMIG", "IMMI",
    "NATU", "CENS", "PROB", "WILL", "RETI", "DEAT", "BURI",
    "CREM", "EVEN",  # EVEN = generic event
})

FAMILY_EVENT_TAGS: frozenset[str] = frozenset({
    "MARR", "MARB", "MARC", "MARL", "MARS",
    "ENGA", "ANUL", "DIV", "DIVF", "CENS", "RESI", "EVEN",
})

# Attribute structures share the event shape (value + detail).
INDIVIDUAL_ATTRIBUTE_TAGS: frozenset[str] = frozenset({
    "CAST", "DSCR", "EDUC", "IDNO", "NATI", "NCHI", "NMR",
    "OCCU", "PROP", "RELI", "RESI", "SSN", "TITL", "FACT",
})

# Event type labels
EVENT_TYPE_MAP: Dict[str, str] = {
    "BIRT": "Birth",
    "CHR": "Christening",
    "CHRA": "Adult Christening",
    "BAPM": "Baptism",
    "BARM": "Bar Mitzvah",
    "BASM": "Bas Mitzvah",
    "BLES": "Blessing",
    "ADOP": "Adoption",
    "CONF": "Confirmation",
    "FCOM": "First Communion",
    "GRAD": "Graduation",
    "ORDN": "Ordination",
    "EMIG": "Emigration",
    "IMMI": "Immigration",
    "NATU": "Naturalization",
    "CENS": "Census",
    "PROB": "Probate",
    "WILL": "Will",
    "RETI": "Retirement",
    "DEAT": "Death",
    "BURI": "Burial",
    "CREM": "Cremation",
    "EVEN": "Event",
    "MARR": "Marriage",
    "MARB": "Marriage Bann",
    "MARC": "Marriage Contract",
    "MARL": "Marriage License",
    "MARS": "Marriage Settlement",
    "ENGA": "Engagement",
    "ANUL": "Annulment",
    "DIV": "Divorce",
    "DIVF": "Divorce Filed",
    "CAST": "Caste",
    "DSCR": "Physical Description",
    "EDUC": "Education",
    "IDNO": "Identification Number",
    "NATI": "Nationality",
    "NCHI": "Children Count",
    "NMR": "Marriage Count",
    "OCCU": "Occupation",
    "PROP": "Property",
    "RELI": "Religion",
    "RESI": "Residence",
    "SSN": "Social Security Number",
    "TITL": "Nobility Title",
    "FACT": "Fact",
}


# ---------------------------------------------------------------------------
# Tag Helpers
# ---------------------------------------------------------------------------

def is_event_tag(tag: str) -> bool:
    """Return True if the tag is any known individual or family event tag."""
    if not tag:
        return False
    t = tag.upper()
    return t in INDIVIDUAL_EVENT_TAGS or t in FAMILY_EVENT_TAGS


def is_family_event_tag(tag: str) -> bool:
    return tag.upper() in FAMILY_EVENT_TAGS if tag else False


def is_individual_event_tag(tag: str) -> bool:
    return tag.upper() in INDIVIDUAL_EVENT_TAGS if tag else False


def is_individual_attribute_tag(tag: str) -> bool:
    return tag.upper() in INDIVIDUAL_ATTRIBUTE_TAGS if tag else False


def event_label(tag: str) -> str:
    """Human readable label, falling back to the raw tag."""
    if not tag:
        return ""
    return EVENT_TYPE_MAP.get(tag.upper(), tag)
