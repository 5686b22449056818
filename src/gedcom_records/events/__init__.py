from __future__ import annotations

from .event import (
    EVENT_TYPE_MAP,
    FAMILY_EVENT_TAGS,
    INDIVIDUAL_ATTRIBUTE_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    event_label,
    is_event_tag,
    is_family_event_tag,
    is_individual_attribute_tag,
    is_individual_event_tag,
)

__all__ = [
    "EVENT_TYPE_MAP",
    "FAMILY_EVENT_TAGS",
    "INDIVIDUAL_ATTRIBUTE_TAGS",
    "INDIVIDUAL_EVENT_TAGS",
    "event_label",
    "is_event_tag",
    "is_family_event_tag",
    "is_individual_attribute_tag",
    "is_individual_event_tag",
]
