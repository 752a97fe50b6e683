"""
Mapping of Daylite contact and project records to planning entities.
"""

import json
import re
from collections.abc import Callable, Iterable
from typing import Any

from core.config import (
    ABSENCE_CALENDAR_LABELS,
    EXTRA_FIELD_CALENDAR_MARKER,
    PRIMARY_CALENDAR_LABELS,
    UNKNOWN_LOCATION,
    UNKNOWN_STATUS,
)
from models.planning import Employee, Project
from models.records import ContactRecord, ProjectRecord

OBJECT_ID_PATTERN = re.compile(r"/(\d+)$")

CalendarLookup = Callable[[ContactRecord, tuple[str, ...]], str | None]


def extract_object_id(reference: str) -> str:
    """'/v1/contacts/1000' -> '1000'; references without a numeric tail are kept as-is."""
    match = OBJECT_ID_PATTERN.search(reference)
    return match.group(1) if match else reference


def _clean_parts(parts: Iterable[Any]) -> list[str]:
    """Trimmed, non-empty string parts in their original order."""
    cleaned = (part.strip() if isinstance(part, str) else "" for part in parts)
    return [part for part in cleaned if part]


# =============================================================================
# CONTACT FIELDS
# =============================================================================


def contact_display_name(record: ContactRecord) -> str:
    """Name as Daylite shows it: nickname first, then full_name."""
    for key in ("nickname", "full_name"):
        value = record.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def contact_name(record: ContactRecord) -> str:
    """
    Build the employee name from first/middle/last name parts.

    Falls back to nickname/full_name for contacts stored in that schema, and
    to the record reference when the contact carries no name at all.
    """
    parts = _clean_parts(
        [record.get("first_name"), record.get("middle_name"), record.get("last_name")]
    )
    if parts:
        return " ".join(parts)
    return contact_display_name(record) or record["self"]


def primary_address(record: ContactRecord) -> dict | None:
    """First address entry, unchanged."""
    addresses = record.get("addresses")
    if isinstance(addresses, list) and addresses and isinstance(addresses[0], dict):
        return addresses[0]
    return None


def home_location(record: ContactRecord) -> str:
    address = primary_address(record)
    if address is None:
        return UNKNOWN_LOCATION
    parts = _clean_parts([address.get("city"), address.get("state"), address.get("country")])
    return ", ".join(parts) if parts else UNKNOWN_LOCATION


# =============================================================================
# CALENDAR URL RESOLUTION
# =============================================================================


def parse_extra_fields(extra_fields: Any) -> dict[str, dict]:
    """
    Normalize `extra_fields` to a {key: {"value": str}} mapping.

    Daylite delivers it either as an object or as a JSON string. Anything that
    does not parse, or does not have that shape, becomes an empty mapping.
    """
    if not extra_fields:
        return {}

    if isinstance(extra_fields, str):
        try:
            extra_fields = json.loads(extra_fields)
        except (ValueError, RecursionError):
            # JSONDecodeError, oversized integer literals, too deeply nested
            return {}

    if not isinstance(extra_fields, dict):
        return {}

    for field_value in extra_fields.values():
        if not isinstance(field_value, dict):
            return {}
        if field_value.get("value") is not None and not isinstance(field_value["value"], str):
            return {}

    return extra_fields


def _label_matches(label: str, vocabulary: tuple[str, ...]) -> bool:
    normalized = label.lower()
    return any(term in normalized for term in vocabulary)


def find_calendar_url_in_urls(record: ContactRecord, vocabulary: tuple[str, ...]) -> str | None:
    """First `urls[]` entry whose label mentions a vocabulary term."""
    urls = record.get("urls")
    if not isinstance(urls, list):
        return None

    for candidate in urls:
        if not isinstance(candidate, dict):
            continue
        label = candidate.get("label")
        url = candidate.get("url")
        if isinstance(label, str) and isinstance(url, str) and _label_matches(label, vocabulary):
            return url
    return None


def find_calendar_url_in_extra_fields(
    record: ContactRecord, vocabulary: tuple[str, ...]
) -> str | None:
    """First extra field whose key mentions 'ical' and a vocabulary term."""
    for key, field_value in parse_extra_fields(record.get("extra_fields")).items():
        normalized = key.lower()
        if EXTRA_FIELD_CALENDAR_MARKER in normalized and _label_matches(normalized, vocabulary):
            return field_value.get("value")
    return None


# Tried in order; the first lookup returning a value wins
CALENDAR_LOOKUPS: tuple[CalendarLookup, ...] = (
    find_calendar_url_in_urls,
    find_calendar_url_in_extra_fields,
)


def find_calendar_url(
    record: ContactRecord,
    vocabulary: tuple[str, ...],
    lookups: tuple[CalendarLookup, ...] = CALENDAR_LOOKUPS,
) -> str:
    """Resolve a calendar URL for a contact. Empty string means none configured."""
    for lookup in lookups:
        url = lookup(record, vocabulary)
        if url is not None:
            return url
    return ""


def primary_calendar_url(record: ContactRecord) -> str:
    return find_calendar_url(record, PRIMARY_CALENDAR_LABELS)


def absence_calendar_url(record: ContactRecord) -> str:
    return find_calendar_url(record, ABSENCE_CALENDAR_LABELS)


# =============================================================================
# MAPPERS
# =============================================================================


def map_contact_to_employee(record: ContactRecord) -> Employee:
    """Map a validated contact record to an Employee."""
    keywords = record.get("keywords")
    return Employee(
        id=extract_object_id(record["self"]),
        external_reference=record["self"],
        name=contact_name(record),
        skills=tuple(k for k in keywords if isinstance(k, str)) if isinstance(keywords, list) else (),
        home_location=home_location(record),
        primary_calendar_url=primary_calendar_url(record),
        absence_calendar_url=absence_calendar_url(record),
        active=True,
    )


def map_project_record_to_project(record: ProjectRecord) -> Project:
    """Map a validated project record to a Project."""
    return Project(
        id=extract_object_id(record["self"]),
        external_reference=record["self"],
        name=record["name"],
        status=record.get("status", UNKNOWN_STATUS),
    )


def filter_active_contacts(records: Iterable[ContactRecord], keyword: str) -> list[ContactRecord]:
    """Keep contacts tagged with `keyword` (case-insensitive). An empty keyword keeps all."""
    records = list(records)
    if not keyword:
        return records

    wanted = keyword.strip().lower()
    active = []
    for record in records:
        keywords = record.get("keywords")
        if not isinstance(keywords, list):
            continue
        if any(isinstance(k, str) and k.strip().lower() == wanted for k in keywords):
            active.append(record)
    return active
