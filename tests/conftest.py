"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src and the fixture generators to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from services.planning import build_snapshot  # noqa: E402

WEEK_START = date(2026, 1, 26)  # Monday
TODAY = date(2026, 1, 28)  # Wednesday of that week


@pytest.fixture
def week_start():
    return WEEK_START


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def sample_contact():
    """Daylite contact with split name parts and iCal urls."""
    return {
        "self": "/v1/contacts/1000",
        "first_name": "Thomas",
        "middle_name": " ",
        "last_name": "Bartelmess",
        "keywords": ["Monteur", "Elektrik"],
        "addresses": [
            {"label": "Home", "street": "Musterstraße 1", "city": "Köln", "postal_code": "50667", "country": "Deutschland"}
        ],
        "urls": [
            {"label": "Website", "url": "https://example.com"},
            {"label": "Einsatz iCal", "url": "https://example.com/primary.ics"},
            {"label": "Abwesenheit iCal", "url": "https://example.com/absence.ics"},
        ],
    }


@pytest.fixture
def sample_project():
    return {"self": "/v1/projects/7000", "name": "Sell Sea Shells", "status": "in_progress"}


@pytest.fixture
def sample_assignment():
    return {
        "id": "asg-1",
        "employeeId": "/v1/contacts/1000",
        "projectId": "/v1/projects/7000",
        "period": {"startDate": "2026-01-26", "endDate": "2026-01-28"},
        "source": "daylite",
        "syncStatus": "synced",
    }


@pytest.fixture
def planning_payload():
    """
    Small planning week (2026-01-26 .. 2026-01-30).

    Jan Becker (1006) works on Altsystem on Tue, Wed and Fri, and on
    Infrastruktur on Mon and Wed-Fri. Max Müller is not tagged 'Monteur'.
    """
    return {
        "contacts": [
            {
                "self": "/v1/contacts/1001",
                "full_name": "Anna Schmidt",
                "keywords": ["Monteur", "Backend"],
                "addresses": [{"city": "Köln", "country": "Deutschland"}],
                "urls": [
                    {"label": "Einsatz iCal", "url": "https://calendar.example.com/anna/primary.ics"},
                    {"label": "Abwesenheit iCal", "url": "https://calendar.example.com/anna/absence.ics"},
                ],
            },
            {
                "self": "/v1/contacts/1002",
                "full_name": "Max Müller",
                "keywords": ["Projektleitung"],
            },
            {
                "self": "/v1/contacts/1004",
                "full_name": "Tom Fischer",
                "nickname": "Tom",
                "keywords": ["Monteur", "Datenbank"],
                "addresses": [{"city": "Leverkusen", "country": "Deutschland"}],
            },
            {
                "self": "/v1/contacts/1006",
                "first_name": "Jan",
                "last_name": "Becker",
                "keywords": ["monteur", "DevOps"],
            },
            {"self": 1007, "full_name": "Not A Contact"},
        ],
        "projects": [
            {"self": "/v1/projects/3001", "name": "Kundenportal", "status": "in_progress"},
            {"self": "/v1/projects/3004", "name": "Altsystem", "status": "in_progress"},
            {"self": "/v1/projects/3005", "name": "Infrastruktur", "status": "new"},
        ],
        "assignments": [
            {
                "id": "asg-dangling",
                "employeeId": "1001",
                "projectId": "/v1/projects/9999",
                "period": {"startDate": "2026-01-30", "endDate": "2026-01-30"},
                "source": "manual",
                "syncStatus": "pending",
            },
            {
                "id": "asg-invalid",
                "employeeId": "1001",
                "projectId": "/v1/projects/3001",
                "period": {"startDate": "2026-01-26", "endDate": "2026-01-26"},
                "source": "app",
                "syncStatus": "synced",
            },
        ],
        "assignmentTemplates": [
            {
                "id": "asg-1",
                "projectId": "/v1/projects/3001",
                "days": ["2026-01-26", "2026-01-27", "2026-01-28"],
                "employeeIds": ["/v1/contacts/1001", "/v1/contacts/1004"],
                "source": "daylite",
                "syncStatus": "synced",
            },
            {
                "id": "asg-4",
                "projectId": "/v1/projects/3004",
                "days": ["2026-01-27", "2026-01-28", "2026-01-30"],
                "employeeIds": ["/v1/contacts/1004", "/v1/contacts/1006"],
                "source": "daylite",
                "syncStatus": "synced",
            },
            {
                "id": "asg-7",
                "projectId": "/v1/projects/3005",
                "days": ["2026-01-26", "2026-01-28", "2026-01-30"],
                "employeeIds": ["/v1/contacts/1006"],
                "source": "manual",
                "syncStatus": "synced",
            },
            {
                "id": "asg-12",
                "projectId": "/v1/projects/3005",
                "days": ["2026-01-28", "2026-01-29"],
                "employeeIds": ["/v1/contacts/1006", "/v1/contacts/1004"],
                "source": "ical",
                "syncStatus": "pending",
            },
        ],
        "syncIssues": [
            {
                "source": "daylite",
                "code": "RATE_LIMITED",
                "message": "Zu viele Anfragen",
                "timestamp": "2026-01-26T08:00:00Z",
            },
            {"source": "outlook", "code": "X", "message": "unknown source", "timestamp": "now"},
        ],
    }


@pytest.fixture
def planning_snapshot(planning_payload):
    return build_snapshot(planning_payload, active_keyword="Monteur")
